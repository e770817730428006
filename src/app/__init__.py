"""Products catalog API.

A FastAPI service exposing paginated, soft-deletable product records stored
through SQLModel.
"""

__version__ = "0.1.0"
