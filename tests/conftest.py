"""Test configuration shared by the whole suite."""

import os

# Configuration is loaded when src.app.runtime.context is first imported
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_FILE", "")

from tests.fixtures import *  # noqa: E402,F401,F403
