"""Database initialization script."""

from src.app.core.services.database.db_manage import DbManageService
from src.app.core.services.database.db_session import DbSessionService


def init_db() -> None:
    """Create all database tables."""
    database_service = DbSessionService()
    database_service.open()
    try:
        DbManageService(database_service.engine).create_all()
    finally:
        database_service.close()


if __name__ == "__main__":
    init_db()
