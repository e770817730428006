"""Database engine lifecycle and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import Engine, StaticPool, text
from sqlalchemy.engine import make_url
from sqlmodel import Session, create_engine

from src.app.runtime.config.config_data import ConfigData
from src.app.runtime.context import get_config


class DbSessionService:
    """Owns the shared engine.

    The engine is created by ``open()`` and disposed by ``close()``; both are
    called by the process entry point, never by the services that use sessions.
    """

    def __init__(self, config: ConfigData | None = None):
        self._config = config or get_config()
        self._engine: Engine | None = None

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Database engine is not initialized. Call open() on startup.")
        return self._engine

    def open(self) -> None:
        """Create the engine. Calling it again while open is a no-op."""
        if self._engine is not None:
            return

        db_config = self._config.database
        logger.info(
            "Configuring database engine for environment: {}", self._config.app.environment
        )
        engine_kwargs = self._get_engine_kwargs()
        logger.info(
            "Initializing database engine for {} with args {}",
            make_url(db_config.url).render_as_string(hide_password=True),
            engine_kwargs,
        )
        self._engine = create_engine(db_config.url, **engine_kwargs)

    def close(self) -> None:
        """Dispose the engine and its pooled connections."""
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        logger.info("Database engine disposed")

    def _get_engine_kwargs(self) -> dict[str, Any]:
        db_config = self._config.database
        engine_kwargs: dict[str, Any] = {
            "echo": db_config.echo,
            "echo_pool": False,
            "connect_args": self._get_connect_args(),
        }

        if db_config.backend == "sqlite":
            if make_url(db_config.url).database in (None, "", ":memory:"):
                # One shared connection, otherwise every checkout sees an empty database
                engine_kwargs["poolclass"] = StaticPool
            return engine_kwargs

        engine_kwargs.update(
            {
                "pool_size": db_config.pool_size,
                "max_overflow": db_config.max_overflow,
                "pool_timeout": db_config.pool_timeout,
                "pool_recycle": db_config.pool_recycle,
                "pool_pre_ping": True,  # Validate connections before use
            }
        )
        return engine_kwargs

    def _get_connect_args(self) -> dict:
        """Get database-specific connection arguments."""
        connect_args = {}
        backend = self._config.database.backend

        if backend == "postgresql":
            connect_args.update(
                {
                    "application_name": f"{self._config.app.environment}_products_api",
                    "connect_timeout": 30,
                }
            )

        elif backend == "sqlite":
            connect_args.update(
                {
                    "check_same_thread": False,
                    "timeout": 20,  # Lock timeout
                }
            )

            if self._config.app.environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )

        return connect_args

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self.engine,
            expire_on_commit=False,  # Prevent lazy loading issues
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Yield a session that commits on success and rolls back on error."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(
                "Database transaction failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error(
                "Database health check failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return False

    def get_pool_status(self) -> dict:
        """Get current connection pool status for monitoring."""
        pool = self.engine.pool
        return {
            "size": getattr(pool, "size", lambda: 0)(),
            "checked_in": getattr(pool, "checkedin", lambda: 0)(),
            "checked_out": getattr(pool, "checkedout", lambda: 0)(),
            "overflow": getattr(pool, "overflow", lambda: 0)(),
        }
