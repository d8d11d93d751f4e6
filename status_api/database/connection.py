"""
Database connection and session management
"""

import threading
from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool
import structlog
from status_api.core.config import settings

logger = structlog.get_logger(__name__)

# Create base class for models
Base = declarative_base()

def create_db_engine(
    database_url: str,
    pool_size: int = 5,
    max_overflow: int = 0,
    pool_timeout: int = 30,
    connect_timeout: int = 10,
    statement_timeout_ms: int = 5000,
    echo: bool = False,
) -> Engine:
    """Create an engine with a bounded connection pool"""

    if database_url.startswith("sqlite"):
        # Single shared connection, usable from the request thread pool
        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=echo,
        )

        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_engine(
        database_url,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_timeout=pool_timeout,
        pool_pre_ping=True,
        pool_recycle=300,
        connect_args={
            "connect_timeout": connect_timeout,
            "options": f"-c statement_timeout={statement_timeout_ms}",
        },
        echo=echo,
    )

class Database:
    """Process-wide owner of the engine and its connection pool.

    The engine is created on first use. Creation is guarded by a lock so that
    concurrent first requests still produce exactly one pool. ``dispose()``
    closes the pool at shutdown; a later use creates a fresh one.
    """

    def __init__(self, database_url: str, **engine_options):
        self.database_url = database_url
        self.engine_options = engine_options
        self._engine: Optional[Engine] = None
        self._session_factory = sessionmaker(autoflush=False)
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, config) -> "Database":
        return cls(
            config.database_url,
            pool_size=config.db_pool_size,
            max_overflow=config.db_max_overflow,
            pool_timeout=config.db_pool_timeout,
            connect_timeout=config.db_connect_timeout,
            statement_timeout_ms=config.db_statement_timeout_ms,
            echo=config.debug,
        )

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            with self._lock:
                if self._engine is None:
                    self._engine = create_db_engine(self.database_url, **self.engine_options)
                    logger.info("Database engine created", pool_size=self.engine_options.get("pool_size"))
        return self._engine

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None

    def session(self) -> Session:
        """Open a new session bound to the shared engine"""
        return self._session_factory(bind=self.engine)

    def create_all(self):
        Base.metadata.create_all(bind=self.engine)

    def dispose(self):
        with self._lock:
            if self._engine is not None:
                self._engine.dispose()
                self._engine = None
                logger.info("Database engine disposed")

# Global database instance, engine created lazily
database = Database.from_settings(settings)

def init_database(db: Database = database):
    """Initialize database tables"""
    try:
        # Import all models to ensure they are registered
        from status_api.models import device, status_reading  # noqa

        # Create all tables
        db.create_all()
        logger.info("Database tables created successfully")
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise
