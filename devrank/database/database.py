from typing import Optional
from contextlib import asynccontextmanager
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from devrank.config import Config
from devrank.database.models import Base
from devrank.utils.logger import setup_logger


def _unicode_lower(value):
    return value.lower() if value is not None else None


def _register_sqlite_functions(dbapi_connection, connection_record):
    """Replace SQLite's ASCII-only lower() so case-insensitive search folds all letters"""
    dbapi_connection.create_function("lower", 1, _unicode_lower)


class Database:
    def __init__(self, database_url: Optional[str] = None):
        self.logger = setup_logger(__name__)
        self.database_url = Config.get_async_database_url(database_url)
        self.engine = None
        self.async_session = None

    async def initialize(self):
        """Validate configuration, open the engine and create tables"""
        Config.validate()
        self.logger.info("Initializing database...")

        self.engine = create_async_engine(
            self.database_url,
            echo=Config.DEBUG,
        )

        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine.sync_engine, "connect", _register_sqlite_functions)

        self.async_session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False
        )

        # Create all tables
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        self.logger.info("Database initialized successfully")

    def create_session(self) -> AsyncSession:
        """
        Open a new session from the current session factory.

        Services hold this bound method rather than the factory itself, so they
        may be built before initialize() has run.
        """
        if self.async_session is None:
            raise RuntimeError("Database.initialize() must be awaited before opening sessions")
        return self.async_session()

    @asynccontextmanager
    async def get_session(self):
        """Get a database session"""
        async with self.create_session() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    @asynccontextmanager
    async def transaction(self):
        """
        Create a transaction boundary for atomic operations.

        All operations within the context are committed together on success,
        or rolled back together on failure. Exceptions must be allowed to
        propagate out of the context for rollback to occur.

        Usage:
            async with db.transaction() as session:
                session.add(location)
                await developer_store.create(attributes, session=session)
        """
        async with self.create_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def close(self):
        """Close the database connection"""
        if self.engine:
            await self.engine.dispose()
            self.logger.info("Database connection closed")
