"""
Base service class for devrank query services.

Listing, ranking and search are pure reads: every call opens one short-lived
session, runs its query and closes the session again, so no state survives
between calls.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Callable
from sqlalchemy.ext.asyncio import AsyncSession

class BaseService:
    """Base class for read-only services built on a session factory."""
    
    def __init__(self, session_factory: Callable[[], AsyncSession]):
        """
        Args:
            session_factory: Zero-argument callable returning a new AsyncSession,
                normally Database.create_session
        """
        self.session_factory = session_factory
    
    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a read scope; closing the session ends its implicit transaction."""
        async with self.session_factory() as session:
            yield session
