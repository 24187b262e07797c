"""Shared test fixtures."""

import asyncio
import os

# Keep test runs from writing log files; must happen before devrank.config loads
os.environ["LOG_DIR"] = ""

import pytest

from devrank.database.database import Database
from devrank.services.developers import DeveloperService


@pytest.fixture
def database_url(tmp_path):
    """A throwaway SQLite database file per test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'devrank_test.db'}"


@pytest.fixture
def run(database_url):
    """
    Run an async scenario against a freshly initialized database.

    The scenario receives a DeveloperService; the engine is created and
    disposed inside the same event loop.
    """
    def runner(scenario):
        async def _run():
            database = Database(database_url)
            await database.initialize()
            try:
                return await scenario(DeveloperService(database))
            finally:
                await database.close()
        return asyncio.run(_run())
    return runner
