"""Tests for database setup and session handling."""

import asyncio
import logging

import pytest

from devrank.config import Config
from devrank.data_models.listing import OrderSpec, PaginationSpec
from devrank.database.database import Database
from devrank.services.developers import DeveloperService
from devrank.utils.logger import setup_logger
from helpers import seed_developers


def test_service_built_before_initialize_uses_live_sessions(database_url):
    async def scenario():
        database = Database(database_url)
        service = DeveloperService(database)
        await database.initialize()
        try:
            await seed_developers(service, [("ada", 3), ("bob", 5)])
            listed = await service.list_developers(OrderSpec("score", "desc"), PaginationSpec(limit=5))
            return [d.username for d in listed], await service.rank_of_developer(listed[1])
        finally:
            await database.close()

    assert asyncio.run(scenario()) == (["bob", "ada"], 2)


def test_sessions_before_initialize_raise(database_url):
    async def scenario():
        service = DeveloperService(Database(database_url))
        with pytest.raises(RuntimeError):
            await service.search_developers("ada", 5)

    asyncio.run(scenario())


def test_initialize_validates_configuration(database_url, monkeypatch):
    monkeypatch.setattr(Config, "DEFAULT_PAGE_SIZE", -1)

    async def scenario():
        database = Database(database_url)
        with pytest.raises(ValueError):
            await database.initialize()
        return database.engine

    assert asyncio.run(scenario()) is None


def test_logger_writes_daily_file_when_log_dir_set(tmp_path, monkeypatch):
    monkeypatch.setattr(Config, "LOG_DIR", str(tmp_path / "logs"))
    logger = setup_logger("devrank.tests.file_logging")
    try:
        logger.info("ranked 3 developers")
        for handler in logger.handlers:
            handler.flush()
        log_files = list((tmp_path / "logs").glob("devrank_*.log"))
        assert len(log_files) == 1
        assert "ranked 3 developers" in log_files[0].read_text(encoding="utf-8")
        assert setup_logger("devrank.tests.file_logging") is logger
        assert len(logger.handlers) == 2
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


def test_logger_skips_file_when_log_dir_empty(monkeypatch):
    monkeypatch.setattr(Config, "LOG_DIR", "")
    logger = setup_logger("devrank.tests.console_only")
    try:
        assert [type(h) for h in logger.handlers] == [logging.StreamHandler]
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
