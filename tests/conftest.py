"""Pytest configuration and shared fixtures."""
import io
import logging

import pytest

from csv_stax.infrastructure.stax import DefaultWriterFactory, WriterFactoryRegistry


ENV_VARS = ["CSV_STAX_WRITER_TYPE", "CSV_STAX_LOG_LEVEL", "CSV_STAX_LOG_FILE"]


@pytest.fixture
def sink():
    """Fresh in-memory character sink."""
    buffer = io.StringIO()
    yield buffer
    if not buffer.closed:
        buffer.close()


@pytest.fixture
def factory():
    return DefaultWriterFactory()


@pytest.fixture
def registry():
    """Registry with built-ins only, isolated per test."""
    return WriterFactoryRegistry.with_builtins()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove csv_stax variables; anything set during the test is undone."""
    for name in ENV_VARS:
        # setenv first so teardown also removes values loaded from .env files
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture
def restore_package_logger():
    """Put the csv_stax logger back the way it was."""
    logger = logging.getLogger("csv_stax")
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
