"""Shared pytest fixtures for dynamo-batch-tool tests."""

import logging

import pytest

from dynamo_batch_tool.batch.core.backoff import reset_config


@pytest.fixture(autouse=True)
def default_backoff_config():
    """Every test starts from, and leaves behind, the default backoff configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """CLI commands reconfigure the root logger; undo that after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sleeps():
    """Recording replacement for time.sleep; tests never actually wait."""
    return []


@pytest.fixture
def sleep(sleeps):
    return sleeps.append
