"""Shared pytest fixtures for the compio test suite."""

from typing import Iterator
import pytest
from click.testing import CliRunner
from compio.lib.log import app_logger


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect messages sent through the application logger."""
    messages: list[str] = []
    handler_id: int = app_logger.add(messages.append, format="{message}")
    yield messages
    app_logger.remove(handler_id)
