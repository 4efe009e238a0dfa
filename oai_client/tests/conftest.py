"""Pytest configuration for the client test suite.

Every test starts from freshly built configuration defaults with the
``OPENAI_*`` environment variables removed, and the defaults are rebuilt again
on teardown so a test that calls ``configure()`` cannot bleed into the next.
"""

from __future__ import annotations

import io
import logging
from typing import Iterator

import pytest

from oai_client.base.logging import BASE_LOGGER_NAME, get_logger
from oai_client.config import reset_configuration
from oai_client.config.env import CONFIG_FILE_ENV, ENV_MAP


@pytest.fixture(autouse=True)
def clean_configuration(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear env overrides and restore default configuration around each test."""

    for name in (*ENV_MAP.values(), CONFIG_FILE_ENV):
        monkeypatch.delenv(name, raising=False)
    reset_configuration()
    yield
    monkeypatch.undo()
    reset_configuration()


@pytest.fixture()
def log_stream() -> Iterator[io.StringIO]:
    """Capture raw messages of the shared client logger at DEBUG level.

    The shared logger does not propagate to the root logger, so ``caplog``
    cannot see it; a dedicated handler is attached instead.
    """

    base = get_logger(BASE_LOGGER_NAME)
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.setLevel(logging.DEBUG)
    previous_level = base.level
    base.addHandler(handler)
    base.setLevel(logging.DEBUG)
    yield stream
    base.removeHandler(handler)
    base.setLevel(previous_level)
