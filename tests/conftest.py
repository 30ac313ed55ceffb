"""Shared pytest fixtures and configuration for the humanrepr test suite.

Guidelines
----------
* Core tests are pure function calls without I/O or mocking.
* CLI tests call ``main(argv)`` directly and read captured streams.
* Logging state touched by ``main`` is restored after every test.
"""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    package_logger = logging.getLogger("humanrepr")
    package_level = package_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    package_logger.setLevel(package_level)
