"""Tests de la configuración de logging de la CLI."""

from __future__ import annotations

import logging
import sys

import pytest

from questionit.core.logging import configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_logs_go_to_stderr(restore_root_logger):
    configure_logging("debug")

    (handler,) = restore_root_logger.handlers
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stderr
    assert restore_root_logger.level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING


def test_unknown_level_falls_back_to_warning(restore_root_logger):
    configure_logging("chatty")

    assert restore_root_logger.level == logging.WARNING
