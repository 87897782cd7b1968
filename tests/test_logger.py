"""Tests for process logging setup."""

from __future__ import annotations

import logging

import logger as logger_module


def test_configure_logging_installs_one_handler() -> None:
    root = logging.getLogger()
    before = list(root.handlers)
    previous_level = root.level
    try:
        logger_module.configure_logging(logging.DEBUG)
        logger_module.configure_logging(logging.DEBUG)
        added = [handler for handler in root.handlers if handler not in before]
        assert len(added) == 1
        assert root.level == logging.DEBUG
    finally:
        for handler in root.handlers[:]:
            if handler not in before:
                root.removeHandler(handler)
        root.setLevel(previous_level)
        logger_module._configured = False


def test_get_logger_returns_named_logger() -> None:
    assert logger_module.get_logger("schema").name == "schema"
