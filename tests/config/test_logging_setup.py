# topmark:header:start
#
#   project      : AdventRun
#   file         : test_logging_setup.py
#   file_relpath : tests/config/test_logging_setup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for logging configuration (TRACE level and environment override)."""

from __future__ import annotations

import logging

import pytest

from adventrun.config.logging import (
    TRACE_LEVEL,
    AdventRunLogger,
    ChalkFormatter,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [("trace", TRACE_LEVEL), ("DEBUG", logging.DEBUG), (" warn ", logging.WARNING), ("20", 20)],
)
def test_env_log_level(monkeypatch: pytest.MonkeyPatch, value: str, expected: int) -> None:
    monkeypatch.setenv("ADVENTRUN_LOG_LEVEL", value)
    assert resolve_env_log_level() == expected


@pytest.mark.parametrize("value", ["", "loud"])
def test_env_log_level_ignores_unknown(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("ADVENTRUN_LOG_LEVEL", value)
    assert resolve_env_log_level() is None


def test_loggers_support_trace(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("adventrun.tests")
    assert isinstance(logger, AdventRunLogger)
    with caplog.at_level(TRACE_LEVEL):
        logger.trace("reading %d bytes", 12)
    assert "reading 12 bytes" in caplog.text
    assert caplog.records[-1].levelname == "TRACE"


def test_setup_logging_defaults_to_critical() -> None:
    try:
        setup_logging()
        root = logging.getLogger()
        assert root.level == logging.CRITICAL
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, ChalkFormatter)
    finally:
        setup_logging(level=TRACE_LEVEL)
