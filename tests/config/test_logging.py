"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from sixtydays.config.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    ours = logging.getLogger("sixtydays")
    our_level = ours.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    ours.setLevel(our_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("sixtydays").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_default_is_warning(self) -> None:
        configure_logging()
        assert logging.getLogger("sixtydays").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("sixtydays.test").warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "sixtydays.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("sixtydays.services.cards").debug("Created card 1")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Created card 1"
        assert parsed["level"] == "debug"

    def test_third_party_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("httpx").debug("request noise")
        logging.getLogger("uvicorn").info("server noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
