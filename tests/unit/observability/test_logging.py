"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from typing import Any

import pytest
import structlog
from structlog.testing import capture_logs

from mp_middleware.application.pipeline import Dispatcher
from mp_middleware.kernel.errors import ContractViolationError
from mp_middleware.observability.logging import JsonLoggerFactory, Logger, get_logger
from mp_middleware.testing.fakes import FakeRequest, FakeResponse


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


# ---------------------------------------------------------------------------
# get_logger
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_emits_structured_events(self) -> None:
        with capture_logs() as logs:
            get_logger("test.logger").info("hello", answer=42)
        assert logs == [{"event": "hello", "answer": 42, "log_level": "info"}]

    def test_initial_values_are_bound(self) -> None:
        with capture_logs() as logs:
            get_logger("test.logger", request_id="r-1").warning("bound")
        assert logs[0]["request_id"] == "r-1"

    def test_level_filters_lower_calls(self) -> None:
        with capture_logs() as logs:
            logger = get_logger("test.logger", level=logging.WARNING, component="x")
            logger.debug("hidden")
            logger.info("hidden")
            logger.warning("shown")
        assert logs == [{"event": "shown", "component": "x", "log_level": "warning"}]

    def test_satisfies_logger_protocol(self) -> None:
        logger: Logger = get_logger(__name__)
        for level in ("debug", "info", "warning", "error", "critical"):
            assert callable(getattr(logger, level))


# ---------------------------------------------------------------------------
# Dispatcher default logger
# ---------------------------------------------------------------------------


class TestDispatcherLogging:
    def test_contract_violation_logged(self) -> None:
        with capture_logs() as logs:
            dispatcher = Dispatcher()
            with pytest.raises(ContractViolationError):
                dispatcher.dispatch(FakeRequest(), FakeResponse(), {"bad": lambda *_: None})
        violations = [e for e in logs if e["event"] == "middleware.contract_violation"]
        assert violations == [
            {
                "event": "middleware.contract_violation",
                "key": "bad",
                "result_type": "NoneType",
                "log_level": "warning",
            }
        ]


# ---------------------------------------------------------------------------
# JsonLoggerFactory
# ---------------------------------------------------------------------------


class TestJsonLoggerFactory:
    def test_configure_sets_root_level(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        assert logging.getLogger().level == logging.WARNING
        assert len(logging.getLogger().handlers) == 1

    def test_renders_json_lines(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure(level=logging.DEBUG)
        handler = logging.getLogger().handlers[0]
        records: list[str] = []

        class _Capture(logging.Handler):
            def emit(self, record: logging.LogRecord) -> None:
                records.append(handler.format(record))

        logging.getLogger().addHandler(_Capture())
        get_logger("json.test").info("middleware.step", key="auth")

        payload: dict[str, Any] = json.loads(records[-1])
        assert payload["event"] == "middleware.step"
        assert payload["key"] == "auth"
        assert payload["level"] == "info"
        assert payload["logger"] == "json.test"
        assert "timestamp" in payload


class TestPublicReExports:
    def test_all_symbols_importable(self) -> None:
        import importlib

        mod = importlib.import_module("mp_middleware.observability.logging")
        for name in mod.__all__:
            assert hasattr(mod, name), f"{name!r} missing"
