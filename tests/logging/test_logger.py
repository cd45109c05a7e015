import json
import sys
import logging

import pytest
from opentelemetry import trace
from opentelemetry.trace import NonRecordingSpan, SpanContext, TraceFlags

from sqltree.logging import ContextFilter, CustomJsonFormatter, set_logging_context, setup_logging
from sqltree.settings import reload_settings


def _record(msg="hello %s", args=("world",), **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="sqltree.nodes",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=args,
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_sqltree_logger():
    logger = logging.getLogger("sqltree")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
    set_logging_context(environment=None, extra=None)


class TestCustomJsonFormatter:

    def test_basic_fields(self):
        payload = json.loads(CustomJsonFormatter().format(_record()))
        assert payload["message"] == "hello world"
        assert payload["level"] == "WARNING"
        assert payload["logger"] == "sqltree.nodes"
        assert "timestamp" in payload
        assert "trace_id" not in payload

    def test_extra_attributes_are_included(self):
        record = _record(error_code="SERIALIZATION_001", details={"type": "Bogus"})
        payload = json.loads(CustomJsonFormatter().format(record))
        assert payload["error_code"] == "SERIALIZATION_001"
        assert payload["details"] == {"type": "Bogus"}
        assert "lineno" not in payload

    def test_trace_correlation(self):
        context = SpanContext(
            trace_id=0x1234,
            span_id=0x5678,
            is_remote=False,
            trace_flags=TraceFlags(TraceFlags.SAMPLED),
        )
        with trace.use_span(NonRecordingSpan(context)):
            payload = json.loads(CustomJsonFormatter().format(_record()))
        assert payload["trace_id"] == format(0x1234, "032x")
        assert payload["span_id"] == format(0x5678, "016x")

    def test_exception_info(self):
        try:
            raise ValueError("kaput")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()
        payload = json.loads(CustomJsonFormatter().format(record))
        assert "ValueError: kaput" in payload["exception"]


class TestSetupLogging:

    def test_configures_package_logger(self, restore_sqltree_logger):
        setup_logging("debug")
        logger = restore_sqltree_logger
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        handler = logger.handlers[0]
        assert isinstance(handler.formatter, CustomJsonFormatter)
        assert any(isinstance(f, ContextFilter) for f in handler.filters)

    def test_level_defaults_to_settings(self, monkeypatch, restore_sqltree_logger):
        monkeypatch.setenv("SQLTREE_LOG_LEVEL", "ERROR")
        reload_settings()
        setup_logging()
        assert restore_sqltree_logger.level == logging.ERROR

    def test_app_env_is_attached_to_records(self, monkeypatch, restore_sqltree_logger):
        monkeypatch.setenv("SQLTREE_APP_ENV", "qa")
        reload_settings()
        setup_logging("info")

        record = _record()
        restore_sqltree_logger.handlers[0].filter(record)
        payload = json.loads(CustomJsonFormatter().format(record))
        assert payload["environment"] == "qa"
        assert payload["sdk_name"] == "sqltree"
