"""
Tests for logging configuration.

Tests the centralized logging setup including:
- Log level resolution
- Standard library logging interception
- Third-party logger configuration
- JSON record serialization
- The injectable application logger
"""

import importlib
import json
import logging

import pytest


class TestInterceptHandler:
    """Tests for InterceptHandler class."""

    def test_intercept_handler_is_logging_handler(self):
        from core.logger import InterceptHandler

        handler = InterceptHandler()
        assert isinstance(handler, logging.Handler)

    def test_intercept_handler_emit_routes_to_loguru(self):
        """Test that emit forwards stdlib records to Loguru sinks."""
        from core.logger import InterceptHandler, logger

        messages = []
        sink_id = logger.add(lambda message: messages.append(message), level="INFO")
        try:
            record = logging.LogRecord(
                name="test",
                level=logging.INFO,
                pathname="test.py",
                lineno=1,
                msg="Test message %s",
                args=("routed",),
                exc_info=None,
            )
            InterceptHandler().emit(record)
        finally:
            logger.remove(sink_id)

        assert any("Test message routed" in str(m) for m in messages)


class TestConfigureThirdPartyLoggers:
    """Tests for configure_third_party_loggers function."""

    def test_configures_httpx_logger(self):
        from core.logger import configure_third_party_loggers

        configure_third_party_loggers()

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_configures_uvicorn_loggers(self):
        from core.logger import configure_third_party_loggers

        configure_third_party_loggers()

        assert logging.getLogger("uvicorn.access").level == logging.INFO


class TestInterceptStandardLogging:
    def test_intercept_standard_logging(self):
        from core.logger import intercept_standard_logging

        intercept_standard_logging()

        handler_types = [type(h).__name__ for h in logging.getLogger().handlers]
        assert "InterceptHandler" in handler_types


class TestResolveLogLevel:
    @pytest.mark.parametrize(
        "log_level,debug,expected",
        [
            ("", False, "INFO"),
            ("", True, "DEBUG"),
            ("warning", True, "WARNING"),
            ("INVALID", False, "INFO"),
        ],
    )
    def test_resolve(self, log_level, debug, expected):
        from core.logger import resolve_log_level

        assert resolve_log_level(log_level, debug) == expected


class TestSetupLogger:
    """Tests for setup_logger function."""

    def test_setup_logger_creates_handlers(self):
        from core.logger import logger, setup_logger

        setup_logger(force=True)

        assert len(logger._core.handlers) >= 1

    def test_setup_logger_idempotent(self):
        """setup_logger doesn't add duplicate handlers."""
        from core.logger import logger, setup_logger

        setup_logger(force=True)
        handlers_count_1 = len(logger._core.handlers)

        setup_logger()
        handlers_count_2 = len(logger._core.handlers)

        assert handlers_count_2 == handlers_count_1
        assert importlib.import_module("core.logger")._configured is True


class TestSerializeLogRecord:
    def test_flat_json_with_extra(self):
        from core.logger import logger, serialize_log_record

        lines = []
        sink_id = logger.add(
            lambda message: lines.append(str(message)),
            format=serialize_log_record,
            level="INFO",
        )
        try:
            logger.bind(episode_id="abc", path=object()).info("Resolved <audio> {url}")
        finally:
            logger.remove(sink_id)

        record = json.loads(lines[0])
        assert record["level"] == "INFO"
        assert record["message"] == "Resolved <audio> {url}"
        assert record["episode_id"] == "abc"
        assert isinstance(record["path"], str)


class TestFormatExceptionShort:
    def test_format_exception_with_context(self):
        from core.logger import format_exception_short

        try:
            raise ValueError("Test error")
        except ValueError as e:
            result = format_exception_short(e, "Test context")

        assert result.startswith("Test context | ValueError: Test error | (")
        assert "test_logging_config.py" in result

    def test_format_exception_without_traceback(self):
        from core.logger import format_exception_short

        assert format_exception_short(RuntimeError("boom")) == "RuntimeError: boom | (unknown)"


class TestLoguruAppLogger:
    """The injectable application logger."""

    def capture(self):
        from core.logger import logger

        records = []
        sink_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
        return records, sink_id

    def test_levels_and_context(self):
        from core.logger import logger
        from infrastructure.logging.loguru_logger import LoguruAppLogger

        records, sink_id = self.capture()
        try:
            app_logger = LoguruAppLogger(debug_enabled=True)
            app_logger.info("info entry", episode_id="abc")
            app_logger.warn("warn entry")
            app_logger.error("error entry", status_code=500)
            app_logger.debug("debug entry")
        finally:
            logger.remove(sink_id)

        assert [r["level"].name for r in records] == ["INFO", "WARNING", "ERROR", "DEBUG"]
        assert records[0]["extra"]["episode_id"] == "abc"
        assert records[0]["extra"]["component"] == "api"
        assert records[2]["extra"]["status_code"] == 500

    def test_debug_disabled_is_noop(self):
        from core.logger import logger
        from infrastructure.logging.loguru_logger import LoguruAppLogger

        records, sink_id = self.capture()
        try:
            LoguruAppLogger(debug_enabled=False).debug("hidden")
        finally:
            logger.remove(sink_id)

        assert records == []
