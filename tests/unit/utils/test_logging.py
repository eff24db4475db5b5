"""Tests for logging configuration utilities."""

from io import StringIO
import json
import logging
import sys

from ccrider.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
)


def _make_record(**overrides) -> logging.LogRecord:
    record = logging.LogRecord(
        name=overrides.pop("name", "test.logger"),
        level=overrides.pop("level", logging.INFO),
        pathname="/path/to/file.py",
        lineno=overrides.pop("lineno", 42),
        msg=overrides.pop("msg", "Test message"),
        args=(),
        exc_info=overrides.pop("exc_info", None),
    )
    record.funcName = "test_function"
    record.module = "test_module"
    for key, value in overrides.items():
        setattr(record, key, value)
    return record


class TestStructuredJSONFormatter:
    """Test suite for StructuredJSONFormatter."""

    def test_basic_log_format(self):
        """Test basic log record formatting to JSON."""
        data = json.loads(StructuredJSONFormatter().format(_make_record()))

        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert "timestamp" in data
        assert data["context"]["logger_name"] == "test.logger"
        assert data["context"]["module"] == "test_module"
        assert data["context"]["function"] == "test_function"
        assert data["context"]["line"] == 42

    def test_log_with_extra_fields(self):
        """Test that extra fields are included in context."""
        record = _make_record(rider="e", generation=3)

        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["context"]["rider"] == "e"
        assert data["context"]["generation"] == 3

    def test_log_with_exception(self):
        """Test that exception info is captured in context."""
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        record = _make_record(level=logging.ERROR, msg="Error occurred", exc_info=exc_info)
        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["level"] == "ERROR"
        assert data["context"]["error_type"] == "ValueError"
        assert data["context"]["error_message"] == "Test error"
        assert "ValueError: Test error" in data["context"]["stack_trace"]


class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_standard_logging(self, capsys):
        """Test standard text logging configuration."""
        configure_logging(level="INFO", structured=False)

        logging.getLogger("test.standard").info("Test message")

        captured = capsys.readouterr()
        assert "Test message" in captured.out
        assert "test.standard" in captured.out
        assert "INFO" in captured.out

    def test_level_is_case_insensitive(self, capsys):
        """Lower-case level names are accepted."""
        configure_logging(level="warning")

        logging.getLogger("test.level").info("Hidden message")

        assert "Hidden message" not in capsys.readouterr().out

    def test_configure_structured_logging_to_file(self, tmp_path):
        """Test structured JSON logging to file."""
        log_file = tmp_path / "ccrider.jsonl"
        configure_logging(level="DEBUG", structured=True, filename=str(log_file))

        logger = logging.getLogger("test.file")
        logger.debug("Debug message")
        logger.warning("Warning message")
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = [json.loads(line) for line in log_file.read_text().splitlines() if line]
        levels = [line["level"] for line in lines]
        assert "DEBUG" in levels
        assert "WARNING" in levels
        assert all("logger_name" in line["context"] for line in lines)

        configure_logging(level="WARNING")

    def test_custom_format_string(self, capsys):
        """Test custom format string for standard logging."""
        configure_logging(level="INFO", format_string="%(levelname)s | %(message)s")

        logging.getLogger("test.custom").info("Custom format test")

        assert "INFO | Custom format test" in capsys.readouterr().out

    def test_matplotlib_logger_quieted(self):
        """Plotting libraries only log errors."""
        configure_logging(level="DEBUG")

        assert logging.getLogger("matplotlib").level == logging.ERROR
        assert logging.getLogger("PIL").level == logging.ERROR


class TestGetLogger:
    """Test suite for get_logger function."""

    def test_get_logger_without_context(self):
        """Test getting a plain logger without context."""
        logger = get_logger("test.plain")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.plain"

    def test_get_logger_with_context(self):
        """Test getting a LoggerAdapter with context."""
        logger = get_logger("test.context", rider="e")
        assert isinstance(logger, logging.LoggerAdapter)
        assert logger.logger.name == "test.context"
        assert logger.extra["rider"] == "e"

    def test_logger_adapter_includes_context_in_structured_logs(self):
        """Test that LoggerAdapter context appears in structured logs."""
        stream = StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(StructuredJSONFormatter())

        logger = get_logger("test.adapter", rider="d")
        logger.logger.addHandler(handler)
        logger.logger.setLevel(logging.INFO)
        try:
            logger.info("Adapter message")
        finally:
            logger.logger.removeHandler(handler)

        data = json.loads(stream.getvalue().strip())
        assert data["message"] == "Adapter message"
        assert data["context"]["rider"] == "d"
