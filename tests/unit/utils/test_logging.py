"""Tests for logging configuration utilities."""

from __future__ import annotations

import json
import logging
import sys
from io import StringIO
from pathlib import Path

import pytest

from opensi.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
    log_performance,
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo configure_logging side effects on the root logger."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(level: int = logging.INFO, msg: str = "Test message", exc_info=None) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="/path/to/archive.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    record.funcName = "read_package"
    record.module = "archive"
    return record


class TestStructuredJSONFormatter:
    """Test suite for StructuredJSONFormatter."""

    def test_basic_log_format(self) -> None:
        data = json.loads(StructuredJSONFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert "timestamp" in data
        assert data["context"]["logger_name"] == "test.logger"
        assert data["context"]["module"] == "archive"
        assert data["context"]["function"] == "read_package"
        assert data["context"]["line"] == 42

    def test_log_with_extra_fields(self) -> None:
        record = _record(level=logging.DEBUG)
        record.package_id = "pkg-123"
        record.member = {"name": "Images/a.png"}

        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["context"]["package_id"] == "pkg-123"
        assert data["context"]["member"] == {"name": "Images/a.png"}

    def test_log_with_exception(self) -> None:
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        data = json.loads(
            StructuredJSONFormatter().format(_record(logging.ERROR, "Error occurred", exc_info))
        )

        assert data["level"] == "ERROR"
        assert data["context"]["error_type"] == "ValueError"
        assert data["context"]["error_message"] == "Test error"
        assert "ValueError: Test error" in data["context"]["stack_trace"]


class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_standard_logging(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level="INFO", structured=False)

        logging.getLogger("test.standard").info("Test message")

        captured = capsys.readouterr()
        assert "Test message" in captured.out
        assert "test.standard" in captured.out
        assert "INFO" in captured.out

    def test_level_is_case_insensitive(self) -> None:
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_configure_structured_logging_to_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "opensi.jsonl"

        configure_logging(level="DEBUG", structured=True, filename=str(log_file))
        logger = logging.getLogger("test.file")
        logger.debug("Debug message")
        logger.warning("Warning message")
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = [json.loads(line) for line in log_file.read_text().splitlines() if line]

        assert [line["level"] for line in lines[-2:]] == ["DEBUG", "WARNING"]
        assert lines[-1]["context"]["logger_name"] == "test.file"

    def test_custom_format_string(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level="INFO", format_string="%(levelname)s | %(message)s")

        logging.getLogger("test.custom").info("Custom format test")

        assert "INFO | Custom format test" in capsys.readouterr().out


class TestGetLogger:
    """Test suite for get_logger function."""

    def test_get_logger_without_context(self) -> None:
        logger = get_logger("test.plain")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.plain"

    def test_get_logger_with_context(self) -> None:
        logger = get_logger("test.context", package_id="pkg-1")

        assert isinstance(logger, logging.LoggerAdapter)
        assert logger.logger.name == "test.context"
        assert logger.extra["package_id"] == "pkg-1"

    def test_adapter_context_in_structured_logs(self) -> None:
        stream = StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(StructuredJSONFormatter())

        logger = get_logger("test.adapter", package_id="pkg-9")
        logger.logger.addHandler(handler)
        logger.logger.setLevel(logging.INFO)
        try:
            logger.info("Message with context")
        finally:
            logger.logger.removeHandler(handler)

        data = json.loads(stream.getvalue().strip())
        assert data["context"]["package_id"] == "pkg-9"


class TestLogPerformance:
    """Test suite for the log_performance decorator."""

    def test_returns_result_and_logs_timing(self, caplog: pytest.LogCaptureFixture) -> None:
        @log_performance
        def add(a: int, b: int) -> int:
            return a + b

        with caplog.at_level(logging.DEBUG):
            assert add(2, 3) == 5

        assert "Function 'add' took" in caplog.text
        assert add.__name__ == "add"
