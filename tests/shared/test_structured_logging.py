"""Tests for structured logging helpers."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from rich.logging import RichHandler

from tmdbkit.shared.errors import create_http_error
from tmdbkit.shared.logging import (
    StructuredFormatter,
    log_api_call,
    log_operation_error,
    log_operation_start,
    setup_structured_logger,
)

LOGGER_NAME = "tmdbkit_logging_test"


@pytest.fixture
def test_logger():
    logger = logging.getLogger(LOGGER_NAME)
    yield logger
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


class TestStructuredFormatter:
    def test_formats_record_as_json(self) -> None:
        # Given
        record = logging.LogRecord(
            name="tmdbkit.api.client",
            level=logging.WARNING,
            pathname=__file__,
            lineno=1,
            msg="GET %s -> %d",
            args=("/movie/1", 404),
            exc_info=None,
        )
        record.status_code = 404

        # When
        entry = json.loads(StructuredFormatter().format(record))

        # Then
        assert entry["level"] == "WARNING"
        assert entry["logger"] == "tmdbkit.api.client"
        assert entry["message"] == "GET /movie/1 -> 404"
        assert entry["status_code"] == 404
        assert "timestamp" in entry


class TestSetupStructuredLogger:
    def test_rich_console_handler(self, test_logger: logging.Logger) -> None:
        logger = setup_structured_logger(LOGGER_NAME, level="debug")

        assert logger is test_logger
        assert logger.level == logging.DEBUG
        assert isinstance(logger.handlers[0], RichHandler)
        assert logger.propagate is False

    def test_json_file_handler(self, test_logger: logging.Logger, tmp_path: Path) -> None:
        # Given
        log_file = tmp_path / "tmdbkit.log"
        logger = setup_structured_logger(
            LOGGER_NAME, log_file=str(log_file), use_rich_console=False
        )

        # When
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()

        # Then
        entry = json.loads(log_file.read_text(encoding="utf-8").splitlines()[0])
        assert entry["message"] == "hello"
        assert len(logger.handlers) == 2

    def test_repeated_setup_replaces_handlers(self, test_logger: logging.Logger) -> None:
        setup_structured_logger(LOGGER_NAME)
        logger = setup_structured_logger(LOGGER_NAME)

        assert len(logger.handlers) == 1


class TestLogHelpers:
    """Test cases for the log_* helpers."""

    def test_log_api_call_success_is_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("tmdbkit.tests.api_call")

        with caplog.at_level(logging.DEBUG, logger=logger.name):
            log_api_call(logger, "/movie/1", status_code=200, duration_ms=12.3456)

        record = caplog.records[0]
        assert record.levelno == logging.DEBUG
        assert record.getMessage() == "GET /movie/1 -> 200"
        assert record.duration_ms == 12.35

    def test_log_api_call_failure_is_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("tmdbkit.tests.api_call")

        with caplog.at_level(logging.DEBUG, logger=logger.name):
            log_api_call(logger, "/movie/1", method="DELETE", status_code=401)

        assert caplog.records[0].levelno == logging.WARNING

    def test_log_operation_error(self, caplog: pytest.LogCaptureFixture) -> None:
        # Given
        logger = logging.getLogger("tmdbkit.tests.errors")
        error = create_http_error(404, "", url="https://api.themoviedb.org/3/movie/0")

        # When
        with caplog.at_level(logging.ERROR, logger=logger.name):
            log_operation_error(logger, error, additional_context={"movie_id": 0})

        # Then
        record = caplog.records[0]
        assert record.getMessage() == "Request failed with HTTP status 404"
        assert record.error_code == "API_RESOURCE_NOT_FOUND"
        assert record.operation == "api_request"
        assert record.context["movie_id"] == 0

    def test_log_operation_start(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("tmdbkit.tests.start")

        with caplog.at_level(logging.DEBUG, logger=logger.name):
            log_operation_start(logger, "movie_details", {"movie_id": 603})

        assert caplog.records[0].operation == "movie_details"
        assert caplog.records[0].context == {"movie_id": 603}
