"""
Tests for logging setup and the JSON formatter
"""

import json
import logging
from collections.abc import Generator

import pytest

from paramount.observability import JSONFormatter, setup_logging
from paramount.reporting import log_error_reporter


@pytest.fixture
def restore_paramount_logger() -> Generator[logging.Logger, None, None]:
    """Put the paramount logger back the way the test found it."""
    logger = logging.getLogger("paramount")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestJSONFormatter:
    """Test JSONFormatter output."""

    def test_formats_extra_fields(self):
        record = logging.LogRecord(
            name="paramount.gate",
            level=logging.WARNING,
            pathname=__file__,
            lineno=10,
            msg="Argument check failed for %s",
            args=("count",),
            exc_info=None,
        )
        record.parameter = "count"
        record.value = object()

        payload = json.loads(JSONFormatter().format(record))

        assert payload["level"] == "WARNING"
        assert payload["logger"] == "paramount.gate"
        assert payload["message"] == "Argument check failed for count"
        assert payload["parameter"] == "count"
        assert payload["value"].startswith("<object object")
        assert payload["timestamp"].endswith("Z")
        assert "args" not in payload


class TestSetupLogging:
    """Test setup_logging()."""

    def test_json_handler(self, restore_paramount_logger):
        logger = setup_logging(level="DEBUG", json_logs=True)

        assert logger is restore_paramount_logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_plain_handler_from_configuration(self, restore_paramount_logger, monkeypatch):
        monkeypatch.setenv("PARAMOUNT_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("PARAMOUNT_JSON_LOGS", "false")
        from paramount.config import reload_config

        reload_config()
        logger = setup_logging()

        assert logger.level == logging.ERROR
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_repeated_setup_does_not_stack_handlers(self, restore_paramount_logger):
        setup_logging(level="INFO", json_logs=False)
        logger = setup_logging(level="INFO", json_logs=False)

        assert len(logger.handlers) == 1

    def test_wrapped_function_survives_json_rendering(self, caplog):
        """Validation log fields are not shadowed by the formatter's own keys."""
        with caplog.at_level(logging.WARNING, logger="paramount"):
            log_error_reporter("testmethod1", "count", "Number", "abc", "How many")

        payload = json.loads(JSONFormatter().format(caplog.records[-1]))

        assert payload["wrapped_function"] == "testmethod1"
        assert payload["function"] == "log_error_reporter"
        assert payload["parameter"] == "count"
        assert payload["description"] == "How many"
