"""
Unit tests for structured logging.
"""

import io
import json
import logging

import pytest

from fluent_rule.observability.logger import get_logger, log_operation, resolve_level, setup_logger

pytestmark = pytest.mark.unit


def _capture(logger) -> io.StringIO:
    stream = io.StringIO()
    logger.handlers[0].setStream(stream)
    return stream


class TestLogger:
    """Tests for logger setup"""

    def test_json_records_carry_context(self):
        logger = setup_logger("test_json_logger", level="DEBUG", format_type="json")
        stream = _capture(logger)

        logger.info("Drained rules", extra={"field_count": 3})

        record = json.loads(stream.getvalue())
        assert record["message"] == "Drained rules"
        assert record["level"] == "INFO"
        assert record["logger"] == "test_json_logger"
        assert record["field_count"] == 3

    def test_text_format(self):
        logger = setup_logger("test_text_logger", level="INFO", format_type="text")
        stream = _capture(logger)

        logger.warning("plain text")

        assert "WARNING" in stream.getvalue()
        assert "plain text" in stream.getvalue()

    def test_text_format_layout(self):
        logger = setup_logger("test_layout_logger", level="INFO", format_type="text")
        stream = _capture(logger)

        logger.info("Loaded 2 field(s)")

        assert "INFO     [test_layout_logger] Loaded 2 field(s)" in stream.getvalue()

    @pytest.mark.parametrize("name, expected", [
        ("debug", logging.DEBUG),
        (" Warning ", logging.WARNING),
        ("ERROR", logging.ERROR),
        ("verbose", logging.INFO),
        ("BASIC_FORMAT", logging.INFO),
        ("", logging.INFO),
        (None, logging.INFO),
    ])
    def test_resolve_level(self, name, expected):
        assert resolve_level(name) == expected

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        logger = setup_logger("test_env_logger")
        stream = _capture(logger)

        logger.info("hidden")
        logger.error("shown")

        assert "hidden" not in stream.getvalue()
        assert "shown" in stream.getvalue()

    def test_setup_does_not_duplicate_handlers(self):
        setup_logger("test_dup_logger")
        logger = setup_logger("test_dup_logger")

        assert len(logger.handlers) == 1

    def test_package_loggers_share_root_handler(self):
        logger = get_logger("fluent_rule.some.module")

        assert logger.handlers == []
        assert get_logger().handlers


class TestLogOperation:
    """Tests for log_operation"""

    def test_success(self):
        logger = setup_logger("test_op_logger", level="INFO", format_type="json")
        stream = _capture(logger)

        with log_operation("Compiling", logger=logger, schema_path="a.yaml"):
            pass

        records = [json.loads(line) for line in stream.getvalue().splitlines()]
        assert [r["message"] for r in records] == ["Starting: Compiling", "Completed: Compiling"]
        assert records[1]["status"] == "success"
        assert records[1]["schema_path"] == "a.yaml"

    def test_failure_is_logged_and_reraised(self):
        logger = setup_logger("test_op_fail_logger", level="INFO", format_type="json")
        stream = _capture(logger)

        with pytest.raises(ValueError):
            with log_operation("Compiling", logger=logger):
                raise ValueError("boom")

        records = [json.loads(line) for line in stream.getvalue().splitlines()]
        assert records[-1]["status"] == "error"
        assert records[-1]["error_type"] == "ValueError"
        assert records[-1]["error_message"] == "boom"
