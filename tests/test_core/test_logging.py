"""
Tests for structured logging.

Проверяет форматтеры, StructuredLogger и настройку из секции logging.
"""

import io
import json
import logging
from datetime import datetime

import pytest

from gnmi_reconcile.core.config_schema import LoggingConfig
from gnmi_reconcile.core.context import RunContext, set_current_context
from gnmi_reconcile.core.logging import (
    HumanFormatter,
    JSONFormatter,
    RotationType,
    extra_fields,
    get_logger,
    setup_logging,
    setup_logging_from_config,
)


def make_record(message: str = "Файл обработан", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="gnmi_reconcile.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=None,
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def json_lines(stream: io.StringIO):
    return [json.loads(line) for line in stream.getvalue().splitlines() if line]


@pytest.mark.unit
class TestFormatters:
    """Тесты форматтеров."""

    def test_human_with_extras(self):
        record = make_record(run_id="2024-01-15T10-30-00", source="cli", file="a.txt", entries=3)

        line = HumanFormatter().format(record)

        assert " INFO     [2024-01-15T10-30-00] Файл обработан" in line
        assert line.endswith("(source=cli, file=a.txt)")

    def test_human_without_extras(self):
        assert HumanFormatter().format(make_record()).endswith(" INFO     Файл обработан")

    def test_json(self):
        record = make_record(source="gnmi", entries=12, skipped=None)

        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["message"] == "Файл обработан"
        assert data["logger"] == "gnmi_reconcile.test"
        assert data["source"] == "gnmi"
        assert data["entries"] == 12
        assert "skipped" not in data
        assert "lineno" not in data

    def test_extra_fields(self):
        assert extra_fields(make_record(key="mtu", _private=1)) == {"key": "mtu"}


@pytest.mark.unit
class TestStructuredLogger:
    """Тесты StructuredLogger."""

    def test_kwargs_and_run_id(self, restore_root_logger):
        stream = io.StringIO()
        setup_logging(json_format=True, level=logging.DEBUG, stream=stream)
        set_current_context(RunContext(run_id="run-1", started_at=datetime.now()))

        get_logger("gnmi_reconcile.test.extra").info("Merged", source="cli", entries=3)

        (data,) = json_lines(stream)
        assert data["message"] == "Merged"
        assert data["source"] == "cli"
        assert data["entries"] == 3
        assert data["run_id"] == "run-1"

    def test_explicit_run_id(self, restore_root_logger):
        stream = io.StringIO()
        setup_logging(json_format=True, level=logging.DEBUG, stream=stream)
        set_current_context(RunContext(run_id="run-1"))

        get_logger("gnmi_reconcile.test.explicit").info("Merged", run_id="other")

        assert json_lines(stream)[0]["run_id"] == "other"

    def test_bind(self, restore_root_logger):
        stream = io.StringIO()
        setup_logging(json_format=True, level="debug", stream=stream)

        logger = get_logger("gnmi_reconcile.test.bind").bind(source="gnmi")
        logger.debug("Read", file="gnmi.txt")

        (data,) = json_lines(stream)
        assert data["source"] == "gnmi"
        assert data["file"] == "gnmi.txt"
        assert data["level"] == "DEBUG"
        assert "run_id" not in data

    def test_exception(self, restore_root_logger):
        stream = io.StringIO()
        setup_logging(json_format=True, stream=stream)

        try:
            raise ValueError("boom")
        except ValueError:
            get_logger("gnmi_reconcile.test.exc").exception("Failed", key="mtu")

        (data,) = json_lines(stream)
        assert data["level"] == "ERROR"
        assert "ValueError: boom" in data["exception"]

    def test_get_logger_cached(self):
        assert get_logger("gnmi_reconcile.x") is get_logger("gnmi_reconcile.x")


@pytest.mark.unit
class TestSetupFromConfig:
    """Тесты setup_logging_from_config."""

    def test_console_level(self, restore_root_logger):
        stream = io.StringIO()
        setup_logging_from_config(LoggingConfig(level="warning"), stream=stream)

        logging.getLogger("gnmi_reconcile.test.level").info("hidden")
        logging.getLogger("gnmi_reconcile.test.level").warning("shown")

        output = stream.getvalue()
        assert "hidden" not in output
        assert "shown" in output

    def test_console_json_without_file(self, restore_root_logger):
        stream = io.StringIO()
        setup_logging_from_config(LoggingConfig(json_format=True), stream=stream)

        logging.getLogger("gnmi_reconcile.test.console").info("as json")

        assert json_lines(stream)[0]["message"] == "as json"

    def test_file_handler(self, tmp_path, restore_root_logger):
        stream = io.StringIO()
        log_file = tmp_path / "logs" / "reconcile.log"
        settings = LoggingConfig(
            json_format=True,
            file_path=str(log_file),
            rotation=RotationType.NONE,
        )
        setup_logging_from_config(settings, stream=stream)

        logging.getLogger("gnmi_reconcile.test.file").info("to file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        data = json.loads(log_file.read_text(encoding="utf-8").strip())
        assert data["message"] == "to file"
        assert stream.getvalue().rstrip().endswith("to file")
        assert not stream.getvalue().startswith("{")

    def test_no_console(self, restore_root_logger):
        setup_logging_from_config(LoggingConfig(console=False))
        assert logging.getLogger().handlers == []
