"""
Tests for exception hierarchy.
"""

import pytest

from gnmi_reconcile.core.exceptions import (
    ConfigError,
    InputFileNotFoundError,
    ParseError,
    ReconcileError,
    UsageError,
    format_error_for_log,
)


@pytest.mark.unit
class TestExceptions:
    """Тесты иерархии исключений."""

    @pytest.mark.parametrize("exc_class", [
        UsageError, InputFileNotFoundError, ParseError, ConfigError,
    ])
    def test_hierarchy(self, exc_class):
        """Все исключения наследуют ReconcileError."""
        assert issubclass(exc_class, ReconcileError)

    def test_str_without_details(self):
        assert str(ReconcileError("Something failed")) == "Something failed"

    def test_str_with_details(self):
        error = ReconcileError("Something failed", details={"count": 3})
        assert str(error) == "Something failed (count=3)"

    def test_input_file_not_found(self):
        error = InputFileNotFoundError(
            "CLI file not found: show_int.txt", path="show_int.txt", source="cli"
        )
        assert error.path == "show_int.txt"
        assert error.source == "cli"
        assert error.details == {"path": "show_int.txt", "source": "cli"}
        assert "show_int.txt" in str(error)

    def test_parse_error(self):
        error = ParseError("Invalid template", template="gnmi_kv.textfsm")
        assert error.template == "gnmi_kv.textfsm"
        assert error.details["template"] == "gnmi_kv.textfsm"

    def test_config_error(self):
        error = ConfigError("Invalid value", config_file="config.yaml", key="report.echo")
        assert error.config_file == "config.yaml"
        assert error.key == "report.echo"

    def test_to_dict(self):
        data = UsageError("Missing arguments").to_dict()
        assert data == {
            "error_type": "UsageError",
            "message": "Missing arguments",
            "details": {},
        }


@pytest.mark.unit
class TestFormatErrorForLog:
    """Тесты format_error_for_log."""

    def test_reconcile_error(self):
        error = ParseError("Invalid template", template="cli_kv.textfsm")
        assert format_error_for_log(error) == "Invalid template (template='cli_kv.textfsm')"

    def test_generic_error(self):
        assert format_error_for_log(ValueError("bad")) == "ValueError: bad"
