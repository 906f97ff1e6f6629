"""
Tests for TextReportExporter.

Проверяет формат блока отчёта, заголовок нового файла и дозапись.
"""

import pytest
from datetime import datetime

from gnmi_reconcile.core.models import (
    ComparisonResult,
    ComparisonRun,
    KeyOutcome,
    OutcomeType,
)
from gnmi_reconcile.exporters import TextReportExporter

HEADER = (
    "==================================================\n"
    "gNMI vs CLI Comparison Report\n"
    "==================================================\n"
)
DELIMITER = "-" * 50


@pytest.fixture
def run_with_diff():
    return ComparisonRun(
        gnmi_path="gnmi.txt",
        cli_paths=["cli_a.txt", "cli_b.txt"],
        result=ComparisonResult(outcomes=[
            KeyOutcome("speed", OutcomeType.MATCH, "1000000000", "1000000000"),
            KeyOutcome("mtu", OutcomeType.DISCREPANCY, "9000", "1500"),
            KeyOutcome("uptime", OutcomeType.MISSING_IN_CLI, gnmi_value="12345"),
            KeyOutcome("temperature", OutcomeType.MISSING_IN_GNMI, cli_value="41.5"),
        ]),
        timestamp=datetime(2024, 1, 15, 10, 30, 0),
    )


@pytest.fixture
def run_all_match():
    return ComparisonRun(
        gnmi_path="gnmi.txt",
        cli_paths=["cli.txt"],
        result=ComparisonResult(outcomes=[
            KeyOutcome("status", OutcomeType.MATCH, "up", "up"),
            KeyOutcome("uptime", OutcomeType.MISSING_IN_CLI, gnmi_value="5"),
        ]),
        timestamp=datetime(2024, 1, 15, 11, 0, 0),
    )


@pytest.mark.unit
class TestRender:
    """Тесты формата отчёта."""

    def test_header(self):
        assert TextReportExporter.render_header() == HEADER

    def test_block_with_differences(self, run_with_diff):
        expected = "\n".join([
            "",
            DELIMITER,
            "Timestamp: 2024-01-15 10:30:00",
            "gNMI file: gnmi.txt",
            "CLI files: cli_a.txt, cli_b.txt",
            "",
            "Comparison Results:",
            "Key 'speed' matches: 1000000000",
            "Key 'mtu' has a discrepancy: gNMI=9000, CLI=1500",
            "Key 'uptime' found in gNMI but missing in CLI",
            "Key 'temperature' found in CLI but not in gNMI",
            "",
            "Differences found between gNMI and CLI outputs.",
            DELIMITER,
        ]) + "\n"

        assert TextReportExporter.render_block(run_with_diff) == expected

    def test_block_all_match(self, run_all_match):
        block = TextReportExporter.render_block(run_all_match)
        assert "\nAll values match. No discrepancies found.\n" in block
        assert "Key 'uptime' found in gNMI but missing in CLI" in block

    def test_block_no_outcomes(self):
        run = ComparisonRun("gnmi.txt", ["cli.txt"], ComparisonResult())
        lines = TextReportExporter.render_block(run).splitlines()
        assert lines[6:9] == ["Comparison Results:", "", "All values match. No discrepancies found."]


@pytest.mark.integration
class TestTextReportExport:
    """Тесты записи файла отчёта."""

    def test_new_file_gets_header(self, tmp_path, run_with_diff):
        path = TextReportExporter().export(run_with_diff, tmp_path / "report.txt")

        content = path.read_text(encoding="utf-8")
        assert content.startswith(HEADER + "\n" + DELIMITER)
        assert content.count("gNMI vs CLI Comparison Report") == 1

    def test_append_only(self, tmp_path, run_with_diff, run_all_match):
        report = tmp_path / "report.txt"
        exporter = TextReportExporter()

        exporter.export(run_with_diff, report)
        first = report.read_text(encoding="utf-8")
        exporter.export(run_all_match, report)
        second = report.read_text(encoding="utf-8")

        assert second.startswith(first)
        assert second == first + exporter.render_block(run_all_match)
        assert second.count("Timestamp:") == 2

    def test_existing_content_preserved(self, write_file, run_all_match):
        report = write_file("report.txt", "previous content\n")

        TextReportExporter().export(run_all_match, report)

        content = report.read_text(encoding="utf-8")
        assert content.startswith("previous content\n\n" + DELIMITER)
        assert "gNMI vs CLI Comparison Report" not in content

    def test_creates_parent_dirs(self, tmp_path, run_all_match):
        path = TextReportExporter().export(run_all_match, tmp_path / "reports" / "daily" / "r.txt")
        assert path.exists()

    def test_path_used_as_given(self, tmp_path, run_all_match):
        """Путь без расширения не получает .txt."""
        path = TextReportExporter().export(run_all_match, tmp_path / "report")
        assert path == tmp_path / "report"
        assert path.read_text(encoding="utf-8").startswith("=")
        assert not (tmp_path / "report.txt").exists()

    def test_write_error_returns_none(self, write_file, run_all_match):
        blocker = write_file("blocker", "not a directory")
        assert TextReportExporter().export(run_all_match, blocker / "report.txt") is None
