"""
Текстовый отчёт сравнения (append-only).

Если файла нет, он создаётся с фиксированным заголовком из трёх строк.
Каждый запуск дописывает блок:

    --------------------------------------------------
    Timestamp: 2026-10-18 12:00:00
    gNMI file: gnmi.txt
    CLI files: cli_a.txt, cli_b.txt

    Comparison Results:
    Key 'speed' matches: 1000000000
    Key 'uptime' found in gNMI but missing in CLI

    All values match. No discrepancies found.
    --------------------------------------------------

Пример использования:
    exporter = TextReportExporter()
    exporter.export(run, "comparison_report.txt")
    print(exporter.render_block(run))
"""

from pathlib import Path

from .base import BaseExporter
from ..core.constants import (
    REPORT_HEADER,
    REPORT_DELIMITER,
    RESULTS_TITLE,
    SUMMARY_ALL_MATCH,
    SUMMARY_DIFFERENCES,
)
from ..core.logging import get_logger
from ..core.models import ComparisonRun

logger = get_logger(__name__)


class TextReportExporter(BaseExporter):
    """
    Экспортер append-only текстового отчёта.

    Существующее содержимое файла никогда не перезаписывается.
    """

    file_extension = ".txt"
    # Путь отчёта используется как есть: "--report rep" пишет в rep
    append_extension = False

    @staticmethod
    def render_header() -> str:
        """Заголовок нового файла отчёта."""
        return "\n".join(REPORT_HEADER) + "\n"

    @staticmethod
    def render_block(run: ComparisonRun) -> str:
        """
        Блок одного запуска.

        Args:
            run: Запуск сравнения

        Returns:
            str: Текст блока (заканчивается переводом строки)
        """
        lines = [
            "",
            REPORT_DELIMITER,
            f"Timestamp: {run.timestamp.strftime('%Y-%m-%d %H:%M:%S')}",
            f"gNMI file: {run.gnmi_path}",
            f"CLI files: {', '.join(run.cli_paths)}",
            "",
            RESULTS_TITLE,
        ]
        lines.extend(str(item) for item in run.result.outcomes)
        lines.append("")
        lines.append(SUMMARY_ALL_MATCH if run.result.all_match else SUMMARY_DIFFERENCES)
        lines.append(REPORT_DELIMITER)
        return "\n".join(lines) + "\n"

    def _write(self, run: ComparisonRun, file_path: Path) -> None:
        is_new = not file_path.exists()

        with open(file_path, "a", encoding=self.encoding) as f:
            if is_new:
                f.write(self.render_header())
                logger.debug(f"Создан новый файл отчёта: {file_path}")
            f.write(self.render_block(run))
