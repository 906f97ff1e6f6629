"""
Экспортеры результатов сравнения.

- report.py: append-only текстовый отчёт
- json_exporter.py: JSON одного запуска
"""

from .base import BaseExporter
from .report import TextReportExporter
from .json_exporter import JSONExporter

__all__ = [
    "BaseExporter",
    "TextReportExporter",
    "JSONExporter",
]
