"""
JSON экспорт результата запуска.

В отличие от текстового отчёта файл перезаписывается и хранит только последний запуск.

    JSONExporter(indent=2).export(run, "result.json")

Формат (include_metadata=True):
    {
      "metadata": {"generated_at": "...", "total_keys": 12, "all_match": false,
                   "run": {"run_id": "...", "triggered_by": "cli", "extra": {...}}},
      "data": {"run_id": "...", "gnmi_file": "...", "cli_files": [...],
               "counts": {...}, "outcomes": [...]}
    }
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from .base import BaseExporter
from ..core.context import RunContext
from ..core.models import ComparisonRun


class JSONExporter(BaseExporter):
    """
    Attributes:
        indent: Отступ (None = одна строка)
        ensure_ascii: Экранировать не-ASCII
        include_metadata: Обёртка {"metadata": ..., "data": ...}
        context: Контекст запуска для metadata.run
    """

    file_extension = ".json"

    def __init__(
        self,
        encoding: str = "utf-8",
        indent: Optional[int] = 2,
        ensure_ascii: bool = False,
        include_metadata: bool = True,
        context: Optional[RunContext] = None,
    ):
        super().__init__(encoding)
        self.indent = indent
        self.ensure_ascii = ensure_ascii
        self.include_metadata = include_metadata
        self.context = context

    def build_payload(self, run: ComparisonRun) -> Dict[str, Any]:
        data = run.to_dict()
        if not self.include_metadata:
            return data
        metadata: Dict[str, Any] = {
            "generated_at": datetime.now().isoformat(timespec="seconds"),
            "total_keys": len(run.result.outcomes),
            "all_match": run.result.all_match,
        }
        if self.context is not None:
            metadata["run"] = self.context.to_dict()
        return {"metadata": metadata, "data": data}

    def _write(self, run: ComparisonRun, file_path: Path) -> None:
        text = json.dumps(
            self.build_payload(run),
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
            default=str,
        )
        file_path.write_text(text + "\n", encoding=self.encoding)
