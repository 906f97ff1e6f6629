"""
Data Models для gNMI Reconcile.

Типизированные dataclasses для всех этапов сравнения:
- RawEntry: пара key/value, извлечённая из строки источника
- SourceMapping: key → нормализованное значение одного источника
- KeyOutcome / ComparisonResult: результат сравнения
- ComparisonRun: результат + метаданные запуска (для отчётов)

Использование:
    from gnmi_reconcile.core.models import SourceKind, SourceMapping

    mapping = SourceMapping(kind=SourceKind.CLI)
    mapping.upsert("speed", "1000000000", origin="show_int.txt")
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List, Any, Dict, Iterator, Tuple
from enum import Enum


class SourceKind(str, Enum):
    """Тип источника данных."""
    GNMI = "gnmi"
    CLI = "cli"

    @property
    def label(self) -> str:
        """Имя источника для отчёта (gNMI / CLI)."""
        return "gNMI" if self is SourceKind.GNMI else "CLI"


class OutcomeType(str, Enum):
    """Результат сравнения одного ключа."""
    MATCH = "match"
    MISSING_IN_CLI = "missing_in_cli"
    MISSING_IN_GNMI = "missing_in_gnmi"
    DISCREPANCY = "discrepancy"


@dataclass
class RawEntry:
    """
    Сырая пара key/value из строки источника.

    Attributes:
        key: Имя ключа
        raw_value: Значение как в тексте (без кавычек)
        source: Тип источника
        origin: Имя файла (если известно)
    """
    key: str
    raw_value: str
    source: SourceKind
    origin: str = ""


class SourceMapping:
    """
    Упорядоченное отображение key → нормализованное значение.

    Повторная запись ключа перезаписывает значение (last write wins),
    позиция ключа остаётся позицией первого появления.

    Example:
        mapping = SourceMapping(SourceKind.CLI)
        mapping.upsert("status", "up", origin="a.txt")
        mapping.upsert("status", "down", origin="b.txt")
        mapping["status"]  # "down"
    """

    def __init__(self, kind: SourceKind):
        self.kind = kind
        self._values: Dict[str, str] = {}
        self._origins: Dict[str, str] = {}
        self.overwrites = 0

    def upsert(self, key: str, value: str, origin: str = "") -> bool:
        """
        Записывает значение ключа.

        Args:
            key: Ключ
            value: Нормализованное значение
            origin: Файл из которого пришло значение

        Returns:
            bool: True если ключ уже был и значение перезаписано
        """
        replaced = key in self._values
        if replaced:
            self.overwrites += 1
        self._values[key] = value
        self._origins[key] = origin
        return replaced

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._values.get(key, default)

    def origin_of(self, key: str) -> str:
        """Файл, из которого пришло текущее значение ключа."""
        return self._origins.get(key, "")

    def keys(self) -> List[str]:
        return list(self._values)

    def items(self) -> List[Tuple[str, str]]:
        return list(self._values.items())

    def to_dict(self) -> Dict[str, str]:
        return dict(self._values)

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"SourceMapping({self.kind.value}, {len(self)} keys)"


@dataclass
class KeyOutcome:
    """
    Результат сравнения одного ключа.

    Attributes:
        key: Имя ключа
        outcome: Тип результата
        gnmi_value: Нормализованное значение gNMI (None если ключа нет)
        cli_value: Нормализованное значение CLI (None если ключа нет)
    """
    key: str
    outcome: OutcomeType
    gnmi_value: Optional[str] = None
    cli_value: Optional[str] = None

    def __str__(self) -> str:
        if self.outcome == OutcomeType.MATCH:
            return f"Key '{self.key}' matches: {self.gnmi_value}"
        elif self.outcome == OutcomeType.MISSING_IN_CLI:
            return f"Key '{self.key}' found in gNMI but missing in CLI"
        elif self.outcome == OutcomeType.MISSING_IN_GNMI:
            return f"Key '{self.key}' found in CLI but not in gNMI"
        return (
            f"Key '{self.key}' has a discrepancy: "
            f"gNMI={self.gnmi_value}, CLI={self.cli_value}"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в словарь."""
        return {
            "key": self.key,
            "outcome": self.outcome.value,
            "gnmi_value": self.gnmi_value,
            "cli_value": self.cli_value,
        }


@dataclass
class ComparisonResult:
    """
    Результат сравнения двух источников.

    all_match: нет DISCREPANCY и нет MISSING_IN_GNMI.
    MISSING_IN_CLI на итог не влияет, если не включён strict_missing_in_cli.

    Attributes:
        outcomes: Результаты по ключам (порядок gNMI, затем CLI-only)
        strict_missing_in_cli: Считать MISSING_IN_CLI расхождением
    """
    outcomes: List[KeyOutcome] = field(default_factory=list)
    strict_missing_in_cli: bool = False

    def by_type(self, outcome: OutcomeType) -> List[KeyOutcome]:
        """Результаты заданного типа."""
        return [item for item in self.outcomes if item.outcome == outcome]

    def count(self, outcome: OutcomeType) -> int:
        return len(self.by_type(outcome))

    @property
    def counts(self) -> Dict[str, int]:
        """Количество результатов по типам."""
        return {t.value: self.count(t) for t in OutcomeType}

    @property
    def all_match(self) -> bool:
        """Итог запуска."""
        failing = {OutcomeType.DISCREPANCY, OutcomeType.MISSING_IN_GNMI}
        if self.strict_missing_in_cli:
            failing.add(OutcomeType.MISSING_IN_CLI)
        return not any(item.outcome in failing for item in self.outcomes)

    def summary(self) -> str:
        """Краткая сводка."""
        counts = self.counts
        return (
            f"{len(self.outcomes)} keys: "
            f"{counts['match']} match, "
            f"{counts['discrepancy']} discrepancy, "
            f"{counts['missing_in_cli']} missing in CLI, "
            f"{counts['missing_in_gnmi']} missing in gNMI"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в словарь."""
        return {
            "all_match": self.all_match,
            "strict_missing_in_cli": self.strict_missing_in_cli,
            "counts": self.counts,
            "outcomes": [item.to_dict() for item in self.outcomes],
        }


@dataclass
class ComparisonRun:
    """
    Один запуск сравнения, вход для экспортеров отчётов.

    Attributes:
        gnmi_path: Файл gNMI
        cli_paths: Файлы CLI в порядке слияния
        result: Результат сравнения
        timestamp: Время запуска
        run_id: ID запуска (из RunContext)
    """
    gnmi_path: str
    cli_paths: List[str]
    result: ComparisonResult
    timestamp: datetime = field(default_factory=datetime.now)
    run_id: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в словарь."""
        return {
            "run_id": self.run_id,
            "timestamp": self.timestamp.isoformat(),
            "gnmi_file": self.gnmi_path,
            "cli_files": list(self.cli_paths),
            **self.result.to_dict(),
        }
