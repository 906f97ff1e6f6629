"""
gNMI Reconcile - сверка состояния сетевого устройства.

Сравнивает значения из gNMI дампа ("key": "value") со значениями из
вывода CLI (key: value) и дописывает результат в текстовый отчёт.
Значения перед сравнением нормализуются: регистр, разделители,
единицы измерения (KB/MB/GB, bps, G, %), хвостовые нули.

Примеры использования:
    # CLI
    python -m gnmi_reconcile run gnmi.txt show_int.txt show_env.txt

    # Python API
    from gnmi_reconcile import SourceAggregator, SourceComparator, SourceKind

    aggregator = SourceAggregator()
    gnmi = aggregator.build(SourceKind.GNMI, ["gnmi.txt"])
    cli = aggregator.build(SourceKind.CLI, ["show_int.txt"])
    result = SourceComparator().compare(gnmi, cli)
    print(result.all_match)
"""

__version__ = "1.0.0"

from .core.models import (
    SourceKind,
    OutcomeType,
    RawEntry,
    SourceMapping,
    KeyOutcome,
    ComparisonResult,
    ComparisonRun,
)
from .core.domain import ValueNormalizer, normalize_value, SourceComparator
from .collectors import SourceAggregator
from .parsers import get_extractor, register_extractor
from .exporters import TextReportExporter, JSONExporter

__all__ = [
    "__version__",
    # Models
    "SourceKind",
    "OutcomeType",
    "RawEntry",
    "SourceMapping",
    "KeyOutcome",
    "ComparisonResult",
    "ComparisonRun",
    # Domain
    "ValueNormalizer",
    "normalize_value",
    "SourceComparator",
    # Collectors / parsers
    "SourceAggregator",
    "get_extractor",
    "register_extractor",
    # Exporters
    "TextReportExporter",
    "JSONExporter",
]
