"""
Domain Layer для gNMI Reconcile.

Бизнес-логика отделена от чтения файлов и отчётов.

- ValueNormalizer: каноническая форма значений (единицы, регистр, разделители)
- SourceComparator: сравнение двух SourceMapping

Использование:
    from gnmi_reconcile.core.domain import ValueNormalizer, SourceComparator

    normalizer = ValueNormalizer()
    normalizer.normalize("1KB")  # "1024"
"""

from .normalizer import ValueNormalizer, normalize_value
from .comparator import SourceComparator

__all__ = [
    "ValueNormalizer",
    "normalize_value",
    "SourceComparator",
]
