"""
Сборщики данных источников.

- aggregator.py: SourceAggregator (файлы → SourceMapping)
"""

from .aggregator import SourceAggregator

__all__ = ["SourceAggregator"]
