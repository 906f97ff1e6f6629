"""
Парсеры текста источников.

- extractors.py: TextFSM экстракторы key/value для gNMI и CLI
"""

from .extractors import (
    LineExtractor,
    TemplateExtractor,
    GNMIExtractor,
    CLIExtractor,
    register_extractor,
    get_extractor,
    registered_sources,
)

__all__ = [
    "LineExtractor",
    "TemplateExtractor",
    "GNMIExtractor",
    "CLIExtractor",
    "register_extractor",
    "get_extractor",
    "registered_sources",
]
