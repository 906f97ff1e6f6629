"""
Извлечение пар key/value из текста источников через TextFSM шаблоны.

Каждый тип источника описывается своим шаблоном в templates/:
- gnmi_kv.textfsm: строки вида  "key": "value"  или  "key": value
- cli_kv.textfsm:  строки вида  key: value  (key только [a-z_])

Строки, не подходящие под шаблон, пропускаются без ошибки.

Экстракторы регистрируются по имени источника, поэтому новый формат
добавляется без изменений в нормализаторе:

    @register_extractor
    class JunosExtractor(TemplateExtractor):
        source_kind = "junos"
        template_file = "junos_kv.textfsm"

Пример использования:
    extractor = get_extractor(SourceKind.GNMI)
    entries = extractor.extract(text, origin="gnmi.txt")  # List[RawEntry]
"""

import os
import re
from abc import ABC, abstractmethod
from io import StringIO
from typing import Dict, List, Type, Union

import textfsm

from ..core.exceptions import ParseError
from ..core.logging import get_logger
from ..core.models import RawEntry, SourceKind

logger = get_logger(__name__)

# Путь к папке с шаблонами
TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "..", "templates")

# Экранированные кавычка и обратный слеш в значении gNMI
GNMI_ESCAPE_RE = re.compile(r"\\([\"\\])")


class LineExtractor(ABC):
    """
    Базовый класс экстрактора строк.

    Attributes:
        source_kind: Имя источника, под которым экстрактор регистрируется
    """

    source_kind: Union[SourceKind, str] = ""

    @abstractmethod
    def extract(self, text: str, origin: str = "") -> List[RawEntry]:
        """
        Извлекает пары key/value из текста.

        Args:
            text: Содержимое файла
            origin: Имя файла (для RawEntry.origin)

        Returns:
            List[RawEntry]: Пары в порядке появления в тексте
        """


class TemplateExtractor(LineExtractor):
    """
    Экстрактор на основе TextFSM шаблона.

    Шаблон должен объявлять Value KEY и Value VALUE. Дополнительный
    Value BARE (значение без кавычек) используется, если VALUE пустой.
    """

    template_file: str = ""

    # Кэш содержимого шаблонов: {путь к шаблону: content}
    _template_cache: Dict[str, str] = {}

    def __init__(self, templates_dir: str = TEMPLATES_DIR):
        self.templates_dir = templates_dir

    def _load_template(self) -> str:
        template_path = os.path.join(self.templates_dir, self.template_file)
        if template_path not in self._template_cache:
            # utf-8-sig убирает BOM, если шаблон сохранён в Windows
            with open(template_path, "r", encoding="utf-8-sig") as f:
                self._template_cache[template_path] = f.read()
        return self._template_cache[template_path]

    def _build_fsm(self) -> textfsm.TextFSM:
        try:
            return textfsm.TextFSM(StringIO(self._load_template()))
        except textfsm.TextFSMTemplateError as e:
            raise ParseError(f"Некорректный шаблон: {e}", template=self.template_file) from e

    def extract(self, text: str, origin: str = "") -> List[RawEntry]:
        if not text or not text.strip():
            logger.debug(f"Пустой текст для извлечения: {origin or '<text>'}")
            return []

        # TextFSM хранит состояние, поэтому новый экземпляр на каждый разбор
        fsm = self._build_fsm()
        rows = fsm.ParseText(text)
        headers = [h.lower() for h in fsm.header]

        entries = []
        for row in rows:
            record = dict(zip(headers, row))
            value = record.get("value") or record.get("bare") or ""
            entries.append(RawEntry(
                key=record["key"],
                raw_value=self._clean_value(value),
                source=self._kind(),
                origin=origin,
            ))

        logger.debug(f"Извлечено пар: {len(entries)} ({self.template_file})")
        return entries

    def _clean_value(self, value: str) -> str:
        """Пост-обработка значения (по умолчанию без изменений)."""
        return value

    def _kind(self) -> Union[SourceKind, str]:
        try:
            return SourceKind(self.source_kind)
        except ValueError:
            return self.source_kind


# Реестр экстракторов: {имя источника: класс}
_EXTRACTORS: Dict[str, Type[LineExtractor]] = {}


def register_extractor(cls: Type[LineExtractor]) -> Type[LineExtractor]:
    """Регистрирует экстрактор под его source_kind (используется как декоратор)."""
    key = cls.source_kind.value if isinstance(cls.source_kind, SourceKind) else str(cls.source_kind)
    _EXTRACTORS[key] = cls
    return cls


def get_extractor(kind: Union[SourceKind, str]) -> LineExtractor:
    """
    Возвращает экстрактор для типа источника.

    Raises:
        KeyError: Если экстрактор для источника не зарегистрирован
    """
    key = kind.value if isinstance(kind, SourceKind) else str(kind)
    if key not in _EXTRACTORS:
        raise KeyError(f"Нет экстрактора для источника: {key}")
    return _EXTRACTORS[key]()


def registered_sources() -> List[str]:
    """Имена зарегистрированных источников."""
    return list(_EXTRACTORS)


@register_extractor
class GNMIExtractor(TemplateExtractor):
    """Строки "key": "value" из gNMI дампа."""

    source_kind = SourceKind.GNMI
    template_file = "gnmi_kv.textfsm"

    def _clean_value(self, value: str) -> str:
        # \" → " и \\ → \ внутри строки в кавычках
        return GNMI_ESCAPE_RE.sub(r"\1", value)


@register_extractor
class CLIExtractor(TemplateExtractor):
    """Строки key: value из вывода CLI."""

    source_kind = SourceKind.CLI
    template_file = "cli_kv.textfsm"
