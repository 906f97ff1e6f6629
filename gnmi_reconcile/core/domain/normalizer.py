"""
Domain logic для нормализации значений.

Приводит сырое текстовое значение к канонической строке, чтобы
семантически равные значения (разные единицы, регистр, разделители,
точность) сравнивались как равные.

Не зависит от источника данных, работает только со строками.

Порядок шагов важен:
    1. strip()
    2. lower(), удалить "_"
    3. удалить ","
    4-5. число + единица → конвертация (KB/MB/GB → байты, bps → Mbps, G → биты, % → число)
    6. legacy fix-up литерала "400"
    7. "43.00" → "43"
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Optional

from ..constants import (
    UNIT_MULTIPLIERS,
    UNIT_DIVISORS,
    STRIPPED_UNITS,
    CASE_SENSITIVE_UNIT_ALIASES,
    LEGACY_LITERAL_FIXUPS,
)

# Число (цифры/точки) и сразу за ним единица до конца строки
NUMBER_WITH_UNIT_RE = re.compile(r"^([0-9.]+)([A-Za-z%]+)$")

# Десятичное число с нулевой дробной частью: 43.00, 43.
ZERO_FRACTION_RE = re.compile(r"^([+-]?[0-9]+)\.0*$")


def _truncate(number: str) -> Optional[int]:
    """Целая часть числа (усечение к нулю) или None если не число."""
    try:
        return int(Decimal(number))
    except (InvalidOperation, ValueError):
        return None


class ValueNormalizer:
    """
    Нормализация значений для сравнения gNMI и CLI.

    Никогда не выбрасывает исключений: всё, что не удалось распознать
    как число с единицей, проходит без конвертации.

    Example:
        normalizer = ValueNormalizer()
        normalizer.normalize("1KB")        # "1024"
        normalizer.normalize("1,048,576")  # "1048576"
        normalizer.normalize("ENABLED")    # "enabled"
        normalizer.normalize("43.00")      # "43"
    """

    def __init__(self, legacy_literal_fixup: bool = True):
        """
        Инициализация нормализатора.

        Args:
            legacy_literal_fixup: Применять исторический fix-up "400" → 400G
        """
        self.legacy_literal_fixup = legacy_literal_fixup

    def normalize(self, raw: Optional[str]) -> str:
        """
        Нормализует одно значение.

        Args:
            raw: Сырое значение (None = пустая строка)

        Returns:
            str: Каноническое значение
        """
        if raw is None:
            return ""

        stripped = str(raw).strip()
        # Версия с сохранённым регистром нужна только для Gb/GB
        cased = stripped.replace("_", "").replace(",", "")
        value = stripped.lower().replace("_", "").replace(",", "")

        value = self._convert_units(value, cased)

        # Fix-up идёт до удаления нулевой дробной части: "400.0" даёт "400", а не 400G
        if self.legacy_literal_fixup:
            value = LEGACY_LITERAL_FIXUPS.get(value, value)

        return self._strip_zero_fraction(value)

    def _convert_units(self, value: str, cased: str) -> str:
        """
        Конвертирует "число+единица" в число.

        Args:
            value: Значение после lower() и удаления разделителей
            cased: То же значение без lower()

        Returns:
            str: Сконвертированное значение или value без изменений
        """
        match = NUMBER_WITH_UNIT_RE.match(cased)
        if not match:
            return value

        number, token = match.groups()
        unit = CASE_SENSITIVE_UNIT_ALIASES.get(token, token.lower())

        if unit in STRIPPED_UNITS:
            return number

        multiplier = UNIT_MULTIPLIERS.get(unit)
        divisor = UNIT_DIVISORS.get(unit)
        if multiplier is None and divisor is None:
            # Неизвестная единица остаётся как есть
            return value

        magnitude = _truncate(number)
        if magnitude is None:
            return value

        converted = magnitude * multiplier if multiplier is not None else magnitude // divisor
        try:
            return str(converted)
        except ValueError:
            # Число длиннее лимита int → str (sys.set_int_max_str_digits)
            return value

    @staticmethod
    def _strip_zero_fraction(value: str) -> str:
        match = ZERO_FRACTION_RE.match(value)
        if match:
            return match.group(1)
        return value


_default_normalizer = ValueNormalizer()


def normalize_value(raw: Optional[str]) -> str:
    """
    Нормализует значение с настройками по умолчанию.

    Example:
        normalize_value("85%") == normalize_value("85")  # True
    """
    return _default_normalizer.normalize(raw)
