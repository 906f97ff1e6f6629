"""
Константы нормализации и отчёта.

Таблица единиц измерения, legacy fix-up и фиксированные строки отчёта.
"""

from typing import Dict

# Множители для перевода в байты / биты.
# Ключ: токен единицы после lower(), значение: множитель.
UNIT_MULTIPLIERS: Dict[str, int] = {
    "kb": 1024,
    "kbyte": 1024,
    "mb": 1024 * 1024,
    "mbyte": 1024 * 1024,
    "gb": 1024 * 1024 * 1024,
    "gbyte": 1024 * 1024 * 1024,
    "g": 1_000_000_000,  # гигабиты → биты
}

# Делители (bps → Mbps)
UNIT_DIVISORS: Dict[str, int] = {
    "bps": 1000,
}

# Единицы которые просто отбрасываются (число без изменений)
STRIPPED_UNITS = {"%"}

# Токены, регистр которых значим: "Gb" означает гигабиты (сетевая нотация),
# "GB" гигабайты. Значение: токен из UNIT_MULTIPLIERS.
CASE_SENSITIVE_UNIT_ALIASES: Dict[str, str] = {
    "Gb": "g",
}

# Legacy fix-up: значение "400" в исторических отчётах означает 400G
LEGACY_LITERAL_FIXUPS: Dict[str, str] = {
    "400": str(400 * 1_000_000_000),
}

# === Отчёт ===

DEFAULT_REPORT_FILE = "comparison_report.txt"

REPORT_RULE = "=" * 50
REPORT_DELIMITER = "-" * 50

REPORT_HEADER = (
    REPORT_RULE,
    "gNMI vs CLI Comparison Report",
    REPORT_RULE,
)

RESULTS_TITLE = "Comparison Results:"
SUMMARY_ALL_MATCH = "All values match. No discrepancies found."
SUMMARY_DIFFERENCES = "Differences found between gNMI and CLI outputs."
