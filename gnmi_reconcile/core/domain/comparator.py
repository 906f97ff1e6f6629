"""
Domain Layer для сравнения источников.

Чистая функция сравнения: не читает файлы и не пишет отчёты.
Принимает два SourceMapping, возвращает ComparisonResult.

Пример использования:
    from gnmi_reconcile.core.domain.comparator import SourceComparator

    comparator = SourceComparator()
    result = comparator.compare(gnmi_mapping, cli_mapping)

    print(result.summary())
    print(result.all_match)
"""

from ..models import (
    ComparisonResult,
    KeyOutcome,
    OutcomeType,
    SourceMapping,
)


class SourceComparator:
    """
    Компаратор gNMI ↔ CLI.

    Порядок результатов:
    1. Ключи gNMI в порядке gNMI: MATCH / MISSING_IN_CLI / DISCREPANCY
    2. Ключи только из CLI в порядке CLI: MISSING_IN_GNMI

    Example:
        comparator = SourceComparator(strict_missing_in_cli=False)
        result = comparator.compare(gnmi, cli)
        for item in result.by_type(OutcomeType.DISCREPANCY):
            print(item)
    """

    def __init__(self, strict_missing_in_cli: bool = False):
        """
        Args:
            strict_missing_in_cli: Считать ключи без пары в CLI расхождением
        """
        self.strict_missing_in_cli = strict_missing_in_cli

    def compare(self, gnmi: SourceMapping, cli: SourceMapping) -> ComparisonResult:
        """
        Сравнивает два отображения.

        Args:
            gnmi: Нормализованные значения gNMI
            cli: Нормализованные значения CLI (после слияния файлов)

        Returns:
            ComparisonResult: Результаты по всем ключам
        """
        result = ComparisonResult(strict_missing_in_cli=self.strict_missing_in_cli)

        for key, gnmi_value in gnmi.items():
            if key not in cli:
                result.outcomes.append(KeyOutcome(
                    key=key,
                    outcome=OutcomeType.MISSING_IN_CLI,
                    gnmi_value=gnmi_value,
                ))
                continue

            cli_value = cli[key]
            outcome = OutcomeType.MATCH if gnmi_value == cli_value else OutcomeType.DISCREPANCY
            result.outcomes.append(KeyOutcome(
                key=key,
                outcome=outcome,
                gnmi_value=gnmi_value,
                cli_value=cli_value,
            ))

        for key, cli_value in cli.items():
            if key not in gnmi:
                result.outcomes.append(KeyOutcome(
                    key=key,
                    outcome=OutcomeType.MISSING_IN_GNMI,
                    cli_value=cli_value,
                ))

        return result
