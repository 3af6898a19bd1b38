"""Harness — прогон сравнения float-форматирования со строковым округлением.

- config: HarnessConfig и разбор аргументов
- comparator: oracle vs строковый округлитель, сводка
- cli: точка входа и замер времени
"""

from .comparator import CaseComparison, ComparisonSummary, compare_case, run_comparison
from .config import HarnessConfig, UsageError, parse_args

__all__ = [
    "CaseComparison",
    "ComparisonSummary",
    "compare_case",
    "run_comparison",
    "HarnessConfig",
    "UsageError",
    "parse_args",
]
