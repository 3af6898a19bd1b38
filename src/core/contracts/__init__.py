"""
Contract Validation Module

Модуль для валидации JSON отчётов прогона.
"""

from .validators import (
    ComparisonSummaryValidator,
    ContractValidator,
    SchemaLoader,
    validate_comparison_summary,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ComparisonSummaryValidator",
    # Functions
    "validate_comparison_summary",
]
