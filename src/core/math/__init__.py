"""
Core math modules

Строковое округление десятичных чисел и генерация граничных значений.
"""

# Decimal Rounding
from src.core.math.decimal_rounding import (
    LOOKAHEAD_DIGITS,
    DecimalRounder,
    DecimalRoundingConfig,
    float_to_decimal_string,
    pow10,
    round_decimal_string,
    round_digit,
    round_float_text,
    trunc_digit,
)

# Boundary Values
from src.core.math.boundary_values import (
    MAX_DEPTH,
    MIN_DEPTH,
    TEST_DIGIT_BELOW_TIE,
    TEST_DIGIT_TIE,
    BoundaryValueGenerator,
    expected_case_count,
)

__all__ = [
    # Decimal Rounding — Constants
    "LOOKAHEAD_DIGITS",
    # Decimal Rounding — Types
    "DecimalRounder",
    "DecimalRoundingConfig",
    # Decimal Rounding — Functions
    "float_to_decimal_string",
    "pow10",
    "round_decimal_string",
    "round_digit",
    "round_float_text",
    "trunc_digit",
    # Boundary Values — Constants
    "MAX_DEPTH",
    "MIN_DEPTH",
    "TEST_DIGIT_BELOW_TIE",
    "TEST_DIGIT_TIE",
    # Boundary Values — Types
    "BoundaryValueGenerator",
    # Boundary Values — Functions
    "expected_case_count",
]
