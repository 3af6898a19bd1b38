"""
Domain models and value objects.

Contains DecimalString parsing, boundary test cases and the rounding policy.
"""

from src.core.domain.decimal_string import (
    DECIMAL_STRING_PATTERN,
    RADIX_POINT,
    BoundaryCase,
    DecimalInvariantViolation,
    DecimalParts,
    PreroundedTailViolation,
    is_decimal_string,
    parse_decimal_string,
    parse_float,
)
from src.core.domain.policy import (
    ROUND_UP_THRESHOLD_DIGIT,
    TIE_DIGIT,
    RoundingPolicy,
    requires_carry,
    should_increment,
)

__all__ = [
    # DecimalString
    "DECIMAL_STRING_PATTERN",
    "RADIX_POINT",
    "BoundaryCase",
    "DecimalParts",
    "DecimalInvariantViolation",
    "PreroundedTailViolation",
    "is_decimal_string",
    "parse_decimal_string",
    "parse_float",
    # Policy
    "ROUND_UP_THRESHOLD_DIGIT",
    "TIE_DIGIT",
    "RoundingPolicy",
    "requires_carry",
    "should_increment",
]
