"""
DecimalString — Текстовое десятичное число

Формат: необязательный знак, одна или более целых цифр, необязательно
точка и дробные цифры. Только ASCII цифры, не более одной точки,
не более одного ведущего знака. Экспоненциальная запись не поддерживается.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Строка никогда не мутируется: округление возвращает новую строку
2. Нарушение формата — ошибка вызывающего кода, а не runtime условие
"""

import re
from dataclasses import dataclass
from typing import Final


# =============================================================================
# CONSTANTS
# =============================================================================

RADIX_POINT: Final[str] = "."

DECIMAL_STRING_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?P<sign>[+-]?)(?P<integer>[0-9]+)(?:(?P<point>\.)(?P<fraction>[0-9]*))?$"
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DecimalInvariantViolation(Exception):
    """
    Нарушение инварианта DecimalString.

    Не возникает при корректных генераторе и округлителе. При возникновении
    прогон останавливается: частичные результаты не восстанавливаются.
    """

    def __init__(self, value: str, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"{reason}: {value!r}")


class PreroundedTailViolation(DecimalInvariantViolation):
    """
    Вход содержит больше одной цифры после позиции отсечения.

    Округлитель смотрит только на одну цифру после отсечения, поэтому
    хвост входа должен быть уже корректно округлён до этой цифры.
    """


# =============================================================================
# PARSED REPRESENTATION
# =============================================================================


@dataclass(frozen=True)
class DecimalParts:
    """Разобранное десятичное число."""

    sign: str
    integer_digits: tuple[int, ...]
    fraction_digits: tuple[int, ...]
    has_point: bool

    def render(self) -> str:
        """Обратная сборка в DecimalString."""
        text = self.sign + "".join(str(d) for d in self.integer_digits)
        if self.has_point:
            text += RADIX_POINT + "".join(str(d) for d in self.fraction_digits)
        return text


@dataclass(frozen=True)
class BoundaryCase:
    """Тестовый случай: граничное значение и точность округления."""

    value: str
    precision: int


# =============================================================================
# VALIDATION
# =============================================================================


def is_decimal_string(value: str) -> bool:
    """
    Проверка формата DecimalString без exception.

    Examples:
        >>> is_decimal_string("-2.45")
        True
        >>> is_decimal_string("1e-7")
        False
        >>> is_decimal_string(".5")
        False
    """
    return isinstance(value, str) and DECIMAL_STRING_PATTERN.match(value) is not None


def parse_decimal_string(value: str) -> DecimalParts:
    """
    Разбор DecimalString на знак, целые и дробные цифры.

    Args:
        value: Текстовое десятичное число

    Returns:
        DecimalParts

    Raises:
        DecimalInvariantViolation: Если value не является DecimalString
    """
    if not isinstance(value, str):
        raise DecimalInvariantViolation(str(value), "decimal string must be str")

    match = DECIMAL_STRING_PATTERN.match(value)
    if match is None:
        raise DecimalInvariantViolation(value, "malformed decimal string")

    fraction = match.group("fraction") or ""
    return DecimalParts(
        sign=match.group("sign"),
        integer_digits=tuple(int(ch) for ch in match.group("integer")),
        fraction_digits=tuple(int(ch) for ch in fraction),
        has_point=match.group("point") is not None,
    )


def parse_float(value: str) -> float:
    """
    Конверсия сгенерированной строки в float для oracle.

    Raises:
        DecimalInvariantViolation: Если строка не DecimalString или
            не конвертируется в конечный float
    """
    parse_decimal_string(value)
    try:
        number = float(value)
    except ValueError as e:
        raise DecimalInvariantViolation(value, f"cannot convert to float ({e})") from e
    return number
