"""
RoundingPolicy — Политика разрешения ничьих (tie-breaking)

Закрытое множество из двух политик:
- TO_EVEN: ничья округляется к ближайшей чётной последней цифре
- AWAY_FROM_ZERO: ничья округляется в сторону большего модуля

Политика выбирается один раз на запуск и явно передаётся в каждый вызов
округления (глобального default нет).
"""

from enum import Enum
from typing import Final


# =============================================================================
# CONSTANTS
# =============================================================================

# Первая отбрасываемая цифра, начиная с которой требуется перенос
ROUND_UP_THRESHOLD_DIGIT: Final[int] = 5

# Цифра точной ничьей
TIE_DIGIT: Final[int] = 5


# =============================================================================
# ENUMS
# =============================================================================


class RoundingPolicy(str, Enum):
    """Политика округления ничьей."""

    TO_EVEN = "TO_EVEN"
    AWAY_FROM_ZERO = "AWAY_FROM_ZERO"


# =============================================================================
# HELPERS
# =============================================================================


def requires_carry(inspected_digit: int) -> bool:
    """
    Требует ли первая отбрасываемая цифра перенос в сохраняемую часть.

    Args:
        inspected_digit: Первая отбрасываемая цифра (0-9)

    Returns:
        True если inspected_digit >= 5
    """
    return inspected_digit >= ROUND_UP_THRESHOLD_DIGIT


def should_increment(
    policy: RoundingPolicy,
    inspected_digit: int,
    kept_digit: int,
    carried_nines: int,
) -> bool:
    """
    Решение об инкременте последней сохраняемой цифры.

    Вызывается только когда inspected_digit >= 5.

    TO_EVEN инкрементирует если выполнено хотя бы одно:
    1. inspected_digit > 5 (значение строго выше ничьей)
    2. kept_digit нечётная (ничья разрешается к чётному соседу)
    3. carried_nines > 0 (перенос прошёл через девятки)

    Третье условие сохранено в точности: значение вида "x.95" при
    округлении до одной цифры всегда уходит вверх.

    Args:
        policy: Политика округления
        inspected_digit: Первая отбрасываемая цифра
        kept_digit: Цифра, которая будет инкрементирована
        carried_nines: Количество девяток, поглощённых переносом

    Returns:
        True если цифру нужно инкрементировать

    Examples:
        >>> should_increment(RoundingPolicy.TO_EVEN, 5, 4, 0)
        False
        >>> should_increment(RoundingPolicy.TO_EVEN, 5, 5, 0)
        True
        >>> should_increment(RoundingPolicy.AWAY_FROM_ZERO, 5, 4, 0)
        True
    """
    if policy == RoundingPolicy.AWAY_FROM_ZERO:
        return True

    return (
        inspected_digit > TIE_DIGIT
        or kept_digit % 2 != 0
        or carried_nines != 0
    )
