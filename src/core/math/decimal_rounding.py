"""
Decimal Rounding — Строковое округление десятичных чисел

Округление выполняется только манипуляцией цифрами текстового
представления, без обратной конверсии в float:
- Паддинг нулями при недостатке дробных цифр
- Перенос через серии девяток (дробная часть, точка, целая часть)
- Новая ведущая "1" если перенос поглотил все цифры (знак сохраняется)
- Выбор политики ничьей (TO_EVEN / AWAY_FROM_ZERO)

ПРЕДУСЛОВИЕ (pre-rounded tail):
Округлитель смотрит ровно на одну цифру после отсечения. Результат корректен
только если хвост входа уже правильно округлён до этой цифры (например,
строка получена форматированием float). Сырое длинное разложение может быть
классифицировано неверно: "2.949999" до сотых видит '9' и даёт "2.95".
Проверка предусловия включается через DecimalRoundingConfig.
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Final

from src.core.domain.decimal_string import (
    DecimalParts,
    PreroundedTailViolation,
    parse_decimal_string,
)
from src.core.domain.policy import RoundingPolicy, requires_carry, should_increment


# =============================================================================
# CONSTANTS
# =============================================================================

# Сколько цифр после позиции отсечения анализирует округлитель
LOOKAHEAD_DIGITS: Final[int] = 1

_POW10_TABLE: Final[tuple[float, ...]] = (
    1.0,
    10.0,
    100.0,
    1000.0,
    10000.0,
    100000.0,
    1000000.0,
    10000000.0,
    100000000.0,
    1000000000.0,
    10000000000.0,
    100000000000.0,
)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class DecimalRoundingConfig:
    """Конфигурация строкового округлителя.

    require_prerounded_tail: проверять, что после позиции отсечения
    не более LOOKAHEAD_DIGITS цифр (иначе PreroundedTailViolation)
    """

    require_prerounded_tail: bool = False


# =============================================================================
# STRING ROUNDING
# =============================================================================


def round_decimal_string(
    value: str,
    precision: int,
    policy: RoundingPolicy,
    *,
    require_prerounded_tail: bool = False,
) -> str:
    """
    Округление дробной части DecimalString до precision цифр.

    Args:
        value: Текстовое десятичное число (см. DecimalString)
        precision: Количество сохраняемых дробных цифр (>= 0)
        policy: Политика разрешения ничьей
        require_prerounded_tail: Проверять предусловие pre-rounded tail

    Returns:
        Новая строка ровно с precision дробными цифрами (при 0 точка
        удаляется, если она была во входе, и добавляется, если её не было)

    Raises:
        ValueError: Если precision < 0
        DecimalInvariantViolation: Если value не является DecimalString
        PreroundedTailViolation: Если проверка включена и хвост длиннее
            одной цифры после отсечения

    Examples:
        >>> round_decimal_string("2.45", 1, RoundingPolicy.TO_EVEN)
        '2.4'
        >>> round_decimal_string("-9.99", 1, RoundingPolicy.AWAY_FROM_ZERO)
        '-10.0'
        >>> round_decimal_string("5", 2, RoundingPolicy.TO_EVEN)
        '5.00'
    """
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")

    parts = parse_decimal_string(value)

    if not parts.has_point:
        # Без точки: точка добавляется всегда, даже при precision 0
        return DecimalParts(
            sign=parts.sign,
            integer_digits=parts.integer_digits,
            fraction_digits=(0,) * precision,
            has_point=True,
        ).render()

    fraction = list(parts.fraction_digits)

    if len(fraction) <= precision:
        # Решение об округлении не требуется: только паддинг
        fraction.extend([0] * (precision - len(fraction)))
        return _compose(parts.sign, list(parts.integer_digits), fraction)

    if require_prerounded_tail and len(fraction) > precision + LOOKAHEAD_DIGITS:
        raise PreroundedTailViolation(
            value,
            f"more than {LOOKAHEAD_DIGITS} digit(s) after precision {precision}",
        )

    inspected = fraction[precision]
    # Рабочий буфер: целые цифры + сохраняемые дробные цифры
    digits = list(parts.integer_digits) + fraction[:precision]
    int_len = len(parts.integer_digits)

    if requires_carry(inspected):
        # Серия девяток справа поглощается переносом
        nines = 0
        while nines < len(digits) and digits[-1 - nines] == 9:
            nines += 1

        pos = len(digits) - 1 - nines
        if pos < 0:
            digits = [1] + [0] * len(digits)
            int_len += 1
        elif should_increment(policy, inspected, digits[pos], nines):
            digits[pos] += 1
            for i in range(pos + 1, len(digits)):
                digits[i] = 0

    return _compose(parts.sign, digits[:int_len], digits[int_len:])


def _compose(sign: str, integer_digits: list[int], fraction_digits: list[int]) -> str:
    """Сборка результата; точка опускается при пустой дробной части."""
    return DecimalParts(
        sign=sign,
        integer_digits=tuple(integer_digits),
        fraction_digits=tuple(fraction_digits),
        has_point=bool(fraction_digits),
    ).render()


class DecimalRounder:
    """Строковый округлитель с фиксированной конфигурацией.

    Используется драйвером сравнения; политика передаётся в каждый вызов.
    """

    def __init__(self, config: DecimalRoundingConfig | None = None):
        """
        Args:
            config: конфигурация округлителя (опционально, используется default)
        """
        self.config = config or DecimalRoundingConfig()

    def round(self, value: str, precision: int, policy: RoundingPolicy) -> str:
        """Округление value до precision дробных цифр по policy."""
        return round_decimal_string(
            value,
            precision,
            policy,
            require_prerounded_tail=self.config.require_prerounded_tail,
        )


# =============================================================================
# FLOAT HELPERS
# =============================================================================


def float_to_decimal_string(number: float) -> str:
    """
    Кратчайшее round-trip представление float в позиционной записи.

    В отличие от str(), никогда не использует экспоненту.

    Raises:
        ValueError: Если number равен NaN или Inf

    Examples:
        >>> float_to_decimal_string(2.95)
        '2.95'
        >>> float_to_decimal_string(1e-7)
        '0.0000001'
        >>> float_to_decimal_string(1e16)
        '10000000000000000'
    """
    if not math.isfinite(number):
        raise ValueError(f"number must be finite, got {number}")

    return format(Decimal(str(number)), "f")


def round_float_text(number: float, precision: int, policy: RoundingPolicy) -> str:
    """
    Округление float до precision дробных цифр через строковое округление.

    Кратчайшее представление float служит корректно округлённым хвостом
    для round_decimal_string. NaN/Inf возвращаются как текст без изменений.

    Examples:
        >>> round_float_text(2.95, 1, RoundingPolicy.TO_EVEN)
        '3.0'
        >>> round_float_text(-2.95, 1, RoundingPolicy.TO_EVEN)
        '-3.0'
    """
    if not math.isfinite(number):
        return str(number)

    return round_decimal_string(float_to_decimal_string(number), precision, policy)


def pow10(n: int) -> float:
    """10**n как float; табличные значения для малых n."""
    if 0 <= n < len(_POW10_TABLE):
        return _POW10_TABLE[n]
    return 10.0**n


def round_digit(number: float, precision: int) -> float:
    """
    Наивное округление float через умножение на 10**precision.

    Округление половины от нуля. Не всегда корректно из-за двоичного
    представления (произведение само по себе округляется).

    Examples:
        >>> round_digit(2.5, 0)
        3.0
        >>> round_digit(-2.5, 0)
        -3.0
    """
    if not math.isfinite(number):
        return number

    n = pow10(precision)
    scaled = abs(number * n)
    # scaled - floor(scaled) точно представимо, в отличие от scaled + 0.5
    whole = math.floor(scaled)
    if scaled - whole >= 0.5:
        whole += 1
    return math.copysign(whole, number) / n


def trunc_digit(number: float, precision: int) -> float:
    """
    Усечение float до precision дробных цифр (к нулю).

    Examples:
        >>> trunc_digit(2.99, 1)
        2.9
        >>> trunc_digit(-2.99, 1)
        -2.9
    """
    if not math.isfinite(number):
        return number

    n = pow10(precision)
    return math.trunc(number * n) / n
