"""
Comparator — Сравнение float-форматирования со строковым округлением

Для каждого BoundaryCase:
1. Строка конвертируется в float (ошибка = дефект генератора, фатально)
2. Oracle: стандартное форматирование format(x, ".{p}f")
3. Строковое округление DecimalRounder.round(value, p, policy)
4. Совпадение строк — успех, расхождение — mismatch

Расхождение — измеряемый сигнал, а не ошибка. Случаи независимы:
compare_case — чистая функция одного случая.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional

from src.core.domain.decimal_string import BoundaryCase, parse_float
from src.core.domain.policy import RoundingPolicy
from src.core.math.decimal_rounding import DecimalRounder, round_float_text


logger = logging.getLogger(__name__)

MATCH = "=="
MISMATCH = "<>"

VERBOSE_HEADER = "'original value' :'precision': 'Display-rounded' <> 'expected'"


# =============================================================================
# RESULTS
# =============================================================================


@dataclass(frozen=True)
class CaseComparison:
    """Результат сравнения одного случая."""

    case: BoundaryCase
    rendered: str  # oracle: стандартное форматирование float
    rounded: str  # строковое округление

    @property
    def matches(self) -> bool:
        return self.rendered == self.rounded

    def format_line(self) -> str:
        """Строка verbose вывода: value:precision: rendered <cmp> rounded."""
        comparator = MATCH if self.matches else MISMATCH
        return (
            f"{self.case.value:<8}:{self.case.precision}: "
            f"{self.rendered} {comparator} {self.rounded}"
        )


@dataclass(frozen=True)
class ComparisonSummary:
    """Итог прогона сравнения."""

    depth: int
    negative: bool
    policy: RoundingPolicy
    total: int
    mismatches: int

    @property
    def mismatch_percentage(self) -> str:
        """
        Доля расхождений в процентах, одна дробная цифра.

        Вычисляется тем же строковым округлителем (AWAY_FROM_ZERO).
        """
        if self.total == 0:
            return "0.0"
        return round_float_text(
            100.0 * self.mismatches / self.total, 1, RoundingPolicy.AWAY_FROM_ZERO
        )

    def format_line(self) -> str:
        return (
            f"\n=> {self.mismatches} / {self.total} error(s) for depth 0-{self.depth}, "
            f"so {self.mismatch_percentage} %"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация по контракту comparison_summary."""
        return {
            "depth": self.depth,
            "negative": self.negative,
            "policy": self.policy.value,
            "total": self.total,
            "mismatches": self.mismatches,
            "mismatch_percentage": self.mismatch_percentage,
        }


# =============================================================================
# COMPARISON
# =============================================================================


def render_fixed(number: float, precision: int) -> str:
    """Стандартное форматирование float с фиксированной точностью (oracle)."""
    return format(number, f".{precision}f")


def compare_case(
    case: BoundaryCase,
    policy: RoundingPolicy,
    rounder: DecimalRounder | None = None,
) -> CaseComparison:
    """
    Сравнение одного случая.

    Args:
        case: Граничное значение и точность
        policy: Политика округления для строкового округлителя
        rounder: Округлитель (опционально, используется default)

    Returns:
        CaseComparison

    Raises:
        DecimalInvariantViolation: Если значение не конвертируется в float
    """
    rounder = rounder or DecimalRounder()
    number = parse_float(case.value)
    return CaseComparison(
        case=case,
        rendered=render_fixed(number, case.precision),
        rounded=rounder.round(case.value, case.precision, policy),
    )


def run_comparison(
    cases: Iterable[BoundaryCase],
    policy: RoundingPolicy,
    depth: int,
    negative: bool = False,
    rounder: DecimalRounder | None = None,
    on_case: Optional[Callable[[CaseComparison], None]] = None,
) -> ComparisonSummary:
    """
    Прогон сравнения по всей последовательности случаев.

    Нет частичного восстановления: либо все случаи вычислены,
    либо прогон остановлен исключением.

    Args:
        cases: Последовательность случаев (обычно BoundaryValueGenerator)
        policy: Политика округления
        depth: Глубина генерации (для сводки)
        negative: Знак значений (для сводки)
        rounder: Округлитель (опционально)
        on_case: Callback для каждого результата (verbose вывод)

    Returns:
        ComparisonSummary
    """
    rounder = rounder or DecimalRounder()
    total = 0
    mismatches = 0

    for case in cases:
        result = compare_case(case, policy, rounder)
        total += 1
        if not result.matches:
            mismatches += 1
            logger.debug(
                "mismatch %s at precision %d: rendered=%s rounded=%s",
                case.value,
                case.precision,
                result.rendered,
                result.rounded,
            )
        if on_case is not None:
            on_case(result)

    logger.info("compared %d case(s), %d mismatch(es)", total, mismatches)
    return ComparisonSummary(
        depth=depth,
        negative=negative,
        policy=policy,
        total=total,
        mismatches=mismatches,
    )
