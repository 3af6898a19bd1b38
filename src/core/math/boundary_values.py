"""
Boundary Value Generator — Перебор граничных значений округления

Генерирует конечную упорядоченную последовательность BoundaryCase
(значение, точность), покрывающую для каждой точности от 0 до depth - 1
два диагностических случая первой отбрасываемой цифры:
- 4: ближайшее значение ниже ничьей (всегда округляется вниз)
- 5: сама ничья (решение зависит от политики)

Алгоритм — обход в глубину дерева дробных префиксов:
- Узел = префикс цифр + тестовый маркер на следующей позиции
- Каждый узел выдаёт два случая (маркер 4, затем маркер 5)
- Не-лист расширяется цифрой 0 и новым маркером
- Лист (позиция маркера == depth) запускает backtracking: девятки справа
  отбрасываются, первая не-девятка инкрементируется

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. precision каждого случая < depth
2. У значения ровно precision + 1 дробных цифр, последняя 4 или 5
3. Дубликатов нет, последовательность конечна
"""

from typing import Final, Iterator

from src.core.domain.decimal_string import RADIX_POINT, BoundaryCase


# =============================================================================
# CONSTANTS
# =============================================================================

MIN_DEPTH: Final[int] = 1
MAX_DEPTH: Final[int] = 14

# Тестовые маркеры: первая отбрасываемая цифра
TEST_DIGIT_BELOW_TIE: Final[int] = 4
TEST_DIGIT_TIE: Final[int] = 5

# Цифра префикса, которую нельзя инкрементировать
LAST_DIGIT: Final[int] = 9


def expected_case_count(depth: int) -> int:
    """
    Количество случаев для заданной глубины.

    10**(k-1) узлов на уровне k, по два случая на узел:
    2 * (1 + 10 + ... + 10**(depth-1)).

    Examples:
        >>> expected_case_count(1)
        2
        >>> expected_case_count(2)
        22
    """
    return 2 * (10**depth - 1) // 9


# =============================================================================
# GENERATOR
# =============================================================================


class BoundaryValueGenerator:
    """Ленивый, конечный, не перезапускаемый генератор граничных значений.

    Состояние:
    - _digits: зафиксированные дробные цифры префикса
    - _marker: тестовая цифра на позиции len(_digits) + 1 (None = конец)

    Текущая точность (позиция маркера) равна len(_digits) + 1.
    """

    def __init__(self, max_depth: int, negative: bool = False):
        """
        Args:
            max_depth: максимальное количество дробных цифр (1..14)
            negative: генерировать отрицательные значения

        Raises:
            ValueError: Если max_depth вне диапазона
        """
        if not MIN_DEPTH <= max_depth <= MAX_DEPTH:
            raise ValueError(
                f"max_depth must be in [{MIN_DEPTH}, {MAX_DEPTH}], got {max_depth}"
            )

        self.max_depth = max_depth
        self.negative = negative
        self._prefix = ("-0" if negative else "0") + RADIX_POINT
        self._digits: list[int] = []
        self._marker: int | None = TEST_DIGIT_BELOW_TIE

    @property
    def precision(self) -> int:
        """Позиция текущего маркера (1-based)."""
        return len(self._digits) + 1

    def __iter__(self) -> Iterator[BoundaryCase]:
        return self

    def __next__(self) -> BoundaryCase:
        if self._marker is None:
            raise StopIteration

        case = BoundaryCase(
            value=self._render(self._marker),
            precision=self.precision - 1,
        )

        if self._marker == TEST_DIGIT_BELOW_TIE:
            self._marker = TEST_DIGIT_TIE
        elif self.precision < self.max_depth:
            self._digits.append(0)
            self._marker = TEST_DIGIT_BELOW_TIE
        else:
            self._backtrack()

        return case

    def _backtrack(self) -> None:
        """Переход к следующему префиксу после листа."""
        while self._digits and self._digits[-1] == LAST_DIGIT:
            self._digits.pop()

        if not self._digits:
            # Все префиксы исчерпаны
            self._marker = None
            return

        self._digits[-1] += 1
        self._marker = TEST_DIGIT_BELOW_TIE

    def _render(self, test_digit: int) -> str:
        return self._prefix + "".join(str(d) for d in self._digits) + str(test_digit)
