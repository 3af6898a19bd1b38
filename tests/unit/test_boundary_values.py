"""Тесты для Boundary Value Generator.

Coverage:
- Сценарий глубины 1 (два случая)
- Порядок обхода и backtracking через девятки
- Инварианты: precision < depth, последняя цифра 4/5, без дубликатов
- Конечность и количество случаев
- Отрицательные значения
- Валидация глубины
"""

import pytest

from src.core.domain.decimal_string import BoundaryCase
from src.core.math.boundary_values import (
    MAX_DEPTH,
    MIN_DEPTH,
    BoundaryValueGenerator,
    expected_case_count,
)


def _pairs(generator: BoundaryValueGenerator) -> list[tuple[str, int]]:
    return [(case.value, case.precision) for case in generator]


class TestBoundaryValueGenerator:
    """Тесты генератора граничных значений."""

    def test_depth_one_yields_two_cases(self):
        """Глубина 1: ровно ("0.4", 0), ("0.5", 0)."""
        assert _pairs(BoundaryValueGenerator(1)) == [("0.4", 0), ("0.5", 0)]

    def test_depth_two_order(self):
        """Глубина 2: узел уровня 1, затем все префиксы 0..9."""
        pairs = _pairs(BoundaryValueGenerator(2))

        assert pairs[:6] == [
            ("0.4", 0),
            ("0.5", 0),
            ("0.04", 1),
            ("0.05", 1),
            ("0.14", 1),
            ("0.15", 1),
        ]
        assert pairs[-2:] == [("0.94", 1), ("0.95", 1)]
        assert len(pairs) == 22

    def test_backtrack_over_trailing_nines(self):
        """После листа с префиксом '09' следующий префикс — '1'."""
        pairs = _pairs(BoundaryValueGenerator(3))

        index = pairs.index(("0.095", 2))
        assert pairs[index + 1] == ("0.14", 1)
        assert pairs[index + 3] == ("0.104", 2)

    def test_yields_boundary_case_records(self):
        case = next(BoundaryValueGenerator(2))
        assert case == BoundaryCase(value="0.4", precision=0)

    @pytest.mark.parametrize("depth", [1, 2, 3, 4])
    def test_case_count(self, depth):
        """Количество случаев 2 * (10**depth - 1) / 9."""
        assert len(_pairs(BoundaryValueGenerator(depth))) == expected_case_count(depth)

    def test_expected_case_count_values(self):
        assert expected_case_count(1) == 2
        assert expected_case_count(2) == 22
        assert expected_case_count(3) == 222

    @pytest.mark.parametrize("negative", [False, True])
    def test_invariants(self, negative):
        """precision < depth, ровно precision + 1 дробных цифр, последняя 4 или 5."""
        depth = 4
        pairs = _pairs(BoundaryValueGenerator(depth, negative=negative))
        prefix = "-0." if negative else "0."

        for value, precision in pairs:
            assert value.startswith(prefix)
            fraction = value[len(prefix):]
            assert 0 <= precision < depth
            assert len(fraction) == precision + 1
            assert fraction[-1] in ("4", "5")

        assert len(set(pairs)) == len(pairs)

    def test_each_node_yields_four_then_five(self):
        """Случаи идут парами: prefix + '4', затем prefix + '5'."""
        pairs = _pairs(BoundaryValueGenerator(3))

        for (below, p_below), (tie, p_tie) in zip(pairs[::2], pairs[1::2]):
            assert below[-1] == "4" and tie[-1] == "5"
            assert below[:-1] == tie[:-1]
            assert p_below == p_tie

    def test_negative_values(self):
        assert _pairs(BoundaryValueGenerator(1, negative=True)) == [
            ("-0.4", 0),
            ("-0.5", 0),
        ]

    def test_terminates_and_stays_exhausted(self):
        """Последовательность конечна и не перезапускается."""
        generator = BoundaryValueGenerator(2)
        assert iter(generator) is generator

        list(generator)
        with pytest.raises(StopIteration):
            next(generator)
        assert list(generator) == []

    def test_precision_property_tracks_marker(self):
        generator = BoundaryValueGenerator(3)
        assert generator.precision == 1
        next(generator)
        next(generator)
        assert generator.precision == 2

    @pytest.mark.parametrize("depth", [0, -1, MAX_DEPTH + 1])
    def test_invalid_depth_raises(self, depth):
        with pytest.raises(ValueError, match="max_depth must be in"):
            BoundaryValueGenerator(depth)

    def test_depth_bounds_accepted(self):
        assert BoundaryValueGenerator(MIN_DEPTH).max_depth == MIN_DEPTH

        generator = BoundaryValueGenerator(MAX_DEPTH)
        values = [next(generator) for _ in range(2 * MAX_DEPTH)]
        assert values[-1] == BoundaryCase(value="0." + "0" * (MAX_DEPTH - 1) + "5", precision=MAX_DEPTH - 1)
