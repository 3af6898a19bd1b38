"""
CLI — Точка входа прогона сравнения

Обнаруживает расхождения стандартного форматирования float с фиксированной
точностью и строкового округления на граничных значениях.

Usage: rounding-harness [-v][-n][-a][-e][-j][depth]

Коды возврата:
- 0: прогон выполнен (расхождения — результат, а не ошибка)
- 1: нарушение внутреннего инварианта, прогон остановлен
- 2: некорректные аргументы, прогон не выполнялся
"""

import json
import logging
import sys
import time
from typing import Optional, Sequence

from src.core.contracts import validate_comparison_summary
from src.core.domain.decimal_string import DecimalInvariantViolation
from src.core.math.boundary_values import BoundaryValueGenerator
from src.harness.comparator import VERBOSE_HEADER, CaseComparison, run_comparison
from src.harness.config import USAGE, HarnessConfig, UsageError, parse_args
from src.harness.logging_config import setup_logging


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVARIANT_VIOLATION = 1
EXIT_USAGE = 2


def find_issues(config: HarnessConfig) -> dict:
    """
    Прогон сравнения по конфигурации с выводом отчёта в stdout.

    Returns:
        Сводка прогона (контракт comparison_summary) без elapsed_seconds
    """
    cases = BoundaryValueGenerator(config.depth, negative=config.negative)

    def _print_case(result: CaseComparison) -> None:
        print(result.format_line())

    if config.verbose:
        print(VERBOSE_HEADER)

    summary = run_comparison(
        cases,
        config.policy,
        depth=config.depth,
        negative=config.negative,
        on_case=_print_case if config.verbose else None,
    )
    print(summary.format_line())
    return summary.to_dict()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Точка входа CLI.

    Args:
        argv: Аргументы без имени программы (default: sys.argv[1:])

    Returns:
        Код возврата процесса
    """
    setup_logging()
    if argv is None:
        argv = sys.argv[1:]

    try:
        config = parse_args(argv)
    except UsageError as e:
        logger.debug("usage error: %s", e)
        print(USAGE)
        return EXIT_USAGE

    setup_logging(config.verbose)

    start = time.perf_counter()
    try:
        summary = find_issues(config)
    except DecimalInvariantViolation as e:
        logger.critical("invariant violation, run aborted: %s", e)
        return EXIT_INVARIANT_VIOLATION
    elapsed = time.perf_counter() - start

    if config.json_summary:
        summary["elapsed_seconds"] = elapsed
        validate_comparison_summary(summary)
        print(json.dumps(summary, indent=2))

    print(f"elapsed time: {elapsed:.3f} s")
    return EXIT_OK
