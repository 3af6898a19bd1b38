"""
Logging configuration для harness.

Диагностика (предупреждения, ошибки инвариантов, итоги прогона) идёт в
stderr через logging; отчёт прогона печатается в stdout.
"""

import logging
import sys

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Настройка root logger.

    Повторный вызов не добавляет handler, а только меняет уровень.

    Args:
        verbose: INFO уровень вместо WARNING

    Returns:
        Logger пакета harness
    """
    level = logging.INFO if verbose else logging.WARNING

    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger().setLevel(level)

    return logging.getLogger("src.harness")
