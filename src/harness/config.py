"""
HarnessConfig — Конфигурация прогона сравнения

Immutable Pydantic модель параметров прогона и разбор аргументов
командной строки:

    rounding-harness [-v][-n][-a][-e][-j][depth = 1..14]

- depth: максимальное количество дробных цифр (default 6)
- -v: печатать каждый случай
- -n: отрицательные значения
- -e: политика TO_EVEN (default), -a: AWAY_FROM_ZERO (последний флаг побеждает)
- -j: дополнительно печатать сводку в JSON

Неизвестная опция — предупреждение, прогон продолжается.
Некорректная глубина — UsageError, прогон не выполняется.
"""

import argparse
import logging
from typing import Sequence

from pydantic import BaseModel, Field, ValidationError

from src.core.domain.policy import RoundingPolicy
from src.core.math.boundary_values import MAX_DEPTH, MIN_DEPTH


logger = logging.getLogger(__name__)

DEFAULT_DEPTH = 6

USAGE = f"Usage: rounding-harness [-v][-n][-a][-e][-j][depth = {MIN_DEPTH}..{MAX_DEPTH}]"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UsageError(Exception):
    """Некорректные аргументы командной строки."""


# =============================================================================
# CONFIG
# =============================================================================


class HarnessConfig(BaseModel):
    """Параметры прогона сравнения."""

    depth: int = Field(
        DEFAULT_DEPTH, ge=MIN_DEPTH, le=MAX_DEPTH, description="Максимум дробных цифр"
    )
    verbose: bool = Field(False, description="Печатать каждый случай")
    negative: bool = Field(False, description="Отрицательные значения")
    policy: RoundingPolicy = Field(
        RoundingPolicy.TO_EVEN, description="Политика разрешения ничьей"
    )
    json_summary: bool = Field(False, description="Сводка в JSON")

    model_config = {"frozen": True}


# =============================================================================
# ARGUMENT PARSING
# =============================================================================


# Флаги, распознаваемые только при точном совпадении токена
KNOWN_FLAGS = ("-v", "-n", "-j", "-e", "-a")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rounding-harness",
        usage=USAGE,
        add_help=False,
        allow_abbrev=False,
        exit_on_error=False,
        description="Compare float fixed-precision formatting with string rounding.",
    )
    parser.add_argument("-v", dest="verbose", action="store_true")
    parser.add_argument("-n", dest="negative", action="store_true")
    parser.add_argument("-j", dest="json_summary", action="store_true")
    parser.add_argument(
        "-e", dest="policy", action="store_const", const=RoundingPolicy.TO_EVEN
    )
    parser.add_argument(
        "-a", dest="policy", action="store_const", const=RoundingPolicy.AWAY_FROM_ZERO
    )
    return parser


def parse_args(argv: Sequence[str]) -> HarnessConfig:
    """
    Разбор аргументов командной строки в HarnessConfig.

    Флаг распознаётся только при точном совпадении токена: "-vx" или "-v1"
    считаются неизвестными опциями, а не кластером флагов.

    Args:
        argv: Аргументы без имени программы

    Returns:
        HarnessConfig

    Raises:
        UsageError: Если depth не целое число в диапазоне 1..14
            (повторная глубина переопределяет предыдущую)
    """
    flags: list[str] = []
    depth_tokens: list[str] = []
    for token in argv:
        if token in KNOWN_FLAGS:
            flags.append(token)
        elif token.startswith("-"):
            logger.warning("unknown -option '%s'", token)
        else:
            depth_tokens.append(token)

    try:
        namespace = _build_parser().parse_args(flags)
    except argparse.ArgumentError as e:
        raise UsageError(str(e)) from e

    fields = {
        "verbose": namespace.verbose,
        "negative": namespace.negative,
        "json_summary": namespace.json_summary,
    }
    if namespace.policy is not None:
        fields["policy"] = namespace.policy

    # Повторная глубина переопределяет предыдущую
    for token in depth_tokens:
        if not (token.isascii() and token.isdigit()):
            raise UsageError(f"depth must be an integer, got {token!r}")
        depth = int(token)
        if not MIN_DEPTH <= depth <= MAX_DEPTH:
            raise UsageError(f"depth must be in [{MIN_DEPTH}, {MAX_DEPTH}], got {depth}")
        fields["depth"] = depth

    try:
        return HarnessConfig(**fields)
    except ValidationError as e:
        raise UsageError(str(e)) from e
