"""
BigInteger Demo — демонстрация API из командной строки

Создаёт примеры значений, вызывает каждую операцию хотя бы один раз
и печатает подписанные результаты в stdout. Ошибка разбора входных
данных печатается в stderr, код возврата 1.

Usage:
    python -m src.cli [--text T] [--int64 N] [--multiplier M] [--log-level L]
"""

import argparse
import sys
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO

from src.core.domain.big_integer import INT64_MAX, BigInteger
from src.core.logging_config import setup_logging


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class DemoConfig:
    """Конфигурация демо: входные значения и уровень логирования."""

    text: str = "-12345678901234567890"
    int64_value: int = INT64_MAX
    multiplier: int = 12345
    log_level: str = "WARNING"


# =============================================================================
# DEMO
# =============================================================================


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def run_demo(config: DemoConfig, out: TextIO) -> None:
    """
    Печать результатов всех операций.

    Args:
        config: Входные значения
        out: Поток для вывода

    Raises:
        InvalidFormat: Если config.text не является десятичным целым
        ValueError: Если int64_value или multiplier вне диапазона int64
    """
    default_value = BigInteger()
    print(f"Default constructor: {default_value}", file=out)

    from_str = BigInteger.from_decimal_string(config.text)
    print(f"Constructor from string: {from_str}", file=out)

    from_int64 = BigInteger.from_int64(config.int64_value)
    print(f"Constructor from int64: {from_int64}", file=out)

    total = from_str + from_int64
    print(f"Addition: {from_str} + {from_int64} = {total}", file=out)

    difference = from_str - from_int64
    print(f"Subtraction: {from_str} - {from_int64} = {difference}", file=out)

    product = from_str * from_int64
    print(f"Multiplication: {from_str} * {from_int64} = {product}", file=out)

    negation = -from_str
    print(f"Unary minus: -({from_str}) = {negation}", file=out)

    compound_add = BigInteger()
    compound_add += from_int64
    print(f"Compound addition (+=): {compound_add}", file=out)

    compound_subtract = from_int64
    compound_subtract -= from_str
    print(f"Compound subtraction (-=): {compound_subtract}", file=out)

    compound_multiply = BigInteger.from_int64(config.multiplier)
    compound_multiply *= from_str
    print(f"Compound multiplication (*=): {compound_multiply}", file=out)

    print(f"Equality (==): {_bool_text(from_int64 == from_str)}", file=out)
    print(f"Inequality (!=): {_bool_text(from_int64 != from_str)}", file=out)
    print(f"Less than (<): {_bool_text(from_int64 < from_str)}", file=out)
    print(f"Greater than (>): {_bool_text(from_int64 > from_str)}", file=out)
    print(f"Less than or equal to (<=): {_bool_text(from_int64 <= from_str)}", file=out)
    print(f"Greater than or equal to (>=): {_bool_text(from_int64 >= from_str)}", file=out)

    assigned = from_str
    print(f"Assignment (=): {assigned}", file=out)


# =============================================================================
# CLI
# =============================================================================


def create_parser() -> argparse.ArgumentParser:
    """Создание парсера аргументов."""
    defaults = DemoConfig()
    parser = argparse.ArgumentParser(
        prog="bigint-demo",
        description="Demonstrate arbitrary-precision integer arithmetic",
    )
    parser.add_argument(
        "--text",
        default=defaults.text,
        help=f"Decimal integer to parse (default: {defaults.text})",
    )
    parser.add_argument(
        "--int64",
        dest="int64_value",
        type=int,
        default=defaults.int64_value,
        help=f"Signed 64-bit integer operand (default: {defaults.int64_value})",
    )
    parser.add_argument(
        "--multiplier",
        type=int,
        default=defaults.multiplier,
        help=f"Start value for the compound multiplication (default: {defaults.multiplier})",
    )
    parser.add_argument(
        "--log-level",
        default=defaults.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Log level (default: {defaults.log_level})",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = create_parser().parse_args(argv)
    config = DemoConfig(
        text=args.text,
        int64_value=args.int64_value,
        multiplier=args.multiplier,
        log_level=args.log_level,
    )
    logger = setup_logging(config.log_level)

    try:
        run_demo(config, sys.stdout)
    except ValueError as e:
        # InvalidFormat — подкласс ValueError; int64 вне диапазона — тоже ValueError
        logger.error("Demo aborted: %s", e, extra={"operation": "construct"})
        print(f"Invalid argument exception: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
