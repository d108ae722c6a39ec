"""
CLI — Точка входа консольной демонстрации

Разбирает аргументы командной строки, настраивает логирование
и запускает выбранные разделы демонстрации.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from src.demo.config import KNOWN_SECTIONS, SECTION_ALL, DemoConfig
from src.demo.scenarios import run_demo

LOG_FORMAT = "%(levelname).1s | %(name)s | %(message)s"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m src.demo",
        description="Демонстрация котов и дробей",
    )
    parser.add_argument(
        "--section",
        choices=(SECTION_ALL, *KNOWN_SECTIONS),
        default=SECTION_ALL,
        help="Какой раздел показать (по умолчанию все)",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=4,
        help="Знаков после запятой для вещественных значений",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Уровень логирования (вывод в stderr)",
    )
    return parser


def setup_logging(level: str) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = DemoConfig.from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    logger.debug("demo config: %s", config)
    run_demo(config)
    return 0
