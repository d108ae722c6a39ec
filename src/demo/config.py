"""Конфигурация консольной демонстрации."""

import argparse
from dataclasses import dataclass
from typing import Final

SECTION_CATS: Final[str] = "cats"
SECTION_FRACTIONS: Final[str] = "fractions"
SECTION_ALL: Final[str] = "all"

KNOWN_SECTIONS: Final[tuple[str, ...]] = (SECTION_CATS, SECTION_FRACTIONS)


@dataclass(frozen=True)
class DemoConfig:
    """Конфигурация демонстрации.

    - sections: какие разделы показывать и в каком порядке
    - precision: число знаков после запятой для вещественных значений
      (в разделе кэширования используется precision + 2)
    - separator_width: ширина разделительной линии под заголовками
    """
    sections: tuple[str, ...] = KNOWN_SECTIONS
    precision: int = 4
    separator_width: int = 50

    def __post_init__(self) -> None:
        if not self.sections:
            raise ValueError("sections must not be empty")
        unknown = [s for s in self.sections if s not in KNOWN_SECTIONS]
        if unknown:
            raise ValueError(f"Unknown demo sections: {unknown}")
        if self.precision < 0:
            raise ValueError(f"precision must be non-negative, got {self.precision}")
        if self.separator_width <= 0:
            raise ValueError(
                f"separator_width must be positive, got {self.separator_width}"
            )

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "DemoConfig":
        if args.section == SECTION_ALL:
            sections = KNOWN_SECTIONS
        else:
            sections = (args.section,)
        return cls(sections=sections, precision=args.precision)
