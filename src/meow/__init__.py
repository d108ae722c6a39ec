"""Meow — объекты, способные мяукать, и декоратор подсчёта мяуканий."""

from .cats import (
    CAT_NAME_MAX_LENGTH,
    MEOW_COUNT_MAX,
    Cat,
    Meowable,
    RobotCat,
)
from .counter import MeowCounter, make_all_meow

__all__ = [
    "CAT_NAME_MAX_LENGTH",
    "MEOW_COUNT_MAX",
    "Meowable",
    "Cat",
    "RobotCat",
    "MeowCounter",
    "make_all_meow",
]
