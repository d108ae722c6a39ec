"""
MeowCounter — Декоратор подсчёта мяуканий и массовый вызов meow()
"""

import logging
from typing import Iterable, Optional

from src.meow.cats import Meowable

logger = logging.getLogger(__name__)


class MeowCounter:
    """
    Декоратор, считающий вызовы meow() обёрнутого объекта.

    Сам тоже является Meowable, поэтому может передаваться в make_all_meow
    наравне с обычными котами.
    """

    def __init__(self, meowable: Optional[Meowable]):
        """
        Args:
            meowable: Оборачиваемый объект

        Raises:
            TypeError: Если meowable равен None или не умеет мяукать
        """
        if meowable is None:
            raise TypeError("Объект для декорирования не может быть None")
        if not isinstance(meowable, Meowable):
            raise TypeError(
                f"Объект {type(meowable).__name__} не умеет мяукать"
            )

        self._meowable = meowable
        self._meow_count = 0

    @property
    def meowable(self) -> Meowable:
        return self._meowable

    @property
    def meow_count(self) -> int:
        return self._meow_count

    def meow(self) -> None:
        self._meowable.meow()
        self._meow_count += 1
        logger.debug("%s meowed, count=%d", self._meowable, self._meow_count)

    def __str__(self) -> str:
        return f"Счетчик мяуканий для {self._meowable}"


def make_all_meow(meowables: Optional[Iterable[Meowable]]) -> None:
    """
    Заставить мяукнуть каждый объект коллекции по одному разу, по порядку.

    Raises:
        TypeError: Если коллекция равна None
    """
    if meowables is None:
        raise TypeError("Коллекция не может быть None")

    for meowable in meowables:
        meowable.meow()
