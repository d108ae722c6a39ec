"""
CachedFraction — Декоратор кэширования вещественного значения дроби

Оборачивает ровно одну Fraction и держит собственный кэш real_value,
независимый от внутреннего кэша самой дроби. Любой вызов сеттера через
обёртку сбрасывает кэш, даже если значение дроби не изменилось.
"""

import logging
from typing import Optional, Union, overload

from src.core.domain.fraction import Fraction, InvalidArgument

logger = logging.getLogger(__name__)


class CachedFraction:
    """
    Дробь с дополнительным слоем мемоизации real_value.

    Examples:
        >>> cached = CachedFraction(1, 3)
        >>> cached.set_numerator(2)
        >>> str(cached)
        '2/3'
    """

    @overload
    def __init__(self, fraction: Fraction) -> None: ...

    @overload
    def __init__(self, fraction: int, denominator: int) -> None: ...

    def __init__(self, fraction: Union[Fraction, int], denominator: Optional[int] = None):
        """
        Args:
            fraction: Оборачиваемая дробь или числитель новой дроби
            denominator: Знаменатель, если первым аргументом передан числитель

        Raises:
            InvalidArgument: Если fraction равен None
            InvalidDenominator: Если denominator равен нулю
        """
        if fraction is None:
            raise InvalidArgument("Оборачиваемая дробь не может быть None")

        if denominator is not None:
            fraction = Fraction(fraction, denominator)
        elif not isinstance(fraction, Fraction):
            raise InvalidArgument(
                f"Ожидалась Fraction или пара (numerator, denominator), "
                f"получено {type(fraction).__name__}"
            )

        self._fraction: Fraction = fraction
        self._cached_real_value: Optional[float] = None
        self._is_cache_valid = False

    @property
    def fraction(self) -> Fraction:
        return self._fraction

    @property
    def is_cache_valid(self) -> bool:
        return self._is_cache_valid

    def real_value(self) -> float:
        """
        Вещественное значение из кэша обёртки.

        При невалидном кэше значение берётся у обёрнутой дроби.
        """
        if not self._is_cache_valid:
            logger.debug("cache miss for %s, recomputing", self._fraction)
            self._cached_real_value = self._fraction.real_value()
            self._is_cache_valid = True
        else:
            logger.debug("cache hit for %s", self._fraction)
        return self._cached_real_value

    def set_numerator(self, numerator: int) -> None:
        self._fraction.set_numerator(numerator)
        self._invalidate()

    def set_denominator(self, denominator: int) -> None:
        self._fraction.set_denominator(denominator)
        self._invalidate()

    def _invalidate(self) -> None:
        self._is_cache_valid = False
        logger.debug("cache invalidated, fraction is now %s", self._fraction)

    def to_string(self) -> str:
        return self._fraction.to_string()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"CachedFraction({self._fraction!r})"
