"""
Fraction — Рациональное число в каноническом виде

Value-тип дроби с замкнутой арифметикой, сравнением и клонированием.

ИНВАРИАНТЫ:
1. denominator != 0
2. denominator > 0 (знак хранится в числителе)
3. gcd(|numerator|, |denominator|) == 1, ноль представлен как 0/1

Все конструкторы и сеттеры проходят через единую процедуру канонизации
reduce_fraction (src.core.math.rational). Вещественное значение кэшируется
и сбрасывается при любом изменении числителя или знаменателя.
"""

from typing import Optional, Protocol, Union, runtime_checkable

from src.core.math.rational import reduce_fraction


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FractionError(Exception):
    """Базовая ошибка операций с дробями."""


class InvalidDenominator(FractionError, ValueError):
    """
    Знаменатель равен нулю.

    Выбрасывается любым конструктором или сеттером знаменателя.
    """


class DivisionByZero(FractionError, ZeroDivisionError):
    """Деление на дробь с нулевым числителем или на целый ноль."""


class InvalidArgument(FractionError, TypeError):
    """Операнд отсутствует (None) или имеет неподдерживаемый тип."""


# =============================================================================
# ИНТЕРФЕЙС
# =============================================================================


@runtime_checkable
class FractionOperations(Protocol):
    """Операции, общие для Fraction и CachedFraction."""

    def real_value(self) -> float: ...

    def set_numerator(self, numerator: int) -> None: ...

    def set_denominator(self, denominator: int) -> None: ...


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def _require_int(value: object, name: str) -> int:
    # bool наследуется от int, но дробью "True/1" быть не должен
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(
            f"{name} должен быть целым числом, получено {type(value).__name__}"
        )
    return value


def _validate_denominator(denominator: int) -> None:
    if denominator == 0:
        raise InvalidDenominator("Знаменатель не может быть равен нулю")


# =============================================================================
# FRACTION
# =============================================================================


Operand = Union["Fraction", int]


class Fraction:
    """
    Рациональное число numerator/denominator.

    Снаружи ведёт себя как значение: поля доступны только на чтение,
    арифметика всегда возвращает новый экземпляр. Изменение возможно
    только через set_numerator / set_denominator, которые повторно
    канонизируют дробь.

    Examples:
        >>> Fraction(2, 4)
        Fraction(1, 2)
        >>> Fraction(1, 3) + Fraction(2, 3)
        Fraction(1, 1)
        >>> 3 * Fraction(2, 3)
        Fraction(2, 1)
    """

    __slots__ = ("_numerator", "_denominator", "_cached_real_value")

    def __init__(self, numerator: int, denominator: int = 1):
        """
        Args:
            numerator: Числитель (целое любого знака)
            denominator: Знаменатель (целое, не ноль; по умолчанию 1)

        Raises:
            InvalidArgument: Если аргументы не целые числа
            InvalidDenominator: Если знаменатель равен нулю
        """
        _require_int(numerator, "Числитель")
        _require_int(denominator, "Знаменатель")
        _validate_denominator(denominator)

        self._numerator, self._denominator = reduce_fraction(numerator, denominator)
        self._cached_real_value: Optional[float] = None

    @classmethod
    def from_int(cls, whole_number: int) -> "Fraction":
        """Дробь из целого числа: whole_number/1."""
        return cls(whole_number, 1)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def _assign(self, numerator: int, denominator: int) -> None:
        if numerator != self._numerator or denominator != self._denominator:
            self._numerator = numerator
            self._denominator = denominator
            self._cached_real_value = None

    # -------------------------------------------------------------------------
    # FractionOperations
    # -------------------------------------------------------------------------

    def real_value(self) -> float:
        """
        Вещественное значение дроби.

        Результат кэшируется до следующего изменения числителя или знаменателя.

        Returns:
            numerator / denominator как float
        """
        if self._cached_real_value is None:
            self._cached_real_value = self._numerator / self._denominator
        return self._cached_real_value

    def set_numerator(self, numerator: int) -> None:
        """
        Установка нового числителя при текущем знаменателе.

        Дробь сокращается заново, поэтому знаменатель тоже может измениться:
        для 1/4 set_numerator(2) даёт 1/2.

        Raises:
            InvalidArgument: Если numerator не целое число
        """
        _require_int(numerator, "Числитель")
        self._assign(*reduce_fraction(numerator, self._denominator))

    def set_denominator(self, denominator: int) -> None:
        """
        Установка нового знаменателя при текущем числителе.

        Raises:
            InvalidArgument: Если denominator не целое число
            InvalidDenominator: Если denominator равен нулю (дробь не меняется)
        """
        _require_int(denominator, "Знаменатель")
        _validate_denominator(denominator)
        self._assign(*reduce_fraction(self._numerator, denominator))

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    @staticmethod
    def _coerce(other: object) -> "Fraction":
        if other is None:
            raise InvalidArgument("Дробь не может быть None")
        if isinstance(other, Fraction):
            return other
        return Fraction(_require_int(other, "Операнд"))

    def add(self, other: Operand) -> "Fraction":
        """Сумма: (n1*d2 + n2*d1) / (d1*d2)."""
        other = self._coerce(other)
        return Fraction(
            self._numerator * other._denominator + other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def subtract(self, other: Operand) -> "Fraction":
        """Разность: (n1*d2 - n2*d1) / (d1*d2)."""
        other = self._coerce(other)
        return Fraction(
            self._numerator * other._denominator - other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def multiply(self, other: Operand) -> "Fraction":
        """Произведение: (n1*n2) / (d1*d2)."""
        other = self._coerce(other)
        return Fraction(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    def divide(self, other: Operand) -> "Fraction":
        """
        Частное: (n1*d2) / (d1*n2).

        Args:
            other: Делитель (Fraction или int)

        Returns:
            Новая дробь

        Raises:
            DivisionByZero: Если делитель равен нулю
            InvalidArgument: Если делитель None или не Fraction/int
        """
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            raise DivisionByZero("Нельзя делить на ноль")
        other = self._coerce(other)
        if other._numerator == 0:
            raise DivisionByZero("Нельзя делить на дробь с нулевым числителем")
        return Fraction(
            self._numerator * other._denominator,
            self._denominator * other._numerator,
        )

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    @staticmethod
    def _is_operand(other: object) -> bool:
        return isinstance(other, Fraction) or (
            isinstance(other, int) and not isinstance(other, bool)
        )

    def __add__(self, other: Operand) -> "Fraction":
        if not self._is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: int) -> "Fraction":
        if not self._is_operand(other):
            return NotImplemented
        return Fraction(other).add(self)

    def __sub__(self, other: Operand) -> "Fraction":
        if not self._is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: int) -> "Fraction":
        if not self._is_operand(other):
            return NotImplemented
        return Fraction(other).subtract(self)

    def __mul__(self, other: Operand) -> "Fraction":
        if not self._is_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: int) -> "Fraction":
        if not self._is_operand(other):
            return NotImplemented
        return Fraction(other).multiply(self)

    def __truediv__(self, other: Operand) -> "Fraction":
        if not self._is_operand(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: int) -> "Fraction":
        if not self._is_operand(other):
            return NotImplemented
        return Fraction(other).divide(self)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def equals(self, other: Optional["Fraction"]) -> bool:
        """
        Равенство канонических представлений.

        Точность не нужна: каноническая форма уникальна для каждого значения.
        """
        if not isinstance(other, Fraction):
            return False
        return (
            self._numerator == other._numerator
            and self._denominator == other._denominator
        )

    def compare(self, other: Optional["Fraction"]) -> int:
        """
        Точное сравнение перекрёстным умножением.

        Знаменатели всегда положительны, поэтому знак n1*d2 - n2*d1
        совпадает со знаком разности дробей. Через float не сравниваем:
        для больших дробей real_value() переполняется.

        Args:
            other: Дробь для сравнения (None считается меньше любой дроби)

        Returns:
            -1, 0 или 1

        Raises:
            InvalidArgument: Если other не Fraction и не None
        """
        if other is None:
            return 1
        if not isinstance(other, Fraction):
            raise InvalidArgument(
                f"Сравнение возможно только с Fraction, получено {type(other).__name__}"
            )
        difference = (
            self._numerator * other._denominator - other._numerator * self._denominator
        )
        if difference < 0:
            return -1
        if difference > 0:
            return 1
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other: "Fraction") -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: "Fraction") -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: "Fraction") -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: "Fraction") -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash((self._numerator, self._denominator))

    # -------------------------------------------------------------------------
    # Клонирование и представление
    # -------------------------------------------------------------------------

    def clone(self) -> "Fraction":
        """Независимая копия с тем же числителем и знаменателем."""
        return Fraction(self._numerator, self._denominator)

    def __copy__(self) -> "Fraction":
        return self.clone()

    def __deepcopy__(self, memo: dict) -> "Fraction":
        return self.clone()

    def to_string(self) -> str:
        """Строка вида 'numerator/denominator'."""
        return f"{self._numerator}/{self._denominator}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Fraction({self._numerator}, {self._denominator})"
