"""
Rational — Примитивы канонизации рациональных чисел

Единственный допустимый способ привести пару (numerator, denominator)
к каноническому виду. Используется всеми конструкторами и сеттерами Fraction.

КАНОНИЧЕСКИЙ ВИД:
1. denominator > 0 (знак хранится в числителе)
2. gcd(|numerator|, |denominator|) == 1
3. Ноль всегда представлен как 0/1
"""


# =============================================================================
# НАИБОЛЬШИЙ ОБЩИЙ ДЕЛИТЕЛЬ
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида).

    Args:
        a: Первое число
        b: Второе число

    Returns:
        НОД по модулю (всегда неотрицательный)

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(-4, 6)
        2
        >>> gcd(7, 0)
        7
    """
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a


# =============================================================================
# КАНОНИЗАЦИЯ
# =============================================================================


def reduce_fraction(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Сокращение дроби и нормализация знака.

    Делит обе части на НОД, затем переносит знак знаменателя в числитель.

    Args:
        numerator: Числитель (любой знак)
        denominator: Знаменатель (любой знак, кроме нуля)

    Returns:
        Пара (numerator, denominator) в каноническом виде

    Raises:
        ValueError: Если знаменатель равен нулю

    Examples:
        >>> reduce_fraction(2, 4)
        (1, 2)
        >>> reduce_fraction(3, -5)
        (-3, 5)
        >>> reduce_fraction(0, -7)
        (0, 1)
    """
    if denominator == 0:
        raise ValueError("denominator must be non-zero")

    if numerator == 0:
        return 0, 1

    divisor = gcd(numerator, denominator)
    numerator //= divisor
    denominator //= divisor

    if denominator < 0:
        numerator = -numerator
        denominator = -denominator

    return numerator, denominator

