"""
Domain models and value objects.

Contains the Fraction value type and its CachedFraction decorator.
"""

from src.core.domain.cached_fraction import CachedFraction
from src.core.domain.fraction import (
    DivisionByZero,
    Fraction,
    FractionError,
    FractionOperations,
    InvalidArgument,
    InvalidDenominator,
)

__all__ = [
    # Fraction
    "Fraction",
    "FractionOperations",
    # CachedFraction
    "CachedFraction",
    # Exceptions
    "FractionError",
    "InvalidDenominator",
    "DivisionByZero",
    "InvalidArgument",
]
