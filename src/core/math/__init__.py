"""
Core math modules

Математические примитивы для рациональных чисел.
"""

from src.core.math.rational import gcd, reduce_fraction

__all__ = [
    "gcd",
    "reduce_fraction",
]
