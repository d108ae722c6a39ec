"""Demo — консольная демонстрация работы с котами и дробями.

Запуск: python -m src.demo [--section all|cats|fractions] [--precision N]
"""

from .config import DemoConfig
from .scenarios import demonstrate_cats, demonstrate_fractions, run_demo

__all__ = [
    "DemoConfig",
    "run_demo",
    "demonstrate_cats",
    "demonstrate_fractions",
]
