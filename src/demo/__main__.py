"""Запуск демонстрации: python -m src.demo"""

import sys

from src.demo.cli import main

if __name__ == "__main__":
    sys.exit(main())
