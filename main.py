#!/usr/bin/env python3
"""
main.py

Точка входа для треугольного Peg Solitaire.

Использование:
    python main.py                  # одна жадная партия
    python main.py --search         # перебор всех партий
    python main.py --help
"""

import sys

from peg_triangle.cli import main


if __name__ == "__main__":
    sys.exit(main())
