"""
core/utils.py

Символы отображения и текстовая отрисовка треугольника.
"""

from typing import List

# Символы для отображения
PEG = '*'       # Колышек
HOLE = 'O'      # Пустая лунка
PAD = ' '


def render_rows(rows: List[List[bool]]) -> str:
    """
    Рисует треугольник: ряд i дополняется (len(rows) - 1 - i) пробелами
    слева и справа, лунки разделены одним пробелом.

    Args:
        rows: занятость по рядам, ряд i содержит i + 1 лунку
    """
    height = len(rows)
    lines = []
    for index, row in enumerate(rows):
        padding = PAD * (height - 1 - index)
        cells = PAD.join(PEG if occupied else HOLE for occupied in row)
        lines.append(padding + cells + padding)
    return '\n'.join(lines)

