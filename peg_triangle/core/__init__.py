"""
core - Ядро треугольного Peg Solitaire

Граф лунок, правила прыжков и стандартная доска на 15 лунок.
"""

from .space import Space, Target, Move
from .board import Board
from .layout import (
    STANDARD_ROWS, STANDARD_SIZE, STANDARD_EMPTY_START,
    STANDARD_ADJACENCY, STANDARD_TARGETS,
    build_standard_layout, coords_to_id, id_to_coords
)
from .standard import StandardBoard
from .utils import PEG, HOLE, render_rows

__all__ = [
    'Space', 'Target', 'Move', 'Board', 'StandardBoard',
    'STANDARD_ROWS', 'STANDARD_SIZE', 'STANDARD_EMPTY_START',
    'STANDARD_ADJACENCY', 'STANDARD_TARGETS',
    'build_standard_layout', 'coords_to_id', 'id_to_coords',
    'PEG', 'HOLE', 'render_rows',
]
