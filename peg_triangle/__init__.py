"""
peg_triangle - Треугольная доска Peg Solitaire (15 лунок)

Движок доски (граф лунок, прыжки, ходы) и полный перебор всех партий.
"""

from .core import Board, Space, StandardBoard, Move, Target, build_standard_layout
from .solvers import PermutationSolver, ParallelPermutationSolver, GreedySolver, search

__version__ = "1.0.0"

__all__ = [
    'Board', 'Space', 'StandardBoard', 'Move', 'Target',
    'build_standard_layout',
    'PermutationSolver', 'ParallelPermutationSolver', 'GreedySolver',
    'search',
]
