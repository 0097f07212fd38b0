"""
solvers - Решатели треугольного Peg Solitaire

Экспортирует:
- PermutationSolver / search: полный перебор всех партий
- ParallelPermutationSolver: тот же перебор в нескольких процессах
- GreedySolver: одна партия первым допустимым ходом
"""

from .base import BaseSolver, SolverStats
from .permutation import PermutationSolver, search
from .parallel import ParallelPermutationSolver
from .greedy import GreedySolver

__all__ = [
    'BaseSolver',
    'SolverStats',
    'PermutationSolver',
    'search',
    'ParallelPermutationSolver',
    'GreedySolver',
]
