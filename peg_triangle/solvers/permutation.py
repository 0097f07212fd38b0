"""
solvers/permutation.py

Полный перебор: все последовательности допустимых ходов до тупика
и гистограмма "колышков осталось -> число партий".
"""

import time
from typing import Dict, Optional

from .base import BaseSolver, SolverStats
from ..core.standard import StandardBoard
from ..utils.error_handling import InvariantViolationError
from ..utils.logging import get_logger


class PermutationSolver(BaseSolver):
    """
    Рекурсивный перебор без мемоизации.

    Особенности:
    - каждая ветка получает собственный клон доски;
    - глубина не больше числа колышков - 1 (каждый ход снимает колышек);
    - strict=True: рассогласование get_valid_moves() и move() - исключение,
      strict=False: ветка пропускается и учитывается в stats.
    """

    def __init__(self, strict: bool = True, verbose: bool = False):
        super().__init__(verbose)
        self.strict = strict

    def solve(self, board: StandardBoard,
              results: Optional[Dict[int, int]] = None) -> Dict[int, int]:
        """
        Перебирает все партии из позиции board.

        Args:
            board: стартовая позиция (не изменяется)
            results: накопитель; дополняется на месте, если передан

        Returns:
            {оставшиеся колышки: число тупиковых партий}
        """
        if results is None:
            results = {}
        self.stats = SolverStats()
        start = time.time()

        self._log(f"Starting permutation search (pegs={board.get_score()})")
        self._search(board, results, 0)

        self.stats.time_elapsed = time.time() - start
        self._record('permutation_search')

        self._log(f"Done: {self.stats}")
        return results

    def _search(self, board: StandardBoard, results: Dict[int, int], depth: int):
        self.stats.nodes_visited += 1
        self.stats.max_depth = max(self.stats.max_depth, depth)

        moves = board.get_valid_moves()

        # Тупик
        if not moves:
            score = board.get_score()
            results[score] = results.get(score, 0) + 1
            self.stats.terminal_lines += 1
            return

        for move in moves:
            branch = board.clone()
            if not branch.move(move):
                self._invariant_violation(board, move)
                continue
            self._search(branch, results, depth + 1)

    def _invariant_violation(self, board: StandardBoard, move):
        message = (f"Move {self.format_move(move)} was listed as valid "
                   f"but rejected on\n{board.to_string()}")
        get_logger().error(message)
        self.stats.invariant_violations += 1
        if self.strict:
            raise InvariantViolationError(message)


def search(board: StandardBoard, results: Optional[Dict[int, int]] = None) -> Dict[int, int]:
    """
    Гистограмма финальных счётов по всем партиям из позиции board.

    Usage:
        board = StandardBoard().create_board()
        counts = search(board)   # {1: ..., 2: ..., ...}
    """
    return PermutationSolver().solve(board, results)
