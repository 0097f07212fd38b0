"""
solvers/greedy.py

Одна детерминированная партия: всегда первый допустимый ход.
"""

import time
from typing import List

from .base import BaseSolver, SolverStats
from ..core.space import Move
from ..core.standard import StandardBoard
from ..utils.error_handling import InvariantViolationError


class GreedySolver(BaseSolver):
    """
    Играет первым ходом из get_valid_moves(), пока ходы есть.

    Позиция передаётся по месту: доска двигается, история пополняется.
    """

    def solve(self, board: StandardBoard) -> List[Move]:
        """
        Returns:
            Сыгранные ходы по порядку
        """
        self.stats = SolverStats()
        start = time.time()
        played: List[Move] = []

        moves = board.get_valid_moves()
        while moves:
            move = moves[0]
            if not board.move(move):
                raise InvariantViolationError(
                    f"Move {self.format_move(move)} was listed as valid but rejected"
                )
            played.append(move)
            self.stats.nodes_visited += 1
            self._log(f"Played {self.format_move(move)}")
            moves = board.get_valid_moves()

        self.stats.max_depth = len(played)
        self.stats.terminal_lines = 1
        self.stats.time_elapsed = time.time() - start
        self._record('greedy_game')
        self._log(f"No moves left, score {board.get_score()}")
        return played
