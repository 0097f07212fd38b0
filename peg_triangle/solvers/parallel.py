"""
solvers/parallel.py

Параллельный перебор: первые ходы распределяются между процессами.
"""

from collections import Counter
from concurrent.futures import ProcessPoolExecutor
from typing import Dict, List, Optional, Tuple
import multiprocessing
import time

from .base import BaseSolver, SolverStats
from .permutation import PermutationSolver
from ..core.space import Move
from ..core.standard import StandardBoard
from ..utils.error_handling import InvariantViolationError


def _search_subtree(args: Tuple[int, List[int], Tuple[int, int]]) -> Tuple[Dict[int, int], SolverStats]:
    """Перебирает поддерево после первого хода (для параллельного запуска)."""
    empty_start, occupied, first_move = args
    board = StandardBoard(empty_start).create_board().load_occupancy(occupied)

    move = Move(*first_move)
    if not board.move(move):
        raise InvariantViolationError(
            f"Move {BaseSolver.format_move(move)} was listed as valid but rejected"
        )

    solver = PermutationSolver(strict=True, verbose=False)
    results = solver.solve(board)
    return results, solver.stats


class ParallelPermutationSolver(BaseSolver):
    """
    Параллельный полный перебор.

    Каждый процесс строит свою доску из снимка занятости и возвращает
    свою гистограмму; гистограммы складываются в родителе.
    """

    def __init__(self, num_workers: Optional[int] = None, verbose: bool = False):
        super().__init__(verbose)
        self.num_workers = num_workers or multiprocessing.cpu_count()

    def solve(self, board: StandardBoard) -> Dict[int, int]:
        self.stats = SolverStats()
        start = time.time()

        moves = board.get_valid_moves()
        if not moves:
            self.stats.nodes_visited = 1
            self.stats.terminal_lines = 1
            return {board.get_score(): 1}

        self._log(f"Starting parallel permutation search "
                  f"(workers={self.num_workers}, moves={len(moves)})")

        occupied = board.occupied_ids()
        tasks = [(board.empty_start, occupied, tuple(move)) for move in moves]

        totals: Counter = Counter()
        self.stats.nodes_visited = 1
        with ProcessPoolExecutor(max_workers=self.num_workers) as executor:
            for results, stats in executor.map(_search_subtree, tasks):
                totals.update(results)
                self.stats.nodes_visited += stats.nodes_visited
                self.stats.terminal_lines += stats.terminal_lines
                self.stats.max_depth = max(self.stats.max_depth, stats.max_depth + 1)

        self.stats.time_elapsed = time.time() - start
        self._record('parallel_permutation_search')

        self._log(f"Done: {self.stats}")
        return dict(totals)
