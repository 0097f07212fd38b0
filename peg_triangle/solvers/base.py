"""
solvers/base.py

Базовый класс для всех решателей.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from ..core.standard import StandardBoard
from ..core.space import Move
from ..utils.logging import get_logger
from ..utils.monitoring import get_monitor


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    nodes_visited: int = 0
    terminal_lines: int = 0
    max_depth: int = 0
    invariant_violations: int = 0
    time_elapsed: float = 0.0

    def __str__(self) -> str:
        return (
            f"Nodes: {self.nodes_visited}, "
            f"Lines: {self.terminal_lines}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Переборщики (PermutationSolver, ParallelPermutationSolver) двигают только
    клоны и переданную доску не меняют. GreedySolver играет на ней самой.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.stats = SolverStats()

    @abstractmethod
    def solve(self, board: StandardBoard) -> Any:
        """
        Запускает решатель на позиции board.
        """
        pass

    def _log(self, message: str) -> None:
        """INFO если verbose=True, иначе DEBUG."""
        logger = get_logger()
        if self.verbose:
            logger.info(f"[{self.__class__.__name__}] {message}")
        else:
            logger.debug(f"[{self.__class__.__name__}] {message}")

    @staticmethod
    def format_move(move: Move) -> str:
        """Форматирует ход для вывода."""
        return f"{move.jump} → {move.land}"

    def _record(self, operation: str) -> None:
        """Передаёт stats последнего запуска в общий монитор."""
        get_monitor().record_run(
            operation, self.stats.time_elapsed,
            nodes=self.stats.nodes_visited,
            lines=self.stats.terminal_lines,
            violations=self.stats.invariant_violations,
        )
