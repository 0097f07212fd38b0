"""
core/standard.py

Стандартная доска на 15 лунок: история ходов, счёт, отрисовка, клон.

StandardBoard не наследует Board, а владеет экземпляром Board,
сконфигурированным через build_standard_layout().
"""

from typing import Dict, Iterable, List

from .board import Board
from .layout import STANDARD_ROWS, STANDARD_EMPTY_START, build_standard_layout, coords_to_id
from .space import Move, Space
from .utils import render_rows


class StandardBoard:
    """
    Треугольная доска на 15 лунок.

    Usage:
        board = StandardBoard()
        board.create_board()
        board.move(board.get_valid_moves()[0])
    """

    def __init__(self, empty_start: int = STANDARD_EMPTY_START):
        self.board = Board()
        self.empty_start = empty_start
        self.history: List[str] = []

    def create_board(self) -> 'StandardBoard':
        """Строит топологию и начальную расстановку (пуста только empty_start)."""
        build_standard_layout(self.board, self.empty_start)
        return self

    # =====================================================
    # Делегирование Board
    # =====================================================

    def get_space(self, space_id: int) -> Space:
        return self.board.get_space(space_id)

    def get_spaces(self) -> Dict[int, Space]:
        return self.board.get_spaces()

    def get_empty_spaces(self) -> List[Space]:
        return self.board.get_empty_spaces()

    def get_valid_moves(self) -> List[Move]:
        return self.board.get_valid_moves()

    def validate_jump(self, space: Space, target: Space) -> bool:
        return self.board.validate_jump(space, target)

    def jump(self, space: Space, target: Space) -> bool:
        return self.board.jump(space, target)

    # =====================================================
    # Ходы и история
    # =====================================================

    def move(self, move: Move) -> bool:
        """
        Выполняет ход (jump, land).

        При успехе добавляет снимок доски в историю. Неизвестный id
        вызывает UnknownSpaceError.
        """
        space = self.get_space(move.jump)
        target = self.get_space(move.land)
        if not self.jump(space, target):
            return False
        self.add_history(self.to_string())
        return True

    def get_history(self) -> List[str]:
        return self.history

    def add_history(self, snapshot: str):
        self.history.append(snapshot)

    def get_score(self) -> int:
        """Количество колышков на доске (меньше - лучше)."""
        return len(self.get_spaces()) - len(self.get_empty_spaces())

    # =====================================================
    # Снимки занятости
    # =====================================================

    def occupied_ids(self) -> List[int]:
        """id занятых лунок по возрастанию."""
        return [space_id for space_id in sorted(self.get_spaces())
                if self.get_space(space_id).is_occupied()]

    def load_occupancy(self, occupied: Iterable[int]) -> 'StandardBoard':
        """
        Ставит колышки ровно в перечисленные лунки, остальные опустошает.

        История не меняется.
        """
        occupied = set(occupied)
        for space_id in occupied:
            self.get_space(space_id)

        for space_id, space in self.get_spaces().items():
            if space_id in occupied:
                self.board.set_occupied(space)
            else:
                self.board.set_empty(space)
        return self

    def clone(self) -> 'StandardBoard':
        """
        Независимая копия: топология строится заново, копируется только
        занятость. История у копии пустая.
        """
        copy = StandardBoard(self.empty_start).create_board()
        for space_id, space in self.get_spaces().items():
            if space.is_occupied():
                copy.board.set_occupied(copy.get_space(space_id))
            else:
                copy.board.set_empty(copy.get_space(space_id))
        return copy

    # =====================================================
    # Отрисовка
    # =====================================================

    def to_string(self) -> str:
        rows = [
            [self.get_space(coords_to_id(row, col)).is_occupied() for col in range(row + 1)]
            for row in range(STANDARD_ROWS)
        ]
        return render_rows(rows)

    def print_board(self):
        print(self.to_string())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"StandardBoard({self.get_score()} pegs)"
