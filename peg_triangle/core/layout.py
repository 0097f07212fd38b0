"""
core/layout.py

Геометрия стандартной треугольной доски (15 лунок, 5 рядов).

Нумерация с 1, по рядам сверху вниз и слева направо:

        1
       2 3
      4 5 6
     7 8 9 10
   11 12 13 14 15

Лунка (row, col) существует при 0 <= col <= row < 5. Соседи и прыжки
определяются тремя направлениями "вперёд": вправо по ряду, вниз-влево,
вниз-вправо. Обратные направления добавляет Board.add_target.
"""

from typing import List, Tuple

from .board import Board
from .space import Space

STANDARD_ROWS = 5
STANDARD_SIZE = STANDARD_ROWS * (STANDARD_ROWS + 1) // 2
STANDARD_EMPTY_START = 1

# Вправо по ряду, вниз-влево, вниз-вправо
FORWARD_DIRECTIONS: List[Tuple[int, int]] = [(0, 1), (1, 0), (1, 1)]


def coords_to_id(row: int, col: int) -> int:
    """(row, col) -> id лунки (с 1)."""
    return row * (row + 1) // 2 + col + 1


def id_to_coords(space_id: int) -> Tuple[int, int]:
    """id лунки -> (row, col)."""
    index = space_id - 1
    row = 0
    while index > row:
        index -= row + 1
        row += 1
    return row, index


def is_on_board(row: int, col: int, rows: int = STANDARD_ROWS) -> bool:
    return 0 <= col <= row < rows


def _build_tables(rows: int) -> Tuple[Tuple[Tuple[int, int], ...],
                                      Tuple[Tuple[int, int, int], ...]]:
    """Пары соседей и тройки (from, jump, land) только в прямых направлениях."""
    adjacency = []
    targets = []
    for row in range(rows):
        for col in range(row + 1):
            space_id = coords_to_id(row, col)
            for dr, dc in FORWARD_DIRECTIONS:
                r1, c1 = row + dr, col + dc
                r2, c2 = row + 2 * dr, col + 2 * dc
                if is_on_board(r1, c1, rows):
                    adjacency.append((space_id, coords_to_id(r1, c1)))
                if is_on_board(r2, c2, rows):
                    targets.append((space_id, coords_to_id(r1, c1), coords_to_id(r2, c2)))
    return tuple(adjacency), tuple(targets)


# Таблицы считаются один раз при импорте и больше не меняются
STANDARD_ADJACENCY, STANDARD_TARGETS = _build_tables(STANDARD_ROWS)


def build_standard_layout(board: Board, empty_start: int = STANDARD_EMPTY_START) -> Board:
    """
    Превращает пустую Board в стандартный треугольник.

    Все лунки заняты, кроме empty_start.

    Args:
        board: доска без лунок
        empty_start: id изначально пустой лунки

    Returns:
        ту же доску
    """
    for space_id in range(1, STANDARD_SIZE + 1):
        board.add_space(Space(space_id))

    for first, second in STANDARD_ADJACENCY:
        board.set_adjacent(board.get_space(first), board.get_space(second))

    for space_id, jump_id, land_id in STANDARD_TARGETS:
        board.add_target(board.get_space(space_id), board.get_space(jump_id),
                         board.get_space(land_id))

    # UnknownSpaceError до того, как доска заполнена
    board.get_space(empty_start)

    for space_id, space in board.get_spaces().items():
        if space_id != empty_start:
            board.set_occupied(space)

    return board
