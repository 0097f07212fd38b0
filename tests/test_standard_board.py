"""
tests/test_standard_board.py

Тесты для стандартной треугольной доски: топология, ходы, история,
счёт, отрисовка и клонирование.
"""

import pytest

from peg_triangle.core import (
    Move, StandardBoard, Target,
    STANDARD_ADJACENCY, STANDARD_TARGETS, coords_to_id, id_to_coords
)
from peg_triangle.utils.error_handling import UnknownSpaceError


def _occupancy(board: StandardBoard):
    return {space_id: space.is_occupied() for space_id, space in board.get_spaces().items()}


def _topology(board: StandardBoard):
    return {
        space_id: (frozenset(space.get_adjacent()), tuple(space.get_targets()),
                   tuple(space.get_targeted_by()))
        for space_id, space in board.get_spaces().items()
    }


# =====================================================
# Геометрия
# =====================================================

@pytest.mark.parametrize("space_id,coords", [
    (1, (0, 0)), (2, (1, 0)), (3, (1, 1)), (4, (2, 0)), (6, (2, 2)),
    (7, (3, 0)), (10, (3, 3)), (11, (4, 0)), (13, (4, 2)), (15, (4, 4)),
])
def test_coords_mapping(space_id, coords):
    assert id_to_coords(space_id) == coords
    assert coords_to_id(*coords) == space_id


def test_standard_tables_size():
    """18 линий прыжка и 30 рёбер соседства в треугольнике из 5 рядов."""
    assert len(STANDARD_TARGETS) == 18
    assert len(set(STANDARD_TARGETS)) == 18
    assert len(STANDARD_ADJACENCY) == 30


# =====================================================
# Топология
# =====================================================

def test_create_board_has_fifteen_spaces(board):
    assert sorted(board.get_spaces()) == list(range(1, 16))


def test_initial_occupancy(board):
    assert not board.get_space(1).is_occupied()
    assert all(board.get_space(i).is_occupied() for i in range(2, 16))
    assert board.get_score() == 14
    assert board.get_history() == []


def test_adjacency_is_symmetric(board):
    for space_id, space in board.get_spaces().items():
        for other in space.get_adjacent():
            assert space_id in board.get_space(other).get_adjacent()


@pytest.mark.parametrize("space_id,adjacent", [
    (1, {2, 3}),
    (5, {2, 3, 4, 6, 8, 9}),
    (11, {7, 12}),
    (13, {8, 9, 12, 14}),
    (15, {10, 14}),
])
def test_adjacency(board, space_id, adjacent):
    assert board.get_space(space_id).get_adjacent() == adjacent


def test_targets_are_reversible(board):
    """Для каждой цели (s, j, l) есть обратная (l, j, s) и записи в targeted_by."""
    for space_id, space in board.get_spaces().items():
        for target in space.get_targets():
            land = board.get_space(target.land)
            assert Target(target.jump, space_id) in land.get_targets()
            assert space_id in land.get_targeted_by()
            assert target.land in space.get_targeted_by()


def test_jump_over_is_adjacent_to_both_ends(board):
    for space_id, space in board.get_spaces().items():
        for target in space.get_targets():
            assert target.jump in space.get_adjacent()
            assert target.jump in board.get_space(target.land).get_adjacent()


def test_directed_target_count(board):
    assert sum(len(space.get_targets()) for space in board.get_spaces().values()) == 36


@pytest.mark.parametrize("space_id,targets", [
    (1, [Target(2, 4), Target(3, 6)]),
    (4, [Target(2, 1), Target(5, 6), Target(7, 11), Target(8, 13)]),
    (5, [Target(8, 12), Target(9, 14)]),
])
def test_targets_in_registration_order(board, space_id, targets):
    assert board.get_space(space_id).get_targets() == targets


def test_targets_of_bottom_middle(board):
    assert set(board.get_space(13).get_targets()) == {
        Target(8, 4), Target(9, 6), Target(12, 11), Target(14, 15)
    }


def test_targeted_by_of_top(board):
    assert board.get_space(1).get_targeted_by() == [4, 6]


# =====================================================
# Ходы
# =====================================================

def test_opening_moves(board):
    """Из стартовой позиции в лунку 1 можно прыгнуть только из 4 и 6."""
    assert board.get_valid_moves() == [Move(4, 1), Move(6, 1)]


def test_valid_moves_are_deterministic(board):
    board.move(Move(4, 1))
    assert board.get_valid_moves() == board.get_valid_moves()
    assert board.get_valid_moves() == board.clone().get_valid_moves()


def test_first_move(board):
    assert board.move(Move(4, 1)) is True

    assert board.get_space(1).is_occupied()
    assert not board.get_space(4).is_occupied()
    assert not board.get_space(2).is_occupied()
    assert board.get_score() == 13


def test_moves_after_first_move(board):
    board.move(Move(4, 1))

    assert board.get_valid_moves() == [Move(9, 2), Move(6, 4), Move(11, 4), Move(13, 4)]


def test_move_appends_history(board):
    board.move(Move(4, 1))
    board.move(Move(6, 4))

    history = board.get_history()
    assert len(history) == 2
    assert history[-1] == board.to_string()
    assert history[0] != history[1]


@pytest.mark.parametrize("move", [
    Move(1, 4),    # в 1 нет колышка
    Move(2, 15),   # 15 не цель для 2
    Move(4, 6),    # 6 занята
])
def test_invalid_move_changes_nothing(board, move):
    before = _occupancy(board)

    assert board.move(move) is False
    assert _occupancy(board) == before
    assert board.get_history() == []


def test_move_unknown_space_raises(board):
    with pytest.raises(UnknownSpaceError):
        board.move(Move(99, 1))


def test_every_successful_move_removes_one_peg(board):
    while board.get_valid_moves():
        before = board.get_score()
        assert board.move(board.get_valid_moves()[-1])
        assert board.get_score() == before - 1

    assert board.get_valid_moves() == []
    assert board.get_score() == 15 - len(board.get_empty_spaces())


# =====================================================
# Загрузка позиции
# =====================================================

def test_load_occupancy(make_position):
    position = make_position(2, 4)

    assert position.occupied_ids() == [2, 4]
    assert position.get_score() == 2
    assert position.get_valid_moves() == [Move(4, 1), Move(2, 7)]


def test_load_occupancy_rejects_unknown_ids(board):
    before = _occupancy(board)

    with pytest.raises(UnknownSpaceError):
        board.load_occupancy([1, 16])

    assert _occupancy(board) == before


def test_other_empty_start():
    board = StandardBoard(empty_start=5).create_board()

    assert board.occupied_ids() == [i for i in range(1, 16) if i != 5]
    assert set(board.get_valid_moves()) == {Move(12, 5), Move(14, 5)}


def test_unknown_empty_start_raises():
    with pytest.raises(UnknownSpaceError):
        StandardBoard(empty_start=16).create_board()


# =====================================================
# Отрисовка
# =====================================================

def test_to_string_initial(board):
    assert board.to_string() == "\n".join([
        "    O    ",
        "   * *   ",
        "  * * *  ",
        " * * * * ",
        "* * * * *",
    ])


def test_to_string_after_move(board):
    board.move(Move(4, 1))

    assert board.to_string().split("\n")[:3] == [
        "    *    ",
        "   O *   ",
        "  O * *  ",
    ]


def test_print_board(board, capsys):
    board.print_board()

    assert capsys.readouterr().out == board.to_string() + "\n"
    assert str(board) == board.to_string()


# =====================================================
# Клонирование
# =====================================================

def test_clone_matches_source(board):
    board.move(Move(4, 1))
    copy = board.clone()

    assert _occupancy(copy) == _occupancy(board)
    assert _topology(copy) == _topology(board)
    assert copy.get_history() == []


def test_clone_has_own_spaces(board):
    copy = board.clone()

    for space_id in board.get_spaces():
        assert copy.get_space(space_id) is not board.get_space(space_id)


def test_clone_is_independent(board):
    copy = board.clone()
    copy.move(Move(4, 1))

    assert not board.get_space(1).is_occupied()
    assert board.get_space(4).is_occupied()
    assert board.get_score() == 14

    board.move(Move(6, 1))
    assert copy.get_space(6).is_occupied()
    assert copy.get_space(4).is_occupied() is False
