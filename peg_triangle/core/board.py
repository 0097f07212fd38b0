"""
core/board.py

Обобщённая доска: граф лунок, проверка и выполнение прыжков, список ходов.
Форма доски задаётся снаружи (см. core/layout.py).
"""

from typing import Dict, List, Set

from .space import Space, Move
from ..utils.error_handling import InvalidJumpError, UnknownSpaceError
from ..utils.logging import get_logger


class Board:
    """
    Граф лунок.

    Топология (соседи и цели) заполняется один раз при построении
    и дальше не меняется; во время игры меняется только занятость.
    """
    __slots__ = ('spaces',)

    def __init__(self):
        self.spaces: Dict[int, Space] = {}

    # =====================================================
    # Хранилище лунок
    # =====================================================

    def get_space(self, space_id: int) -> Space:
        """Лунка по id; UnknownSpaceError если такой нет."""
        try:
            return self.spaces[space_id]
        except KeyError:
            raise UnknownSpaceError(space_id) from None

    def add_space(self, space: Space):
        self.spaces[space.id] = space

    def get_spaces(self) -> Dict[int, Space]:
        return self.spaces

    def set_occupied(self, space: Space):
        space.fill()

    def set_empty(self, space: Space):
        space.empty()

    # =====================================================
    # Построение топологии
    # =====================================================

    def set_adjacent(self, first: Space, second: Space):
        """Симметричное соседство."""
        first.add_adjacent(second.id)
        second.add_adjacent(first.id)

    def add_target(self, space: Space, jump_space: Space, land_space: Space):
        """
        Регистрирует прыжок в обе стороны.

        space -> land_space через jump_space, land_space -> space через
        jump_space, и обе записи в targeted_by. Другого способа создавать
        цели нет, поэтому обратная связь всегда на месте.
        """
        space.add_target(jump_space.id, land_space.id)
        land_space.add_targeted_by(space.id)
        land_space.add_target(jump_space.id, space.id)
        space.add_targeted_by(land_space.id)

    # =====================================================
    # Правила
    # =====================================================

    def validate_jump(self, space: Space, target: Space) -> bool:
        """
        Прыжок допустим, если:
        - в space есть колышек;
        - target.id есть среди приземлений space;
        - перепрыгиваемая лунка занята;
        - target пуст.
        """
        if not space.is_occupied() or target.is_occupied():
            return False

        # Лунку, через которую прыгаем, ищем только когда цель существует
        found = space.find_target(target.id)
        if found is None:
            return False

        return self.get_space(found.jump).is_occupied()

    def apply_jump(self, space: Space, target: Space):
        """
        Выполняет прыжок или бросает InvalidJumpError без изменений доски.
        """
        if not self.validate_jump(space, target):
            raise InvalidJumpError(space.id, target.id, self._explain(space, target))

        jumped = self.get_space(space.find_target(target.id).jump)
        self.set_empty(space)
        self.set_empty(jumped)
        self.set_occupied(target)

    def jump(self, space: Space, target: Space) -> bool:
        """Прыжок; False (и запись в лог) если он недопустим."""
        try:
            self.apply_jump(space, target)
        except InvalidJumpError as e:
            get_logger().warning(str(e))
            return False
        return True

    def _explain(self, space: Space, target: Space) -> str:
        """Причина отказа для сообщения об ошибке."""
        if not space.is_occupied():
            return "no peg to move"
        found = space.find_target(target.id)
        if found is None:
            return "not a jump target"
        if target.is_occupied():
            return "landing space is occupied"
        return "nothing to jump over"

    # =====================================================
    # Ходы
    # =====================================================

    def get_empty_spaces(self) -> List[Space]:
        """Пустые лунки в порядке возрастания id."""
        return [self.spaces[space_id] for space_id in sorted(self.spaces)
                if not self.spaces[space_id].is_occupied()]

    def get_occupied_count(self) -> int:
        return sum(1 for space in self.spaces.values() if space.is_occupied())

    def get_valid_moves(self) -> List[Move]:
        """
        Все допустимые ходы.

        Порядок: пустые лунки по возрастанию id, внутри - лунки из
        targeted_by в порядке регистрации. Пары (jump, land) не повторяются.
        """
        moves: List[Move] = []
        seen: Set[Move] = set()

        for empty_space in self.get_empty_spaces():
            for space_id in empty_space.get_targeted_by():
                move = Move(space_id, empty_space.id)
                if move in seen:
                    continue
                if self.validate_jump(self.spaces[space_id], empty_space):
                    seen.add(move)
                    moves.append(move)

        return moves

    def __repr__(self) -> str:
        return f"Board({len(self.spaces)} spaces, {self.get_occupied_count()} pegs)"
