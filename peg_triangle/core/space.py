"""
core/space.py

Лунка доски: занятость, соседи, цели прыжков и обратный индекс.
"""

from typing import List, NamedTuple, Optional, Set


class Target(NamedTuple):
    """Прыжок из лунки: через jump, с приземлением в land."""
    jump: int
    land: int


class Move(NamedTuple):
    """Ход: колышек из лунки jump прыгает в лунку land."""
    jump: int
    land: int


class Space:
    """
    Одна лунка доски.

    Никаких проверок: за корректность отвечает Board.
    """
    __slots__ = ('id', 'occupied', 'adjacent', 'targets', 'targeted_by')

    def __init__(self, space_id: int, occupied: bool = False):
        self.id = space_id
        self.occupied = occupied
        self.adjacent: Set[int] = set()
        self.targets: List[Target] = []
        self.targeted_by: List[int] = []

    def is_occupied(self) -> bool:
        return self.occupied

    def fill(self):
        self.occupied = True

    def empty(self):
        self.occupied = False

    def add_adjacent(self, space_id: int):
        self.adjacent.add(space_id)

    def get_adjacent(self) -> Set[int]:
        return self.adjacent

    def add_target(self, jump_id: int, land_id: int):
        """Добавляет цель (повторная регистрация игнорируется)."""
        target = Target(jump_id, land_id)
        if target not in self.targets:
            self.targets.append(target)

    def get_targets(self) -> List[Target]:
        return self.targets

    def find_target(self, land_id: int) -> Optional[Target]:
        """Цель с приземлением в land_id; None если её нет."""
        for target in self.targets:
            if target.land == land_id:
                return target
        return None

    def add_targeted_by(self, space_id: int):
        if space_id not in self.targeted_by:
            self.targeted_by.append(space_id)

    def get_targeted_by(self) -> List[int]:
        return self.targeted_by

    def __repr__(self) -> str:
        state = 'occupied' if self.occupied else 'empty'
        return f"Space({self.id}, {state})"
