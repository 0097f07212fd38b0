"""
tests/conftest.py

Общие фикстуры и маркер slow (полный перебор стандартной доски).
"""

import os
import sys

import pytest

# Добавляем корень проекта в путь
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from peg_triangle.core import StandardBoard


def pytest_addoption(parser):
    parser.addoption(
        "--runslow", action="store_true", default=False,
        help="run slow tests (full 15-space search)"
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: full exhaustive search, needs --runslow")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--runslow"):
        return
    skip_slow = pytest.mark.skip(reason="needs --runslow")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def board() -> StandardBoard:
    """Свежая стандартная доска: пуста только лунка 1."""
    return StandardBoard().create_board()


@pytest.fixture
def make_position():
    """Стандартная доска с колышками ровно в указанных лунках."""
    def _make(*occupied: int) -> StandardBoard:
        return StandardBoard().create_board().load_occupancy(occupied)
    return _make
