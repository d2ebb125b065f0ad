"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Engine, Position, Tile


class ScriptedRandom:
    """Random source that replays a fixed sequence of randrange results."""

    def __init__(self, values) -> None:
        self._values = iter(values)
        self.calls = 0

    def randrange(self, stop: int) -> int:
        self.calls += 1
        value = next(self._values)
        assert 0 <= value < stop
        return value


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible mine placement."""
    return random.Random(1234)


@pytest.fixture
def default_engine(rng: random.Random) -> Engine:
    """Create an EASY engine (8x8, 10 mines) with a seeded random source."""
    return Engine(rng=rng)


@pytest.fixture
def empty_engine() -> Engine:
    """Create a 5x5 engine with no mines for cascade testing."""
    return Engine.new(5, 5, 0)


@pytest.fixture
def center_mine_engine() -> Engine:
    """Create a 3x3 engine with a single mine fixed at the center."""
    return Engine.new(3, 3, 1, mine_layout=[Position(1, 1)])


@pytest.fixture
def wall_engine() -> Engine:
    """
    Create a 5x5 engine with a wall of mines down column 2.

    Columns 0 count 0, columns 1 and 3 border the wall, column 4 counts 0.
    """
    wall = [Position(2, y) for y in range(5)]
    return Engine.new(5, 5, 5, mine_layout=wall)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def scripted_rng():
    """Factory for scripted random sources."""
    return ScriptedRandom


# ============================================================================
# Tile Fixtures
# ============================================================================

@pytest.fixture
def concealed_tile() -> Tile:
    """Create a concealed tile."""
    return Tile()


@pytest.fixture
def mine_tile() -> Tile:
    """Create a tile containing a mine."""
    return Tile(is_mine=True)
