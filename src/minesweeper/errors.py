"""
Exceptions raised by the Minesweeper engine.
"""


class MinesweeperError(Exception):
    """Base class for engine errors."""


class InvalidConfigurationError(MinesweeperError, ValueError):
    """Board dimensions, mine count, or mine layout cannot form a game."""


class OutOfBoundsError(MinesweeperError, IndexError):
    """A position or index lies outside the board."""


class InvalidTargetError(MinesweeperError, TypeError):
    """A position or index is not made of integers."""
