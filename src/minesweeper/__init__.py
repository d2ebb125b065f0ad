"""
Minesweeper rules engine.

Provides the board, tile and coordinate model, deferred mine placement,
cascade reveals and the game phase state machine.
"""
from .errors import (
    InvalidConfigurationError,
    InvalidTargetError,
    MinesweeperError,
    OutOfBoundsError,
)
from .coordinate import ADJACENT_OFFSETS, Position, Target, in_bounds, neighbors
from .tile import Tile, TileState
from .board import Board, BoardConfig, EASY, MEDIUM, HARD, PRESETS, get_preset
from .engine import Engine, Phase
from .environment import MinesweeperEnv

__all__ = [
    "MinesweeperError",
    "InvalidConfigurationError",
    "OutOfBoundsError",
    "InvalidTargetError",
    "ADJACENT_OFFSETS",
    "Position",
    "Target",
    "in_bounds",
    "neighbors",
    "Tile",
    "TileState",
    "Board",
    "BoardConfig",
    "EASY",
    "MEDIUM",
    "HARD",
    "PRESETS",
    "get_preset",
    "Engine",
    "Phase",
    "MinesweeperEnv",
]
