"""
Tile module for Minesweeper game.

Represents individual tiles on the game board with their visibility
(concealed/flagged/revealed) and content (mine/adjacent count).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class TileState(Enum):
    """Visibility of a tile. FLAGGED is a concealed tile carrying a flag."""

    CONCEALED = auto()
    FLAGGED = auto()
    REVEALED = auto()


# Observation codes for numeric snapshots
OBS_CONCEALED = -1
OBS_FLAGGED = -2
OBS_MINE = 9


# ============================================================================
# Tile Data Class
# ============================================================================

@dataclass
class Tile:
    """
    Represents a single tile in the Minesweeper grid.

    Attributes:
        is_mine: Whether this tile holds a mine. Set once at placement.
        adjacent_mines: Count of mines in neighboring tiles (0-8). Stays 0
            for mines and until mines have been placed.
        state: Current visibility.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: TileState = TileState.CONCEALED

    def reveal(self) -> bool:
        """
        Reveal this tile.

        Returns:
            True if the tile was revealed, False if already revealed
            or flagged.
        """
        if self.state != TileState.CONCEALED:
            return False
        self.state = TileState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this tile.

        Returns:
            True if flag was toggled, False if tile is revealed.
        """
        if self.state == TileState.REVEALED:
            return False
        if self.state == TileState.CONCEALED:
            self.state = TileState.FLAGGED
        else:
            self.state = TileState.CONCEALED
        return True

    @property
    def is_concealed(self) -> bool:
        """Check if tile is not revealed (flagged or not)."""
        return self.state != TileState.REVEALED

    @property
    def is_revealed(self) -> bool:
        """Check if tile is revealed."""
        return self.state == TileState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if tile is flagged."""
        return self.state == TileState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert tile to a numeric observation value.

        Returns:
            -1: Concealed tile
            -2: Flagged tile
            0-8: Revealed tile with adjacent mine count
            9: Revealed mine (detonated)
        """
        if self.state == TileState.CONCEALED:
            return OBS_CONCEALED
        if self.state == TileState.FLAGGED:
            return OBS_FLAGGED
        if self.is_mine:
            return OBS_MINE
        return self.adjacent_mines
