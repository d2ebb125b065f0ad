"""
Game engine for Minesweeper.

Wraps a Board with the game phase state machine and the mines-left
counter, and exposes the operations a front end calls: reveal, flag
and read-only tile snapshots.
"""
import logging
import random
from dataclasses import replace
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .board import EASY, Board, BoardConfig
from .coordinate import Target
from .tile import Tile, TileState

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class Phase(Enum):
    """Game phase. WON and LOST are terminal."""

    FIRST_MOVE = auto()
    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Engine Class
# ============================================================================

class Engine:
    """
    Minesweeper rules engine.

    Mines are placed on the first reveal so that the revealed tile and
    its neighbors are always safe. Reveals and flags are ignored once
    the game is won or lost.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
        mine_layout: Optional[Iterable[Target]] = None,
    ) -> None:
        """
        Initialize the engine for a new game.

        Args:
            config: Board configuration (default: EASY preset).
            rng: Random source for mine placement.
            mine_layout: Fixed mine positions to use instead of random
                placement.

        Raises:
            InvalidConfigurationError: If the board cannot be built.
        """
        self._rng = rng if rng is not None else random.Random()
        self._start(config or EASY, mine_layout)

    @classmethod
    def new(cls, width: int, height: int, num_mines: int, **kwargs) -> "Engine":
        """Create an engine for a board of the given size."""
        return cls(BoardConfig(width, height, num_mines), **kwargs)

    def _start(
        self,
        config: BoardConfig,
        mine_layout: Optional[Iterable[Target]] = None,
    ) -> None:
        if mine_layout is not None:
            mine_layout = tuple(mine_layout)
        self._board = Board(config, rng=self._rng, mine_layout=mine_layout)
        self._mine_layout = mine_layout
        self._phase = Phase.FIRST_MOVE
        self._mines_left = config.num_mines

    def reset(self, config: Optional[BoardConfig] = None) -> None:
        """
        Start a new game, replacing the board.

        A fixed mine layout is kept as long as the configuration does not
        change. A new configuration always uses random placement.

        Args:
            config: New configuration, e.g. after a difficulty change.
                Defaults to the current one.

        Raises:
            InvalidConfigurationError: If the new configuration cannot be
                placed randomly.
        """
        if config is None or config == self._board.config:
            config = self._board.config
            mine_layout = self._mine_layout
        else:
            mine_layout = None
        self._start(config, mine_layout)
        logger.info(
            "New game: %dx%d with %d mines",
            config.width, config.height, config.num_mines,
        )

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, target: Target) -> bool:
        """
        Reveal the tile at target.

        The first reveal places mines around it. Revealing a mine loses
        the game; revealing a zero tile cascades to its neighbors.

        Args:
            target: Position, (x, y) tuple, or tile index.

        Returns:
            True if any tile was revealed, False if the call was a no-op.

        Raises:
            OutOfBoundsError: If target is outside the board.
        """
        position = self._board.position_of(target)
        if self.is_over:
            return False

        if self._phase == Phase.FIRST_MOVE:
            self._board.place_mines(position)
            self._board.compute_adjacency()
            self._phase = Phase.IN_PROGRESS

        tile = self._board.tile_at(position)
        if tile.state != TileState.CONCEALED:
            return False

        if tile.is_mine:
            self._board.reveal_mine(position)
            self._phase = Phase.LOST
            logger.info("Game lost: mine at %s", position.as_tuple())
            return True

        self._board.reveal_cascade(position)
        self._check_win_condition()
        return True

    def _check_win_condition(self) -> None:
        """Win once only mines remain concealed."""
        if self._board.is_cleared:
            self._phase = Phase.WON
            logger.info("Game won")

    def flag(self, target: Target) -> bool:
        """
        Toggle the flag on a concealed tile.

        Args:
            target: Position, (x, y) tuple, or tile index.

        Returns:
            True if the flag was toggled, False otherwise.

        Raises:
            OutOfBoundsError: If target is outside the board.
        """
        tile = self._board.tile_at(target)
        if self.is_over:
            return False
        if not tile.toggle_flag():
            return False
        self._mines_left += -1 if tile.is_flagged else 1
        return True

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._phase == Phase.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._phase == Phase.LOST

    @property
    def is_over(self) -> bool:
        return self._phase in (Phase.WON, Phase.LOST)

    @property
    def is_playing(self) -> bool:
        """Check if the game still accepts moves."""
        return not self.is_over

    @property
    def mines_left(self) -> int:
        """Mines minus flags, clamped at zero for display."""
        return max(self._mines_left, 0)

    @property
    def mines_left_raw(self) -> int:
        """Mines minus flags; negative when over-flagged."""
        return self._mines_left

    @property
    def config(self) -> BoardConfig:
        return self._board.config

    @property
    def width(self) -> int:
        return self._board.width

    @property
    def height(self) -> int:
        return self._board.height

    @property
    def num_mines(self) -> int:
        return self._board.num_mines

    @property
    def concealed_count(self) -> int:
        """Number of tiles not yet revealed, flagged ones included."""
        return self._board.concealed_count

    @property
    def revealed_count(self) -> int:
        return self._board.revealed_count

    def tiles(self) -> Tuple[Tile, ...]:
        """
        Snapshot of every tile, row-major.

        Returns copies; changing them does not affect the game.
        """
        return tuple(replace(tile) for tile in self._board.tiles)

    def tile_at(self, target: Target) -> Tile:
        """Snapshot of a single tile."""
        return replace(self._board.tile_at(target))

    def observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            (height, width) int8 array where:
                -1 = concealed
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        values = [tile.to_observation() for tile in self._board.tiles]
        return np.array(values, dtype=np.int8).reshape(self.height, self.width)

    def valid_actions(self) -> List[int]:
        """
        Get indices of tiles that can be revealed.

        Returns:
            Row-major indices of concealed, unflagged tiles.
        """
        return [
            index for index, tile in enumerate(self._board.tiles)
            if tile.state == TileState.CONCEALED
        ]
