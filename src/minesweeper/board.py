"""
Board module for Minesweeper game.

Implements board configuration and presets, deferred mine placement
with a first-click safe zone, adjacency counting, and cascade reveal.
"""
import logging
import numbers
import random
from collections import deque
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Set

from .coordinate import Position, Target, in_bounds, neighbors
from .errors import InvalidConfigurationError, InvalidTargetError, OutOfBoundsError
from .tile import Tile, TileState

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
        screen_width: Suggested display width for this board.
        screen_height: Suggested display height for this board.
    """

    width: int = 8
    height: int = 8
    num_mines: int = 10
    screen_width: float = 800.0
    screen_height: float = 600.0

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidConfigurationError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidConfigurationError("Number of mines cannot be negative")
        if self.num_mines > self.size:
            raise InvalidConfigurationError(
                f"Too many mines (max {self.size} for {self.width}x{self.height})"
            )

    @property
    def size(self) -> int:
        """Total number of tiles."""
        return self.width * self.height

    @property
    def max_random_mines(self) -> int:
        """
        Largest mine count random placement can satisfy for any first click.

        The safe zone is largest (up to 3x3) for an interior click, so the
        bound uses that worst case.
        """
        return self.size - min(self.width, 3) * min(self.height, 3)


# Preset difficulty levels
EASY = BoardConfig(8, 8, 10, 800.0, 600.0)
MEDIUM = BoardConfig(16, 16, 40, 1000.0, 700.0)
HARD = BoardConfig(30, 16, 99, 1200.0, 800.0)

PRESETS: Dict[str, BoardConfig] = {
    "easy": EASY,
    "medium": MEDIUM,
    "hard": HARD,
}


def get_preset(name: str) -> BoardConfig:
    """Look up a difficulty preset by name (case-insensitive)."""
    try:
        return PRESETS[name.lower()]
    except KeyError:
        raise InvalidConfigurationError(
            f"Unknown difficulty {name!r} (expected one of {', '.join(PRESETS)})"
        ) from None


def _is_integer(value) -> bool:
    """Integral values other than bool."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper game board.

    Owns the tile grid, places mines on the first reveal, computes
    adjacency counts and performs cascade reveals. Game phase is tracked
    by the Engine, not here.
    """

    def __init__(
        self,
        config: BoardConfig,
        rng: Optional[random.Random] = None,
        mine_layout: Optional[Iterable[Target]] = None,
    ) -> None:
        """
        Initialize an empty board. Mines are not placed yet.

        Args:
            config: Board dimensions and mine count.
            rng: Random source for mine placement.
            mine_layout: Fixed mine positions (or indices) to use instead of
                random placement. The safe zone does not apply to them.

        Raises:
            InvalidConfigurationError: If the mine count cannot be placed
                outside every possible safe zone, or the layout is invalid.
        """
        self.config = config
        self.width = config.width
        self.height = config.height
        self.num_mines = config.num_mines
        self._rng = rng if rng is not None else random.Random()
        self._layout: Optional[List[int]] = None

        if mine_layout is not None:
            self._layout = self._validate_layout(mine_layout)
        elif self.num_mines > config.max_random_mines:
            raise InvalidConfigurationError(
                f"Too many mines for a safe first move "
                f"(max {config.max_random_mines} for {self.width}x{self.height})"
            )

        self.tiles: List[Tile] = [Tile() for _ in range(config.size)]
        self.concealed_count = config.size
        self.mines_placed = False

    def _validate_layout(self, layout: Iterable[Target]) -> List[int]:
        """Convert a fixed layout to indices, checking bounds and count."""
        indices = []
        for entry in layout:
            try:
                indices.append(self.index_of(entry))
            except OutOfBoundsError as exc:
                raise InvalidConfigurationError(
                    f"Mine layout entry out of bounds: {exc}"
                ) from exc
            except InvalidTargetError as exc:
                raise InvalidConfigurationError(
                    f"Malformed mine layout entry: {exc}"
                ) from exc
        if len(set(indices)) != len(indices):
            raise InvalidConfigurationError("Mine layout contains duplicates")
        if len(indices) != self.num_mines:
            raise InvalidConfigurationError(
                f"Mine layout has {len(indices)} mines, expected {self.num_mines}"
            )
        return indices

    # ========================================================================
    # Position Utilities (Low-level)
    # ========================================================================

    def index_of(self, target: Target) -> int:
        """
        Convert a position, (x, y) tuple, or index to a tile index.

        Raises:
            InvalidTargetError: If the target is not built from integers.
            OutOfBoundsError: If the target lies outside the board.
        """
        if _is_integer(target):
            if not 0 <= target < self.config.size:
                raise OutOfBoundsError(
                    f"Index {target} outside board of {self.config.size} tiles"
                )
            return int(target)
        if not isinstance(target, Position):
            try:
                target = Position(*target)
            except TypeError:
                raise InvalidTargetError(
                    f"Expected a Position, (x, y) tuple or index, got {target!r}"
                ) from None
        if not (_is_integer(target.x) and _is_integer(target.y)):
            raise InvalidTargetError(
                f"Position components must be integers, got {target!r}"
            )
        if not in_bounds(target, self.width, self.height):
            raise OutOfBoundsError(
                f"Position ({target.x}, {target.y}) outside "
                f"{self.width}x{self.height} board"
            )
        return int(target.y) * self.width + int(target.x)

    def position_of(self, target: Target) -> Position:
        """Bounds-checked conversion of any target to a Position."""
        return Position.from_index(self.index_of(target), self.width)

    def tile_at(self, target: Target) -> Tile:
        """Get the tile at a position or index."""
        return self.tiles[self.index_of(target)]

    def neighbors(self, position: Position) -> List[Position]:
        """Get in-bounds neighbors of a position."""
        return neighbors(position, self.width, self.height)

    def safe_zone(self, position: Position) -> Set[int]:
        """Indices of a position and its in-bounds neighbors."""
        zone = {position.to_index(self.width)}
        for neighbor in self.neighbors(position):
            zone.add(neighbor.to_index(self.width))
        return zone

    # ========================================================================
    # Mine Placement (Mid-level)
    # ========================================================================

    def place_mines(self, safe_position: Position) -> None:
        """
        Place mines, keeping the safe zone around safe_position clear.

        Uses the fixed layout when one was given. Otherwise samples random
        indices, rejecting ones already mined or inside the safe zone.

        Args:
            safe_position: The first revealed position.

        Raises:
            RuntimeError: If mines were already placed.
            InvalidConfigurationError: If the mines do not fit outside the
                safe zone.
        """
        if self.mines_placed:
            raise RuntimeError("Mines have already been placed")

        if self._layout is not None:
            mine_indices = self._layout
        else:
            mine_indices = self._sample_mines(self.safe_zone(safe_position))

        for index in mine_indices:
            self.tiles[index].is_mine = True
        self.mines_placed = True
        logger.debug(
            "Placed %d mines on %dx%d board (safe position %s)",
            self.num_mines, self.width, self.height, safe_position.as_tuple(),
        )

    def _sample_mines(self, safe: Set[int]) -> List[int]:
        """Rejection-sample distinct mine indices outside the safe set."""
        size = self.config.size
        if self.num_mines > size - len(safe):
            raise InvalidConfigurationError(
                f"Cannot place {self.num_mines} mines outside a safe zone "
                f"of {len(safe)} tiles on a {size}-tile board"
            )
        chosen: Set[int] = set()
        placed: List[int] = []
        while len(placed) < self.num_mines:
            index = self._rng.randrange(size)
            if index in chosen or index in safe:
                continue
            chosen.add(index)
            placed.append(index)
        return placed

    def compute_adjacency(self) -> None:
        """Calculate adjacent mine counts for all non-mine tiles."""
        for index, tile in enumerate(self.tiles):
            if tile.is_mine:
                continue
            position = Position.from_index(index, self.width)
            tile.adjacent_mines = sum(
                1 for neighbor in self.neighbors(position)
                if self.tiles[neighbor.to_index(self.width)].is_mine
            )

    # ========================================================================
    # Revealing (Mid-level)
    # ========================================================================

    def reveal_cascade(self, start: Position) -> int:
        """
        Reveal a tile and flood outwards across zero-count tiles.

        Revealed and flagged tiles are skipped when dequeued, so a position
        may be queued more than once. Flagged tiles stop the flood.

        Args:
            start: Position to reveal. Must not hold a mine.

        Returns:
            Number of tiles revealed.
        """
        queue = deque([start])
        revealed = 0

        while queue:
            position = queue.popleft()
            tile = self.tiles[position.to_index(self.width)]
            if tile.state != TileState.CONCEALED:
                continue

            tile.state = TileState.REVEALED
            self.concealed_count -= 1
            revealed += 1

            if tile.adjacent_mines == 0:
                queue.extend(self.neighbors(position))

        logger.debug("Cascade from %s revealed %d tiles", start.as_tuple(), revealed)
        return revealed

    def reveal_mine(self, position: Position) -> None:
        """Reveal a mine tile as the detonated mine."""
        tile = self.tile_at(position)
        tile.state = TileState.REVEALED
        self.concealed_count -= 1

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def revealed_count(self) -> int:
        """Number of revealed tiles."""
        return self.config.size - self.concealed_count

    @property
    def is_cleared(self) -> bool:
        """Check if only mines remain concealed."""
        return self.concealed_count == self.num_mines
