"""
Grid coordinates for the Minesweeper board.

Positions are (x, y) pairs with x as the column and y as the row.
Tiles are stored row-major, so a position maps to index y * width + x.
"""
from dataclasses import dataclass
from typing import List, Tuple, Union


# ============================================================================
# Position
# ============================================================================

@dataclass(frozen=True)
class Position:
    """
    A cell coordinate on the board.

    Attributes:
        x: Column index.
        y: Row index.
    """

    x: int
    y: int

    @classmethod
    def from_index(cls, index: int, width: int) -> "Position":
        """Build a position from a row-major tile index."""
        return cls(index % width, index // width)

    def to_index(self, width: int) -> int:
        """Convert to a row-major tile index."""
        return self.y * width + self.x

    def __add__(self, other: "Position") -> "Position":
        return Position(self.x + other.x, self.y + other.y)

    def as_tuple(self) -> Tuple[int, int]:
        return self.x, self.y


# Anything callers may use to address a tile: a Position, an (x, y)
# tuple, or a row-major index
Target = Union[Position, Tuple[int, int], int]


# Clockwise from the upper-left neighbor
ADJACENT_OFFSETS: Tuple[Position, ...] = (
    Position(-1, -1),
    Position(0, -1),
    Position(1, -1),
    Position(1, 0),
    Position(1, 1),
    Position(0, 1),
    Position(-1, 1),
    Position(-1, 0),
)


# ============================================================================
# Neighbor Utilities
# ============================================================================

def in_bounds(position: Position, width: int, height: int) -> bool:
    """Check if position is within board bounds."""
    return 0 <= position.x < width and 0 <= position.y < height


def neighbors(position: Position, width: int, height: int) -> List[Position]:
    """
    Get in-bounds neighbors of a position.

    Args:
        position: Center position.
        width: Board width.
        height: Board height.

    Returns:
        Neighboring positions, in ADJACENT_OFFSETS order.
    """
    result = []
    for offset in ADJACENT_OFFSETS:
        candidate = position + offset
        if in_bounds(candidate, width, height):
            result.append(candidate)
    return result
