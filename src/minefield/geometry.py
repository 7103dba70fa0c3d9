"""
Geometry module for Minesweeper boards.

Boards are square and stored row-major as a flat sequence of tiles, so a
tile is identified only by its index. This module maps indices to grid
positions and computes neighbor indices with edge and corner handling.
"""
import math
from functools import lru_cache
from typing import Tuple


# ============================================================================
# Position Conversion
# ============================================================================

def side_of(tile_count: int) -> int:
    """
    Get the side length of a square board holding tile_count tiles.

    Raises:
        ValueError: If tile_count is not a positive perfect square.
    """
    side = math.isqrt(tile_count) if tile_count > 0 else 0
    if side < 1 or side * side != tile_count:
        raise ValueError(f"Board of {tile_count} tiles is not square")
    return side


def position(side: int, index: int) -> Tuple[int, int]:
    """Convert flat tile index to (row, col) position."""
    return index // side, index % side


def index_of(side: int, row: int, col: int) -> int:
    """Convert (row, col) position to flat tile index."""
    return row * side + col


# ============================================================================
# Neighbors
# ============================================================================

@lru_cache(maxsize=None)
def neighbors(
    side: int, index: int, diagonals_excluded: bool = False
) -> Tuple[int, ...]:
    """
    Get indices of tiles adjacent to index on a side x side board.

    Args:
        side: Board side length.
        index: Flat index of the center tile.
        diagonals_excluded: Only return up/down/left/right neighbors.

    Returns:
        Neighbor indices, ordered top-left to bottom-right.

    Raises:
        IndexError: If index is outside the board.
    """
    if not 0 <= index < side * side:
        raise IndexError(
            f"Tile index {index} out of range for {side}x{side} board"
        )
    on_top = index < side
    on_bottom = index >= side * side - side
    on_left = index % side == 0
    on_right = (index + 1) % side == 0
    diagonals = not diagonals_excluded

    candidates = (
        (-side - 1, diagonals and not on_top and not on_left),
        (-side, not on_top),
        (-side + 1, diagonals and not on_top and not on_right),
        (-1, not on_left),
        (1, not on_right),
        (side - 1, diagonals and not on_bottom and not on_left),
        (side, not on_bottom),
        (side + 1, diagonals and not on_bottom and not on_right),
    )
    return tuple(index + offset for offset, allowed in candidates if allowed)
