"""
Board module for Minesweeper game.

Implements level configuration, random board generation, adjacency
queries and the flood-fill that decides which tiles a reveal exposes.

A board is a tuple of side * side tiles in row-major order.
"""
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .geometry import neighbors, side_of
from .tile import Tile


Board = Tuple[Tile, ...]


# ============================================================================
# Level Configuration
# ============================================================================

@dataclass(frozen=True)
class LevelConfig:
    """
    Configuration for generating a board.

    Attributes:
        side: Number of rows (and columns).
        mine_pct: Probability in [0, 1) that any given tile is a mine.
    """

    side: int = 10
    mine_pct: float = 0.1

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.side < 1:
            raise ValueError("Board side must be positive")
        if not 0 <= self.mine_pct < 1:
            raise ValueError("Mine percentage must be in [0, 1)")


# Preset difficulty levels
LEVELS: Dict[str, LevelConfig] = {
    "easy": LevelConfig(10, 0.1),
    "medium": LevelConfig(15, 0.25),
    "hard": LevelConfig(20, 0.3),
    "nuts": LevelConfig(30, 0.5),
}

INITIAL_LEVEL = "easy"


def level_for(level_id: str) -> LevelConfig:
    """Look up a preset level by name."""
    try:
        return LEVELS[level_id]
    except KeyError:
        raise ValueError(
            f"Unknown level {level_id!r} (choose from {', '.join(LEVELS)})"
        ) from None


# ============================================================================
# Board Generation
# ============================================================================

def init_board(
    side: int,
    mine_pct: float,
    rng: Optional[np.random.Generator] = None,
) -> Board:
    """
    Create a fresh board with randomly placed mines.

    Each tile independently becomes a mine when a uniform draw from
    [0, 1) falls below mine_pct, so the number of mines varies between
    boards and may be zero.

    Args:
        side: Board side length.
        mine_pct: Mine density in [0, 1).
        rng: Random generator (default: a fresh unseeded generator).

    Returns:
        Tuple of side * side unexposed, unflagged tiles.
    """
    config = LevelConfig(side, mine_pct)
    rng = rng if rng is not None else np.random.default_rng()
    draws = rng.random(config.side * config.side)
    return tuple(Tile(mine=bool(draw < config.mine_pct)) for draw in draws)


def board_from_mines(side: int, mines: Iterable[int]) -> Board:
    """Create an unexposed board with mines at the given indices."""
    if side < 1:
        raise ValueError("Board side must be positive")
    mine_set = set(mines)
    for index in mine_set:
        check_index(side * side, index)
    return tuple(Tile(mine=index in mine_set) for index in range(side * side))


def parse_board(rows: Sequence[str]) -> Board:
    """
    Create a board from an ASCII layout.

    Each string is one row; "*" marks a mine and any other character a
    safe tile. Whitespace is ignored.

    Example:
        parse_board(["*..", "...", "..*"])
    """
    grid = ["".join(row.split()) for row in rows]
    side = len(grid)
    if any(len(row) != side for row in grid):
        raise ValueError("Board layout must be square")
    mines = [
        r * side + c
        for r, row in enumerate(grid)
        for c, char in enumerate(row)
        if char == "*"
    ]
    return board_from_mines(side, mines)


# ============================================================================
# Adjacency Queries
# ============================================================================

def check_index(tile_count: int, index: int) -> None:
    """Fail fast on a tile index outside the board."""
    if not 0 <= index < tile_count:
        raise IndexError(
            f"Tile index {index} out of range for board of {tile_count} tiles"
        )


def neighbor_tiles(board: Board, index: int) -> List[Tile]:
    """Get the tiles surrounding index, diagonals included."""
    check_index(len(board), index)
    return [board[i] for i in neighbors(side_of(len(board)), index)]


def mines_around(board: Board, index: int) -> List[Tile]:
    """Get the mine tiles surrounding index."""
    return [tile for tile in neighbor_tiles(board, index) if tile.mine]


def label(board: Board, index: int) -> int:
    """Count mines surrounding index (the number shown on the tile)."""
    return len(mines_around(board, index))


# ============================================================================
# Flood Fill
# ============================================================================

def reveal_set(board: Board, start: int) -> FrozenSet[int]:
    """
    Compute which tiles revealing start exposes.

    A mine, or a tile with mines around it, exposes only itself. A zero
    tile seeds a traversal over up/down/left/right neighbors: zero tiles
    are exposed and expanded, tiles with mines around them are exposed as
    the boundary of the region but not expanded.

    Args:
        board: Current board.
        start: Index being revealed.

    Returns:
        Indices to mark as exposed.
    """
    check_index(len(board), start)
    if board[start].mine or label(board, start) > 0:
        return frozenset((start,))

    side = side_of(len(board))
    result = {start}
    visited = {start}
    stack = [start]

    while stack:
        current = stack.pop()
        for index in neighbors(side, current, True):
            if index in visited:
                continue
            visited.add(index)
            # A zero tile has no mine neighbors, so index is never a mine
            result.add(index)
            if label(board, index) == 0:
                stack.append(index)

    return frozenset(result)
