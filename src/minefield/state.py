"""
Game state module for Minesweeper.

The game is driven by a pure reducer: apply(state, command) returns a new
GameState and never changes the old one. Win and loss are derived from
the tiles on every query rather than stored.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Union

import numpy as np

from .board import (
    Board,
    INITIAL_LEVEL,
    LevelConfig,
    check_index,
    init_board,
    label,
    level_for,
    reveal_set,
)
from .geometry import side_of


# ============================================================================
# Constants
# ============================================================================

class Outcome(Enum):
    """Possible outcomes of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Game State
# ============================================================================

@dataclass(frozen=True)
class GameState:
    """
    Snapshot of a game.

    Attributes:
        tiles: Board tiles in row-major order.
        level_id: Name of the preset the board was generated from, if any.
    """

    tiles: Board
    level_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Normalize tiles to a tuple and validate the board shape."""
        object.__setattr__(self, "tiles", tuple(self.tiles))
        side_of(len(self.tiles))

    @property
    def side(self) -> int:
        """Board side length."""
        return side_of(len(self.tiles))


# ============================================================================
# Commands
# ============================================================================

@dataclass(frozen=True)
class Reset:
    """Replace the board. Tiles are generated when the command is built."""

    tiles: Board = field(repr=False)
    level_id: Optional[str] = None


@dataclass(frozen=True)
class Reveal:
    """Expose the tile at index."""

    index: int


@dataclass(frozen=True)
class Flag:
    """Toggle the flag on the tile at index."""

    index: int


Command = Union[Reset, Reveal, Flag]


def reset(
    level_id: Optional[str] = None,
    config: Optional[LevelConfig] = None,
    rng: Optional[np.random.Generator] = None,
) -> Reset:
    """
    Build a Reset command with a freshly generated board.

    Args:
        level_id: Preset name (default: the initial level).
        config: Explicit level configuration, overriding the preset.
        rng: Random generator used for mine placement.
    """
    if config is None:
        level_id = level_id or INITIAL_LEVEL
        config = level_for(level_id)
    return Reset(init_board(config.side, config.mine_pct, rng), level_id)


def reveal(index: int) -> Reveal:
    return Reveal(index)


def flag(index: int) -> Flag:
    return Flag(index)


def new_game(
    level_id: str = INITIAL_LEVEL,
    rng: Optional[np.random.Generator] = None,
) -> GameState:
    """Create the starting state for a preset level."""
    command = reset(level_id, rng=rng)
    return GameState(command.tiles, command.level_id)


# ============================================================================
# Reducer
# ============================================================================

def apply(state: GameState, command: Command) -> GameState:
    """
    Apply a command to a state.

    Reveal on a flagged tile and Flag on an exposed tile return the
    state unchanged. Commands are still processed once the game is won
    or lost.

    Raises:
        IndexError: If the command targets a tile outside the board.
        TypeError: If command is not a known command.
    """
    if isinstance(command, Reset):
        return GameState(command.tiles, command.level_id)
    if isinstance(command, Reveal):
        return _apply_reveal(state, command.index)
    if isinstance(command, Flag):
        return _apply_flag(state, command.index)
    raise TypeError(f"Unknown command: {command!r}")


def _apply_reveal(state: GameState, index: int) -> GameState:
    """Expose the flood-fill region of index."""
    tiles = state.tiles
    check_index(len(tiles), index)
    if tiles[index].flagged:
        return state

    to_expose = reveal_set(tiles, index)
    if all(tiles[i].exposed for i in to_expose):
        return state

    new_tiles = tuple(
        tile.with_exposed() if i in to_expose else tile
        for i, tile in enumerate(tiles)
    )
    return GameState(new_tiles, state.level_id)


def _apply_flag(state: GameState, index: int) -> GameState:
    """Toggle the flag on a single unexposed tile."""
    tiles = state.tiles
    check_index(len(tiles), index)
    if tiles[index].exposed:
        return state

    new_tiles = tiles[:index] + (tiles[index].with_flag_toggled(),) + tiles[index + 1:]
    return GameState(new_tiles, state.level_id)


# ============================================================================
# Outcome Queries
# ============================================================================

def is_lost(state: GameState) -> bool:
    """Check if any mine has been exposed."""
    return any(tile.mine and tile.exposed for tile in state.tiles)


def is_won(state: GameState) -> bool:
    """Check if every safe tile is exposed and no mine is."""
    return not is_lost(state) and all(
        tile.exposed or tile.mine for tile in state.tiles
    )


def outcome(state: GameState) -> Outcome:
    """Get the current outcome."""
    if is_lost(state):
        return Outcome.LOST
    if is_won(state):
        return Outcome.WON
    return Outcome.PLAYING


def flagged_count(state: GameState) -> int:
    return sum(1 for tile in state.tiles if tile.flagged)


def mine_count(state: GameState) -> int:
    return sum(1 for tile in state.tiles if tile.mine)


def exposed_count(state: GameState) -> int:
    return sum(1 for tile in state.tiles if tile.exposed)


def label_for(state: GameState, index: int) -> int:
    """
    Get the number of mines around a tile.

    Only meaningful for an exposed tile that is not a mine.
    """
    return label(state.tiles, index)


# ============================================================================
# Views
# ============================================================================

def get_observation(state: GameState) -> np.ndarray:
    """
    Get board state as numpy array for an agent.

    Returns:
        2D numpy array where:
            -1 = hidden
            -2 = flagged
            0-8 = exposed with adjacent count
            9 = exposed mine
    """
    side = state.side
    obs = np.zeros((side, side), dtype=np.int8)
    for index, tile in enumerate(state.tiles):
        obs[index // side, index % side] = tile.to_observation(
            label(state.tiles, index) if tile.exposed else 0
        )
    return obs


def render(state: GameState) -> str:
    """Render board as ASCII string."""
    symbols = {-1: ".", -2: "F", 9: "*", 0: " "}
    obs = get_observation(state)
    return "\n".join(
        " ".join(symbols.get(int(val), str(val)) for val in row)
        for row in obs
    )
