"""
Minesweeper game module.

Provides the board engine (geometry, generation, flood fill), the game
reducer with its commands and outcome queries, and a Gymnasium wrapper.
"""
from .tile import Tile
from .geometry import neighbors, position, index_of, side_of
from .board import (
    Board,
    LevelConfig,
    LEVELS,
    INITIAL_LEVEL,
    level_for,
    init_board,
    board_from_mines,
    parse_board,
    neighbor_tiles,
    mines_around,
    label,
    reveal_set,
)
from .state import (
    GameState,
    Outcome,
    Command,
    Reset,
    Reveal,
    Flag,
    reset,
    reveal,
    flag,
    new_game,
    apply,
    is_won,
    is_lost,
    outcome,
    flagged_count,
    mine_count,
    exposed_count,
    label_for,
    get_observation,
    render,
)
from .environment import MinesweeperEnv

__all__ = [
    "Tile",
    "neighbors",
    "position",
    "index_of",
    "side_of",
    "Board",
    "LevelConfig",
    "LEVELS",
    "INITIAL_LEVEL",
    "level_for",
    "init_board",
    "board_from_mines",
    "parse_board",
    "neighbor_tiles",
    "mines_around",
    "label",
    "reveal_set",
    "GameState",
    "Outcome",
    "Command",
    "Reset",
    "Reveal",
    "Flag",
    "reset",
    "reveal",
    "flag",
    "new_game",
    "apply",
    "is_won",
    "is_lost",
    "outcome",
    "flagged_count",
    "mine_count",
    "exposed_count",
    "label_for",
    "get_observation",
    "render",
    "MinesweeperEnv",
]
