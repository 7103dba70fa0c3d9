"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import GameState, LevelConfig, board_from_mines, parse_board


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def empty_state() -> GameState:
    """Create a 3x3 board with no mines."""
    return GameState(board_from_mines(3, []))


@pytest.fixture
def corner_mine_state() -> GameState:
    """Create a 3x3 board with a single mine at index 0."""
    return GameState(board_from_mines(3, [0]))


@pytest.fixture
def far_corner_mine_state() -> GameState:
    """Create a 3x3 board with a single mine at index 8."""
    return GameState(board_from_mines(3, [8]))


@pytest.fixture
def walled_state() -> GameState:
    """
    Create a 5x5 board split by a column of mines.

    Revealing on the left of the wall must never cross to the right.
    """
    return GameState(parse_board([
        ". . * . .",
        ". . * . .",
        ". . * . .",
        ". . * . .",
        ". . * . .",
    ]))


@pytest.fixture
def large_empty_state() -> GameState:
    """Create a 30x30 board with no mines."""
    return GameState(board_from_mines(30, []))


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator."""
    return np.random.default_rng(1234)


@pytest.fixture
def small_config() -> LevelConfig:
    """Small level for fast environment tests."""
    return LevelConfig(4, 0.2)
