"""
Tile module for Minesweeper game.

Represents individual tiles on the game board. Tiles are immutable value
objects: every transition replaces a tile rather than changing it.
"""
from dataclasses import dataclass, replace


# ============================================================================
# Constants
# ============================================================================

HIDDEN_OBSERVATION = -1
FLAGGED_OBSERVATION = -2
MINE_OBSERVATION = 9


# ============================================================================
# Tile Data Class
# ============================================================================

@dataclass(frozen=True)
class Tile:
    """
    Represents a single tile in the Minesweeper grid.

    A tile does not know its own index; its position in the board
    sequence is its identity.

    Attributes:
        exposed: Whether the tile has been revealed.
        flagged: Whether the player has marked the tile as a mine.
        mine: Whether this tile contains a mine.
    """

    exposed: bool = False
    flagged: bool = False
    mine: bool = False

    def with_exposed(self) -> "Tile":
        """Return an exposed copy of this tile."""
        if self.exposed:
            return self
        return replace(self, exposed=True)

    def with_flag_toggled(self) -> "Tile":
        """Return a copy of this tile with its flag toggled."""
        return replace(self, flagged=not self.flagged)

    @property
    def is_hidden(self) -> bool:
        """Check if tile is hidden and unflagged."""
        return not self.exposed and not self.flagged

    def to_observation(self, label: int) -> int:
        """
        Convert tile to observation value for an agent.

        Args:
            label: Number of mines around this tile.

        Returns:
            -1: Hidden tile
            -2: Flagged tile
            0-8: Exposed tile with adjacent mine count
            9: Exposed mine (game over state)
        """
        if not self.exposed:
            return FLAGGED_OBSERVATION if self.flagged else HIDDEN_OBSERVATION
        if self.mine:
            return MINE_OBSERVATION
        return label
