"""
Cell module for Minesweeper game.

Represents individual grid positions on the shared board with their
bomb membership and visibility status (untouched/flagged/dug).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellStatus(Enum):
    """Possible visibility states of a cell."""

    UNTOUCHED = auto()
    FLAGGED = auto()
    DUG = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Cells carry no locking of their own; they are only ever mutated by
    the Board that owns them, while it holds its lock.

    Attributes:
        has_bomb: Whether this cell contains a bomb. Fixed at construction,
            and kept even after the cell has been dug.
        status: Current visibility status.
    """

    has_bomb: bool = False
    status: CellStatus = CellStatus.UNTOUCHED

    def dig(self) -> bool:
        """
        Dig this cell.

        Returns:
            True if the cell went from untouched to dug, False if it was
            already dug or is flagged.
        """
        if self.status != CellStatus.UNTOUCHED:
            return False
        self.status = CellStatus.DUG
        return True

    def flag(self) -> bool:
        """
        Flag this cell.

        Returns:
            True if the cell was untouched and is now flagged.
        """
        if self.status != CellStatus.UNTOUCHED:
            return False
        self.status = CellStatus.FLAGGED
        return True

    def deflag(self) -> bool:
        """
        Remove the flag from this cell.

        Returns:
            True if the cell was flagged and is now untouched.
        """
        if self.status != CellStatus.FLAGGED:
            return False
        self.status = CellStatus.UNTOUCHED
        return True

    @property
    def is_untouched(self) -> bool:
        """Check if cell is untouched."""
        return self.status == CellStatus.UNTOUCHED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.status == CellStatus.FLAGGED
