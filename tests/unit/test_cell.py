"""
Unit tests for Cell class.

Tests cell status transitions for dig, flag and deflag.
"""
from game import Cell, CellStatus


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_has_no_bomb(self) -> None:
        """New cell should not hold a bomb by default."""
        cell = Cell()
        assert cell.has_bomb is False

    def test_default_cell_is_untouched(self) -> None:
        """New cell should be untouched by default."""
        cell = Cell()
        assert cell.status == CellStatus.UNTOUCHED
        assert cell.is_untouched is True

    def test_bomb_cell_creation(self) -> None:
        """Can create a cell that holds a bomb."""
        cell = Cell(has_bomb=True)
        assert cell.has_bomb is True


# ============================================================================
# Cell Dig Tests
# ============================================================================

class TestCellDig:
    """Test cell dig behavior."""

    def test_dig_untouched_cell_returns_true(self, untouched_cell: Cell) -> None:
        """Digging an untouched cell should succeed."""
        assert untouched_cell.dig() is True
        assert untouched_cell.status == CellStatus.DUG

    def test_dig_twice_returns_false(self, untouched_cell: Cell) -> None:
        """Dug is terminal; a second dig does nothing."""
        untouched_cell.dig()
        assert untouched_cell.dig() is False
        assert untouched_cell.status == CellStatus.DUG

    def test_dig_flagged_cell_returns_false(self, untouched_cell: Cell) -> None:
        """Cannot dig a flagged cell."""
        untouched_cell.flag()
        assert untouched_cell.dig() is False
        assert untouched_cell.is_flagged is True

    def test_dig_keeps_bomb(self, bomb_cell: Cell) -> None:
        """Digging a bomb does not remove it."""
        bomb_cell.dig()
        assert bomb_cell.has_bomb is True


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_untouched_cell(self, untouched_cell: Cell) -> None:
        """Flagging an untouched cell should succeed."""
        assert untouched_cell.flag() is True
        assert untouched_cell.status == CellStatus.FLAGGED

    def test_flag_is_idempotent(self, untouched_cell: Cell) -> None:
        """Flagging twice leaves the cell flagged."""
        untouched_cell.flag()
        assert untouched_cell.flag() is False
        assert untouched_cell.is_flagged is True

    def test_deflag_returns_to_untouched(self, untouched_cell: Cell) -> None:
        """Deflagging a flagged cell returns it to untouched."""
        untouched_cell.flag()
        assert untouched_cell.deflag() is True
        assert untouched_cell.is_untouched is True

    def test_deflag_untouched_cell_returns_false(
        self, untouched_cell: Cell
    ) -> None:
        """Deflagging an unflagged cell does nothing."""
        assert untouched_cell.deflag() is False
        assert untouched_cell.is_untouched is True

    def test_dug_cell_cannot_be_flagged(self, untouched_cell: Cell) -> None:
        """Dug cells never become flagged."""
        untouched_cell.dig()
        assert untouched_cell.flag() is False
        assert untouched_cell.deflag() is False
        assert untouched_cell.status == CellStatus.DUG
