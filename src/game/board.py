"""
Board module for Minesweeper game.

Implements the shared game board: bomb placement, digging with
flood-fill, flagging, and the textual render sent to clients.

Thread safety:
    Every public operation acquires one lock scoped to the whole board,
    so operations from different connections never interleave. Cells are
    never handed out; callers only ever see rendered strings.
"""
import threading
from collections import deque
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .cell import Cell


# ============================================================================
# Constants
# ============================================================================

BOMB_PROBABILITY = 0.25


class BoardInvariantError(AssertionError):
    """Raised when the grid no longer matches its declared dimensions."""


@dataclass(frozen=True)
class DigResult:
    """
    Outcome of a dig.

    Attributes:
        exploded: True if the dug cell contained a bomb.
        board: Render of the board after the dig.
    """

    exploded: bool
    board: str


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper game board shared by every connected player.

    The grid is stored column-major: ``self._columns[x][y]``.
    """

    def __init__(self, bombs: Sequence[Sequence[bool]]) -> None:
        """
        Build a board from a rectangular bomb grid.

        Args:
            bombs: Row-major grid, ``bombs[y][x]`` is True for a bomb.
                Accepts nested lists or a 2-D numpy array.
        """
        grid = np.asarray(bombs, dtype=bool)
        if grid.ndim != 2:
            raise ValueError("Bomb grid must be two-dimensional")
        height, width = grid.shape
        if width < 1 or height < 1:
            raise ValueError("Board dimensions must be positive")

        self._width = int(width)
        self._height = int(height)
        self._lock = threading.Lock()
        self._columns: List[List[Cell]] = [
            [Cell(has_bomb=bool(grid[y, x])) for y in range(self._height)]
            for x in range(self._width)
        ]
        self.check_invariant()

    @classmethod
    def create(
        cls,
        *,
        width: Optional[int] = None,
        height: Optional[int] = None,
        bomb_probability: float = BOMB_PROBABILITY,
        bombs: Optional[Sequence[Sequence[bool]]] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> "Board":
        """
        Create a board from explicit dimensions or from a bomb grid.

        Args:
            width: Number of columns for a randomly generated board.
            height: Number of rows for a randomly generated board.
            bomb_probability: Chance that each random cell holds a bomb.
            bombs: Pre-validated row-major bomb grid.
            rng: Random generator used for random placement.

        Returns:
            A new Board.
        """
        sized = width is not None or height is not None
        if sized and bombs is not None:
            raise ValueError("Give either board dimensions or a bomb grid, not both")
        if bombs is not None:
            return cls(bombs)
        if width is None or height is None:
            raise ValueError("Both width and height are required")
        if width < 1 or height < 1:
            raise ValueError("Board dimensions must be positive")
        if not 0.0 <= bomb_probability <= 1.0:
            raise ValueError("Bomb probability must be between 0 and 1")

        rng = rng or np.random.default_rng()
        return cls(rng.random((height, width)) < bomb_probability)

    # ========================================================================
    # Grid Utilities (Low-level)
    # ========================================================================

    def _is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self._width and 0 <= y < self._height

    def _get_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """Yield in-range neighbor positions of (x, y)."""
        for delta_x in (-1, 0, 1):
            for delta_y in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self._is_valid_position(new_x, new_y):
                    yield new_x, new_y

    def _neighbor_bomb_count(self, x: int, y: int) -> int:
        """
        Count bombs around (x, y).

        Detonated bombs are still bombs, so dug neighbors count too.
        """
        return sum(
            1 for nx, ny in self._get_neighbors(x, y)
            if self._columns[nx][ny].has_bomb
        )

    # ========================================================================
    # Rendering
    # ========================================================================

    def _render_cell(self, x: int, y: int) -> str:
        cell = self._columns[x][y]
        if cell.is_untouched:
            return "-"
        if cell.is_flagged:
            return "F"
        # A detonated cell counts its own bomb as well.
        count = self._neighbor_bomb_count(x, y) + int(cell.has_bomb)
        return str(count) if count else " "

    def _render(self) -> str:
        lines = []
        for y in range(self._height):
            lines.append(
                " ".join(self._render_cell(x, y) for x in range(self._width))
            )
        return "".join(line + "\n" for line in lines)

    # ========================================================================
    # Game Actions
    # ========================================================================

    def look(self) -> str:
        """Return the current render without changing anything."""
        with self._lock:
            return self._render()

    render = look

    def dig(self, x: int, y: int) -> DigResult:
        """
        Dig the cell at (x, y).

        Out-of-range, flagged and already-dug cells are left alone. Digging
        a bomb reports an explosion. Digging a safe cell with no
        neighboring bombs also digs every neighbor, repeating outward.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            DigResult with the explosion flag and the resulting render.
        """
        with self._lock:
            exploded = False
            if self._is_valid_position(x, y):
                exploded = self._dig_from(x, y)
            self.check_invariant()
            return DigResult(exploded=exploded, board=self._render())

    def _dig_from(self, x: int, y: int) -> bool:
        """Dig (x, y) and flood-fill outward. Caller holds the lock."""
        start = self._columns[x][y]
        if not start.dig():
            return False
        if start.has_bomb:
            return True

        pending = deque([(x, y)])
        while pending:
            cx, cy = pending.popleft()
            if self._neighbor_bomb_count(cx, cy) != 0:
                continue
            for nx, ny in self._get_neighbors(cx, cy):
                if self._columns[nx][ny].dig():
                    pending.append((nx, ny))
        return False

    def flag(self, x: int, y: int) -> str:
        """Flag an untouched cell and return the render."""
        with self._lock:
            if self._is_valid_position(x, y):
                self._columns[x][y].flag()
            self.check_invariant()
            return self._render()

    def deflag(self, x: int, y: int) -> str:
        """Unflag a flagged cell and return the render."""
        with self._lock:
            if self._is_valid_position(x, y):
                self._columns[x][y].deflag()
            self.check_invariant()
            return self._render()

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size_message(self) -> str:
        """Board size as announced in the welcome line."""
        return f"Board: {self._width} columns by {self._height} rows."

    @property
    def bomb_count(self) -> int:
        """Number of cells holding a bomb, detonated or not."""
        with self._lock:
            return sum(
                cell.has_bomb for column in self._columns for cell in column
            )

    def check_invariant(self) -> None:
        """
        Verify the grid still has ``width`` columns of ``height`` cells.

        Raises:
            BoardInvariantError: If the grid shape has drifted.
        """
        if len(self._columns) != self._width or any(
            len(column) != self._height for column in self._columns
        ):
            raise BoardInvariantError(
                "The board no longer matches its initialized size"
            )
