"""
Minesweeper game module.

Provides the shared board, its cells, and board-file loading.
"""
from .cell import Cell, CellStatus
from .board import Board, BoardInvariantError, DigResult, BOMB_PROBABILITY
from .loader import BoardFileError, load_board_file, parse_board

__all__ = [
    "Cell",
    "CellStatus",
    "Board",
    "BoardInvariantError",
    "DigResult",
    "BOMB_PROBABILITY",
    "BoardFileError",
    "load_board_file",
    "parse_board",
]
