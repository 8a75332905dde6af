"""
Server configuration.

Holds the process-level settings and builds the starting board from
either a random size or a board file.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np

from game import Board, load_board_file

DEFAULT_PORT = 4444
DEFAULT_SIZE = 10
MAX_PORT = 65535


@dataclass
class ServerConfig:
    """
    Configuration for a Minesweeper server process.

    Attributes:
        port: Port to listen on (0-65535).
        debug: Keep clients connected after they dig a bomb.
        host: Interface to bind.
        width: Columns of a randomly generated board.
        height: Rows of a randomly generated board.
        board_file: Board file to load instead of generating one.
    """

    port: int = DEFAULT_PORT
    debug: bool = False
    host: str = "0.0.0.0"
    width: Optional[int] = None
    height: Optional[int] = None
    board_file: Optional[Path] = None

    def __post_init__(self) -> None:
        """Fill in the default size and validate."""
        if self.board_file is None and self.width is None and self.height is None:
            self.width = self.height = DEFAULT_SIZE
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if not 0 <= self.port <= MAX_PORT:
            raise ValueError(f"port {self.port} out of range")
        if self.board_file is not None:
            if self.width is not None or self.height is not None:
                raise ValueError("Board size and board file are mutually exclusive")
            return
        if self.width is None or self.height is None:
            raise ValueError("Board size needs both width and height")
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")

    def build_board(self, rng: Optional[np.random.Generator] = None) -> Board:
        """
        Create the starting board.

        Raises:
            BoardFileError: If the board file is malformed.
            OSError: If the board file cannot be read.
        """
        if self.board_file is not None:
            return Board.create(bombs=load_board_file(self.board_file))
        return Board.create(width=self.width, height=self.height, rng=rng)
