"""
Board file loading.

A board file starts with a ``WIDTH HEIGHT`` line, followed by exactly
HEIGHT lines of WIDTH space-separated ``0``/``1`` tokens, where ``1``
marks a bomb. Lines may end in ``\\n`` or ``\\r\\n``.
"""
from pathlib import Path
from typing import List, Tuple, Union

import numpy as np


class BoardFileError(ValueError):
    """Raised when a board file does not follow the expected format."""


def _parse_dimensions(header: str) -> Tuple[int, int]:
    tokens = header.split(" ")
    if len(tokens) != 2:
        raise BoardFileError(f"Expected 'WIDTH HEIGHT' header, got {header!r}")
    try:
        width, height = int(tokens[0]), int(tokens[1])
    except ValueError:
        raise BoardFileError(f"Board dimensions must be integers, got {header!r}")
    if width < 1 or height < 1:
        raise BoardFileError("Board dimensions must be positive")
    return width, height


def parse_board(text: str) -> np.ndarray:
    """
    Parse board file contents into a bomb grid.

    Args:
        text: Full contents of a board file.

    Returns:
        Boolean array of shape (height, width); True marks a bomb.

    Raises:
        BoardFileError: If the text deviates from the format.
    """
    lines: List[str] = [line.rstrip("\r") for line in text.split("\n")]
    # Blank lines after the grid are harmless.
    while lines and lines[-1] == "":
        lines.pop()
    if not lines:
        raise BoardFileError("Board file is empty")

    width, height = _parse_dimensions(lines[0])
    rows = lines[1:]
    if len(rows) != height:
        raise BoardFileError(f"Expected {height} rows, found {len(rows)}")

    grid = np.zeros((height, width), dtype=bool)
    for y, row in enumerate(rows):
        tokens = row.split(" ")
        if len(tokens) != width:
            raise BoardFileError(
                f"Row {y} has {len(tokens)} values, expected {width}"
            )
        for x, token in enumerate(tokens):
            if token not in ("0", "1"):
                raise BoardFileError(
                    f"Row {y} contains {token!r}; only '0' and '1' are allowed"
                )
            grid[y, x] = token == "1"
    return grid


def load_board_file(path: Union[str, Path]) -> np.ndarray:
    """Read and parse a board file from disk."""
    try:
        text = Path(path).read_text(encoding="ascii")
    except UnicodeDecodeError:
        raise BoardFileError(f"Board file {path} is not ASCII text")
    return parse_board(text)
