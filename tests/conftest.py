"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
import threading
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from game import Board, Cell
from server import MinesweeperServer


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no bombs for flood-fill testing."""
    return Board.create(bombs=[[False] * 5 for _ in range(5)])


@pytest.fixture
def small_board() -> Board:
    """Create an untouched 2x2 board with no bombs."""
    return Board.create(bombs=[[False, False], [False, False]])


@pytest.fixture
def corner_bomb_board() -> Board:
    """
    Create a 4x3 board with a single bomb in the top-right corner.

    Layout (x across, y down)::

        0 0 0 1
        0 0 0 0
        0 0 0 0
    """
    return Board.create(bombs=[
        [False, False, False, True],
        [False, False, False, False],
        [False, False, False, False],
    ])


@pytest.fixture
def bomb_board() -> Board:
    """Create a 1x1 board holding a bomb."""
    return Board.create(bombs=[[True]])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def untouched_cell() -> Cell:
    """Create an untouched cell without a bomb."""
    return Cell()


@pytest.fixture
def bomb_cell() -> Cell:
    """Create a cell containing a bomb."""
    return Cell(has_bomb=True)


# ============================================================================
# Server Fixtures
# ============================================================================

@pytest.fixture
def start_server():
    """
    Start servers on free ports in background threads.

    Yields a factory ``start_server(board, debug=False)`` returning the
    running MinesweeperServer; every server is shut down afterwards.
    """
    servers = []

    def _start(board: Board, debug: bool = False) -> MinesweeperServer:
        server = MinesweeperServer(board, port=0, host="127.0.0.1", debug=debug)
        threading.Thread(target=server.serve, daemon=True).start()
        servers.append(server)
        return server

    yield _start

    for server in servers:
        server.shutdown()
