"""
Multiplayer Minesweeper server.

Accepts TCP connections and runs one ClientHandler thread per client,
all sharing a single Board.

Thread safety:
    The board serializes its own operations. The live player count has a
    separate lock, held only around the counter itself and never while
    the board lock is held or while doing socket I/O.
"""
import logging
import socket
import threading
from typing import Tuple

from game import Board

from .handler import ClientHandler

logger = logging.getLogger(__name__)


class MinesweeperServer:
    """TCP server sharing one board between all connected players."""

    def __init__(
        self,
        board: Board,
        port: int = 4444,
        host: str = "0.0.0.0",
        debug: bool = False,
    ) -> None:
        """
        Bind the listening socket.

        Args:
            board: Board shared by every connection.
            port: Port to listen on; 0 picks a free port.
            host: Interface to bind.
            debug: Keep clients connected after they dig a bomb.

        Raises:
            OSError: If the socket cannot be bound.
        """
        self.board = board
        self.debug = debug
        self._connections = 0
        self._connections_lock = threading.Lock()
        self._closing = threading.Event()

        self.server_socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self.server_socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            self.server_socket.bind((host, port))
            self.server_socket.listen()
        except OSError:
            self.server_socket.close()
            raise

    @property
    def address(self) -> Tuple[str, int]:
        return self.server_socket.getsockname()[:2]

    @property
    def port(self) -> int:
        return self.address[1]

    @property
    def player_count(self) -> int:
        """Number of clients currently connected."""
        with self._connections_lock:
            return self._connections

    def serve(self) -> None:
        """
        Accept clients until shutdown() is called.

        Never returns otherwise. Failures inside a single connection are
        handled by its own thread and never reach this loop.

        Raises:
            OSError: If the listening socket breaks.
        """
        logger.info("Minesweeper server listening on %s:%d", *self.address)
        while True:
            try:
                conn, address = self.server_socket.accept()
            except OSError:
                if self._closing.is_set():
                    logger.info("Server stopped")
                    return
                raise

            with self._connections_lock:
                self._connections += 1
            logger.info("New connection from %s", address)

            handler = ClientHandler(
                conn, address, self.board, lambda: self.player_count, self.debug
            )
            try:
                self._start_session(handler)
            except RuntimeError as error:
                # Thread limit reached; drop this client, keep accepting.
                logger.error("Could not start session for %s: %s", address, error)
                conn.close()
                with self._connections_lock:
                    self._connections -= 1

    def _start_session(self, handler: ClientHandler) -> None:
        threading.Thread(
            target=self._run_handler, args=(handler,), daemon=True
        ).start()

    def _run_handler(self, handler: ClientHandler) -> None:
        try:
            handler.run()
        finally:
            with self._connections_lock:
                self._connections -= 1

    def shutdown(self) -> None:
        """Stop accepting clients. Open sessions keep running."""
        self._closing.set()
        try:
            self.server_socket.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass
        self.server_socket.close()
