"""
Per-connection session loop.

Each accepted client gets one ClientHandler running in its own thread:
send the welcome line, then read a line, run it against the board and
write the reply until the client leaves, says ``bye``, or (outside debug
mode) digs a bomb.
"""
import logging
import socket
from typing import Callable, Tuple

from game import Board

from .protocol import ReplyKind, handle_request, welcome_message

logger = logging.getLogger(__name__)


class ClientHandler:
    """
    Drives one client session.

    Attributes:
        board: Board shared by every session.
        debug: Keep the session open after an explosion.
    """

    def __init__(
        self,
        conn: socket.socket,
        address: Tuple,
        board: Board,
        player_count: Callable[[], int],
        debug: bool = False,
    ) -> None:
        self.conn = conn
        self.address = address
        self.board = board
        self.debug = debug
        self._player_count = player_count

    def _send(self, text: str) -> None:
        self.conn.sendall(text.encode("ascii"))

    def run(self) -> None:
        """Serve the client until the session ends, then close the socket."""
        try:
            self._serve()
        except OSError as error:
            logger.warning("Connection %s failed: %s", self.address, error)
        except Exception as error:
            # Fatal; threading.excepthook prints the traceback once re-raised.
            logger.error("Session %s aborted: %r", self.address, error)
            raise
        finally:
            self.conn.close()
            logger.info("Client %s disconnected", self.address)

    def _serve(self) -> None:
        self._send(welcome_message(self.board, self._player_count()))

        with self.conn.makefile("rb") as reader:
            for raw in reader:
                line = raw.decode("ascii", errors="replace").rstrip("\r\n")
                reply = handle_request(self.board, line)
                if reply is None:
                    continue

                self._send(reply.text)
                if reply.kind == ReplyKind.BYE:
                    return
                if reply.kind == ReplyKind.BOOM and not self.debug:
                    logger.info("Client %s hit a bomb", self.address)
                    return
