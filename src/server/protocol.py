"""
Line protocol for the Minesweeper server.

Turns one line of client input into a Board call and the Board's answer
into the text sent back. Lines that do not match the grammar produce no
reply at all.
"""
import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from game import Board


# ============================================================================
# Constants
# ============================================================================

BOOM_MESSAGE = "BOOM!\r\n"
HELP_MESSAGE = "Valid commands are look, dig, flag, or deflag. To exit type bye.\r\n"
BYE_MESSAGE = "Thanks for playing. Bye.\r\n"

_COMMAND_PATTERN = re.compile(
    r"(?P<simple>look|help|bye)"
    r"|(?P<action>dig|flag|deflag) (?P<x>-?\d+) (?P<y>-?\d+)",
    re.ASCII,
)


class ReplyKind(Enum):
    """What the connection handler should do with a reply."""

    BOARD = auto()
    HELP = auto()
    BOOM = auto()
    BYE = auto()


@dataclass(frozen=True)
class Command:
    """A parsed client request. Coordinates are None for look/help/bye."""

    name: str
    x: Optional[int] = None
    y: Optional[int] = None


@dataclass(frozen=True)
class Reply:
    """Text to send back, tagged with how the session should proceed."""

    kind: ReplyKind
    text: str


# ============================================================================
# Parsing
# ============================================================================

def parse_command(line: str) -> Optional[Command]:
    """
    Parse one line of client input.

    Args:
        line: Input line without its line terminator.

    Returns:
        The Command, or None if the line is not exactly one of
        ``look``, ``help``, ``bye``, ``dig X Y``, ``flag X Y``,
        ``deflag X Y``.
    """
    match = _COMMAND_PATTERN.fullmatch(line)
    if match is None:
        return None
    if match.group("simple"):
        return Command(match.group("simple"))
    return Command(
        match.group("action"), int(match.group("x")), int(match.group("y"))
    )


# ============================================================================
# Dispatch
# ============================================================================

def handle_request(board: Board, line: str) -> Optional[Reply]:
    """
    Run one line of client input against the board.

    Returns:
        The Reply to send, or None when the line should be ignored.
    """
    command = parse_command(line)
    if command is None:
        return None

    if command.name == "look":
        return Reply(ReplyKind.BOARD, board.look())
    if command.name == "help":
        return Reply(ReplyKind.HELP, HELP_MESSAGE)
    if command.name == "bye":
        return Reply(ReplyKind.BYE, BYE_MESSAGE)
    if command.name == "dig":
        result = board.dig(command.x, command.y)
        if result.exploded:
            return Reply(ReplyKind.BOOM, BOOM_MESSAGE)
        return Reply(ReplyKind.BOARD, result.board)
    if command.name == "flag":
        return Reply(ReplyKind.BOARD, board.flag(command.x, command.y))
    if command.name == "deflag":
        return Reply(ReplyKind.BOARD, board.deflag(command.x, command.y))
    raise ValueError(f"Unhandled command: {command.name}")


def welcome_message(board: Board, players: int) -> str:
    """Greeting sent once when a client connects."""
    return (
        f"Welcome to Minesweeper. {board.size_message} "
        f"Players: {players} including you. Type 'help' for help.\r\n"
    )
