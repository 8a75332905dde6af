"""
Minesweeper server module.

Provides the line protocol, per-connection sessions, the TCP server
and its configuration.
"""
from .protocol import (
    BOOM_MESSAGE,
    BYE_MESSAGE,
    HELP_MESSAGE,
    Command,
    Reply,
    ReplyKind,
    handle_request,
    parse_command,
    welcome_message,
)
from .handler import ClientHandler
from .server import MinesweeperServer
from .config import ServerConfig

__all__ = [
    "BOOM_MESSAGE",
    "BYE_MESSAGE",
    "HELP_MESSAGE",
    "Command",
    "Reply",
    "ReplyKind",
    "handle_request",
    "parse_command",
    "welcome_message",
    "ClientHandler",
    "MinesweeperServer",
    "ServerConfig",
]
