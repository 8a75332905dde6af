"""
Command-line entry point for the Minesweeper server.

Usage:
    minesweeper-server [--debug | --no-debug] [--port PORT]
                       [--size X,Y | --file FILE] [--log-level LEVEL]

Without --size or --file a random 10x10 board is generated.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from game import BoardFileError

from .config import DEFAULT_PORT, ServerConfig
from .server import MinesweeperServer

logger = logging.getLogger(__name__)


def parse_size(value: str) -> Tuple[int, int]:
    """Parse a ``X,Y`` board size."""
    parts = value.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"size must look like X,Y, got {value!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"unable to parse number in {value!r}")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="minesweeper-server",
        description="Multiplayer Minesweeper server",
    )
    parser.add_argument(
        "--debug",
        dest="debug",
        action="store_true",
        help="Keep clients connected after they dig a bomb",
    )
    parser.add_argument("--no-debug", dest="debug", action="store_false")
    parser.add_argument(
        "--port", type=int, default=DEFAULT_PORT, help="Port to listen on"
    )

    board_source = parser.add_mutually_exclusive_group()
    board_source.add_argument(
        "--size", type=parse_size, help="Random board of X columns by Y rows"
    )
    board_source.add_argument("--file", type=Path, help="Board file to load")

    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser


def parse_config(
    parser: argparse.ArgumentParser, argv: Optional[List[str]] = None
) -> Tuple[ServerConfig, argparse.Namespace]:
    """Parse arguments into a ServerConfig, exiting on invalid input."""
    args = parser.parse_args(argv)

    if args.file is not None and not args.file.is_file():
        parser.error(f'file not found: "{args.file}"')

    width, height = args.size if args.size else (None, None)
    try:
        config = ServerConfig(
            port=args.port,
            debug=args.debug,
            width=width,
            height=height,
            board_file=args.file,
        )
    except ValueError as error:
        parser.error(str(error))
    return config, args


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments, build the board and serve forever."""
    parser = build_parser()
    config, args = parse_config(parser, argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        board = config.build_board()
    except (BoardFileError, OSError) as error:
        logger.error("Could not load board: %s", error)
        sys.exit(2)
    logger.info(
        "%s %d bombs. Debug mode %s.",
        board.size_message,
        board.bomb_count,
        "on" if config.debug else "off",
    )

    try:
        server = MinesweeperServer(
            board, port=config.port, host=config.host, debug=config.debug
        )
        try:
            server.serve()
        except KeyboardInterrupt:
            logger.info("Shutting down server")
            server.shutdown()
    except OSError as error:
        logger.error("Server socket failed: %s", error)
        sys.exit(1)


if __name__ == "__main__":
    main()
