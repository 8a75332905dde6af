#!/usr/bin/env python3
"""
Minesweeper server - Main entry point.

Usage:
    python main.py [--debug] [--port PORT] [--size X,Y | --file FILE]
"""
import sys
from pathlib import Path

# Run from a plain checkout without installing
sys.path.insert(0, str(Path(__file__).parent / "src"))

from server.cli import main


if __name__ == "__main__":
    main()
