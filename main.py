#!/usr/bin/env python3
"""
Minefield - debugging entry point.

Usage:
    python main.py dump --width W --height H --mines M [--seed S]
                        [--flag COL ROW]... [--reveal COL ROW]...
    python main.py observe (same options)
"""
import argparse
import logging
import random
from typing import List, Optional

import numpy as np

from minefield import Board


def build_board(args: argparse.Namespace) -> Board:
    """Generate a board and apply the requested flags, then reveals."""
    board = Board.generate(
        args.width, args.height, args.mines, rng=random.Random(args.seed)
    )

    for column, row in args.flag or []:
        board.toggle_flag(column, row)

    for column, row in args.reveal or []:
        result = board.reveal(column, row)
        if result.hit_mine:
            print(f"Mine hit at ({column}, {row})")
        else:
            print(f"Revealed ({column}, {row}): {result.count} cells opened")

    return board


def dump(args: argparse.Namespace) -> None:
    """Print the debug glyph grid."""
    board = build_board(args)
    print(f"===== {board.width}x{board.height}, {board.mine_count} mines =====")
    print(board.dump())


def observe(args: argparse.Namespace) -> None:
    """Print the player-visible observation array."""
    board = build_board(args)
    with np.printoptions(linewidth=200):
        print(board.get_observation())


def _add_board_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--width", type=int, default=9, help="Number of columns")
    parser.add_argument("--height", type=int, default=9, help="Number of rows")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )
    parser.add_argument(
        "--flag", type=int, nargs=2, action="append", metavar=("COL", "ROW"),
        help="Toggle a flag (applied before reveals)",
    )
    parser.add_argument(
        "--reveal", type=int, nargs=2, action="append", metavar=("COL", "ROW"),
        help="Reveal a cell",
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield - generate and inspect boards"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    dump_parser = subparsers.add_parser("dump", help="Print the debug grid")
    _add_board_arguments(dump_parser)

    observe_parser = subparsers.add_parser(
        "observe", help="Print the player-visible observation"
    )
    _add_board_arguments(observe_parser)

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    commands = {"dump": dump, "observe": observe}
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        return

    try:
        command(args)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
