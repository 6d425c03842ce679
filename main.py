"""
Main entry point for console TicTacToe.

This script ties together:
- Logic (game state, move validation, win checking)
- Console (text controller reading moves and writing the board)

Run this script to play TicTacToe against a friend in the terminal!
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from console.config import ConsoleConfig
from console.controller import TicTacToeConsoleController
from logic.errors import InvalidStateError
from logic.model import TicTacToeModel

logger = logging.getLogger(__name__)


def play(in_stream: TextIO, out: TextIO) -> TicTacToeModel:
    """
    Play one game from in_stream, writing the transcript to out.

    Returns:
        The finished (or quit) model.
    """
    model = TicTacToeModel()
    controller = TicTacToeConsoleController(in_stream, out)
    controller.play_game(model)
    return model


def _print_banner():
    print("\n" + "="*40)
    print("   TicTacToe")
    print("   Enter moves as: <row> <col> (1-3)")
    print(f"   Enter '{ConsoleConfig.QUIT_TOKEN}' to quit")
    print("="*40 + "\n")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Console TicTacToe")
    parser.add_argument(
        "--input",
        metavar="FILE",
        help="Read moves from FILE instead of standard input"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every move to stderr"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=ConsoleConfig.LOG_FORMAT,
        stream=sys.stderr
    )

    try:
        if args.input:
            logger.debug("Reading moves from %s", args.input)
            with open(args.input, encoding="utf-8") as moves:
                play(moves, sys.stdout)
        else:
            if sys.stdin.isatty():
                _print_banner()
            play(sys.stdin, sys.stdout)
    except InvalidStateError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: could not read moves: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.", file=sys.stderr)
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
