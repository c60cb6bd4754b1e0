from __future__ import annotations
import argparse
import logging
from typing import Optional

from shenzhen.config import tweak
from shenzhen.game import Game


def configure_logging(log_file: Optional[str], level: str) -> None:
    """Log to a file only; the terminal belongs to the game while it runs."""
    root = logging.getLogger("shenzhen")
    if log_file is None:
        root.addHandler(logging.NullHandler())
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(tweak["log_format"]))
    root.addHandler(handler)
    root.setLevel(level.upper())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shenzhen", description="Shenzhen solitaire in the terminal")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for the first deal")
    parser.add_argument("--window", action="store_true", help="Play in a raylib window instead of the terminal")
    parser.add_argument("--log-file", default=None, help="Write a debug log to this file")
    parser.add_argument("--log-level", default=tweak["log_level"],
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], type=str.upper, help="Log level")
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.log_level)
    game = Game(seed=args.seed)

    if args.window:
        from shenzhen_table.main import play_window
        play_window(game)
    else:
        from shenzhen.terminal import play
        play(game)


if __name__ == "__main__":
    main()
