"""Command-line entry point.

Wires the game loop to standard input / output. Diagnostics go to stderr
through :mod:`logging`; game text is always printed.
"""

import argparse
import logging
from dataclasses import replace
from typing import Optional, Sequence

from textgame.config import GameConfig
from textgame.loop import run

logger = logging.getLogger(__name__)


def read_stdin_line() -> Optional[str]:
    """Read one line from stdin, or ``None`` at end of input."""
    try:
        return input()
    except EOFError:
        return None


def write_stdout_line(text: str) -> None:
    print(text, flush=True)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textgame", description="Move around a grid with text commands."
    )
    parser.add_argument(
        "--grid-size",
        type=int,
        default=None,
        help="Side length of the square grid (default: $TEXTGAME_GRID_SIZE or 20).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostic log level written to stderr.",
    )
    return parser


def _load_config(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> GameConfig:
    """Config from ``--grid-size``, else the environment; bad values exit with usage."""
    try:
        if args.grid_size is not None:
            return replace(GameConfig(), grid_size=args.grid_size)
        return GameConfig.from_env()
    except ValueError as exc:
        parser.error(str(exc))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = _load_config(parser, args)
    logger.info("Starting game on a %dx%d grid", config.grid_size, config.grid_size)
    run(read_stdin_line, write_stdout_line, config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
