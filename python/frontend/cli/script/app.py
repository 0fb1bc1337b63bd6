"""Line-oriented frontend for scripted play and testing.

Reads one command per line::

    MOVE r1 c1 r2 c2
    UNDO
    RESET

and answers each with a single status line, e.g.::

    ok moves=1 solved=false board=0,1,W 1,1,B 2,2,W 3,2,B

Blank lines and ``#`` comments are skipped.
"""

from __future__ import annotations

import logging
import sys
from typing import Iterable, TextIO

from backend.engine.gameplay import GamePlay
from backend.models.board import Color, Configuration

logger = logging.getLogger(__name__)

_COLOR_CODES = {Color.WHITE: "W", Color.BLACK: "B"}


def format_config(config: Configuration) -> str:
    """Return ``row,col,W|B`` entries ordered by cell."""
    return " ".join(
        f"{p.cell.row},{p.cell.col},{_COLOR_CODES[p.color]}"
        for p in config.sorted_pieces()
    )


def _status(game: GamePlay, outcome: str) -> str:
    solved = "true" if game.is_won else "false"
    return (
        f"{outcome} moves={game.moves} solved={solved} "
        f"board={format_config(game.current)}"
    )


def execute(game: GamePlay, line: str) -> str | None:
    """Run one command line against *game*.

    Returns the status line, or ``None`` for blank and comment lines.
    """
    words = line.split("#", 1)[0].split()
    if not words:
        return None

    command, args = words[0].upper(), words[1:]

    if command == "MOVE" and len(args) == 4:
        try:
            r1, c1, r2, c2 = (int(a) for a in args)
        except ValueError:
            logger.debug("Bad MOVE arguments: %r", line)
            return _status(game, "error:bad_command")
        result = game.attempt_move((r1, c1), (r2, c2))
        return _status(game, "ok" if result.success else f"error:{result.error}")

    if command == "UNDO" and not args:
        result = game.undo()
        return _status(game, "ok" if result.success else f"error:{result.error}")

    if command == "RESET" and not args:
        game.reset()
        return _status(game, "ok")

    logger.debug("Unrecognised command: %r", line)
    return _status(game, "error:bad_command")


def run_lines(lines: Iterable[str], out: TextIO, game: GamePlay | None = None) -> GamePlay:
    """Feed every line to a session, writing one status line per command."""
    game = game if game is not None else GamePlay()
    for line in lines:
        reply = execute(game, line)
        if reply is not None:
            out.write(reply + "\n")
    return game


# -- public entry point -------------------------------------------------------


def run() -> None:
    """Play commands from stdin, answering on stdout."""
    run_lines(sys.stdin, sys.stdout)
