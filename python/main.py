#!/usr/bin/env python3
"""Knight Swap Puzzle.

Usage::

    python main.py                   # interactive menu
    python main.py -f rich           # Rich terminal
    python main.py -f script < moves.txt
    python main.py --log-level debug -f vanilla
"""

import importlib
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from utils.logger_config import configure_logging  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    script = "script"


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.script: "frontend.cli.script.app",
}


# -- helpers ------------------------------------------------------------------


def _menu_loop() -> None:
    while True:
        print()
        print("  ====================================")
        print("         K N I G H T   S W A P        ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in ("1", "2"):
            mod = importlib.import_module(
                {"1": _RUNNERS[Frontend.vanilla], "2": _RUNNERS[Frontend.rich]}[choice]
            )
            mod.run()

        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        envvar="KNIGHT_SWAP_LOG_LEVEL",
        case_sensitive=False,
        help="Logging level.",
    ),
) -> None:
    """Knight Swap Puzzle."""
    configure_logging(log_level.value)

    if frontend is None:
        _menu_loop()
        return

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run()


if __name__ == "__main__":
    app()
