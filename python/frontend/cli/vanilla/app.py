"""Vanilla terminal frontend: no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
Includes a small built-in menu for play and rules.
"""

from __future__ import annotations

import sys
from collections.abc import Collection

from backend.engine.gameplay import GamePlay
from backend.engine.gamesetup import GameSetup
from backend.models.board import BOARD_CELLS, GRID_SIZE, Cell, Color, Configuration
from frontend.cli.controls import HELP_TEXT, START_CURSOR, handle_key
from frontend.cli.input_handler import get_key


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset
_BG_SEL = "\033[42;30m"  # green bg, black fg (selected knight)
_INV = "\033[7m"     # reverse video (cursor)

_GLYPHS = {Color.WHITE: "♘", Color.BLACK: "♞"}


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


# -- board rendering ----------------------------------------------------------


def _render_board(
    config: Configuration,
    cursor: Cell | None = None,
    selected: Cell | None = None,
    targets: Collection[Cell] = (),
) -> list[str]:
    """Return the board as ANSI-coloured lines, one per grid row."""
    lines: list[str] = []
    for r in range(GRID_SIZE):
        cells: list[str] = []
        for c in range(GRID_SIZE):
            cell = Cell(r, c)
            if cell not in BOARD_CELLS:
                cells.append("   ")
                continue
            piece = config.piece_at(cell)
            text = f" {_GLYPHS[piece.color]} " if piece else " · "
            if cell == selected:
                style = _BG_SEL
            elif cell in targets:
                style = _Y
            elif piece is None:
                style = _DIM
            else:
                style = _BOLD
            if cell == cursor:
                style += _INV
            cells.append(f"{style}{text}{_R}")
        lines.append(" ".join(cells))
    return lines


def _side_by_side(left: list[str], right: list[str], gap: str = "      ") -> str:
    return "\n".join(f"  {a}{gap}{b}" for a, b in zip(left, right))


# -- game screens -------------------------------------------------------------


def _show_menu() -> None:
    _clear()
    print()
    print(f"  {_BOLD}======================================{_R}")
    print(f"  {_BOLD}        K N I G H T   S W A P         {_R}")
    print(f"  {_BOLD}======================================{_R}")
    print()
    print(f"    {_C}1{_R}  Play")
    print(f"    {_DIM}H{_R}  Rules")
    print(f"    {_DIM}Q{_R}  Quit")
    print()


def _show_game(game: GamePlay, cursor: Cell, status: str = "") -> None:
    _clear()
    selected = game.selection
    targets = (
        set(game.valid_destinations_from(selected.cell)) if selected else set()
    )
    print(f"  {_C}=== Knight Swap ==={_R}")
    print()
    print(f"  {_BOLD}Board{_R}                {_DIM}Target{_R}")
    print(
        _side_by_side(
            _render_board(
                game.current,
                cursor=cursor,
                selected=selected.cell if selected else None,
                targets=targets,
            ),
            _render_board(game.target),
        )
    )
    print()
    print(f"  Moves: {_Y}{game.moves}{_R}")
    if game.is_won:
        print()
        print(
            f"  {_G}★ CONGRATULATIONS! You solved the puzzle in "
            f"{game.moves} moves! ★{_R}"
        )
    print()
    print(
        f"  {_C}WASD{_R}/{_C}Arrows{_R}: cursor  |  "
        f"{_C}Enter{_R}: select/move  |  "
        f"{_C}U{_R}: undo  |  "
        f"{_C}R{_R}: reset  |  "
        f"{_C}Q{_R}: back"
    )
    if status:
        print(f"  {status}")


def _show_rules() -> None:
    _clear()
    print()
    print(f"  {_BOLD}=== RULES ==={_R}")
    print()
    print(f"  {HELP_TEXT}")
    print()
    print(f"  {_DIM}Start{_R}                {_DIM}Target{_R}")
    print(
        _side_by_side(
            _render_board(GameSetup.initial()),
            _render_board(GameSetup.target()),
        )
    )
    print(f"\n  {_DIM}Press any key to go back.{_R}")
    get_key()


# -- game loop ----------------------------------------------------------------


def _play_game() -> None:
    game = GamePlay()
    cursor = START_CURSOR
    status = ""

    while True:
        _show_game(game, cursor, status)
        key = get_key()
        if key == "quit":
            return
        cursor, status = handle_key(game, cursor, key)


# -- menu loop ----------------------------------------------------------------


def _menu_loop() -> None:
    while True:
        _show_menu()
        key = get_key()

        if key == "quit":
            _clear()
            print("  Goodbye!\n")
            return
        elif key in ("1", "enter"):
            _play_game()
        elif key == "help":
            _show_rules()


# -- public entry point -------------------------------------------------------


def run() -> None:
    """Launch the vanilla CLI with interactive menu."""
    _menu_loop()
