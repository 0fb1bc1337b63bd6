"""Rich terminal frontend: tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler, key handling and backend as the vanilla CLI.
"""

from __future__ import annotations

from collections.abc import Collection

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamesetup import GameSetup
from backend.models.board import BOARD_CELLS, GRID_SIZE, Cell, Color, Configuration
from frontend.cli.controls import HELP_TEXT, START_CURSOR, handle_key
from frontend.cli.input_handler import get_key

console = Console()

_GLYPHS = {Color.WHITE: "♘", Color.BLACK: "♞"}
_PIECE_STYLE = {Color.WHITE: "bold white", Color.BLACK: "bold magenta"}


# -- board rendering ----------------------------------------------------------


def _render_board(
    config: Configuration,
    cursor: Cell | None = None,
    selected: Cell | None = None,
    targets: Collection[Cell] = (),
) -> Table:
    """Return a Rich Table representing the board."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(GRID_SIZE):
        table.add_column(width=1, justify="center")

    for r in range(GRID_SIZE):
        cells: list[Text] = []
        for c in range(GRID_SIZE):
            cell = Cell(r, c)
            if cell not in BOARD_CELLS:
                cells.append(Text(" "))
                continue
            piece = config.piece_at(cell)
            if piece is not None:
                text = Text(_GLYPHS[piece.color], style=_PIECE_STYLE[piece.color])
            elif cell in targets:
                text = Text("•", style="bold yellow")
            else:
                text = Text("·", style="dim")
            if cell == selected:
                text.stylize("on green")
            if cell == cursor:
                text.stylize("reverse")
            cells.append(text)
        table.add_row(*cells)

    return table


# -- screens ------------------------------------------------------------------


def _draw_menu() -> None:
    console.clear()

    opts = Text()
    opts.append("  1", style="bold cyan")
    opts.append("  Play    ")
    opts.append("H", style="dim bold")
    opts.append("  Rules    ", style="dim")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(opts),
        Text(""),
    )

    panel = Panel(
        body,
        title="[bold]K N I G H T   S W A P[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


def _boards(left: Table, right: Table, left_title: str, right_title: str) -> Columns:
    return Columns(
        [
            Panel(left, title=left_title, border_style="bright_blue"),
            Panel(right, title=right_title, border_style="dim"),
        ],
        padding=(0, 4),
    )


def _draw_game(game: GamePlay, cursor: Cell, status: str = "") -> None:
    """Draw the play board, the target, and the controls."""
    console.clear()

    selected = game.selection
    targets = (
        set(game.valid_destinations_from(selected.cell)) if selected else set()
    )
    board_table = _render_board(
        game.current,
        cursor=cursor,
        selected=selected.cell if selected else None,
        targets=targets,
    )

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.moves), style="bold yellow")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  cursor   ", style="dim")
    controls.append("Enter", style="bold cyan")
    controls.append("  select/move   ", style="dim")
    controls.append("U", style="bold cyan")
    controls.append("  undo   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  reset   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    parts = [
        Align.center(
            _boards(board_table, _render_board(game.target), "Board", "Target")
        ),
        Align.center(stats),
    ]
    if game.is_won:
        congrats = Text()
        congrats.append("\n  ★ ", style="bold yellow")
        congrats.append("CONGRATULATIONS!", style="bold green")
        congrats.append(f"  You solved the puzzle in {game.moves} moves!  ", style="green")
        congrats.append("★\n", style="bold yellow")
        parts.append(Align.center(congrats))

    panel = Panel(
        Group(*parts),
        title="[bold cyan]Knight Swap[/bold cyan]",
        border_style="bold green" if game.is_won else "bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    if status:
        console.print(Align.center(Text(f"  {status}")))
    console.print(Align.center(controls))


def _draw_rules() -> None:
    console.clear()

    body = Group(
        Text(HELP_TEXT, justify="center"),
        Text(""),
        Align.center(
            _boards(
                _render_board(GameSetup.initial()),
                _render_board(GameSetup.target()),
                "Start",
                "Target",
            )
        ),
    )

    panel = Panel(
        body,
        title="[bold]RULES[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))
    get_key()


# -- game loop ----------------------------------------------------------------


def _play_game() -> None:
    game = GamePlay()
    cursor = START_CURSOR
    status = ""

    while True:
        _draw_game(game, cursor, status)
        key = get_key()
        if key == "quit":
            return
        cursor, status = handle_key(game, cursor, key)


# -- menu loop ----------------------------------------------------------------


def _menu_loop() -> None:
    while True:
        _draw_menu()
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(
                Align.center(Text("\nGoodbye!\n", style="bold cyan"))
            )
            return
        elif key in ("1", "enter"):
            _play_game()
        elif key == "help":
            _draw_rules()


# -- public entry point -------------------------------------------------------


def run() -> None:
    """Launch the Rich CLI with interactive menu."""
    _menu_loop()
