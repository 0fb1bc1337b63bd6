"""Key handling shared by the keyboard frontends.

A cursor walks the board's cells; ``enter`` clicks the cell under it.
"""

from __future__ import annotations

from backend.engine.gameplay import GamePlay, MoveError, MoveResult
from backend.models.board import BOARD_CELLS, GRID_SIZE, Cell

START_CURSOR = Cell(3, 0)

_MOVE_ERRORS: dict[MoveError, str] = {
    MoveError.GAME_OVER: "Puzzle solved. Press R to play again or U to undo.",
    MoveError.ILLEGAL_DESTINATION: "That square is not on the board.",
    MoveError.NO_PIECE_AT_SOURCE: "There is no knight there.",
    MoveError.DESTINATION_OCCUPIED: "That square is taken.",
    MoveError.NOT_A_KNIGHT_MOVE: "Knights move in an L shape.",
}

HELP_TEXT = (
    "Swap the knights: white must end where black started and vice versa. "
    "Select a knight, then pick a highlighted square."
)


def step_cursor(cursor: Cell, action: str) -> Cell:
    """Move *cursor* one board cell in the direction named by *action*.

    Horizontal steps skip over grid positions that are not board cells;
    vertical steps land on the nearest cell of the next row.  The cursor
    stays put at the board's edge.
    """
    row, col = cursor
    if action in ("left", "right"):
        dc = -1 if action == "left" else 1
        c = col + dc
        while 0 <= c < GRID_SIZE:
            if (row, c) in BOARD_CELLS:
                return Cell(row, c)
            c += dc
    elif action in ("up", "down"):
        dr = -1 if action == "up" else 1
        r = row + dr
        while 0 <= r < GRID_SIZE:
            row_cells = [cell for cell in BOARD_CELLS if cell.row == r]
            if row_cells:
                return min(row_cells, key=lambda cell: (abs(cell.col - col), cell.col))
            r += dr
    return cursor


def describe_move(game: GamePlay, result: MoveResult | None) -> str:
    """Return a one-line status for a click, or ``""`` when nothing happened."""
    if result is None:
        return ""
    if result.success:
        return "" if result.solved else f"Move {game.moves}."
    return _MOVE_ERRORS[result.error]


def handle_key(game: GamePlay, cursor: Cell, key: str) -> tuple[Cell, str]:
    """Apply a game key to *game*.  Returns the new cursor and a status line.

    ``quit`` is left to the caller.
    """
    if key in ("up", "down", "left", "right"):
        return step_cursor(cursor, key), ""
    if key == "enter":
        return cursor, describe_move(game, game.click(cursor))
    if key == "undo":
        result = game.undo()
        return cursor, "Undone." if result.success else "Nothing to undo."
    if key == "restart":
        game.reset()
        return START_CURSOR, "Board reset."
    if key == "help":
        return cursor, HELP_TEXT
    return cursor, ""
