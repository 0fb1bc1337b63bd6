"""Cursor movement and key dispatch shared by the keyboard frontends."""

from __future__ import annotations

import pytest

from backend.engine.gameplay import GamePlay
from backend.engine.gamesetup import GameSetup
from backend.models.board import Cell
from frontend.cli import input_handler
from frontend.cli.controls import START_CURSOR, handle_key, step_cursor
from frontend.cli.input_handler import get_key, resolve


@pytest.mark.parametrize(
    "cursor, action, expected",
    [
        ((3, 0), "right", (3, 1)),
        ((3, 3), "right", (3, 3)),
        ((2, 1), "left", (2, 1)),
        ((3, 0), "up", (2, 1)),
        ((1, 2), "up", (0, 1)),
        ((0, 1), "up", (0, 1)),
        ((0, 1), "down", (1, 1)),
        ((2, 3), "down", (3, 3)),
        ((3, 2), "down", (3, 2)),
        ((2, 2), "enter", (2, 2)),
    ],
)
def test_step_cursor(cursor, action, expected) -> None:
    assert step_cursor(Cell(*cursor), action) == expected


def test_keys_play_a_move() -> None:
    game = GamePlay()
    cursor = START_CURSOR

    cursor, _ = handle_key(game, cursor, "enter")
    assert game.selection is not None

    for key in ("up", "up"):
        cursor, _ = handle_key(game, cursor, key)
    assert cursor == (1, 1)

    cursor, status = handle_key(game, cursor, "enter")
    assert game.moves == 1
    assert status == "Move 1."


def test_bad_click_reports_reason() -> None:
    game = GamePlay()
    handle_key(game, Cell(3, 0), "enter")
    _, status = handle_key(game, Cell(3, 1), "enter")
    assert status == "Knights move in an L shape."


def test_undo_and_restart_keys() -> None:
    game = GamePlay()
    _, status = handle_key(game, START_CURSOR, "undo")
    assert status == "Nothing to undo."

    game.attempt_move((3, 0), (1, 1))
    _, status = handle_key(game, START_CURSOR, "undo")
    assert status == "Undone."
    assert game.moves == 0

    game.attempt_move((3, 0), (1, 1))
    cursor, status = handle_key(game, Cell(1, 1), "restart")
    assert cursor == START_CURSOR
    assert game.current == GameSetup.initial()


@pytest.mark.parametrize(
    "ch, action",
    [("w", "up"), ("D", "right"), ("u", "undo"), ("R", "restart"), (" ", "enter"), ("x", "x"), ("\x01", "")],
)
def test_resolve_keys(ch: str, action: str) -> None:
    assert resolve(ch) == action


@pytest.mark.parametrize(
    "chars, action",
    [
        ("\x1b[A", "up"),
        ("\x1b[D", "left"),
        ("\x1b[Z", ""),
        ("\x1bx", "quit"),
        ("u", "undo"),
    ],
    ids=["arrow-up", "arrow-left", "unknown-sequence", "bare-escape", "letter"],
)
def test_get_key_decodes_sequences(monkeypatch: pytest.MonkeyPatch, chars: str, action: str) -> None:
    stream = iter(chars)
    monkeypatch.setattr(input_handler, "_read", lambda: next(stream))
    assert get_key() == action
