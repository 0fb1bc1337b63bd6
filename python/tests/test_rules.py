"""Topology, knight-move and win-check rules."""

from __future__ import annotations

import itertools

import pytest

from backend.engine.gamerules import Rules
from backend.engine.gamesetup import GameSetup
from backend.models.board import BOARD_CELLS, GRID_SIZE, Configuration

_GRID = [(r, c) for r in range(GRID_SIZE) for c in range(GRID_SIZE)]


# -- topology -----------------------------------------------------------------


def test_legal_cells_match_board() -> None:
    legal = {(r, c) for r, c in _GRID if Rules.is_legal_cell(r, c)}
    assert legal == {
        (0, 1),
        (1, 1), (1, 2),
        (2, 1), (2, 2), (2, 3),
        (3, 0), (3, 1), (3, 2), (3, 3),
    }


@pytest.mark.parametrize("cell", [(-1, 0), (0, 0), (4, 1), (1, 3)])
def test_cells_off_board_are_illegal(cell: tuple[int, int]) -> None:
    assert not Rules.is_legal_cell(*cell)


# -- knight moves -------------------------------------------------------------


@pytest.mark.parametrize(
    "src, dst, expected",
    [
        ((3, 0), (1, 1), True),
        ((3, 0), (2, 2), True),
        ((0, 1), (2, 2), True),
        ((0, 0), (-2, 1), True),  # topology is not checked here
        ((3, 0), (3, 1), False),
        ((3, 0), (2, 1), False),
        ((1, 1), (3, 3), False),
        ((2, 2), (2, 2), False),
    ],
)
def test_is_knight_move(src, dst, expected) -> None:
    assert Rules.is_knight_move(src, dst) is expected


def test_knight_move_is_symmetric() -> None:
    for a, b in itertools.product(_GRID, repeat=2):
        assert Rules.is_knight_move(a, b) == Rules.is_knight_move(b, a), (a, b)


def test_knight_targets_stay_on_board() -> None:
    for cell in BOARD_CELLS:
        for target in Rules.knight_targets(cell):
            assert target in BOARD_CELLS
            assert Rules.is_knight_move(cell, target)


def test_destinations_skip_occupied_cells() -> None:
    config = GameSetup.initial()
    assert set(Rules.knight_targets((3, 0))) == {(1, 1), (2, 2)}
    assert list(Rules.destinations(config, (3, 0))) == [(1, 1)]
    assert list(Rules.destinations(config, (0, 1))) == []


# -- win check ----------------------------------------------------------------


def test_initial_is_not_solved() -> None:
    assert not Rules.is_solved(GameSetup.initial(), GameSetup.target())


def test_solved_ignores_piece_order() -> None:
    target = GameSetup.target()
    shuffled = Configuration(pieces=tuple(reversed(target.pieces)))
    assert Rules.is_solved(shuffled, target)


def test_same_colored_knights_are_interchangeable() -> None:
    # Each black knight ends on the cell the *other* one would in a
    # one-to-one mapping from the start.
    current = Configuration.from_pairs(
        [((2, 2), "black"), ((3, 2), "white"), ((0, 1), "black"), ((3, 0), "white")]
    )
    assert Rules.is_solved(current, GameSetup.target())


def test_colors_must_match() -> None:
    wrong = Configuration.from_pairs(
        [((0, 1), "black"), ((2, 2), "white"), ((3, 0), "black"), ((3, 2), "white")]
    )
    assert not Rules.is_solved(wrong, GameSetup.target())
