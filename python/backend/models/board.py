"""Board model for the knight swap puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable, NamedTuple


class Cell(NamedTuple):
    row: int
    col: int


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


# The 10 playable positions of the 4x4 grid, top row first.
BOARD_CELLS: frozenset[Cell] = frozenset(
    Cell(r, c)
    for r, c in (
        (0, 1),
        (1, 1), (1, 2),
        (2, 1), (2, 2), (2, 3),
        (3, 0), (3, 1), (3, 2), (3, 3),
    )
)

GRID_SIZE = 4
PIECE_COUNT = 4

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1), (-2, 1), (-1, -2), (-1, 2),
    (1, -2), (1, 2), (2, -1), (2, 1),
)


@dataclass(frozen=True)
class Piece:
    cell: Cell
    color: Color


@dataclass(frozen=True)
class Configuration:
    """An immutable placement of every knight on the board.

    Moving a piece returns a new configuration, so snapshots kept for undo
    are plain values.
    """

    pieces: tuple[Piece, ...]

    def __post_init__(self) -> None:
        if len(self.pieces) != PIECE_COUNT:
            raise ValueError(
                f"Expected {PIECE_COUNT} pieces, got {len(self.pieces)}."
            )
        seen: set[Cell] = set()
        for piece in self.pieces:
            if piece.cell not in BOARD_CELLS:
                raise ValueError(f"{tuple(piece.cell)} is not a board cell.")
            if piece.cell in seen:
                raise ValueError(f"Two pieces share cell {tuple(piece.cell)}.")
            seen.add(piece.cell)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[tuple[tuple[int, int], Color | str]]
    ) -> Configuration:
        """Create a configuration from ``((row, col), color)`` pairs.

        Example::

            Configuration.from_pairs([((0, 1), "white"), ((3, 0), "black"), ...])
        """
        return cls(
            pieces=tuple(
                Piece(cell=Cell(*cell), color=Color(color)) for cell, color in pairs
            )
        )

    # -- queries --------------------------------------------------------------

    @property
    def cells(self) -> frozenset[Cell]:
        return frozenset(p.cell for p in self.pieces)

    def piece_at(self, cell: tuple[int, int]) -> Piece | None:
        for piece in self.pieces:
            if piece.cell == cell:
                return piece
        return None

    def is_occupied(self, cell: tuple[int, int]) -> bool:
        return self.piece_at(cell) is not None

    def sorted_pieces(self) -> list[Piece]:
        """Pieces ordered by row, then column."""
        return sorted(self.pieces, key=lambda p: p.cell)

    def moved(self, src: tuple[int, int], dst: tuple[int, int]) -> Configuration:
        """Return a copy with the piece at *src* relocated to *dst*.

        Raises ``ValueError`` when *src* is empty or the result would break
        the board invariants; callers validate first.
        """
        piece = self.piece_at(src)
        if piece is None:
            raise ValueError(f"No piece at {tuple(src)}.")
        return Configuration(
            pieces=tuple(
                Piece(cell=Cell(*dst), color=p.color) if p is piece else p
                for p in self.pieces
            )
        )
