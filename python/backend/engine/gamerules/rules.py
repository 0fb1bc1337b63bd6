"""Knight swap rules: board topology, knight moves, and the win check."""

from __future__ import annotations

from collections import Counter
from typing import Iterator

from backend.models.board import BOARD_CELLS, KNIGHT_OFFSETS, Cell, Configuration


class Rules:
    """Stateless rules. All methods are static."""

    @staticmethod
    def is_legal_cell(row: int, col: int) -> bool:
        """Return True if (row, col) is one of the board's cells."""
        return (row, col) in BOARD_CELLS

    @staticmethod
    def is_knight_move(src: tuple[int, int], dst: tuple[int, int]) -> bool:
        """Return True if *src* -> *dst* is an L-shaped jump.

        Only the offset is checked; board membership and occupancy are
        the caller's business.
        """
        dr = abs(src[0] - dst[0])
        dc = abs(src[1] - dst[1])
        return {dr, dc} == {1, 2}

    @staticmethod
    def knight_targets(cell: tuple[int, int]) -> Iterator[Cell]:
        """Yield every board cell one knight move away from *cell*."""
        row, col = cell
        for dr, dc in KNIGHT_OFFSETS:
            if Rules.is_legal_cell(row + dr, col + dc):
                yield Cell(row + dr, col + dc)

    @staticmethod
    def destinations(config: Configuration, cell: tuple[int, int]) -> Iterator[Cell]:
        """Yield the empty board cells a knight on *cell* could jump to."""
        for target in Rules.knight_targets(cell):
            if not config.is_occupied(target):
                yield target

    @staticmethod
    def is_solved(current: Configuration, target: Configuration) -> bool:
        """Return True if both configurations hold the same (cell, color) pairs.

        Knights of one color are interchangeable, so only the multiset of
        occupied cells and colors is compared.
        """
        return Counter(current.pieces) == Counter(target.pieces)
