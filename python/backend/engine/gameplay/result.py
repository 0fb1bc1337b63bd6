"""Structured outcomes of engine operations.

Rejected requests are reported through these values rather than raised, and
leave the session untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from backend.models.board import Configuration


class MoveError(StrEnum):
    GAME_OVER = "game_over"
    ILLEGAL_DESTINATION = "illegal_destination"
    NO_PIECE_AT_SOURCE = "no_piece_at_source"
    DESTINATION_OCCUPIED = "destination_occupied"
    NOT_A_KNIGHT_MOVE = "not_a_knight_move"


class UndoError(StrEnum):
    NO_HISTORY = "no_history"


@dataclass(frozen=True)
class MoveResult:
    success: bool
    config: Configuration
    solved: bool = False
    error: MoveError | None = None

    @classmethod
    def ok(cls, config: Configuration, solved: bool) -> MoveResult:
        return cls(success=True, config=config, solved=solved)

    @classmethod
    def failed(
        cls, config: Configuration, error: MoveError, solved: bool = False
    ) -> MoveResult:
        return cls(success=False, config=config, solved=solved, error=error)


@dataclass(frozen=True)
class UndoResult:
    success: bool
    config: Configuration
    error: UndoError | None = None
