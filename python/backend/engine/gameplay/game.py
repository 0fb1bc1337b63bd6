"""Core gameplay logic: validates and applies knight moves, undo and reset."""

from __future__ import annotations

import logging
from typing import Iterator

from backend.engine.gameplay.result import MoveError, MoveResult, UndoError, UndoResult
from backend.engine.gamerules import Rules
from backend.engine.gamesetup import GameSetup
from backend.engine.gamestate import GameState
from backend.models.board import Cell, Configuration, Piece

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single puzzle session.

    Every change to the session goes through this class; frontends only read
    ``current``, ``moves``, ``is_won`` and ``selection``.
    """

    def __init__(
        self,
        initial: Configuration | None = None,
        target: Configuration | None = None,
    ) -> None:
        self.initial = initial if initial is not None else GameSetup.initial()
        self.target = target if target is not None else GameSetup.target()
        self.state = GameState(self.initial)

    # -- movement -------------------------------------------------------------

    def attempt_move(self, src: tuple[int, int], dst: tuple[int, int]) -> MoveResult:
        """Jump the knight on *src* to *dst*.

        Checks run in a fixed order and the first failure is reported;
        a rejected move leaves the session untouched.
        """
        state = self.state
        src, dst = Cell(*src), Cell(*dst)

        error = self._check_move(src, dst)
        if error is not None:
            logger.debug("Rejected move %s -> %s: %s", src, dst, error)
            return MoveResult.failed(state.current, error, solved=state.game_over)

        state.push(state.current.moved(src, dst))
        state.game_over = Rules.is_solved(state.current, self.target)
        logger.debug("Moved %s -> %s (move %d)", src, dst, state.moves)
        if state.game_over:
            logger.info("Puzzle solved in %d moves", state.moves)
        return MoveResult.ok(state.current, state.game_over)

    def undo(self) -> UndoResult:
        """Revert the most recent move."""
        state = self.state
        if not state.history:
            return UndoResult(
                success=False, config=state.current, error=UndoError.NO_HISTORY
            )
        config = state.pop()
        logger.debug("Undid a move, back to move %d", state.moves)
        return UndoResult(success=True, config=config)

    def reset(self) -> Configuration:
        """Start over from the initial configuration."""
        self.state.restart(self.initial)
        logger.debug("Session reset")
        return self.state.current

    # -- selection ------------------------------------------------------------

    def select_at(self, cell: tuple[int, int]) -> Piece | None:
        """Select the knight on *cell*; an empty cell keeps the old selection."""
        piece = self.state.current.piece_at(cell)
        if piece is not None:
            self.state.selection = piece.cell
        return piece

    def clear_selection(self) -> None:
        self.state.selection = None

    def click(self, cell: tuple[int, int]) -> MoveResult | None:
        """Apply one click on *cell* to the selection.

        Without a selection the click picks up the knight on *cell*.  With
        one, clicking another knight switches to it and clicking an empty
        cell tries to move there; the selection is dropped either way.
        Returns the move outcome when a move was attempted.
        """
        selected = self.state.selection
        if selected is None or self.state.current.is_occupied(cell):
            self.select_at(cell)
            return None

        self.clear_selection()
        return self.attempt_move(selected, cell)

    def valid_destinations_from(self, cell: tuple[int, int]) -> Iterator[Cell]:
        """Lazily yield the empty cells a knight on *cell* could jump to.

        Call again for a fresh pass; the session is not modified.
        """
        return Rules.destinations(self.state.current, cell)

    # -- queries --------------------------------------------------------------

    @property
    def current(self) -> Configuration:
        return self.state.current

    @property
    def moves(self) -> int:
        return self.state.moves

    @property
    def is_won(self) -> bool:
        return self.state.game_over

    @property
    def can_undo(self) -> bool:
        return bool(self.state.history)

    @property
    def selection(self) -> Piece | None:
        if self.state.selection is None:
            return None
        return self.state.current.piece_at(self.state.selection)

    # -- helpers --------------------------------------------------------------

    def _check_move(self, src: Cell, dst: Cell) -> MoveError | None:
        current = self.state.current
        if self.state.game_over:
            return MoveError.GAME_OVER
        if not Rules.is_legal_cell(*dst):
            return MoveError.ILLEGAL_DESTINATION
        if not current.is_occupied(src):
            return MoveError.NO_PIECE_AT_SOURCE
        if current.is_occupied(dst):
            return MoveError.DESTINATION_OCCUPIED
        if not Rules.is_knight_move(src, dst):
            return MoveError.NOT_A_KNIGHT_MOVE
        return None
