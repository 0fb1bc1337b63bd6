"""Tracks the mutable state of a puzzle session."""

from __future__ import annotations

from backend.models.board import Cell, Configuration


class GameState:
    """Holds the current configuration, undo history, and move counter."""

    def __init__(self, config: Configuration) -> None:
        self.current = config
        self.history: list[Configuration] = []
        self.moves: int = 0
        self.game_over: bool = False
        self.selection: Cell | None = None

    # -- moves ----------------------------------------------------------------

    def push(self, config: Configuration) -> None:
        """Archive the live configuration and make *config* current."""
        self.history.append(self.current)
        self.current = config
        self.moves += 1
        self.selection = None

    def pop(self) -> Configuration:
        """Restore the most recent archived configuration and return it.

        Callers check ``history`` first; popping an empty history raises
        ``IndexError``.
        """
        self.current = self.history.pop()
        self.moves = max(0, self.moves - 1)
        self.game_over = False
        self.selection = None
        return self.current

    def restart(self, config: Configuration) -> None:
        """Drop all history and start again from *config*."""
        self.current = config
        self.history.clear()
        self.moves = 0
        self.game_over = False
        self.selection = None
