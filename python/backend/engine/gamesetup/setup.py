"""Start and goal positions of the knight swap puzzle."""

from __future__ import annotations

from backend.models.board import Color, Configuration

_INITIAL = Configuration.from_pairs(
    [
        ((0, 1), Color.WHITE),
        ((2, 2), Color.WHITE),
        ((3, 0), Color.BLACK),
        ((3, 2), Color.BLACK),
    ]
)

# Same cells, colors swapped.
_TARGET = Configuration.from_pairs(
    [
        ((0, 1), Color.BLACK),
        ((2, 2), Color.BLACK),
        ((3, 0), Color.WHITE),
        ((3, 2), Color.WHITE),
    ]
)


class GameSetup:
    """Provides the fixed puzzle configurations."""

    @staticmethod
    def initial() -> Configuration:
        """Return the starting configuration (white on top, black below)."""
        return _INITIAL

    @staticmethod
    def target() -> Configuration:
        """Return the goal configuration every session is solved against."""
        return _TARGET
