from backend.engine.gameplay.game import GamePlay
from backend.engine.gameplay.result import MoveError, MoveResult, UndoError, UndoResult

__all__ = ["GamePlay", "MoveError", "MoveResult", "UndoError", "UndoResult"]
