from backend.engine.gamesetup.setup import GameSetup

__all__ = ["GameSetup"]
