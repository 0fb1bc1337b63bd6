from backend.models.board import BOARD_CELLS, Cell, Color, Configuration, Piece

__all__ = ["BOARD_CELLS", "Cell", "Color", "Configuration", "Piece"]
