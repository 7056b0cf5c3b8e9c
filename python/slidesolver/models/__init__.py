from slidesolver.models.board import BLANK, Board, Direction

__all__ = ["BLANK", "Board", "Direction"]
