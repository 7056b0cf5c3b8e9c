"""Core gameplay logic: applies blank slides and checks the win condition."""

from __future__ import annotations

from collections.abc import Iterable

from slidesolver.engine.gamestate import GameState
from slidesolver.models.board import Board, Direction


class GamePlay:
    """Replays blank slides on a board and tracks the result."""

    def __init__(self, board: Board) -> None:
        self.rows = board.rows
        self.cols = board.cols
        self.state = GameState(board)

    @classmethod
    def from_board(cls, board: Board) -> "GamePlay":
        """Create a session over a copy of *board* (e.g. loaded from file)."""
        return cls(board.copy())

    # -- movement (direction = where the *blank* goes) ------------------------

    def move(self, direction: Direction) -> bool:
        """Slide the blank one cell in *direction*.

        E.g. ``Direction.UP`` swaps the blank with the tile **above** it,
        so that tile moves down.  Returns True if the move was legal.
        """
        board = self.state.board
        br, bc = board.blank_pos
        dr, dc = direction.offset
        tr, tc = br + dr, bc + dc

        if not (0 <= tr < board.rows and 0 <= tc < board.cols):
            return False

        self._swap(board, (tr, tc))
        self.state.record()
        return True

    def replay(self, moves: Iterable[Direction]) -> bool:
        """Apply *moves* in order; stop at the first illegal one.

        Returns True if every move was legal.  The timer stops either way.
        """
        try:
            for direction in moves:
                if not self.move(direction):
                    return False
            return True
        finally:
            self.state.stop()

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.board.is_solved()

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _swap(board: Board, target: tuple[int, int]) -> None:
        br, bc = board.blank_pos
        tr, tc = target
        board.tiles[br][bc], board.tiles[tr][tc] = (
            board.tiles[tr][tc],
            board.tiles[br][bc],
        )
        board.blank_pos = (tr, tc)
