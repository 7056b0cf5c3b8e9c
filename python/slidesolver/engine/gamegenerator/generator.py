"""Builds goal boards and repairs the parity of unsolvable ones."""

from __future__ import annotations

import logging

from slidesolver.engine.gamesolver import Solver
from slidesolver.models.board import BLANK, Board

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates goal boards and forces solvability for demonstrations."""

    @staticmethod
    def solved(rows: int, cols: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        flat = list(range(1, rows * cols)) + [BLANK]
        return Board.from_flat(rows, cols, flat)

    @staticmethod
    def make_solvable(board: Board) -> int:
        """Swap tiles in-place until *board* passes the parity check.

        Swaps the first row-major adjacent pair of non-blank tiles, which
        flips the inversion parity.  This is not a legal slide: it changes
        the puzzle rather than solving it.  Returns the number of swaps.
        """
        swaps = 0
        while not Solver.is_solvable(board):
            p1, p2 = GameGenerator._first_tile_pair(board)
            GameGenerator._swap_cells(board, p1, p2)
            swaps += 1
            logger.info("Swapped tiles at %s and %s to fix parity", p1, p2)
        return swaps

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _first_tile_pair(board: Board) -> tuple[tuple[int, int], tuple[int, int]]:
        flat = board.flat()
        for i in range(len(flat) - 1):
            if flat[i] != BLANK and flat[i + 1] != BLANK:
                return divmod(i, board.cols), divmod(i + 1, board.cols)
        raise ValueError("Board has no two neighbouring tiles to swap.")

    @staticmethod
    def _swap_cells(board: Board, p1: tuple[int, int], p2: tuple[int, int]) -> None:
        r1, c1 = p1
        r2, c2 = p2
        board.tiles[r1][c1], board.tiles[r2][c2] = (
            board.tiles[r2][c2],
            board.tiles[r1][c1],
        )
