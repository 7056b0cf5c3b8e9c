"""Sliding puzzle solver facade."""

from __future__ import annotations

from bisect import bisect_left, insort

from slidesolver.engine.gamesolver.autosolve import PuzzleSolver, SolverConfig
from slidesolver.engine.gamesolver.search import shortest_path
from slidesolver.models.board import BLANK, Board, Direction


class Solver:
    """Stateless solver; all methods are static."""

    @staticmethod
    def solve(board: Board, config: SolverConfig | None = None) -> list[Direction]:
        """Return a move sequence that solves *board*, or ``[]`` if unsolvable.

        *board* itself is left untouched.
        """
        if board.is_solved():
            return []

        if not Solver.is_solvable(board):
            return []

        worker = PuzzleSolver(board.copy(), config)
        worker.autosolve()
        return worker.moves

    @staticmethod
    def autosolve(board: Board, config: SolverConfig | None = None) -> int:
        """Solve *board* in place and return the number of moves used.

        The board must be solvable; see :meth:`is_solvable`.
        """
        return PuzzleSolver(board, config).autosolve()

    @staticmethod
    def hint(board: Board) -> Direction | None:
        """Return the solver's next move, or ``None`` if solved / unsolvable."""
        if board.is_solved():
            return None

        moves = Solver.solve(board)
        return moves[0] if moves else None

    @staticmethod
    def shortest(board: Board) -> list[Direction]:
        """Return an optimal move sequence for a small board, ``[]`` if unsolvable."""
        if not Solver.is_solvable(board):
            return []
        return shortest_path(board) or []

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        flat = [v for v in board.flat() if v != BLANK]
        inv = 0
        seen: list[int] = []
        for v in flat:
            inv += len(seen) - bisect_left(seen, v)
            insort(seen, v)
        if board.cols % 2 == 1:
            return inv % 2 == 0
        blank_from_bottom = board.rows - 1 - board.blank_pos[0]
        return (inv + blank_from_bottom) % 2 == 0
