"""Replay bookkeeping: the board being replayed, slides applied, time taken."""

from __future__ import annotations

import time

from slidesolver.models.board import Board


class GameState:
    """Board under replay plus the count of legal slides and a stopwatch.

    The stopwatch starts on construction and freezes at :meth:`stop`,
    so ``elapsed_time`` covers solving and replay when the state is
    created before the solver runs.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self._started: float = time.perf_counter()
        self._stopped: float | None = None

    @property
    def elapsed_time(self) -> float:
        end = self._stopped if self._stopped is not None else time.perf_counter()
        return end - self._started

    def stop(self) -> None:
        if self._stopped is None:
            self._stopped = time.perf_counter()

    def record(self) -> None:
        self.moves += 1
