"""Constructive M×N sliding puzzle solver: rule based, no search.

Strategy:
  - Rows 0..M-3 are finished top-down.  All but the last two tiles of a
    row are pushed home one at a time; the last two are parked one cell
    early and rotated in together.
  - The bottom two rows are then finished column by column with the
    transposed trick.
  - The final 2×2 is a 3-cycle: at most two more corner rotations.

Every blank route is a composition of ``move_h``/``move_v`` and the
idioms in :mod:`idioms`, laid out so that finished cells are never
crossed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from slidesolver.engine.gamesolver import idioms
from slidesolver.models.board import BLANK, Board, Direction

logger = logging.getLogger(__name__)


class SolverError(RuntimeError):
    """The solver reached a state its case analysis does not allow."""


@dataclass(frozen=True)
class PhaseReport:
    """Moves issued during one phase and the board right after it."""

    name: str
    moves: tuple[Direction, ...]
    board: Board


@dataclass
class SolverConfig:
    """Options threaded through the solver entry points.

    With ``verbose`` set, ``reporter`` receives a :class:`PhaseReport`
    after every phase; otherwise moves are only counted.
    """

    verbose: bool = False
    reporter: Callable[[PhaseReport], None] | None = None


class PuzzleSolver:
    """Solves *board* in place, recording every blank slide."""

    def __init__(self, board: Board, config: SolverConfig | None = None) -> None:
        if board.rows < 2 or board.cols < 2:
            raise ValueError(f"Board must be at least 2×2, got {board.rows}×{board.cols}.")
        self.board = board
        self.rows = board.rows
        self.cols = board.cols
        self.config = config or SolverConfig()
        self.trace: list[Direction] = []
        self.moves: list[Direction] = []
        self._pos: dict[int, tuple[int, int]] = {
            v: (r, c)
            for r, row in enumerate(board.tiles)
            for c, v in enumerate(row)
        }

    # -- primitives -----------------------------------------------------------

    def _go(self, direction: Direction) -> None:
        br, bc = self.board.blank_pos
        dr, dc = direction.offset
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < self.rows and 0 <= tc < self.cols):
            raise SolverError(f"Blank at {(br, bc)} cannot move {direction.value}.")
        tiles = self.board.tiles
        value = tiles[tr][tc]
        tiles[br][bc] = value
        tiles[tr][tc] = BLANK
        self._pos[value] = (br, bc)
        self._pos[BLANK] = (tr, tc)
        self.board.blank_pos = (tr, tc)
        self.trace.append(direction)

    def _run(
        self,
        moves: Iterable[Direction],
        value: int | None = None,
        target: tuple[int, int] | None = None,
    ) -> bool:
        """Apply *moves*; stop early once *value* sits on *target*."""
        for direction in moves:
            self._go(direction)
            if value is not None and self._pos[value] == target:
                return True
        return value is not None and self._pos[value] == target

    def move_h(self, col: int) -> None:
        """Slide the blank along its row to *col*."""
        bc = self.board.blank_pos[1]
        step = Direction.RIGHT if col > bc else Direction.LEFT
        for _ in range(abs(col - bc)):
            self._go(step)

    def move_v(self, row: int) -> None:
        """Slide the blank along its column to *row*."""
        br = self.board.blank_pos[0]
        step = Direction.DOWN if row > br else Direction.UP
        for _ in range(abs(row - br)):
            self._go(step)

    # -- single tile ----------------------------------------------------------

    def move(self, value: int, target: tuple[int, int], prefix: int | None = None) -> None:
        """Bring tile *value* to *target* without touching finished cells.

        Finished cells are every row above ``target[0]`` plus the first
        *prefix* cells of the target row (default: all cells left of the
        target).  The target column must have a column to its right, and
        a partly finished target row needs two rows below it.
        """
        ti, tj = target
        if prefix is None:
            prefix = tj
        r, c = self._pos[value]

        if c != tj:
            step = 1 if tj > c else -1
            loop_row = r + 1 if r < self.rows - 1 else r - 1
            self._front_h(r, c, step, loop_row)
            push = Direction.LEFT if step > 0 else Direction.RIGHT
            loop = idioms.horizontal_loop(step, below=loop_row > r)
            if self._run((push,) + loop * (abs(tj - c) - 1), value, target):
                return

        if r > ti:
            self._front_v(r, tj, ti, prefix)
            if self._run((Direction.DOWN,) + idioms.CLIMB * (r - ti - 1), value, target):
                return

        if self._pos[value] != target:
            raise SolverError(f"Tile {value} ended at {self._pos[value]}, not {target}.")

    def _front_h(self, r: int, c: int, step: int, loop_row: int) -> None:
        # Blank to (r, c + step), going round the tile through loop_row.
        br, bc = self.board.blank_pos
        if br == r and (bc - c) * step > 0:
            self.move_h(c + step)
        elif bc == c and (br - r) * (loop_row - r) < 0:
            self.move_h(c + step)
            self.move_v(r)
        else:
            self.move_v(loop_row)
            self.move_h(c + step)
            self.move_v(r)

    def _front_v(self, r: int, tj: int, ti: int, prefix: int) -> None:
        # Blank to (r - 1, tj), right above the tile.
        br, bc = self.board.blank_pos
        if bc == tj and br < r:
            self.move_v(r - 1)
        elif br == r - 1:
            self.move_h(tj)
        elif br == r and bc < tj:
            if r - 1 > ti or bc >= prefix:
                self.move_v(r - 1)
                self.move_h(tj)
            else:
                # Row above is only partly free: go under and up the right side.
                self.move_v(r + 1)
                self.move_h(tj + 1)
                self.move_v(r - 1)
                self.move_h(tj)
        else:
            self.move_h(tj + 1)
            self.move_v(r - 1)
            self.move_h(tj)

    def _move_in_strip(self, value: int, target: tuple[int, int]) -> None:
        """Bring *value* to *target* inside the bottom two rows.

        The tile must not be left of the target column, and nothing left of
        it may be disturbed.
        """
        tr, tc = target
        top = self.rows - 2
        r, c = self._pos[value]

        if c != tc:
            other = top + 1 if r == top else top
            br, bc = self.board.blank_pos
            if br == r and bc < c:
                self.move_h(c - 1)
            else:
                self.move_v(other)
                self.move_h(c - 1)
                self.move_v(r)
            loop = idioms.horizontal_loop(-1, below=other > r)
            if self._run((Direction.RIGHT,) + loop * (c - tc - 1), value, target):
                return

        if r != tr:
            self.move_v(tr)
            self.move_h(tc)
            push = Direction.DOWN if tr < r else Direction.UP
            if self._run((push,), value, target):
                return

        if self._pos[value] != target:
            raise SolverError(f"Tile {value} ended at {self._pos[value]}, not {target}.")

    # -- row and column tails -------------------------------------------------

    def solve_1x2(self, row: int) -> None:
        """Finish the last two cells of *row* together.

        Columns ``0..N-3`` of the row must already be finished and the row
        needs two rows below it.
        """
        n = self.cols
        w, x = n - 2, n - 1
        first, last = row * n + w + 1, row * n + x + 1
        if self._pos[first] == (row, w) and self._pos[last] == (row, x):
            return

        self.move(last, (row, w), prefix=w)
        if self.board.blank_pos == (row, x):
            self._go(Direction.DOWN)

        if self._pos[first] == (row, x):
            self.move_h(x)
            self.move_v(row + 1)
            self._run(idioms.ROW_TAIL_SWAP)
        else:
            self.move(first, (row + 1, w), prefix=0)
            br, bc = self.board.blank_pos
            if br == row + 1 and bc != x:
                self.move_v(row + 2)
            self.move_h(x)
            self.move_v(row + 1)
            self._run(idioms.ROW_TAIL_FINISH)

    def solve_2x1(self) -> None:
        """Finish columns ``0..N-3`` of the bottom two rows, left to right."""
        n = self.cols
        top, bottom = self.rows - 2, self.rows - 1
        for k in range(n - 2):
            first, last = top * n + k + 1, bottom * n + k + 1
            if self._pos[first] == (top, k) and self._pos[last] == (bottom, k):
                continue

            self._move_in_strip(last, (top, k))
            if self.board.blank_pos == (bottom, k):
                self._go(Direction.RIGHT)

            if self._pos[first] == (bottom, k):
                self.move_h(k + 1)
                self.move_v(bottom)
                self._run(idioms.COLUMN_TAIL_SWAP)
            else:
                self._move_in_strip(first, (top, k + 1))
                self.move_v(bottom)
                self.move_h(k)
                self._run(idioms.COLUMN_TAIL_FINISH)

            if self._pos[first] != (top, k) or self._pos[last] != (bottom, k):
                raise SolverError(f"Bottom strip column {k} is not finished.")

    def solve_2x2(self) -> None:
        """Rotate the bottom-right 2×2 until the board is solved."""
        self.move_h(self.cols - 1)
        self.move_v(self.rows - 1)
        for _ in range(2):
            if self.board.is_solved():
                return
            self._run(idioms.CORNER_CYCLE)
        if not self.board.is_solved():
            raise SolverError("Final 2×2 cannot be solved; the board is not solvable.")

    # -- driver ---------------------------------------------------------------

    def solve_row(self, row: int) -> None:
        """Finish *row*, then verify every row up to it.

        A wrong cell in a finished row raises :class:`SolverError`; no
        corrective ``AWDS`` rotation is appended to patch it up.
        """
        n = self.cols
        for col in range(n - 2):
            self.move(row * n + col + 1, (row, col))
        self.solve_1x2(row)
        self._check_rows(row)

    def autosolve(self) -> int:
        """Solve the board in place and return the number of moves."""
        m = self.rows
        for row in range(m - 3):
            self.solve_row(row)
            self._finish_phase(f"row {row + 1}")
        if m >= 3:
            self.solve_row(m - 3)
            self._finish_phase("last three rows")
        self.solve_2x1()
        self.solve_2x2()
        self._finish_phase("bottom strip")
        return len(self.moves)

    def _check_rows(self, last_row: int) -> None:
        n = self.cols
        for r in range(last_row + 1):
            for c in range(n):
                if self.board.tiles[r][c] != r * n + c + 1:
                    raise SolverError(f"Row {r} is not finished after row {last_row}.")

    def _finish_phase(self, name: str) -> None:
        moves = tuple(self.trace)
        self.trace.clear()
        self.moves.extend(moves)
        logger.debug("%s: %d moves (%d total)", name, len(moves), len(self.moves))
        if self.config.verbose and self.config.reporter is not None:
            self.config.reporter(PhaseReport(name=name, moves=moves, board=self.board.copy()))
