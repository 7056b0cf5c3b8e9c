"""Solver test suite.

Boards are generated from fixed seeds: shuffled and parity-repaired, or
scrambled by random blank walks from the goal.  Every test is hard-killed
by ``pytest-timeout`` (configured in ``pyproject.toml``).  Move lists are
replayed through the real game engine to verify correctness.
"""

from __future__ import annotations

import itertools
import random

import pytest

from slidesolver.engine.gamegenerator import GameGenerator
from slidesolver.engine.gameplay import GamePlay
from slidesolver.engine.gamesolver import (
    PhaseReport,
    PuzzleSolver,
    Solver,
    SolverConfig,
    SolverError,
)
from slidesolver.models.board import Board, Direction

SIZES = [
    (2, 2), (2, 3), (3, 2), (2, 7), (7, 2),
    (3, 3), (3, 5), (5, 3), (4, 4), (4, 6),
    (6, 4), (5, 5), (7, 7), (8, 5), (10, 10),
]


# -- helpers ------------------------------------------------------------------


def _random_board(rows: int, cols: int, seed: int) -> Board:
    rng = random.Random(seed)
    flat = list(range(rows * cols))
    rng.shuffle(flat)
    board = Board.from_flat(rows, cols, flat)
    GameGenerator.make_solvable(board)
    return board


def _scramble(
    rows: int,
    cols: int,
    steps: int,
    seed: int,
    frozen: frozenset[tuple[int, int]] = frozenset(),
) -> Board:
    """Random blank walk from the goal that never enters *frozen* cells."""
    rng = random.Random(seed)
    game = GamePlay(GameGenerator.solved(rows, cols))
    for _ in range(steps):
        br, bc = game.state.board.blank_pos
        options = [
            d for d in Direction
            if 0 <= br + d.offset[0] < rows
            and 0 <= bc + d.offset[1] < cols
            and (br + d.offset[0], bc + d.offset[1]) not in frozen
        ]
        game.move(rng.choice(options))
    return game.state.board


def _assert_solve(board: Board) -> list[Direction]:
    """Solve the board and verify the returned moves reach the goal state."""
    before = board.flat()
    moves = Solver.solve(board)

    # ---- move-list sanity ---------------------------------------------------
    assert isinstance(moves, list), "solve() must return a list of Direction"
    assert all(isinstance(m, Direction) for m in moves), (
        "Every element must be a Direction"
    )
    assert board.flat() == before, "solve() must not touch its input"

    # ---- apply moves via the real game engine and check win -----------------
    game = GamePlay.from_board(board)
    for i, direction in enumerate(moves):
        ok = game.move(direction)
        assert ok, (
            f"Move {i} ({direction.value}) was invalid at blank "
            f"{game.state.board.blank_pos}"
        )

    assert game.is_won, f"Board not solved after {len(moves)} moves"
    assert game.state.moves == len(moves)
    return moves


# -- parity -------------------------------------------------------------------


def test_transposed_pair_is_unsolvable() -> None:
    board = Board.from_flat(3, 3, [2, 1, 3, 4, 5, 6, 7, 8, 0])
    assert not Solver.is_solvable(board)
    assert Solver.solve(board) == []


def test_blank_one_step_from_home() -> None:
    board = Board.from_flat(3, 3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert Solver.is_solvable(board)
    assert _assert_solve(board) == [Direction.RIGHT]


def test_even_width_counts_blank_row() -> None:
    # Same inversions, blank one row apart.
    assert Solver.is_solvable(Board.from_flat(2, 2, [1, 2, 3, 0]))
    assert not Solver.is_solvable(Board.from_flat(2, 2, [0, 1, 2, 3]))
    assert Solver.is_solvable(Board.from_flat(4, 4, [*range(1, 12), 0, 13, 14, 15, 12]))
    assert not Solver.is_solvable(Board.from_flat(4, 4, [*range(1, 12), 0, *range(12, 16)]))


@pytest.mark.parametrize("seed", range(10))
def test_legal_moves_keep_parity(seed: int) -> None:
    rng = random.Random(seed)
    board = Board.from_flat(4, 5, rng.sample(range(20), 20))
    expected = Solver.is_solvable(board)
    game = GamePlay(board)
    for _ in range(200):
        game.move(rng.choice(list(Direction)))
        assert Solver.is_solvable(game.state.board) == expected


def test_four_by_four_one_move_away() -> None:
    board = Board.from_flat(4, 4, [*range(1, 12), 0, 13, 14, 15, 12])
    assert _assert_solve(board) == [Direction.DOWN]


def test_four_by_four_transposition_needs_repair() -> None:
    board = GameGenerator.solved(4, 4)
    board.tiles[3][1], board.tiles[3][2] = board.tiles[3][2], board.tiles[3][1]
    assert not Solver.is_solvable(board)
    assert Solver.solve(board) == []
    GameGenerator.make_solvable(board)
    _assert_solve(board)


# -- whole solver -------------------------------------------------------------


@pytest.mark.parametrize("rows, cols", [(2, 2), (2, 3), (3, 2)])
def test_solve_every_small_board(rows: int, cols: int) -> None:
    for flat in itertools.permutations(range(rows * cols)):
        board = Board.from_flat(rows, cols, list(flat))
        if Solver.is_solvable(board):
            _assert_solve(board)
        else:
            assert Solver.solve(board) == []


def test_solve_3x3_sample() -> None:
    perms = itertools.islice(itertools.permutations(range(9)), 0, None, 181)
    for flat in perms:
        board = Board.from_flat(3, 3, list(flat))
        GameGenerator.make_solvable(board)
        _assert_solve(board)


@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize("rows, cols", SIZES)
def test_solve_random(rows: int, cols: int, seed: int) -> None:
    _assert_solve(_random_board(rows, cols, seed))


@pytest.mark.parametrize("rows, cols", SIZES)
def test_solve_goal_is_empty(rows: int, cols: int) -> None:
    board = GameGenerator.solved(rows, cols)
    assert Solver.solve(board) == []
    assert Solver.autosolve(board) == 0
    assert board.is_solved()


def test_autosolve_in_place() -> None:
    board = _random_board(6, 6, seed=7)
    expected = len(Solver.solve(board))
    assert Solver.autosolve(board) == expected
    assert board.is_solved()


def test_autosolve_unsolvable_raises() -> None:
    board = Board.from_flat(3, 3, [2, 1, 3, 4, 5, 6, 7, 8, 0])
    with pytest.raises(SolverError):
        Solver.autosolve(board)


def test_autosolve_unsolvable_2x2_raises() -> None:
    board = Board.from_flat(2, 2, [2, 1, 3, 0])
    with pytest.raises(SolverError):
        PuzzleSolver(board).autosolve()


def test_rejects_single_row() -> None:
    board = Board(rows=1, cols=3, tiles=[[1, 2, 0]], blank_pos=(0, 2))
    with pytest.raises(ValueError):
        PuzzleSolver(board)


# -- phases -------------------------------------------------------------------


def test_move_single_tile() -> None:
    board = _random_board(5, 5, seed=3)
    worker = PuzzleSolver(board)
    worker.move(1, (0, 0))
    assert board.tiles[0][0] == 1
    worker.move(2, (0, 1))
    assert board.tiles[0][:2] == [1, 2]


def test_solve_row_leaves_row_finished() -> None:
    board = _random_board(5, 4, seed=11)
    worker = PuzzleSolver(board)
    worker.solve_row(0)
    worker.solve_row(1)
    assert board.tiles[0] == [1, 2, 3, 4]
    assert board.tiles[1] == [5, 6, 7, 8]


def test_row_tail_swapped_pair() -> None:
    # Last two cells of row 0 hold each other's tiles.
    board = Board.from_flat(4, 4, [1, 2, 4, 3, 5, 6, 7, 8, 9, 10, 0, 11, 12, 13, 14, 15])
    assert Solver.is_solvable(board)
    original = board.copy()
    worker = PuzzleSolver(board)
    worker.solve_1x2(0)
    assert board.tiles[0] == [1, 2, 3, 4]

    game = GamePlay.from_board(original)
    assert game.replay(worker.trace)
    assert game.state.board.tiles == board.tiles
    _assert_solve(original)


@pytest.mark.parametrize("seed", range(10))
def test_row_tail_scrambled(seed: int) -> None:
    frozen = frozenset({(0, 0), (0, 1)})
    board = _scramble(4, 4, 300, seed, frozen)
    worker = PuzzleSolver(board)
    worker.solve_1x2(0)
    assert board.tiles[0] == [1, 2, 3, 4]


@pytest.mark.parametrize("seed", range(10))
def test_row_tail_keeps_rows_above(seed: int) -> None:
    frozen = frozenset({(0, c) for c in range(4)} | {(1, 0), (1, 1)})
    board = _scramble(5, 4, 300, seed, frozen)
    worker = PuzzleSolver(board)
    worker.solve_1x2(1)
    assert board.tiles[0] == [1, 2, 3, 4]
    assert board.tiles[1] == [5, 6, 7, 8]


def test_column_tail_swapped_pair() -> None:
    # First column of the bottom strip holds its two tiles upside down.
    board = Board.from_flat(2, 3, [4, 3, 2, 1, 5, 0])
    assert Solver.is_solvable(board)
    worker = PuzzleSolver(board.copy())
    worker.solve_2x1()
    assert [worker.board.tiles[0][0], worker.board.tiles[1][0]] == [1, 4]
    _assert_solve(board)


@pytest.mark.parametrize("seed", range(10))
def test_bottom_strip_scrambled(seed: int) -> None:
    frozen = frozenset({(r, c) for r in range(2) for c in range(5)})
    board = _scramble(4, 5, 300, seed, frozen)
    worker = PuzzleSolver(board)
    worker.solve_2x1()
    for k in range(3):
        assert board.tiles[2][k] == 11 + k
        assert board.tiles[3][k] == 16 + k
    worker.solve_2x2()
    assert board.is_solved()


def test_corner_cycle() -> None:
    for flat in ([3, 1, 0, 2], [2, 3, 1, 0], [0, 3, 2, 1]):
        board = Board.from_flat(2, 2, flat)
        PuzzleSolver(board).solve_2x2()
        assert board.is_solved()


# -- reporting ----------------------------------------------------------------


@pytest.mark.parametrize(
    "rows, cols, names",
    [
        (2, 2, ["bottom strip"]),
        (2, 5, ["bottom strip"]),
        (3, 3, ["last three rows", "bottom strip"]),
        (4, 4, ["row 1", "last three rows", "bottom strip"]),
        (6, 3, ["row 1", "row 2", "row 3", "last three rows", "bottom strip"]),
    ],
)
def test_phase_reports(rows: int, cols: int, names: list[str]) -> None:
    reports: list[PhaseReport] = []
    board = _random_board(rows, cols, seed=rows * cols)
    moves = Solver.solve(board, SolverConfig(verbose=True, reporter=reports.append))

    assert [r.name for r in reports] == names
    assert sum(len(r.moves) for r in reports) == len(moves)
    assert reports[-1].board.is_solved()


def test_quiet_config_skips_reporter() -> None:
    reports: list[PhaseReport] = []
    board = _random_board(4, 4, seed=1)
    Solver.solve(board, SolverConfig(verbose=False, reporter=reports.append))
    assert reports == []


# -- hints --------------------------------------------------------------------


def test_hint() -> None:
    board = Board.from_flat(3, 3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert Solver.hint(board) is Direction.RIGHT
    assert Solver.hint(GameGenerator.solved(3, 3)) is None
    assert Solver.hint(Board.from_flat(3, 3, [2, 1, 3, 4, 5, 6, 7, 8, 0])) is None


def test_hint_starts_solution() -> None:
    board = _random_board(5, 5, seed=2)
    assert Solver.hint(board) is Solver.solve(board)[0]
