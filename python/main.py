#!/usr/bin/env python3
"""M×N Sliding Puzzle Solver.

Usage::

    python main.py solve -m 3 -n 3 1 2 3 4 5 6 7 0 8
    python main.py solve -f board.json --quiet
    python main.py solve -m 3 -n 3 2 1 3 4 5 6 7 8 0 --repair
    python main.py check -m 4 -n 4 ...
    python main.py shortest -m 3 -n 3 ...

Tiles are listed row by row; ``0`` is the blank.
"""

import json
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import List, Optional

import typer
from rich.align import Align
from rich.text import Text

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from slidesolver.engine.gamegenerator import GameGenerator  # noqa: E402
from slidesolver.engine.gameplay import GamePlay  # noqa: E402
from slidesolver.engine.gamesolver import Solver, SolverConfig  # noqa: E402
from slidesolver.frontend.console import (  # noqa: E402
    board_panel,
    console,
    format_moves,
    print_phase,
    print_summary,
)
from slidesolver.models.board import Board  # noqa: E402

# Per-phase traces get unwieldy from here on.
LARGE_BOARD_CELLS = 600

logger = logging.getLogger(__name__)


# -- log levels -------------------------------------------------------------


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"
    critical = "critical"


# -- helpers ------------------------------------------------------------------


def _load_board(
    tiles: Optional[List[int]],
    rows: Optional[int],
    cols: Optional[int],
    file: Optional[Path],
) -> Board:
    try:
        if file is not None:
            data = json.loads(file.read_text())
            board = Board.from_rows(data["tiles"])
            rows = rows or data.get("rows", board.rows)
            cols = cols or data.get("cols", board.cols)
            if (rows, cols) != (board.rows, board.cols):
                raise ValueError(
                    f"File holds a {board.rows}×{board.cols} board, "
                    f"not {rows}×{cols}."
                )
            return board
        if not tiles or rows is None or cols is None:
            raise ValueError("Give --rows, --cols and the tiles, or --file.")
        return Board.from_flat(rows, cols, tiles)
    except (ValueError, TypeError, KeyError, json.JSONDecodeError) as e:
        console.print(f"[red]Invalid board: {e}[/red]")
        raise typer.Exit(code=1) from e


def _report_solvable(board: Board) -> bool:
    solvable = Solver.is_solvable(board)
    if solvable:
        console.print(Align.center(Text("Solvable!", style="bold green")))
    else:
        console.print(Align.center(Text("Unsolvable!", style="bold red")))
    return solvable


# -- CLI entry points ---------------------------------------------------------

app = typer.Typer(add_completion=False)

_TILES = typer.Argument(None, help="Tiles row by row, 0 for the blank.")
_ROWS = typer.Option(None, "-m", "--rows", min=2, help="Number of rows (M).")
_COLS = typer.Option(None, "-n", "--cols", min=2, help="Number of columns (N).")
_FILE = typer.Option(
    None, "-f", "--file",
    exists=True, dir_okay=False,
    help='JSON board file: {"rows": M, "cols": N, "tiles": [[...], ...]}.',
)


@app.callback()
def main(
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        case_sensitive=False,
        help="Logging level.",
    ),
) -> None:
    """M×N Sliding Puzzle Solver."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


@app.command()
def solve(
    tiles: Optional[List[int]] = _TILES,
    rows: Optional[int] = _ROWS,
    cols: Optional[int] = _COLS,
    file: Optional[Path] = _FILE,
    repair: bool = typer.Option(
        False, "--repair",
        help="Swap two tiles to make an unsolvable board solvable.",
    ),
    quiet: bool = typer.Option(
        False, "-q", "--quiet",
        help="Only print the move count.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Print every phase even on very large boards.",
    ),
) -> None:
    """Solve a board automatically and print the solution phase by phase."""
    board = _load_board(tiles, rows, cols, file)
    console.print(Align.center(board_panel(board, "Puzzle")))

    if not _report_solvable(board):
        if not repair:
            raise typer.Exit(code=2)
        swaps = GameGenerator.make_solvable(board)
        console.print(Align.center(Text(f"Swapped {swaps} pair(s) of tiles.", style="yellow")))
        console.print(Align.center(board_panel(board, "Puzzle after changing")))

    large = board.rows * board.cols >= LARGE_BOARD_CELLS
    printing = not quiet and (verbose or not large)
    if not quiet and large and not verbose:
        console.print("[yellow]The solution is too long to print; counting moves only.[/yellow]")

    config = SolverConfig(verbose=printing, reporter=print_phase)
    game = GamePlay.from_board(board)
    moves = Solver.solve(board, config)

    if not game.replay(moves) or not game.is_won:
        logger.error("Replay of %d moves did not reach the goal", len(moves))
        console.print("[red]Solver produced an invalid solution.[/red]")
        raise typer.Exit(code=1)
    print_summary(game.state.moves, game.state.elapsed_time)


@app.command()
def check(
    tiles: Optional[List[int]] = _TILES,
    rows: Optional[int] = _ROWS,
    cols: Optional[int] = _COLS,
    file: Optional[Path] = _FILE,
) -> None:
    """Report whether a board can be solved."""
    board = _load_board(tiles, rows, cols, file)
    console.print(Align.center(board_panel(board, "Puzzle")))
    if not _report_solvable(board):
        raise typer.Exit(code=2)


@app.command()
def shortest(
    tiles: Optional[List[int]] = _TILES,
    rows: Optional[int] = _ROWS,
    cols: Optional[int] = _COLS,
    file: Optional[Path] = _FILE,
) -> None:
    """Print an optimal solution found by breadth-first search (≤ 9 cells)."""
    board = _load_board(tiles, rows, cols, file)
    if not _report_solvable(board):
        raise typer.Exit(code=2)
    try:
        moves = Solver.shortest(board)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1) from e
    console.print(format_moves(moves) or "(already solved)")
    console.print(f"[green]Optimal solution: {len(moves)} moves[/green]")


if __name__ == "__main__":
    app()
