"""Rich rendering for boards and solution traces.

Output only: no input handling, no screen clearing, no pacing.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from slidesolver.engine.gamesolver import PhaseReport, idioms
from slidesolver.models.board import BLANK, Board, Direction

console = Console()


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.rows * board.cols - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.cols):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == BLANK:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def board_panel(board: Board, title: str, style: str = "bright_blue") -> Panel:
    return Panel(
        Align.center(render_board(board)),
        title=f"[bold]{title}  {board.rows}×{board.cols}[/bold]",
        border_style=style,
        padding=(1, 2),
    )


# -- traces -------------------------------------------------------------------


def format_moves(moves: tuple[Direction, ...] | list[Direction]) -> str:
    """WASD letters separated by spaces, e.g. ``"S D D W A"``."""
    return " ".join(idioms.keys(moves))


def print_phase(report: PhaseReport) -> None:
    """Print one solver phase: the board after it and its moves."""
    header = Text()
    header.append(f"  {report.name}", style="bold cyan")
    header.append(f"  ({len(report.moves)} moves)", style="dim")

    body = Group(
        Align.center(render_board(report.board)),
        Text(""),
        Text(format_moves(report.moves) or "(no moves)", style="yellow"),
    )
    console.print(header)
    console.print(Panel(body, border_style="cyan", padding=(0, 1)))


def print_summary(moves: int, seconds: float) -> None:
    summary = Text()
    summary.append("  Solved in ", style="green")
    summary.append(str(moves), style="bold yellow")
    summary.append(" moves", style="green")
    summary.append(f"   Time used: {seconds * 1000:.1f} ms", style="dim")
    console.print(summary)
