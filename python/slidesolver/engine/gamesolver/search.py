"""Breadth-first search for optimal solutions on small boards."""

from __future__ import annotations

from collections import deque

from slidesolver.models.board import BLANK, Board, Direction

State = tuple[int, ...]

MAX_CELLS = 9


def shortest_path(board: Board, max_cells: int = MAX_CELLS) -> list[Direction] | None:
    """Return a shortest move list to the goal, or ``None`` if unreachable.

    Explores every reachable arrangement, so only boards of at most
    *max_cells* cells are accepted (3×3 has 181,440 of them).
    """
    rows, cols = board.rows, board.cols
    if rows * cols > max_cells:
        raise ValueError(
            f"Breadth-first search is limited to {max_cells} cells, "
            f"got a {rows}×{cols} board."
        )

    start: State = tuple(board.flat())
    goal: State = tuple(range(1, rows * cols)) + (BLANK,)
    if start == goal:
        return []

    parent: dict[State, tuple[State, Direction] | None] = {start: None}
    queue = deque([start])
    while queue:
        state = queue.popleft()
        z = state.index(BLANK)
        r, c = divmod(z, cols)
        for direction in Direction:
            dr, dc = direction.offset
            nr, nc = r + dr, c + dc
            if not (0 <= nr < rows and 0 <= nc < cols):
                continue
            j = nr * cols + nc
            cells = list(state)
            cells[z], cells[j] = cells[j], cells[z]
            nxt = tuple(cells)
            if nxt in parent:
                continue
            parent[nxt] = (state, direction)
            if nxt == goal:
                return _reconstruct(parent, nxt)
            queue.append(nxt)
    return None


def _reconstruct(
    parent: dict[State, tuple[State, Direction] | None], state: State
) -> list[Direction]:
    path: list[Direction] = []
    link = parent[state]
    while link is not None:
        state, direction = link
        path.append(direction)
        link = parent[state]
    path.reverse()
    return path
