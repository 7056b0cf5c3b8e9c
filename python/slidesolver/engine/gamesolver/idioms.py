"""Fixed move sequences the constructive solver is built from.

Every idiom is spelled with the blank's WASD keys (W = blank up,
S = down, A = left, D = right) and stored as a tuple of ``Direction``.
Comments give the blank's start cell relative to the tile being worked on.
"""

from __future__ import annotations

from slidesolver.models.board import Direction

Idiom = tuple[Direction, ...]


def spell(keys: str) -> Idiom:
    """Turn a WASD string such as ``"SDDWA"`` into an idiom."""
    return tuple(Direction.from_key(k) for k in keys)


def keys(moves: tuple[Direction, ...] | list[Direction]) -> str:
    return "".join(d.key for d in moves)


# -- single-tile pushes -------------------------------------------------------

# Blank behind a tile that is moving right/left; loop through the row below
# (or above, on the last row) and push the tile one more cell.
LOOP_RIGHT_BELOW = spell("SDDWA")
LOOP_RIGHT_ABOVE = spell("WDDSA")
LOOP_LEFT_BELOW = spell("SAAWD")
LOOP_LEFT_ABOVE = spell("WAASD")

# Blank under a tile that is moving up; loop through the column on its right.
CLIMB = spell("DWWAS")


def horizontal_loop(step: int, below: bool) -> Idiom:
    """Loop idiom that pushes a tile one column in *step* (+1 right, -1 left)."""
    if step > 0:
        return LOOP_RIGHT_BELOW if below else LOOP_RIGHT_ABOVE
    return LOOP_LEFT_BELOW if below else LOOP_LEFT_ABOVE


# -- last two cells of a row --------------------------------------------------

# Blank under the corner, row's last tile parked one cell left of the corner
# with the second-to-last tile under it: both slide home.
ROW_TAIL_FINISH = spell("WAS")

# Blank under the corner, last tile left of the corner and the
# second-to-last tile stuck in the corner: a 3x2 rotation that leaves
# both in place.
ROW_TAIL_SWAP = spell("WASSDWAWDSSAWWDSAWDS")

# -- last two cells of a column in the bottom strip ---------------------------

# Transposes of the row-tail idioms (W<->A, S<->D).  Blank starts at the
# bottom of the column for the finish, one cell right of it for the swap.
COLUMN_TAIL_FINISH = spell("WD")
COLUMN_TAIL_SWAP = spell("AWDDSAWASDDWAASDWASD")

# -- final 2x2 ----------------------------------------------------------------

# Blank in the bottom-right corner: cycles the three other tiles.
CORNER_CYCLE = spell("AWDS")
