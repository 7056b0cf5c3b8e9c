"""Board model for the M×N sliding puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

BLANK = 0


class Direction(StrEnum):
    """Which way the *blank* slides.

    The tile next to the blank in that direction slides the opposite way
    into the hole.  Keys follow the WASD spelling used in move idioms.
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]

    @property
    def key(self) -> str:
        return _KEYS[self]

    @classmethod
    def from_key(cls, key: str) -> Direction:
        try:
            return _BY_KEY[key.upper()]
        except KeyError:
            raise ValueError(f"Unknown move key {key!r}; expected one of WASD.") from None


_OFFSETS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_KEYS = {
    Direction.UP: "W",
    Direction.DOWN: "S",
    Direction.LEFT: "A",
    Direction.RIGHT: "D",
}

_BY_KEY = {k: d for d, k in _KEYS.items()}


@dataclass
class Board:
    """Represents an M-row by N-column sliding puzzle board.

    Tiles are stored as a 2D list of ints. ``BLANK`` (0) marks the hole.
    """

    rows: int
    cols: int
    tiles: list[list[int]]
    blank_pos: tuple[int, int]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, rows: int, cols: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, 3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if rows < 2 or cols < 2:
            raise ValueError(f"Board must be at least 2×2, got {rows}×{cols}.")
        if len(flat) != rows * cols:
            raise ValueError(
                f"Expected {rows * cols} tiles for a {rows}×{cols} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(rows * cols)):
            raise ValueError(
                f"Tiles must be 1..{rows * cols - 1} plus one blank ({BLANK}) "
                f"with no repeats."
            )
        tiles: list[list[int]] = []
        blank_pos: tuple[int, int] = (0, 0)
        for r in range(rows):
            row = list(flat[r * cols : (r + 1) * cols])
            for c, v in enumerate(row):
                if v == BLANK:
                    blank_pos = (r, c)
            tiles.append(row)
        return cls(rows=rows, cols=cols, tiles=tiles, blank_pos=blank_pos)

    @classmethod
    def from_rows(cls, tiles: list[list[int]]) -> Board:
        """Create a board from a list of rows, e.g. loaded from JSON."""
        if not tiles or not all(isinstance(row, list) for row in tiles):
            raise ValueError("Board tiles must be a non-empty list of rows.")
        if any(len(row) != len(tiles[0]) for row in tiles):
            raise ValueError("Board rows must be of equal length.")
        return cls.from_flat(len(tiles), len(tiles[0]), [v for row in tiles for v in row])

    # -- queries --------------------------------------------------------------

    def flat(self) -> list[int]:
        return [v for row in self.tiles for v in row]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        expected = 1
        for r in range(self.rows):
            for c in range(self.cols):
                if r == self.rows - 1 and c == self.cols - 1:
                    return self.tiles[r][c] == BLANK
                if self.tiles[r][c] != expected:
                    return False
                expected += 1
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == BLANK:
            return row == self.rows - 1 and col == self.cols - 1
        return divmod(val - 1, self.cols) == (row, col)

    def copy(self) -> Board:
        return Board(
            rows=self.rows,
            cols=self.cols,
            tiles=[row[:] for row in self.tiles],
            blank_pos=self.blank_pos,
        )
