"""
Layer 2 — COORDINATES: letter ↔ (row, col)
===========================================
Rows and columns are 1-indexed, 1..5. Grid index = (row-1)*5 + (col-1).
Lookups that cannot be answered return None instead of raising.
"""

from typing import NamedTuple, Optional

from .grid import ALPHABET, SIZE, Grid, fold_j


class Coordinate(NamedTuple):
    row: int
    col: int

    def __str__(self) -> str:
        return f"{self.row}{self.col}"


def _in_range(n) -> bool:
    return isinstance(n, int) and not isinstance(n, bool) and 1 <= n <= SIZE


def locate(letter: str, grid: Grid) -> Optional[Coordinate]:
    """Coordinate of `letter` in `grid`, or None for anything not in the alphabet."""
    ch = fold_j(letter.upper())
    if len(ch) != 1 or ch not in ALPHABET:
        return None
    idx = grid.letters.index(ch)
    return Coordinate(idx // SIZE + 1, idx % SIZE + 1)


def letter_at(row: int, col: int, grid: Grid) -> Optional[str]:
    """Letter at (row, col), or None when either index is outside 1..5."""
    if not (_in_range(row) and _in_range(col)):
        return None
    return grid.letters[(row - 1) * SIZE + (col - 1)]
