"""
Layer 1 — GRID: keyword-seeded 5×5 square
==========================================
The classic Polybius square, seeded by a keyword the way Playfair
squares are: keyword letters first, the rest of the alphabet after.

Normalization of the keyword:
  1. uppercase
  2. J → I
  3. drop everything outside A–Z
  4. drop repeated letters, first occurrence wins

The 25-letter alphabet has no J. Any input, including the empty string,
yields a complete grid; an empty keyword gives the plain alphabet.
"""

import re
from dataclasses import dataclass
from typing import Tuple

from ..errors import ConfigurationError

ALPHABET = "ABCDEFGHIKLMNOPQRSTUVWXYZ"   # 25 letters, J folded into I
SIZE     = 5

_NON_AZ = re.compile(r"[^A-Z]")


def fold_j(text: str) -> str:
    """Replace every J with I."""
    return text.replace("J", "I")


def normalize_keyword(keyword: str) -> str:
    """Canonical keyword: unique grid letters in order of first appearance."""
    letters = _NON_AZ.sub("", fold_j(keyword.upper()))
    return "".join(dict.fromkeys(letters))


@dataclass(frozen=True)
class Grid:
    """Immutable 25-letter grid plus the normalized keyword that seeded it."""

    keyword: str
    letters: str

    def __post_init__(self):
        if len(self.letters) != SIZE * SIZE or set(self.letters) != set(ALPHABET):
            raise ConfigurationError("Grid must be a permutation of the 25-letter alphabet.")

    def rows(self) -> Tuple[str, ...]:
        return tuple(self.letters[i:i + SIZE] for i in range(0, SIZE * SIZE, SIZE))

    def is_keyword_letter(self, letter: str) -> bool:
        ch = fold_j(letter.upper())
        return len(ch) == 1 and ch in self.keyword

    @staticmethod
    def cell_label(letter: str) -> str:
        """I shares its cell with J."""
        return "I/J" if letter == "I" else letter

    def render(self) -> str:
        """
        Plain-text table with 1–5 headers. Keyword cells are starred.

            1    2    3    4    5
        1   S*   H*   A*   D*   O*
        2   W*   B    C    E    F
        ...
        """
        lines = ["    " + "".join(f"{c:<5}" for c in range(1, SIZE + 1)).rstrip()]
        for r, row in enumerate(self.rows(), start=1):
            cells = []
            for ch in row:
                label = self.cell_label(ch) + ("*" if ch in self.keyword else "")
                cells.append(f"{label:<5}")
            lines.append(f"{r:<4}" + "".join(cells).rstrip())
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.letters


def build_grid(keyword: str) -> Grid:
    """Build the grid for `keyword`. Total: never raises on str input."""
    kw = normalize_keyword(keyword)
    fill = "".join(ch for ch in ALPHABET if ch not in kw)
    return Grid(keyword=kw, letters=(kw + fill)[:SIZE * SIZE])
