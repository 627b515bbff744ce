"""
Layer 3 — DIGIT LETTERS: 1..5 ↔ fixed letters
==============================================
Each coordinate digit is written as a letter so the ciphertext stays
alphabetic. The table is constant for the system and independent of the
keyword.

Default table:  1→K  2→R  3→X  4→M  5→Q
"""

from typing import Dict, Optional

from ..errors import ConfigurationError
from .grid import ALPHABET, SIZE

DEFAULT_DIGIT_TABLE = {1: "K", 2: "R", 3: "X", 4: "M", 5: "Q"}


class DigitLetterCodec:
    """Bijection between the digits 1..5 and five distinct letters."""

    DIGITS = tuple(range(1, SIZE + 1))

    def __init__(self, table: Dict[int, str] = None):
        if table is None:
            table = DEFAULT_DIGIT_TABLE
        self._to_letter = self._validate(table)
        self._to_digit  = {v: k for k, v in self._to_letter.items()}

    @classmethod
    def _validate(cls, table: Dict[int, str]) -> Dict[int, str]:
        if set(table) != set(cls.DIGITS):
            raise ConfigurationError(f"Digit table must map exactly the digits {cls.DIGITS}.")
        clean = {}
        for digit, letter in table.items():
            if not isinstance(letter, str) or len(letter.upper()) != 1 or letter.upper() not in ALPHABET:
                raise ConfigurationError(f"Digit {digit} must map to one grid letter, got {letter!r}.")
            clean[digit] = letter.upper()
        if len(set(clean.values())) != len(clean):
            raise ConfigurationError("Digit table letters must be distinct.")
        return clean

    @property
    def letters(self) -> frozenset:
        return frozenset(self._to_digit)

    def digit_to_letter(self, digit: int) -> str:
        try:
            return self._to_letter[digit]
        except KeyError:
            raise ValueError(f"Digit must be in 1..{SIZE}, got {digit!r}.") from None

    def letter_to_digit(self, letter: str) -> Optional[int]:
        """Digit for `letter`, or None if it is not in the table."""
        return self._to_digit.get(letter)

    def encode_pair(self, row: int, col: int) -> str:
        return self.digit_to_letter(row) + self.digit_to_letter(col)

    def decode_pair(self, pair: str):
        """(row, col) for a 2-letter chunk, or None if either letter is unmapped."""
        if len(pair) != 2:
            return None
        row = self.letter_to_digit(pair[0])
        col = self.letter_to_digit(pair[1])
        if row is None or col is None:
            return None
        return row, col

    def __repr__(self):
        table = " ".join(f"{d}→{l}" for d, l in self._to_letter.items())
        return f"DigitLetterCodec({table})"
