"""Building blocks of the ShadowGrid pipeline, leaves first."""

from .grid   import ALPHABET, Grid, build_grid, normalize_keyword, fold_j
from .coords import Coordinate, locate, letter_at
from .digits import DigitLetterCodec, DEFAULT_DIGIT_TABLE
from .noise  import (
    NOISE_POOL,
    NoiseSequencer,
    Digraph,
    interleave_noise,
    split_pairs,
    strip_noise,
    validate_noise_pool,
)

__all__ = [
    "ALPHABET",
    "Grid",
    "build_grid",
    "normalize_keyword",
    "fold_j",
    "Coordinate",
    "locate",
    "letter_at",
    "DigitLetterCodec",
    "DEFAULT_DIGIT_TABLE",
    "NOISE_POOL",
    "NoiseSequencer",
    "Digraph",
    "interleave_noise",
    "split_pairs",
    "strip_noise",
    "validate_noise_pool",
]
