"""
shadowgrid — ShadowGrid Cipher
==============================
Keyword-seeded 5×5 digraph substitution with periodic noise.

Layers:
    1  GRID         — keyword → 25-letter square (J folded into I)
    2  COORDINATES  — letter ↔ (row, col), 1-indexed
    3  DIGIT LETTERS — 1..5 ↔ K R X M Q
    4  NOISE        — one filler digraph after every two real ones
    ENGINE          — encrypt / decrypt with a step-by-step trace

A reversible puzzle cipher. Not encryption in any modern sense.

License: Apache 2.0
"""

__version__  = "1.0.0"

from .errors        import ShadowGridError, EmptyKeywordError, ConfigurationError
from .layers.grid   import Grid, build_grid, normalize_keyword
from .layers.coords import Coordinate, locate, letter_at
from .layers.digits import DigitLetterCodec
from .layers.noise  import NoiseSequencer, Digraph, NOISE_POOL
from .engine        import (
    CipherEngine,
    EncryptResult,
    DecryptResult,
    Trace,
    TraceStage,
    encrypt,
    decrypt,
)

__all__ = [
    "ShadowGridError",
    "EmptyKeywordError",
    "ConfigurationError",
    "Grid",
    "build_grid",
    "normalize_keyword",
    "Coordinate",
    "locate",
    "letter_at",
    "DigitLetterCodec",
    "NoiseSequencer",
    "Digraph",
    "NOISE_POOL",
    "CipherEngine",
    "EncryptResult",
    "DecryptResult",
    "Trace",
    "TraceStage",
    "encrypt",
    "decrypt",
]
