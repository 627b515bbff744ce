"""
Layer 4 — NOISE: synthetic filler digraphs
===========================================
After every `group_size` real digraphs (default 2) the encoder emits one
filler digraph drawn from a fixed pool. A trailing short group gets no
filler. The decoder does not look at content at all: it splits the
stream into 2-letter chunks and drops every chunk whose 1-indexed
position is a multiple of group_size + 1.

    real real NOISE real real NOISE real

No pool entry may consist only of digit-table letters, otherwise a
filler could be read back as a coordinate.

The cursor is per-encryption state. Build a fresh NoiseSequencer (or call
reset()) for every message so identical input gives identical output.
"""

import re
from typing import Iterable, List, NamedTuple, Sequence, Tuple

from ..errors import ConfigurationError

_PAIR = re.compile(r"[A-Z]{2}")

NOISE_POOL = (
    "ZZ", "AA", "BB", "CC", "DD", "EE", "FF", "GG",
    "HH", "II", "NN", "PP", "SS", "TT", "UU", "WW", "YY",
)


class Digraph(NamedTuple):
    pair: str
    noise: bool

    def __str__(self) -> str:
        return f"[{self.pair}]" if self.noise else self.pair


def validate_noise_pool(pool: Sequence[str], digit_letters: Iterable[str]) -> Tuple[str, ...]:
    """Return `pool` as a tuple, or raise ConfigurationError."""
    pool = tuple(pool)
    digit_letters = frozenset(digit_letters)
    if not pool:
        raise ConfigurationError("Noise pool must not be empty.")
    if len(set(pool)) != len(pool):
        raise ConfigurationError("Noise pool entries must be distinct.")
    for pair in pool:
        if not isinstance(pair, str) or not _PAIR.fullmatch(pair):
            raise ConfigurationError(f"Noise entry must be two uppercase letters, got {pair!r}.")
        if pair[0] in digit_letters and pair[1] in digit_letters:
            raise ConfigurationError(f"Noise entry {pair!r} would decode as a coordinate.")
    return pool


class NoiseSequencer:
    """Cyclic cursor over a noise pool."""

    def __init__(self, pool: Sequence[str] = NOISE_POOL):
        if not pool:
            raise ConfigurationError("Noise pool must not be empty.")
        self._pool   = tuple(pool)
        self._cursor = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    def reset(self):
        self._cursor = 0

    def next(self) -> str:
        pair = self._pool[self._cursor % len(self._pool)]
        self._cursor += 1
        return pair

    def __iter__(self):
        return self

    def __next__(self) -> str:
        return self.next()


def interleave_noise(real_pairs: Iterable[str], sequencer: NoiseSequencer,
                     group_size: int = 2) -> List[Digraph]:
    """Tag real pairs and insert one filler after every full group."""
    sequencer.reset()
    out = []
    in_group = 0
    for pair in real_pairs:
        out.append(Digraph(pair, False))
        in_group += 1
        if in_group == group_size:
            out.append(Digraph(sequencer.next(), True))
            in_group = 0
    return out


def split_pairs(text: str) -> List[str]:
    """Consecutive 2-letter chunks; an odd trailing letter stays as a short chunk."""
    return [text[i:i + 2] for i in range(0, len(text), 2)]


def strip_noise(chunks: Iterable[str], group_size: int = 2) -> List[Digraph]:
    """Tag chunks by position: every (group_size+1)-th one is noise."""
    period = group_size + 1
    return [Digraph(chunk, pos % period == 0) for pos, chunk in enumerate(chunks, start=1)]
