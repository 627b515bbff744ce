"""
ShadowGrid Cipher Engine
========================
Keyword grid → coordinates → digit letters → noise.

Encrypt:
  1. CLEAN    uppercase, drop everything outside A–Z
  2. J→I      fold J into I
  3. COORDS   each letter → (row, col) in the keyword grid
  4. PAIRS    each digit → its table letter, one digraph per letter
  5. NOISE    one filler digraph after every 2 real ones
  6. OUTPUT   concatenate

Decrypt runs the other way (SPLIT, DE-NOISE, NUMBERS, DECODED) and is
lenient: unmapped chunks are dropped, unreadable cells become "?". It
never raises on malformed ciphertext.

Every call returns its result together with an ordered Trace of the
intermediate stages, for display only.

A puzzle cipher. It offers no security against anyone who has read this
docstring.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from .errors import ConfigurationError, EmptyKeywordError
from .layers.coords import letter_at, locate
from .layers.digits import DigitLetterCodec
from .layers.grid import Grid, build_grid, fold_j
from .layers.noise import (
    NOISE_POOL,
    Digraph,
    NoiseSequencer,
    interleave_noise,
    split_pairs,
    strip_noise,
    validate_noise_pool,
)

logger = logging.getLogger(__name__)

_NON_AZ = re.compile(r"[^A-Z]")


# ── trace ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class TraceStage:
    """One named intermediate value. `tokens` is set for noise-tagged stages."""

    name: str
    value: str
    tokens: Optional[Tuple[Digraph, ...]] = None


@dataclass(frozen=True)
class Trace:
    stages: Tuple[TraceStage, ...] = ()

    def __iter__(self):
        return iter(self.stages)

    def __len__(self):
        return len(self.stages)

    def __getitem__(self, index):
        return self.stages[index]

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(s.name for s in self.stages)

    def get(self, name: str) -> Optional[TraceStage]:
        for stage in self.stages:
            if stage.name == name:
                return stage
        return None

    def render(self) -> str:
        """STEP n — NAME  value, one stage per line. Noise shows as [XX]."""
        width = max((len(s.name) for s in self.stages), default=0)
        return "\n".join(
            f"STEP {i} — {s.name:<{width}}  {s.value}"
            for i, s in enumerate(self.stages, start=1)
        )


def _tagged(tokens: Sequence[Digraph]) -> str:
    return " ".join(str(t) for t in tokens)


# ── results ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class EncryptResult:
    ciphertext: str
    trace: Trace = field(default_factory=Trace)
    grid: Optional[Grid] = None
    used_letters: str = ""

    @property
    def is_noop(self) -> bool:
        """True when the message was blank and nothing ran."""
        return self.grid is None


@dataclass(frozen=True)
class DecryptResult:
    plaintext: str
    trace: Trace = field(default_factory=Trace)
    grid: Optional[Grid] = None

    @property
    def is_noop(self) -> bool:
        return self.grid is None


# ── engine ───────────────────────────────────────────────────────────────────

class CipherEngine:
    """
    Keyword-seeded digraph substitution with periodic noise.

    The engine itself holds only configuration; the noise cursor is
    created fresh inside every encrypt() call, so one engine can be
    shared between threads.
    """

    GROUP_SIZE  = 2     # real digraphs per noise digraph
    PLACEHOLDER = "?"   # emitted for cells that cannot be read

    def __init__(self, digit_codec: DigitLetterCodec = None,
                 noise_pool: Sequence[str] = None, group_size: int = None):
        if digit_codec is None:
            digit_codec = DigitLetterCodec()
        if noise_pool is None:
            noise_pool = NOISE_POOL
        if group_size is None:
            group_size = self.GROUP_SIZE
        if isinstance(group_size, bool) or not isinstance(group_size, int) or group_size < 1:
            raise ConfigurationError(f"group_size must be a positive integer, got {group_size!r}.")
        self._digits     = digit_codec
        self._noise_pool = validate_noise_pool(noise_pool, digit_codec.letters)
        self._group_size = group_size
        logger.info(f"CipherEngine ready | noise pool={len(self._noise_pool)} group={group_size}")

    @property
    def digit_codec(self) -> DigitLetterCodec:
        return self._digits

    @property
    def noise_pool(self) -> Tuple[str, ...]:
        return self._noise_pool

    @property
    def group_size(self) -> int:
        return self._group_size

    @staticmethod
    def _require_keyword(keyword: str):
        if not keyword or not keyword.strip():
            raise EmptyKeywordError()

    @staticmethod
    def clean(text: str) -> str:
        """Uppercase and keep A–Z only."""
        return _NON_AZ.sub("", text.upper())

    def encrypt(self, keyword: str, plaintext: str) -> EncryptResult:
        """
        Encrypt `plaintext` under `keyword`.

        Raises EmptyKeywordError for a blank keyword. A blank message gives a
        no-op result (empty ciphertext, empty trace, grid None).
        """
        self._require_keyword(keyword)
        if not plaintext or not plaintext.strip():
            logger.debug("Encrypt: blank message, nothing to do")
            return EncryptResult(ciphertext="")

        grid    = build_grid(keyword)
        cleaned = self.clean(plaintext)
        folded  = fold_j(cleaned)

        coords = []
        used   = []
        for ch in folded:
            co = locate(ch, grid)
            if co is None:
                logger.debug(f"Encrypt: skipped unmapped symbol {ch!r}")
                continue
            coords.append(co)
            used.append(ch)

        real_pairs = [self._digits.encode_pair(co.row, co.col) for co in coords]
        stream     = interleave_noise(real_pairs, NoiseSequencer(self._noise_pool),
                                      self._group_size)
        ciphertext = "".join(d.pair for d in stream)

        trace = Trace((
            TraceStage("CLEAN",  cleaned),
            TraceStage("J→I",    folded),
            TraceStage("COORDS", " ".join(str(co) for co in coords)),
            TraceStage("PAIRS",  " ".join(real_pairs)),
            TraceStage("NOISE",  _tagged(stream), tuple(stream)),
            TraceStage("OUTPUT", ciphertext),
        ))
        logger.debug(f"Encrypt: letters={len(coords)} digraphs={len(stream)} "
                     f"noise={len(stream) - len(real_pairs)}")
        return EncryptResult(
            ciphertext=ciphertext,
            trace=trace,
            grid=grid,
            used_letters="".join(dict.fromkeys(used)),
        )

    def decrypt(self, keyword: str, ciphertext: str) -> DecryptResult:
        """
        Decrypt `ciphertext` under `keyword`, best effort.

        Raises EmptyKeywordError for a blank keyword. Nothing else raises:
        chunks with letters outside the digit table are dropped and cells
        that cannot be read come out as PLACEHOLDER.
        """
        self._require_keyword(keyword)
        cleaned = self.clean(ciphertext or "")
        if not cleaned:
            logger.debug("Decrypt: blank message, nothing to do")
            return DecryptResult(plaintext="")

        grid      = build_grid(keyword)
        chunks    = split_pairs(cleaned)
        annotated = strip_noise(chunks, self._group_size)

        numbers = []
        for d in annotated:
            if d.noise:
                continue
            rc = self._digits.decode_pair(d.pair)
            if rc is None:
                logger.debug(f"Decrypt: dropped unmapped chunk {d.pair!r}")
                continue
            numbers.append(rc)

        decoded = []
        for row, col in numbers:
            ch = letter_at(row, col, grid)
            decoded.append(ch if ch is not None else self.PLACEHOLDER)
        plaintext = "".join(decoded)

        trace = Trace((
            TraceStage("SPLIT",    " ".join(chunks)),
            TraceStage("DE-NOISE", _tagged(annotated), tuple(annotated)),
            TraceStage("NUMBERS",  " ".join(f"{r}{c}" for r, c in numbers)),
            TraceStage("DECODED",  plaintext),
        ))
        logger.debug(f"Decrypt: chunks={len(chunks)} real={len(numbers)} "
                     f"letters={len(plaintext)}")
        return DecryptResult(plaintext=plaintext, trace=trace, grid=grid)

    def __repr__(self):
        return f"CipherEngine(group={self._group_size}, noise={len(self._noise_pool)}, {self._digits!r})"


_default_engine = CipherEngine()


def encrypt(keyword: str, plaintext: str) -> EncryptResult:
    """Encrypt with the default table and noise pool."""
    return _default_engine.encrypt(keyword, plaintext)


def decrypt(keyword: str, ciphertext: str) -> DecryptResult:
    """Decrypt with the default table and noise pool."""
    return _default_engine.decrypt(keyword, ciphertext)
