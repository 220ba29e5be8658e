"""Fast random letter strings from a cached 63-bit random source.

A single 63-bit draw holds ten 6-bit groups.  Each group indexes the 52-letter
alphabet directly; groups that land on ``52..63`` are rejected and skipped
rather than folded back with a modulo, which keeps every letter equally likely.
On average one draw yields about 8.6 letters.

The random source is an explicit handle.  A process-wide default, seeded from
a nanosecond clock reading on first use, backs :func:`rand_string`; callers
that need reproducible output (tests) or run from several threads pass their
own source.  No locking is done here.

This is not a cryptographically secure generator.
"""

from __future__ import annotations

import random
import time
from typing import Protocol

from .utils.logging import TRACE, get_logger

__all__ = [
    "LETTERS",
    "LETTER_IDX_BITS",
    "LETTER_IDX_MASK",
    "LETTER_IDX_MAX",
    "RandomBitSource",
    "ClockSeededSource",
    "RandomStringGenerator",
    "default_source",
    "rand_string",
]

LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

LETTER_IDX_BITS = 6
LETTER_IDX_MASK = (1 << LETTER_IDX_BITS) - 1
LETTER_IDX_MAX = 63 // LETTER_IDX_BITS

_log = get_logger("trace")


class RandomBitSource(Protocol):
    """Anything that produces non-negative 63-bit integers on demand."""

    def int63(self) -> int: ...


class ClockSeededSource:
    """Pseudo-random 63-bit source backed by :class:`random.Random`.

    Parameters
    ----------
    seed:
        Explicit seed.  When omitted the source is seeded once from
        :func:`time.time_ns`.
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = time.time_ns()
        self.seed = seed
        self._rng = random.Random(seed)

    def int63(self) -> int:
        return self._rng.getrandbits(63)


class RandomStringGenerator:
    """Generate strings of uniformly drawn letters from ``LETTERS``."""

    def __init__(self, source: RandomBitSource | None = None) -> None:
        self.source: RandomBitSource = source if source is not None else default_source()

    def generate(self, n: int) -> str:
        """Return a string of ``n`` letters.

        Buffer positions are filled from the last one backwards.  ``n <= 0``
        yields an empty string.
        """

        if n <= 0:
            return ""
        out = [""] * n
        i = n - 1
        cache, remain = self.source.int63(), LETTER_IDX_MAX
        draws = 1
        while i >= 0:
            if remain == 0:
                cache, remain = self.source.int63(), LETTER_IDX_MAX
                draws += 1
            idx = cache & LETTER_IDX_MASK
            if idx < len(LETTERS):
                out[i] = LETTERS[idx]
                i -= 1
            cache >>= LETTER_IDX_BITS
            remain -= 1
        _log.log(TRACE, "generated %d letters from %d draws", n, draws)
        return "".join(out)


_default: ClockSeededSource | None = None


def default_source() -> ClockSeededSource:
    """Return the process-wide source, creating it on first use."""

    global _default
    if _default is None:
        _default = ClockSeededSource()
    return _default


def rand_string(n: int, *, source: RandomBitSource | None = None) -> str:
    """Return ``n`` random letters drawn from ``source`` or the default source."""

    return RandomStringGenerator(source).generate(n)
