"""Descriptive statistics over sequences of floats.

Results follow IEEE float arithmetic and never raise: empty input (and a
single value for the standard deviation) divides by zero and yields ``nan``,
overflowing sums yield ``inf`` and mixed infinities yield ``nan``.
"""

from __future__ import annotations

import math
import struct
from collections.abc import Sequence

__all__ = ["average", "standard_deviation", "standard_deviation32"]


def _total(values: Sequence[float]) -> float:
    # Plain float addition overflows to inf instead of raising like math.fsum.
    total = 0.0
    for v in values:
        total += v
    return total


def average(values: Sequence[float]) -> float:
    """Arithmetic mean of ``values``; ``nan`` when empty."""

    if not values:
        return math.nan
    return _total(values) / len(values)


def standard_deviation(values: Sequence[float]) -> float:
    """Sample standard deviation (``n - 1`` denominator) of ``values``."""

    n = len(values)
    if n < 2:
        return math.nan
    mean = average(values)
    squares = 0.0
    for v in values:
        d = v - mean
        squares += d * d
    return math.sqrt(squares / (n - 1))


def standard_deviation32(values: Sequence[float]) -> float:
    """:func:`standard_deviation` rounded to single precision.

    Deviations beyond the single precision range round to ``inf``.
    """

    sd = standard_deviation(values)
    try:
        return struct.unpack("f", struct.pack("f", sd))[0]
    except OverflowError:
        return math.copysign(math.inf, sd)
