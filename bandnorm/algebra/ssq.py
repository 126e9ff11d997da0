"""Scaled sum-of-squares accumulation.

A sum of squares is carried as a pair ``(scale, sumsq)`` whose value is
``scale**2 * sumsq``. Entries are divided by the running maximum magnitude
before squaring, so neither overflow nor underflow occurs for entries whose
norm is representable.
"""

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike

from bandnorm.core.errors import NegativeDimension, StorageTooShort


@dataclass(frozen=True)
class SumSquares:
    """Scaled sum of squares: value is scale² · sumsq."""

    scale: float = 0.0
    sumsq: float = 1.0

    @property
    def norm(self) -> float:
        """Euclidean norm scale · √sumsq."""
        return self.scale * math.sqrt(self.sumsq)

    @property
    def total(self) -> float:
        """Unscaled sum of squares (may overflow to inf)."""
        return self.scale * self.scale * self.sumsq

    def combine(self, other: "SumSquares") -> "SumSquares":
        return combssq(self, other)


def _ratio_sq(small: float, large: float) -> float:
    # (small/large)² for small <= large; equal infinite scales give 1.
    if math.isnan(small) or math.isnan(large):
        return math.nan
    if small == large:
        return 1.0
    ratio = small / large
    return ratio * ratio


def lassq(
    x: ArrayLike,
    scale: float = 0.0,
    sumsq: float = 1.0,
    *,
    offset: int = 0,
    stride: int = 1,
    count: Optional[int] = None,
) -> SumSquares:
    """
    Extend a scaled sum of squares with entries of a strided sequence.

    Args:
        x: Flat storage holding the entries
        scale: Initial scale (0 for an empty sum)
        sumsq: Initial scaled sum (1 for an empty sum)
        offset: Index of the first entry in x
        stride: Distance between consecutive entries
        count: Number of entries (defaults to every strided entry from offset)

    Returns:
        SumSquares covering the initial pair and the new entries
    """
    if stride < 1:
        raise ValueError(f"stride must be positive, got {stride}")
    values = np.ravel(np.asarray(x, dtype=np.float64))
    if count is None:
        count = len(range(offset, values.size, stride))
    if count < 0:
        raise NegativeDimension(f"count={count}")
    if count == 0:
        return SumSquares(scale, sumsq)

    last = offset + (count - 1) * stride
    if offset < 0 or last >= values.size:
        raise StorageTooShort(f"need index {last}, have {values.size} entries")

    for xi in values[offset:last + 1:stride].tolist():
        absxi = abs(xi)
        if absxi > 0 or math.isnan(absxi):
            if scale < absxi:
                sumsq = 1.0 + sumsq * _ratio_sq(scale, absxi)
                scale = absxi
            else:
                sumsq += _ratio_sq(absxi, scale)

    return SumSquares(scale, sumsq)


def combssq(first: SumSquares, second: SumSquares) -> SumSquares:
    """Combine two independent scaled sums of squares."""
    if first.scale >= second.scale:
        if first.scale == 0.0:
            return SumSquares(first.scale, first.sumsq + second.sumsq)
        return SumSquares(
            first.scale,
            first.sumsq + _ratio_sq(second.scale, first.scale) * second.sumsq,
        )
    # NaN scales fall through here and poison the sum
    return SumSquares(
        second.scale,
        second.sumsq + _ratio_sq(first.scale, second.scale) * first.sumsq,
    )
