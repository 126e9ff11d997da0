"""Norms of triangular band matrices held in row-major band storage."""

import logging
import math
from typing import Any, MutableSequence, Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

from bandnorm.algebra.ssq import SumSquares, combssq, lassq
from bandnorm.core.errors import ScratchTooShort, StorageTooShort
from bandnorm.core.types import Diag, MatrixNorm, NormRequest, Uplo
from bandnorm.utils.banded import (
    band_storage_length,
    check_layout,
    first_column,
    row_offsets,
)

logger = logging.getLogger(__name__)


def banded_triangular_norm(
    norm: Any,
    uplo: Any,
    diag: Any,
    n: int,
    k: int,
    band: ArrayLike,
    pitch: int,
    scratch: Optional[MutableSequence[float]] = None,
) -> float:
    """
    Compute a norm of an n×n triangular band matrix with k off-diagonals.

    Row i of the matrix occupies band[i*pitch : i*pitch + k + 1]. Upper rows
    hold the diagonal followed by superdiagonals, lower rows hold
    subdiagonals followed by the diagonal at offset k.

    Args:
        norm: MatrixNorm (or its code) selecting the reduction
        uplo: Stored triangle
        diag: Diag.UNIT for implicit ones on the diagonal
        n: Matrix order
        k: Number of off-diagonals
        band: Flat band storage, never written
        pitch: Row pitch, at least k+1
        scratch: Buffer of length >= n, required for MAX_COLUMN_SUM and
            overwritten with the column sums

    Returns:
        The norm; NaN entries in the band propagate to the result
    """
    norm = MatrixNorm.from_code(norm)
    uplo = Uplo.from_code(uplo)
    diag = Diag.from_code(diag)
    check_layout(n, k, pitch)

    logger.debug(
        "band norm %s uplo=%s diag=%s n=%d k=%d pitch=%d",
        norm.name, uplo.name, diag.name, n, k, pitch,
    )

    # Quick return if possible.
    if n == 0:
        logger.debug("empty matrix, norm is 0")
        return 0.0

    a = np.ravel(np.asarray(band, dtype=np.float64))
    need = band_storage_length(n, k, pitch)
    if a.size < need:
        raise StorageTooShort(f"have {a.size}, need {need}")
    if norm is MatrixNorm.MAX_COLUMN_SUM and (scratch is None or len(scratch) < n):
        have = None if scratch is None else len(scratch)
        raise ScratchTooShort(f"have {have}, need {n}")

    upper = uplo is Uplo.UPPER
    unit = diag is Diag.UNIT

    if norm is MatrixNorm.MAX_ABS:
        return _max_abs(a, n, k, pitch, upper, unit)
    if norm is MatrixNorm.MAX_ROW_SUM:
        return _max_row_sum(a, n, k, pitch, upper, unit)
    if norm is MatrixNorm.MAX_COLUMN_SUM:
        return _max_column_sum(a, n, k, pitch, upper, unit, scratch)
    return _frobenius(a, n, k, pitch, upper, unit)


def evaluate(
    request: NormRequest,
    n: int,
    k: int,
    band: ArrayLike,
    pitch: int,
    scratch: Optional[MutableSequence[float]] = None,
) -> float:
    """Compute the norm described by a NormRequest."""
    return banded_triangular_norm(
        request.norm, request.uplo, request.diag, n, k, band, pitch, scratch
    )


def _nan_max(current: float, candidate: float) -> float:
    """Running maximum in which NaN beats every number."""
    if candidate > current or math.isnan(candidate):
        return candidate
    return current


def _row(a: NDArray, i: int, pitch: int, lo: int, hi: int) -> NDArray:
    return np.abs(a[i * pitch + lo:i * pitch + hi])


def _max_abs(a, n, k, pitch, upper, unit) -> float:
    value = 1.0 if unit else 0.0
    for i in range(n):
        lo, hi = row_offsets(i, n, k, upper, unit)
        if lo < hi:
            # np.max propagates NaN within a row
            value = _nan_max(value, float(_row(a, i, pitch, lo, hi).max()))
    return value


def _max_row_sum(a, n, k, pitch, upper, unit) -> float:
    value = 0.0
    for i in range(n):
        lo, hi = row_offsets(i, n, k, upper, unit)
        total = 1.0 if unit else 0.0
        if lo < hi:
            total += float(_row(a, i, pitch, lo, hi).sum())
        value = _nan_max(value, total)
    return value


def _max_column_sum(a, n, k, pitch, upper, unit, scratch) -> float:
    # Columns are strided in row-major storage; accumulate per column.
    in_place = isinstance(scratch, np.ndarray) and scratch.dtype == np.float64
    work = scratch[:n] if in_place else np.empty(n)
    work.fill(1.0 if unit else 0.0)

    for i in range(n):
        lo, hi = row_offsets(i, n, k, upper, unit)
        if lo < hi:
            col = first_column(i, k, upper)
            work[col + lo:col + hi] += _row(a, i, pitch, lo, hi)

    if not in_place:
        for j, wj in enumerate(work.tolist()):
            scratch[j] = wj

    value = 0.0
    for wj in work.tolist():
        value = _nan_max(value, wj)
    return value


def _frobenius(a, n, k, pitch, upper, unit) -> float:
    ssq = SumSquares()
    if k > 0:
        # Sum off-diagonals.
        for i in range(n):
            if upper:
                count = min(n - i - 1, k)
                start = i * pitch + 1
            else:
                count = min(i, k)
                start = i * pitch + k - count
            if count > 0:
                ssq = combssq(ssq, lassq(a, offset=start, count=count))

    # Sum diagonal.
    if unit:
        diagonal = SumSquares(1.0, float(n))
    else:
        diagonal = lassq(a, offset=0 if upper else k, stride=pitch, count=n)
    return combssq(ssq, diagonal).norm
