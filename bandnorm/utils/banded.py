"""Row-major band storage helpers for triangular band matrices."""

from typing import Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

from bandnorm.core.errors import (
    InsufficientRowPitch,
    NegativeDimension,
    StorageTooShort,
)
from bandnorm.core.types import Diag, Uplo


def band_storage_length(n: int, k: int, pitch: int) -> int:
    """Minimum flat length holding n rows of band storage."""
    if n == 0:
        return 0
    return (n - 1) * pitch + k + 1


def check_layout(n: int, k: int, pitch: int) -> None:
    """Raise if (n, k, pitch) cannot describe band storage."""
    if n < 0 or k < 0:
        raise NegativeDimension(f"n={n}, k={k}")
    if pitch < k + 1:
        raise InsufficientRowPitch(f"pitch={pitch}, k={k}")


def row_offsets(i: int, n: int, k: int, upper: bool, unit: bool) -> tuple[int, int]:
    """
    Band offsets [lo, hi) read from row i.

    Upper rows start at the diagonal, lower rows end at it (offset k).
    The diagonal offset is dropped under the unit convention.
    """
    if upper:
        return (1 if unit else 0), min(n - i, k + 1)
    return max(0, k - i), (k if unit else k + 1)


def first_column(i: int, k: int, upper: bool) -> int:
    """Matrix column addressed by band offset 0 of row i."""
    return i if upper else i - k


def pack_band(
    a: ArrayLike,
    k: int,
    uplo: Uplo,
    pitch: Optional[int] = None,
    fill: float = 0.0,
) -> NDArray:
    """
    Pack the k-band triangle of a dense matrix into flat band storage.

    Args:
        a: Dense (n, n) matrix
        k: Number of off-diagonals kept
        uplo: Triangle to pack
        pitch: Row pitch (defaults to k+1)
        fill: Value for slots outside the band

    Returns:
        Flat array of length n*pitch
    """
    a = np.asarray(a, dtype=np.float64)
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise ValueError(f"expected a square matrix, got shape {a.shape}")
    uplo = Uplo.from_code(uplo)
    n = a.shape[0]
    pitch = k + 1 if pitch is None else pitch
    check_layout(n, k, pitch)

    upper = uplo is Uplo.UPPER
    band = np.full(n * pitch, fill, dtype=np.float64)
    for i in range(n):
        lo, hi = row_offsets(i, n, k, upper, unit=False)
        col = first_column(i, k, upper)
        band[i * pitch + lo:i * pitch + hi] = a[i, col + lo:col + hi]
    return band


def unpack_band(
    band: ArrayLike,
    n: int,
    k: int,
    uplo: Uplo,
    diag: Diag = Diag.NON_UNIT,
    pitch: Optional[int] = None,
) -> NDArray:
    """Expand flat band storage into a dense (n, n) triangular matrix."""
    uplo = Uplo.from_code(uplo)
    diag = Diag.from_code(diag)
    pitch = k + 1 if pitch is None else pitch
    check_layout(n, k, pitch)

    band = np.ravel(np.asarray(band, dtype=np.float64))
    need = band_storage_length(n, k, pitch)
    if band.size < need:
        raise StorageTooShort(f"have {band.size}, need {need}")

    upper = uplo is Uplo.UPPER
    unit = diag is Diag.UNIT
    a = np.zeros((n, n))
    for i in range(n):
        lo, hi = row_offsets(i, n, k, upper, unit)
        col = first_column(i, k, upper)
        a[i, col + lo:col + hi] = band[i * pitch + lo:i * pitch + hi]
        if unit:
            a[i, i] = 1.0
    return a
