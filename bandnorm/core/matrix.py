"""Triangular band matrix bundled with its storage layout."""

from dataclasses import dataclass
from functools import cached_property
from typing import Any, MutableSequence, Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

from bandnorm.core.types import Diag, MatrixNorm, Uplo
from bandnorm.norms.banded import banded_triangular_norm
from bandnorm.utils.banded import band_storage_length, pack_band, unpack_band


@dataclass(frozen=True)
class BandedTriangular:
    """n×n triangular band matrix in row-major band storage."""

    band: NDArray          # flat, length >= (n-1)*pitch + k + 1
    n: int
    k: int                 # number of off-diagonals
    uplo: Uplo = Uplo.UPPER
    diag: Diag = Diag.NON_UNIT
    pitch: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "band", np.ravel(np.asarray(self.band, dtype=np.float64)))
        object.__setattr__(self, "uplo", Uplo.from_code(self.uplo))
        object.__setattr__(self, "diag", Diag.from_code(self.diag))
        if self.pitch is None:
            object.__setattr__(self, "pitch", self.k + 1)

    @classmethod
    def from_dense(
        cls,
        a: ArrayLike,
        k: int,
        uplo: Any = Uplo.UPPER,
        diag: Any = Diag.NON_UNIT,
        pitch: Optional[int] = None,
    ) -> "BandedTriangular":
        """Pack the k-band triangle of a dense square matrix."""
        a = np.asarray(a, dtype=np.float64)
        band = pack_band(a, k, Uplo.from_code(uplo), pitch=pitch)
        return cls(band=band, n=a.shape[0], k=k, uplo=uplo, diag=diag, pitch=pitch)

    @cached_property
    def storage_length(self) -> int:
        """Number of band entries the layout addresses."""
        return band_storage_length(self.n, self.k, self.pitch)

    def to_dense(self) -> NDArray:
        """Dense (n, n) matrix, with ones on the diagonal if unit."""
        return unpack_band(self.band, self.n, self.k, self.uplo, self.diag, self.pitch)

    def norm(
        self,
        kind: Any = MatrixNorm.FROBENIUS,
        scratch: Optional[MutableSequence[float]] = None,
    ) -> float:
        """
        Compute a matrix norm.

        A scratch buffer is allocated for column sums when none is given.
        """
        kind = MatrixNorm.from_code(kind)
        if scratch is None and kind is MatrixNorm.MAX_COLUMN_SUM:
            scratch = np.empty(self.n)
        return banded_triangular_norm(
            kind, self.uplo, self.diag, self.n, self.k, self.band, self.pitch, scratch
        )
