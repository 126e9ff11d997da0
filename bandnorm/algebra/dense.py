"""Dense reference norms using NumPy/SciPy."""

from typing import Any

import numpy as np
import scipy.linalg
from numpy.typing import ArrayLike, NDArray

from bandnorm.core.types import Diag, MatrixNorm, Uplo

_ORD = {
    MatrixNorm.MAX_ROW_SUM: np.inf,
    MatrixNorm.MAX_COLUMN_SUM: 1,
    MatrixNorm.FROBENIUS: "fro",
}


class DenseBackend:
    """Norms of dense matrices, used to cross-check band routines."""

    def norm(self, a: ArrayLike, kind: Any) -> float:
        """Compute a matrix norm of a dense 2-D array."""
        kind = MatrixNorm.from_code(kind)
        a = np.asarray(a, dtype=np.float64)
        if a.size == 0:
            return 0.0
        if kind is MatrixNorm.MAX_ABS:
            return float(np.max(np.abs(a)))
        return float(scipy.linalg.norm(a, ord=_ORD[kind], check_finite=False))

    def band_part(
        self, a: ArrayLike, k: int, uplo: Any, diag: Any = Diag.NON_UNIT
    ) -> NDArray:
        """
        Zero everything outside the k-band triangle of a.

        Args:
            a: Dense square matrix
            k: Number of off-diagonals kept
            uplo: Triangle kept
            diag: Diag.UNIT replaces the diagonal with ones

        Returns:
            New dense matrix
        """
        a = np.asarray(a, dtype=np.float64)
        if Uplo.from_code(uplo) is Uplo.UPPER:
            out = np.triu(np.tril(a, k))
        else:
            out = np.tril(np.triu(a, -k))
        if Diag.from_code(diag) is Diag.UNIT:
            np.fill_diagonal(out, 1.0)
        return out


def dense_norm(a: ArrayLike, kind: Any) -> float:
    """Compute a matrix norm of a dense 2-D array."""
    return DenseBackend().norm(a, kind)
