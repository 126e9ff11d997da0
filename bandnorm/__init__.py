"""
Bandnorm: norms of triangular band matrices in compact band storage.

Provides:
- Max-abs, one, infinity and Frobenius norms of upper or lower
  triangular band matrices with unit or explicit diagonal
- Overflow-safe scaled sum-of-squares accumulation
- Conversion between dense matrices and row-major band storage
"""

import logging

__version__ = "0.1.0"

from bandnorm.core import (
    BandedTriangular,
    BandNormError,
    Diag,
    MatrixNorm,
    NormRequest,
    Uplo,
)
from bandnorm.algebra.ssq import SumSquares, lassq, combssq
from bandnorm.norms.banded import banded_triangular_norm

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BandedTriangular",
    "BandNormError",
    "Diag",
    "MatrixNorm",
    "NormRequest",
    "Uplo",
    "SumSquares",
    "lassq",
    "combssq",
    "banded_triangular_norm",
]
