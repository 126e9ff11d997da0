"""Core types for triangular band matrices."""

from bandnorm.core.errors import (
    BandNormError,
    InvalidNormKind,
    InvalidOrientation,
    InvalidDiagonal,
    NegativeDimension,
    InsufficientRowPitch,
    StorageTooShort,
    ScratchTooShort,
)
from bandnorm.core.types import MatrixNorm, Uplo, Diag, NormRequest
from bandnorm.core.matrix import BandedTriangular

__all__ = [
    "BandNormError",
    "InvalidNormKind",
    "InvalidOrientation",
    "InvalidDiagonal",
    "NegativeDimension",
    "InsufficientRowPitch",
    "StorageTooShort",
    "ScratchTooShort",
    "MatrixNorm",
    "Uplo",
    "Diag",
    "NormRequest",
    "BandedTriangular",
]
