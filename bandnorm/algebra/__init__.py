"""Accumulators and dense reference routines."""

from bandnorm.algebra.ssq import SumSquares, lassq, combssq
from bandnorm.algebra.dense import DenseBackend, dense_norm

__all__ = [
    "SumSquares",
    "lassq",
    "combssq",
    "DenseBackend",
    "dense_norm",
]
