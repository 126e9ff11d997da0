"""Norm evaluators."""

from bandnorm.norms.banded import banded_triangular_norm, evaluate

__all__ = [
    "banded_triangular_norm",
    "evaluate",
]
