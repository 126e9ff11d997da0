"""Tests for argument validation."""

import numpy as np
import pytest

from bandnorm.core.errors import (
    BandNormError,
    InsufficientRowPitch,
    InvalidDiagonal,
    InvalidNormKind,
    InvalidOrientation,
    NegativeDimension,
    ScratchTooShort,
    StorageTooShort,
)
from bandnorm.core.types import Diag, MatrixNorm, Uplo
from bandnorm.norms.banded import banded_triangular_norm


BAND = np.array([2.0, 3.0, 4.0, 5.0, 6.0, 0.0])


@pytest.mark.parametrize(
    "args, error",
    [
        (("X", Uplo.UPPER, Diag.NON_UNIT, 3, 1, BAND, 2), InvalidNormKind),
        ((2, Uplo.UPPER, Diag.NON_UNIT, 3, 1, BAND, 2), InvalidNormKind),
        ((None, Uplo.UPPER, Diag.NON_UNIT, 3, 1, BAND, 2), InvalidNormKind),
        ((MatrixNorm.MAX_ABS, "Q", Diag.NON_UNIT, 3, 1, BAND, 2), InvalidOrientation),
        ((MatrixNorm.MAX_ABS, Uplo.UPPER, "Z", 3, 1, BAND, 2), InvalidDiagonal),
        ((MatrixNorm.MAX_ABS, Uplo.UPPER, Diag.NON_UNIT, -1, 1, BAND, 2), NegativeDimension),
        ((MatrixNorm.MAX_ABS, Uplo.UPPER, Diag.NON_UNIT, 3, -1, BAND, 2), NegativeDimension),
        ((MatrixNorm.MAX_ABS, Uplo.UPPER, Diag.NON_UNIT, 3, 1, BAND, 1), InsufficientRowPitch),
        ((MatrixNorm.MAX_ABS, Uplo.UPPER, Diag.NON_UNIT, 3, 1, BAND[:5], 2), StorageTooShort),
    ],
)
def test_invalid_arguments(args, error):
    """Each precondition raises its own error type."""
    with pytest.raises(error):
        banded_triangular_norm(*args)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        banded_triangular_norm("X", "U", "N", 3, 1, BAND, 2)
    assert issubclass(ScratchTooShort, BandNormError)
    assert issubclass(BandNormError, ValueError)


def test_check_order():
    """Earlier preconditions are reported first."""
    with pytest.raises(InvalidNormKind):
        banded_triangular_norm("X", "Q", "N", -1, -1, BAND, 0)
    with pytest.raises(InvalidOrientation):
        banded_triangular_norm("M", "Q", "N", -1, -1, BAND, 0)
    with pytest.raises(NegativeDimension):
        banded_triangular_norm("M", "U", "N", -1, 1, BAND, 0)


def test_pitch_equal_to_bandwidth():
    with pytest.raises(InsufficientRowPitch):
        banded_triangular_norm("F", "L", "N", 3, 2, np.zeros(20), 2)


def test_scratch_required_for_column_sum():
    with pytest.raises(ScratchTooShort):
        banded_triangular_norm("O", "U", "N", 3, 1, BAND, 2)
    with pytest.raises(ScratchTooShort):
        banded_triangular_norm("O", "U", "N", 3, 1, BAND, 2, np.empty(2))

    # Other norms ignore the scratch
    assert banded_triangular_norm("I", "U", "N", 3, 1, BAND, 2, np.empty(0)) == 9.0


def test_empty_matrix_skips_storage_checks():
    """n = 0 returns before storage and scratch are checked."""
    assert banded_triangular_norm("O", "U", "N", 0, 1, [], 2) == 0.0
    assert banded_triangular_norm("F", "L", "U", 0, 0, [], 1, []) == 0.0

    # Dimension checks still apply
    with pytest.raises(InsufficientRowPitch):
        banded_triangular_norm("O", "U", "N", 0, 1, [], 1)


def test_no_partial_computation():
    """A failed call leaves the scratch untouched."""
    scratch = np.full(3, -7.0)
    with pytest.raises(StorageTooShort):
        banded_triangular_norm("O", "U", "N", 3, 1, BAND[:4], 2, scratch)
    assert np.all(scratch == -7.0)
