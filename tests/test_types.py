"""Tests for norm, orientation and diagonal codes."""

import numpy as np
import pytest

from bandnorm.core.errors import InvalidDiagonal, InvalidNormKind, InvalidOrientation
from bandnorm.core.types import Diag, MatrixNorm, NormRequest, Uplo


@pytest.mark.parametrize(
    "code, expected",
    [
        ("M", MatrixNorm.MAX_ABS),
        ("max", MatrixNorm.MAX_ABS),
        ("I", MatrixNorm.MAX_ROW_SUM),
        ("inf", MatrixNorm.MAX_ROW_SUM),
        (np.inf, MatrixNorm.MAX_ROW_SUM),
        ("O", MatrixNorm.MAX_COLUMN_SUM),
        ("1", MatrixNorm.MAX_COLUMN_SUM),
        (1, MatrixNorm.MAX_COLUMN_SUM),
        ("max_column_sum", MatrixNorm.MAX_COLUMN_SUM),
        ("f", MatrixNorm.FROBENIUS),
        ("E", MatrixNorm.FROBENIUS),
        ("fro", MatrixNorm.FROBENIUS),
        (MatrixNorm.FROBENIUS, MatrixNorm.FROBENIUS),
    ],
)
def test_norm_codes(code, expected):
    assert MatrixNorm.from_code(code) is expected


@pytest.mark.parametrize("code", ["X", "", 2, -np.inf, np.nan, True, None, Uplo.UPPER])
def test_bad_norm_codes(code):
    with pytest.raises(InvalidNormKind):
        MatrixNorm.from_code(code)


def test_uplo_and_diag_codes():
    assert Uplo.from_code("u") is Uplo.UPPER
    assert Uplo.from_code("Lower") is Uplo.LOWER
    assert Diag.from_code("U") is Diag.UNIT
    assert Diag.from_code("n") is Diag.NON_UNIT
    assert Diag.from_code("explicit") is Diag.NON_UNIT
    assert Diag.from_code("non-unit") is Diag.NON_UNIT

    with pytest.raises(InvalidOrientation):
        Uplo.from_code("N")
    with pytest.raises(InvalidDiagonal):
        Diag.from_code("L")
    # Members of another enum are not accepted
    with pytest.raises(InvalidDiagonal):
        Diag.from_code(Uplo.UPPER)


def test_norm_request_defaults():
    request = NormRequest("F")

    assert request.norm is MatrixNorm.FROBENIUS
    assert request.uplo is Uplo.UPPER
    assert request.diag is Diag.NON_UNIT
    assert not request.needs_scratch

    with pytest.raises(InvalidOrientation):
        NormRequest("F", uplo="X")
