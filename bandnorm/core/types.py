"""Norm kinds, storage orientation and diagonal convention."""

import math
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any

from bandnorm.core.errors import (
    BandNormError,
    InvalidDiagonal,
    InvalidNormKind,
    InvalidOrientation,
)


def _lookup(cls, code: Any, aliases: dict[str, str], error: type[BandNormError]):
    if isinstance(code, cls):
        return code
    if isinstance(code, str):
        key = code.strip().upper().replace("-", "_")
        name = aliases.get(key, key)
        if name in cls.__members__:
            return cls[name]
    raise error(repr(code))


class MatrixNorm(Enum):
    """Norm kind; values are the LAPACK character codes."""
    MAX_ABS = "M"          # max |a_ij|
    MAX_ROW_SUM = "I"      # infinity norm
    MAX_COLUMN_SUM = "O"   # one norm
    FROBENIUS = "F"

    @classmethod
    def from_code(cls, code: Any) -> "MatrixNorm":
        """
        Resolve a norm kind.

        Accepts a member, a LAPACK code ('M', 'I', 'O'/'1', 'F'/'E'),
        a member name, or the numpy ``ord`` spellings 1, inf and 'fro'.
        """
        if not isinstance(code, bool) and isinstance(code, numbers.Real):
            if code == 1:
                return cls.MAX_COLUMN_SUM
            if math.isinf(code) and code > 0:
                return cls.MAX_ROW_SUM
            raise InvalidNormKind(repr(code))
        return _lookup(cls, code, _NORM_ALIASES, InvalidNormKind)


_NORM_ALIASES = {
    "M": "MAX_ABS",
    "MAX": "MAX_ABS",
    "MAXABS": "MAX_ABS",
    "I": "MAX_ROW_SUM",
    "INF": "MAX_ROW_SUM",
    "MAXROWSUM": "MAX_ROW_SUM",
    "O": "MAX_COLUMN_SUM",
    "1": "MAX_COLUMN_SUM",
    "ONE": "MAX_COLUMN_SUM",
    "MAXCOLUMNSUM": "MAX_COLUMN_SUM",
    "F": "FROBENIUS",
    "E": "FROBENIUS",
    "FRO": "FROBENIUS",
}


class Uplo(Enum):
    """Which triangle the band storage holds."""
    UPPER = "U"
    LOWER = "L"

    @classmethod
    def from_code(cls, code: Any) -> "Uplo":
        return _lookup(cls, code, {"U": "UPPER", "L": "LOWER"}, InvalidOrientation)


class Diag(Enum):
    """Diagonal convention."""
    UNIT = "U"       # implicit ones, diagonal slots never read
    NON_UNIT = "N"   # diagonal stored explicitly

    @classmethod
    def from_code(cls, code: Any) -> "Diag":
        return _lookup(
            cls,
            code,
            {"U": "UNIT", "N": "NON_UNIT", "NONUNIT": "NON_UNIT", "EXPLICIT": "NON_UNIT"},
            InvalidDiagonal,
        )


@dataclass(frozen=True)
class NormRequest:
    """Norm kind plus the layout flags that select a reduction."""

    norm: MatrixNorm
    uplo: Uplo = Uplo.UPPER
    diag: Diag = Diag.NON_UNIT

    def __post_init__(self) -> None:
        object.__setattr__(self, "norm", MatrixNorm.from_code(self.norm))
        object.__setattr__(self, "uplo", Uplo.from_code(self.uplo))
        object.__setattr__(self, "diag", Diag.from_code(self.diag))

    @property
    def needs_scratch(self) -> bool:
        """Column sums are accumulated in a caller-supplied buffer."""
        return self.norm is MatrixNorm.MAX_COLUMN_SUM
