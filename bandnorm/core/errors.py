"""Precondition errors raised by the norm routines."""


class BandNormError(ValueError):
    """Base class for invalid arguments passed to a band norm routine."""

    message = "invalid argument"

    def __init__(self, detail: str | None = None):
        text = self.message if detail is None else f"{self.message}: {detail}"
        super().__init__(text)


class InvalidNormKind(BandNormError):
    message = "bad norm kind"


class InvalidOrientation(BandNormError):
    message = "bad triangular orientation"


class InvalidDiagonal(BandNormError):
    message = "bad diagonal convention"


class NegativeDimension(BandNormError):
    message = "negative dimension"


class InsufficientRowPitch(BandNormError):
    message = "row pitch smaller than k+1"


class StorageTooShort(BandNormError):
    message = "band storage too short"


class ScratchTooShort(BandNormError):
    message = "scratch too short"
