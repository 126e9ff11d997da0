"""Band storage utilities."""

from bandnorm.utils.banded import (
    band_storage_length,
    check_layout,
    pack_band,
    unpack_band,
)

__all__ = [
    "band_storage_length",
    "check_layout",
    "pack_band",
    "unpack_band",
]
