"""
Core iNES functionality.

This package contains the header codec, ROM reading and writing,
and CHR tile decoding.
"""

from .header import (
    HeaderFields,
    Mirroring,
    Region,
    TruncatedInputError,
    build_header,
    parse_header,
)
from .rom_reader import CartridgeImage, RomReader, load
from .rom_writer import DEFAULT_PAYLOAD, PayloadTooLargeError, RomWriter, write

__all__ = [
    "HeaderFields",
    "Mirroring",
    "Region",
    "TruncatedInputError",
    "build_header",
    "parse_header",
    "CartridgeImage",
    "RomReader",
    "load",
    "DEFAULT_PAYLOAD",
    "PayloadTooLargeError",
    "RomWriter",
    "write",
]
