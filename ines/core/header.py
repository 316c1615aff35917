"""
iNES Header Codec

Parses and builds the 16-byte iNES header:
https://www.nesdev.org/wiki/INES

Parsing is lenient: a bad magic number is reported through
HeaderFields.magic_valid rather than raised, so the codec can be used to
sniff arbitrary files. Only a header shorter than 16 bytes is an error.
"""

from dataclasses import dataclass
from enum import Enum

from .rom_utils import (
    CHR_BANK_SIZE,
    INES_HEADER_SIZE,
    INES_MAGIC,
    PRG_BANK_SIZE,
    PRG_RAM_BANK_SIZE,
    TRAINER_SIZE,
    check_byte,
)

# Flags 6 bits
FLAG6_VERTICAL_MIRRORING = 0x01
FLAG6_BATTERY = 0x02
FLAG6_TRAINER = 0x04
FLAG6_FOUR_SCREEN = 0x08

# Flags 9 bits
FLAG9_PAL = 0x01


class TruncatedInputError(ValueError):
    """Raised when a buffer is shorter than the iNES layout requires."""

    def __init__(self, what: str, required: int, actual: int):
        super().__init__(f"{what}: need {required} bytes, got {actual}")
        self.required = required
        self.actual = actual


class Mirroring(Enum):
    HORIZONTAL = "Horizontal"
    VERTICAL = "Vertical"


class Region(Enum):
    NTSC = "NTSC"
    PAL = "PAL"


@dataclass(frozen=True)
class HeaderFields:
    """Parsed view of an iNES header."""

    magic_valid: bool
    prg_rom_banks: int
    chr_rom_banks: int
    mirroring: Mirroring
    has_trainer: bool
    mapper_number: int
    prg_ram_banks: int
    region: Region
    battery_backed: bool = False
    four_screen: bool = False

    @property
    def prg_rom_size(self) -> int:
        return self.prg_rom_banks * PRG_BANK_SIZE

    @property
    def chr_rom_size(self) -> int:
        return self.chr_rom_banks * CHR_BANK_SIZE

    @property
    def prg_ram_size(self) -> int:
        return self.prg_ram_banks * PRG_RAM_BANK_SIZE

    @property
    def trainer_size(self) -> int:
        return TRAINER_SIZE if self.has_trainer else 0

    @property
    def prg_rom_start(self) -> int:
        """File offset of the first PRG ROM byte."""
        return INES_HEADER_SIZE + self.trainer_size

    @property
    def chr_rom_start(self) -> int:
        """File offset of the first CHR ROM byte."""
        return self.prg_rom_start + self.prg_rom_size

    @property
    def total_size(self) -> int:
        """Minimum file length this header demands."""
        return self.chr_rom_start + self.chr_rom_size


def mapper_number(flags6: int, flags7: int) -> int:
    """
    Compute the mapper number from flags 6 and 7.

    The low nibble of the mapper number is stored in the high nibble of
    flags 6, and the high nibble in the high nibble of flags 7.

    Args:
        flags6: Header byte 6
        flags7: Header byte 7

    Returns:
        Mapper number (0-255)
    """
    return ((flags6 & 0xFF) >> 4) | (flags7 & 0xF0)


def parse_header(data: bytes) -> HeaderFields:
    """
    Parse the first 16 bytes of a buffer as an iNES header.

    Args:
        data: Raw bytes; anything past the 16th byte is ignored

    Returns:
        HeaderFields describing the header

    Raises:
        TruncatedInputError: If fewer than 16 bytes are supplied
    """
    if len(data) < INES_HEADER_SIZE:
        raise TruncatedInputError("iNES header", INES_HEADER_SIZE, len(data))

    header = bytes(data[:INES_HEADER_SIZE])
    flags6 = header[6]
    flags7 = header[7]
    flags9 = header[9]

    return HeaderFields(
        magic_valid=header[:4] == INES_MAGIC,
        prg_rom_banks=header[4],
        chr_rom_banks=header[5],
        mirroring=(
            Mirroring.VERTICAL
            if flags6 & FLAG6_VERTICAL_MIRRORING
            else Mirroring.HORIZONTAL
        ),
        has_trainer=bool(flags6 & FLAG6_TRAINER),
        mapper_number=mapper_number(flags6, flags7),
        prg_ram_banks=header[8],
        # Few dumps set this bit; emulators may report a different region.
        region=Region.PAL if flags9 & FLAG9_PAL else Region.NTSC,
        battery_backed=bool(flags6 & FLAG6_BATTERY),
        four_screen=bool(flags6 & FLAG6_FOUR_SCREEN),
    )


def build_header(prg_rom_banks: int, chr_rom_banks: int) -> bytes:
    """
    Build an iNES header for a mapper 0 cartridge.

    All flags are zero: horizontal mirroring, no trainer, mapper 0,
    no PRG RAM, NTSC.

    Args:
        prg_rom_banks: Number of 16KB PRG ROM banks (0-255)
        chr_rom_banks: Number of 8KB CHR ROM banks (0-255)

    Returns:
        16 header bytes

    Raises:
        ValueError: If a bank count does not fit in a byte
    """
    check_byte("prg_rom_banks", prg_rom_banks)
    check_byte("chr_rom_banks", chr_rom_banks)
    return INES_MAGIC + bytes([prg_rom_banks, chr_rom_banks]) + bytes(10)
