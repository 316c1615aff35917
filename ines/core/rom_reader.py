"""
iNES ROM Reader

Splits an iNES ROM image into header, trainer, PRG ROM and CHR ROM.
Handles the iNES layout and CPU address mapping for mapper 0 cartridges.
"""

from dataclasses import dataclass, field

from .header import HeaderFields, TruncatedInputError, parse_header
from .rom_utils import (
    INES_HEADER_SIZE,
    TRAINER_SIZE,
    VECTOR_IRQ,
    VECTOR_NMI,
    VECTOR_RESET,
    cpu_to_prg,
)


@dataclass(frozen=True)
class CartridgeImage:
    """
    Immutable view of a loaded iNES ROM.

    Built once by load(); there is no way to modify it afterwards.
    """

    header: bytes
    prg_rom: bytes
    chr_rom: bytes
    trainer: bytes | None = None
    fields: HeaderFields = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """
        Raises:
            ValueError: If a region's size disagrees with the header
        """
        if len(self.header) != INES_HEADER_SIZE:
            raise ValueError(
                f"Header must be {INES_HEADER_SIZE} bytes, got {len(self.header)}"
            )
        fields = parse_header(self.header)

        if len(self.prg_rom) != fields.prg_rom_size:
            raise ValueError(
                f"PRG ROM is {len(self.prg_rom)} bytes, header says "
                f"{fields.prg_rom_banks} x 16 KB = {fields.prg_rom_size}"
            )
        if len(self.chr_rom) != fields.chr_rom_size:
            raise ValueError(
                f"CHR ROM is {len(self.chr_rom)} bytes, header says "
                f"{fields.chr_rom_banks} x 8 KB = {fields.chr_rom_size}"
            )
        if fields.has_trainer:
            if self.trainer is None or len(self.trainer) != TRAINER_SIZE:
                raise ValueError(f"Trainer flag set, expected {TRAINER_SIZE}-byte trainer")
        elif self.trainer is not None:
            raise ValueError("Trainer given but trainer flag is clear")

        object.__setattr__(self, "fields", fields)

    def read_prg(self, prg_offset: int, length: int = 1) -> bytes:
        """
        Read bytes from PRG ROM at a PRG offset.

        Args:
            prg_offset: Offset into PRG ROM
            length: Number of bytes to read

        Returns:
            Requested bytes

        Raises:
            IndexError: If the read extends past the end of PRG ROM
        """
        if prg_offset < 0 or prg_offset + length > len(self.prg_rom):
            raise IndexError(
                f"PRG read ${prg_offset:05X}+{length} outside "
                f"{len(self.prg_rom)}-byte PRG ROM"
            )
        return self.prg_rom[prg_offset : prg_offset + length]

    def read_prg_word(self, prg_offset: int) -> int:
        """Read 16-bit little-endian word from PRG ROM."""
        data = self.read_prg(prg_offset, 2)
        return data[0] | (data[1] << 8)

    def read_cpu_word(self, cpu_addr: int) -> int:
        """
        Read 16-bit little-endian word at a CPU address ($8000-$FFFF).

        Raises:
            ValueError: If address is not in PRG ROM range
        """
        return self.read_prg_word(cpu_to_prg(cpu_addr, len(self.prg_rom)))

    @property
    def interrupt_vectors(self) -> dict[str, int]:
        """NMI, RESET and IRQ/BRK addresses stored at $FFFA-$FFFF."""
        return {
            "nmi": self.read_cpu_word(VECTOR_NMI),
            "reset": self.read_cpu_word(VECTOR_RESET),
            "irq": self.read_cpu_word(VECTOR_IRQ),
        }


def load(data: bytes) -> CartridgeImage:
    """
    Load an iNES ROM image from raw bytes.

    Trailing bytes beyond the CHR ROM are ignored.

    Args:
        data: Entire ROM file contents

    Returns:
        CartridgeImage with header, trainer, PRG and CHR regions

    Raises:
        TruncatedInputError: If data is shorter than the header demands
    """
    fields = parse_header(data)
    if len(data) < fields.total_size:
        raise TruncatedInputError("iNES ROM", fields.total_size, len(data))

    data = bytes(data)
    trainer = None
    if fields.has_trainer:
        trainer = data[INES_HEADER_SIZE : fields.prg_rom_start]

    return CartridgeImage(
        header=data[:INES_HEADER_SIZE],
        prg_rom=data[fields.prg_rom_start : fields.chr_rom_start],
        chr_rom=data[fields.chr_rom_start : fields.total_size],
        trainer=trainer,
    )


class RomReader:
    """
    Reads iNES ROM files from disk.

    Thin file-backed wrapper around load() for tools that work with paths.
    """

    def __init__(self, rom_path: str):
        """
        Load a NES ROM file.

        Args:
            rom_path: Path to iNES ROM file

        Raises:
            TruncatedInputError: If the file is shorter than its header demands
            OSError: If the file cannot be read
        """
        self.rom_path = rom_path
        with open(rom_path, "rb") as f:
            self.data = f.read()

        self.image = load(self.data)

    @property
    def fields(self) -> HeaderFields:
        return self.image.fields
