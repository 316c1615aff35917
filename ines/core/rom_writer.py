"""
iNES ROM Writer

Synthesizes a minimal mapper 0 ROM image: an iNES header, a PRG ROM holding
a program payload with the interrupt vector table at its end, and a blank
CHR ROM.
"""

from pathlib import Path

from .header import build_header
from .rom_utils import (
    CHR_BANK_SIZE,
    PRG_BANK_SIZE,
    PRG_ROM_CPU_START,
    VECTOR_TABLE_SIZE,
    check_byte,
)

# The NES starts executing PRG ROM at $8000 after reset.
# Plays a tone on square wave 1 through the APU registers, then spins.
DEFAULT_PAYLOAD = bytes(
    [
        0xA9, 0x01,        # 8000: LDA #$01
        0x8D, 0x15, 0x40,  # 8002: STA $4015  (enable square 1)
        0xA9, 0xE5,        # 8005: LDA #$E5
        0x8D, 0x01, 0x40,  # 8007: STA $4001  (sweep / length)
        0xA9, 0x33,        # 800A: LDA #$33
        0x8D, 0x02, 0x40,  # 800C: STA $4002  (timer low)
        0xA9, 0x02,        # 800F: LDA #$02
        0x8D, 0x03, 0x40,  # 8011: STA $4003  (timer high)
        0xA9, 0xA2,        # 8014: LDA #$A2
        0x8D, 0x00, 0x40,  # 8016: STA $4000  (volume)
        0x4C, 0x19, 0x80,  # 8019: JMP $8019
    ]
)

DEFAULT_NMI_VECTOR = 0x0000
DEFAULT_RESET_VECTOR = PRG_ROM_CPU_START
DEFAULT_IRQ_VECTOR = PRG_ROM_CPU_START


class PayloadTooLargeError(ValueError):
    """Raised when a payload doesn't fit in PRG ROM ahead of the vector table."""

    def __init__(self, payload_size: int, available: int):
        super().__init__(
            f"Payload is {payload_size} bytes, only {available} bytes available "
            f"before the interrupt vector table"
        )
        self.payload_size = payload_size
        self.available = available


def build_vector_table(
    nmi: int = DEFAULT_NMI_VECTOR,
    reset: int = DEFAULT_RESET_VECTOR,
    irq: int = DEFAULT_IRQ_VECTOR,
) -> bytes:
    """
    Build the 6-byte interrupt vector table ($FFFA-$FFFF).

    Args:
        nmi: NMI handler address
        reset: Entry point after power-on/reset
        irq: IRQ/BRK handler address

    Returns:
        Three little-endian 16-bit addresses
    """
    table = bytearray()
    for name, addr in (("nmi", nmi), ("reset", reset), ("irq", irq)):
        if not 0 <= addr <= 0xFFFF:
            raise ValueError(f"{name} vector ${addr:X} not a 16-bit address")
        table += bytes([addr & 0xFF, (addr >> 8) & 0xFF])
    return bytes(table)


def build_prg_rom(bank_count: int, payload: bytes = DEFAULT_PAYLOAD) -> bytes:
    """
    Build PRG ROM: payload, zero padding, then the interrupt vector table.

    Args:
        bank_count: Number of 16KB PRG banks
        payload: Program bytes placed at the start of PRG ROM ($8000)

    Returns:
        bank_count * 16KB bytes

    Raises:
        PayloadTooLargeError: If payload and vector table don't fit
    """
    check_byte("prg_rom_bank_count", bank_count)
    available = bank_count * PRG_BANK_SIZE - VECTOR_TABLE_SIZE
    if len(payload) > available:
        raise PayloadTooLargeError(len(payload), max(available, 0))

    padding = bytes(available - len(payload))
    return bytes(payload) + padding + build_vector_table()


def build_chr_rom(bank_count: int) -> bytes:
    """Build a blank (all zero) CHR ROM of bank_count 8KB banks."""
    check_byte("chr_rom_bank_count", bank_count)
    return bytes(bank_count * CHR_BANK_SIZE)


def write(
    prg_rom_bank_count: int = 2,
    chr_rom_bank_count: int = 1,
    payload: bytes = DEFAULT_PAYLOAD,
) -> bytes:
    """
    Build a complete iNES ROM image.

    Defaults to 2x16KB PRG ROM and 1x8KB CHR ROM, the layout of an NROM-256
    cartridge such as Super Mario Bros.

    Args:
        prg_rom_bank_count: Number of 16KB PRG banks
        chr_rom_bank_count: Number of 8KB CHR banks
        payload: Program bytes placed at the start of PRG ROM

    Returns:
        header + PRG ROM + CHR ROM

    Raises:
        PayloadTooLargeError: If payload doesn't fit in PRG ROM
    """
    prg_rom = build_prg_rom(prg_rom_bank_count, payload)
    chr_rom = build_chr_rom(chr_rom_bank_count)
    return build_header(prg_rom_bank_count, chr_rom_bank_count) + prg_rom + chr_rom


class RomWriter:
    """
    Writes synthesized iNES ROM files to disk.

    Usage:
        writer = RomWriter("bin/test.nes")
        writer.write_rom(prg_rom_bank_count=1)
    """

    def __init__(self, output_path: str):
        """
        Args:
            output_path: Output ROM file path (will be created/overwritten)
        """
        self.output_path = output_path

    def write_rom(
        self,
        prg_rom_bank_count: int = 2,
        chr_rom_bank_count: int = 1,
        payload: bytes = DEFAULT_PAYLOAD,
    ) -> bytes:
        """
        Build a ROM with write() and save it to the output path.

        Parent directories are created as needed. Nothing is written if the
        ROM can't be built.

        Returns:
            The bytes that were written
        """
        rom_data = write(prg_rom_bank_count, chr_rom_bank_count, payload)

        path = Path(self.output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            f.write(rom_data)

        return rom_data
