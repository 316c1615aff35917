"""
iNES ROM layout constants and address utilities.

This module provides:
- iNES layout constants (header size, trainer size, PRG/CHR bank sizes)
- The interrupt vector locations at the top of CPU address space
- Address translation between CPU addresses and PRG offsets for mapper 0 (NROM)

Used by the header codec, RomReader, RomWriter, and the tools.
"""

# ROM layout constants
INES_MAGIC = b"NES\x1a"
INES_HEADER_SIZE = 0x10
TRAINER_SIZE = 0x200
PRG_BANK_SIZE = 0x4000  # 16KB banks
CHR_BANK_SIZE = 0x2000  # 8KB banks
PRG_RAM_BANK_SIZE = 0x2000  # 8KB banks

# ============================================================================
# CPU Memory Map (NROM)
# ============================================================================
PRG_ROM_CPU_START = 0x8000  # PRG ROM is mapped at $8000-$FFFF

# Interrupt vectors occupy the last 6 bytes of addressable memory
VECTOR_NMI = 0xFFFA
VECTOR_RESET = 0xFFFC
VECTOR_IRQ = 0xFFFE
VECTOR_TABLE_SIZE = 6


def cpu_to_prg(cpu_addr: int, prg_size: int) -> int:
    """
    Convert CPU address ($8000-$FFFF) to PRG offset for an NROM cartridge.

    A single 16KB bank (NROM-128) is mirrored at $C000, so the offset wraps
    around the size of the PRG ROM.

    Args:
        cpu_addr: CPU address in range $8000-$FFFF
        prg_size: Size of PRG ROM in bytes

    Returns:
        PRG ROM offset

    Raises:
        ValueError: If address is not in PRG ROM range or there is no PRG ROM
    """
    if cpu_addr < PRG_ROM_CPU_START or cpu_addr > 0xFFFF:
        raise ValueError(f"Address ${cpu_addr:04X} not in PRG ROM range")
    if prg_size <= 0:
        raise ValueError("Cartridge has no PRG ROM")
    return (cpu_addr - PRG_ROM_CPU_START) % prg_size


def prg_to_cpu(prg_offset: int, prg_size: int) -> int:
    """
    Convert PRG offset to the CPU address it appears at.

    For a 16KB PRG ROM this returns the lower mirror ($8000-$BFFF).

    Args:
        prg_offset: Offset into PRG ROM
        prg_size: Size of PRG ROM in bytes

    Returns:
        CPU address in range $8000-$FFFF

    Raises:
        ValueError: If offset is outside the PRG ROM
    """
    if prg_offset < 0 or prg_offset >= min(prg_size, 0x8000):
        raise ValueError(f"PRG offset ${prg_offset:05X} not mappable")
    return PRG_ROM_CPU_START + prg_offset


def check_byte(name: str, value: int) -> int:
    """
    Validate that a header field fits in a single byte.

    Raises:
        ValueError: If value is outside 0-255
    """
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be in range 0-255, got {value}")
    return value
