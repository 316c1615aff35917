"""Shared pytest fixtures for iNES tests."""

import pytest

from ines.core.rom_utils import CHR_BANK_SIZE, PRG_BANK_SIZE, TRAINER_SIZE


def make_header(
    prg_banks: int = 1,
    chr_banks: int = 1,
    flags6: int = 0,
    flags7: int = 0,
    prg_ram: int = 0,
    flags9: int = 0,
    magic: bytes = b"NES\x1a",
) -> bytes:
    """Build a 16-byte header with arbitrary flag bytes."""
    return magic + bytes([prg_banks, chr_banks, flags6, flags7, prg_ram, flags9]) + bytes(6)


@pytest.fixture
def header_factory():
    """Factory for hand-crafted headers."""
    return make_header


@pytest.fixture
def nrom_128_data():
    """1x16KB PRG + 1x8KB CHR ROM with recognizable region markers."""
    prg = bytearray(PRG_BANK_SIZE)
    prg[0] = 0xAA
    prg[-1] = 0xAB
    chr_rom = bytearray(CHR_BANK_SIZE)
    chr_rom[0] = 0xCC
    chr_rom[-1] = 0xCD
    return make_header(1, 1) + bytes(prg) + bytes(chr_rom)


@pytest.fixture
def trainer_rom_data():
    """ROM with a 512-byte trainer filled with 0x77 before PRG ROM."""
    prg = bytes([0x11]) * PRG_BANK_SIZE
    chr_rom = bytes([0x22]) * CHR_BANK_SIZE
    trainer = bytes([0x77]) * TRAINER_SIZE
    return make_header(1, 1, flags6=0x04) + trainer + prg + chr_rom
