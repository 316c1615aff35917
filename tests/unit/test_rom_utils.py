"""Unit tests for ines.core.rom_utils address translation functions."""

import pytest

from ines.core.rom_utils import (
    CHR_BANK_SIZE,
    INES_HEADER_SIZE,
    PRG_BANK_SIZE,
    TRAINER_SIZE,
    VECTOR_NMI,
    VECTOR_RESET,
    VECTOR_IRQ,
    check_byte,
    cpu_to_prg,
    prg_to_cpu,
)

NROM_128 = PRG_BANK_SIZE
NROM_256 = 2 * PRG_BANK_SIZE


class TestConstants:
    """Test ROM layout constants have expected values."""

    def test_ines_header_size(self):
        assert INES_HEADER_SIZE == 0x10

    def test_trainer_size(self):
        assert TRAINER_SIZE == 512

    def test_bank_sizes(self):
        assert PRG_BANK_SIZE == 0x4000  # 16KB
        assert CHR_BANK_SIZE == 0x2000  # 8KB

    def test_vector_addresses(self):
        assert (VECTOR_NMI, VECTOR_RESET, VECTOR_IRQ) == (0xFFFA, 0xFFFC, 0xFFFE)


class TestCpuToPrg:
    """Tests for cpu_to_prg() function."""

    def test_prg_start(self):
        """$8000 maps to PRG offset 0."""
        assert cpu_to_prg(0x8000, NROM_256) == 0

    def test_nrom_256_upper_bank(self):
        """$C000 is the second bank of a 32KB PRG ROM."""
        assert cpu_to_prg(0xC000, NROM_256) == 0x4000

    def test_nrom_256_end(self):
        assert cpu_to_prg(0xFFFF, NROM_256) == 0x7FFF

    def test_nrom_128_mirror(self):
        """$C000-$FFFF mirrors $8000-$BFFF for a 16KB PRG ROM."""
        assert cpu_to_prg(0xC000, NROM_128) == 0
        assert cpu_to_prg(0xFFFC, NROM_128) == 0x3FFC

    def test_below_prg_range(self):
        """Address below $8000 raises ValueError."""
        with pytest.raises(ValueError, match="not in PRG ROM range"):
            cpu_to_prg(0x7FFF, NROM_256)

    def test_above_16_bit(self):
        with pytest.raises(ValueError):
            cpu_to_prg(0x10000, NROM_256)

    def test_no_prg_rom(self):
        with pytest.raises(ValueError, match="no PRG ROM"):
            cpu_to_prg(0x8000, 0)


class TestPrgToCpu:
    """Tests for prg_to_cpu() function."""

    def test_start(self):
        assert prg_to_cpu(0, NROM_256) == 0x8000

    def test_end_of_nrom_256(self):
        assert prg_to_cpu(0x7FFF, NROM_256) == 0xFFFF

    def test_outside_nrom_128(self):
        with pytest.raises(ValueError):
            prg_to_cpu(0x4000, NROM_128)

    def test_negative(self):
        with pytest.raises(ValueError):
            prg_to_cpu(-1, NROM_256)


class TestRoundTrips:
    """Test that conversions are invertible where applicable."""

    def test_cpu_prg_roundtrip(self):
        for prg_offset in [0x0000, 0x1234, 0x4000, 0x7FFA]:
            cpu_addr = prg_to_cpu(prg_offset, NROM_256)
            assert cpu_to_prg(cpu_addr, NROM_256) == prg_offset


class TestCheckByte:
    """Tests for check_byte()."""

    def test_in_range(self):
        assert check_byte("x", 0) == 0
        assert check_byte("x", 255) == 255

    def test_out_of_range(self):
        with pytest.raises(ValueError, match="prg_rom_banks"):
            check_byte("prg_rom_banks", 256)
