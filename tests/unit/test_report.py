"""Unit tests for ROM diagnostics."""

import json

from ines.core.header import parse_header
from ines.core.rom_reader import load
from ines.core.rom_writer import write
from ines.formats.report import describe_header, header_summary


class TestDescribeHeader:
    def test_generated_rom(self):
        lines = describe_header(parse_header(write()))
        assert lines == [
            "- Valid NES magic number.",
            "- PRG ROM: 2 x 16 KB = 32768 bytes",
            "- CHR ROM: 1 x 8 KB = 8 KB",
            "- PRG RAM: 0 x 8 KB = 0 KB",
            "- Mirroring mode: Horizontal",
            "- Trainer: No",
            "- Mapper number: 0",
            "- Region: NTSC",
        ]

    def test_flags(self, header_factory):
        fields = parse_header(
            header_factory(flags6=0x15, flags7=0x00, flags9=0x01, magic=b"ROM!")
        )
        lines = describe_header(fields)
        assert "- Invalid NES magic number." in lines
        assert "- Mirroring mode: Vertical" in lines
        assert "- Trainer: Yes" in lines
        assert "- Mapper number: 1" in lines
        assert "- Region: PAL" in lines


class TestHeaderSummary:
    def test_generated_rom(self):
        summary = header_summary(load(write()))
        assert summary["header"].startswith("4E 45 53 1A 02 01")
        assert summary["prg_rom_size"] == 32768
        assert summary["chr_rom_size"] == 8192
        assert summary["mirroring"] == "Horizontal"
        assert summary["vectors"] == {"nmi": "$0000", "reset": "$8000", "irq": "$8000"}

    def test_json_serializable(self):
        summary = header_summary(load(write(1, 0, b"")))
        assert json.loads(json.dumps(summary)) == summary

    def test_no_vectors_without_prg(self, header_factory):
        summary = header_summary(load(header_factory(0, 0)))
        assert "vectors" not in summary

    def test_no_vectors_for_other_mappers(self, header_factory):
        summary = header_summary(load(header_factory(1, 0, flags6=0x10) + bytes(16384)))
        assert summary["mapper"] == 1
        assert "vectors" not in summary
