"""
ROM Diagnostics

Human-readable and JSON-ready descriptions of a parsed iNES header and
loaded cartridge. Nothing here is needed to read or write a ROM.
"""

from typing import Any

from ..core.header import HeaderFields
from ..core.rom_reader import CartridgeImage
from .hex_utils import format_hex_row


def describe_header(fields: HeaderFields) -> list[str]:
    """
    Describe header fields as report lines.

    Args:
        fields: Parsed header

    Returns:
        One line per field, e.g. "- Mirroring mode: Horizontal"
    """
    magic = "Valid" if fields.magic_valid else "Invalid"
    return [
        f"- {magic} NES magic number.",
        f"- PRG ROM: {fields.prg_rom_banks} x 16 KB = {fields.prg_rom_size} bytes",
        f"- CHR ROM: {fields.chr_rom_banks} x 8 KB = {fields.chr_rom_banks * 8} KB",
        f"- PRG RAM: {fields.prg_ram_banks} x 8 KB = {fields.prg_ram_banks * 8} KB",
        f"- Mirroring mode: {fields.mirroring.value}",
        f"- Trainer: {'Yes' if fields.has_trainer else 'No'}",
        f"- Mapper number: {fields.mapper_number}",
        f"- Region: {fields.region.value}",
    ]


def header_summary(image: CartridgeImage) -> dict[str, Any]:
    """
    Summarize a loaded cartridge as a JSON-serializable dict.

    Interrupt vectors are only included when the cartridge is mapper 0
    with PRG ROM, since other mappers may not have the last bank at $C000.
    """
    fields = image.fields
    summary: dict[str, Any] = {
        "header": format_hex_row(image.header),
        "magic_valid": fields.magic_valid,
        "prg_rom_banks": fields.prg_rom_banks,
        "prg_rom_size": len(image.prg_rom),
        "chr_rom_banks": fields.chr_rom_banks,
        "chr_rom_size": len(image.chr_rom),
        "prg_ram_banks": fields.prg_ram_banks,
        "mirroring": fields.mirroring.value,
        "trainer": fields.has_trainer,
        "battery": fields.battery_backed,
        "four_screen": fields.four_screen,
        "mapper": fields.mapper_number,
        "region": fields.region.value,
    }

    if fields.mapper_number == 0 and image.prg_rom:
        summary["vectors"] = {
            name: f"${addr:04X}" for name, addr in image.interrupt_vectors.items()
        }

    return summary
