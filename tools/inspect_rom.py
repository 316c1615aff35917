#!/usr/bin/env python3
"""
iNES ROM Inspector

Parses an iNES ROM file and prints its header fields along with hex previews
of PRG and CHR ROM (compare against an emulator's memory viewer).
Optionally saves a JSON summary and a PNG of the CHR ROM tiles.
"""

import argparse
import json
import sys
from pathlib import Path

from ines.core.header import TruncatedInputError
from ines.core.rom_reader import RomReader
from ines.core.rom_utils import prg_to_cpu
from ines.formats.hex_utils import format_hex_row, hex_dump
from ines.formats.report import describe_header, header_summary


def prg_row_label(prg_offset: int, prg_size: int) -> str:
    """CPU address for the first 32KB of PRG ROM, PRG offset past that."""
    if prg_offset < 0x8000:
        return f"${prg_to_cpu(prg_offset, prg_size):04X}"
    return f"PRG ${prg_offset:05X}"


def print_report(rom: RomReader, preview: int) -> None:
    """Print header fields and PRG/CHR previews."""
    image = rom.image
    print(f"Parsing ROM header: {format_hex_row(image.header)}")
    for line in describe_header(image.fields):
        print(line)

    if preview <= 0:
        return

    print(f"\nFirst {preview} bytes of PRG ROM:")
    for i, row in enumerate(hex_dump(image.prg_rom, 16, preview)):
        print(f"{prg_row_label(i * 16, len(image.prg_rom))}: {row}")

    print(f"\nFirst {preview} bytes of CHR ROM:")
    for row in hex_dump(image.chr_rom, 16, preview):
        print(row)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Inspect the header and contents of an iNES ROM file."
    )
    parser.add_argument("rom", type=Path, help="iNES ROM file (.nes)")
    parser.add_argument(
        "--preview",
        type=int,
        default=64,
        help="Bytes of PRG/CHR ROM to hex dump (default: 64, 0 to disable)",
    )
    parser.add_argument("--json", type=Path, help="Write header summary as JSON")
    parser.add_argument("--chr-png", type=Path, help="Render CHR ROM tiles to PNG")
    parser.add_argument(
        "--scale", type=int, default=2, help="Scale factor for --chr-png (default: 2)"
    )
    args = parser.parse_args(argv)

    print(f"Loading ROM: {args.rom}")
    try:
        rom = RomReader(str(args.rom))
    except (OSError, TruncatedInputError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_report(rom, args.preview)

    try:
        if args.json:
            with open(args.json, "w") as f:
                json.dump(header_summary(rom.image), f, indent=2)
            print(f"\nWrote summary to: {args.json}")

        if args.chr_png:
            # Pillow is only needed for this option
            from ines.rendering.pil_renderer import render_chr_sheet

            img = render_chr_sheet(rom.image.chr_rom, scale=args.scale)
            img.save(args.chr_png)
            print(f"Wrote CHR tiles ({img.width}x{img.height}) to: {args.chr_png}")
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
