#!/usr/bin/env python3
"""
iNES ROM Generator

Writes a minimal mapper 0 ROM to disk and optionally opens it in an emulator.

By default the PRG ROM holds a short program that plays a tone through the
APU; use --payload or --payload-file to supply your own machine code, which
is placed at $8000 (the RESET vector).
"""

import argparse
import subprocess
import sys
from pathlib import Path

from ines.core.rom_writer import DEFAULT_PAYLOAD, RomWriter
from ines.formats.hex_utils import parse_hex_row


def load_payload(args: argparse.Namespace) -> bytes:
    """Resolve the payload from --payload / --payload-file."""
    if args.payload is not None:
        return bytes(parse_hex_row(args.payload))
    if args.payload_file is not None:
        with open(args.payload_file, "rb") as f:
            return f.read()
    return DEFAULT_PAYLOAD


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate a minimal iNES ROM (mapper 0)."
    )
    parser.add_argument("output", type=Path, help="Output ROM file (.nes)")
    parser.add_argument(
        "--prg-banks", type=int, default=2, help="16KB PRG ROM banks (default: 2)"
    )
    parser.add_argument(
        "--chr-banks", type=int, default=1, help="8KB CHR ROM banks (default: 1)"
    )
    payload_group = parser.add_mutually_exclusive_group()
    payload_group.add_argument(
        "--payload", help='Program bytes as hex, e.g. "A9 01 4C 00 80"'
    )
    payload_group.add_argument(
        "--payload-file", type=Path, help="Binary file of program bytes"
    )
    parser.add_argument("--emulator", help="Emulator executable to launch with the ROM")
    args = parser.parse_args(argv)

    try:
        payload = load_payload(args)
        rom_data = RomWriter(str(args.output)).write_rom(
            args.prg_banks, args.chr_banks, payload
        )
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(
        f"Wrote {len(rom_data)} bytes to {args.output} "
        f"({args.prg_banks} PRG, {args.chr_banks} CHR banks, "
        f"{len(payload)} byte payload)"
    )

    if args.emulator:
        print(f"Launching: {args.emulator} {args.output}")
        try:
            subprocess.Popen([args.emulator, str(args.output)])
        except OSError as e:
            print(f"Error: could not launch emulator: {e}", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
