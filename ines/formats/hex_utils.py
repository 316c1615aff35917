"""
Hex String Utilities

Utilities for parsing hex payloads given on the command line and formatting
hex previews of ROM regions.
"""

from typing import List


def parse_hex_row(row_str: str) -> List[int]:
    """
    Parse space-separated hex string to list of integers.

    Args:
        row_str: Space-separated hex string (e.g., "01 02 A3 FF")

    Returns:
        List of integer values

    Raises:
        ValueError: If a token is not a hex byte

    Example:
        >>> parse_hex_row("01 02 A3 FF")
        [1, 2, 163, 255]
    """
    values = [int(x, 16) for x in row_str.split()]
    for value in values:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Not a byte: {value:X}")
    return values


def format_hex_row(row: bytes | List[int]) -> str:
    """
    Format bytes as space-separated hex string.

    Example:
        >>> format_hex_row([1, 2, 163, 255])
        '01 02 A3 FF'
    """
    return " ".join(f"{b:02X}" for b in row)


def hex_dump(
    data: bytes, bytes_per_line: int = 16, limit: int | None = None
) -> List[str]:
    """
    Format the first bytes of a buffer as hex rows.

    Args:
        data: Bytes to dump
        bytes_per_line: Bytes per output row
        limit: Stop after this many bytes (default: whole buffer)

    Returns:
        List of space-separated hex rows
    """
    if bytes_per_line <= 0:
        raise ValueError("bytes_per_line must be positive")
    length = len(data) if limit is None else min(limit, len(data))
    return [
        format_hex_row(data[i : min(i + bytes_per_line, length)])
        for i in range(0, length, bytes_per_line)
    ]
