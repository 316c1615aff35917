"""
CHR Tile Decoding

NES CHR format tile decoding for CHR ROM previews.
"""

from typing import List

import numpy as np

# CHR format constants
TILE_SIZE = 8  # 8x8 pixels per tile
BYTES_PER_TILE = 16  # 16 bytes per tile (8 bytes per bitplane)


def decode_tile(tile_data: bytes, tile_idx: int = 0) -> List[List[int]]:
    """
    Decode a single 8x8 NES CHR tile into 2-bit pixel values.

    NES tiles use two bitplanes to encode 4-color (2-bit) pixel data.
    Each tile is 16 bytes: 8 bytes for plane 0 (low bit), 8 bytes for plane 1 (high bit).

    Args:
        tile_data: Either a full CHR ROM or a single 16-byte tile
        tile_idx: Tile index if tile_data is a full CHR ROM (default: 0)

    Returns:
        8x8 array of pixel values (0-3), where each value is a palette index

    Raises:
        IndexError: If tile_idx is past the end of tile_data
    """
    offset = tile_idx * BYTES_PER_TILE
    if tile_idx < 0 or offset + BYTES_PER_TILE > len(tile_data):
        raise IndexError(f"Tile {tile_idx} out of range")

    plane0 = tile_data[offset : offset + 8]  # Low bit plane
    plane1 = tile_data[offset + 8 : offset + 16]  # High bit plane

    pixels = []
    for row in range(8):
        row_pixels = []
        for col in range(8):
            # MSB is the leftmost pixel
            bit_mask = 0x80 >> col
            low_bit = 1 if (plane0[row] & bit_mask) else 0
            high_bit = 1 if (plane1[row] & bit_mask) else 0
            row_pixels.append(low_bit | (high_bit << 1))
        pixels.append(row_pixels)

    return pixels


def decode_tiles(chr_data: bytes) -> np.ndarray:
    """
    Decode every whole tile in a CHR buffer.

    Args:
        chr_data: CHR ROM bytes (a trailing partial tile is ignored)

    Returns:
        uint8 array of shape (num_tiles, 8, 8) with pixel values 0-3
    """
    num_tiles = len(chr_data) // BYTES_PER_TILE
    if num_tiles == 0:
        return np.zeros((0, TILE_SIZE, TILE_SIZE), dtype=np.uint8)

    raw = np.frombuffer(chr_data, dtype=np.uint8, count=num_tiles * BYTES_PER_TILE)
    planes = raw.reshape(num_tiles, 2, TILE_SIZE)
    bits = np.unpackbits(planes, axis=2)  # (tiles, plane, row*8) MSB first
    bits = bits.reshape(num_tiles, 2, TILE_SIZE, TILE_SIZE)
    return (bits[:, 0] | (bits[:, 1] << 1)).astype(np.uint8)
