"""
PIL Renderer

PIL-based rendering of CHR ROM into a PNG tile sheet, for comparing against
an emulator's PPU viewer.
"""

import numpy as np

try:
    from PIL import Image
except ImportError:
    raise ImportError("Pillow library required. Install with: pip install Pillow")

from ..core.chr_tile import TILE_SIZE, decode_tiles

# Palette index -> RGB, darkest for index 0
GRAYSCALE_PALETTE = [
    (0x00, 0x00, 0x00),
    (0x55, 0x55, 0x55),
    (0xAA, 0xAA, 0xAA),
    (0xFF, 0xFF, 0xFF),
]


def render_chr_sheet(
    chr_data: bytes,
    tiles_per_row: int = 16,
    scale: int = 1,
    palette: list[tuple[int, int, int]] | None = None,
) -> Image.Image:
    """
    Render every tile of a CHR buffer to a PIL Image.

    Tiles are laid out left to right, top to bottom. Empty CHR data (a
    CHR RAM cartridge) produces a single blank tile.

    Args:
        chr_data: CHR ROM bytes
        tiles_per_row: Tiles per row of the sheet (16 matches a pattern table)
        scale: Integer upscaling factor
        palette: Four RGB colors (default: grayscale)

    Returns:
        PIL RGB Image
    """
    if tiles_per_row <= 0 or scale <= 0:
        raise ValueError("tiles_per_row and scale must be positive")
    colors = np.array(palette or GRAYSCALE_PALETTE, dtype=np.uint8)
    if colors.shape != (4, 3):
        raise ValueError("palette must have exactly 4 RGB colors")

    tiles = decode_tiles(chr_data)
    num_tiles = max(len(tiles), 1)
    rows = (num_tiles + tiles_per_row - 1) // tiles_per_row

    sheet = np.zeros((rows * TILE_SIZE, tiles_per_row * TILE_SIZE), dtype=np.uint8)
    for idx, tile in enumerate(tiles):
        y = (idx // tiles_per_row) * TILE_SIZE
        x = (idx % tiles_per_row) * TILE_SIZE
        sheet[y : y + TILE_SIZE, x : x + TILE_SIZE] = tile

    img = Image.fromarray(colors[sheet])
    if scale > 1:
        img = img.resize((img.width * scale, img.height * scale), Image.NEAREST)
    return img
