"""Unit tests for CHR tile decoding."""

import numpy as np
import pytest

from ines.core.chr_tile import BYTES_PER_TILE, decode_tile, decode_tiles

# Every row is colors 0,0,1,1,2,2,3,3 (plane 0 = 0x33, plane 1 = 0x0F)
STRIPED_TILE = bytes([0x33] * 8 + [0x0F] * 8)
STRIPED_ROW = [0, 0, 1, 1, 2, 2, 3, 3]


class TestDecodeTile:
    """Tests for decode_tile()."""

    def test_blank_tile(self):
        assert decode_tile(bytes(16)) == [[0] * 8 for _ in range(8)]

    def test_striped_tile(self):
        pixels = decode_tile(STRIPED_TILE)
        assert all(row == STRIPED_ROW for row in pixels)

    def test_msb_is_leftmost(self):
        tile = bytes([0x80] + [0] * 15)
        pixels = decode_tile(tile)
        assert pixels[0][0] == 1
        assert sum(map(sum, pixels)) == 1

    def test_tile_index(self):
        chr_data = bytes(16) + STRIPED_TILE
        assert decode_tile(chr_data, 1)[0] == STRIPED_ROW

    def test_index_out_of_range(self):
        with pytest.raises(IndexError):
            decode_tile(bytes(16), 1)


class TestDecodeTiles:
    """Tests for decode_tiles()."""

    def test_shape(self):
        tiles = decode_tiles(bytes(8192))
        assert tiles.shape == (512, 8, 8)
        assert tiles.dtype == np.uint8

    def test_empty(self):
        assert decode_tiles(b"").shape == (0, 8, 8)

    def test_partial_tile_ignored(self):
        assert decode_tiles(bytes(BYTES_PER_TILE + 5)).shape == (1, 8, 8)

    def test_matches_single_tile_decoder(self):
        chr_data = bytes(range(256)) * 2
        tiles = decode_tiles(chr_data)
        for idx in range(len(chr_data) // BYTES_PER_TILE):
            assert tiles[idx].tolist() == decode_tile(chr_data, idx)
