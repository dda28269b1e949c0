"""Tests for the Tile model and edge signatures."""

import numpy as np
import pytest

from core import MalformedTileError, Orientation, Tile, TileFixedError
from features.edges import (
    BOTTOM,
    LEFT,
    RIGHT,
    TOP,
    EdgeSignature,
    encode_edge,
    opposite_side,
    signatures_compatible,
)


def tile_2311(sample_tiles):
    return next(t for t in sample_tiles if t.id == 2311)


def test_edges_read_clockwise(sample_tiles):
    """Edges of tile 2311 in (top, right, bottom, left) order."""
    edges = tile_2311(sample_tiles).edges()
    assert [str(e) for e in edges] == [
        "..##.#..#.",
        "...#.##..#",
        "###..###..",
        ".#..#####.",
    ]


def test_encode_edge_msb_first():
    assert encode_edge([True, False, False]) == EdgeSignature(4, 3)
    assert encode_edge([False, False, True]) == EdgeSignature(1, 3)


def test_encode_edge_rejects_empty():
    with pytest.raises(ValueError):
        encode_edge([])


def test_flipped_reverses_bits():
    sig = encode_edge([True, True, False, True, False])
    assert str(sig.flipped()) == str(sig)[::-1]
    assert sig.flipped().flipped() == sig


def test_compatibility_is_symmetric():
    a = encode_edge([True, True, False, False])
    b = a.flipped()
    c = encode_edge([True, False, True, False])
    assert signatures_compatible(a, b) and signatures_compatible(b, a)
    assert signatures_compatible(a, a)
    assert not signatures_compatible(a, c)


def test_canonical_key_shared_with_reversal():
    sig = encode_edge([True, False, False, False])
    assert sig.canonical_key == sig.flipped().canonical_key


def test_opposite_side():
    assert opposite_side(TOP) == BOTTOM
    assert opposite_side(RIGHT) == LEFT
    assert opposite_side(BOTTOM) == TOP
    assert opposite_side(LEFT) == RIGHT


def test_mirror_twice_restores_pixels(sample_tiles):
    tile = tile_2311(sample_tiles)
    original = tile.pixels.copy()
    tile.mirror()
    assert not np.array_equal(tile.pixels, original)
    tile.mirror()
    assert np.array_equal(tile.pixels, original)
    assert tile.orientation is Orientation.IDENTITY


def test_rotate_four_times_restores_pixels(sample_tiles):
    tile = tile_2311(sample_tiles)
    original = tile.pixels.copy()
    for _ in range(4):
        tile.rotate()
    assert np.array_equal(tile.pixels, original)


def test_rotate_moves_edges_clockwise(sample_tiles):
    """After a clockwise turn the old left edge is on top."""
    tile = tile_2311(sample_tiles)
    before = tile.edges()
    tile.rotate()
    after = tile.edges()
    assert after[TOP] == before[LEFT]
    assert after[RIGHT] == before[TOP]


def test_mirror_reverses_edges(sample_tiles):
    tile = tile_2311(sample_tiles)
    before = tile.edges()
    tile.mirror()
    after = tile.edges()
    assert after[TOP] == before[TOP].flipped()
    assert after[LEFT] == before[RIGHT].flipped()


def test_fixed_tile_cannot_move(sample_tiles):
    tile = tile_2311(sample_tiles)
    tile.fix()
    with pytest.raises(TileFixedError):
        tile.rotate()
    with pytest.raises(TileFixedError):
        tile.mirror()


def test_pixels_are_read_only(sample_tiles):
    tile = tile_2311(sample_tiles)
    with pytest.raises(ValueError):
        tile.pixels[0, 0] = True


def test_copy_is_independent(sample_tiles):
    tile = tile_2311(sample_tiles)
    clone = tile.copy()
    clone.rotate()
    clone.link(TOP, 42)
    clone.fix()
    assert tile.orientation is Orientation.IDENTITY
    assert tile.adjacent == {}
    assert not tile.fixed


def test_non_square_tile_rejected():
    with pytest.raises(MalformedTileError):
        Tile(1, np.zeros((3, 4), dtype=bool))


def test_link_rejects_unknown_side():
    tile = Tile(1, np.zeros((3, 3), dtype=bool))
    with pytest.raises(ValueError):
        tile.link(7, 2)
