"""Tests for edge compatibility and corner detection."""

from conftest import SAMPLE_CORNER_PRODUCT, SAMPLE_CORNERS, make_puzzle
from core import Orientation
from features.edges import RIGHT
from solvers.matching import (
    build_edge_index,
    corner_product,
    count_unmatched_edges,
    find_border_tiles,
    find_corner_tiles,
    find_matching_tile,
    tiles_compatible,
)


def test_sample_corners(sample_tiles):
    assert set(find_corner_tiles(sample_tiles)) == SAMPLE_CORNERS


def test_sample_corner_product(sample_tiles):
    assert corner_product(sample_tiles) == SAMPLE_CORNER_PRODUCT
    assert SAMPLE_CORNER_PRODUCT == 1951 * 3079 * 2971 * 1171


def test_sample_unmatched_counts(sample_tiles):
    counts = count_unmatched_edges(sample_tiles)
    assert counts[1427] == 0
    assert all(counts[i] == 2 for i in SAMPLE_CORNERS)
    assert set(find_border_tiles(sample_tiles)) == {2311, 2729, 2473, 1489}


def test_corner_detection_does_not_mutate(sample_tiles):
    find_corner_tiles(sample_tiles)
    for tile in sample_tiles:
        assert tile.orientation is Orientation.IDENTITY
        assert not tile.fixed
        assert tile.adjacent == {}


def test_corner_detection_ignores_orientation(sample_tiles):
    """Corners are a property of the tile set, not of how tiles are turned."""
    for i, tile in enumerate(sample_tiles):
        for _ in range(i % 4):
            tile.rotate()
        if i % 2:
            tile.mirror()
    assert set(find_corner_tiles(sample_tiles)) == SAMPLE_CORNERS


def test_random_puzzle_has_four_corners():
    tiles, _ = make_puzzle(4, seed=3)
    corners = find_corner_tiles(tiles)
    assert len(corners) == 4
    assert len(find_border_tiles(tiles)) == 8


def test_edge_index_keys_shared_by_neighbours(sample_tiles):
    """1951 and 2311 touch, so they share one canonical edge key."""
    index = build_edge_index(sample_tiles)
    shared = [ids for ids in index.values() if ids == {1951, 2311}]
    assert len(shared) == 1


def test_find_matching_tile_exact_and_flipped(sample_tiles):
    seed = next(t for t in sample_tiles if t.id == 1951)
    pool = [t for t in sample_tiles if t.id != 1951]
    target = seed.edges()[RIGHT].flipped()

    idx = find_matching_tile(pool, target)
    assert idx is not None
    assert pool[idx].id == 2311


def test_fixed_tile_needs_exact_edge(sample_tiles):
    """A fixed tile that only carries the reversed edge is not a match."""
    tile = sample_tiles[0]
    target = tile.edges()[RIGHT].flipped()
    assert target not in tile.edges()
    assert find_matching_tile([tile], target) == 0
    tile.fix()
    assert find_matching_tile([tile], target) is None


def test_tiles_compatible(sample_tiles):
    a = next(t for t in sample_tiles if t.id == 1951)
    b = next(t for t in sample_tiles if t.id == 2311)
    assert any(tiles_compatible(a, sa, b, sb) for sa in range(4) for sb in range(4))
    c = next(t for t in sample_tiles if t.id == 1171)
    assert not any(tiles_compatible(a, sa, c, sb) for sa in range(4) for sb in range(4))
