"""Shared fixtures: the canonical 3x3 puzzle of 10x10 tiles."""

import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
os.environ.setdefault("MPLBACKEND", "Agg")

from core import parse_tiles  # noqa: E402


SAMPLE_TILES = """\
Tile 2311:
..##.#..#.
##..#.....
#...##..#.
####.#...#
##.##.###.
##...#.###
.#.#.#..##
..#....#..
###...#.#.
..###..###

Tile 1951:
#.##...##.
#.####...#
.....#..##
#...######
.##.#....#
.###.#####
###.##.##.
.###....#.
..#.#..#.#
#...##.#..

Tile 1171:
####...##.
#..##.#..#
##.#..#.#.
.###.####.
..###.####
.##....##.
.#...####.
#.##.####.
####..#...
.....##...

Tile 1427:
###.##.#..
.#..#.##..
.#.##.#..#
#.#.#.##.#
....#...##
...##..##.
...#.#####
.#.####.#.
..#..###.#
..##.#..#.

Tile 1489:
##.#.#....
..##...#..
.##..##...
..#...#...
#####...#.
#..#.#.#.#
...#.#.#..
##.#...##.
..##.##.##
###.##.#..

Tile 2473:
#....####.
#..#.##...
#.##..#...
######.#.#
.#...#.#.#
.#########
.###.#..#.
########.#
##...##.#.
..###.#.#.

Tile 2971:
..#.#....#
#...###...
#.#.###...
##.##..#..
.#####..##
.#..####.#
#..#.#..#.
..####.###
..#.#.###.
...#.#.#.#

Tile 2729:
...#.#.#.#
####.#....
..#.#.....
....#..#.#
.##..##.#.
.#.####...
####.#.#..
##.####...
##..#.##..
#.##...##.

Tile 3079:
#.#.#####.
.#..######
..#.......
######....
####.#..#.
.#...#.##.
#.#####.##
..#.###...
..#.......
..#.###...
"""

SAMPLE_CORNERS = {1951, 3079, 2971, 1171}
SAMPLE_CORNER_PRODUCT = 20899048083289
SAMPLE_ROUGHNESS = 273


@pytest.fixture
def sample_text():
    return SAMPLE_TILES


@pytest.fixture
def sample_tiles():
    return parse_tiles(SAMPLE_TILES)


def make_puzzle(n, size=24, seed=0):
    """
    Cut a random image into an n x n puzzle of scrambled tiles.

    Neighbouring tiles share their touching border line, as in the block
    format. Each tile is given a random orientation and the order is
    shuffled.

    Returns:
        (tiles, expected_image) where expected_image is the border-stripped
        composite in the original orientation
    """
    import numpy as np
    from core import Orientation, Tile, apply_orientation

    rng = np.random.default_rng(seed)
    step = size - 1
    while True:
        picture = rng.random((n * step + 1, n * step + 1)) < 0.5
        originals = [[picture[r * step:r * step + size, c * step:c * step + size]
                      for c in range(n)] for r in range(n)]
        if _edges_unambiguous(originals, n):
            break
    expected = np.block([[tile[1:-1, 1:-1] for tile in row] for row in originals])

    orientations = list(Orientation)
    tiles = []
    for idx, pixels in enumerate(p for row in originals for p in row):
        orientation = orientations[int(rng.integers(len(orientations)))]
        tiles.append(Tile(1000 + idx, apply_orientation(pixels, orientation)))
    order = rng.permutation(len(tiles))
    return [tiles[i] for i in order], expected


def _edges_unambiguous(originals, n):
    """Every seam is shared by exactly its two tiles and reads differently each way."""
    from core import Tile

    keys = set()
    for row in originals:
        for pixels in row:
            for edge in Tile(0, pixels).edges():
                if edge == edge.flipped():
                    return False
                keys.add(edge.canonical_key)
    return len(keys) == 2 * n * (n - 1) + 4 * n
