"""
Edge compatibility between tiles.

Border classification is a global property of the tile set: an edge is
unmatched when no other tile presents the same signature or its reversal.
It does not depend on orientation or on assembly order.
"""

from collections import defaultdict
from math import prod
from typing import Dict, List, Optional, Sequence, Set, Tuple

from core.tile import Tile
from features.edges import EdgeSignature


EdgeKey = Tuple[int, int]


def tiles_compatible(a: Tile, side_a: int, b: Tile, side_b: int) -> bool:
    """True if side ``side_a`` of ``a`` can touch side ``side_b`` of ``b`` in some orientation."""
    return a.edges()[side_a].compatible_with(b.edges()[side_b])


def build_edge_index(tiles: Sequence[Tile]) -> Dict[EdgeKey, Set[int]]:
    """Map each canonical edge key to the ids of the tiles presenting it."""
    index: Dict[EdgeKey, Set[int]] = defaultdict(set)
    for tile in tiles:
        for edge in tile.edges():
            index[edge.canonical_key].add(tile.id)
    return index


def count_unmatched_edges(tiles: Sequence[Tile]) -> Dict[int, int]:
    """
    Number of edges of each tile that match no edge of any other tile.

    Returns:
        Dict mapping tile id -> unmatched edge count (0..4)
    """
    index = build_edge_index(tiles)
    counts = {}
    for tile in tiles:
        counts[tile.id] = sum(
            1 for edge in tile.edges()
            if not (index[edge.canonical_key] - {tile.id})
        )
    return counts


def find_corner_tiles(tiles: Sequence[Tile]) -> List[int]:
    """Ids of tiles with at least two unmatched edges, in input order."""
    counts = count_unmatched_edges(tiles)
    return [tile.id for tile in tiles if counts[tile.id] >= 2]


def find_border_tiles(tiles: Sequence[Tile]) -> List[int]:
    """Ids of non-corner tiles on the puzzle border (exactly one unmatched edge)."""
    counts = count_unmatched_edges(tiles)
    return [tile.id for tile in tiles if counts[tile.id] == 1]


def corner_product(tiles: Sequence[Tile]) -> int:
    """Product of the corner tile ids."""
    return prod(find_corner_tiles(tiles))


def find_matching_tile(pool: Sequence[Tile], target: EdgeSignature) -> Optional[int]:
    """
    Position of the first pool tile able to present ``target``.

    A fixed tile must already carry ``target`` on one of its edges; an
    unfixed tile may instead carry its reversal, which a mirror turns into
    ``target``.
    """
    flipped = target.flipped()
    for idx, tile in enumerate(pool):
        edges = tile.edges()
        if target in edges:
            return idx
        if not tile.fixed and flipped in edges:
            return idx
    return None
