"""
Tile puzzle solvers.

Usage:
    from core import parse_tiles
    from solvers import assemble, reconstruct_grid

    tiles = parse_tiles(text)
    arena = assemble(tiles)
    grid = reconstruct_grid(arena)
"""
from .matching import (
    build_edge_index,
    count_unmatched_edges,
    find_corner_tiles,
    find_border_tiles,
    find_matching_tile,
    corner_product,
    tiles_compatible
)
from .assembly import assemble, expand_seed, orient_to_match
from .grid import (
    find_top_left,
    reconstruct_grid,
    validate_grid,
    grid_ids,
    grid_to_board
)
