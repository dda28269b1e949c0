"""
Grid reconstruction from an assembled adjacency graph.

The top-left tile is the only one with neither a top nor a left
neighbour. Rows follow ``right`` links; successive rows follow the
``bottom`` link of each row's first tile.
"""

import math
from typing import Dict, List, Mapping, Tuple

from core.errors import IncompleteAssemblyError
from core.tile import Tile
from features.edges import BOTTOM, LEFT, RIGHT, SIDE_NAMES, TOP


TileGrid = List[List[Tile]]


def find_top_left(arena: Mapping[int, Tile]) -> Tile:
    """The unique tile with no top and no left neighbour."""
    candidates = [tile for tile in arena.values()
                  if TOP not in tile.adjacent and LEFT not in tile.adjacent]
    if len(candidates) != 1:
        ids = sorted(tile.id for tile in candidates)
        raise IncompleteAssemblyError(
            f"Expected exactly one top-left tile, found {len(candidates)}: {ids}")
    return candidates[0]


def _follow(arena: Mapping[int, Tile], tile: Tile, side: int) -> Tile:
    neighbor_id = tile.adjacent[side]
    if neighbor_id not in arena:
        raise IncompleteAssemblyError(
            f"Tile {tile.id} links {SIDE_NAMES[side]} to unknown tile {neighbor_id}")
    return arena[neighbor_id]


def reconstruct_grid(arena: Mapping[int, Tile]) -> TileGrid:
    """
    Lay the assembled tiles out row-major.

    Args:
        arena: tile id -> assembled Tile

    Returns:
        Square list of rows of tiles

    Raises:
        IncompleteAssemblyError: If the links do not form a complete square lattice
    """
    if not arena:
        raise IncompleteAssemblyError("No tiles to arrange")

    side_len = math.isqrt(len(arena))
    if side_len * side_len != len(arena):
        raise IncompleteAssemblyError(f"Number of tiles ({len(arena)}) is not a perfect square")

    grid: TileGrid = []
    row_start = find_top_left(arena)
    seen = set()
    while True:
        row = [row_start]
        current = row_start
        while RIGHT in current.adjacent:
            current = _follow(arena, current, RIGHT)
            row.append(current)
            if len(row) > side_len:
                raise IncompleteAssemblyError(f"Row {len(grid)} is longer than {side_len} tiles")
        grid.append(row)
        seen.update(tile.id for tile in row)

        if BOTTOM not in row_start.adjacent:
            break
        row_start = _follow(arena, row_start, BOTTOM)
        if len(grid) >= side_len:
            raise IncompleteAssemblyError(f"More than {side_len} rows")

    if len(grid) != side_len or any(len(row) != side_len for row in grid):
        shape = [len(row) for row in grid]
        raise IncompleteAssemblyError(
            f"Layout is not {side_len}x{side_len}: row lengths {shape}")
    if len(seen) != len(arena):
        raise IncompleteAssemblyError(
            f"Layout places {len(seen)} distinct tiles out of {len(arena)}")

    return grid


def validate_grid(grid: TileGrid) -> None:
    """
    Check that every tile's links agree with its position in ``grid``.

    Interior tiles must have 4 links, border tiles 3 and corners 2.
    """
    n = len(grid)
    offsets = {TOP: (-1, 0), RIGHT: (0, 1), BOTTOM: (1, 0), LEFT: (0, -1)}
    for r, row in enumerate(grid):
        for c, tile in enumerate(row):
            expected = {}
            for side, (dr, dc) in offsets.items():
                nr, nc = r + dr, c + dc
                if 0 <= nr < n and 0 <= nc < n:
                    expected[side] = grid[nr][nc].id
            if tile.adjacent != expected:
                raise IncompleteAssemblyError(
                    f"Tile {tile.id} at ({r}, {c}) has links {tile.adjacent}, expected {expected}")


def grid_ids(grid: TileGrid) -> List[List[int]]:
    return [[tile.id for tile in row] for row in grid]


def grid_to_board(grid: TileGrid) -> Dict[Tuple[int, int], int]:
    """Convert a grid to a ``{(row, col): tile_id}`` board."""
    return {(r, c): tile.id for r, row in enumerate(grid) for c, tile in enumerate(row)}
