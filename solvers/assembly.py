"""
Tile assembly by edge matching.

Assembly grows outward from a seed tile. The seed is fixed, and for each
of its sides the pending pool is searched for the tile that presents the
reversed seed edge. That tile is mirrored/rotated until the matching edge
faces the seed, fixed, and linked both ways. Tiles that still have open
sides go back on top of the pool so they are expanded next.

The pool is a stack: seeds are popped from the end and partially linked
tiles are pushed back on the end. For an input with exactly one tiling
the result is the same whatever the seed.
"""

from typing import Dict, List, Sequence

from core.errors import AssemblyInconsistencyError
from core.tile import Tile
from features.edges import SIDE_NAMES, SIDES, opposite_side
from .matching import find_matching_tile


MAX_DEGREE = len(SIDES)

TileArena = Dict[int, Tile]


def orient_to_match(tile: Tile, side: int, target, seed_id: int) -> None:
    """
    Mirror/rotate an unfixed ``tile`` until ``tile.edges()[side] == target``.

    At most one mirror and three quarter turns are applied.

    Raises:
        AssemblyInconsistencyError: If no orientation presents ``target`` on ``side``
    """
    if target not in tile.edges():
        tile.mirror()

    for _ in range(MAX_DEGREE):
        if tile.edges()[side] == target:
            return
        tile.rotate()

    raise AssemblyInconsistencyError(seed_id, tile.id, side)


def expand_seed(seed: Tile, pool: List[Tile], done: List[Tile],
                verbose: bool = False) -> None:
    """
    Link every side of ``seed`` to its neighbour from ``pool``.

    Matched neighbours are moved to ``done`` when all four sides are
    linked, otherwise pushed back on ``pool``.
    """
    for side, edge in zip(SIDES, seed.edges()):
        target = edge.flipped()
        idx = find_matching_tile(pool, target)
        if idx is None:
            continue

        candidate = pool.pop(idx)
        facing = opposite_side(side)
        if not candidate.fixed:
            orient_to_match(candidate, facing, target, seed.id)
            candidate.fix()

        if candidate.edges()[facing] != target:
            raise AssemblyInconsistencyError(
                seed.id, candidate.id, side,
                f"Fixed tile {candidate.id} does not face tile {seed.id} "
                f"with its {SIDE_NAMES[facing]} edge")

        seed.link(side, candidate.id)
        candidate.link(facing, seed.id)

        if verbose:
            print(f"  {seed.id} {SIDE_NAMES[side]:<6} -> {candidate.id} "
                  f"({candidate.orientation.name})")

        if candidate.degree >= MAX_DEGREE:
            done.append(candidate)
        else:
            pool.append(candidate)


def assemble(tiles: Sequence[Tile], verbose: bool = False) -> TileArena:
    """
    Orient and link every tile to its neighbours.

    Tiles are mutated in place: orientation, ``fixed`` and ``adjacent``.

    Args:
        tiles: Tiles of a puzzle with exactly one consistent tiling
        verbose: Print each link as it is made

    Returns:
        Arena mapping tile id -> Tile

    Raises:
        AssemblyInconsistencyError: If a matched tile cannot be oriented to fit
    """
    pool: List[Tile] = list(tiles)
    done: List[Tile] = []

    if verbose:
        print(f"\n[Assembly] {len(pool)} tiles")

    while pool:
        seed = pool.pop()
        seed.fix()
        expand_seed(seed, pool, done, verbose)
        # All four sides probed: open sides are puzzle border.
        done.append(seed)

    if verbose:
        print(f"  Linked {sum(t.degree for t in done) // 2} tile pairs")

    return {tile.id: tile for tile in done}
