"""
Solver Pipeline

Orchestrates the full run on a set of tiles:
1. Classify edges -> corner tiles and their id product
2. Assemble tiles into an oriented adjacency graph
3. Reconstruct the grid and compose the border-stripped image
4. Search the image for the motif -> roughness
"""

import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from core.errors import IncompleteAssemblyError
from core.tile import Tile
from core.transforms import Orientation
from features.motif import SEA_MONSTER, Motif, find_motif_orientation, roughness_score, water_roughness
from solvers.assembly import assemble
from solvers.grid import TileGrid, grid_to_board, reconstruct_grid, validate_grid
from solvers.matching import corner_product, find_corner_tiles
from .config import SolverConfig


@dataclass
class SolveResult:
    """Everything produced by a full solver run."""
    corner_ids: List[int]
    corner_product: int
    board: Dict[Tuple[int, int], int]
    image: np.ndarray
    orientation: Orientation
    motif_anchors: List[Tuple[int, int]] = field(default_factory=list)
    roughness: int = 0
    elapsed: float = 0.0

    @property
    def grid_size(self) -> int:
        return int(round(len(self.board) ** 0.5))

    @property
    def arrangement(self) -> Tuple[int, ...]:
        """Tile ids in row-major order."""
        n = self.grid_size
        return tuple(self.board[(r, c)] for r in range(n) for c in range(n))


def strip_border(pixels: np.ndarray) -> np.ndarray:
    """Drop the outermost ring of a tile: N x N -> (N-2) x (N-2)."""
    return np.asarray(pixels)[1:-1, 1:-1]


def compose_image(grid: TileGrid) -> np.ndarray:
    """
    Concatenate the border-stripped tiles of ``grid`` into one image.

    Raises:
        IncompleteAssemblyError: If the result is not square
    """
    image = np.block([[strip_border(tile.pixels) for tile in row] for row in grid])
    if image.ndim != 2 or image.shape[0] != image.shape[1]:
        raise IncompleteAssemblyError(f"Composite image is not square: {image.shape}")
    return image.astype(bool)


def assemble_image(tiles: Sequence[Tile], verbose: bool = False) -> Tuple[TileGrid, np.ndarray]:
    """Assemble copies of ``tiles`` and return the grid and composite image."""
    arena = assemble([tile.copy() for tile in tiles], verbose=verbose)
    grid = reconstruct_grid(arena)
    validate_grid(grid)
    return grid, compose_image(grid)


def solve_part_one(tiles: Sequence[Tile]) -> int:
    """Product of the corner tile ids."""
    return corner_product(tiles)


def solve_part_two(tiles: Sequence[Tile], motif: Motif = SEA_MONSTER) -> int:
    """Roughness of the assembled image."""
    _, image = assemble_image(tiles)
    return water_roughness(image, motif)


def solve_tiles(tiles: Sequence[Tile], config: Optional[SolverConfig] = None) -> SolveResult:
    """
    Complete pipeline: corners -> assembly -> composite -> motif search.

    The caller's tiles are not mutated.

    Args:
        tiles: Parsed tiles
        config: Solver configuration (defaults to SolverConfig())

    Returns:
        SolveResult
    """
    if config is None:
        config = SolverConfig()
    verbose = config.verbose
    start_time = time.time()

    if verbose:
        print("=" * 60)
        print(f"TILE ASSEMBLY ({len(tiles)} tiles)")
        print("=" * 60)
        print("\n[Phase 1] Classifying edges...")

    corner_ids = find_corner_tiles(tiles)
    product = corner_product(tiles)
    if verbose:
        print(f"  Corners: {corner_ids}")
        print(f"  Corner product: {product}")
        print("\n[Phase 2] Assembling tiles...")

    grid, image = assemble_image(tiles, verbose=verbose)
    if verbose:
        print(f"  Grid: {len(grid)}x{len(grid)}, image: {image.shape[0]}x{image.shape[1]}")
        print(f"\n[Phase 3] Searching for {config.motif.name}...")

    search = find_motif_orientation(image, config.motif, verbose=verbose)
    roughness = roughness_score(search, config.motif)

    elapsed = time.time() - start_time
    if verbose:
        print(f"  Found {search.count} in orientation {search.orientation.name}")
        print("\n" + "=" * 60)
        print("SOLUTION COMPLETE")
        print("=" * 60)
        print(f"Roughness: {roughness}")
        print(f"Time: {elapsed:.3f}s")

    return SolveResult(
        corner_ids=corner_ids,
        corner_product=product,
        board=grid_to_board(grid),
        image=search.image,
        orientation=search.orientation,
        motif_anchors=search.anchors,
        roughness=roughness,
        elapsed=elapsed
    )
