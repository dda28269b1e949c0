"""Display utilities for assembled tile images."""

import cv2
import numpy as np
import matplotlib.pyplot as plt
from typing import Optional, Tuple
from pathlib import Path

from features.motif import motif_mask
from solvers.grid import TileGrid


# BGR colours
OFF_COLOR = (96, 48, 16)
ON_COLOR = (230, 200, 160)
MOTIF_COLOR = (40, 200, 40)


def render_image(image: np.ndarray, mask: Optional[np.ndarray] = None,
                 scale: int = 8) -> np.ndarray:
    """
    Render a boolean image as a BGR picture.

    Args:
        image: 2-D boolean pixel grid
        mask: Optional boolean mask of motif pixels to highlight
        scale: Output pixels per image pixel

    Returns:
        uint8 BGR image of shape (H*scale, W*scale, 3)
    """
    grid = np.asarray(image, dtype=bool)
    out = np.empty(grid.shape + (3,), dtype=np.uint8)
    out[...] = OFF_COLOR
    out[grid] = ON_COLOR

    if mask is not None:
        mask = np.asarray(mask, dtype=bool)
        if mask.shape != grid.shape:
            raise ValueError(f"Mask shape {mask.shape} doesn't match image {grid.shape}")
        out[mask] = MOTIF_COLOR

    if scale > 1 and grid.size:
        h, w = grid.shape
        out = cv2.resize(out, (w * scale, h * scale), interpolation=cv2.INTER_NEAREST)
    return out


def render_result(result, motif, scale: int = 8) -> np.ndarray:
    """Render a SolveResult with its motif occurrences highlighted."""
    mask = motif_mask(result.image.shape, motif, result.motif_anchors)
    return render_image(result.image, mask, scale)


def save_image(image: np.ndarray, output_path: str, mask: Optional[np.ndarray] = None,
               scale: int = 8) -> Path:
    """
    Render and write an image to disk.

    Returns:
        Path written
    """
    output_dir = Path(output_path).parent
    if output_dir and str(output_dir) != '.':
        output_dir.mkdir(parents=True, exist_ok=True)

    rendered = render_image(image, mask, scale)
    if not cv2.imwrite(str(output_path), rendered):
        raise ValueError(f"Could not write image: {output_path}")
    return Path(output_path)


def save_result(result, motif, output_path: str, scale: int = 8) -> Path:
    """Write a SolveResult to disk with its motif occurrences highlighted."""
    mask = motif_mask(result.image.shape, motif, result.motif_anchors)
    return save_image(result.image, output_path, mask, scale)


def display_solution(result, motif, figsize: Tuple[int, int] = (8, 8)):
    """Show the oriented composite image with the motif highlighted."""
    rendered = render_result(result, motif, scale=1)

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(cv2.cvtColor(rendered, cv2.COLOR_BGR2RGB), interpolation='nearest')
    ax.set_title(f"{len(result.motif_anchors)} x {motif.name} "
                 f"({result.orientation.name}) - roughness {result.roughness}")
    ax.axis('off')

    plt.tight_layout()
    plt.show()


def display_tile_grid(grid: TileGrid, figsize: Optional[tuple] = None):
    """
    Display assembled tiles in their grid layout, labelled by id.

    Args:
        grid: Reconstructed tile grid
        figsize: Figure size
    """
    grid_size = len(grid)
    if figsize is None:
        figsize = (grid_size * 2, grid_size * 2)

    fig, axes = plt.subplots(grid_size, grid_size, figsize=figsize)
    axes = np.array(axes).reshape(grid_size, grid_size)

    for r, row in enumerate(grid):
        for c, tile in enumerate(row):
            ax = axes[r, c]
            ax.imshow(tile.pixels, cmap='gray', interpolation='nearest')
            ax.set_title(f"{tile.id}", fontsize=8)
            ax.axis('off')

    plt.tight_layout()
    plt.show()
