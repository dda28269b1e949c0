"""Visualization utilities for assembled tile images."""
from .display import (
    render_image,
    render_result,
    save_image,
    save_result,
    display_solution,
    display_tile_grid
)
