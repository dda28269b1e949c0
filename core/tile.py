"""Tile model: a square pixel grid with an orientation and adjacency map."""

from typing import Dict, Tuple

import numpy as np

from features.edges import SIDES, EdgeSignature, edge_signatures
from .errors import MalformedTileError, TileFixedError
from .transforms import Orientation, apply_orientation


class Tile:
    """
    A single square tile.

    The parsed grid is stored read-only; the current view is derived from
    ``orientation``. Once ``fix()`` is called the orientation is locked.

    Attributes:
        id: Unique tile identifier
        orientation: Current symmetry state
        adjacent: side index -> neighbouring tile id
        fixed: True once the tile is placed in the assembly
    """

    def __init__(self, tile_id: int, pixels, orientation: Orientation = Orientation.IDENTITY):
        grid = np.array(pixels, dtype=bool)
        if grid.ndim != 2 or grid.size == 0:
            raise MalformedTileError(f"pixel grid must be 2-D and non-empty, got shape {grid.shape}",
                                     tile_id)
        if grid.shape[0] != grid.shape[1]:
            raise MalformedTileError(f"pixel grid must be square, got {grid.shape[0]}x{grid.shape[1]}",
                                     tile_id)
        grid.setflags(write=False)

        self.id: int = tile_id
        self._grid: np.ndarray = grid
        self.orientation: Orientation = orientation
        self.adjacent: Dict[int, int] = {}
        self.fixed: bool = False
        self._edge_cache: Dict[Orientation, Tuple[EdgeSignature, ...]] = {}

    def __repr__(self):
        return (f"Tile(id={self.id}, orientation={self.orientation.name}, "
                f"fixed={self.fixed}, adjacent={self.adjacent})")

    @property
    def size(self) -> int:
        return self._grid.shape[0]

    @property
    def pixels(self) -> np.ndarray:
        """Pixel grid in the current orientation (read-only view)."""
        return apply_orientation(self._grid, self.orientation)

    @property
    def degree(self) -> int:
        return len(self.adjacent)

    def edges(self) -> Tuple[EdgeSignature, ...]:
        """Edge signatures ``(top, right, bottom, left)`` for the current orientation."""
        if self.orientation not in self._edge_cache:
            self._edge_cache[self.orientation] = edge_signatures(self.pixels)
        return self._edge_cache[self.orientation]

    def rotate(self) -> None:
        """Rotate 90 degrees clockwise."""
        if self.fixed:
            raise TileFixedError(self.id)
        self.orientation = self.orientation.rotated()

    def mirror(self) -> None:
        """Reflect about the vertical axis."""
        if self.fixed:
            raise TileFixedError(self.id)
        self.orientation = self.orientation.flipped()

    def fix(self) -> None:
        """Lock the current orientation."""
        self.fixed = True

    def link(self, side: int, other_id: int) -> None:
        """Record ``other_id`` as the neighbour on ``side``."""
        if side not in SIDES:
            raise ValueError(f"Unknown side: {side}")
        self.adjacent[side] = other_id

    def copy(self) -> 'Tile':
        """Independent copy sharing the read-only grid."""
        clone = Tile.__new__(Tile)
        clone.id = self.id
        clone._grid = self._grid
        clone.orientation = self.orientation
        clone.adjacent = dict(self.adjacent)
        clone.fixed = self.fixed
        clone._edge_cache = dict(self._edge_cache)
        return clone
