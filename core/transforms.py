"""
Geometric transforms for square pixel grids.

The 8 symmetries of a square are modelled as an ``Orientation``: a number
of clockwise quarter turns applied after an optional mirror about the
vertical axis. Grids are never re-oriented in place; ``apply_orientation``
returns a numpy view of the stored pixels.
"""

from enum import Enum
from typing import Tuple

import numpy as np


def rotate_cw(grid: np.ndarray) -> np.ndarray:
    """Rotate a grid 90 degrees clockwise."""
    return np.rot90(np.asarray(grid), k=-1)


def mirror(grid: np.ndarray) -> np.ndarray:
    """Reflect a grid about its vertical axis (left <-> right)."""
    return np.fliplr(np.asarray(grid))


class Orientation(Enum):
    """
    One of the 8 symmetry states of a square grid.

    Value is ``(quarter_turns, mirrored)``: the grid is mirrored first (if
    flagged), then rotated clockwise ``quarter_turns`` times.
    """
    IDENTITY = (0, False)
    ROT90 = (1, False)
    ROT180 = (2, False)
    ROT270 = (3, False)
    MIRROR = (0, True)
    MIRROR_ROT90 = (1, True)
    MIRROR_ROT180 = (2, True)
    MIRROR_ROT270 = (3, True)

    @property
    def quarter_turns(self) -> int:
        return self.value[0]

    @property
    def mirrored(self) -> bool:
        return self.value[1]

    def rotated(self) -> 'Orientation':
        """State reached by one more clockwise quarter turn."""
        return Orientation(((self.quarter_turns + 1) % 4, self.mirrored))

    def flipped(self) -> 'Orientation':
        """State reached by mirroring the current state."""
        # mirror . rot^k == rot^-k . mirror
        return Orientation(((-self.quarter_turns) % 4, not self.mirrored))

    def inverse(self) -> 'Orientation':
        """State that undoes this one."""
        if self.mirrored:
            return self
        return Orientation(((-self.quarter_turns) % 4, False))


def apply_orientation(grid: np.ndarray, orientation: Orientation) -> np.ndarray:
    """Return ``grid`` as seen in ``orientation``."""
    result = np.asarray(grid)
    if orientation.mirrored:
        result = np.fliplr(result)
    return np.rot90(result, k=-orientation.quarter_turns)


def _search_order() -> Tuple[Orientation, ...]:
    order = []
    state = Orientation.IDENTITY
    for _ in range(4):
        order.append(state)
        order.append(state.flipped())
        state = state.rotated()
    return tuple(order)


# Every rotation state followed by its mirror image; covers all 8 states once.
ORIENTATION_SEARCH_ORDER = _search_order()
