"""
Edge signatures for square tiles.

Every border of a tile is read clockwise around the tile and packed into
an integer, most significant bit first:

    top:    left -> right
    right:  top -> bottom
    bottom: right -> left
    left:   bottom -> top

With this convention two tiles that touch present signatures that are
bit-reversals of each other on the shared border, because each reads it
from its own side.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np


# Side indices, in the canonical probing order.
TOP, RIGHT, BOTTOM, LEFT = 0, 1, 2, 3
SIDES = (TOP, RIGHT, BOTTOM, LEFT)
SIDE_NAMES = ('top', 'right', 'bottom', 'left')


def opposite_side(side: int) -> int:
    """Side that faces ``side`` on a neighbouring tile."""
    return (side + 2) % 4


@dataclass(frozen=True)
class EdgeSignature:
    """Fixed-width bit encoding of one tile border."""
    value: int
    width: int

    def flipped(self) -> 'EdgeSignature':
        """Same physical border read in the opposite direction."""
        bits = format(self.value, f'0{self.width}b')
        return EdgeSignature(int(bits[::-1], 2), self.width)

    @property
    def canonical_key(self) -> Tuple[int, int]:
        """Key shared by a signature and its reversal."""
        return (min(self.value, self.flipped().value), self.width)

    def compatible_with(self, other: 'EdgeSignature') -> bool:
        """True if the two borders can touch in some orientation."""
        return self == other or self.flipped() == other

    def __str__(self):
        return format(self.value, f'0{self.width}b').replace('0', '.').replace('1', '#')


def encode_edge(pixels: np.ndarray) -> EdgeSignature:
    """Pack a 1-D run of on/off pixels into a signature."""
    bits = np.asarray(pixels, dtype=bool)
    if bits.ndim != 1 or bits.size == 0:
        raise ValueError(f"Edge must be a non-empty 1-D run, got shape {bits.shape}")
    return EdgeSignature(int(''.join('1' if b else '0' for b in bits), 2), bits.size)


def edge_signatures(pixels: np.ndarray) -> Tuple[EdgeSignature, ...]:
    """
    Signatures of a square grid as ``(top, right, bottom, left)``.

    Args:
        pixels: 2-D boolean grid in its current orientation

    Returns:
        Tuple of 4 signatures, indexed by side
    """
    grid = np.asarray(pixels, dtype=bool)
    return (
        encode_edge(grid[0, :]),
        encode_edge(grid[:, -1]),
        encode_edge(grid[-1, ::-1]),
        encode_edge(grid[::-1, 0]),
    )


def signatures_compatible(a: EdgeSignature, b: EdgeSignature) -> bool:
    """Symmetric compatibility test, regardless of reading direction."""
    return a.compatible_with(b)
