"""
Motif detection in a composite image.

A motif is a fixed set of (row, col) offsets that must all be "on" for the
pattern to occur at an anchor. The image is searched in each of its 8
orientations, in ``ORIENTATION_SEARCH_ORDER``, until one of them contains
at least one occurrence.
"""

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

import cv2
import numpy as np

from core.errors import MotifNotFoundError
from core.transforms import ORIENTATION_SEARCH_ORDER, Orientation, apply_orientation


Offset = Tuple[int, int]


@dataclass(frozen=True)
class Motif:
    """Immutable pixel pattern given by relative offsets of its "on" pixels."""
    offsets: Tuple[Offset, ...]
    name: str = "motif"

    def __post_init__(self):
        if not self.offsets:
            raise ValueError("Motif needs at least one offset")
        for dr, dc in self.offsets:
            if dr < 0 or dc < 0:
                raise ValueError(f"Motif offsets must be non-negative, got {(dr, dc)}")
        object.__setattr__(self, 'offsets', tuple(sorted(set(self.offsets))))

    @classmethod
    def from_pattern(cls, lines: Sequence[str], on_char: str = '#', name: str = "motif") -> 'Motif':
        """Build a motif from an ASCII picture; any other character is background."""
        offsets = tuple((r, c) for r, line in enumerate(lines)
                        for c, ch in enumerate(line) if ch == on_char)
        return cls(offsets, name)

    @property
    def height(self) -> int:
        return max(r for r, _ in self.offsets) + 1

    @property
    def width(self) -> int:
        return max(c for _, c in self.offsets) + 1

    @property
    def size(self) -> int:
        return len(self.offsets)

    def template(self) -> np.ndarray:
        """0/1 float32 kernel covering the motif's bounding box."""
        kernel = np.zeros((self.height, self.width), dtype=np.float32)
        for r, c in self.offsets:
            kernel[r, c] = 1.0
        return kernel


SEA_MONSTER = Motif.from_pattern([
    "                  # ",
    "#    ##    ##    ###",
    " #  #  #  #  #  #   ",
], name="sea monster")


@dataclass
class MotifSearchResult:
    """Outcome of searching all orientations of an image for a motif."""
    orientation: Orientation
    image: np.ndarray
    anchors: List[Offset] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.anchors)


def find_motif_anchors(image: np.ndarray, motif: Motif) -> List[Offset]:
    """
    Top-left anchors at which every motif offset lands on an "on" pixel.

    Cross-correlates the 0/1 image with the motif kernel; an anchor matches
    when the correlation reaches the motif size.
    """
    grid = np.asarray(image, dtype=bool)
    if grid.ndim != 2:
        raise ValueError(f"Image must be 2-D, got shape {grid.shape}")
    if grid.shape[0] < motif.height or grid.shape[1] < motif.width:
        return []

    scores = cv2.matchTemplate(grid.astype(np.float32), motif.template(), cv2.TM_CCORR)
    rows, cols = np.nonzero(scores > motif.size - 0.5)
    return list(zip(rows.tolist(), cols.tolist()))


def count_motifs(image: np.ndarray, motif: Motif) -> int:
    return len(find_motif_anchors(image, motif))


def find_motif_orientation(image: np.ndarray, motif: Motif = SEA_MONSTER,
                           verbose: bool = False) -> MotifSearchResult:
    """
    Find the orientation of ``image`` that contains ``motif``.

    Returns:
        MotifSearchResult for the first orientation with a nonzero count

    Raises:
        MotifNotFoundError: If none of the 8 orientations contains the motif
    """
    for orientation in ORIENTATION_SEARCH_ORDER:
        oriented = apply_orientation(image, orientation)
        anchors = find_motif_anchors(oriented, motif)
        if verbose:
            print(f"  {orientation.name:<14} {len(anchors)} x {motif.name}")
        if anchors:
            return MotifSearchResult(orientation, np.ascontiguousarray(oriented), anchors)

    raise MotifNotFoundError(
        f"No {motif.name} found in any orientation of the {np.shape(image)[0]}x"
        f"{np.shape(image)[1]} image")


def motif_mask(shape: Tuple[int, int], motif: Motif, anchors: Sequence[Offset]) -> np.ndarray:
    """Boolean mask of the pixels covered by motif occurrences."""
    mask = np.zeros(shape, dtype=bool)
    for ar, ac in anchors:
        for dr, dc in motif.offsets:
            mask[ar + dr, ac + dc] = True
    return mask


def water_roughness(image: np.ndarray, motif: Motif = SEA_MONSTER,
                    verbose: bool = False) -> int:
    """
    Count of "on" pixels not taken up by motif occurrences.

    Occurrences are assumed not to overlap, so each removes ``motif.size``
    pixels from the total.
    """
    return roughness_score(find_motif_orientation(image, motif, verbose=verbose), motif)


def roughness_score(result: MotifSearchResult, motif: Motif) -> int:
    """Roughness of an already oriented search result."""
    return int(np.count_nonzero(result.image)) - result.count * motif.size
