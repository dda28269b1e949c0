"""Feature extraction: edge signatures and motif detection."""
from .edges import (
    TOP, RIGHT, BOTTOM, LEFT, SIDES, SIDE_NAMES,
    EdgeSignature,
    encode_edge,
    edge_signatures,
    opposite_side,
    signatures_compatible
)
from .motif import (
    Motif,
    MotifSearchResult,
    SEA_MONSTER,
    find_motif_anchors,
    count_motifs,
    find_motif_orientation,
    motif_mask,
    water_roughness,
    roughness_score
)
