"""Solver configuration."""

from dataclasses import dataclass, field
from typing import Optional

from features.motif import SEA_MONSTER, Motif


@dataclass
class SolverConfig:
    """All configurable parameters."""
    # Pattern searched for in the composite image
    motif: Motif = field(default_factory=lambda: SEA_MONSTER)

    # Tile block characters
    on_char: str = '#'
    off_char: str = '.'

    # Rendering: output pixels per image pixel
    render_scale: int = 8
    output_path: Optional[str] = None

    verbose: bool = True

    def __post_init__(self):
        if len(self.on_char) != 1 or len(self.off_char) != 1:
            raise ValueError(f"Pixel characters must be single characters, got "
                             f"{self.on_char!r} and {self.off_char!r}")
        if self.on_char == self.off_char:
            raise ValueError(f"Pixel characters must differ, both are {self.on_char!r}")
        if self.render_scale < 1:
            raise ValueError(f"render_scale must be positive, got {self.render_scale}")
