"""
Pipeline orchestration modules.

1. solve_part_one() - corner tile id product
2. solve_part_two() - roughness of the assembled image
3. solve_tiles() - full run returning a SolveResult
"""
from .config import SolverConfig
from .solver_pipeline import (
    SolveResult,
    strip_border,
    compose_image,
    assemble_image,
    solve_part_one,
    solve_part_two,
    solve_tiles
)
