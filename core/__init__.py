"""Core tile model, geometric transforms and input parsing."""
from .errors import (
    TileSolverError,
    MalformedTileError,
    TileFixedError,
    AssemblyInconsistencyError,
    IncompleteAssemblyError,
    MotifNotFoundError
)
from .transforms import Orientation, rotate_cw, mirror, apply_orientation
from .tile import Tile
from .parsing import parse_tiles, load_tiles, format_tile
