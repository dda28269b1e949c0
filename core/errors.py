"""Exception types raised while parsing, assembling and scanning tiles."""


class TileSolverError(Exception):
    """Base class for every failure surfaced by the solver."""


class MalformedTileError(TileSolverError, ValueError):
    """Tile block text could not be turned into a square pixel grid."""

    def __init__(self, message, tile_id=None):
        self.tile_id = tile_id
        if tile_id is not None:
            message = f"Tile {tile_id}: {message}"
        super().__init__(message)


class TileFixedError(TileSolverError, RuntimeError):
    """A fixed tile was asked to rotate or mirror."""

    def __init__(self, tile_id):
        self.tile_id = tile_id
        super().__init__(f"Tile {tile_id} is fixed and cannot be re-oriented")


class AssemblyInconsistencyError(TileSolverError, RuntimeError):
    """
    A matched tile could not present the required edge on the facing side.

    Only happens when the input does not have exactly one consistent tiling.
    """

    def __init__(self, seed_id, candidate_id, side, message=None):
        self.seed_id = seed_id
        self.candidate_id = candidate_id
        self.side = side
        if message is None:
            message = (f"Tile {candidate_id} matched side {side} of tile {seed_id} "
                       f"but cannot be oriented to fit it")
        super().__init__(message)


class IncompleteAssemblyError(TileSolverError, RuntimeError):
    """The assembled adjacency graph does not form a complete square lattice."""


class MotifNotFoundError(TileSolverError, LookupError):
    """No orientation of the composite image contains the motif."""
