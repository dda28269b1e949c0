"""Reading and writing the plain-text tile block format.

Each block is a ``Tile <id>:`` header followed by rows of ``#`` (on) and
``.`` (off) pixels. Blocks are separated by blank lines.
"""

import re
import sys
from pathlib import Path
from typing import List

import numpy as np

from .errors import MalformedTileError
from .tile import Tile


HEADER_PATTERN = re.compile(r'^Tile\s+(\d+):$')


def parse_tile(block: str, on_char: str = '#', off_char: str = '.') -> Tile:
    """Parse a single tile block."""
    lines = [line.strip() for line in block.strip().splitlines()]
    if not lines:
        raise MalformedTileError("empty tile block")

    match = HEADER_PATTERN.match(lines[0])
    if match is None:
        raise MalformedTileError(f"bad tile header: {lines[0]!r}")
    tile_id = int(match.group(1))

    rows = lines[1:]
    if not rows:
        raise MalformedTileError("tile has no pixel rows", tile_id)

    grid = []
    for r, line in enumerate(rows):
        row = []
        for c, ch in enumerate(line):
            if ch == on_char:
                row.append(True)
            elif ch == off_char:
                row.append(False)
            else:
                raise MalformedTileError(f"bad character {ch!r} at row {r}, column {c}", tile_id)
        grid.append(row)

    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise MalformedTileError("rows have different lengths", tile_id)

    return Tile(tile_id, np.array(grid, dtype=bool))


def parse_tiles(text: str, on_char: str = '#', off_char: str = '.') -> List[Tile]:
    """
    Parse every tile block in ``text``.

    Args:
        text: Full puzzle description
        on_char: Character for an "on" pixel
        off_char: Character for an "off" pixel

    Returns:
        Tiles in input order

    Raises:
        MalformedTileError: On bad characters, headers, shapes or duplicate ids
    """
    blocks = [b for b in re.split(r'\n\s*\n', text.strip()) if b.strip()]
    tiles = [parse_tile(block, on_char, off_char) for block in blocks]

    seen = set()
    for tile in tiles:
        if tile.id in seen:
            raise MalformedTileError("duplicate tile id", tile.id)
        seen.add(tile.id)

    if tiles:
        size = tiles[0].size
        for tile in tiles[1:]:
            if tile.size != size:
                raise MalformedTileError(
                    f"size {tile.size}x{tile.size} differs from {size}x{size}", tile.id)

    return tiles


def load_tiles(path: str, on_char: str = '#', off_char: str = '.') -> List[Tile]:
    """Read and parse a tile file; ``-`` reads standard input."""
    if path == '-':
        text = sys.stdin.read()
    else:
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Tile file not found: {path}")
        text = file_path.read_text()
    return parse_tiles(text, on_char, off_char)


def format_tile(tile: Tile, on_char: str = '#', off_char: str = '.') -> str:
    """Render a tile back to block form in its current orientation."""
    rows = [''.join(on_char if p else off_char for p in row) for row in tile.pixels]
    return f"Tile {tile.id}:\n" + "\n".join(rows)
