#!/usr/bin/env python
"""
Tile Assembly Solver

Usage:
    python solve_puzzle.py <tiles_path> [--output <png_path>] [--scale <n>]

Examples:
    python solve_puzzle.py ./input/tiles.txt
    python solve_puzzle.py ./input/tiles.txt --output ./debug/image.png --display
    cat tiles.txt | python solve_puzzle.py -

Pipeline:
    Part one: product of the four corner tile ids
    Part two: assemble the tiles, strip borders, and measure the roughness
              of the composite image outside the sea monsters
"""

import argparse
import os
import sys
import time

from core import load_tiles, TileSolverError
from pipeline import SolverConfig, solve_tiles
from visualization import display_solution, save_result


def timed(label, verbose, func, *args, **kwargs):
    """Run ``func`` and print how long it took."""
    if verbose:
        print(f"{label}...")
    start = time.time()
    result = func(*args, **kwargs)
    if verbose:
        print(f"  ({(time.time() - start) * 1000:.2f} ms)")
    return result


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Assemble square tiles and search the image for a motif",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input format:
  Tile 2311:
  ..##.#..#.
  ##..#.....
  ...
  (blocks separated by blank lines, '#' = on, '.' = off)
        """
    )
    parser.add_argument("tiles_path", help="Path to the tile file ('-' for stdin)")
    parser.add_argument("--output", "-o", help="Output path for the rendered image")
    parser.add_argument("--scale", "-s", type=int, default=8,
                        help="Pixels per image pixel when rendering (default: 8)")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only print the answers")
    parser.add_argument("--display", action="store_true", help="Display the result")

    args = parser.parse_args(argv)

    if args.tiles_path != '-' and not os.path.exists(args.tiles_path):
        print(f"Error: Tile file not found: {args.tiles_path}")
        return 1

    try:
        config = SolverConfig(render_scale=args.scale, output_path=args.output,
                              verbose=not args.quiet)
        tiles = timed("Reading tiles", config.verbose, load_tiles, args.tiles_path,
                      config.on_char, config.off_char)
        result = timed("Solving", config.verbose, solve_tiles, tiles, config)
    except (TileSolverError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    print(f"\nPart one (corner product): {result.corner_product}")
    print(f"Part two (roughness): {result.roughness}")

    if config.output_path:
        path = save_result(result, config.motif, config.output_path, config.render_scale)
        print(f"\nSaved: {path}")

    if args.display:
        display_solution(result, config.motif)

    return 0


if __name__ == "__main__":
    sys.exit(main())
