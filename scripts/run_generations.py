#!/usr/bin/env python3
"""
Sparse Life Generation Runner

Runs a seed pattern through a bounded number of generations and prints
each one through a fixed display window, one text row per grid row.
"""

import sys
import logging

from sparse_life.config import LifeConfig
from sparse_life.core.coordinates import CoordinateRange
from sparse_life.driver import run
from sparse_life.patterns.seeds import NAMED_PATTERNS, get_pattern, translate
from sparse_life.render import DisplayWindow

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def build_config(args) -> LifeConfig:
    """Map command-line arguments onto a run configuration."""
    return LifeConfig(
        generations=args.generations,
        window=DisplayWindow(args.row_start, args.row_end, args.col_start, args.col_end),
        alive_glyph=args.alive,
        dead_glyph=args.dead,
        coord_range=CoordinateRange.unsigned(args.bits),
    )


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Conway's Game of Life on a sparse, unbounded grid")
    parser.add_argument("--pattern", choices=sorted(NAMED_PATTERNS), default="default", help="Seed pattern")
    parser.add_argument("--offset", type=int, nargs=2, default=(0, 0), metavar=("ROW", "COL"),
                        help="Shift the seed pattern by ROW, COL")
    parser.add_argument("--generations", type=int, default=10, help="Generations to print, seed included")
    parser.add_argument("--row-start", type=int, default=0, help="First displayed row")
    parser.add_argument("--row-end", type=int, default=20, help="Displayed rows end (exclusive)")
    parser.add_argument("--col-start", type=int, default=0, help="First displayed column")
    parser.add_argument("--col-end", type=int, default=20, help="Displayed columns end (exclusive)")
    parser.add_argument("--alive", default="x", help="Glyph for alive cells")
    parser.add_argument("--dead", default="-", help="Glyph for dead cells")
    parser.add_argument("--bits", type=int, default=64, help="Unsigned coordinate width in bits")
    parser.add_argument("--quiet", action="store_true", help="Only log warnings and errors")

    args = parser.parse_args()
    if args.quiet:
        logging.getLogger().setLevel(logging.WARNING)

    try:
        config = build_config(args)
        seed = translate(get_pattern(args.pattern), *args.offset, coord_range=config.coord_range)
        logger.info(f"Pattern: {args.pattern}, offset: {tuple(args.offset)}, {config}")

        for frame in run(seed, config):
            print(frame)
            print()

    except Exception as e:
        logger.error(f"Run failed: {e}")
        sys.exit(1)
