"""
sparse-life: Conway's Game of Life on an unbounded, sparse grid.

Only alive cells are stored. Neighbor enumeration clips at the edges of the
coordinate range instead of wrapping, so the grid is never toroidal.
"""

from .core import advance, generations, iter_neighbors, LifeGrid, CoordinateRange, U64
from .render import DisplayWindow, render_generation
from .config import LifeConfig

__version__ = "0.1.0"

__all__ = [
    'advance',
    'generations',
    'iter_neighbors',
    'LifeGrid',
    'CoordinateRange',
    'U64',
    'DisplayWindow',
    'render_generation',
    'LifeConfig',
]
