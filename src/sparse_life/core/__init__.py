"""
Sparse Life Core

Neighbor enumeration and the generation advance engine for Conway's
Game of Life on an unbounded grid of alive cells.
"""

from .coordinates import Cell, CoordinateRange, U64, validate_cell, validate_cells
from .neighbors import Neighborhood, iter_neighbors, neighbor_count, start_value, end_value
from .conway_rules import SURVIVAL_SET, BIRTH_SET, update_cell
from .generation import Generation, NeighborStatus, advance, generations, get_neighbor_status, should_resurrect
from .life_grid import LifeGrid

__all__ = [
    'Cell',
    'CoordinateRange',
    'U64',
    'validate_cell',
    'validate_cells',
    'Neighborhood',
    'iter_neighbors',
    'neighbor_count',
    'start_value',
    'end_value',
    'SURVIVAL_SET',
    'BIRTH_SET',
    'update_cell',
    'Generation',
    'NeighborStatus',
    'advance',
    'generations',
    'get_neighbor_status',
    'should_resurrect',
    'LifeGrid',
]
