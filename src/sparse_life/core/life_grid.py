"""
Sparse Life Grid

Holds the current generation of an unbounded Game of Life grid and steps
it forward with the generation advance engine. Only alive cells are stored.
"""

import numpy as np
from typing import Iterable, List, Optional, Tuple
import logging

from .coordinates import Cell, CoordinateRange, U64, validate_cell, validate_cells
from .generation import Generation, advance
from ..render import DisplayWindow, window_array

logger = logging.getLogger(__name__)


class LifeGrid:
    """Unbounded 2D Game of Life grid stored as a set of alive cells.

    The grid has no width or height; the coordinate range is the only
    limit, and cells at its edges simply have fewer neighbors.
    """

    def __init__(self, cells: Iterable[Cell] = (), coord_range: CoordinateRange = U64):
        """Initialize grid with an optional seed.

        Args:
            cells: Initially alive cells (generation zero)
            coord_range: Valid coordinate range

        Raises:
            ValueError: If a seed cell lies outside the coordinate range
            TypeError: If a seed cell is not a pair of integers
        """
        self.coord_range = coord_range
        self.cells: Generation = validate_cells(cells, coord_range)
        self.generation = 0

        logger.debug(f"Created sparse grid with {len(self.cells)} alive cells")

    def set_cell(self, row: int, col: int, alive: bool) -> None:
        """Set state of individual cell.

        Raises:
            ValueError: If coordinates are outside the coordinate range
        """
        cell = validate_cell((row, col), self.coord_range)
        if alive:
            self.cells = self.cells | {cell}
        else:
            self.cells = self.cells - {cell}

    def get_cell(self, row: int, col: int) -> bool:
        """Get state of individual cell (True=alive)."""
        return (row, col) in self.cells

    def clear(self) -> None:
        """Kill every cell."""
        self.cells = frozenset()

    def load_pattern(self, pattern: Iterable[Cell], row: int = 0, col: int = 0) -> None:
        """Add a pattern to the grid, shifted so its origin lands at (row, col).

        Args:
            pattern: Cells of the pattern relative to its own origin
            row: Row offset for placement
            col: Column offset for placement

        Raises:
            ValueError: If a shifted cell falls outside the coordinate range
        """
        shifted = validate_cells(((r + row, c + col) for r, c in pattern), self.coord_range)
        self.cells = self.cells | shifted

    def step(self) -> int:
        """Advance the grid one generation.

        Returns:
            Number of live cells after evolution
        """
        self.cells = advance(self.cells, self.coord_range)
        self.generation += 1
        return len(self.cells)

    def step_multiple(self, steps: int, log_interval: Optional[int] = None) -> List[int]:
        """Evolve grid multiple steps.

        Args:
            steps: Number of evolution steps
            log_interval: If provided, return live counts at these intervals

        Returns:
            List of live cell counts (either all steps or at intervals)
        """
        live_counts = []

        for step_num in range(steps):
            live_count = self.step()

            if log_interval is None or step_num % log_interval == 0:
                live_counts.append(live_count)

        return live_counts

    def get_live_count(self) -> int:
        """Get total number of live cells."""
        return len(self.cells)

    def is_empty(self) -> bool:
        return not self.cells

    def bounds(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of alive cells.

        Returns:
            (min_row, min_col, max_row, max_col), or None if no cell is alive
        """
        if not self.cells:
            return None

        rows = [row for row, _ in self.cells]
        cols = [col for _, col in self.cells]
        return (min(rows), min(cols), max(rows), max(cols))

    def get_center_of_mass(self) -> Tuple[float, float]:
        """Calculate center of mass of live cells.

        Returns:
            (row, col) of the live cell centroid, (0.0, 0.0) when empty
        """
        if not self.cells:
            return (0.0, 0.0)

        coords = np.asarray(list(self.cells), dtype=float)
        center_row, center_col = coords.mean(axis=0)
        return (float(center_row), float(center_col))

    def to_array(self, window: Optional[DisplayWindow] = None) -> np.ndarray:
        """Dense boolean view of a window of the grid.

        Args:
            window: Region to extract (bounding box of alive cells if None)
        """
        if window is None:
            bounds = self.bounds()
            if bounds is None:
                return np.zeros((0, 0), dtype=bool)
            min_row, min_col, max_row, max_col = bounds
            window = DisplayWindow(min_row, max_row + 1, min_col, max_col + 1)

        return window_array(self.cells, window)

    def copy(self) -> 'LifeGrid':
        """Create an independent copy of the grid."""
        new_grid = LifeGrid(coord_range=self.coord_range)
        new_grid.cells = self.cells
        new_grid.generation = self.generation
        return new_grid

    def __eq__(self, other) -> bool:
        if not isinstance(other, LifeGrid):
            return NotImplemented
        return self.cells == other.cells and self.coord_range == other.coord_range

    def __repr__(self) -> str:
        return f"LifeGrid(generation={self.generation}, alive={len(self.cells)})"
