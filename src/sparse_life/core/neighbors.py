"""Moore neighborhood enumeration on a bounded coordinate range.

Neighbors are produced by walking the rectangle
``[start(row), end(row)] x [start(col), end(col)]`` in row-major order and
skipping the center cell. At the edge of the coordinate range ``start`` and
``end`` collapse onto the boundary value, so the rectangle shrinks instead of
stepping outside the range. The grid never wraps around.
"""

from typing import Iterator
from .coordinates import Cell, CoordinateRange, U64


def start_value(value: int, coord_range: CoordinateRange = U64) -> int:
    """First coordinate of the neighborhood along one axis.

    Args:
        value: Coordinate of the center cell
        coord_range: Valid coordinate range

    Returns:
        ``value - 1``, or ``value`` itself when it is the range minimum
    """
    if value == coord_range.minimum:
        return value
    return value - 1


def end_value(value: int, coord_range: CoordinateRange = U64) -> int:
    """Last coordinate of the neighborhood along one axis.

    Args:
        value: Coordinate of the center cell
        coord_range: Valid coordinate range

    Returns:
        ``value + 1``, or ``value`` itself when it is the range maximum
    """
    if value == coord_range.maximum:
        return value
    return value + 1


def iter_neighbors(cell: Cell, coord_range: CoordinateRange = U64) -> Iterator[Cell]:
    """Yield the Moore neighbors of a cell that lie inside the coordinate range.

    Cells are yielded row by row, columns ascending within a row. The center
    cell is never yielded. Interior cells have 8 neighbors, cells on one edge
    of the range have 5, and corner cells have 3.

    Args:
        cell: (row, column) of the center cell
        coord_range: Valid coordinate range

    Yields:
        Neighbor cells as (row, column) tuples
    """
    row, col = cell
    first_col = start_value(col, coord_range)
    last_col = end_value(col, coord_range)

    for neighbor_row in range(start_value(row, coord_range), end_value(row, coord_range) + 1):
        for neighbor_col in range(first_col, last_col + 1):
            if neighbor_row == row and neighbor_col == col:
                continue  # Skip center cell
            yield (neighbor_row, neighbor_col)


def neighbor_count(cell: Cell, coord_range: CoordinateRange = U64) -> int:
    """Number of valid neighbor positions around a cell (0-8)."""
    row, col = cell
    rows = end_value(row, coord_range) - start_value(row, coord_range) + 1
    cols = end_value(col, coord_range) - start_value(col, coord_range) + 1
    return rows * cols - 1


class Neighborhood:
    """Restartable view of a cell's Moore neighborhood.

    Each call to ``iter()`` starts a fresh enumeration, so the same
    neighborhood can be walked any number of times.
    """

    def __init__(self, cell: Cell, coord_range: CoordinateRange = U64):
        self.cell = cell
        self.coord_range = coord_range

    def __iter__(self) -> Iterator[Cell]:
        return iter_neighbors(self.cell, self.coord_range)

    def __len__(self) -> int:
        return neighbor_count(self.cell, self.coord_range)

    def __contains__(self, other) -> bool:
        return other in set(self)

    def __repr__(self) -> str:
        return f"Neighborhood(cell={self.cell}, coord_range={self.coord_range})"
