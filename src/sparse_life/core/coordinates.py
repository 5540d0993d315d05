"""Coordinate ranges and cell validation for the sparse Life grid.

Python integers are unbounded, so the fixed-width coordinate type of the
grid is modelled explicitly as an inclusive ``CoordinateRange``. The core
engine assumes every cell it sees lies inside the range; cells entering the
system from seeds or callers are checked here.
"""

from typing import NamedTuple, Tuple
import logging
import numbers

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


class CoordinateRange(NamedTuple):
    """Inclusive range of valid coordinate values on both axes.

    Attributes:
        minimum: Smallest valid coordinate (the grid origin)
        maximum: Largest valid coordinate
    """
    minimum: int
    maximum: int

    @classmethod
    def unsigned(cls, bits: int) -> 'CoordinateRange':
        """Range of an unsigned integer type with the given bit width."""
        if bits < 1:
            raise ValueError(f"Bit width must be positive, got {bits}")
        return cls(0, 2 ** bits - 1)

    @classmethod
    def signed(cls, bits: int) -> 'CoordinateRange':
        """Range of a two's complement signed integer type."""
        if bits < 2:
            raise ValueError(f"Signed bit width must be at least 2, got {bits}")
        return cls(-(2 ** (bits - 1)), 2 ** (bits - 1) - 1)

    def contains(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def contains_cell(self, cell: Cell) -> bool:
        row, col = cell
        return self.contains(row) and self.contains(col)


# Default coordinate type: unsigned 64-bit
U64 = CoordinateRange.unsigned(64)


def validate_cell(cell, coord_range: CoordinateRange = U64) -> Cell:
    """Check that a cell is a pair of in-range integer coordinates.

    Args:
        cell: Candidate (row, column) pair
        coord_range: Valid coordinate range

    Returns:
        The cell as a plain (int, int) tuple

    Raises:
        TypeError: If the cell is not a pair of integers
        ValueError: If a coordinate lies outside the range
    """
    try:
        row, col = cell
    except (TypeError, ValueError):
        raise TypeError(f"Cell must be a (row, column) pair, got {cell!r}") from None

    for name, value in (("row", row), ("column", col)):
        # bool is an int subclass but never a coordinate
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise TypeError(f"Cell {name} must be an integer, got {value!r}")

    row, col = int(row), int(col)
    for name, value in (("row", row), ("column", col)):
        if not coord_range.contains(value):
            raise ValueError(
                f"Cell {name} {value} outside coordinate range "
                f"[{coord_range.minimum}, {coord_range.maximum}]"
            )

    return (row, col)


def validate_cells(cells, coord_range: CoordinateRange = U64) -> frozenset:
    """Validate every cell of an iterable and collect them into a generation."""
    generation = frozenset(validate_cell(cell, coord_range) for cell in cells)
    logger.debug(f"Validated {len(generation)} cells against {coord_range}")
    return generation
