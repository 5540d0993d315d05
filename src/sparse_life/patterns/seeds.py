"""Seed patterns and helpers for building generation zero.

Patterns are frozensets of (row, column) cells relative to their own
origin. ``cells_from_array`` and ``cells_from_strings`` turn numpy boolean
arrays and text pictures into such sets.
"""

import numpy as np
from typing import Dict, FrozenSet, Iterable

from ..core.coordinates import Cell, CoordinateRange, U64, validate_cells


# The 7-cell seed the driver runs by default
DEFAULT_SEED: FrozenSet[Cell] = frozenset({
    (1, 3),
    (2, 2), (2, 3), (2, 4),
    (3, 2), (3, 4),
    (4, 3),
})

# Canonical glider, travels one cell down and right every 4 generations
GLIDER: FrozenSet[Cell] = frozenset({
    (0, 1),
    (1, 2),
    (2, 0), (2, 1), (2, 2),
})

# Horizontal blinker, period 2
BLINKER: FrozenSet[Cell] = frozenset({(0, 0), (0, 1), (0, 2)})

# 2x2 still life
BLOCK: FrozenSet[Cell] = frozenset({(0, 0), (0, 1), (1, 0), (1, 1)})

NAMED_PATTERNS: Dict[str, FrozenSet[Cell]] = {
    "default": DEFAULT_SEED,
    "glider": GLIDER,
    "blinker": BLINKER,
    "block": BLOCK,
}


def get_pattern(name: str) -> FrozenSet[Cell]:
    """Look up a named pattern.

    Raises:
        ValueError: If no pattern has that name
    """
    try:
        return NAMED_PATTERNS[name]
    except KeyError:
        raise ValueError(
            f"Unknown pattern {name!r}, expected one of {sorted(NAMED_PATTERNS)}"
        ) from None


def translate(cells: Iterable[Cell], row: int, col: int,
              coord_range: CoordinateRange = U64) -> FrozenSet[Cell]:
    """Shift cells by (row, col), rejecting any that leave the coordinate range."""
    return validate_cells(((r + row, c + col) for r, c in cells), coord_range)


def cells_from_array(pattern: np.ndarray, row: int = 0, col: int = 0,
                     coord_range: CoordinateRange = U64) -> FrozenSet[Cell]:
    """Build a cell set from a 2D boolean array.

    Args:
        pattern: 2D array, truthy entries are alive
        row: Row of the array's top-left corner on the grid
        col: Column of the array's top-left corner on the grid
        coord_range: Valid coordinate range

    Returns:
        Frozenset of alive cells

    Raises:
        ValueError: If the array is not 2D or a cell falls outside the range
    """
    pattern = np.asarray(pattern)
    if pattern.ndim != 2:
        raise ValueError(f"Pattern must be a 2D array, got {pattern.ndim} dimensions")

    return translate(
        ((int(r), int(c)) for r, c in np.argwhere(pattern)),
        row, col, coord_range
    )


def cells_from_strings(lines: Iterable[str], row: int = 0, col: int = 0,
                       alive: str = "x", coord_range: CoordinateRange = U64) -> FrozenSet[Cell]:
    """Build a cell set from a text picture, one string per row.

    Every character equal to ``alive`` is an alive cell; anything else is dead.
    """
    relative = (
        (r, c)
        for r, line in enumerate(lines)
        for c, char in enumerate(line)
        if char == alive
    )
    return translate(relative, row, col, coord_range)
