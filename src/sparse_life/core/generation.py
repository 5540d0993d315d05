"""Generation advance engine for the sparse Game of Life grid.

A generation is the frozenset of every alive cell; any cell not in the set
is dead. Advancing walks the live cells only. Each live cell is checked for
survival, and its dead neighbors become candidates for birth. A candidate is
re-counted from scratch every time it is proposed, which keeps the per-cell
work independent at the cost of some repeated counting.
"""

from dataclasses import dataclass, field
from typing import AbstractSet, FrozenSet, Iterable, Iterator, List
import logging

from .conway_rules import update_cell
from .coordinates import Cell, CoordinateRange, U64
from .neighbors import iter_neighbors

logger = logging.getLogger(__name__)

Generation = FrozenSet[Cell]


@dataclass
class NeighborStatus:
    """Neighborhood summary of one live cell.

    ``alive_count`` plus ``len(dead_neighbors)`` is 8 for interior cells
    and less at the edges of the coordinate range.
    """
    alive_count: int = 0
    dead_neighbors: List[Cell] = field(default_factory=list)


def get_neighbor_status(cell: Cell, current: AbstractSet[Cell],
                        coord_range: CoordinateRange = U64) -> NeighborStatus:
    """Count the live neighbors of a cell and collect the dead ones.

    Args:
        cell: Cell to inspect (normally a live one)
        current: Current generation
        coord_range: Valid coordinate range

    Returns:
        NeighborStatus with the alive count and the dead neighbor cells
    """
    status = NeighborStatus()

    for neighbor in iter_neighbors(cell, coord_range):
        if neighbor in current:
            status.alive_count += 1
        else:
            status.dead_neighbors.append(neighbor)

    return status


def should_resurrect(cell: Cell, current: AbstractSet[Cell],
                     coord_range: CoordinateRange = U64) -> bool:
    """Decide whether a dead cell is born in the next generation.

    Only meaningful for dead cells; the cell's own state is not consulted.

    Args:
        cell: Dead candidate cell
        current: Current generation
        coord_range: Valid coordinate range

    Returns:
        True if exactly 3 of the cell's neighbors are alive
    """
    alive = sum(1 for neighbor in iter_neighbors(cell, coord_range) if neighbor in current)
    return update_cell(False, alive)


def advance(current: AbstractSet[Cell], coord_range: CoordinateRange = U64) -> Generation:
    """Compute the next generation from the current one.

    The input is only read. Survivors are live cells with 2 or 3 live
    neighbors; births are dead cells adjacent to a live cell with exactly
    3 live neighbors. A dead cell proposed by several live neighbors is
    inserted once.

    Args:
        current: Set of currently alive cells
        coord_range: Valid coordinate range

    Returns:
        New frozenset of alive cells
    """
    survivors = set()
    births = set()

    for cell in current:
        status = get_neighbor_status(cell, current, coord_range)

        if update_cell(True, status.alive_count):
            survivors.add(cell)

        births.update(
            candidate for candidate in status.dead_neighbors
            if should_resurrect(candidate, current, coord_range)
        )

    logger.debug(
        f"Advanced generation: {len(current)} alive -> "
        f"{len(survivors)} survived, {len(births)} born"
    )
    return frozenset(survivors | births)


def generations(seed: Iterable[Cell], coord_range: CoordinateRange = U64) -> Iterator[Generation]:
    """Yield the seed followed by each successive generation, forever.

    Generation zero is the seed itself, so taking ``n`` items gives the
    seed and ``n - 1`` advances. Bound the sequence with ``itertools.islice``.

    Args:
        seed: Initial alive cells
        coord_range: Valid coordinate range
    """
    current = frozenset(seed)
    while True:
        yield current
        current = advance(current, coord_range)
