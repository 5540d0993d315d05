"""Shape analysis for sparse Life patterns.

Compares generations up to translation to recognise still lifes,
oscillators and spaceships such as the glider. Shapes are compared in
normalized form: shifted so the minimum row and column are both zero.
"""

from dataclasses import dataclass
from itertools import islice
from typing import AbstractSet, FrozenSet, Iterable, Optional, Tuple
import logging

from ..core.coordinates import Cell, CoordinateRange, U64
from ..core.generation import generations

logger = logging.getLogger(__name__)

EXTINCT = "extinct"
STILL_LIFE = "still_life"
OSCILLATOR = "oscillator"
SPACESHIP = "spaceship"


@dataclass(frozen=True)
class PatternPeriod:
    """Recurrence of a pattern under evolution.

    Attributes:
        period: Generations until the shape first repeats
        displacement: (rows, cols) the shape moved over one period
    """
    period: int
    displacement: Tuple[int, int]

    @property
    def is_moving(self) -> bool:
        return self.displacement != (0, 0)


def normalize(cells: Iterable[Cell]) -> Tuple[FrozenSet[Cell], Tuple[int, int]]:
    """Translate cells so the bounding box starts at (0, 0).

    Args:
        cells: Alive cells

    Returns:
        (normalized cells, (min_row, min_col) offset that was removed).
        An empty input gives (frozenset(), (0, 0)).
    """
    cells = list(cells)
    if not cells:
        return frozenset(), (0, 0)

    min_row = min(row for row, _ in cells)
    min_col = min(col for _, col in cells)
    shape = frozenset((row - min_row, col - min_col) for row, col in cells)
    return shape, (min_row, min_col)


def translation_between(before: AbstractSet[Cell], after: AbstractSet[Cell]) -> Optional[Tuple[int, int]]:
    """Offset that maps one pattern onto another, if they are the same shape.

    Returns:
        (row_shift, col_shift) such that shifting ``before`` gives ``after``,
        or None if the shapes differ or either pattern is empty
    """
    if not before or not after or len(before) != len(after):
        return None

    shape_before, (row_before, col_before) = normalize(before)
    shape_after, (row_after, col_after) = normalize(after)
    if shape_before != shape_after:
        return None

    return (row_after - row_before, col_after - col_before)


def find_period(seed: Iterable[Cell], max_period: int = 30,
                coord_range: CoordinateRange = U64) -> Optional[PatternPeriod]:
    """Find the smallest period after which the seed's shape recurs.

    Only recurrence of the seed itself is detected; patterns that settle
    into a cycle later are not.

    Args:
        seed: Initial alive cells
        max_period: Largest period to try
        coord_range: Valid coordinate range

    Returns:
        PatternPeriod, or None if the shape does not recur within max_period
        or the seed is empty
    """
    seed = frozenset(seed)
    if not seed:
        return None

    for period, generation in enumerate(islice(generations(seed, coord_range), 1, max_period + 1), start=1):
        if not generation:
            logger.debug(f"Pattern died out after {period} generations")
            return None

        offset = translation_between(seed, generation)
        if offset is not None:
            logger.debug(f"Pattern recurs with period {period}, displacement {offset}")
            return PatternPeriod(period, offset)

    return None


def classify(seed: Iterable[Cell], max_period: int = 30,
             coord_range: CoordinateRange = U64) -> Optional[str]:
    """Name the kind of pattern a seed is.

    Returns:
        One of ``"extinct"``, ``"still_life"``, ``"oscillator"`` or
        ``"spaceship"``, or None if the seed is none of these within
        ``max_period`` generations. ``"extinct"`` means the seed dies out.
    """
    seed = frozenset(seed)
    for generation in islice(generations(seed, coord_range), max_period + 1):
        if not generation:
            return EXTINCT

    recurrence = find_period(seed, max_period, coord_range)
    if recurrence is None:
        return None
    if recurrence.is_moving:
        return SPACESHIP
    if recurrence.period == 1:
        return STILL_LIFE
    return OSCILLATOR
