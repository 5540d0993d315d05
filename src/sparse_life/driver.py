"""Drive a seed through a bounded run of generations and render each one."""

from itertools import islice
from typing import Iterable, Iterator, Optional
import logging

from .config import LifeConfig
from .core.coordinates import Cell, validate_cells
from .core.generation import generations
from .render import render_generation

logger = logging.getLogger(__name__)


def run(seed: Iterable[Cell], config: Optional[LifeConfig] = None) -> Iterator[str]:
    """Yield the rendered frame of each generation, starting with the seed.

    Args:
        seed: Alive cells of generation zero
        config: Run configuration (defaults if None)

    Yields:
        One multi-line string per generation, ``config.generations`` in total

    Raises:
        ValueError: If a seed cell lies outside the configured coordinate range
    """
    config = config or LifeConfig()
    gen_zero = validate_cells(seed, config.coord_range)

    logger.info(f"Running {config.generations} generations from a seed of {len(gen_zero)} cells")

    for index, generation in enumerate(islice(generations(gen_zero, config.coord_range), config.generations)):
        logger.info(f"Generation {index}: {len(generation)} alive")
        yield render_generation(
            generation,
            config.window,
            alive=config.alive_glyph,
            dead=config.dead_glyph,
        )
