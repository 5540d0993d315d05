"""Run configuration for the generation driver."""

from typing import Optional

from .core.coordinates import CoordinateRange, U64
from .render import DisplayWindow


class LifeConfig:
    """Configuration for producing and displaying a run of generations."""

    def __init__(self,
                 generations: int = 10,
                 window: Optional[DisplayWindow] = None,
                 alive_glyph: str = "x",
                 dead_glyph: str = "-",
                 coord_range: CoordinateRange = U64):
        """Initialize run configuration.

        Args:
            generations: Number of generations to produce, seed included (0+)
            window: Region of the grid to render (rows and columns 0-19 if None)
            alive_glyph: Glyph printed for alive cells
            dead_glyph: Glyph printed for dead cells
            coord_range: Valid coordinate range for seed cells

        Raises:
            ValueError: If any value is invalid
        """
        if generations < 0:
            raise ValueError(f"Generation count must be non-negative, got {generations}")
        if not alive_glyph or not dead_glyph:
            raise ValueError("Alive and dead glyphs must be non-empty")
        if coord_range.minimum > coord_range.maximum:
            raise ValueError(f"Coordinate range {coord_range} is empty")

        self.generations = generations
        self.window = (window or DisplayWindow()).validate()
        self.alive_glyph = alive_glyph
        self.dead_glyph = dead_glyph
        self.coord_range = coord_range

    def copy(self) -> 'LifeConfig':
        """Create a copy of the configuration."""
        return LifeConfig(
            generations=self.generations,
            window=self.window,
            alive_glyph=self.alive_glyph,
            dead_glyph=self.dead_glyph,
            coord_range=self.coord_range
        )

    def __repr__(self) -> str:
        return (f"LifeConfig(generations={self.generations}, window={tuple(self.window)}, "
                f"alive_glyph={self.alive_glyph!r}, dead_glyph={self.dead_glyph!r})")
