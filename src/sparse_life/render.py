"""Text rendering of a generation through a fixed display window.

The grid itself is unbounded, so rendering always goes through a
``DisplayWindow``: a finite rectangle of rows and columns that is densified
into a numpy boolean array and mapped to glyphs.
"""

from typing import AbstractSet, List, NamedTuple
import numpy as np

from .core.coordinates import Cell


class DisplayWindow(NamedTuple):
    """Half-open rectangle of the grid to display.

    Rows ``row_start <= r < row_end`` and columns
    ``col_start <= c < col_end`` are shown.
    """
    row_start: int = 0
    row_end: int = 20
    col_start: int = 0
    col_end: int = 20

    @property
    def height(self) -> int:
        return self.row_end - self.row_start

    @property
    def width(self) -> int:
        return self.col_end - self.col_start

    def contains(self, cell: Cell) -> bool:
        row, col = cell
        return self.row_start <= row < self.row_end and self.col_start <= col < self.col_end

    def validate(self) -> 'DisplayWindow':
        """Check the window is non-empty.

        Raises:
            ValueError: If either dimension is zero or negative
        """
        if self.height <= 0 or self.width <= 0:
            raise ValueError(f"Display window {tuple(self)} must have positive height and width")
        return self


def window_array(cells: AbstractSet[Cell], window: DisplayWindow) -> np.ndarray:
    """Densify the part of a generation that falls inside a window.

    Args:
        cells: Alive cells
        window: Region to extract

    Returns:
        (height, width) boolean array, True where a cell is alive
    """
    window.validate()
    view = np.zeros((window.height, window.width), dtype=bool)

    for row, col in cells:
        if window.contains((row, col)):
            view[row - window.row_start, col - window.col_start] = True

    return view


def render_lines(cells: AbstractSet[Cell], window: DisplayWindow,
                 alive: str = "x", dead: str = "-", separator: str = "  ") -> List[str]:
    """Render a generation as one string per window row."""
    glyphs = np.where(window_array(cells, window), alive, dead)
    return [separator.join(row) for row in glyphs]


def render_generation(cells: AbstractSet[Cell], window: DisplayWindow = DisplayWindow(),
                      alive: str = "x", dead: str = "-", separator: str = "  ") -> str:
    """Render a generation as a multi-line string.

    Args:
        cells: Alive cells
        window: Region of the grid to show
        alive: Glyph for alive cells
        dead: Glyph for dead cells
        separator: Text placed between adjacent cells of a row

    Returns:
        Rows joined by newlines, no trailing newline
    """
    return "\n".join(render_lines(cells, window, alive, dead, separator))
