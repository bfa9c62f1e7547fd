"""
The Bear: six pixel grids and the current paint color.

Each body part owns its own Grid. The two ears (and the two legs) share a
shape but never share a grid, so filling one ear leaves the other alone.

PaintState holds the selected color. The palette writes it, and the canvas
passes it into every fill.
"""

import logging
from dataclasses import dataclass
from typing import Iterator

from .grid import Grid, flood_fill
from .palette import DEFAULT_COLOR, color_name

logger = logging.getLogger(__name__)


# Part kind -> (rows, cols)
PART_SHAPES: dict[str, tuple[int, int]] = {
    "ear": (4, 4),
    "head": (8, 8),
    "body": (6, 10),
    "leg": (4, 3),
}

# Part name -> kind, in layout order (top to bottom, left to right)
PART_KINDS: dict[str, str] = {
    "left_ear": "ear",
    "right_ear": "ear",
    "head": "head",
    "body": "body",
    "left_leg": "leg",
    "right_leg": "leg",
}

PART_NAMES = list(PART_KINDS)


@dataclass
class PaintState:
    """The color the next tap will paint with."""

    selected_color: str = DEFAULT_COLOR

    def select(self, color: str) -> None:
        if color != self.selected_color:
            logger.debug("Selected %s", color_name(color))
        self.selected_color = color


class Bear:
    """
    A bear made of independent pixel grids.

    Grids are created once, start out in the default color, and are only
    ever changed in place (by fill or reset).
    """

    def __init__(self, default_color: str = DEFAULT_COLOR) -> None:
        self.default_color = default_color
        self._parts: dict[str, Grid] = {
            name: Grid(*PART_SHAPES[kind], default_color)
            for name, kind in PART_KINDS.items()
        }

    def __iter__(self) -> Iterator[tuple[str, Grid]]:
        return iter(self._parts.items())

    def __contains__(self, name: str) -> bool:
        return name in self._parts

    @property
    def part_names(self) -> list[str]:
        return list(self._parts)

    def part(self, name: str) -> Grid:
        """Grid for a body part (KeyError if there's no such part)."""
        return self._parts[name]

    def fill(self, name: str, row: int, col: int, color: str) -> bool:
        """
        Flood-fill one body part starting at (row, col).

        Returns True if any pixel changed. Taps outside the part or on a
        patch that already has the color change nothing.
        """
        grid = self._parts[name]
        if not grid.in_bounds(row, col) or grid[row, col] == color:
            return False
        flood_fill(grid, row, col, color)
        logger.debug("Filled %s at (%d, %d) with %s", name, row, col, color_name(color))
        return True

    def reset(self) -> None:
        """Start over: every part back to the default color."""
        for grid in self._parts.values():
            grid.paint_all(self.default_color)
        logger.info("Bear reset")

    def has_content(self) -> bool:
        """Check if any pixel has been colored."""
        return any(
            grid.count(self.default_color) != grid.rows * grid.cols
            for grid in self._parts.values()
        )
