"""
Pixel Grids and Flood Fill

A Grid is a fixed-size rectangle of colors, one per body part of the bear.
Cells live in a flat row-major list: cell (row, col) is at row * cols + col.

flood_fill() recolors the patch of same-colored cells around a tapped pixel:
- Only up/down/left/right neighbours count (no diagonals)
- Tapping outside the grid does nothing
- Tapping a patch that already has the new color does nothing

It walks an explicit stack of cell indices, so grid size never limits
recursion depth.
"""

from typing import Any, Hashable, Iterator, Sequence

Color = Hashable


class Grid:
    """
    Fixed-size 2D array of colors, indexed as grid[row, col].

    Dimensions are set once at construction and never change.
    Every cell always holds a color.
    """

    __slots__ = ("_rows", "_cols", "_cells")

    def __init__(self, rows: int, cols: int, color: Color) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid needs positive dimensions, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._cells: list[Color] = [color] * (rows * cols)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Color]]) -> "Grid":
        """Build a grid from a list of equal-length rows."""
        if not rows or not rows[0]:
            raise ValueError("Grid needs at least one row and one column")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("All grid rows must have the same length")

        grid = cls(len(rows), width, rows[0][0])
        grid._cells = [color for row in rows for color in row]
        return grid

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)"""
        return (self._rows, self._cols)

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if (row, col) is a cell of this grid."""
        return 0 <= row < self._rows and 0 <= col < self._cols

    def _index(self, pos: tuple[int, int]) -> int:
        row, col = pos
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) outside {self._rows}x{self._cols} grid")
        return row * self._cols + col

    def __getitem__(self, pos: tuple[int, int]) -> Color:
        return self._cells[self._index(pos)]

    def __setitem__(self, pos: tuple[int, int], color: Color) -> None:
        self._cells[self._index(pos)] = color

    def __iter__(self) -> Iterator[list[Color]]:
        """Iterate over rows (each a fresh list)."""
        for row in range(self._rows):
            yield self.row(row)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid({self._rows}x{self._cols})"

    def row(self, row: int) -> list[Color]:
        """Copy of one row."""
        start = self._index((row, 0))
        return self._cells[start:start + self._cols]

    def to_rows(self) -> list[list[Color]]:
        """Copy of the whole grid as a list of rows."""
        return [self.row(row) for row in range(self._rows)]

    def paint_all(self, color: Color) -> None:
        """Set every cell to one color."""
        self._cells = [color] * len(self._cells)

    def count(self, color: Color) -> int:
        """Number of cells holding this color."""
        return self._cells.count(color)

    def flood_fill(self, start_row: int, start_col: int, new_color: Color) -> None:
        """Recolor the 4-connected patch around (start_row, start_col)."""
        flood_fill(self, start_row, start_col, new_color)


def flood_fill(grid: Grid, start_row: int, start_col: int, new_color: Color) -> None:
    """
    Recolor every cell connected to the start cell through same-colored
    up/down/left/right neighbours.

    Out-of-bounds starts and same-color fills are silent no-ops.
    Mutates the grid in place.
    """
    if not grid.in_bounds(start_row, start_col):
        return

    target_color = grid[start_row, start_col]
    if target_color == new_color:
        return

    rows, cols = grid.shape
    cells = grid._cells
    stack = [start_row * cols + start_col]

    while stack:
        index = stack.pop()
        # Cells can be pushed twice (from two neighbours); skip repaints
        if cells[index] != target_color:
            continue
        cells[index] = new_color

        row, col = divmod(index, cols)
        if row + 1 < rows:
            stack.append(index + cols)   # down
        if row > 0:
            stack.append(index - cols)   # up
        if col + 1 < cols:
            stack.append(index + 1)      # right
        if col > 0:
            stack.append(index - 1)      # left
