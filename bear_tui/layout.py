"""
Bear Layout: where each body part sits on screen.

The bear is drawn in bands, top to bottom:
    ears (left, right)
    head
    body
    legs (left, right)

Every band is centered, and the whole bear is centered in the canvas.
One grid pixel takes PIXEL_WIDTH x PIXEL_HEIGHT terminal cells.

Also home to PixelCursor, the keyboard cursor that walks the pixels.
"""

from dataclasses import dataclass

from .bear import Bear
from .constants import PIXEL_WIDTH, PIXEL_HEIGHT, PAIR_GAP, BAND_GAP


BANDS: list[list[str]] = [
    ["left_ear", "right_ear"],
    ["head"],
    ["body"],
    ["left_leg", "right_leg"],
]


@dataclass(frozen=True)
class PartPlacement:
    """Screen rectangle of one body part, in canvas cell coordinates."""

    name: str
    x: int
    y: int
    rows: int
    cols: int

    @property
    def width(self) -> int:
        return self.cols * PIXEL_WIDTH

    @property
    def height(self) -> int:
        return self.rows * PIXEL_HEIGHT

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height

    def cell_at(self, x: int, y: int) -> tuple[int, int]:
        """(row, col) of the pixel under screen cell (x, y). Assumes contains()."""
        return ((y - self.y) // PIXEL_HEIGHT, (x - self.x) // PIXEL_WIDTH)


class BearLayout:
    """Placement of every part for a canvas of the given size."""

    def __init__(self, bear: Bear, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.placements: list[PartPlacement] = []
        self._by_name: dict[str, PartPlacement] = {}
        self._place(bear)

    def _place(self, bear: Bear) -> None:
        shapes = {name: bear.part(name).shape for name in bear.part_names}
        bands = [[name for name in band if name in shapes] for band in BANDS]
        bands = [band for band in bands if band]

        band_sizes = []
        for band in bands:
            band_width = sum(shapes[name][1] * PIXEL_WIDTH for name in band)
            band_width += PAIR_GAP * (len(band) - 1)
            band_height = max(shapes[name][0] * PIXEL_HEIGHT for name in band)
            band_sizes.append((band_width, band_height))

        total_height = sum(h for _, h in band_sizes) + BAND_GAP * (len(bands) - 1)
        y = max(0, (self.height - total_height) // 2)

        for band, (band_width, band_height) in zip(bands, band_sizes):
            x = max(0, (self.width - band_width) // 2)
            for name in band:
                rows, cols = shapes[name]
                placement = PartPlacement(name, x, y, rows, cols)
                self.placements.append(placement)
                self._by_name[name] = placement
                x += placement.width + PAIR_GAP
            y += band_height + BAND_GAP

    def placement(self, name: str) -> PartPlacement:
        return self._by_name[name]

    def placements_on_line(self, y: int) -> list[PartPlacement]:
        """Parts crossing screen line y, left to right."""
        return sorted(
            (p for p in self.placements if p.y <= y < p.y + p.height),
            key=lambda p: p.x,
        )

    def hit_test(self, x: int, y: int) -> tuple[str, int, int] | None:
        """Which pixel is at screen cell (x, y)? None for gaps and margins."""
        for placement in self.placements:
            if placement.contains(x, y):
                row, col = placement.cell_at(x, y)
                return (placement.name, row, col)
        return None


class PixelCursor:
    """
    Keyboard cursor over the bear's pixels.

    Arrows stay inside the current part and stop at its edges.
    Tab / Shift+Tab hop between parts in layout order.
    """

    def __init__(self, bear: Bear, part: str = "head") -> None:
        self._bear = bear
        self._names = bear.part_names
        self.part = part if part in bear else self._names[0]
        rows, cols = bear.part(self.part).shape
        self.row = rows // 2
        self.col = cols // 2

    @property
    def position(self) -> tuple[str, int, int]:
        return (self.part, self.row, self.col)

    def _clamp(self) -> None:
        rows, cols = self._bear.part(self.part).shape
        self.row = max(0, min(self.row, rows - 1))
        self.col = max(0, min(self.col, cols - 1))

    def move(self, direction: str) -> bool:
        """Move one pixel. Returns False if already at that edge."""
        rows, cols = self._bear.part(self.part).shape
        if direction == 'up' and self.row > 0:
            self.row -= 1
        elif direction == 'down' and self.row < rows - 1:
            self.row += 1
        elif direction == 'left' and self.col > 0:
            self.col -= 1
        elif direction == 'right' and self.col < cols - 1:
            self.col += 1
        else:
            return False
        return True

    def next_part(self) -> None:
        index = self._names.index(self.part)
        self.part = self._names[(index + 1) % len(self._names)]
        self._clamp()

    def previous_part(self) -> None:
        index = self._names.index(self.part)
        self.part = self._names[(index - 1) % len(self._names)]
        self._clamp()

    def move_to(self, part: str, row: int, col: int) -> None:
        """Jump to a pixel (e.g. one that was just tapped)."""
        if part not in self._bear:
            return
        self.part = part
        self.row = row
        self.col = col
        self._clamp()
