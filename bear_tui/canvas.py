"""
Bear Canvas: the coloring page.

Draws the bear's pixel grids and turns taps into flood fills:
- Click (tap) a pixel to fill its patch with the selected color
- Arrow keys move the cursor inside a body part
- Tab / Shift+Tab jump to the next / previous body part
- Space or Enter fills at the cursor

The canvas never keeps its own copy of the colors. Every render re-reads
the bear's grids.
"""

from textual.widget import Widget
from textual.widgets import Static
from textual.strip import Strip
from textual.message import Message
from textual import events
from rich.segment import Segment
from rich.style import Style

from .bear import Bear, PaintState
from .constants import CURSOR_GLYPH, CURSOR_BLINK_INTERVAL, PIXEL_WIDTH, PIXEL_HEIGHT
from .layout import BearLayout, PixelCursor
from .palette import contrast_color, color_name


# Canvas surface backgrounds (inside viewport, matches theme surface)
DEFAULT_BG_DARK = "#2B2118"
DEFAULT_BG_LIGHT = "#F6EEDF"

ARROW_KEYS = ("up", "down", "left", "right")


# =============================================================================
# MESSAGES
# =============================================================================

class BearPainted(Message):
    """Message sent after a tap actually changed some pixels."""

    def __init__(self, part: str, row: int, col: int, color: str) -> None:
        self.part = part
        self.row = row
        self.col = col
        self.color = color
        super().__init__()


# =============================================================================
# CANVAS WIDGET
# =============================================================================

class BearCanvas(Widget, can_focus=True):
    """
    Custom canvas widget that renders the bear line by line.

    Uses render_line() for full control over rendering.
    """

    DEFAULT_CSS = """
    BearCanvas {
        width: 100%;
        height: 100%;
    }
    """

    def __init__(self, bear: Bear, paint_state: PaintState, **kwargs) -> None:
        super().__init__(**kwargs)
        self._bear = bear
        self._paint_state = paint_state
        self.pixel_cursor = PixelCursor(bear)
        self._cached_bear_layout: BearLayout | None = None

        # Cursor blink state
        self._cursor_visible = True
        self._blink_timer = None

    def on_mount(self) -> None:
        """Start cursor blinking when canvas is mounted."""
        self._start_blink()

    def on_resize(self, event: events.Resize) -> None:
        self._cached_bear_layout = None

    @property
    def bear_layout(self) -> BearLayout:
        """Layout for the current widget size (rebuilt after resize)."""
        width, height = self.size.width, self.size.height
        layout = self._cached_bear_layout
        if layout is None or (layout.width, layout.height) != (width, height):
            layout = self._cached_bear_layout = BearLayout(self._bear, width, height)
        return layout

    def _get_default_bg(self) -> str:
        """Get default background based on current theme."""
        try:
            is_dark = "dark" in self.app.theme
            return DEFAULT_BG_DARK if is_dark else DEFAULT_BG_LIGHT
        except Exception:
            return DEFAULT_BG_DARK

    def _toggle_blink(self) -> None:
        """Toggle cursor visibility for blink effect."""
        self._cursor_visible = not self._cursor_visible
        self.refresh()

    def _start_blink(self) -> None:
        """(Re)start cursor blinking with the cursor showing."""
        self._cursor_visible = True
        if self._blink_timer is not None:
            self._blink_timer.stop()
        self._blink_timer = self.set_interval(CURSOR_BLINK_INTERVAL, self._toggle_blink)

    def render_line(self, y: int) -> Strip:
        """Render a single line of the canvas."""
        width = self.size.width
        if width <= 0:
            return Strip([])

        bg_style = Style(bgcolor=self._get_default_bg())
        cursor_part, cursor_row, cursor_col = self.pixel_cursor.position
        glyph = CURSOR_GLYPH[:PIXEL_WIDTH].center(PIXEL_WIDTH)

        segments = []
        x = 0
        for placement in self.bear_layout.placements_on_line(y):
            if placement.x > x:
                segments.append(Segment(" " * (placement.x - x), bg_style))

            row = (y - placement.y) // PIXEL_HEIGHT
            grid = self._bear.part(placement.name)
            for col, color in enumerate(grid.row(row)):
                is_cursor = (
                    self._cursor_visible
                    and placement.name == cursor_part
                    and row == cursor_row
                    and col == cursor_col
                )
                if is_cursor:
                    style = Style(color=contrast_color(color), bgcolor=color, bold=True)
                    segments.append(Segment(glyph, style))
                else:
                    segments.append(Segment(" " * PIXEL_WIDTH, Style(bgcolor=color)))
            x = placement.x + placement.width

        if x < width:
            segments.append(Segment(" " * (width - x), bg_style))

        return Strip(segments).crop(0, width)

    def paint_at(self, part: str, row: int, col: int) -> bool:
        """Fill from one pixel with the selected color. Returns True if anything changed."""
        color = self._paint_state.selected_color
        if not self._bear.fill(part, row, col, color):
            return False

        self.post_message(BearPainted(part, row, col, color))
        self.refresh()
        return True

    def paint_at_cursor(self) -> bool:
        """Fill from the pixel under the cursor."""
        return self.paint_at(*self.pixel_cursor.position)

    def reset(self) -> None:
        """Start a new bear."""
        self._bear.reset()
        self.refresh()

    def on_click(self, event: events.Click) -> None:
        """Tap a pixel: move the cursor there and paint."""
        hit = self.bear_layout.hit_test(event.x, event.y)
        if hit is None:
            return
        event.stop()
        self.focus()
        self.pixel_cursor.move_to(*hit)
        self._start_blink()
        self.paint_at(*hit)

    def on_key(self, event: events.Key) -> None:
        """Handle cursor movement and painting keys."""
        key = event.key

        if key in ARROW_KEYS:
            self.pixel_cursor.move(key)
        elif key == "tab":
            self.pixel_cursor.next_part()
        elif key == "shift+tab":
            self.pixel_cursor.previous_part()
        elif key in ("space", "enter"):
            self.paint_at_cursor()
        else:
            return

        event.stop()
        event.prevent_default()
        self._start_blink()
        self.refresh()


# =============================================================================
# HEADER WIDGET
# =============================================================================

class CanvasHeader(Static):
    """Shows the selected color and hints."""

    DEFAULT_CSS = """
    CanvasHeader {
        height: 1;
        dock: top;
        text-align: center;
        color: $text-muted;
        background: $surface;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._color = "#FFFFFF"
        self._has_content = False

    def update_state(self, color: str, has_content: bool) -> None:
        """Update displayed state."""
        self._color = color
        self._has_content = has_content
        self.refresh()

    def render(self) -> str:
        text_color = contrast_color(self._color)
        swatch = f"[{text_color} on {self._color}] {color_name(self._color).title()} [/]"
        hint = "1-7: colors  Space: paint  Tab: next part"
        if self._has_content:
            hint += "  Backspace: new bear"
        return f"{swatch}  [dim]({hint})[/]"
