"""
Color Panel: a row of crayon swatches under the bear.

Click a swatch (or press its number key) to pick that color.
The selected swatch gets a heavy border.
"""

from textual.containers import Horizontal
from textual.widgets import Static
from textual.message import Message
from textual.app import ComposeResult
from textual import events

from .palette import PALETTE, contrast_color, key_for_color


class ColorPicked(Message):
    """Message sent when a swatch is clicked."""

    def __init__(self, color: str) -> None:
        self.color = color
        super().__init__()


class ColorSwatch(Static):
    """A single clickable color with its number key on it."""

    DEFAULT_CSS = """
    ColorSwatch {
        width: 7;
        height: 3;
        content-align: center middle;
        text-align: center;
        border: round $surface-lighten-2;
        margin: 0 1;
    }

    ColorSwatch.selected {
        border: heavy $accent;
        text-style: bold;
    }
    """

    def __init__(self, color: str, **kwargs):
        super().__init__(**kwargs)
        self.swatch_color = color
        self.shortcut = key_for_color(color) or ""
        self.styles.background = color

    def render(self) -> str:
        return f"[{contrast_color(self.swatch_color)}]{self.shortcut}[/]"

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.post_message(ColorPicked(self.swatch_color))


class ColorPanel(Horizontal):
    """All palette swatches, left to right."""

    DEFAULT_CSS = """
    ColorPanel {
        width: 100%;
        height: 5;
        align: center middle;
        padding: 1 0 0 0;
        background: $background;
    }
    """

    def __init__(self, selected: str, **kwargs):
        super().__init__(**kwargs)
        self._selected = selected

    def compose(self) -> ComposeResult:
        for name, color in PALETTE:
            classes = "selected" if color == self._selected else ""
            yield ColorSwatch(color, id=f"swatch-{name}", classes=classes)

    @property
    def selected(self) -> str:
        return self._selected

    def select(self, color: str) -> None:
        """Highlight the swatch for this color."""
        self._selected = color
        for swatch in self.query(ColorSwatch):
            swatch.set_class(swatch.swatch_color == color, "selected")
