#!/usr/bin/env python3
"""
Color the Bear - Main Textual TUI Application

A one-screen coloring book for kids ages 3-8.

Controls:
- Click a pixel: fill its patch with the selected color
- Click a swatch, or press 1-7: pick a color
- Arrows / Tab / Shift+Tab: move the cursor; Space or Enter: paint
- Backspace: start a new bear (asks first)
- F12: Toggle dark/light theme
"""

import argparse
import logging
import os

from textual.app import App, ComposeResult
from textual.containers import Container, Vertical
from textual.widgets import Static
from textual.binding import Binding
from textual.css.query import NoMatches
from textual.theme import Theme

from . import __version__
from .bear import Bear, PaintState
from .canvas import BearCanvas, BearPainted, CanvasHeader
from .color_panel import ColorPanel, ColorPicked
from .constants import (
    APP_TITLE, ICON_BRUSH, ICON_MOON, ICON_SUN,
    VIEWPORT_CONTENT_COLS, VIEWPORT_CONTENT_ROWS,
    ENV_LOG_FILE, ENV_LOG_LEVEL, ENV_THEME, DEFAULT_LOG_LEVEL,
)
from .new_bear_prompt import NewBearPrompt
from .palette import PALETTE_KEYS, color_for_key

logger = logging.getLogger(__name__)

THEME_DARK = "honey-dark"
THEME_LIGHT = "honey-light"


class AppTitle(Static):
    """Shows the app title and theme icon above the viewport"""

    DEFAULT_CSS = """
    AppTitle {
        width: 100%;
        height: 1;
        text-align: center;
        color: $primary;
        text-style: bold;
    }
    """

    def render(self) -> str:
        is_dark = "dark" in getattr(self.app, 'active_theme', THEME_DARK)
        theme_icon = ICON_MOON if is_dark else ICON_SUN
        return f"{ICON_BRUSH}  {APP_TITLE}  [dim]F12 {theme_icon}[/]"


class BearApp(App):
    """
    Color the Bear - tap the bear to paint it.

    F12: Toggle dark/light mode
    1-7: Pick a color
    Backspace: New bear
    """

    CSS = f"""
    Screen {{
        background: $background;
    }}

    #outer-container {{
        width: 100%;
        height: 100%;
        align: center middle;
        background: $background;
    }}

    #viewport-wrapper {{
        width: auto;
        height: auto;
    }}

    #app-title {{
        width: {VIEWPORT_CONTENT_COLS + 4};
        margin-bottom: 1;
    }}

    #viewport {{
        width: {VIEWPORT_CONTENT_COLS + 4};
        height: {VIEWPORT_CONTENT_ROWS + 4};
        border: heavy $primary;
        background: $surface;
        padding: 1;
    }}

    #bear-canvas {{
        width: 100%;
        height: 1fr;
    }}

    #color-panel {{
        dock: bottom;
    }}
    """

    BINDINGS = [
        Binding("f12", "toggle_theme", "Theme", show=False, priority=True),
        Binding("backspace", "new_bear", "New bear", show=False),
        Binding("delete", "new_bear", "New bear", show=False),
    ] + [
        Binding(key, f"select_color('{key}')", "Color", show=False)
        for key in PALETTE_KEYS
    ]

    def __init__(self, theme_name: str = "dark"):
        super().__init__()
        self.bear = Bear()
        self.paint_state = PaintState()
        self.active_theme = THEME_LIGHT if theme_name == "light" else THEME_DARK
        self.canvas_header: CanvasHeader | None = None
        self.bear_canvas: BearCanvas | None = None
        self.color_panel: ColorPanel | None = None

        self.register_theme(
            Theme(
                name=THEME_DARK,
                primary="#C49A6C",
                secondary="#A2845E",
                warning="#C4A060",
                error="#C46B6B",
                success="#7BC48A",
                accent="#E8C8A0",
                background="#1F1711",
                surface="#2B2118",
                panel="#2B2118",
                dark=True,
            )
        )
        self.register_theme(
            Theme(
                name=THEME_LIGHT,
                primary="#8A5A2B",
                secondary="#6E4820",
                warning="#A08040",
                error="#A04050",
                success="#40A050",
                accent="#6E4820",
                background="#FBF5EA",
                surface="#F6EEDF",
                panel="#F6EEDF",
                dark=False,
            )
        )
        self.theme = self.active_theme

    def compose(self) -> ComposeResult:
        """Create the UI layout"""
        self.canvas_header = CanvasHeader(id="canvas-header")
        self.bear_canvas = BearCanvas(self.bear, self.paint_state, id="bear-canvas")
        self.color_panel = ColorPanel(self.paint_state.selected_color, id="color-panel")

        with Container(id="outer-container"):
            with Vertical(id="viewport-wrapper"):
                yield AppTitle(id="app-title")
                with Container(id="viewport"):
                    yield self.canvas_header
                    yield self.bear_canvas
            yield self.color_panel

    def on_mount(self) -> None:
        """Called when app starts"""
        self._apply_theme()
        self._update_header()
        self.bear_canvas.focus()
        logger.info("Color the Bear %s started", __version__)

    def _apply_theme(self) -> None:
        """Apply the current color theme"""
        self.theme = self.active_theme
        if self.bear_canvas is not None:
            self.bear_canvas.refresh()
        try:
            self.query_one("#app-title", AppTitle).refresh()
        except NoMatches:
            pass

    def _update_header(self) -> None:
        if self.canvas_header is not None:
            self.canvas_header.update_state(self.paint_state.selected_color, self.bear.has_content())

    def select_color(self, color: str) -> None:
        """Make color the one the next tap paints with."""
        self.paint_state.select(color)
        if self.color_panel is not None:
            self.color_panel.select(color)
        self._update_header()

    def action_select_color(self, key: str) -> None:
        """Pick a color with a number key (1-7)"""
        color = color_for_key(key)
        if color is not None:
            self.select_color(color)

    def on_color_picked(self, event: ColorPicked) -> None:
        self.select_color(event.color)

    def on_bear_painted(self, event: BearPainted) -> None:
        self._update_header()

    def action_new_bear(self) -> None:
        """Ask before clearing the bear (Backspace)"""
        if not self.bear.has_content() or isinstance(self.screen, NewBearPrompt):
            return

        def handle_result(start_over: bool | None) -> None:
            if not start_over:
                return
            self.bear_canvas.reset()
            self._update_header()

        self.push_screen(NewBearPrompt(), handle_result)

    def action_toggle_theme(self) -> None:
        """Toggle between dark and light mode (F12)"""
        self.active_theme = THEME_LIGHT if self.active_theme == THEME_DARK else THEME_DARK
        self._apply_theme()


def setup_logging(log_file: str | None, level: str) -> None:
    """Send log records to a file. Textual owns the terminal, so no file means no logging."""
    if not log_file:
        logging.getLogger().addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="color-the-bear",
        description="A coloring book for kids: tap the bear to paint it.",
    )
    parser.add_argument("--light", action="store_true",
                        help="Start with the light theme")
    parser.add_argument("--log-file", default=os.environ.get(ENV_LOG_FILE),
                        metavar="PATH", help=f"Write a debug log here (env: {ENV_LOG_FILE})")
    parser.add_argument("--log-level", default=os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL),
                        help=f"Log level (env: {ENV_LOG_LEVEL}, default {DEFAULT_LOG_LEVEL})")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Entry point for Color the Bear"""
    args = parse_args(argv)
    setup_logging(args.log_file, args.log_level)

    theme_name = "light" if args.light else os.environ.get(ENV_THEME, "dark")
    app = BearApp(theme_name=theme_name)
    app.run()


if __name__ == "__main__":
    main()
