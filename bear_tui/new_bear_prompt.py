"""
New Bear Prompt: asks before wiping a colored bear.

Two big buttons, "Keep coloring" and "New bear".
Left/Right switch between them, Enter picks, Escape keeps coloring.
Dismisses with True when the kid wants a fresh bear.
"""

from textual.screen import ModalScreen
from textual.containers import Container, Horizontal
from textual.widgets import Static, Button
from textual.app import ComposeResult
from textual import events


class NewBearPrompt(ModalScreen[bool]):
    """Modal screen shown before resetting a bear that has color on it."""

    CSS = """
    NewBearPrompt {
        align: center middle;
    }

    #new-bear-dialog {
        width: 50;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: heavy $primary;
    }

    #new-bear-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    #new-bear-buttons {
        width: 100%;
        height: auto;
        align: center middle;
    }

    #new-bear-buttons Button {
        width: 18;
        margin: 0 1;
    }
    """

    BINDINGS = [("escape", "dismiss(False)", "Keep")]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._selected_index = 0  # 0 = Keep, 1 = New

    def compose(self) -> ComposeResult:
        with Container(id="new-bear-dialog"):
            yield Static("Start a new bear?", id="new-bear-title")
            with Horizontal(id="new-bear-buttons"):
                yield Button("Keep coloring", id="btn-keep", variant="success")
                yield Button("New bear", id="btn-new", variant="primary")

    def on_mount(self) -> None:
        """Focus the Keep button by default."""
        self._update_button_focus()

    def _update_button_focus(self) -> None:
        if self._selected_index == 0:
            self.query_one("#btn-keep", Button).focus()
        else:
            self.query_one("#btn-new", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button clicks (and Enter on the focused button)."""
        event.stop()
        self.dismiss(event.button.id == "btn-new")

    def on_key(self, event: events.Key) -> None:
        if event.key in ("left", "right"):
            event.stop()
            self._selected_index = 1 - self._selected_index
            self._update_button_focus()
