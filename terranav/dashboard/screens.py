"""Modal screens: key binding help."""

from __future__ import annotations

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Label

from .css import HELP_CSS


_HELP_BINDINGS: list[tuple[str, str]] = [
    ("", "─── Navigation ───"),
    ("↑/↓  k/j", "Move within the column (wraps, pages)"),
    ("←/→  h/l", "Change column (window slides, wraps)"),
    ("Enter", "Confirm command + path up to focused level"),
    ("", "─── Filtering ───"),
    ("/", "Filter the focused column"),
    ("Backspace", "Delete filter character"),
    ("Esc", "Remove the filter being edited"),
    ("", "─── Session ───"),
    ("q  Esc", "Quit without a selection"),
    ("?", "Show this help"),
    ("Esc  ?  q", "Close this help"),
]


class HelpScreen(ModalScreen):
    CSS = HELP_CSS

    def compose(self) -> ComposeResult:
        with Vertical(id="help-dialog"):
            yield Label("🌍 TerraNav Keybindings", classes="help-title")
            for key, desc in _HELP_BINDINGS:
                if not key:
                    yield Label(desc, classes="help-section")
                    continue
                with Horizontal(classes="help-row"):
                    yield Label(key, classes="help-key")
                    yield Label(desc, classes="help-desc")

    def on_key(self, event: events.Key) -> None:
        # Keys never reach the session behind the modal.
        event.prevent_default()
        event.stop()
        if event.key in {"escape", "question_mark", "q"}:
            self.dismiss()
