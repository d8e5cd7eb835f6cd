"""TerraNav TUI: the main App class."""

from __future__ import annotations

import logging
from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Label, Static

from ..models import Selection
from ..session import NavigationSession
from .css import APP_CSS
from .screens import HelpScreen
from .widgets import ArrowIndicator, ColumnPanel, column_width

logger = logging.getLogger(__name__)

APP_TITLE = "TerraNav - Terragrunt stack navigator"
HELP_TEXT = (
    "↑↓: navigate | ←→: change column | /: filter | "
    "enter: select/confirm | ?: help | q/esc: quit"
)

_UP_KEYS = {"up", "k"}
_DOWN_KEYS = {"down", "j"}
_LEFT_KEYS = {"left", "h"}
_RIGHT_KEYS = {"right", "l"}


class TerraNavApp(App[Optional[Selection]]):
    TITLE = "TerraNav"
    DEFAULT_CSS = APP_CSS
    ENABLE_COMMAND_PALETTE = False
    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
        Binding("ctrl+q", "quit", "Quit", show=False, priority=True),
    ]

    def __init__(self, session: NavigationSession) -> None:
        super().__init__()
        self.session = session

    def compose(self) -> ComposeResult:
        yield Container(
            Vertical(
                Label(f"🌍 {APP_TITLE}", id="header"),
                Static("", id="breadcrumb"),
                Horizontal(
                    ColumnPanel("", id="action-column"),
                    ArrowIndicator("«", id="arrow-left", classes="hidden"),
                    *[
                        ColumnPanel("", id=f"nav-slot-{i}", classes="hidden")
                        for i in range(self.session.visible_columns)
                    ],
                    ArrowIndicator("»", id="arrow-right", classes="hidden"),
                    id="columns",
                ),
                Static(HELP_TEXT, id="footer"),
            ),
        )

    def on_mount(self) -> None:
        self.session.resize(self.size.width, self.size.height)
        self._refresh_view()

    def on_resize(self, event: events.Resize) -> None:
        self.session.resize(event.size.width, event.size.height)
        self._refresh_view()

    def on_key(self, event: events.Key) -> None:
        if len(self.screen_stack) > 1:
            return
        if self._dispatch_key(event.key, event.character):
            event.prevent_default()
            event.stop()
            self._refresh_view()

    def _dispatch_key(self, key: str, character: str | None) -> bool:
        """Apply one key press to the session; return True when it was consumed."""
        session = self.session
        if session.filter_editing:
            if key == "escape":
                session.clear_filter()
            elif key == "enter":
                self.action_confirm()
            elif key == "up":
                session.move_up()
            elif key == "down":
                session.move_down()
            elif key == "left":
                session.move_left()
            elif key == "right":
                session.move_right()
            elif key == "backspace":
                session.delete_filter_char()
            elif character and character.isprintable():
                session.append_filter_text(character)
            else:
                return False
            return True

        if key in {"q", "escape"}:
            self.exit(None)
        elif key == "slash" or character == "/":
            session.start_filter()
        elif key == "question_mark" or character == "?":
            self.push_screen(HelpScreen())
        elif key == "enter":
            self.action_confirm()
        elif key in _UP_KEYS:
            session.move_up()
        elif key in _DOWN_KEYS:
            session.move_down()
        elif key in _LEFT_KEYS:
            session.move_left()
        elif key in _RIGHT_KEYS:
            session.move_right()
        else:
            return False
        return True

    def action_confirm(self) -> None:
        """Exit with the selection; stay running when nothing resolves."""
        selection = self.session.confirm()
        if selection is None:
            logger.debug("confirm ignored: no node at focused column")
            return
        self.exit(selection)

    def _refresh_view(self) -> None:
        session = self.session
        if not session.ready:
            return
        width = column_width(session.width, session.visible_columns)

        self.query_one("#breadcrumb", Static).update(f"📁 {session.breadcrumb()}")
        self.query_one("#action-column", ColumnPanel).show(session.action_view(), width)
        self.query_one("#arrow-left", ArrowIndicator).set_visible(session.has_left_overflow())
        self.query_one("#arrow-right", ArrowIndicator).set_visible(session.has_right_overflow())

        depths = session.visible_depths()
        for slot in range(session.visible_columns):
            panel = self.query_one(f"#nav-slot-{slot}", ColumnPanel)
            if slot < len(depths):
                panel.show(session.navigation_view(depths[slot]), width)
            else:
                panel.hide()


def run_browser(session: NavigationSession) -> Optional[Selection]:
    """Run the dashboard until the operator confirms or quits."""
    app = TerraNavApp(session)
    return app.run()
