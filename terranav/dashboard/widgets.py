"""Column widgets and the pure text rendering behind them."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from ..config import (
    COLUMN_OVERHEAD,
    CURSOR_WIDTH,
    FILTER_PLACEHOLDER,
    MIN_COLUMN_WIDTH,
    MIN_ITEM_TEXT_WIDTH,
)
from ..filtering import truncate_text
from ..models import ColumnView


_TITLE_STYLE = "bold #00d9ff"
_FILTER_STYLE = "#00d9ff"
_PLACEHOLDER_STYLE = "italic #555555"
_ITEM_STYLE = "#ffffff"
_SELECTED_STYLE = "bold #ff6b9d"
_PAGE_DOT_STYLE = "#555555"
_ACTIVE_PAGE_DOT_STYLE = "bold #00d9ff"

# Item padding (2) + unfocused column padding (6)
_ITEM_RESERVED = CURSOR_WIDTH + 2 + 6


def column_width(total_width: int, visible_columns: int) -> int:
    """Static width for the action column plus ``visible_columns`` navigation columns."""
    slots = 1 + max(1, visible_columns)
    width = (total_width - COLUMN_OVERHEAD * slots) // slots
    return max(MIN_COLUMN_WIDTH, width)


def item_text_width(width: int) -> int:
    return max(MIN_ITEM_TEXT_WIDTH, width - _ITEM_RESERVED)


def page_dots(page: int, total: int) -> Text:
    """One dot per page, the current page highlighted; empty for a single page."""
    dots = Text()
    if total <= 1:
        return dots
    for n in range(1, total + 1):
        dots.append("•", style=_ACTIVE_PAGE_DOT_STYLE if n == page else _PAGE_DOT_STYLE)
    return dots


def render_column(view: ColumnView, width: int) -> Text:
    """Render one column: title or filter line, blank line, page of items, page dots.

    Every column pads to the page size so columns line up.
    """
    out = Text(no_wrap=True, overflow="ellipsis")
    if view.filter_text is not None:
        out.append("/ ", style=_FILTER_STYLE)
        if view.filter_text:
            out.append(view.filter_text, style=_FILTER_STYLE)
        else:
            out.append(FILTER_PLACEHOLDER, style=_PLACEHOLDER_STYLE)
        if view.filter_editing:
            out.append("▏", style=_FILTER_STYLE)
    else:
        icon = "⚡ " if view.column_id == 0 else "📦 "
        out.append(icon + view.title, style=_TITLE_STYLE)
    out.append("\n\n")

    max_text = item_text_width(width)
    for i, item in enumerate(view.items):
        selected = i == view.selected
        cursor = "►" if selected else " "
        label = truncate_text(item, max_text)
        out.append(f"{cursor} ")
        out.append(f" {label} ", style=_SELECTED_STYLE if selected else _ITEM_STYLE)
        out.append("\n")

    for _ in range(max(0, view.page_size - len(view.items))):
        out.append("\n")

    out.append_text(page_dots(view.page, view.total_pages))
    return out


class ColumnPanel(Static):
    """One selectable list; focus adds the rounded border."""

    def show(self, view: ColumnView, width: int) -> None:
        self.styles.width = width
        self.set_class(view.focused, "focused")
        self.remove_class("hidden")
        self.update(render_column(view, width))

    def hide(self) -> None:
        self.add_class("hidden")


class ArrowIndicator(Static):
    """Overflow marker shown beside the sliding window."""

    def set_visible(self, visible: bool) -> None:
        self.set_class(not visible, "hidden")
