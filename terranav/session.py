"""Column focus, sliding window, pagination and filtering on top of the Navigator.

Column ids: 0 is the fixed action list, ``depth + 1`` is the navigation
column for tree depth ``depth``. Focus is held as an ``ActionColumn`` or
``NavigationColumn`` value so that ids and depths are never mixed up.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

from .config import (
    ACTIONS_TITLE,
    DEFAULT_VISIBLE_COLUMNS,
    FILTER_CHAR_LIMIT,
    LEVEL_TITLE,
    MIN_VISIBLE_COLUMNS,
    NO_ITEM_SELECTED,
)
from .filtering import (
    filter_items,
    find_filtered_index,
    find_original_index,
    page_size_for_height,
    page_start,
    paginated_range,
    step_cyclic,
    total_pages,
)
from .models import (
    ActionColumn,
    ColumnView,
    FocusedColumn,
    NavigationColumn,
    Node,
    ScanResult,
    Selection,
)
from .navigator import NavigationState, Navigator

logger = logging.getLogger(__name__)


class NavigationSession:
    """State machine turning discrete input events into Navigator calls."""

    def __init__(
        self,
        root: Optional[Node],
        max_depth: int,
        actions: Sequence[str],
        visible_columns: int = DEFAULT_VISIBLE_COLUMNS,
    ) -> None:
        self.navigator = Navigator(root, max_depth)
        self.state = NavigationState.create(max_depth)
        self.actions: list[str] = list(actions)
        self.visible_columns = max(MIN_VISIBLE_COLUMNS, visible_columns)
        self.action_index = 0
        self.focus: FocusedColumn = ActionColumn()
        self.window_offset = 0

        # Indexed by column id; None means no filter for that column.
        column_count = max(0, max_depth) + 1
        self.filters: list[Optional[str]] = [None] * column_count
        self.scroll_offsets: list[int] = [0] * column_count
        self.active_filter: Optional[int] = None

        self.width = 0
        self.height = 0
        self.page_size = page_size_for_height(0)
        self.ready = False
        self.selection: Optional[Selection] = None

        self.navigator.propagate_selection(self.state)

    @classmethod
    def from_scan(
        cls,
        result: ScanResult,
        actions: Sequence[str],
        visible_columns: int = DEFAULT_VISIBLE_COLUMNS,
    ) -> NavigationSession:
        return cls(result.root, result.max_depth, actions, visible_columns)

    # ── Addressing ───────────────────────────────────────────────────

    @property
    def max_depth(self) -> int:
        return self.navigator.max_depth

    @property
    def focused_column(self) -> int:
        return self.focus.column_id()

    @property
    def navigation_depth(self) -> int:
        """Focused tree depth, or -1 while the action column has focus."""
        if isinstance(self.focus, NavigationColumn):
            return self.focus.depth
        return -1

    @property
    def confirmed(self) -> bool:
        return self.selection is not None

    def _items(self, column_id: int) -> list[str]:
        if column_id == 0:
            return self.actions
        depth = column_id - 1
        if 0 <= depth < len(self.state.columns):
            return self.state.columns[depth]
        return []

    def _selected(self, column_id: int) -> int:
        if column_id == 0:
            return self.action_index
        return self.state.selected_indices[column_id - 1]

    def _select(self, column_id: int, index: int) -> None:
        if index < 0:
            return
        if column_id == 0:
            self.action_index = index
            return
        self.state.selected_indices[column_id - 1] = index
        self.navigator.propagate_selection(self.state)

    def filter_text(self, column_id: int) -> Optional[str]:
        if 0 <= column_id < len(self.filters):
            return self.filters[column_id]
        return None

    def _filter_applies(self, column_id: int) -> bool:
        return bool(self.filter_text(column_id))

    def filtered_items(self, column_id: int) -> list[str]:
        return filter_items(self._items(column_id), self.filter_text(column_id) or "")

    def _visible_index(self, column_id: int) -> int:
        """Selection position inside the filtered list (-1 when filtered out)."""
        if self._filter_applies(column_id):
            return find_filtered_index(
                self._items(column_id),
                self.filtered_items(column_id),
                self._selected(column_id),
            )
        return self._selected(column_id)

    def _sync_scroll(self, column_id: int) -> None:
        index = self._visible_index(column_id)
        self.scroll_offsets[column_id] = page_start(index, self.page_size) if index >= 0 else 0

    def _sync_scroll_from(self, column_id: int) -> None:
        """Scroll ``column_id`` and every deeper column to show its selection."""
        for cid in range(column_id, len(self.scroll_offsets)):
            self._sync_scroll(cid)

    # ── Events ───────────────────────────────────────────────────────

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.page_size = page_size_for_height(height)
        self.ready = True
        self._sync_scroll_from(0)

    def move_up(self) -> None:
        self._move_vertical(up=True)

    def move_down(self) -> None:
        self._move_vertical(up=False)

    def _move_vertical(self, up: bool) -> None:
        cid = self.focused_column
        original = self._items(cid)
        visible = self.filtered_items(cid)
        if not visible:
            return

        filtered = self._filter_applies(cid)
        current = self._visible_index(cid)
        if filtered and current < 0:
            self._select(cid, find_original_index(original, visible, 0))
            self._sync_scroll_from(cid)
            return

        new_index, offset = step_cyclic(
            current, len(visible), self.scroll_offsets[cid], self.page_size, up=up,
        )
        target = find_original_index(original, visible, new_index) if filtered else new_index
        self._select(cid, target)
        self.scroll_offsets[cid] = offset
        self._sync_scroll_from(cid + 1)

    def move_left(self) -> None:
        self._blur_filter()
        if isinstance(self.focus, ActionColumn):
            last = self.navigator.max_visible_depth(self.state) - 1
            if last >= 0:
                self.focus = NavigationColumn(last)
                self.window_offset = max(0, last - self.visible_columns + 1)
        elif self.focus.depth == 0:
            self.focus = ActionColumn()
        else:
            depth = self.focus.depth - 1
            self.focus = NavigationColumn(depth)
            if depth < self.window_offset:
                self.window_offset -= 1
        self._resume_filter()

    def move_right(self) -> None:
        self._blur_filter()
        visible_depth = self.navigator.max_visible_depth(self.state)
        next_depth = self.navigation_depth + 1
        if next_depth < visible_depth:
            self.focus = NavigationColumn(next_depth)
            if next_depth > self.window_offset + self.visible_columns - 1:
                self.window_offset += 1
        else:
            self.focus = ActionColumn()
            self.window_offset = 0
        self._resume_filter()

    def _blur_filter(self) -> None:
        self.active_filter = None

    def _resume_filter(self) -> None:
        cid = self.focused_column
        if self.filter_text(cid) is not None:
            self.active_filter = cid
            # Upstream moves may have changed the items under this filter.
            self._revalidate_selection(cid)

    # ── Filtering ────────────────────────────────────────────────────

    @property
    def filter_editing(self) -> bool:
        return self.active_filter is not None

    def start_filter(self) -> None:
        """Open (or reopen) the focused column's filter for editing."""
        cid = self.focused_column
        if self.filters[cid] is None:
            self.filters[cid] = ""
        self.active_filter = cid

    def set_filter_text(self, text: str) -> None:
        cid = self.active_filter
        if cid is None:
            return
        text = text[:FILTER_CHAR_LIMIT]
        if text == self.filters[cid]:
            return
        self.filters[cid] = text
        self._revalidate_selection(cid)

    def append_filter_text(self, chars: str) -> None:
        if self.active_filter is None:
            return
        self.set_filter_text((self.filters[self.active_filter] or "") + chars)

    def delete_filter_char(self) -> None:
        if self.active_filter is None:
            return
        self.set_filter_text((self.filters[self.active_filter] or "")[:-1])

    def clear_filter(self) -> None:
        """Drop the filter being edited and leave edit mode."""
        cid = self.active_filter
        if cid is None:
            return
        self.filters[cid] = None
        self.active_filter = None
        self._sync_scroll_from(cid)

    def _revalidate_selection(self, column_id: int) -> None:
        visible = self.filtered_items(column_id)
        if visible and self._visible_index(column_id) < 0:
            self._select(
                column_id,
                find_original_index(self._items(column_id), visible, 0),
            )
        self._sync_scroll_from(column_id)

    # ── Confirmation ─────────────────────────────────────────────────

    def resolve_target(self) -> Optional[Node]:
        """Action column targets the whole tree; a navigation column stops at its depth."""
        if isinstance(self.focus, ActionColumn):
            return self.navigator.root
        return self.navigator.node_at_depth(self.state, self.focus.depth)

    def confirm(self) -> Optional[Selection]:
        node = self.resolve_target()
        if node is None:
            return None
        self.selection = Selection(action=self.selected_action, path=node.path)
        logger.debug("confirmed %s on %s", self.selection.action, self.selection.path)
        return self.selection

    @property
    def selected_action(self) -> str:
        if 0 <= self.action_index < len(self.actions):
            return self.actions[self.action_index]
        return NO_ITEM_SELECTED

    @property
    def selected_path(self) -> str:
        node = self.resolve_target()
        return node.path if node is not None else NO_ITEM_SELECTED

    # ── Rendering queries ────────────────────────────────────────────

    def visible_depths(self) -> list[int]:
        """Navigation depths inside the sliding window that have content."""
        depths: list[int] = []
        end = min(self.window_offset + self.visible_columns, self.max_depth)
        for depth in range(self.window_offset, end):
            if not self.state.columns[depth]:
                break
            depths.append(depth)
        return depths

    def column_view(self, column_id: int) -> ColumnView:
        visible = self.filtered_items(column_id)
        index = self._visible_index(column_id)
        offset = self.scroll_offsets[column_id]
        start, end = paginated_range(offset, self.page_size, len(visible))
        title = ACTIONS_TITLE if column_id == 0 else LEVEL_TITLE.format(n=column_id)
        return ColumnView(
            column_id=column_id,
            title=title,
            items=visible[start:end],
            selected=index - start if start <= index < end else None,
            page=start // self.page_size + 1,
            total_pages=total_pages(len(visible), self.page_size),
            page_size=self.page_size,
            filter_text=self.filter_text(column_id),
            filter_editing=self.active_filter == column_id,
            focused=self.focused_column == column_id,
        )

    def action_view(self) -> ColumnView:
        return self.column_view(0)

    def navigation_view(self, depth: int) -> ColumnView:
        return self.column_view(depth + 1)

    def has_left_overflow(self) -> bool:
        return self.window_offset > 0

    def can_advance_further(self) -> bool:
        depth = self.navigation_depth
        if depth < 0 or depth >= len(self.state.current_nodes):
            return False
        node = self.state.current_nodes[depth]
        return node is not None and node.has_children()

    def has_right_overflow(self) -> bool:
        if self.window_offset + self.visible_columns >= self.max_depth:
            return False
        return self.can_advance_further()

    def breadcrumb(self) -> str:
        return self.navigator.navigation_path(self.state, self.navigation_depth)
