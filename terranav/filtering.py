"""Pure list helpers: filtering, index remapping and pagination."""

from __future__ import annotations

from .config import (
    BREADCRUMB_HEIGHT,
    COLUMN_PADDING,
    COLUMN_TITLE_HEIGHT,
    ELLIPSIS,
    FOOTER_HEIGHT,
    HEADER_HEIGHT,
    PAGINATION_ROWS,
)


def filter_items(items: list[str], filter_text: str) -> list[str]:
    """Case-insensitive substring filter; empty text keeps every item."""
    if not filter_text:
        return items
    needle = filter_text.lower()
    return [item for item in items if needle in item.lower()]


def find_filtered_index(original: list[str], filtered: list[str], original_index: int) -> int:
    """Map an index in ``original`` to its position in ``filtered`` (-1 if absent)."""
    if original_index < 0 or original_index >= len(original):
        return -1
    target = original[original_index]
    for i, item in enumerate(filtered):
        if item == target:
            return i
    return -1


def find_original_index(original: list[str], filtered: list[str], filtered_index: int) -> int:
    """Map an index in ``filtered`` back to ``original`` (-1 if absent)."""
    if filtered_index < 0 or filtered_index >= len(filtered):
        return -1
    target = filtered[filtered_index]
    for i, item in enumerate(original):
        if item == target:
            return i
    return -1


def page_size_for_height(height: int) -> int:
    """Items that fit in one column page for a terminal ``height``."""
    reserved = (
        HEADER_HEIGHT + BREADCRUMB_HEIGHT + COLUMN_TITLE_HEIGHT
        + FOOTER_HEIGHT + COLUMN_PADDING
    )
    available = max(1, height - reserved)
    return max(1, available - PAGINATION_ROWS)


def total_pages(total: int, page_size: int) -> int:
    if page_size <= 0 or total <= page_size:
        return 1
    return (total + page_size - 1) // page_size


def page_start(index: int, page_size: int) -> int:
    """First index of the page holding ``index``."""
    if page_size <= 0 or index <= 0:
        return 0
    return (index // page_size) * page_size


def paginated_range(offset: int, page_size: int, total: int) -> tuple[int, int]:
    """Visible ``[start, end)`` slice for a scroll offset."""
    start = offset if 0 <= offset < total else 0
    return start, min(start + page_size, total)


def step_cyclic(
    index: int,
    total: int,
    offset: int,
    page_size: int,
    *,
    up: bool,
) -> tuple[int, int]:
    """Move one step with wrap-around and page jumps.

    Leaving the last item of a page lands on the first item of the next page
    and scrolls to it; leaving the first item of a page (past page one) lands
    on the last item of the previous page. Returns ``(index, offset)`` where
    the offset always shows the new index.
    """
    if total <= 0:
        return 0, 0
    size = max(1, page_size)
    pages = total_pages(total, size)
    current_page = min(max(0, offset) // size, pages - 1)
    start = current_page * size

    if up:
        if index <= 0:
            new_index = total - 1
        elif index == start and current_page > 0:
            new_index = min(start - 1, total - 1)
        else:
            new_index = index - 1
    else:
        end = min(start + size - 1, total - 1)
        if index >= total - 1:
            new_index = 0
        elif index == end and current_page < pages - 1:
            new_index = start + size
        else:
            new_index = index + 1

    return new_index, page_start(new_index, size)


def truncate_text(text: str, max_width: int) -> str:
    """Clip ``text`` to ``max_width`` characters, ending in an ellipsis when cut."""
    if max_width <= 0:
        return ""
    if len(text) <= max_width:
        return text
    if max_width <= len(ELLIPSIS):
        return text[:max_width]
    return text[: max_width - len(ELLIPSIS)] + ELLIPSIS
