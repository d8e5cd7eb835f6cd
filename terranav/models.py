"""Core data types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from .config import UNIT_MARKER


@dataclass
class Node:
    name: str
    path: str
    is_unit: bool = False
    children: list[Node] = field(default_factory=list)
    depth: int = 0             # distance from the scan root

    def has_children(self) -> bool:
        return bool(self.children)

    def child_labels(self) -> list[str]:
        """Display labels for the children, unit children carry the marker."""
        return [
            child.name + UNIT_MARKER if child.is_unit else child.name
            for child in self.children
        ]

    def child_at(self, index: int) -> Optional[Node]:
        if index < 0 or index >= len(self.children):
            return None
        return self.children[index]

    def walk(self):
        """Yield every node below this one in pre-order."""
        for child in self.children:
            yield child
            yield from child.walk()


@dataclass
class SkippedPath:
    path: str
    reason: str


@dataclass
class ScanResult:
    root: Node
    max_depth: int
    skipped: list[SkippedPath] = field(default_factory=list)

    @property
    def unit_count(self) -> int:
        return sum(1 for node in self.root.walk() if node.is_unit)


@dataclass(frozen=True)
class ActionColumn:
    """The fixed action list (column id 0)."""

    def column_id(self) -> int:
        return 0


@dataclass(frozen=True)
class NavigationColumn:
    """A navigation column showing tree depth ``depth`` (column id depth+1)."""
    depth: int

    def column_id(self) -> int:
        return self.depth + 1


FocusedColumn = Union[ActionColumn, NavigationColumn]


@dataclass(frozen=True)
class Selection:
    action: str
    path: str


@dataclass
class ColumnView:
    """Read-only snapshot of one column for the renderer."""
    column_id: int
    title: str
    items: list[str]                 # visible page after filtering
    selected: Optional[int] = None   # index into ``items``
    page: int = 1
    total_pages: int = 1
    page_size: int = 1
    filter_text: Optional[str] = None
    filter_editing: bool = False
    focused: bool = False


def strip_unit_marker(label: str) -> str:
    """Return the directory name behind a display label."""
    if label.endswith(UNIT_MARKER) and len(label) > len(UNIT_MARKER):
        return label[: -len(UNIT_MARKER)]
    return label
