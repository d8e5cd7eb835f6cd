"""Selection propagation and path queries over a scanned stack tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .config import PATH_SENTINEL
from .models import Node, strip_unit_marker


@dataclass
class NavigationState:
    """Per-depth cursor state; depth ``d`` lists the children of the node selected at ``d-1``."""
    columns: list[list[str]] = field(default_factory=list)
    selected_indices: list[int] = field(default_factory=list)
    current_nodes: list[Optional[Node]] = field(default_factory=list)

    @classmethod
    def create(cls, max_depth: int) -> NavigationState:
        depth = max(0, max_depth)
        return cls(
            columns=[[] for _ in range(depth)],
            selected_indices=[0] * depth,
            current_nodes=[None] * depth,
        )


class Navigator:
    """Stateless traversal helper; every mutation lands in a ``NavigationState``."""

    def __init__(self, root: Optional[Node], max_depth: int) -> None:
        self._root = root
        self._max_depth = max_depth

    @property
    def root(self) -> Optional[Node]:
        return self._root

    @property
    def max_depth(self) -> int:
        return self._max_depth

    def propagate_selection(self, state: Optional[NavigationState]) -> Optional[Node]:
        """Re-derive every column from the root following the selected indices.

        Must run after any index change: changing depth ``d`` invalidates all
        deeper columns. Out-of-range indices are clamped to 0. Returns the
        deepest resolved node.
        """
        if state is None or self._root is None or self._max_depth == 0:
            return None

        current: Optional[Node] = self._root
        for depth in range(self._max_depth):
            if current is None or not current.has_children():
                self.clear_columns_from(state, depth)
                return current

            state.columns[depth] = current.child_labels()
            if not 0 <= state.selected_indices[depth] < len(current.children):
                state.selected_indices[depth] = 0

            current = current.children[state.selected_indices[depth]]
            state.current_nodes[depth] = current

        return current

    def clear_columns_from(self, state: Optional[NavigationState], start_depth: int) -> None:
        if state is None or start_depth < 0:
            return
        for depth in range(start_depth, self._max_depth):
            state.columns[depth] = []
            state.selected_indices[depth] = 0
            state.current_nodes[depth] = None

    def node_at_depth(self, state: NavigationState, depth: int) -> Optional[Node]:
        if depth < 0 or depth >= self._max_depth:
            return None
        return state.current_nodes[depth]

    def max_visible_depth(self, state: NavigationState) -> int:
        """Number of navigation columns that currently have content."""
        for depth in range(self._max_depth - 1, -1, -1):
            if state.columns[depth]:
                return depth + 1
        return 0

    def can_move_up(self, state: NavigationState, depth: int) -> bool:
        if depth < 0 or depth >= self._max_depth:
            return False
        return state.selected_indices[depth] > 0

    def can_move_down(self, state: NavigationState, depth: int) -> bool:
        if depth < 0 or depth >= self._max_depth:
            return False
        return state.selected_indices[depth] < len(state.columns[depth]) - 1

    def navigation_path(self, state: NavigationState, depth: int) -> str:
        """Display path from the root through the selection at each depth up to ``depth``."""
        if self._root is None:
            return PATH_SENTINEL

        path = self._root.path
        if depth < 0 or self._max_depth == 0:
            return path

        levels = min(depth + 1, len(state.columns), len(state.selected_indices))
        for i in range(levels):
            index = state.selected_indices[i]
            column = state.columns[i]
            # Stale indices are skipped.
            if 0 <= index < len(column):
                path = f"{path}/{strip_unit_marker(column[index])}"
        return path
