"""Shared test helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from terranav.models import Node
from terranav.session import NavigationSession


def make_tree(layout: dict[str, Any], root_path: str = "/infra") -> tuple[Node, int]:
    """Build a Node tree from nested dicts; a trailing ``*`` marks a unit."""
    root = Node(name=root_path.rsplit("/", 1)[-1], path=root_path)
    return root, _fill(root, layout)


def _fill(node: Node, layout: dict[str, Any]) -> int:
    deepest = node.depth
    for raw, sub in layout.items():
        name = raw.rstrip("*")
        child = Node(
            name=name,
            path=f"{node.path}/{name}",
            is_unit=raw.endswith("*"),
            depth=node.depth + 1,
        )
        node.children.append(child)
        deepest = max(deepest, _fill(child, sub))
    return deepest


def make_session(
    layout: dict[str, Any],
    actions: tuple[str, ...] = ("plan", "apply", "destroy"),
    visible_columns: int = 3,
    height: int = 30,
) -> NavigationSession:
    root, depth = make_tree(layout)
    session = NavigationSession(root, depth, actions, visible_columns)
    session.resize(120, height)
    return session


def make_units(base: Path, *relative: str, unit_file: str = "terragrunt.hcl") -> None:
    """Create unit directories (with sentinel file) below ``base``."""
    for rel in relative:
        path = base / rel
        path.mkdir(parents=True, exist_ok=True)
        (path / unit_file).write_text("")
