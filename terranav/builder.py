"""Filesystem scan producing the pruned stack tree."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .config import DEFAULT_UNIT_FILE, SKIP_DIRS
from .errors import NoUnitsFoundError, TreeBuildError
from .models import Node, ScanResult, SkippedPath

logger = logging.getLogger(__name__)


def is_unit_directory(path: str, unit_file: str = DEFAULT_UNIT_FILE) -> bool:
    """Return True when ``path`` holds the unit sentinel file."""
    return os.path.isfile(os.path.join(path, unit_file))


def should_skip_directory(name: str, skip_dirs: Iterable[str] = SKIP_DIRS) -> bool:
    return name.startswith(".") or name in skip_dirs


def build_tree(
    root_dir: str,
    unit_file: str = DEFAULT_UNIT_FILE,
    skip_dirs: Iterable[str] = SKIP_DIRS,
) -> ScanResult:
    """Scan ``root_dir`` and return the tree of units and their ancestors.

    Directories that are neither units nor ancestors of units are pruned.
    Unreadable subdirectories are left out of the tree and reported through
    ``ScanResult.skipped``.
    """
    if not root_dir:
        raise TreeBuildError(root_dir, "root directory cannot be empty")

    abs_path = os.path.abspath(os.path.expanduser(root_dir))
    if not os.path.exists(abs_path):
        raise TreeBuildError(abs_path, "no such directory")
    if not os.path.isdir(abs_path):
        raise TreeBuildError(abs_path, "not a directory")

    root = Node(
        name=Path(abs_path).name or abs_path,
        path=abs_path,
        is_unit=is_unit_directory(abs_path, unit_file),
        depth=0,
    )
    result = ScanResult(root=root, max_depth=0)
    _scan(root, result, unit_file, frozenset(skip_dirs), is_root=True)

    for skipped in result.skipped:
        logger.warning("skipped unreadable directory %s: %s", skipped.path, skipped.reason)
    logger.debug(
        "scanned %s: max depth %d, %d units, %d skipped",
        abs_path, result.max_depth, result.unit_count, len(result.skipped),
    )
    return result


def _scan(
    node: Node,
    result: ScanResult,
    unit_file: str,
    skip_dirs: frozenset[str],
    is_root: bool = False,
) -> None:
    try:
        with os.scandir(node.path) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        if is_root:
            raise TreeBuildError(node.path, exc.strerror or str(exc)) from exc
        result.skipped.append(SkippedPath(node.path, exc.strerror or str(exc)))
        return

    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            continue
        if not is_dir or should_skip_directory(entry.name, skip_dirs):
            continue

        child = Node(
            name=entry.name,
            path=os.path.join(node.path, entry.name),
            is_unit=is_unit_directory(entry.path, unit_file),
            depth=node.depth + 1,
        )
        _scan(child, result, unit_file, skip_dirs)

        # Keep only units and ancestors of units.
        if child.is_unit or child.children:
            result.max_depth = max(result.max_depth, child.depth)
            node.children.append(child)


def require_units(result: ScanResult, unit_file: str = DEFAULT_UNIT_FILE) -> ScanResult:
    """Reject a scan that found nothing to navigate."""
    if not result.root.has_children():
        raise NoUnitsFoundError(result.root.path, unit_file)
    return result
