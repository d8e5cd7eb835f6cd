"""CLI subcommands: browse, scan, actions."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys

from .builder import build_tree, require_units
from .config import UNIT_MARKER
from .errors import TerraNavError
from .models import Node, ScanResult, Selection
from .session import NavigationSession
from .settings import SETTINGS

logger = logging.getLogger(__name__)


def _scan(directory: str | None) -> ScanResult:
    root_dir = os.path.expanduser(directory or os.getcwd())
    result = build_tree(
        root_dir,
        unit_file=SETTINGS.scan.unit_file,
        skip_dirs=SETTINGS.scan.skip_dirs,
    )
    return require_units(result, SETTINGS.scan.unit_file)


def _run_browser(session: NavigationSession) -> Selection | None:
    # Imported lazily so `scan`/`actions` never load Textual.
    from .dashboard import run_browser

    return run_browser(session)


def format_selection(selection: Selection, fmt: str = "text") -> str:
    if fmt == "json":
        return json.dumps({"action": selection.action, "path": selection.path})
    return (
        "═══════════════════════════════════════\n"
        "  ✓ Selection confirmed\n"
        "═══════════════════════════════════════\n"
        f"Command:    {selection.action}\n"
        f"Stack Path: {selection.path}"
    )


def cmd_browse(args: argparse.Namespace) -> None:
    try:
        result = _scan(getattr(args, "directory", None))
    except TerraNavError as exc:
        print(f"✗ {exc}", file=sys.stderr)
        sys.exit(1)

    if result.skipped:
        print(
            f"⚠ {len(result.skipped)} unreadable director"
            f"{'y' if len(result.skipped) == 1 else 'ies'} skipped",
            file=sys.stderr,
        )

    session = NavigationSession.from_scan(
        result,
        SETTINGS.navigation.actions,
        SETTINGS.navigation.visible_columns,
    )
    selection = _run_browser(session)
    if selection is None:
        print("⚠ Selection cancelled", file=sys.stderr)
        sys.exit(1)

    print(format_selection(selection, getattr(args, "format", "text")))


def format_tree(node: Node) -> list[str]:
    """Indented listing of the pruned tree below ``node``."""
    lines: list[str] = []
    for child in node.children:
        marker = UNIT_MARKER if child.is_unit else ""
        lines.append(f"{'  ' * (child.depth - 1)}{child.name}{marker}")
        lines.extend(format_tree(child))
    return lines


def cmd_scan(args: argparse.Namespace) -> None:
    try:
        result = _scan(args.directory)
    except TerraNavError as exc:
        print(f"✗ {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"{result.root.path} (max depth {result.max_depth}, {result.unit_count} units)")
    for line in format_tree(result.root):
        print(f"  {line}")
    for skipped in result.skipped:
        print(f"  ⚠ skipped {skipped.path}: {skipped.reason}")


def cmd_actions(args: argparse.Namespace) -> None:
    for action in SETTINGS.navigation.actions:
        print(action)
