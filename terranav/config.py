"""Global constants shared by the scanner, navigator and dashboard."""

from __future__ import annotations

import os
from pathlib import Path


USER_CONFIG_PATH = Path(
    os.environ.get("TERRANAV_CONFIG")
    or Path.home() / ".config" / "terranav" / "config.toml"
).expanduser()

# Sentinel file marking a directory as a deployable unit
DEFAULT_UNIT_FILE = "terragrunt.hcl"

# Decorative suffix appended to unit labels; stripped when a label becomes a path segment
UNIT_MARKER = " 📦"

SKIP_DIRS: frozenset[str] = frozenset({
    ".git",
    ".terraform",
    ".terragrunt-cache",
    "vendor",
    ".idea",
    ".vscode",
    "node_modules",
})

DEFAULT_ACTIONS: tuple[str, ...] = (
    "plan",
    "apply",
    "validate",
    "fmt",
    "init",
    "output",
    "refresh",
    "destroy",
)
DEFAULT_VISIBLE_COLUMNS = 3
MIN_VISIBLE_COLUMNS = 1

# Returned for a missing tree root / unresolved selection
PATH_SENTINEL = "~"
NO_ITEM_SELECTED = "None"

# Layout (terminal rows/cols)
HEADER_HEIGHT = 1
BREADCRUMB_HEIGHT = 1
FOOTER_HEIGHT = 1
COLUMN_TITLE_HEIGHT = 2        # title + blank line
COLUMN_PADDING = 4             # borders + inner padding
PAGINATION_ROWS = 1            # reserved for page dots
COLUMN_OVERHEAD = 8
MIN_COLUMN_WIDTH = 20
CURSOR_WIDTH = 2               # "► "
MIN_ITEM_TEXT_WIDTH = 10
ELLIPSIS = "..."

# Filter input
FILTER_CHAR_LIMIT = 50
FILTER_PLACEHOLDER = "Filter..."

# Column titles
ACTIONS_TITLE = "Commands"
LEVEL_TITLE = "Level {n}"
