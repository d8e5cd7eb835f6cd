"""Typed settings loaded from TOML config with env-var overrides."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from importlib import resources
from pathlib import Path

from .config import (
    DEFAULT_ACTIONS,
    DEFAULT_UNIT_FILE,
    DEFAULT_VISIBLE_COLUMNS,
    MIN_VISIBLE_COLUMNS,
    SKIP_DIRS,
    USER_CONFIG_PATH,
)

logger = logging.getLogger(__name__)


def _load_default_toml() -> dict:
    """Load the built-in default_config.toml shipped with the package."""
    ref = resources.files("terranav").joinpath("default_config.toml")
    return tomllib.loads(ref.read_text(encoding="utf-8"))


def _load_user_toml(path: Path | None = None) -> dict:
    """Load user config if it exists and parses, otherwise empty dict."""
    config_path = path or USER_CONFIG_PATH
    if not config_path.is_file():
        return {}
    try:
        return tomllib.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning("ignoring config file %s: %s", config_path, exc)
        return {}


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base (override wins)."""
    merged = dict(base)
    for key, val in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(val, dict):
            merged[key] = _deep_merge(merged[key], val)
        else:
            merged[key] = val
    return merged


# ── Dataclasses ──────────────────────────────────────────────────────


@dataclass
class NavigationConfig:
    actions: tuple[str, ...]
    visible_columns: int


@dataclass
class ScanConfig:
    unit_file: str
    skip_dirs: frozenset[str]


@dataclass
class Settings:
    navigation: NavigationConfig
    scan: ScanConfig
    log_level: str


def _parse_actions(raw: object) -> tuple[str, ...]:
    if isinstance(raw, str):
        raw = raw.split(",")
    if not isinstance(raw, (list, tuple)):
        return DEFAULT_ACTIONS
    actions = tuple(str(a).strip() for a in raw if str(a).strip())
    return actions or DEFAULT_ACTIONS


def _parse_visible_columns(raw: object) -> int:
    try:
        value = int(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return DEFAULT_VISIBLE_COLUMNS
    if value < MIN_VISIBLE_COLUMNS:
        return DEFAULT_VISIBLE_COLUMNS
    return value


def load_settings(user_config: Path | None = None) -> Settings:
    """Load settings: defaults ← user TOML ← env vars."""
    defaults = _load_default_toml()
    user = _load_user_toml(user_config)
    raw = _deep_merge(defaults, user)

    nav = raw.get("navigation", {})
    scan = raw.get("scan", {})
    log = raw.get("logging", {})

    navigation = NavigationConfig(
        actions=_parse_actions(os.environ.get("TERRANAV_ACTIONS", nav.get("actions"))),
        visible_columns=_parse_visible_columns(
            os.environ.get("TERRANAV_VISIBLE_COLUMNS", nav.get("visible_columns"))
        ),
    )

    extra = scan.get("extra_skip_dirs", [])
    if not isinstance(extra, list):
        extra = []
    scan_config = ScanConfig(
        unit_file=str(scan.get("unit_file") or DEFAULT_UNIT_FILE),
        skip_dirs=SKIP_DIRS | frozenset(str(d) for d in extra if str(d).strip()),
    )

    log_level = str(
        os.environ.get("TERRANAV_LOG_LEVEL", log.get("level", "WARNING"))
    ).upper()

    return Settings(
        navigation=navigation,
        scan=scan_config,
        log_level=log_level,
    )


# Loaded once on import.
SETTINGS = load_settings()
