"""Pytest global setup for isolated terranav settings.

Keeps tests from reading the developer's own config file or env overrides.
"""

from __future__ import annotations

import atexit
import os
from pathlib import Path
import shutil
import tempfile


_TEST_ROOT = Path(tempfile.mkdtemp(prefix="terranav-pytest-"))

for _name in [key for key in os.environ if key.startswith("TERRANAV_")]:
    del os.environ[_name]

# Force imported terranav modules to resolve a config path that does not exist.
os.environ["TERRANAV_CONFIG"] = str(_TEST_ROOT / "config.toml")


@atexit.register
def _cleanup_test_root() -> None:
    shutil.rmtree(_TEST_ROOT, ignore_errors=True)
