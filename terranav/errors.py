"""Exceptions raised outside the interactive navigation path."""

from __future__ import annotations


class TerraNavError(Exception):
    """Base exception for terranav errors."""


class TreeBuildError(TerraNavError):
    """Raised when the scan root cannot be used."""

    def __init__(self, root: str, message: str) -> None:
        self.root = root
        super().__init__(f"cannot scan {root or '<empty>'}: {message}")


class NoUnitsFoundError(TerraNavError):
    """Raised when a scan finds no units anywhere below the root."""

    def __init__(self, root: str, unit_file: str) -> None:
        self.root = root
        self.unit_file = unit_file
        super().__init__(f"no directories containing {unit_file} found under {root}")
