"""Textual dashboard rendering a navigation session."""

from .app import TerraNavApp, run_browser

__all__ = ["TerraNavApp", "run_browser"]
