"""Interactive navigator for Terragrunt stack hierarchies."""

__version__ = "0.1.0"
