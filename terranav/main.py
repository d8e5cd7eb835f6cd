"""CLI entry point: argument parsing and dispatch."""

import argparse
import logging

from . import __version__
from .commands import cmd_actions, cmd_browse, cmd_scan
from .settings import SETTINGS


def _add_directory(parser: argparse.ArgumentParser, default: object = None) -> None:
    parser.add_argument(
        "-d", "--directory",
        default=default,
        help="Root of the stack hierarchy (default: current directory)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="terranav",
        description="Pick a Terragrunt command and stack path interactively",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr",
    )
    _add_directory(parser)
    parser.add_argument(
        "--format", choices=("text", "json"), default="text",
        help="Output format for the confirmed selection",
    )
    sub = parser.add_subparsers(dest="cmd")

    p_browse = sub.add_parser("browse", aliases=["b"], help="Browse stacks (default)")
    # Subcommand options must not reset values given before the subcommand.
    _add_directory(p_browse, default=argparse.SUPPRESS)
    p_browse.add_argument(
        "--format", choices=("text", "json"), default=argparse.SUPPRESS,
    )
    p_browse.set_defaults(func=cmd_browse)

    p_scan = sub.add_parser("scan", help="Print the discovered stack tree")
    _add_directory(p_scan, default=argparse.SUPPRESS)
    p_scan.set_defaults(func=cmd_scan)

    p_actions = sub.add_parser("actions", help="List configured commands")
    p_actions.set_defaults(func=cmd_actions)

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else getattr(logging, SETTINGS.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if hasattr(args, "func"):
        args.func(args)
    else:
        cmd_browse(args)
