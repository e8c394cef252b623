from __future__ import annotations

import argparse

__all__ = ["add_subcommand"]


def add_subcommand(
    subparsers: argparse._SubParsersAction,
    name: str,
    help_text: str,
    description: str,
) -> argparse.ArgumentParser:
    """
    Create a subparser with the flags every subcommand shares.

    - --json: machine-readable JSON on stdout
    - --quiet / --verbose: control stderr verbosity; stdout remains reserved for command output
    """
    sp = subparsers.add_parser(
        name,
        help=help_text,
        description=description,
    )
    sp.add_argument("--json", action="store_true", help="JSON output (stable, machine-readable)")
    verbosity = sp.add_mutually_exclusive_group()
    verbosity.add_argument("-q", "--quiet", action="store_true", help="suppress non-essential stderr")
    verbosity.add_argument("-v", "--verbose", action="store_true", help="increase stderr verbosity")
    return sp
