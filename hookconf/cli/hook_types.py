"""CLI subcommand: hook-types: list the hook type sections the validator knows about."""

from __future__ import annotations

import argparse

from ..hook_types import hook_type_to_class_name, supported_hook_types
from ._exit import OK
from ._io import print_json, set_verbosity
from ._util import add_subcommand


def register(subparsers: argparse._SubParsersAction) -> None:
    sp = add_subcommand(
        subparsers,
        name="hook-types",
        help_text="List supported hook types",
        description="List the hook type sections every config is completed with.",
    )
    sp.set_defaults(command="hook-types", func=_run)


def _run(ns: argparse.Namespace) -> int:
    set_verbosity(ns.verbose, ns.quiet)
    rows = [{"section": hook_type_to_class_name(hook), "hook": hook} for hook in supported_hook_types()]
    if ns.json:
        print_json(rows)
        return OK
    for row in rows:
        print(f"{row['section']:<18} {row['hook']}")
    return OK
