#!/usr/bin/env python3
"""CLI subcommand: validate: load a hook config file and normalize it.

Exit codes:
  0 = OK (audit warnings, if any, go to stderr)
  1 = Structurally invalid config (or warnings when --strict)
  2 = Load/parse errors or bad usage
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Any, Dict

from configs.validate import ALL_KEY, ValidationOptions, validate_config

from ..errors import CLIError, ConfigError, format_error
from ..io.config import default_config_path, load_config
from ..log import StreamLogger, WarningCollector
from ._config import discover_config_path, maybe_log_selected
from ._exit import INVALID, OK, USER_ERR
from ._io import eprint_once, print_json, set_verbosity
from ._util import add_subcommand

_HELP = "Validate and normalize a hook configuration file"
_DESC = (
    "Validate a hook configuration file. Without PATH the file is taken from "
    "$HOOKCONF_CONFIG or ./.hookconf.yml."
)


def register(subparsers: argparse._SubParsersAction) -> None:
    sp = add_subcommand(
        subparsers,
        name="validate",
        help_text=_HELP,
        description=_DESC,
    )
    sp.add_argument("path", nargs="?", default=None,
                    help="Path to config file. Use '-' for STDIN.")
    src = sp.add_mutually_exclusive_group()
    src.add_argument("--default", action="store_true",
                     help="Treat the file as a baseline config (skips the `enabled` audit).")
    src.add_argument("--builtin", action="store_true",
                     help="Validate the built-in baseline config shipped with hookconf.")
    sp.add_argument("--strict", action="store_true",
                    help="Treat warnings as errors (non-zero exit if warnings present).")
    sp.set_defaults(command="validate", func=_run)


def _summary(normalized: Dict[str, Any]) -> list[str]:
    lines = []
    for hook_type, section in normalized.items():
        if not isinstance(section, dict):
            continue
        hooks = {k: v for k, v in section.items() if k != ALL_KEY}
        if not hooks:
            continue
        enabled = sum(1 for v in hooks.values() if isinstance(v, dict) and v.get("enabled") is True)
        lines.append(f"{hook_type}: hooks={len(hooks)} enabled={enabled}")
    return lines


def _run(ns: argparse.Namespace) -> int:
    set_verbosity(ns.verbose, ns.quiet)

    if ns.builtin and ns.path is not None:
        eprint_once(format_error(CLIError("validate: --builtin does not take a PATH argument.")))
        return USER_ERR

    if ns.builtin:
        selected, source = Path(default_config_path()), "builtin"
    else:
        selected, source = discover_config_path(
            ns.path or getattr(ns, "config", None), Path.cwd(), os.environ
        )
    maybe_log_selected(selected, source, verbose=ns.verbose)

    if source == "none":
        eprint_once(format_error(CLIError(
            "validate: no config file found (set $HOOKCONF_CONFIG or create ./.hookconf.yml)"
        )))
        return USER_ERR
    if source == "explicit-missing":
        eprint_once(format_error(CLIError(f"validate: config file not found: {selected}")))
        return USER_ERR

    try:
        cfg = load_config("-" if source == "stdin" else str(selected))
    except ConfigError as e:
        eprint_once(format_error(e))
        return USER_ERR
    except OSError as e:
        eprint_once(format_error(CLIError(f"validate: failed to load config: {e}")))
        return USER_ERR

    collector = WarningCollector()
    opts = ValidationOptions(
        default=ns.default or ns.builtin,
        logger=collector,
        config_file=selected.name if selected is not None else "<stdin>",
    )
    try:
        normalized = validate_config(cfg, opts)
    except ConfigError as e:
        if ns.json:
            print_json({"ok": False, "errors": [str(e)]})
        else:
            print("CONFIG INVALID\n" + str(e))
        return INVALID

    if ns.strict and collector.warnings:
        if ns.json:
            print_json({"ok": False, "warnings": list(collector.warnings)})
            return INVALID
        print("CONFIG WARNINGS (treated as errors due to --strict)")
        for w in collector.warnings:
            print(w)
        return INVALID

    # Replay audit warnings on stderr so stdout stays clean for --json
    if collector.warnings and not ns.quiet:
        sink = StreamLogger(sys.stderr)
        for w in collector.warnings:
            sink.warning(w)
        sink.newline()

    if ns.json:
        print_json(normalized)
        return OK

    print("OK")
    for line in _summary(normalized):
        print(line)
    return OK
