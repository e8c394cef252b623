from __future__ import annotations

import json
import logging
import sys
from typing import Any

# Verbosity gates
VERBOSE = False
QUIET = False

# Loggers whose debug breadcrumbs --verbose surfaces
_LIBRARY_LOGGERS = ("hookconf", "configs")


def set_verbosity(verbose: bool = False, quiet: bool = False) -> None:
    global VERBOSE, QUIET
    VERBOSE, QUIET = bool(verbose), bool(quiet)
    # basicConfig only installs a handler once per process; levels are set on every call
    logging.basicConfig(format="[hookconf] %(name)s: %(message)s", stream=sys.stderr)
    level = logging.DEBUG if VERBOSE else logging.WARNING
    for name in _LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(level)


def eprint_once(msg: str) -> None:
    if not QUIET:
        print(msg, file=sys.stderr)


def print_json(obj: Any) -> None:
    """Dump obj using compact, stable separators (no color)."""
    sys.stdout.write(json.dumps(obj, separators=(",", ":")) + "\n")
