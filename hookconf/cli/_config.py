from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Mapping, Optional, TextIO, Tuple

# Config file searched for under the current working directory
DEFAULT_NAME = ".hookconf.yml"
ENV_VAR = "HOOKCONF_CONFIG"


def _coerce_candidate(p: Path) -> Optional[Path]:
    """Return a concrete config file path if the candidate exists.

    Accepts a file path *or* a directory; directories are resolved to
    ".hookconf.yml" inside that directory. Returns the resolved file path
    if it exists, else None.
    """
    if p.is_dir():
        p = p / DEFAULT_NAME
    if p.is_file():
        return p.resolve()
    return None


def discover_config_path(
    explicit: Optional[str],
    cwd: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Tuple[Optional[Path], str]:
    """Deterministic config discovery.

    Order (only when `explicit` is not provided):
      1) $HOOKCONF_CONFIG (file or dir -> .hookconf.yml)
      2) CWD: ./.hookconf.yml

    Returns a tuple: (selected_path or None, source_tag).
    Source tags: 'explicit', 'explicit-missing', 'stdin', 'env:HOOKCONF_CONFIG',
    'cwd:.hookconf.yml', 'none'.
    """
    cwd = cwd or Path.cwd()
    env = dict(env or {})

    # 0) explicit path always wins; allow reporting even if missing
    if explicit:
        if explicit == "-":
            return None, "stdin"
        expanded = Path(os.path.expandvars(explicit)).expanduser()
        sel = _coerce_candidate(expanded)
        if sel is not None:
            return sel, "explicit"
        return expanded, "explicit-missing"

    # 1) $HOOKCONF_CONFIG
    cenv = env.get(ENV_VAR)
    if cenv:
        epath = Path(os.path.expandvars(cenv)).expanduser()
        sel = _coerce_candidate(epath)
        if sel is not None:
            return sel, f"env:{ENV_VAR}"

    # 2) ./.hookconf.yml
    sel = _coerce_candidate(cwd.expanduser())
    if sel is not None:
        return sel, f"cwd:{DEFAULT_NAME}"

    return None, "none"


def maybe_log_selected(
    path: Optional[Path], source: str, *, verbose: bool = False, stream: Optional[TextIO] = None
) -> None:
    """Emit a one-line message about the selected config when verbose.

    Logged to stderr by default to avoid mixing with command outputs.
    """
    if not verbose:
        return
    if stream is None:
        stream = sys.stderr
    stream.write(f"[hookconf] config: selected={path if path else 'none'} (source={source})\n")
    stream.flush()


__all__ = [
    "DEFAULT_NAME",
    "ENV_VAR",
    "discover_config_path",
    "maybe_log_selected",
]
