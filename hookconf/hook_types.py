"""Registry of supported git hook types.

The validator never hardcodes these; callers pass them in. This module is the
default source used by the public API and the CLI.
"""
from __future__ import annotations

from typing import Tuple

__all__ = [
    "SUPPORTED_HOOK_TYPES",
    "supported_hook_types",
    "hook_type_to_class_name",
    "class_name_to_hook_type",
]

# Config section names, in the order sections are completed and audited.
SUPPORTED_HOOK_TYPES: Tuple[str, ...] = (
    "CommitMsg",
    "PostCheckout",
    "PostCommit",
    "PostMerge",
    "PostRewrite",
    "PreCommit",
    "PrePush",
    "PreRebase",
    "PrepareCommitMsg",
)


def hook_type_to_class_name(hook_type: str) -> str:
    """'pre-commit' -> 'PreCommit'."""
    return "".join(part.capitalize() for part in hook_type.split("-") if part)


def class_name_to_hook_type(class_name: str) -> str:
    """'PreCommit' -> 'pre-commit'."""
    out = []
    for i, ch in enumerate(class_name):
        if ch.isupper() and i > 0:
            out.append("-")
        out.append(ch.lower())
    return "".join(out)


def supported_hook_types() -> list[str]:
    """Git-side hook names (``commit-msg``, ``pre-commit``, ...) in registry order."""
    return [class_name_to_hook_type(name) for name in SUPPORTED_HOOK_TYPES]
