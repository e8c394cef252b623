from __future__ import annotations

"""Typed error taxonomy (public).

Only `hookconf` and `hookconf.errors` are public import roots. Everything else is internal.
This module exposes the operator-facing error classes and a small helper `format_error`.
"""

__all__ = [
    "HookconfError",
    "ConfigError",
    "CLIError",
    "format_error",
]


class HookconfError(Exception):
    """Base class for all typed, operator-facing errors in hookconf."""
    pass


class ConfigError(HookconfError):
    """Configuration document is structurally invalid (wrong node kind, unreadable file, etc.)."""

    def __init__(self, message: str, *, path: str | None = None):
        super().__init__(message)
        self.path = path


class CLIError(HookconfError):
    """Generic CLI failure wrapper for unexpected errors in CLI code paths."""
    pass


def format_error(e: BaseException) -> str:
    """Return a short, uniform operator-facing message like 'ConfigError: detail'."""
    name = e.__class__.__name__
    msg = str(e).strip()
    return f"{name}: {msg}" if msg else name


# Keep star-export order deterministic for tests and tooling
__all__ = sorted(__all__)
