"""Diagnostic sinks for the validator.

The validator only ever calls ``warning(message)`` and ``newline()``; anything
implementing those two methods can be passed as ``ValidationOptions.logger``.
"""

from __future__ import annotations

import logging
import sys
from typing import List, Optional, Protocol, TextIO, runtime_checkable

__all__ = [
    "HookLogger",
    "StreamLogger",
    "LoggingLogger",
    "WarningCollector",
]

_YELLOW = "\033[33m"
_RESET = "\033[0m"


@runtime_checkable
class HookLogger(Protocol):
    """Two-operation sink for non-fatal configuration diagnostics."""

    def warning(self, message: str) -> None:
        """Report a single diagnostic."""

    def newline(self) -> None:
        """Separate a group of diagnostics from surrounding output."""


class StreamLogger:
    """Writes diagnostics to a text stream (stderr by default).

    Color is enabled automatically when the stream is a TTY unless ``color`` is
    given explicitly.
    """

    def __init__(self, stream: Optional[TextIO] = None, color: Optional[bool] = None) -> None:
        self._stream = stream if stream is not None else sys.stderr
        if color is None:
            isatty = getattr(self._stream, "isatty", None)
            color = bool(isatty()) if callable(isatty) else False
        self._color = color

    def warning(self, message: str) -> None:
        line = f"Warning: {message}"
        if self._color:
            line = f"{_YELLOW}{line}{_RESET}"
        self._stream.write(line + "\n")
        self._stream.flush()

    def newline(self) -> None:
        self._stream.write("\n")
        self._stream.flush()


class LoggingLogger:
    """Adapter forwarding diagnostics to a stdlib ``logging.Logger``."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger("hookconf")

    def warning(self, message: str) -> None:
        self._logger.warning("%s", message)

    def newline(self) -> None:
        # Records are already line-delimited by the handler.
        pass


class WarningCollector:
    """Keeps diagnostics in memory; used by the verbose API and ``--strict``."""

    def __init__(self) -> None:
        self.warnings: List[str] = []
        self.separators = 0

    def warning(self, message: str) -> None:
        self.warnings.append(message)

    def newline(self) -> None:
        self.separators += 1

    def __len__(self) -> int:
        return len(self.warnings)
