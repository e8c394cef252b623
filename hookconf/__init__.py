"""hookconf: public API surface.

Only `hookconf` and `hookconf.errors` are public. Everything else is internal.
This module also resolves `__version__` deterministically across installs.
"""
from __future__ import annotations

from typing import Any as _Any
from . import errors as errors  # re-export for star-import; noqa: F401

from importlib.metadata import version as _pkg_version, PackageNotFoundError


def _version_from_resource() -> str | None:
    try:
        from importlib.resources import files

        p = files(__package__).joinpath("VERSION")
        return p.read_text(encoding="utf-8").strip()
    except Exception:
        return None


def _version_from_metadata() -> str | None:
    try:
        return _pkg_version("hookconf")
    except PackageNotFoundError:
        return None


__version__ = (
    _version_from_resource()
    or _version_from_metadata()
    or "0+unknown"
)


def __getattr__(name: str) -> _Any:  # PEP 562 lazy exports to avoid import-time cycles
    if name in (
        "ValidationOptions",
        "validate_config",
        "validate_config_verbose",
        "validate_config_api",
    ):
        # `configs` is a top-level package, not `hookconf.configs`
        from configs import validate as _validate

        _g = globals()
        _g.update(
            {
                "ValidationOptions": _validate.ValidationOptions,
                "validate_config": _validate.validate_config,
                "validate_config_verbose": _validate.validate_config_verbose,
                "validate_config_api": _validate.validate_config_api,
            }
        )
        return _g[name]
    if name == "SUPPORTED_HOOK_TYPES":
        from .hook_types import SUPPORTED_HOOK_TYPES as _SUPPORTED

        globals()["SUPPORTED_HOOK_TYPES"] = _SUPPORTED
        return _SUPPORTED
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return list(__all__)


# Star-export surface (deterministic ordering). Tests require __all__ to be lexicographically sorted.
__all__ = [
    "SUPPORTED_HOOK_TYPES",
    "ValidationOptions",
    "__version__",
    "errors",
    "validate_config",
    "validate_config_api",
    "validate_config_verbose",
]
