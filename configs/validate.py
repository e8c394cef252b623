"""
Hook configuration validation and normalization for hookconf.

Public API:
    validate_config(cfg: dict, options: ValidationOptions | None = None) -> dict

- Returns a **new** normalized dict; the input is not mutated.
- Raises ConfigError when a section has the wrong shape (e.g. a hook type bound to a scalar).
- Missing `enabled` flags on user configs are reported through the options' logger, never raised.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from hookconf.errors import ConfigError
from hookconf.log import HookLogger, WarningCollector

__all__ = [
    "ALL_KEY",
    "CONFIG_FILE_NAME",
    "ValidationOptions",
    "validate_config",
    "validate_config_api",
    "validate_config_verbose",
]

_logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".hookconf.yml"

# Reserved pseudo-hook holding settings shared by every hook of a type
ALL_KEY = "ALL"
ENABLED_KEY = "enabled"


@dataclass(frozen=True)
class ValidationOptions:
    """Per-call options.

    default: the document is the built-in baseline config (skips the `enabled` audit).
    logger:  sink for non-fatal diagnostics; when None the audit is skipped entirely.
    config_file: file name quoted in diagnostics.
    """

    default: bool = False
    logger: Optional[HookLogger] = None
    config_file: str = CONFIG_FILE_NAME


# ------------------------------
# Utilities
# ------------------------------

def _ensure_dict(x: Any) -> Dict[str, Any]:
    return x if isinstance(x, dict) else {}


def _ensure_root(cfg: Any) -> Dict[str, Any]:
    # An empty YAML file parses to None
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ConfigError(
            f"configuration must be a mapping of hook types to hooks (got {type(cfg).__name__})"
        )
    return cfg


def _default_hook_types() -> Tuple[str, ...]:
    from hookconf.hook_types import SUPPORTED_HOOK_TYPES

    return SUPPORTED_HOOK_TYPES


# ------------------------------
# Passes
# ------------------------------

def _convert_nils_to_empty_dicts(node: Any) -> Any:
    """Rewrite every None value to {} so merging two configs never has to special-case nil.

    Only dicts are recursed into; lists and scalars are returned as-is.
    """
    if node is None:
        return {}
    if isinstance(node, dict):
        return {k: _convert_nils_to_empty_dicts(v) for k, v in node.items()}
    return node


def _ensure_hook_type_sections(cfg: Dict[str, Any], hook_types: Iterable[str]) -> Dict[str, Any]:
    """Make sure each hook type (PreCommit, CommitMsg, ...) has a section with an ALL entry.

    Mutates and returns `cfg`, which must be owned by the caller.
    """
    for hook_type in hook_types:
        section = cfg.get(hook_type)
        if section is None:
            section = cfg[hook_type] = {}
        elif not isinstance(section, dict):
            raise ConfigError(
                f"{hook_type} must be a mapping of hook names to settings "
                f"(got {type(section).__name__})",
                path=hook_type,
            )
        if not isinstance(section.get(ALL_KEY), dict):
            if ALL_KEY in section:
                _logger.debug("replacing non-mapping %s.%s with {}", hook_type, ALL_KEY)
            section[ALL_KEY] = {}
    return cfg


def _check_for_missing_enabled(
    cfg: Dict[str, Any],
    hook_types: Sequence[str],
    log: HookLogger,
    config_file: str = CONFIG_FILE_NAME,
) -> None:
    """Warn about hooks listed without `enabled` explicitly set.

    Presence is what counts: `enabled: false` is fine, a missing key is not.
    """
    any_warnings = False

    for hook_type in hook_types:
        for hook_name, hook_cfg in _ensure_dict(cfg.get(hook_type)).items():
            if hook_name == ALL_KEY:
                continue
            if ENABLED_KEY not in _ensure_dict(hook_cfg):
                log.warning(
                    f"{hook_type}::{hook_name} hook does not explicitly "
                    f"set `enabled` option in {config_file}"
                )
                any_warnings = True

    if any_warnings:
        log.newline()


# ------------------------------
# Public API
# ------------------------------

def validate_config(
    cfg: Any,
    options: Optional[ValidationOptions] = None,
    *,
    hook_types: Optional[Iterable[str]] = None,
) -> Dict[str, Any]:
    """Validate a parsed config, normalizing where possible.

    Returns a NEW dict in which no value is None and every hook type has a
    section containing an ALL entry. Raises ConfigError on structurally
    invalid input.
    """
    opts = options or ValidationOptions()
    known = tuple(hook_types) if hook_types is not None else _default_hook_types()

    normalized = _convert_nils_to_empty_dicts(_ensure_root(cfg))
    _ensure_hook_type_sections(normalized, known)
    if not opts.default and opts.logger is not None:
        _check_for_missing_enabled(normalized, known, opts.logger, opts.config_file)

    return normalized


def validate_config_verbose(
    cfg: Any,
    *,
    default: bool = False,
    hook_types: Optional[Iterable[str]] = None,
    config_file: str = CONFIG_FILE_NAME,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize configuration, returning (normalized_cfg, warnings).

    Warnings are the `enabled` audit messages; always empty when default=True.
    """
    collector = WarningCollector()
    opts = ValidationOptions(default=default, logger=collector, config_file=config_file)
    normalized = validate_config(cfg, opts, hook_types=hook_types)
    return normalized, list(collector.warnings)


def validate_config_api(
    cfg: Any,
    options: Optional[ValidationOptions] = None,
    *,
    hook_types: Optional[Iterable[str]] = None,
):
    """Stable, test-friendly API.

    Returns a tuple: (ok: bool, errs: list[str], cfg_or_none).
    - On success: (True, [], normalized_cfg)
    - On validation error: (False, [messages...], None)
    Does not raise ConfigError.
    """
    try:
        normalized = validate_config(cfg, options, hook_types=hook_types)
        return True, [], normalized
    except ConfigError as e:
        msg = str(e).strip()
        errs = msg.split("\n") if msg else ["invalid configuration"]
        return False, errs, None
