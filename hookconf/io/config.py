from __future__ import annotations
from typing import Any, Dict
import logging
import sys

import yaml

from ..errors import ConfigError

_logger = logging.getLogger(__name__)


# ---- small helpers --------------------------------------------------------

def default_config_path() -> str:
    """Location of the built-in baseline config shipped with the `configs` package."""
    from importlib.resources import files

    return str(files("configs").joinpath("default.yml"))


def _parse(text: str, source: str) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"unable to parse {source}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"{source} must contain a mapping at the top level (got {type(data).__name__})"
        )
    return data


# ---- loader ---------------------------------------------------------------

def load_config(path: str) -> Dict[str, Any]:
    """
    Load a hook configuration file as a plain dict.
    Behavior:
      * '-' reads YAML from stdin.
      * An empty file yields {}.
      * YAML syntax errors, non-UTF-8 bytes and non-mapping documents raise ConfigError.
      * A missing file raises FileNotFoundError (callers decide whether that is fatal).
    No normalization happens here; pass the result to validate_config.
    """
    if path == "-":
        return _parse(sys.stdin.read(), "<stdin>")

    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise ConfigError(f"unable to decode {path}: {e}") from e
    _logger.debug("loaded %d bytes from %s", len(text), path)
    return _parse(text, path)


def load_default_config() -> Dict[str, Any]:
    return load_config(default_config_path())
