from __future__ import annotations

from configs.validate import ALL_KEY, ValidationOptions, validate_config, validate_config_verbose
from hookconf.hook_types import SUPPORTED_HOOK_TYPES
from hookconf.io.config import load_default_config


def test_builtin_default_config_validates_as_default(recording_logger):
    out = validate_config(load_default_config(), ValidationOptions(default=True, logger=recording_logger))
    assert recording_logger.calls == []
    for hook_type in SUPPORTED_HOOK_TYPES:
        assert isinstance(out[hook_type][ALL_KEY], dict)


def test_builtin_default_config_sets_enabled_everywhere():
    # Even audited as a user config, the baseline must not trigger warnings
    _, warnings = validate_config_verbose(load_default_config(), default=False)
    assert warnings == []


def test_null_all_entries_in_default_become_mappings():
    out = validate_config(load_default_config(), ValidationOptions(default=True))
    assert out["PostMerge"][ALL_KEY] == {}
    assert out["PostRewrite"] == {ALL_KEY: {}}
