from __future__ import annotations

import pytest

from hookconf.hook_types import (
    SUPPORTED_HOOK_TYPES,
    class_name_to_hook_type,
    hook_type_to_class_name,
    supported_hook_types,
)


@pytest.mark.parametrize(
    "git_name,section",
    [
        ("pre-commit", "PreCommit"),
        ("commit-msg", "CommitMsg"),
        ("prepare-commit-msg", "PrepareCommitMsg"),
        ("post-checkout", "PostCheckout"),
    ],
)
def test_name_conversions(git_name, section):
    assert hook_type_to_class_name(git_name) == section
    assert class_name_to_hook_type(section) == git_name


def test_registry_is_ordered_and_unique():
    assert len(set(SUPPORTED_HOOK_TYPES)) == len(SUPPORTED_HOOK_TYPES)
    assert list(SUPPORTED_HOOK_TYPES) == sorted(SUPPORTED_HOOK_TYPES)


def test_supported_hook_types_git_names():
    names = supported_hook_types()
    assert "pre-commit" in names and "pre-push" in names
    assert len(names) == len(SUPPORTED_HOOK_TYPES)
