from __future__ import annotations

import io

import pytest

from hookconf.errors import ConfigError
from hookconf.io.config import default_config_path, load_config, load_default_config


def _write(p, text: str):
    p.write_text(text, encoding="utf-8")
    return p


def test_load_yaml_with_nulls(tmp_path):
    p = _write(tmp_path / ".hookconf.yml", "PreCommit:\n  RuboCop:\n  ALL:\n    quiet: true\n")
    assert load_config(str(p)) == {"PreCommit": {"RuboCop": None, "ALL": {"quiet": True}}}


def test_empty_file_is_empty_mapping(tmp_path):
    p = _write(tmp_path / "empty.yml", "# nothing configured\n")
    assert load_config(str(p)) == {}


def test_non_mapping_document_raises(tmp_path):
    p = _write(tmp_path / "list.yml", "- PreCommit\n- CommitMsg\n")
    with pytest.raises(ConfigError) as ei:
        load_config(str(p))
    assert "mapping" in str(ei.value)


def test_yaml_syntax_error_is_typed(tmp_path):
    p = _write(tmp_path / "broken.yml", "PreCommit: [unclosed\n")
    with pytest.raises(ConfigError) as ei:
        load_config(str(p))
    assert "broken.yml" in str(ei.value)


def test_missing_file_raises_file_not_found(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yml"))


def test_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("CommitMsg:\n  TextWidth:\n    enabled: false\n"))
    assert load_config("-") == {"CommitMsg": {"TextWidth": {"enabled": False}}}


def test_default_config_is_packaged():
    assert default_config_path().endswith("default.yml")
    cfg = load_default_config()
    assert "PreCommit" in cfg and "CommitMsg" in cfg


def test_non_utf8_file_is_typed(tmp_path):
    p = tmp_path / "latin1.yml"
    p.write_bytes(b"PreCommit:\n  Foo\xff:\n")
    with pytest.raises(ConfigError) as ei:
        load_config(str(p))
    assert "unable to decode" in str(ei.value)
    assert isinstance(ei.value.__cause__, UnicodeDecodeError)
