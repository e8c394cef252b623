from __future__ import annotations

import json
import logging

import pytest

from hookconf.cli import _io


@pytest.fixture
def _restore_levels():
    saved = {name: logging.getLogger(name).level for name in ("hookconf", "configs")}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)
    _io.set_verbosity(False, False)


def test_verbosity_can_be_raised_after_first_call(_restore_levels):
    _io.set_verbosity(False, False)
    assert logging.getLogger("configs").getEffectiveLevel() == logging.WARNING
    _io.set_verbosity(True, False)
    assert logging.getLogger("configs").getEffectiveLevel() == logging.DEBUG
    assert logging.getLogger("hookconf.io.config").getEffectiveLevel() == logging.DEBUG
    _io.set_verbosity(False, True)
    assert logging.getLogger("hookconf").getEffectiveLevel() == logging.WARNING


def test_quiet_silences_eprint(_restore_levels, capsys):
    _io.set_verbosity(False, True)
    _io.eprint_once("hidden")
    _io.set_verbosity(False, False)
    _io.eprint_once("shown")
    assert capsys.readouterr().err == "shown\n"


def test_print_json_is_compact(capsys):
    _io.print_json({"PreCommit": {"ALL": {}}})
    out = capsys.readouterr().out
    assert out == '{"PreCommit":{"ALL":{}}}\n'
    assert json.loads(out) == {"PreCommit": {"ALL": {}}}
