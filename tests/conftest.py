# tests/conftest.py
import logging
import os
import pathlib
import sys

import pytest

# Make sure tests can import the local package without installing it
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

LEGEND_VARS = ("LEGEND_TRANCE", "LEGEND_SEED", "LEGEND_LOG_LEVEL")


class ScriptedRNG:
    """Random source that replays a fixed list of values."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def roll_int(self, lo, hi):
        self.calls.append((lo, hi))
        value = self.values.pop(0)
        assert lo <= value <= hi
        return value


@pytest.fixture
def scripted():
    return ScriptedRNG


@pytest.fixture(autouse=True)
def _clean_legend_env(monkeypatch):
    for var in LEGEND_VARS:
        monkeypatch.delenv(var, raising=False)
    yield
    # load_env() writes os.environ directly
    for var in LEGEND_VARS:
        os.environ.pop(var, None)
    # set_level() and --verbose change the package logger
    logging.getLogger("legend").setLevel(logging.NOTSET)
