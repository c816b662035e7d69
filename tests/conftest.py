import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from delve.core.random import RandomSource  # noqa: E402


class ScriptedSource(RandomSource):
    """RandomSource that replays a fixed list of integers for randint()."""

    def __init__(self, values):
        super().__init__(seed=0)
        self.values = list(values)

    def randint(self, a, b):
        assert self.values, f"script exhausted (asked for randint({a}, {b}))"
        v = self.values.pop(0)
        assert a <= v <= b, f"scripted value {v} outside [{a}, {b}]"
        return v


@pytest.fixture
def scripted():
    return ScriptedSource
