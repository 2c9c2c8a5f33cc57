import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """Ensure `src/` is on sys.path so tests can import `wildfire_ca.*`.

    This repo uses the common `src/` layout but is not necessarily installed as a package
    in the active environment.
    """

    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


class ScriptedRandom:
    """Random source returning queued values, then a fixed default.

    Counts every draw so tests can check how many samples a step used.
    """

    def __init__(self, default: float, values=()):
        self.default = default
        self.values = list(values)
        self.draws = 0

    def queue(self, *values: float) -> None:
        self.values.extend(values)

    def random(self) -> float:
        self.draws += 1
        if self.values:
            return self.values.pop(0)
        return self.default


@pytest.fixture
def always_ignite():
    """Every draw succeeds against any probability above zero."""
    return ScriptedRandom(0.0)


@pytest.fixture
def never_ignite():
    """Every draw fails against every probability used by the model."""
    return ScriptedRandom(0.99)


@pytest.fixture
def scripted():
    return ScriptedRandom
