import random
import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """Ensure `src/` is on sys.path so tests can import `falling_sand.*`.

    This repo uses the common `src/` layout but is not necessarily installed as a package
    in the active environment.
    """

    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def rng():
    """Seeded random generator for deterministic rule tests."""
    return random.Random(1234)


@pytest.fixture
def grid():
    """An empty 5x5 grid."""
    from falling_sand.grid import Grid

    return Grid(5, 5)
