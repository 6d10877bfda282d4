"""Shared test fixtures for xyzformat."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def water_xyz_path():
    """Return the path to the single-frame water fixture."""
    return FIXTURES_DIR / "water.xyz"


@pytest.fixture
def ch4_traj_path():
    """Return the path to the three-frame methane trajectory fixture."""
    return FIXTURES_DIR / "ch4_traj.xyz"


@pytest.fixture
def atomic_numbers_path():
    """Return the path to the fixture using numeric element columns."""
    return FIXTURES_DIR / "atomic_numbers.xyz"
