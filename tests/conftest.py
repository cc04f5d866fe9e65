"""Shared test fixtures for farsitype."""


import pytest

from farsitype.shaping import set_isolation_preference


@pytest.fixture(autouse=True)
def _reset_isolation_preference():
    """Every test starts (and leaves) the process default at use_isolated=True."""
    set_isolation_preference(True)
    yield
    set_isolation_preference(True)


@pytest.fixture
def tmp_config_dir(tmp_path):
    """Create a temporary config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def salam() -> str:
    """The word salam: SEEN LAAM ALEF MEEM."""
    return "\u0633\u0644\u0627\u0645"


@pytest.fixture
def salam_shaped() -> str:
    """SEEN initial, LAAM medial, ALEF final, MEEM isolated."""
    return "\uFEB3\uFEE0\uFE8E\uFEE1"
