"""
Pytest configuration and shared fixtures for mrkl tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_merges = importlib.import_module("fixtures.merges")
_leaves = importlib.import_module("fixtures.leaves")

SumMerge = _merges.SumMerge
ShapeMerge = _merges.ShapeMerge
make_text_leaves = _leaves.make_text_leaves
VECTOR_TEXTS = _leaves.VECTOR_TEXTS


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def sum_merge():
    """Byte-sum merge: leaf(a) = a, merge(a, b) = (a + b) mod 256."""
    return SumMerge()


@pytest.fixture
def shape_merge():
    """String merge that renders tree shape, e.g. '((0 1) 2)'."""
    return ShapeMerge()


@pytest.fixture
def blake2_strategy():
    """The default strategy: blake2s with rehashed leaves."""
    from mrkl.crypto.strategies import get_strategy
    return get_strategy("blake2", "rehash")


@pytest.fixture
def vector_leaves():
    """blake2s("1"), blake2s("2"), blake2s("3")."""
    return make_text_leaves(VECTOR_TEXTS)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """
    Isolate config loading: no MRKL_* variables, an empty working
    directory and an empty home directory.
    """
    for name in [
        "MRKL_ALGORITHM",
        "MRKL_LEAF_MODE",
        "MRKL_LOG_LEVEL",
        "MRKL_LOG_FILE",
        "MRKL_OUTPUT_FORMAT",
    ]:
        monkeypatch.delenv(name, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    return tmp_path


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
