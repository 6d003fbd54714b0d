"""
Pytest configuration and shared fixtures for merkletree tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers
"""

import os
import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from fixtures.common import example_data, write_blocks  # noqa: E402


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def data_3():
    """Three single-byte blocks: 0x00, 0x01, 0x02."""
    return example_data(3)


@pytest.fixture
def data_4():
    """Four single-byte blocks: 0x00 .. 0x03."""
    return example_data(4)


@pytest.fixture
def data_8():
    """Eight single-byte blocks: 0x00 .. 0x07."""
    return example_data(8)


@pytest.fixture
def block_files(tmp_path):
    """Five small files on disk, returned as a list of paths in order."""
    return write_blocks(tmp_path, [b"alpha", b"beta", b"gamma", b"delta", b"epsilon"])


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep MERKLETREE_* variables and config files from the host out of tests."""
    for key in list(os.environ):
        if key.startswith("MERKLETREE_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
