"""
Pytest configuration and fixtures for LayoutDoc tests.
"""

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def sample_config():
    """Return a sample ReaderConfig for testing."""
    from layoutdoc import ReaderConfig

    return ReaderConfig()


@pytest.fixture
def reader():
    """Layout reader with default configuration."""
    from layoutdoc import LayoutReader

    return LayoutReader()
