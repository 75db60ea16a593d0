"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

from pathlib import Path
from typing import Generator

import pytest

from propstore.loader import load
from propstore.parser.parser import PropertiesParser
from propstore.store.properties import Properties

DATA_DIR = Path(__file__).parent / "data"


# ============================================================================
# Store Fixtures
# ============================================================================

@pytest.fixture
def store() -> Properties:
    """Create a fresh, unbounded Properties store."""
    return Properties(max_entries=0)


@pytest.fixture
def small_store() -> Properties:
    """Create a Properties store that holds at most 3 entries."""
    return Properties(max_entries=3)


# ============================================================================
# Parser Fixtures
# ============================================================================

@pytest.fixture
def parser() -> PropertiesParser:
    """Create a PropertiesParser with default buffer sizes and no length limit."""
    return PropertiesParser(max_token_length=0)


@pytest.fixture
def tiny_parser() -> PropertiesParser:
    """
    Create a PropertiesParser with 2-character buffers and a 1-character read
    chunk, so every growth and refill path is exercised.
    """
    return PropertiesParser(key_capacity=2, value_capacity=2, max_token_length=0, chunk_size=1)


# ============================================================================
# Loader Fixtures
# ============================================================================

@pytest.fixture
def properties_path() -> Path:
    """Path to the properties file shared by the tests."""
    return DATA_DIR / "test.properties"


@pytest.fixture
def loaded(properties_path: Path) -> Generator[Properties, None, None]:
    """
    Load the shared test file.

    The store is destroyed after the test.
    """
    result = load(properties_path)
    assert result.is_ok, result.message

    yield result.properties

    result.properties.destroy()


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
