"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the saferenv test suite.
"""

import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

# =============================================================================
# Plugin Registration
# =============================================================================

pytest_plugins = [
    "tests.fixtures.logging",
    "tests.fixtures.environ",
]


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (spawn processes, touch files)"
    )
    config.addinivalue_line("markers", "e2e: End-to-end tests (full CLI workflow)")
    config.addinivalue_line("markers", "property: Property-based tests")


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Provide a temporary directory that is cleaned up after the test.

    Yields:
        Path: Temporary directory path
    """
    temp_path = Path(tempfile.mkdtemp(prefix="saferenv-test-"))
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def rules_file(temp_dir: Path):
    """
    Factory writing a YAML rules file into the temp directory.

    Returns:
        Callable taking the YAML text and returning the file path
    """

    def _write(text: str, name: str = "saferenv.yaml") -> Path:
        path = temp_dir / name
        path.write_text(text)
        return path

    return _write
