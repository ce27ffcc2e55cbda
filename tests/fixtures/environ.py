"""
Environment fixtures.

Tests pass explicit mappings instead of touching os.environ.
"""

import pytest

SECRET_VALUE = "wJalrXUtnFEMI/K7MDENG/bPxRfiCYEXAMPLEKEY"


@pytest.fixture
def secret_value() -> str:
    """A realistic-looking secret that must never show up in output."""
    return SECRET_VALUE


@pytest.fixture
def sample_environ() -> dict[str, str]:
    """Small inherited environment with one sensitive variable."""
    return {
        "HOME": "/home/user",
        "AWS_SECRET_ACCESS_KEY": SECRET_VALUE,
        "PATH": "/usr/bin:/bin",
        "LANG": "en_US.UTF-8",
    }
