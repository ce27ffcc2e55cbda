"""
saferenv - env but a little safer.

Prints the environment, or runs a command in it, with variables whose names
look sensitive redacted.
"""

from importlib.metadata import PackageNotFoundError, version

from .exceptions import (
    ConfigError,
    InvalidPatternError,
    SaferenvError,
    SpawnError,
    UsageError,
)
from .rules import Action, Origin, Pattern, Rule, RuleSet, build, match, resolve

# Version is read from package metadata (pyproject.toml)
_FALLBACK_VERSION = "0.3.0"

try:
    __version__ = version("saferenv")
except PackageNotFoundError:
    __version__ = _FALLBACK_VERSION

__all__ = [
    "__version__",
    "Action",
    "ConfigError",
    "InvalidPatternError",
    "Origin",
    "Pattern",
    "Rule",
    "RuleSet",
    "SaferenvError",
    "SpawnError",
    "UsageError",
    "build",
    "match",
    "resolve",
]
