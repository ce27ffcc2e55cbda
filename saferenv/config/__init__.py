"""
Optional YAML rules file.

Example:
    from saferenv.config import load_config

    config = load_config("saferenv.yaml")
    ruleset = build(
        defaults_enabled=config.defaults,
        config_patterns=config.patterns(),
    )
"""

from .loader import load_config, parse_config, resolve_config_path
from .schemas import RuleEntry, SaferenvConfig, validate_config

__all__ = [
    "RuleEntry",
    "SaferenvConfig",
    "load_config",
    "parse_config",
    "resolve_config_path",
    "validate_config",
]
