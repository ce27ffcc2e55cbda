"""
Rule resolution engine.

Maps environment variable names to an Action (keep, redact, unset) using an
ordered, first-match-wins rule set.

Example:
    from saferenv.rules import Action, build, resolve

    ruleset = build(cli_keep_names=["GITHUB_TOKEN"])
    resolve(ruleset, "GITHUB_TOKEN")   # Action.KEEP
    resolve(ruleset, "NPM_TOKEN")      # Action.REDACT
    resolve(ruleset, "HOME")           # Action.KEEP
"""

from .builder import RuleSet, build
from .defaults import DEFAULT_PATTERNS
from .pattern import Pattern
from .resolver import match, resolve
from .types import Action, Origin, Rule

__all__ = [
    "Action",
    "Origin",
    "Pattern",
    "Rule",
    "RuleSet",
    "build",
    "match",
    "resolve",
    "DEFAULT_PATTERNS",
]
