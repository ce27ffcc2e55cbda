"""
First-match-wins resolution of variable names against a rule set.
"""

from __future__ import annotations

from collections.abc import Iterable

from .types import Action, Rule


def match(ruleset: Iterable[Rule], name: str) -> Rule | None:
    """
    Find the highest-precedence rule matching ``name``.

    Args:
        ruleset: Rules in precedence order
        name: Variable name

    Returns:
        The first matching rule, or None
    """
    for rule in ruleset:
        if rule.pattern.matches(name):
            return rule
    return None


def resolve(ruleset: Iterable[Rule], name: str) -> Action:
    """
    Decide what happens to the variable ``name``.

    Total and side-effect free: returns the action of the first matching
    rule, or Action.KEEP when nothing matches.
    """
    rule = match(ruleset, name)
    return rule.action if rule is not None else Action.KEEP
