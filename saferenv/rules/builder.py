"""
Rule set construction.

A RuleSet is built once per invocation by concatenating four bands of rules
in a fixed order. Position in the sequence is the precedence:

    1. --keep NAME      (cli_explicit_keep)
    2. --unset NAME     (cli_explicit_unset)
    3. config patterns  (config)
    4. built-in         (default)

All keep rules precede all unset rules, so --keep wins over --unset for the
same name regardless of the order the flags were given in.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import overload

from .defaults import DEFAULT_PATTERNS
from .pattern import Pattern
from .types import Action, Origin, Rule

lg = logging.getLogger(__name__)


class RuleSet(Sequence[Rule]):
    """
    Immutable, ordered sequence of rules.

    Rule ids are assigned here, from position, so they always agree with the
    precedence order.
    """

    __slots__ = ("_rules",)

    def __init__(self, entries: Iterable[tuple[Origin, Pattern, Action]] = ()) -> None:
        self._rules: tuple[Rule, ...] = tuple(
            Rule(id=i, origin=origin, pattern=pattern, action=action)
            for i, (origin, pattern, action) in enumerate(entries, start=1)
        )

    @overload
    def __getitem__(self, index: int) -> Rule: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Rule, ...]: ...

    def __getitem__(self, index: int | slice) -> Rule | tuple[Rule, ...]:
        return self._rules[index]

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet({len(self._rules)} rules)"

    def by_origin(self, origin: Origin) -> tuple[Rule, ...]:
        """Rules from one source, in precedence order."""
        return tuple(rule for rule in self._rules if rule.origin is origin)

    def describe(self) -> str:
        """Render every rule in --show-rules format."""
        return "".join(rule.describe() for rule in self._rules)


def _cli_entries(
    names: Iterable[str], origin: Origin, action: Action
) -> list[tuple[Origin, Pattern, Action]]:
    return [(origin, Pattern.exact(name), action) for name in names]


def _config_entries(
    config_patterns: Iterable[tuple[str, Action]],
) -> list[tuple[Origin, Pattern, Action]]:
    # User patterns are validated; InvalidPatternError aborts the build here
    return [
        (Origin.CONFIG, Pattern(text, validate=True), action)
        for text, action in config_patterns
    ]


def _default_entries(
    default_patterns: Iterable[str],
) -> list[tuple[Origin, Pattern, Action]]:
    return [(Origin.DEFAULT, Pattern(text), Action.REDACT) for text in default_patterns]


def build(
    defaults_enabled: bool = True,
    config_patterns: Iterable[tuple[str, Action]] = (),
    cli_keep_names: Iterable[str] = (),
    cli_unset_names: Iterable[str] = (),
    default_patterns: Sequence[str] = DEFAULT_PATTERNS,
) -> RuleSet:
    """
    Build the rule set for one invocation.

    Args:
        defaults_enabled: Append the built-in sensitive-name patterns
        config_patterns: (pattern, action) pairs from a rules file, in file order
        cli_keep_names: Names given with --keep, in argument order
        cli_unset_names: Names given with --unset, in argument order
        default_patterns: Built-in pattern table (substitutable in tests)

    Returns:
        The ordered RuleSet

    Raises:
        InvalidPatternError: If a config pattern is rejected or fails to compile
    """
    entries = (
        _cli_entries(cli_keep_names, Origin.CLI_EXPLICIT_KEEP, Action.KEEP)
        + _cli_entries(cli_unset_names, Origin.CLI_EXPLICIT_UNSET, Action.UNSET)
        + _config_entries(config_patterns)
        + (_default_entries(default_patterns) if defaults_enabled else [])
    )
    ruleset = RuleSet(entries)
    lg.debug(
        "rule set built",
        extra={
            "rules": len(ruleset),
            "keep": len(ruleset.by_origin(Origin.CLI_EXPLICIT_KEEP)),
            "unset": len(ruleset.by_origin(Origin.CLI_EXPLICIT_UNSET)),
            "config": len(ruleset.by_origin(Origin.CONFIG)),
            "defaults": len(ruleset.by_origin(Origin.DEFAULT)),
        },
    )
    return ruleset
