"""
Apply a rule set to an environment snapshot.

The snapshot is never modified. Materializing produces two new mappings:

- ``display``: what is printed. Kept variables show their value, redacted
  ones show the redaction marker, unset ones are absent.
- ``child_env``: what a launched command receives. Only kept variables are
  present, with their real values. A redacted variable is neither passed
  through nor replaced by the marker.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ..constants import DEFAULT_REDACT_VALUE
from ..log.constants import LogConstants
from ..rules import Action, Rule, match
from .snapshot import EnvironmentSnapshot

lg = logging.getLogger(__name__)


@dataclass(frozen=True)
class MaterializedEnvironment:
    """Result of applying a rule set to a snapshot."""

    display: Mapping[str, str]
    child_env: Mapping[str, str]
    decisions: Mapping[str, Action] = field(default_factory=dict)

    def names(self, action: Action) -> list[str]:
        """Names that resolved to ``action``, in snapshot order."""
        return [name for name, decided in self.decisions.items() if decided is action]

    def lines(self) -> Iterator[str]:
        """Printed listing as NAME=value lines."""
        return render_lines(self.display)


def render_lines(display: Mapping[str, str]) -> Iterator[str]:
    """Render a display mapping as NAME=value lines, preserving order."""
    for name, value in display.items():
        yield f"{name}={value}"


def _trace_decision(name: str, rule: Rule | None, action: Action) -> None:
    if not lg.isEnabledFor(LogConstants.TRACE):
        return
    if rule is None:
        lg.log(LogConstants.TRACE, "no rule matched", extra={"var": name})
    else:
        lg.log(
            LogConstants.TRACE,
            "rule matched",
            extra={
                "var": name,
                "rule": rule.id,
                "origin": rule.origin,
                "action": action,
            },
        )


def materialize(
    snapshot: Mapping[str, str],
    ruleset: Iterable[Rule],
    redact_value: str = DEFAULT_REDACT_VALUE,
) -> MaterializedEnvironment:
    """
    Resolve every variable of ``snapshot`` and build the output mappings.

    Args:
        snapshot: Variables to process, in natural order
        ruleset: Rules in precedence order
        redact_value: Marker shown in place of redacted values

    Returns:
        MaterializedEnvironment with display, child_env and decisions
    """
    rules = tuple(ruleset)
    display: dict[str, str] = {}
    child_env: dict[str, str] = {}
    decisions: dict[str, Action] = {}

    for name, value in snapshot.items():
        rule = match(rules, name)
        action = rule.action if rule is not None else Action.KEEP
        _trace_decision(name, rule, action)
        decisions[name] = action

        if action is Action.KEEP:
            display[name] = value
            child_env[name] = value
        elif action is Action.REDACT:
            display[name] = redact_value

    result = MaterializedEnvironment(
        display=MappingProxyType(display),
        child_env=MappingProxyType(child_env),
        decisions=MappingProxyType(decisions),
    )
    lg.info(
        "environment materialized",
        extra={
            "vars": len(decisions),
            "kept": len(result.names(Action.KEEP)),
            "redacted": len(result.names(Action.REDACT)),
            "unset": len(result.names(Action.UNSET)),
        },
    )
    return result


def isolate(
    inherited: Mapping[str, str], ruleset: Iterable[Rule]
) -> EnvironmentSnapshot:
    """
    Base snapshot for isolation mode (-i).

    Starts empty, carrying over only inherited variables that an explicit
    keep rule (--keep or a config keep rule) matches. With no such rules the
    result is empty.
    """
    rules = tuple(ruleset)
    carried: dict[str, str] = {}
    for name, value in inherited.items():
        rule = match(rules, name)
        if rule is not None and rule.explicit and rule.action is Action.KEEP:
            carried[name] = value
        else:
            lg.log(LogConstants.TRACE, "dropped by isolation", extra={"var": name})
    lg.info("isolation mode", extra={"carried": len(carried)})
    return EnvironmentSnapshot(carried)
