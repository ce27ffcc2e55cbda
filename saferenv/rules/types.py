"""
Core rule types: actions, origins and the immutable Rule record.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .pattern import Pattern


class Action(Enum):
    """What happens to a variable whose name a rule matches."""

    KEEP = "Keep"
    REDACT = "Redact"
    UNSET = "Unset"

    @classmethod
    def from_name(cls, name: str) -> Action:
        """
        Parse an action name case-insensitively ("keep", "Redact", "UNSET").

        Raises:
            ValueError: If the name is not a known action
        """
        for action in cls:
            if action.value.lower() == name.strip().lower():
                return action
        valid = ", ".join(a.value.lower() for a in cls)
        raise ValueError(f"unknown action {name!r} (expected one of: {valid})")

    def __str__(self) -> str:
        return self.value


class Origin(str, Enum):
    """Where a rule came from; also its precedence band."""

    CLI_EXPLICIT_KEEP = "cli_explicit_keep"
    CLI_EXPLICIT_UNSET = "cli_explicit_unset"
    CONFIG = "config"
    DEFAULT = "default"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Rule:
    """
    One (pattern, action, origin) entry of a rule set.

    ``id`` is the 1-based position in the rule set it belongs to; a lower id
    means higher precedence.
    """

    id: int
    origin: Origin
    pattern: Pattern
    action: Action

    @property
    def explicit(self) -> bool:
        """True for rules the user asked for (CLI flags or config file)."""
        return self.origin is not Origin.DEFAULT

    def describe(self) -> str:
        """Render the rule in the --show-rules block format."""
        return (
            f"Rule {self.id}: {self.origin}\n"
            f'    pattern: "{self.pattern}"\n'
            f"    action: {self.action}\n"
        )
