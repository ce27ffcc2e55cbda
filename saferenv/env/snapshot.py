"""
Environment snapshots.

An EnvironmentSnapshot is a read-only copy of the variables the tool starts
from: the inherited process environment (or nothing, in isolation mode)
plus any NAME=VALUE assignments given on the command line.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from ..exceptions import UsageError


def is_assignment(arg: str) -> bool:
    """True for a NAME=VALUE command-line argument with a non-empty NAME."""
    name, sep, _ = arg.partition("=")
    return bool(sep) and bool(name)


def parse_assignment(arg: str) -> tuple[str, str]:
    """
    Split a NAME=VALUE argument.

    Raises:
        UsageError: If the argument has no '=' or an empty name
    """
    if not is_assignment(arg):
        raise UsageError(f"invalid assignment {arg!r}, expected NAME=VALUE")
    name, _, value = arg.partition("=")
    return name, value


def split_assignments(args: Iterable[str]) -> tuple[list[tuple[str, str]], list[str]]:
    """
    Separate leading NAME=VALUE assignments from the command.

    The first argument that is not an assignment starts the command; any
    later NAME=VALUE arguments belong to the command.
    """
    assignments: list[tuple[str, str]] = []
    rest = list(args)
    while rest and is_assignment(rest[0]):
        assignments.append(parse_assignment(rest.pop(0)))
    return assignments, rest


class EnvironmentSnapshot(Mapping[str, str]):
    """
    Immutable name -> raw value mapping, in the environment's natural order.

    Example:
        snap = EnvironmentSnapshot.capture()
        snap = snap.with_assignments([("DEBUG", "1")])
    """

    __slots__ = ("_vars",)

    def __init__(self, variables: Mapping[str, str] | None = None) -> None:
        self._vars: Mapping[str, str] = MappingProxyType(dict(variables or {}))

    @classmethod
    def capture(cls, environ: Mapping[str, str] | None = None) -> EnvironmentSnapshot:
        """Copy the current process environment (or the given mapping)."""
        return cls(os.environ if environ is None else environ)

    @classmethod
    def empty(cls) -> EnvironmentSnapshot:
        """Base for isolation mode."""
        return cls()

    def with_assignments(
        self, assignments: Iterable[tuple[str, str]]
    ) -> EnvironmentSnapshot:
        """Return a new snapshot with the assignments applied (later ones win)."""
        merged = dict(self._vars)
        for name, value in assignments:
            merged[name] = value
        return EnvironmentSnapshot(merged)

    def __getitem__(self, name: str) -> str:
        return self._vars[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._vars)

    def __len__(self) -> int:
        return len(self._vars)

    def __repr__(self) -> str:
        # Names only; values may be secrets
        return f"EnvironmentSnapshot({sorted(self._vars)!r})"
