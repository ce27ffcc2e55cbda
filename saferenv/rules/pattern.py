"""
Case-insensitive name patterns.

A Pattern wraps a compiled regular expression. Compilation happens once, in
the constructor, so a bad pattern is reported while the rule set is built and
matching itself can never fail.
"""

from __future__ import annotations

import re
from re import Pattern as _Compiled

from ..exceptions import InvalidPatternError
from ..regex_utils import RegexComplexityError, safe_compile


class Pattern:
    """
    Regular expression matched against variable names.

    Matching is always case-insensitive and uses an unanchored search;
    callers anchor explicitly with ``^...$`` when they need a full match.

    Example:
        p = Pattern(r"KEYS?$")
        p.matches("api_key")    # True
        p.matches("KEYBOARD")   # False
    """

    __slots__ = ("_text", "_compiled")

    def __init__(self, text: str, *, validate: bool = False) -> None:
        """
        Compile the pattern.

        Args:
            text: Regex source
            validate: Apply complexity checks for untrusted (user) patterns

        Raises:
            InvalidPatternError: If the pattern is rejected or fails to compile
        """
        self._text = text
        self._compiled = self._compile(text, validate)

    @staticmethod
    def _compile(text: str, validate: bool) -> _Compiled[str]:
        try:
            if validate:
                return safe_compile(text, re.IGNORECASE)
            return re.compile(text, re.IGNORECASE)
        except (RegexComplexityError, re.error) as e:
            raise InvalidPatternError(text, str(e)) from e

    @classmethod
    def exact(cls, name: str) -> Pattern:
        """Pattern matching exactly ``name``, rendered as ``^NAME$``."""
        # "-" is literal outside a character class
        escaped = "".join(c if c == "-" else re.escape(c) for c in name)
        return cls(f"^{escaped}$")

    @property
    def text(self) -> str:
        """The regex source as given."""
        return self._text

    def matches(self, name: str) -> bool:
        """Check whether ``name`` matches this pattern."""
        return self._compiled.search(name) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pattern):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(self._text)

    def __repr__(self) -> str:
        return f"Pattern({self._text!r})"

    def __str__(self) -> str:
        return self._text
