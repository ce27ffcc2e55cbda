"""
Regex utilities for user-supplied rule patterns.

Patterns from a rules file are untrusted input: before compiling them we
reject patterns that are excessively long or contain nested quantifiers,
the primary cause of catastrophic backtracking. Built-in patterns are
trusted and compiled directly.

Example Usage:
    from saferenv.regex_utils import RegexComplexityError, safe_compile

    try:
        compiled = safe_compile(user_pattern, re.IGNORECASE)
    except RegexComplexityError as e:
        lg.error(f"rejected pattern: {e}")
    except re.error as e:
        lg.error(f"invalid regex pattern: {e}")
"""

import re
from re import Pattern


class RegexComplexityError(ValueError):
    """Raised when regex pattern is too complex."""

    pass


# Variable names are short; anything longer than this is not a name pattern
MAX_PATTERN_LENGTH = 256

# Nested quantifiers: (.+)+, (.*)*, (a{1,3})+
DANGEROUS_PATTERNS = [
    r"\([^)]*[*+]\)[*+{]",
    r"\([^)]*\{[^}]+\}\)[*+{]",
]


def validate_pattern_complexity(pattern: str) -> None:
    """
    Validate regex pattern to detect potentially dangerous constructs.

    Args:
        pattern: Regex pattern string to validate

    Raises:
        RegexComplexityError: If pattern is too long or has nested quantifiers
    """
    if len(pattern) > MAX_PATTERN_LENGTH:
        raise RegexComplexityError(
            f"pattern too long ({len(pattern)} chars, max {MAX_PATTERN_LENGTH})"
        )

    for dangerous in DANGEROUS_PATTERNS:
        if re.search(dangerous, pattern):
            raise RegexComplexityError(
                "pattern contains nested quantifiers that may cause "
                "catastrophic backtracking, e.g. (.+)+ or (.*)*"
            )


def safe_compile(pattern: str, flags: int = 0) -> Pattern[str]:
    """
    Compile a user-provided regex pattern after complexity validation.

    Args:
        pattern: Regex pattern string to compile
        flags: Regex flags (re.IGNORECASE, etc.)

    Returns:
        Compiled regex pattern

    Raises:
        RegexComplexityError: If pattern is too complex
        re.error: If pattern is invalid
    """
    validate_pattern_complexity(pattern)
    return re.compile(pattern, flags)
