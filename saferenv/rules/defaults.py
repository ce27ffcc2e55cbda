"""
Built-in sensitive-name patterns.

Each pattern is matched case-insensitively against a variable *name* and is
anchored at the end, so it catches suffixes: ``AWS_SECRET_ACCESS_KEY``,
``GITHUB_TOKEN``, ``DB_PASSWORD``. Matching names are redacted unless a
higher-precedence rule says otherwise.
"""

from __future__ import annotations

# Order is precedence among the defaults
DEFAULT_PATTERNS: tuple[str, ...] = (
    r"SECRETS?$",
    r"TOKENS?$",
    r"KEYS?$",
    r"PASSWORDS?$",
    # PW only after a separator: SERVICE_PW, DB-PW
    r"(_|-)PW$",
)
