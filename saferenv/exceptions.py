"""
Unified exception hierarchy for saferenv.

Every error the tool reports to the user derives from SaferenvError, so the
CLI can catch them with a single except clause and map each kind to an exit
code.
"""

from typing import Any

from .constants import ExitCode


class SaferenvError(Exception):
    """
    Base exception for all saferenv errors.

    Example:
        try:
            ruleset = build(config_patterns=patterns)
        except SaferenvError as e:
            lg.error(f"cannot continue: {e}")
    """

    exit_code: int = ExitCode.SOFTWARE

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class UsageError(SaferenvError):
    """
    Command-line usage errors.

    Examples:
        - Verbosity requested above the supported maximum
        - Malformed NAME=VALUE assignment
    """

    exit_code = ExitCode.USAGE


class ConfigError(SaferenvError):
    """
    Configuration-related errors.

    Examples:
        - Config file not found or unreadable
        - Invalid YAML syntax
        - Unknown rule action
    """

    exit_code = ExitCode.CONFIG


class InvalidPatternError(ConfigError):
    """
    Raised when a rule pattern cannot be turned into a matcher.

    Always raised while the rule set is being built, never while a variable
    name is being resolved.
    """

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"invalid pattern {pattern!r}: {reason}", pattern=pattern)
        self.pattern = pattern
        self.reason = reason


class SpawnError(SaferenvError):
    """
    Raised when the requested command could not be launched.

    The exit code follows the env(1) convention: 127 when the command was not
    found, 126 when it was found but could not be executed.
    """

    def __init__(self, command: str, error: OSError) -> None:
        super().__init__(f"cannot run {command!r}: {error.strerror or error}")
        self.command = command
        self.error = error
        if isinstance(error, FileNotFoundError):
            self.exit_code = ExitCode.NOT_FOUND
        else:
            self.exit_code = ExitCode.CANNOT_EXECUTE
