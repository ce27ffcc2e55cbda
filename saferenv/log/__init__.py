"""
Logging setup for saferenv.

All modules log through ``logging.getLogger(__name__)`` under the
``saferenv`` hierarchy. ``setup_logging`` attaches a single stderr handler
to that hierarchy; nothing is written to stdout, which carries the
environment listing.

Log messages name variables, never their values.

Example:
    from saferenv.log import setup_logging

    lg = setup_logging(verbosity=2)
    lg.debug("rule set built", extra={"rules": 7})
"""

import logging
import sys
from typing import TextIO

from ..constants import MAX_VERBOSITY
from ..exceptions import UsageError
from .colors import ColorManager
from .constants import LogConstants
from .formatters import LogFormatter, extra_fields

# Register custom level names once
for _name, _level in LogConstants.CUSTOM_LEVELS.items():
    logging.addLevelName(_level, _name)


def level_for_verbosity(verbosity: int) -> int:
    """
    Map a -v count to a log level.

    Raises:
        UsageError: If verbosity exceeds the supported maximum
    """
    if verbosity < 0 or verbosity > MAX_VERBOSITY:
        raise UsageError(
            f"verbosity level cannot be greater than {MAX_VERBOSITY} (-vvv)",
            verbosity=verbosity,
        )
    return LogConstants.VERBOSITY_LEVELS[verbosity]


def setup_logging(
    verbosity: int = 0, stream: TextIO | None = None, colors: bool | None = None
) -> logging.Logger:
    """
    Configure the saferenv logger hierarchy.

    Calling again replaces the previous handler.

    Args:
        verbosity: Number of -v flags (0-3)
        stream: Destination (default: sys.stderr)
        colors: Force colors on/off (default: when stream is a TTY)

    Returns:
        The saferenv root logger

    Raises:
        UsageError: If verbosity is out of range
    """
    level = level_for_verbosity(verbosity)
    stream = stream if stream is not None else sys.stderr
    if colors is None:
        colors = hasattr(stream, "isatty") and stream.isatty()

    handler = logging.StreamHandler(stream)
    handler.setFormatter(LogFormatter(colors=colors))

    lg = logging.getLogger(LogConstants.ROOT_LOGGER)
    for old in list(lg.handlers):
        lg.removeHandler(old)
    lg.addHandler(handler)
    lg.setLevel(level)
    lg.propagate = False
    return lg


__all__ = [
    "ColorManager",
    "LogConstants",
    "LogFormatter",
    "extra_fields",
    "level_for_verbosity",
    "setup_logging",
]
