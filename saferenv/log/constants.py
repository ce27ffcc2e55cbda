"""
Constants for the logging system: formats, custom levels, verbosity mapping.
"""

import logging


class LogConstants:
    """Constants for the logging system."""

    # Root of the logger hierarchy (modules log under saferenv.*)
    ROOT_LOGGER: str = "saferenv"

    # Default format string; extra fields are appended by the formatter
    DEFAULT_FORMAT: str = "[%(asctime)s] [%(levelname).1s] %(message)s"
    DATE_FORMAT: str = "%H:%M:%S"

    # Column where extra fields start
    DEFAULT_RULE_WIDTH: int = 50

    # Custom log levels
    TRACE: int = 5
    CUSTOM_LEVELS: dict[str, int] = {"TRACE": TRACE}

    # -v count -> level
    VERBOSITY_LEVELS: dict[int, int] = {
        0: logging.WARNING,
        1: logging.INFO,
        2: logging.DEBUG,
        3: TRACE,
    }

    # ANSI escape sequences
    RESET: str = "\x1b[0m"
