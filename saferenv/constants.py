"""
Constants shared across saferenv.
"""

from enum import IntEnum

# Marker printed in place of a redacted value
DEFAULT_REDACT_VALUE = "[REDACTED]"

# Environment variable naming a default rules file
CONFIG_ENV_VAR = "SAFERENV_CONFIG"

# Maximum config file size (1MB); a rules file is a handful of lines
MAX_CONFIG_SIZE_BYTES = 1024 * 1024

# Highest supported -v count (-vvv)
MAX_VERBOSITY = 3


class ExitCode(IntEnum):
    """Process exit codes (sysexits.h values plus the env(1) spawn codes)."""

    OK = 0
    USAGE = 64
    SOFTWARE = 70
    CONFIG = 78
    CANNOT_EXECUTE = 126
    NOT_FOUND = 127
    SIGNAL_BASE = 128
