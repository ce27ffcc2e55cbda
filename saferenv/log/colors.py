"""
Color management for the logging system.

ANSI color codes per log level. Codes are stored without their final
``m`` so a bold variant can be derived from the same base.
"""

import logging

from .constants import LogConstants


class ColorManager:
    """Centralized ANSI color code management."""

    RED = "\x1b[31"
    GREEN = "\x1b[32"
    YELLOW = "\x1b[33"
    MAGENTA = "\x1b[35"
    CYAN = "\x1b[36"
    DEFAULT = "\x1b[38"

    RESET = LogConstants.RESET

    COLORS: dict[int, str] = {
        LogConstants.TRACE: "\x1b[38;5;24",  # Blue-gray for TRACE
        logging.DEBUG: "\x1b[38;5;32",
        logging.INFO: CYAN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: MAGENTA,
    }

    @staticmethod
    def get_color_for_level(level: int) -> str:
        """Color escape sequence (without trailing 'm') for a log level."""
        return ColorManager.COLORS.get(level, ColorManager.DEFAULT)

    @staticmethod
    def create_gray_level(level: int) -> str:
        """Gray color for metadata, level clamped to 0-23."""
        level = max(0, min(level, 23))
        return f"\x1b[38;5;{232 + level}"

    @staticmethod
    def create_bold_color(base_color: str) -> str:
        """Bold version of a color."""
        return f"{base_color};1m"
