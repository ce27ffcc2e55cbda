"""
Log formatter rendering extra fields as ``[key:value]`` brackets.

Anything passed through ``extra=`` that is not a standard LogRecord attribute
is treated as a field:

    lg.info("rule matched", extra={"var": "GITHUB_TOKEN", "rule": 3})
    # [12:00:01] [I] rule matched          [var:GITHUB_TOKEN] [rule:3] [saferenv.env]
"""

import logging
from typing import Any

from .colors import ColorManager
from .constants import LogConstants

# Attributes every LogRecord has; everything else came in via extra=
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime", "taskName"}


def extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Fields passed through extra=, in insertion order."""
    return {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}


class LogFormatter(logging.Formatter):
    """
    Formatter with optional ANSI colors and bracketed extra fields.

    Args:
        colors: Emit ANSI color sequences
        rule_width: Column at which extra fields start
    """

    def __init__(
        self, colors: bool = False, rule_width: int = LogConstants.DEFAULT_RULE_WIDTH
    ) -> None:
        super().__init__(LogConstants.DEFAULT_FORMAT, LogConstants.DATE_FORMAT)
        self._colors = colors
        self._rule_width = rule_width

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        head, sep, tail = base.partition("\n")  # keep tracebacks below the fields
        fields = extra_fields(record)
        if self._colors:
            line = self._format_colored(record, head, fields)
        else:
            line = self._format_plain(record, head, fields)
        return line + sep + tail

    def _pad(self, text: str) -> str:
        return " " * max(1, self._rule_width - len(text))

    def _format_plain(
        self, record: logging.LogRecord, head: str, fields: dict[str, Any]
    ) -> str:
        parts = [f"[{k}:{v}]" for k, v in fields.items()]
        parts.append(f"[{record.name}]")
        return head + self._pad(head) + " ".join(parts)

    def _format_colored(
        self, record: logging.LogRecord, head: str, fields: dict[str, Any]
    ) -> str:
        base = ColorManager.get_color_for_level(record.levelno)
        col = base + "m"
        bold = ColorManager.create_bold_color(base)
        gray = ColorManager.create_gray_level(9) + "m"

        parts = [
            f"{col}{k}[{bold}{v}{ColorManager.RESET}{col}]" for k, v in fields.items()
        ]
        parts.append(f"{gray}[{record.name}]")
        return col + head + self._pad(head) + " ".join(parts) + ColorManager.RESET
