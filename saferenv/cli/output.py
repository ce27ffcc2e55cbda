"""
Output abstraction for the CLI.

Provides a testable interface for CLI output, so the environment listing can
be checked without capturing stdout.
"""

import sys
from typing import Protocol, TextIO


def allow_undecodable(stream: TextIO) -> None:
    """
    Let a text stream write values that are not valid in its encoding.

    Environment values that do not decode under the filesystem encoding are
    held as lone surrogates; with ``surrogateescape`` they are written back
    as the original bytes instead of raising UnicodeEncodeError.
    """
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")


class OutputWriter(Protocol):
    """Protocol for CLI output writing."""

    def write(self, text: str = "") -> None:
        """Write text with trailing newline."""
        ...

    def write_raw(self, text: str) -> None:
        """Write text without trailing newline."""
        ...


class ConsoleOutput:
    """
    Default output writer that writes to a stream (stdout by default).

    Example:
        out = ConsoleOutput()
        out.write("HOME=/home/user")

        err = ConsoleOutput(sys.stderr)
        err.write("saferenv: cannot run 'nope'")
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        """
        Initialize with optional output stream.

        Args:
            stream: Output stream (defaults to sys.stdout at write time)
        """
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str = "") -> None:
        """Write text with trailing newline."""
        print(text, file=self.stream)

    def write_raw(self, text: str) -> None:
        """Write text without trailing newline."""
        print(text, end="", file=self.stream)

    def flush(self) -> None:
        """Flush the output stream."""
        self.stream.flush()


class BufferedOutput:
    """
    Output writer that captures output to a list.

    Example:
        out = BufferedOutput()
        out.write("HOME=/home/user")
        out.write("API_KEY=[REDACTED]")
        assert out.lines == ["HOME=/home/user", "API_KEY=[REDACTED]"]
    """

    def __init__(self) -> None:
        """Initialize empty buffer."""
        self._lines: list[str] = []
        self._raw_parts: list[str] = []

    def write(self, text: str = "") -> None:
        """Write text with trailing newline."""
        if self._raw_parts:
            prefix = "".join(self._raw_parts)
            self._raw_parts.clear()
            self._lines.append(prefix + text)
        else:
            self._lines.append(text)

    def write_raw(self, text: str) -> None:
        """Buffer text without newline; embedded newlines split lines."""
        *complete, pending = text.split("\n")
        for part in complete:
            self.write(part)
        if pending:
            self._raw_parts.append(pending)

    def flush(self) -> None:
        """Flush any pending raw parts as a line."""
        if self._raw_parts:
            self._lines.append("".join(self._raw_parts))
            self._raw_parts.clear()

    @property
    def lines(self) -> list[str]:
        """Get all output lines."""
        return self._lines.copy()

    @property
    def text(self) -> str:
        """Get all output as a single string with newlines."""
        self.flush()
        return "\n".join(self._lines) + ("\n" if self._lines else "")

    def clear(self) -> None:
        """Clear the buffer."""
        self._lines.clear()
        self._raw_parts.clear()
