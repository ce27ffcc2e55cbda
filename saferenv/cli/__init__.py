"""
Command-line interface for saferenv.
"""

from saferenv.cli.output import BufferedOutput, ConsoleOutput, OutputWriter

__all__ = [
    "BufferedOutput",
    "ConsoleOutput",
    "OutputWriter",
]
