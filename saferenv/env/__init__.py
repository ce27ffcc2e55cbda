"""
Environment handling: snapshots, materialization and command launch.
"""

from .launcher import SignalForwarder, exit_status, run_command
from .materializer import MaterializedEnvironment, isolate, materialize, render_lines
from .snapshot import (
    EnvironmentSnapshot,
    is_assignment,
    parse_assignment,
    split_assignments,
)

__all__ = [
    "EnvironmentSnapshot",
    "MaterializedEnvironment",
    "SignalForwarder",
    "exit_status",
    "is_assignment",
    "isolate",
    "materialize",
    "parse_assignment",
    "render_lines",
    "run_command",
    "split_assignments",
]
