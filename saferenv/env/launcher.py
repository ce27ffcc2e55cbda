"""
Run a command in a filtered environment.

The command is spawned with exactly the environment it is given, and the
caller blocks until it exits. Termination signals received while waiting are
forwarded to the child rather than handled here, so the child decides how to
shut down and its exit status becomes ours.
"""

from __future__ import annotations

import logging
import signal
import subprocess
from collections.abc import Mapping, Sequence
from types import FrameType
from typing import Any

from ..constants import ExitCode
from ..exceptions import SpawnError, UsageError

lg = logging.getLogger(__name__)

# Signals relayed to the child while it runs
FORWARDED_SIGNALS = tuple(
    getattr(signal, name)
    for name in ("SIGINT", "SIGTERM", "SIGHUP", "SIGQUIT")
    if hasattr(signal, name)
)


def exit_status(returncode: int) -> int:
    """Map a Popen returncode to a process exit status (128 + N for signal N)."""
    if returncode < 0:
        return ExitCode.SIGNAL_BASE + (-returncode)
    return returncode


class SignalForwarder:
    """
    Context manager relaying termination signals to a child process.

    Previous handlers are restored on exit.

    Example:
        proc = subprocess.Popen(argv, env=env)
        with SignalForwarder(proc):
            proc.wait()
    """

    def __init__(
        self, proc: subprocess.Popen[Any], signals: Sequence[int] = FORWARDED_SIGNALS
    ) -> None:
        self._proc = proc
        self._signals = signals
        self._previous: dict[int, Any] = {}

    def __enter__(self) -> SignalForwarder:
        for signum in self._signals:
            self._previous[signum] = signal.signal(signum, self._forward)
        return self

    def __exit__(self, *args: object) -> None:
        for signum, handler in self._previous.items():
            signal.signal(signum, handler)
        self._previous.clear()

    def _forward(self, signum: int, frame: FrameType | None) -> None:
        sig_name = signal.Signals(signum).name
        lg.debug(
            "forwarding signal to child",
            extra={"signal": sig_name, "pid": self._proc.pid},
        )
        if self._proc.poll() is None:
            self._proc.send_signal(signum)


def run_command(argv: Sequence[str], env: Mapping[str, str]) -> int:
    """
    Spawn ``argv`` with environment ``env`` and wait for it.

    The executable is looked up on the PATH of ``env``.

    Args:
        argv: Command and arguments
        env: Complete environment for the child

    Returns:
        The child's exit status

    Raises:
        UsageError: If argv is empty
        SpawnError: If the command cannot be launched
    """
    if not argv:
        raise UsageError("no command given")

    command = argv[0]
    lg.info("executing command", extra={"cmd": command, "argc": len(argv)})
    try:
        proc = subprocess.Popen(list(argv), env=dict(env))
    except OSError as e:
        raise SpawnError(command, e) from e

    with SignalForwarder(proc):
        returncode = proc.wait()

    status = exit_status(returncode)
    lg.debug("command exited", extra={"cmd": command, "status": status})
    return status
