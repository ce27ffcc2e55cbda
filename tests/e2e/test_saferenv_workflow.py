"""
E2E tests running saferenv as a separate process.

Covers the full path from argv through rule building, materialization and
printing or command execution, including exit codes and stream separation.
"""

import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]

SECRET = "wJalrXUtnFEMI/K7MDENG/bPxRfiCYEXAMPLEKEY"


def _saferenv(*args: str, env: dict[str, str]) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "saferenv", *args],
        env=env,
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
        timeout=30,
    )


@pytest.fixture
def base_env() -> dict[str, str]:
    return {
        "HOME": "/home/user",
        "AWS_SECRET_ACCESS_KEY": SECRET,
        "LANG": "C.UTF-8",
        "PYTHONPATH": str(PROJECT_ROOT),
    }


@pytest.mark.e2e
class TestSaferenvWorkflow:
    def test_print_mode(self, base_env):
        result = _saferenv(env=base_env)
        assert result.returncode == 0
        lines = result.stdout.splitlines()
        assert "HOME=/home/user" in lines
        assert "AWS_SECRET_ACCESS_KEY=[REDACTED]" in lines
        assert SECRET not in result.stdout
        assert SECRET not in result.stderr

    def test_keep_shows_value(self, base_env):
        result = _saferenv("--keep", "AWS_SECRET_ACCESS_KEY", env=base_env)
        assert f"AWS_SECRET_ACCESS_KEY={SECRET}" in result.stdout.splitlines()

    def test_show_rules(self, base_env):
        result = _saferenv(
            "--show-rules", "--keep", "KEEPTHIS", "--unset", "REMOVETHAT", env=base_env
        )
        assert result.returncode == 0
        assert result.stdout.startswith(
            "Rule 1: cli_explicit_keep\n"
            '    pattern: "^KEEPTHIS$"\n'
            "    action: Keep\n"
            "Rule 2: cli_explicit_unset\n"
            '    pattern: "^REMOVETHAT$"\n'
            "    action: Unset\n"
            "Rule 3: default\n"
        )

    def test_verbose_logs_names_not_values(self, base_env):
        result = _saferenv("-vvv", env=base_env)
        assert result.returncode == 0
        assert "AWS_SECRET_ACCESS_KEY" in result.stderr
        assert SECRET not in result.stderr
        assert "rule matched" in result.stderr

    def test_run_command_filters_environment(self, base_env):
        script = (
            "import os; "
            "print(os.environ.get('HOME')); "
            "print(os.environ.get('AWS_SECRET_ACCESS_KEY', 'absent'))"
        )
        result = _saferenv(sys.executable, "-c", script, env=base_env)
        assert result.returncode == 0
        assert result.stdout.splitlines() == ["/home/user", "absent"]

    def test_child_exit_code(self, base_env):
        result = _saferenv(sys.executable, "-c", "raise SystemExit(42)", env=base_env)
        assert result.returncode == 42

    def test_spawn_failure(self, base_env):
        result = _saferenv("saferenv-no-such-command-xyz", env=base_env)
        assert result.returncode == 127
        assert "saferenv-no-such-command-xyz" in result.stderr

    def test_invalid_config_pattern(self, base_env, rules_file):
        path = rules_file("rules:\n  - pattern: '[oops'\n    action: redact\n")
        result = _saferenv("--config", str(path), env=base_env)
        assert result.returncode == 78
        assert result.stdout == ""
        assert "[oops" in result.stderr

    def test_isolation_mode(self, base_env):
        result = _saferenv("-i", env=base_env)
        assert result.returncode == 0
        assert result.stdout == ""

    def test_non_utf8_value_printed_with_strict_stdout(self, base_env):
        env = {**base_env, "PYTHONIOENCODING": "utf-8:strict", "LATIN": "caf\udce9"}
        result = subprocess.run(
            [sys.executable, "-m", "saferenv"],
            env=env,
            cwd=PROJECT_ROOT,
            capture_output=True,
            timeout=30,
        )
        assert result.returncode == 0
        assert b"LATIN=caf\xe9" in result.stdout.splitlines()
        assert b"Traceback" not in result.stderr
