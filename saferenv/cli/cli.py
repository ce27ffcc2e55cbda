#!/usr/bin/env python3
"""
saferenv - env but a little safer.

Usage:
    saferenv                              # print environment, secrets redacted
    saferenv -k GITHUB_TOKEN              # ...but show GITHUB_TOKEN
    saferenv -u AWS_PROFILE make deploy   # run without AWS_PROFILE or secrets
    saferenv --show-rules                 # print the rule set
"""

import argparse
import logging
import os
import sys
from collections.abc import Mapping

from saferenv.cli.output import ConsoleOutput, OutputWriter, allow_undecodable
from saferenv.cli.parser import parse_args
from saferenv.config import SaferenvConfig, load_config, resolve_config_path
from saferenv.constants import ExitCode
from saferenv.env import (
    EnvironmentSnapshot,
    isolate,
    materialize,
    run_command,
    split_assignments,
)
from saferenv.exceptions import SaferenvError
from saferenv.log import setup_logging
from saferenv.rules import RuleSet, build

lg = logging.getLogger(__name__)


def warn_non_utf8(environ: Mapping[str, str]) -> None:
    """Warn when LANG names a non UTF-8 locale."""
    lang = environ.get("LANG")
    if lang is None:
        return
    encoding = lang.partition(".")[2].partition("@")[0].lower().replace("-", "")
    if encoding != "utf8":
        lg.warning(
            "non UTF-8 environment detected, only UTF-8 is supported",
            extra={"var": "LANG"},
        )


def _load_config(
    args: argparse.Namespace, environ: Mapping[str, str]
) -> SaferenvConfig:
    path = resolve_config_path(args.config, environ)
    if path is None:
        return SaferenvConfig()
    return load_config(path)


def build_ruleset(args: argparse.Namespace, config: SaferenvConfig) -> RuleSet:
    """Build the rule set from parsed arguments and the rules file."""
    return build(
        defaults_enabled=config.defaults and args.default_rules,
        config_patterns=config.patterns(),
        cli_keep_names=args.keep,
        cli_unset_names=args.unset,
    )


def run(
    args: argparse.Namespace,
    out: OutputWriter,
    environ: Mapping[str, str],
) -> int:
    """
    Execute a parsed invocation.

    Returns:
        Exit status: 0 after printing, or the command's exit status

    Raises:
        SaferenvError: On config, pattern, usage or spawn failures
    """
    config = _load_config(args, environ)
    ruleset = build_ruleset(args, config)

    if args.show_rules:
        out.write_raw(ruleset.describe())
        return ExitCode.OK

    assignments, command = split_assignments(args.args)
    inherited = EnvironmentSnapshot.capture(environ)
    base = isolate(inherited, ruleset) if args.ignore_environment else inherited
    snapshot = base.with_assignments(assignments)

    redact_value = (
        args.redact_value if args.redact_value is not None else config.redact_value
    )
    result = materialize(snapshot, ruleset, redact_value=redact_value)

    if command:
        return run_command(command, result.child_env)

    lg.info("no command provided, printing environment")
    for line in result.lines():
        out.write(line)
    return ExitCode.OK


def main(
    argv: list[str] | None = None,
    out: OutputWriter | None = None,
    err: OutputWriter | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Main entry point for saferenv."""
    if out is None:
        allow_undecodable(sys.stdout)
        out = ConsoleOutput()
    err = err if err is not None else ConsoleOutput(sys.stderr)
    environ = environ if environ is not None else os.environ

    try:
        args = parse_args(argv)
        setup_logging(args.verbose)
        warn_non_utf8(environ)
        return run(args, out, environ)
    except SaferenvError as e:
        lg.debug("aborting", exc_info=True)
        err.write(f"saferenv: {e}")
        return e.exit_code


if __name__ == "__main__":
    sys.exit(main())
