"""
Argument parsing for the saferenv command line.
"""

import argparse
from typing import NoReturn

import saferenv
from saferenv.constants import DEFAULT_REDACT_VALUE
from saferenv.exceptions import UsageError

DESCRIPTION = "env but a little safer: print or run with sensitive variables redacted"

EPILOG = """\
Rules are checked in order and the first match decides:
  1. --keep NAME    2. --unset NAME    3. rules file    4. built-in patterns
Variables matching no rule are kept. Redacted variables are shown with the
redaction marker and are not passed to COMMAND.
"""


def version_string() -> str:
    return f"saferenv {saferenv.__version__}"


class DefaultsHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Help formatter that appends non-trivial default values to help text."""

    def _get_help_string(self, action: argparse.Action) -> str:
        help_text = action.help or ""
        default = action.default
        if default is argparse.SUPPRESS or default is None:
            return help_text
        if isinstance(default, bool) or default == 0:
            return help_text
        return help_text + f" (default: {default})"


class SaferenvArgumentParser(argparse.ArgumentParser):
    """ArgumentParser raising UsageError instead of exiting on bad input."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _add_env_args(parser: argparse.ArgumentParser) -> None:
    group = parser.add_argument_group("env options")
    group.add_argument(
        "-i",
        "--ignore-environment",
        action="store_true",
        help="start with an empty environment (variables named by --keep survive)",
    )
    group.add_argument(
        "-u",
        "--unset",
        action="append",
        metavar="NAME",
        help="remove variable from the environment (--keep has higher priority)",
    )


def _add_saferenv_args(parser: argparse.ArgumentParser) -> None:
    group = parser.add_argument_group("saferenv options")
    group.add_argument(
        "-k",
        "--keep",
        action="append",
        metavar="NAME",
        help="prevent variable from being redacted or unset",
    )
    group.add_argument(
        "-r",
        "--redact-value",
        metavar="VALUE",
        help=(
            "print redacted variables with this value "
            f"(default: {DEFAULT_REDACT_VALUE})"
        ),
    )
    group.add_argument(
        "-c",
        "--config",
        metavar="FILE",
        help="YAML rules file (default: $SAFERENV_CONFIG)",
    )
    group.add_argument(
        "--no-default-rules",
        dest="default_rules",
        action="store_false",
        help="do not apply the built-in sensitive-name patterns",
    )
    group.add_argument(
        "--show-rules",
        action="store_true",
        help="print the ordered rule set and exit",
    )


def build_parser() -> SaferenvArgumentParser:
    """Create the saferenv argument parser."""
    parser = SaferenvArgumentParser(
        prog="saferenv",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=DefaultsHelpFormatter,
    )
    _add_env_args(parser)
    _add_saferenv_args(parser)
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="print more detailed logs (repeat up to 3 times: -v, -vv, -vvv)",
    )
    parser.add_argument("--version", action="version", version=version_string())
    parser.add_argument(
        "args",
        nargs=argparse.REMAINDER,
        metavar="ARG",
        help=(
            "NAME=VALUE assignments, then COMMAND and its arguments; "
            "without COMMAND, print the environment"
        ),
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Raises:
        UsageError: On invalid arguments
    """
    args = build_parser().parse_args(argv)
    if args.args and args.args[0] == "--":
        args.args = args.args[1:]
    args.keep = args.keep or []
    args.unset = args.unset or []
    return args
