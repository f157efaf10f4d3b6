"""`procsh resolve` and `procsh run` commands."""

import argparse
import dataclasses
import json
import logging
import shlex
import subprocess
import sys

from procsh.cli.shared import add_debug_flag, configure_logging, format_command
from procsh.shell import InvalidCommandError, resolve_command

log = logging.getLogger(__name__)

# Conventional shell status for "command not found".
EXIT_NOT_FOUND = 127


def _build_parser(prog: str, description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    add_debug_flag(parser)
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        metavar="command",
        help="Command and arguments (use -- before commands that start with a dash)",
    )
    return parser


def _command_words(words: list[str]) -> list[str]:
    if words and words[0] == "--":
        return words[1:]
    return words


def run_resolve(argv: list[str]) -> int:
    """Print how a command would be invoked."""
    parser = _build_parser("procsh resolve", "Show whether a command runs directly or via a shell")
    parser.add_argument("--json", action="store_true", help="Print the plan as JSON")
    # --json must come before the command so REMAINDER does not swallow it.
    args = parser.parse_args(argv)
    configure_logging(args.debug)

    try:
        plan = resolve_command(_command_words(args.command))
    except InvalidCommandError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(dataclasses.asdict(plan)))
        return 0
    print(f"\n  {format_command(shlex.join(plan.argv))}")
    print(f"  routed through shell: {'yes' if plan.route_through_shell else 'no'}\n")
    return 0


def run_command(argv: list[str]) -> int:
    """Resolve a command and run it with inherited stdio."""
    parser = _build_parser("procsh run", "Run a command directly or through the user's shell")
    args = parser.parse_args(argv)
    configure_logging(args.debug)

    try:
        plan = resolve_command(_command_words(args.command))
    except InvalidCommandError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    log.debug("running %s", plan.argv)
    try:
        result = subprocess.run(plan.argv, check=False)
    except OSError as e:
        print(f"Error: unable to start {plan.executable}: {e}", file=sys.stderr)
        return EXIT_NOT_FOUND
    return result.returncode
