"""`procsh platform` and `procsh shell` commands."""

import argparse

from procsh.cli.shared import add_debug_flag, configure_logging
from procsh.platform import detect_platform
from procsh.shell import get_user_shell


def run_platform(argv: list[str]) -> int:
    """Print the detected platform type."""
    parser = argparse.ArgumentParser(
        prog="procsh platform",
        description="Print the detected platform (win32, darwin, linux, wsl2, other)",
    )
    add_debug_flag(parser)
    args = parser.parse_args(argv)
    configure_logging(args.debug)

    print(detect_platform().value)
    return 0


def run_shell(argv: list[str]) -> int:
    """Print the user's preferred shell."""
    parser = argparse.ArgumentParser(
        prog="procsh shell",
        description="Print the shell that aliased or builtin commands are routed through",
    )
    add_debug_flag(parser)
    args = parser.parse_args(argv)
    configure_logging(args.debug)

    print(get_user_shell())
    return 0
