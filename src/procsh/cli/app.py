"""Top-level CLI router."""

import sys

from procsh import __version__

from . import command as command_cmd
from . import info as info_cmd
from . import process as process_cmd

COMMANDS = {
    "platform": info_cmd.run_platform,
    "shell": info_cmd.run_shell,
    "resolve": command_cmd.run_resolve,
    "run": command_cmd.run_command,
    "status": process_cmd.run_status,
    "stop": process_cmd.run_stop,
}

USAGE = f"usage: procsh {{{','.join(COMMANDS)}}} [options]"


def main(argv: list[str] | None = None) -> int:
    """Route to the named subcommand."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] in {"-V", "--version"}:
        print(f"procsh {__version__}")
        return 0
    if args and args[0] in {"-h", "--help"}:
        print(USAGE)
        return 0
    if not args or args[0] not in COMMANDS:
        print(USAGE, file=sys.stderr)
        return 2
    return COMMANDS[args[0]](args[1:])


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
