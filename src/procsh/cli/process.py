"""`procsh status` and `procsh stop` commands."""

import argparse
import asyncio
import sys
from pathlib import Path

from procsh.cli.shared import add_debug_flag, configure_logging, format_status, format_warning
from procsh.config import load_config
from procsh.models import ProcshConfig
from procsh.pidfile import remove_pid_file, running_pid
from procsh.process import is_process_running, stop_process


def build_parser(prog: str, description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    add_debug_flag(parser)
    target = parser.add_mutually_exclusive_group()
    target.add_argument("--pid", type=int, help="Process id to act on")
    target.add_argument("--pid-file", type=Path, help="File holding the process id")
    return parser


def _resolve_target(
    args: argparse.Namespace, config: ProcshConfig
) -> tuple[int | None, Path | None]:
    """Return (live pid or None, pid file or None) for the parsed arguments."""
    if args.pid is not None:
        return (args.pid if is_process_running(args.pid) else None), None
    pid_file = args.pid_file
    if pid_file is None and config.pid_file:
        pid_file = Path(config.pid_file).expanduser()
    if pid_file is None:
        raise ValueError("one of --pid or --pid-file is required")
    return running_pid(pid_file), pid_file


def _load(args: argparse.Namespace) -> tuple[int | None, Path | None, ProcshConfig]:
    config = load_config()
    pid, pid_file = _resolve_target(args, config)
    return pid, pid_file, config


def run_status(argv: list[str]) -> int:
    """Report whether the target process is running."""
    parser = build_parser("procsh status", "Check whether a process is running")
    args = parser.parse_args(argv)
    configure_logging(args.debug)

    try:
        pid, _, _ = _load(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if pid is None:
        print(format_status(False, "process is not running"))
        return 1
    print(format_status(True, "process is running"))
    print(f"  PID: {pid}")
    return 0


def run_stop(argv: list[str]) -> int:
    """Stop the target process, escalating to a forced kill if needed."""
    parser = build_parser("procsh stop", "Stop a process gracefully, then forcefully")
    args = parser.parse_args(argv)
    configure_logging(args.debug)

    try:
        pid, pid_file, config = _load(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if pid is None:
        print("Process is not running")
        return 0

    print(f"Stopping process (PID: {pid})...")
    result = asyncio.run(
        stop_process(
            pid,
            graceful_timeout_ms=config.graceful_stop_timeout_ms,
            kill_timeout_ms=config.kill_stop_timeout_ms,
            poll_interval_ms=config.poll_interval_ms,
        )
    )
    if result.forced:
        print(format_warning("Process did not stop gracefully, forced termination"))
    if not result.exited:
        print(format_status(False, f"process {pid} is still running"), file=sys.stderr)
        return 1

    if pid_file is not None:
        remove_pid_file(pid_file)
    print(format_status(True, "process stopped"))
    return 0
