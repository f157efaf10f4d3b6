"""PID file helpers for the status and stop commands."""

import logging
from pathlib import Path

from procsh.process.liveness import is_process_running

log = logging.getLogger(__name__)


def read_pid_file(path: Path) -> int | None:
    """Return the positive decimal pid stored in *path*, if any."""
    try:
        text = path.read_text(encoding="utf-8").strip()
    except OSError as e:
        log.debug("cannot read pid file %s: %s", path, e)
        return None
    try:
        pid = int(text)
    except ValueError:
        log.debug("pid file %s does not hold a pid: %r", path, text)
        return None
    return pid if pid > 0 else None


def remove_pid_file(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        log.warning("failed to remove pid file %s: %s", path, e)


def running_pid(path: Path) -> int | None:
    """Return the pid in *path* when that process is alive.

    A PID file naming a dead (or unparseable) process is stale and is removed.
    """
    pid = read_pid_file(path)
    if pid is not None and is_process_running(pid):
        return pid
    if path.exists():
        log.debug("removing stale pid file %s", path)
        remove_pid_file(path)
    return None
