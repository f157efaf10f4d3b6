"""Cross-platform process liveness checks."""

import csv
import logging
import os

from procsh.constants import TASKLIST_TIMEOUT_SECONDS
from procsh.models import PlatformType, ProcessInfo
from procsh.platform import detect_platform
from procsh.probe import run_probe

log = logging.getLogger(__name__)


def _is_running_windows(pid: int) -> bool:
    log.debug("checking windows process %d with tasklist", pid)
    result = run_probe(
        ["tasklist", "/FI", f"PID eq {pid}", "/NH", "/FO", "CSV"],
        timeout=TASKLIST_TIMEOUT_SECONDS,
    )
    if not result.succeeded or not result.stdout.strip():
        log.debug("tasklist gave no answer for %d (status %s)", pid, result.returncode)
        return False
    # Rows look like "image.exe","1234","Console","1","10,000 K". Compare the
    # pid column exactly so 12 does not match 212.
    target = str(pid)
    for row in csv.reader(result.stdout.splitlines()):
        if len(row) > 1 and row[1].strip() == target:
            return True
    return False


def _is_running_posix(pid: int) -> bool:
    try:
        os.kill(pid, 0)
    except ProcessLookupError:
        return False
    except PermissionError:
        # Exists, but owned by someone we cannot signal.
        return True
    except (OSError, OverflowError) as e:
        # OverflowError: pid beyond the platform pid_t range.
        log.warning("unexpected error checking process %d: %s", pid, e)
        return False
    return True


def is_process_running(pid: int) -> bool:
    """Return whether *pid* refers to a live process. Never raises."""
    if not pid or pid <= 0:
        return False
    if detect_platform() is PlatformType.WINDOWS:
        return _is_running_windows(pid)
    return _is_running_posix(pid)


def get_process_info(pid: int) -> ProcessInfo | None:
    if not is_process_running(pid):
        return None
    return ProcessInfo(pid=pid, exists=True)
