"""Signal delivery, exit polling, and the graceful-then-forced stop protocol."""

import asyncio
import logging
import os
import signal
import time

from procsh.constants import (
    GRACEFUL_STOP_TIMEOUT_MS,
    KILL_STOP_TIMEOUT_MS,
    POLL_INTERVAL_MS,
    TASKKILL_TIMEOUT_SECONDS,
    WAIT_FOR_EXIT_TIMEOUT_MS,
)
from procsh.models import PlatformType, StopResult
from procsh.platform import detect_platform
from procsh.probe import run_probe
from procsh.process.liveness import is_process_running

log = logging.getLogger(__name__)

# Windows has no SIGKILL; taskkill /F is forceful regardless of the signal.
FORCE_KILL_SIGNAL = getattr(signal, "SIGKILL", signal.SIGTERM)


def terminate_process(pid: int, sig: int = signal.SIGTERM) -> bool:
    """Send *sig* to *pid*.

    Returns whether the signal was delivered, not whether the process exited.
    On Windows the process is always force-terminated with taskkill.
    """
    if not pid or pid <= 0:
        return False

    log.debug("attempting to kill process %d with signal %s", pid, sig)
    if detect_platform() is PlatformType.WINDOWS:
        result = run_probe(["taskkill", "/PID", str(pid), "/F"], timeout=TASKKILL_TIMEOUT_SECONDS)
        if result.succeeded:
            log.info("process %d killed", pid)
            return True
        log.debug("taskkill failed for %d (status %s)", pid, result.returncode)
        return False

    try:
        os.kill(pid, sig)
    except (OSError, OverflowError) as e:
        log.warning("error killing process %d: %s", pid, e)
        return False
    log.info("signal %s sent to process %d", sig, pid)
    return True


async def wait_for_exit(
    pid: int,
    timeout_ms: int = WAIT_FOR_EXIT_TIMEOUT_MS,
    poll_interval_ms: int = POLL_INTERVAL_MS,
) -> bool:
    """Poll until *pid* is gone. Returns False if it outlives *timeout_ms*."""
    log.debug("waiting for process %d to exit (timeout: %dms)", pid, timeout_ms)
    start = time.monotonic()
    while True:
        elapsed_ms = (time.monotonic() - start) * 1000
        if not is_process_running(pid):
            log.info("process %d exited after %dms", pid, elapsed_ms)
            return True
        if elapsed_ms >= timeout_ms:
            log.info("process %d did not exit within %dms timeout", pid, timeout_ms)
            return False
        await asyncio.sleep(poll_interval_ms / 1000)


async def stop_process(
    pid: int,
    graceful_timeout_ms: int = GRACEFUL_STOP_TIMEOUT_MS,
    kill_timeout_ms: int = KILL_STOP_TIMEOUT_MS,
    poll_interval_ms: int = POLL_INTERVAL_MS,
) -> StopResult:
    """Ask *pid* to terminate, escalating to a forced kill if it lingers.

    Each wait is bounded, so this never blocks indefinitely. The result
    reports what was observed at the end even when escalation fails.
    """
    if not is_process_running(pid):
        return StopResult(pid=pid, signalled=False, forced=False, exited=True)

    signalled = terminate_process(pid, signal.SIGTERM)
    if signalled and await wait_for_exit(pid, graceful_timeout_ms, poll_interval_ms):
        return StopResult(pid=pid, signalled=True, forced=False, exited=True)

    log.warning("process %d did not stop gracefully, forcing termination", pid)
    terminate_process(pid, FORCE_KILL_SIGNAL)
    exited = await wait_for_exit(pid, kill_timeout_ms, poll_interval_ms)
    return StopResult(pid=pid, signalled=signalled, forced=True, exited=exited)
