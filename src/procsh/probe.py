"""Bounded subprocess probes for external platform utilities."""

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass

log = logging.getLogger(__name__)

# Suppress console windows for probes spawned on Windows; 0 elsewhere.
_NO_WINDOW = getattr(subprocess, "CREATE_NO_WINDOW", 0)


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of a probe: exit status and output, or the reason it never ran."""

    returncode: int | None
    stdout: str = ""
    failure: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.failure is None and self.returncode == 0


def run_probe(argv: Sequence[str], timeout: float) -> ProbeResult:
    """Run a short-lived external utility and capture its output.

    Timeouts and launch errors (missing executable, permissions) are returned
    as a failed ProbeResult instead of raised, so callers can fall back to
    their own conservative default.
    """
    try:
        result = subprocess.run(
            list(argv),
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout,
            creationflags=_NO_WINDOW,
        )
    except (subprocess.TimeoutExpired, OSError) as e:
        log.debug("%s probe failed: %s", argv[0], e)
        return ProbeResult(returncode=None, failure=str(e))
    log.debug("%s probe exited with status %d", argv[0], result.returncode)
    return ProbeResult(returncode=result.returncode, stdout=result.stdout or "")
