"""Process state models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessInfo:
    pid: int
    exists: bool


@dataclass(frozen=True)
class StopResult:
    """Outcome of the graceful-then-forced stop protocol."""

    pid: int
    signalled: bool
    forced: bool
    exited: bool
