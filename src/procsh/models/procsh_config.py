"""Configuration model for procsh."""

from pydantic import BaseModel, NonNegativeInt, PositiveInt

from procsh.constants import GRACEFUL_STOP_TIMEOUT_MS, KILL_STOP_TIMEOUT_MS, POLL_INTERVAL_MS


class ProcshConfig(BaseModel):
    """Runtime configuration for procsh."""

    poll_interval_ms: PositiveInt = POLL_INTERVAL_MS
    graceful_stop_timeout_ms: NonNegativeInt = GRACEFUL_STOP_TIMEOUT_MS
    kill_stop_timeout_ms: NonNegativeInt = KILL_STOP_TIMEOUT_MS
    pid_file: str | None = None
