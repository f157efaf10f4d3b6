"""Process liveness checks and termination."""

from procsh.process.liveness import get_process_info, is_process_running
from procsh.process.terminate import stop_process, terminate_process, wait_for_exit

__all__ = [
    "get_process_info",
    "is_process_running",
    "stop_process",
    "terminate_process",
    "wait_for_exit",
]
