"""Model package for procsh."""

from procsh.models.invocation_plan import ShellInvocationPlan
from procsh.models.platform_type import PlatformType, ShellKind, VirtualizationState
from procsh.models.process_info import ProcessInfo, StopResult
from procsh.models.procsh_config import ProcshConfig

__all__ = [
    "PlatformType",
    "ProcessInfo",
    "ProcshConfig",
    "ShellInvocationPlan",
    "ShellKind",
    "StopResult",
    "VirtualizationState",
]
