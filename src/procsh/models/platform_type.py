"""Platform and shell classification enums."""

from enum import Enum


class PlatformType(str, Enum):
    """Execution environment, with WSL2 split out from plain Linux."""

    WINDOWS = "win32"
    MACOS = "darwin"
    LINUX = "linux"
    WSL2 = "wsl2"
    OTHER = "other"

    @property
    def is_unix_like(self) -> bool:
        return self in (PlatformType.MACOS, PlatformType.LINUX, PlatformType.WSL2)


class VirtualizationState(str, Enum):
    UNKNOWN = "unknown"
    WSL2 = "confirmed-vm2"
    NOT_WSL2 = "not-vm2"


class ShellKind(str, Enum):
    """Invocation syntax family of a shell executable."""

    POSIX = "posix"
    POWERSHELL = "powershell"
    CMD = "cmd"
