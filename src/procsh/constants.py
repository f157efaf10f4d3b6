"""Shared constants for procsh."""

BOLD = "\033[1m"
CYAN = "\033[36m"
GREEN = "\033[32m"
RED = "\033[31m"
YELLOW = "\033[33m"
RESET = "\033[0m"

# Kernel identity source read once for WSL detection.
PROC_VERSION_PATH = "/proc/version"

# Set inside both WSL generations; they cannot tell WSL1 from WSL2 on their own.
WSL_ENV_VARS = ("WSL_DISTRO_NAME", "WSL_INTEROP", "WSLENV")

# Probe timeouts in seconds. Keep these well below the stop wait budgets.
TASKLIST_TIMEOUT_SECONDS = 5.0
TASKKILL_TIMEOUT_SECONDS = 5.0
PATH_LOOKUP_TIMEOUT_SECONDS = 2.0
SHELL_PROBE_TIMEOUT_SECONDS = 1.0

# Stop protocol defaults in milliseconds.
POLL_INTERVAL_MS = 100
WAIT_FOR_EXIT_TIMEOUT_MS = 5000
GRACEFUL_STOP_TIMEOUT_MS = 3000
KILL_STOP_TIMEOUT_MS = 1000

KNOWN_SHELLS = ("bash", "zsh", "sh", "fish", "dash", "ksh", "tcsh", "csh")
INTERACTIVE_FLAGS = frozenset({"-i", "--interactive", "-l", "--login"})

# WSL2 distros ship bash as the login shell; macOS and most desktops prefer zsh.
WSL2_SHELL_PREFERENCE = ("/bin/bash", "/bin/zsh", "/usr/bin/bash", "/usr/bin/zsh", "/bin/sh")
DEFAULT_SHELL_PREFERENCE = ("/bin/zsh", "/bin/bash", "/usr/bin/zsh", "/usr/bin/bash", "/bin/sh")
FALLBACK_POSIX_SHELL = "/bin/sh"

DEFAULT_WINDOWS_ROOT = "C:\\Windows"
DEFAULT_PROGRAM_FILES = "C:\\Program Files"
GIT_BASH_PATHS = (
    "C:\\Program Files\\Git\\bin\\bash.exe",
    "C:\\Program Files (x86)\\Git\\bin\\bash.exe",
)
DEFAULT_WINDOWS_SHELL = "cmd.exe"
