"""Discover the user's preferred shell on the current platform."""

import logging
import ntpath
import os
from pathlib import PureWindowsPath

from procsh.constants import (
    DEFAULT_PROGRAM_FILES,
    DEFAULT_SHELL_PREFERENCE,
    DEFAULT_WINDOWS_ROOT,
    DEFAULT_WINDOWS_SHELL,
    FALLBACK_POSIX_SHELL,
    GIT_BASH_PATHS,
    KNOWN_SHELLS,
    SHELL_PROBE_TIMEOUT_SECONDS,
    WSL2_SHELL_PREFERENCE,
)
from procsh.models import PlatformType, ShellKind
from procsh.platform import detect_platform
from procsh.probe import run_probe

log = logging.getLogger(__name__)


def classify_shell(shell: str) -> ShellKind:
    """Return the invocation syntax family for a shell executable or path."""
    # PureWindowsPath splits on both "/" and "\", so this works for any input.
    name = PureWindowsPath(shell).name.lower()
    if name.endswith(".exe"):
        name = name[: -len(".exe")]
    if "pwsh" in name or "powershell" in name:
        return ShellKind.POWERSHELL
    if "bash" in name or name in KNOWN_SHELLS:
        return ShellKind.POSIX
    return ShellKind.CMD


def _shell_responds(argv: list[str]) -> bool:
    return run_probe(argv, timeout=SHELL_PROBE_TIMEOUT_SECONDS).succeeded


def _legacy_powershell_path() -> str:
    root = os.environ.get("SystemRoot") or DEFAULT_WINDOWS_ROOT
    return ntpath.join(root, "System32", "WindowsPowerShell", "v1.0", "powershell.exe")


def _git_bash_candidates() -> list[str]:
    program_files = os.environ.get("ProgramFiles") or DEFAULT_PROGRAM_FILES
    candidates = [*GIT_BASH_PATHS, ntpath.join(program_files, "Git", "bin", "bash.exe")]
    deduped: list[str] = []
    seen: set[str] = set()
    for item in candidates:
        key = item.lower()
        if key in seen:
            continue
        seen.add(key)
        deduped.append(item)
    return deduped


def _windows_shell() -> str:
    if _shell_responds(["pwsh", "-Command", "echo test"]):
        return "pwsh"

    legacy = _legacy_powershell_path()
    if _shell_responds([legacy, "-Command", "echo test"]):
        return legacy

    for git_bash in _git_bash_candidates():
        if _shell_responds([git_bash, "-c", "echo test"]):
            return git_bash

    return os.environ.get("ComSpec") or DEFAULT_WINDOWS_SHELL


def _login_shell() -> str | None:
    """Return the current user's login shell from the password database."""
    if os.name != "posix":
        return None
    import pwd

    try:
        return pwd.getpwuid(os.getuid()).pw_shell or None
    except (KeyError, OSError) as e:
        log.debug("password database lookup failed: %s", e)
        return None


def _is_executable(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)


def _unix_shell(platform_type: PlatformType) -> str:
    login_shell = _login_shell()
    if login_shell:
        return login_shell

    if platform_type is PlatformType.WSL2:
        preference = WSL2_SHELL_PREFERENCE
    else:
        preference = DEFAULT_SHELL_PREFERENCE
    for candidate in preference:
        if _is_executable(candidate):
            return candidate
    return FALLBACK_POSIX_SHELL


def get_user_shell() -> str:
    """Return the user's preferred shell, falling back to platform defaults."""
    env_shell = os.environ.get("SHELL", "").strip()
    if env_shell:
        return env_shell

    platform_type = detect_platform()
    if platform_type is PlatformType.WINDOWS:
        shell = _windows_shell()
    elif platform_type.is_unix_like:
        shell = _unix_shell(platform_type)
    else:
        shell = FALLBACK_POSIX_SHELL
    log.debug("resolved user shell: %s", shell)
    return shell
