"""Decide how to invoke a command vector: directly or through a user shell.

Executables found on PATH run directly, which avoids quoting and alias
ambiguity. Anything else (aliases, functions, builtins) is handed to the
user's shell so it resolves the same way it would at their prompt.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from procsh.constants import INTERACTIVE_FLAGS, KNOWN_SHELLS, PATH_LOOKUP_TIMEOUT_SECONDS
from procsh.models import PlatformType, ShellInvocationPlan, ShellKind
from procsh.platform import detect_platform
from procsh.probe import run_probe
from procsh.shell.discovery import classify_shell, get_user_shell

log = logging.getLogger(__name__)


class InvalidCommandError(ValueError):
    """Raised when there is no command to resolve."""


@dataclass(frozen=True)
class InvocationTemplate:
    """Shell flags that precede the joined command string."""

    command_flags: tuple[str, ...]
    interactive_flags: tuple[str, ...]

    def flags(self, interactive: bool) -> tuple[str, ...]:
        return self.interactive_flags if interactive else self.command_flags


_POSIX_TEMPLATE = InvocationTemplate(command_flags=("-c",), interactive_flags=("-i", "-c"))
# PowerShell and cmd.exe have no alias model that -i would unlock.
_POWERSHELL_TEMPLATE = InvocationTemplate(
    command_flags=("-NoLogo", "-Command"), interactive_flags=("-NoLogo", "-Command")
)
_CMD_TEMPLATE = InvocationTemplate(command_flags=("/C",), interactive_flags=("/C",))

INVOCATION_TEMPLATES: dict[tuple[PlatformType, ShellKind], InvocationTemplate] = {
    (PlatformType.WINDOWS, ShellKind.POSIX): _POSIX_TEMPLATE,
    (PlatformType.WINDOWS, ShellKind.POWERSHELL): _POWERSHELL_TEMPLATE,
    (PlatformType.WINDOWS, ShellKind.CMD): _CMD_TEMPLATE,
    **{
        (platform_type, kind): _POSIX_TEMPLATE
        for platform_type in PlatformType
        if platform_type.is_unix_like
        for kind in ShellKind
    },
}


def is_interactive_shell_command(name: str, args: Sequence[str]) -> bool:
    """Return whether the command starts an interactive shell session."""
    is_shell = any(name == shell or name.endswith(f"/{shell}") for shell in KNOWN_SHELLS)
    if not is_shell:
        return False
    if not args:
        return True
    return any(arg in INTERACTIVE_FLAGS for arg in args)


def _on_search_path(name: str, platform_type: PlatformType) -> bool:
    lookup = "where" if platform_type is PlatformType.WINDOWS else "which"
    result = run_probe([lookup, name], timeout=PATH_LOOKUP_TIMEOUT_SECONDS)
    found = result.stdout.strip() if result.succeeded else ""
    if found:
        log.debug("command %r found at: %s", name, found)
    return bool(found)


def resolve_command(command: Sequence[str]) -> ShellInvocationPlan:
    """Return how to spawn *command*.

    Raises InvalidCommandError if *command* is empty.
    """
    if not command:
        raise InvalidCommandError("No command provided")

    name, args = command[0], list(command[1:])
    direct = ShellInvocationPlan(executable=name, arguments=args, route_through_shell=False)

    platform_type = detect_platform()
    if _on_search_path(name, platform_type):
        return direct

    log.debug("command %r not found in PATH, will use shell", name)
    shell = get_user_shell()
    template = INVOCATION_TEMPLATES.get((platform_type, classify_shell(shell)))
    if template is None:
        log.debug("no shell invocation known for platform %s", platform_type.value)
        return direct

    interactive = is_interactive_shell_command(name, args)
    return ShellInvocationPlan(
        executable=shell,
        arguments=[*template.flags(interactive), " ".join(command)],
        route_through_shell=True,
    )
