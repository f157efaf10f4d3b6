"""Resolved command invocation model."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ShellInvocationPlan:
    """How to execute a command: directly, or routed through a user shell."""

    executable: str
    arguments: list[str] = field(default_factory=list)
    route_through_shell: bool = False

    @property
    def argv(self) -> list[str]:
        return [self.executable, *self.arguments]
