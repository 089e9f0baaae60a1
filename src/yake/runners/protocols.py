"""Protocol definitions for command runners.

The executor only decides what to run, with which environment and in which
order; anything satisfying :class:`CommandRunner` can carry the commands
out (the real :class:`~yake.runners.shell.ShellRunner`, or a fake in tests).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from yake.runners.models import CommandResult

__all__ = ["CommandRunner"]


@runtime_checkable
class CommandRunner(Protocol):
    """Protocol for runners that execute one shell command line.

    Example:
        A fake runner for tests::

            class RecordingRunner:
                def __init__(self) -> None:
                    self.calls: list[tuple[str, dict[str, str]]] = []

                def run(self, command, env=None) -> CommandResult:
                    self.calls.append((command, dict(env or {})))
                    return CommandResult(command, 0, "", "", 0)
    """

    def run(
        self, command: str, env: Mapping[str, str] | None = None
    ) -> CommandResult:
        """Run a command line to completion.

        Raises:
            CommandExecutionError: If the command could not be spawned or its
                output could not be decoded. A non-zero exit status is
                reported through the result, not raised.
        """
        ...
