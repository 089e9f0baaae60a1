from __future__ import annotations

from yake.exceptions.base import YakeError


class RunnerError(YakeError):
    """Base exception for runner failures.

    Attributes:
        message: Human-readable error message.
    """

    pass


class CommandExecutionError(RunnerError):
    """A shell command could not be run to completion.

    Raised when the shell cannot be spawned, when the command output is not
    valid UTF-8, or (with ``stop_on_failure``) when it exits non-zero. Aborts
    the remaining command and dependency sequence.

    Attributes:
        message: Human-readable error message.
        command: The command line that failed.
        returncode: Exit status, if the command ran at all.
    """

    def __init__(
        self,
        message: str,
        command: str | None = None,
        returncode: int | None = None,
    ) -> None:
        """Initialize the CommandExecutionError.

        Args:
            message: Human-readable error message.
            command: The command line that failed.
            returncode: Exit status of the command, if it ran.
        """
        self.command = command
        self.returncode = returncode
        super().__init__(message)
