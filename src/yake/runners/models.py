"""Data models for the shell runner.

All models use frozen dataclasses with slots for memory efficiency and
immutability.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["CommandResult"]


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of executing a single command line.

    Attributes:
        command: The command line passed to the shell.
        returncode: Exit code from the command (0 = success).
        stdout: Standard output captured from the command.
        stderr: Standard error captured from the command.
        duration_ms: Execution time in milliseconds.
    """

    command: str
    returncode: int
    stdout: str
    stderr: str
    duration_ms: int

    @property
    def success(self) -> bool:
        """True if command completed successfully (returncode 0)."""
        return self.returncode == 0

    @property
    def stdout_lines(self) -> list[str]:
        return _split_lines(self.stdout)

    @property
    def stderr_lines(self) -> list[str]:
        return _split_lines(self.stderr)


def _split_lines(text: str) -> list[str]:
    """Split on ``\\n`` and ``\\r\\n`` only.

    A bare ``\\r`` (progress output) stays inside its line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]
