"""CLI context and exit codes for yake."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

from yake.config import YakeConfig

__all__ = [
    "ExitCode",
    "CLIContext",
]


class ExitCode(IntEnum):
    """Standard exit codes for the yake CLI.

    Follows Unix conventions:
    - 0 for success
    - 1 for failure (bad Yakefile, unknown target, failed execution)
    - 2 for command-line usage errors (raised by Click)
    - 130 for keyboard interrupt (128 + SIGINT=2)
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE = 2
    INTERRUPTED = 130


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Type-safe CLI context containing global options and settings.

    Attributes:
        config: Loaded yake settings.
        yakefile: Path of the root Yakefile.
        verbosity: Verbosity level (0=default, 1=INFO, 2+=DEBUG).
        quiet: Suppress non-essential output.
    """

    config: YakeConfig
    yakefile: Path
    verbosity: int = 0
    quiet: bool = False

    @property
    def project_dir(self) -> Path:
        """Directory searched for subordinate Yakefiles."""
        return self.yakefile.parent

    @property
    def include_recursively_override(self) -> bool | None:
        return self.config.include_recursively
