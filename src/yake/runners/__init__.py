"""Subprocess execution for yake targets."""

from __future__ import annotations

from yake.runners.models import CommandResult
from yake.runners.protocols import CommandRunner
from yake.runners.shell import ShellRunner

__all__ = [
    "CommandResult",
    "CommandRunner",
    "ShellRunner",
]
