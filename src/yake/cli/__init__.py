"""CLI utilities for yake.

This module provides CLI-specific utilities including context management,
output formatting and project loading.
"""

from __future__ import annotations

from yake.cli.context import CLIContext, ExitCode
from yake.cli.helpers import load_project, resolve_log_level
from yake.cli.output import format_error, format_unknown_target

__all__ = [
    "CLIContext",
    "ExitCode",
    "format_error",
    "format_unknown_target",
    "load_project",
    "resolve_log_level",
]
