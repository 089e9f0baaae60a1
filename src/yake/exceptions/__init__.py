"""Yake exception hierarchy.

All exceptions can be imported from this package:
    from yake.exceptions import UnknownTargetError, YakeError
"""

from __future__ import annotations

# Base exception
from yake.exceptions.base import YakeError

# Configuration and Yakefile exceptions
from yake.exceptions.config import ConfigError, ConfigParseError

# Runner-related exceptions
from yake.exceptions.runner import CommandExecutionError, RunnerError

# Target resolution exceptions
from yake.exceptions.target import (
    ReservedEnvironmentVariableError,
    TargetError,
    UnknownTargetError,
)

__all__ = [
    # Base
    "YakeError",
    # Config
    "ConfigError",
    "ConfigParseError",
    # Runners
    "CommandExecutionError",
    "RunnerError",
    # Targets
    "ReservedEnvironmentVariableError",
    "TargetError",
    "UnknownTargetError",
]
