"""Target tree resolution: flattening, dependencies, environment, execution."""

from __future__ import annotations

from yake.targets.composer import compose, merge
from yake.targets.dependencies import all_dependencies, dependencies_of
from yake.targets.environment import RESERVED_ENV_VARS, resolved_env
from yake.targets.executor import ExecutionResult, TargetExecutor
from yake.targets.tree import find_node, flatten, get_target, has_target, target_names

__all__ = [
    # Tree views
    "find_node",
    "flatten",
    "get_target",
    "has_target",
    "target_names",
    # Dependencies
    "all_dependencies",
    "dependencies_of",
    # Environment
    "RESERVED_ENV_VARS",
    "resolved_env",
    # Composition
    "compose",
    "merge",
    # Execution
    "ExecutionResult",
    "TargetExecutor",
]
