from __future__ import annotations

from collections.abc import Iterable

from yake.exceptions.base import YakeError


class TargetError(YakeError):
    """Base exception for target resolution errors.

    Attributes:
        message: Human-readable error message.
        target_name: Qualified name of the target involved.
    """

    def __init__(self, message: str, target_name: str) -> None:
        """Initialize the TargetError.

        Args:
            message: Human-readable error message.
            target_name: Qualified name of the target involved.
        """
        self.target_name = target_name
        super().__init__(message)


class UnknownTargetError(TargetError):
    """A requested or referenced target name does not exist.

    Raised for an unknown target on the command line and for a ``depends``
    entry that does not resolve. The list of valid callable names is carried
    along so the user can correct the name.

    Attributes:
        message: Human-readable error message.
        target_name: The name that could not be resolved.
        available: Sorted qualified names of all callable targets.
        dependent: The target whose ``depends`` referenced the missing name,
            or None when the name was requested directly.
    """

    def __init__(
        self,
        target_name: str,
        available: Iterable[str] = (),
        dependent: str | None = None,
    ) -> None:
        """Initialize the UnknownTargetError.

        Args:
            target_name: The name that could not be resolved.
            available: Qualified names of the callable targets.
            dependent: Target declaring the unresolvable dependency.
        """
        self.available = sorted(available)
        self.dependent = dependent
        if dependent is None:
            message = f"Unknown target: '{target_name}'"
        else:
            message = (
                f"Unknown dependency: '{target_name}' in target: '{dependent}'"
            )
        super().__init__(message, target_name)


class ReservedEnvironmentVariableError(TargetError):
    """A target's resolved environment overrides a host-inherited variable.

    ``TERM``, ``TZ``, ``LANG``, ``PATH`` and ``HOME`` are always taken from
    the host process and may not be set from a Yakefile at any level.

    Attributes:
        message: Human-readable error message.
        target_name: The target whose environment was resolved.
        keys: Sorted reserved variable names found in the environment.
    """

    def __init__(self, target_name: str, keys: Iterable[str]) -> None:
        """Initialize the ReservedEnvironmentVariableError.

        Args:
            target_name: The target whose environment was resolved.
            keys: Offending reserved variable names.
        """
        self.keys = sorted(keys)
        super().__init__(
            f"Found invalid/forbidden env variables for target "
            f"'{target_name}': {', '.join(self.keys)}",
            target_name,
        )
