"""Output formatting utilities for the yake CLI."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "format_error",
    "format_unknown_target",
]


def format_error(
    message: str, details: list[str] | None = None, suggestion: str | None = None
) -> str:
    """Format an error message with optional details and suggestion.

    Args:
        message: Primary error message.
        details: Optional list of detail lines to include.
        suggestion: Optional suggestion for resolving the error.

    Returns:
        Formatted error string with details and suggestion if provided.

    Example:
        >>> print(format_error(
        ...     "Failed to load Yakefile",
        ...     details=["File not found: Yakefile"],
        ...     suggestion="Run yake from the project root or pass --file",
        ... ))
        Error: Failed to load Yakefile
          File not found: Yakefile
        Suggestion: Run yake from the project root or pass --file
    """
    lines = [f"Error: {message}"]

    if details:
        for detail in details:
            lines.append(f"  {detail}")

    if suggestion:
        lines.append(f"Suggestion: {suggestion}")

    return "\n".join(lines)


def format_unknown_target(name: str, available: Sequence[str]) -> str:
    """Format the diagnostic for a target name that does not exist.

    Example:
        >>> format_unknown_target("sub", ["base", "group.sub"])
        "Unknown target: 'sub' Available targets are: ['base', 'group.sub']"
    """
    return f"Unknown target: '{name}' Available targets are: {list(available)}"
