from __future__ import annotations

from pathlib import Path
from typing import Any

from yake.exceptions.base import YakeError


class ConfigError(YakeError):
    """Exception for settings loading, parsing, and validation errors.

    Raised when yake's own settings (environment variables, config files)
    cannot be loaded or validated.

    Attributes:
        message: Human-readable error message describing the configuration issue.
        field: Optional field name that caused the error (e.g., "shell").
        value: Optional value that failed validation (for debugging).

    Examples:
        ```python
        raise ConfigError(
            "Invalid configuration value",
            field="verbosity",
            value="loud",
        )
        ```
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        """Initialize the ConfigError.

        Args:
            message: Human-readable error message.
            field: Optional field name that caused the error.
            value: Optional value that failed validation.
        """
        self.field = field
        self.value = value
        super().__init__(message)


class ConfigParseError(ConfigError):
    """A Yakefile could not be read, parsed, or validated.

    Covers missing or unreadable files, YAML syntax errors, a non-mapping
    document root, missing required ``doc``/``version`` fields and unknown
    target ``type`` literals. Always fatal: nothing runs after it.

    Attributes:
        message: Human-readable error message.
        file_path: Path to the Yakefile being loaded (if known).
        line_number: Line of a YAML syntax error (if known).

    Examples:
        ```python
        raise ConfigParseError(
            "Schema validation failed: targets.base.meta.type: Input should "
            "be 'group' or 'callable'",
            file_path="Yakefile",
        )
        ```
    """

    def __init__(
        self,
        message: str,
        file_path: Path | str | None = None,
        line_number: int | None = None,
    ) -> None:
        """Initialize the ConfigParseError.

        Args:
            message: Human-readable error message.
            file_path: Path to the Yakefile being loaded.
            line_number: Line number of the syntax error, 1-indexed.
        """
        self.file_path = file_path
        self.line_number = line_number
        super().__init__(message, field=None, value=None)
