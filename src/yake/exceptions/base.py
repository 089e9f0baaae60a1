from __future__ import annotations


class YakeError(Exception):
    """Base exception class for all Yake-specific errors.

    This is the root of the Yake exception hierarchy. Every error yake
    raises on purpose inherits from this class, so the CLI boundary can
    report it and exit non-zero while letting system exceptions propagate
    naturally.

    Attributes:
        message: Human-readable error message describing what went wrong.

    Example:
        ```python
        try:
            executor.execute("build")
        except YakeError as e:
            click.echo(format_error(e.message), err=True)
            sys.exit(1)
        ```
    """

    def __init__(self, message: str) -> None:
        """Initialize the YakeError.

        Args:
            message: Human-readable error message.
        """
        self.message = message
        super().__init__(message)
