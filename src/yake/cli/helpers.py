"""Helper functions for the CLI entry point."""

from __future__ import annotations

import logging

from yake.cli.context import CLIContext
from yake.config import YakeConfig
from yake.document import Document, load_document, load_subordinates
from yake.logging import get_logger
from yake.targets import compose

__all__ = [
    "resolve_log_level",
    "load_project",
]

logger = get_logger(__name__)

_VERBOSITY_LEVELS = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def resolve_log_level(config: YakeConfig, verbose: int, quiet: bool) -> int:
    """Pick the log level. Priority: quiet > verbose > config.

    Example:
        >>> resolve_log_level(YakeConfig(), verbose=2, quiet=False)
        10
    """
    if quiet:
        return logging.ERROR
    if verbose > 0:
        return logging.INFO if verbose == 1 else logging.DEBUG
    return _VERBOSITY_LEVELS.get(config.verbosity, logging.WARNING)


def load_project(cli_ctx: CLIContext) -> Document:
    """Load the root Yakefile and compose its subordinates into it.

    Subordinates are included when the settings override says so or, with
    no override, when the root document's ``meta.include_recursively`` is
    true.

    Raises:
        ConfigParseError: If the root or any subordinate Yakefile is invalid.
    """
    document = load_document(cli_ctx.yakefile)

    include = cli_ctx.include_recursively_override
    if include is None:
        include = bool(document.meta.include_recursively)

    if include:
        subordinates = load_subordinates(cli_ctx.project_dir, cli_ctx.config.yakefile)
        logger.info(
            "composing_subordinates",
            root=str(cli_ctx.project_dir),
            count=len(subordinates),
        )
        compose(document, subordinates)

    return document
