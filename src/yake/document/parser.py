"""Yakefile parser.

This module provides functions for turning Yakefile text into a validated
:class:`~yake.document.schema.Document`:
- parse_yaml: Parse YAML string to dict with error handling
- validate_schema: Validate dict against the Document schema
- load_document: Read, parse and validate a Yakefile from disk

Every failure is reported as a ConfigParseError; a document that fails to
load is fatal and nothing is executed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from yake.document.schema import Document
from yake.exceptions import ConfigParseError
from yake.logging import get_logger

__all__ = [
    "YakefileLoader",
    "parse_yaml",
    "validate_schema",
    "load_document",
]

logger = get_logger(__name__)

_KEPT_RESOLVER_TAGS = frozenset(
    {"tag:yaml.org,2002:null", "tag:yaml.org,2002:merge"}
)


class YakefileLoader(yaml.SafeLoader):
    """SafeLoader that keeps plain scalars as the text that was written.

    Only the null and merge-key resolvers remain, so ``0755``, ``on``,
    ``1.10`` and ``0x1F`` reach the schema unchanged as strings. Quoted and
    unquoted values are therefore equivalent, and booleans such as
    ``include_recursively: true`` are converted by the schema.
    """


YakefileLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp) for tag, regexp in resolvers if tag in _KEPT_RESOLVER_TAGS
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def parse_yaml(
    yaml_content: str, file_path: Path | str | None = None
) -> dict[str, Any]:
    """Parse YAML string to dict with error handling.

    Args:
        yaml_content: YAML string to parse.
        file_path: Source path, used only for error reporting.

    Returns:
        Parsed YAML as a dictionary.

    Raises:
        ConfigParseError: If YAML is empty, has syntax errors, or doesn't
            result in a dictionary.

    Examples:
        >>> parse_yaml('meta: {doc: d, version: "1"}')["meta"]["doc"]
        'd'
    """
    if not yaml_content or yaml_content.isspace():
        raise ConfigParseError("Empty Yakefile content", file_path=file_path)

    try:
        data = yaml.load(yaml_content, Loader=YakefileLoader)
    except yaml.YAMLError as e:
        line_number = None
        mark = getattr(e, "problem_mark", None)
        if mark is not None:
            line_number = mark.line + 1  # Convert to 1-indexed

        raise ConfigParseError(
            f"YAML syntax error: {e}",
            file_path=file_path,
            line_number=line_number,
        ) from e

    if not isinstance(data, dict):
        raise ConfigParseError(
            f"Yakefile must be a mapping, got {type(data).__name__}",
            file_path=file_path,
        )

    return data


def validate_schema(
    data: dict[str, Any], file_path: Path | str | None = None
) -> Document:
    """Validate dict against the Document schema.

    Args:
        data: Yakefile dictionary from YAML parsing.
        file_path: Source path, used only for error reporting.

    Returns:
        Validated Document instance.

    Raises:
        ConfigParseError: If schema validation fails (missing ``doc`` or
            ``version``, unknown target ``type``, wrong value shapes).
    """
    try:
        return Document.model_validate(data)
    except ValidationError as e:
        error_details = []
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            error_details.append(f"{loc}: {error['msg']}")

        raise ConfigParseError(
            f"Schema validation failed: {'; '.join(error_details)}",
            file_path=file_path,
        ) from e


def load_document(path: Path) -> Document:
    """Load a Yakefile from disk.

    Args:
        path: Path to the Yakefile.

    Returns:
        The validated Document.

    Raises:
        ConfigParseError: If the file is missing, unreadable or invalid.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigParseError(f"File not found: {path}", file_path=path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigParseError(
            f"Error while reading file {path}: {e}", file_path=path
        ) from e

    document = validate_schema(parse_yaml(content, path), path)
    logger.debug(
        "document_loaded",
        path=str(path),
        targets=len(document.targets),
        include_recursively=document.meta.include_recursively,
    )
    return document
