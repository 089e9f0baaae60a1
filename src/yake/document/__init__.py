"""Yakefile documents: schema, parsing and subordinate discovery."""

from __future__ import annotations

from yake.document.locator import YakefileLocator, discover, load_subordinates
from yake.document.parser import (
    YakefileLoader,
    load_document,
    parse_yaml,
    validate_schema,
)
from yake.document.schema import (
    Document,
    DocumentMeta,
    Target,
    TargetMeta,
    TargetType,
)

__all__ = [
    # Schema
    "Document",
    "DocumentMeta",
    "Target",
    "TargetMeta",
    "TargetType",
    # Parsing
    "YakefileLoader",
    "load_document",
    "parse_yaml",
    "validate_schema",
    # Discovery
    "YakefileLocator",
    "discover",
    "load_subordinates",
]
