"""Pydantic schema models for Yakefiles.

This module defines the schema of a Yakefile document:
- Document: Top-level document (meta, root env, targets)
- DocumentMeta: Document metadata
- Target: A named node of the target tree, possibly with children
- TargetMeta: Target metadata (doc, type, depends)
- TargetType: Group or Callable

Example Yakefile:

    meta:
      doc: "Project tasks"
      version: 1.0.0
    env:
      BASE: BASEVAL
    targets:
      base:
        meta:
          doc: "Base target"
          type: callable
        exec:
          - echo "i'm base"
      group:
        meta:
          doc: "A namespace"
          type: group
        targets:
          sub:
            meta:
              doc: "Runs after base"
              type: callable
              depends:
                - base
            exec:
              - echo "i'm group.sub"
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

__all__ = [
    "TargetType",
    "TargetMeta",
    "Target",
    "DocumentMeta",
    "Document",
]

EnvMap = dict[str, str]


class TargetType(str, Enum):
    """Role of a target in the tree."""

    GROUP = "group"  # namespace only, never runnable below the top level
    CALLABLE = "callable"


class TargetMeta(BaseModel):
    """Metadata of a single target.

    Fields:
        doc: Human-readable description
        type: Group or Callable; any other literal is a parse error
        depends: Qualified names of direct dependencies, in run order
    """

    doc: str
    type: TargetType
    depends: list[str] | None = None


class Target(BaseModel):
    """A node of the target tree.

    A target owns its children exclusively. Its type decides its role but
    does not restrict its shape: a group may carry ``exec`` and a callable
    may carry ``targets``.
    """

    meta: TargetMeta
    targets: dict[str, Target] | None = None
    env: EnvMap | None = None
    exec: list[str] | None = None

    @property
    def is_callable(self) -> bool:
        return self.meta.type is TargetType.CALLABLE

    @property
    def commands(self) -> list[str]:
        """Command lines to run, empty when ``exec`` is absent."""
        return list(self.exec or [])

    @property
    def depends(self) -> list[str]:
        return list(self.meta.depends or [])


class DocumentMeta(BaseModel):
    """Metadata of a Yakefile.

    Fields:
        doc: Human-readable description
        version: Free-form document version
        include_recursively: Compose Yakefiles found one directory below
    """

    doc: str
    version: str
    include_recursively: bool | None = None


class Document(BaseModel):
    """One parsed Yakefile.

    Holds source state only. Flattened views, dependency maps and resolved
    environments are derived on demand by :mod:`yake.targets`.
    """

    meta: DocumentMeta
    env: EnvMap | None = None
    targets: dict[str, Target] = Field(default_factory=dict)
