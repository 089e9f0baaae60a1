"""Flattened views over a document's target tree.

Targets are addressed by qualified names: the segment names of the path
from the document root joined with ``.``. Only callable targets are
addressable below the top level; groups there are pure namespaces::

    targets:
      base:      (callable)  -> "base"
      group:     (group)     -> "group"      top-level entries are always kept
        sub:     (callable)  -> "group.sub"
        inner:   (group)     -> (none)
          leaf:  (callable)  -> "group.inner.leaf"

All views are recomputed from the document on every call and hold no
state of their own.
"""

from __future__ import annotations

from yake.document.schema import Document, Target
from yake.exceptions import UnknownTargetError

__all__ = [
    "flatten",
    "target_names",
    "get_target",
    "has_target",
    "find_node",
]

SEPARATOR = "."


def flatten(document: Document) -> dict[str, Target]:
    """Map every addressable qualified name to its target.

    Every top-level entry is included regardless of its type. Below the top
    level, callables are emitted under their full path and groups are
    descended into without an entry of their own. Qualified names are
    assumed unique; a collision silently keeps the last one visited.
    """
    targets: dict[str, Target] = {}

    for name, target in document.targets.items():
        targets[name] = target
        if target.targets:
            targets.update(_sub_targets(target, name))

    return targets


def _sub_targets(target: Target, prefix: str) -> dict[str, Target]:
    targets: dict[str, Target] = {}
    for name, child in (target.targets or {}).items():
        qualified = f"{prefix}{SEPARATOR}{name}"
        if child.is_callable:
            targets[qualified] = child
        else:
            targets.update(_sub_targets(child, qualified))
    return targets


def target_names(document: Document) -> list[str]:
    """Sorted qualified names of all callable targets."""
    return sorted(
        name for name, target in flatten(document).items() if target.is_callable
    )


def get_target(document: Document, name: str) -> Target | None:
    """Look a qualified name up in the flattened view."""
    return flatten(document).get(name)


def has_target(document: Document, name: str) -> None:
    """Check that a qualified name is addressable.

    Raises:
        UnknownTargetError: With the callable target names as ``available``.
    """
    if get_target(document, name) is None:
        raise UnknownTargetError(name, available=target_names(document))


def find_node(document: Document, name: str) -> Target | None:
    """Look a qualified name up in the full node tree.

    Unlike :func:`get_target` this also reaches groups nested below the top
    level. Top-level keys may themselves contain dots (see
    :func:`yake.targets.composer.merge`), so the longest top-level key
    matching a leading run of segments is tried first.
    """
    segments = name.split(SEPARATOR)

    for split in range(len(segments), 0, -1):
        head = SEPARATOR.join(segments[:split])
        node = document.targets.get(head)
        if node is None:
            continue
        for segment in segments[split:]:
            node = (node.targets or {}).get(segment)
            if node is None:
                break
        else:
            return node

    return None
