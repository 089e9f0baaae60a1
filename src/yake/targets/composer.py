"""Composition of subordinate Yakefiles into the root document."""

from __future__ import annotations

from collections.abc import Iterable

from yake.document.schema import Document
from yake.logging import get_logger
from yake.targets.tree import flatten

__all__ = ["merge", "compose"]

logger = get_logger(__name__)


def merge(root: Document, subordinate: Document) -> None:
    """Absorb a subordinate document's targets into the root, in place.

    Each flattened entry of the subordinate is stored as a top-level target
    of the root under its qualified name, so ``group.sub`` becomes a single
    dotted key. Existing root entries with the same key are replaced. The
    subordinate's own ``env`` and ``meta`` are not carried over.
    """
    targets = flatten(subordinate)
    overridden = sorted(name for name in targets if name in root.targets)
    root.targets.update(targets)
    logger.debug("subordinate_merged", added=len(targets), overridden=overridden)


def compose(root: Document, subordinates: Iterable[Document]) -> Document:
    """Merge subordinates into root in order; later merges win on collision."""
    for subordinate in subordinates:
        merge(root, subordinate)
    return root
