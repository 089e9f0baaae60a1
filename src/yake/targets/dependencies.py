"""Direct dependency resolution.

Only the names listed in a target's own ``depends`` are resolved. A
dependency's dependencies are not followed: a target that needs a chain
``a -> b -> c`` run in full must list both ``a`` and ``b``.
"""

from __future__ import annotations

from yake.document.schema import Document, Target
from yake.exceptions import UnknownTargetError
from yake.targets.tree import flatten, target_names

__all__ = ["all_dependencies", "dependencies_of"]


def all_dependencies(document: Document) -> dict[str, list[Target]]:
    """Map every callable target to its direct dependencies.

    Every callable gets an entry, even with no ``depends``. Each list keeps
    declaration order.

    Raises:
        UnknownTargetError: If any ``depends`` entry does not resolve. The
            error names both the missing dependency and the declaring target.
    """
    targets = flatten(document)
    dependencies: dict[str, list[Target]] = {}

    for name, target in targets.items():
        if not target.is_callable:
            continue
        resolved: list[Target] = []
        for dependency_name in target.depends:
            dependency = targets.get(dependency_name)
            if dependency is None:
                raise UnknownTargetError(
                    dependency_name,
                    available=target_names(document),
                    dependent=name,
                )
            resolved.append(dependency)
        dependencies[name] = resolved

    return dependencies


def dependencies_of(document: Document, name: str) -> list[Target]:
    """Direct dependencies of one target, in declaration order.

    Top-level groups are addressable but have no dependency entry; they
    yield an empty list.

    Raises:
        UnknownTargetError: If ``name`` is not addressable, or if any
            ``depends`` entry in the document does not resolve.
    """
    if name not in flatten(document):
        raise UnknownTargetError(name, available=target_names(document))
    return all_dependencies(document).get(name, [])
