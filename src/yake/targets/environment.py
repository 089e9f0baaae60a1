"""Environment resolution along a target's ancestor chain.

For ``group.sub`` the layers are merged in this order, each overriding
the keys of the ones before it::

    document env  <  group env  <  group.sub env

Variables the host process owns (``RESERVED_ENV_VARS``) may not appear in
the result, whichever layer introduced them.
"""

from __future__ import annotations

from yake.document.schema import Document
from yake.exceptions import ReservedEnvironmentVariableError, UnknownTargetError
from yake.logging import get_logger
from yake.targets.tree import SEPARATOR, find_node, get_target, target_names

__all__ = ["RESERVED_ENV_VARS", "resolved_env"]

logger = get_logger(__name__)

RESERVED_ENV_VARS: frozenset[str] = frozenset({"TERM", "TZ", "LANG", "PATH", "HOME"})


def resolved_env(document: Document, name: str) -> dict[str, str]:
    """Compute the environment a target's commands run with.

    Args:
        document: The composed document.
        name: Qualified name of the target.

    Returns:
        A fresh mapping of the merged variables.

    Raises:
        UnknownTargetError: If ``name`` or one of its prefixes does not
            resolve.
        ReservedEnvironmentVariableError: If the merged environment contains
            a reserved variable.
    """
    target = get_target(document, name)
    if target is None:
        raise UnknownTargetError(name, available=target_names(document))

    env = dict(document.env or {})

    segments = name.split(SEPARATOR)
    for depth in range(1, len(segments) + 1):
        prefix = SEPARATOR.join(segments[:depth])
        node = find_node(document, prefix)
        if node is None:
            raise UnknownTargetError(prefix, available=target_names(document))
        env.update(node.env or {})

    env.update(target.env or {})

    reserved = {key: value for key, value in env.items() if key in RESERVED_ENV_VARS}
    if reserved:
        raise ReservedEnvironmentVariableError(name, reserved)

    logger.debug("environment_resolved", target_name=name, keys=sorted(env))
    return env
