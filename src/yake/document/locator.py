"""Subordinate Yakefile locator.

A root Yakefile with ``include_recursively: true`` absorbs the targets of
Yakefiles placed exactly one directory below it::

    project/
        Yakefile            <- root document
        api/Yakefile        <- subordinate
        web/Yakefile        <- subordinate
        web/app/Yakefile    <- ignored, two levels down

Example:
    ```python
    from pathlib import Path
    from yake.document.locator import YakefileLocator

    for path in YakefileLocator().scan(Path("project")):
        print(f"Found: {path}")
    ```
"""

from __future__ import annotations

from pathlib import Path

from yake.document.parser import load_document
from yake.document.schema import Document
from yake.logging import get_logger

__all__ = ["YakefileLocator", "discover", "load_subordinates"]

logger = get_logger(__name__)

DEFAULT_FILENAME = "Yakefile"


class YakefileLocator:
    """Locator for finding subordinate Yakefiles below a root directory.

    The locator only finds files; parsing and validation happen in
    :func:`yake.document.parser.load_document`.

    Attributes:
        filename: Exact file name to look for.
    """

    def __init__(self, filename: str = DEFAULT_FILENAME) -> None:
        self.filename = filename

    def scan(self, root_dir: Path) -> list[Path]:
        """Find ``root_dir/<subdir>/<filename>`` files.

        Args:
            root_dir: Directory holding the root Yakefile. Passed explicitly,
                the process working directory is never consulted.

        Returns:
            Paths of subordinate Yakefiles, sorted so that discovery (and
            therefore merge) order is stable. Empty if root_dir does not
            exist or is not accessible.
        """
        if not root_dir.is_dir():
            logger.warning(f"Yakefile search root is not a directory: {root_dir}")
            return []

        try:
            subdirs = sorted(entry for entry in root_dir.iterdir() if entry.is_dir())
        except OSError as e:
            logger.warning(f"Error reading directory {root_dir}: {e}")
            return []

        found = [
            candidate
            for candidate in (subdir / self.filename for subdir in subdirs)
            if candidate.is_file()
        ]
        logger.debug(
            "subordinate_yakefiles_found", root=str(root_dir), count=len(found)
        )
        return found


def discover(root_dir: Path, filename: str = DEFAULT_FILENAME) -> list[Path]:
    """Enumerate subordinate Yakefiles one directory level below root_dir."""
    return YakefileLocator(filename).scan(root_dir)


def load_subordinates(
    root_dir: Path, filename: str = DEFAULT_FILENAME
) -> list[Document]:
    """Load every subordinate Yakefile in discovery order.

    Raises:
        ConfigParseError: If any subordinate Yakefile is invalid.
    """
    return [load_document(path) for path in discover(root_dir, filename)]
