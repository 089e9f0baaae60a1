"""Document fixtures for yake tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from yake.document import (
    Document,
    DocumentMeta,
    Target,
    TargetMeta,
    TargetType,
    parse_yaml,
    validate_schema,
)


def build_sample_document() -> Document:
    """Build the reference target tree.

    Returns:
        Document with callables ``base``, ``test`` and ``group.sub`` and the
        top-level group ``group``.
    """
    return Document(
        meta=DocumentMeta(doc="Bla", version="1.0.0"),
        env={"BASE": "BASEVAL"},
        targets={
            "base": Target(meta=TargetMeta(doc="Base", type=TargetType.CALLABLE)),
            "test": Target(
                meta=TargetMeta(
                    doc="Huhu", type=TargetType.CALLABLE, depends=["base"]
                ),
                env={"WEBAPP_PORT": "6543", "POSTGRES_PORT": "5432"},
            ),
            "group": Target(
                meta=TargetMeta(doc="Grouptarget", type=TargetType.GROUP),
                targets={
                    "sub": Target(
                        meta=TargetMeta(
                            doc="Subtarget",
                            type=TargetType.CALLABLE,
                            depends=["base"],
                        ),
                        env={
                            "BASE": "OVERWRITE",
                            "DOCKER_PORT": "1234",
                            "POSTGRES_PORT": "54322",
                        },
                    )
                },
            ),
        },
    )


@pytest.fixture
def sample_document() -> Document:
    """Fresh copy of the reference target tree."""
    return build_sample_document()


@pytest.fixture
def runnable_yakefile_yaml() -> str:
    """Yakefile whose callables print where they come from."""
    return """
meta:
  doc: "Runnable tasks"
  version: 1.0.0
env:
  BASE: BASEVAL
targets:
  base:
    meta:
      doc: "Base"
      type: callable
    exec:
      - echo "i am base"
  test:
    meta:
      doc: "Test"
      type: callable
      depends:
        - base
    env:
      WEBAPP_PORT: 6543
    exec:
      - echo "i am test"
      - echo "second test command"
  group:
    meta:
      doc: "Group"
      type: group
    env:
      GROUP_VAR: from-group
    targets:
      sub:
        meta:
          doc: "Sub"
          type: callable
          depends:
            - base
        env:
          BASE: OVERWRITE
        exec:
          - echo "i am group.sub"
"""


@pytest.fixture
def runnable_document(runnable_yakefile_yaml: str) -> Document:
    return validate_schema(parse_yaml(runnable_yakefile_yaml))


@pytest.fixture
def write_yakefile() -> Callable[..., Path]:
    """Factory writing Yakefile text into a directory.

    Example:
        >>> def test_load(write_yakefile, temp_dir):
        ...     path = write_yakefile(temp_dir / "api", "meta: ...")
    """

    def _write(directory: Path, content: str, filename: str = "Yakefile") -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        path.write_text(content)
        return path

    return _write
