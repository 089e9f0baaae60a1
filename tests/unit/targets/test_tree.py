"""Unit tests for the flattened target views."""

from __future__ import annotations

import pytest

from yake.document import Document, DocumentMeta, Target, TargetMeta, TargetType
from yake.exceptions import UnknownTargetError
from yake.targets import find_node, flatten, get_target, has_target, target_names


def _callable(doc: str = "c", **kwargs: object) -> Target:
    return Target(meta=TargetMeta(doc=doc, type=TargetType.CALLABLE), **kwargs)


def _group(children: dict[str, Target], **kwargs: object) -> Target:
    return Target(
        meta=TargetMeta(doc="g", type=TargetType.GROUP), targets=children, **kwargs
    )


@pytest.fixture
def deep_document() -> Document:
    return Document(
        meta=DocumentMeta(doc="deep", version="1"),
        targets={
            "outer": _group(
                {
                    "leaf": _callable("outer leaf"),
                    "inner": _group({"leaf": _callable("inner leaf")}),
                }
            ),
        },
    )


class TestFlatten:
    """Tests for flatten()."""

    def test_sample_document_has_four_entries(self, sample_document: Document) -> None:
        assert set(flatten(sample_document)) == {"base", "test", "group", "group.sub"}

    def test_nested_callables_get_full_path(self, deep_document: Document) -> None:
        targets = flatten(deep_document)

        assert targets["outer.leaf"].meta.doc == "outer leaf"
        assert targets["outer.inner.leaf"].meta.doc == "inner leaf"

    def test_nested_groups_are_not_addressable(self, deep_document: Document) -> None:
        assert "outer.inner" not in flatten(deep_document)

    def test_top_level_group_is_addressable(self, deep_document: Document) -> None:
        assert flatten(deep_document)["outer"].meta.type is TargetType.GROUP

    def test_children_of_nested_callable_are_not_descended(self) -> None:
        document = Document(
            meta=DocumentMeta(doc="d", version="1"),
            targets={
                "top": _group(
                    {"runner": _callable(targets={"hidden": _callable("hidden")})}
                )
            },
        )

        assert set(flatten(document)) == {"top", "top.runner"}

    def test_children_of_top_level_callable_are_flattened(self) -> None:
        document = Document(
            meta=DocumentMeta(doc="d", version="1"),
            targets={"top": _callable(targets={"child": _callable("child")})},
        )

        assert set(flatten(document)) == {"top", "top.child"}

    def test_empty_document(self) -> None:
        document = Document(meta=DocumentMeta(doc="d", version="1"))

        assert flatten(document) == {}


class TestTargetNames:
    """Tests for target_names()."""

    def test_lists_only_callables(self, sample_document: Document) -> None:
        assert target_names(sample_document) == ["base", "group.sub", "test"]

    def test_top_level_group_is_not_listed(self, deep_document: Document) -> None:
        assert target_names(deep_document) == ["outer.inner.leaf", "outer.leaf"]


class TestLookup:
    """Tests for get_target() and has_target()."""

    def test_get_target_by_qualified_name(self, sample_document: Document) -> None:
        assert get_target(sample_document, "group.sub") is not None
        assert get_target(sample_document, "base") is not None

    def test_get_target_by_leaf_name_misses(self, sample_document: Document) -> None:
        assert get_target(sample_document, "sub") is None

    def test_has_target_accepts_known_names(self, sample_document: Document) -> None:
        has_target(sample_document, "group.sub")
        has_target(sample_document, "group")

    def test_has_target_lists_callables_on_miss(
        self, sample_document: Document
    ) -> None:
        with pytest.raises(UnknownTargetError) as exc_info:
            has_target(sample_document, "sub")

        error = exc_info.value
        assert error.target_name == "sub"
        assert error.dependent is None
        assert len(error.available) == 3
        assert error.available == ["base", "group.sub", "test"]


class TestFindNode:
    """Tests for find_node()."""

    def test_reaches_nested_groups(self, deep_document: Document) -> None:
        node = find_node(deep_document, "outer.inner")

        assert node is not None
        assert node.meta.type is TargetType.GROUP

    def test_reaches_nested_callables(self, deep_document: Document) -> None:
        node = find_node(deep_document, "outer.inner.leaf")

        assert node is not None
        assert node.meta.doc == "inner leaf"

    def test_missing_path(self, deep_document: Document) -> None:
        assert find_node(deep_document, "outer.nope") is None
        assert find_node(deep_document, "nope") is None

    def test_prefers_dotted_top_level_key(self) -> None:
        document = Document(
            meta=DocumentMeta(doc="d", version="1"),
            targets={
                "api": _group({"build": _callable("nested")}),
                "api.build": _callable("composed"),
            },
        )

        node = find_node(document, "api.build")

        assert node is not None
        assert node.meta.doc == "composed"

    def test_walks_below_dotted_top_level_key(self) -> None:
        document = Document(
            meta=DocumentMeta(doc="d", version="1"),
            targets={"svc.tools": _group({"lint": _callable("lint")})},
        )

        node = find_node(document, "svc.tools.lint")

        assert node is not None
        assert node.meta.doc == "lint"
