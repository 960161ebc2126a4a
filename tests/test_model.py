"""Tests for the declaration model."""

import gc

import pytest

from glosa.errors import MissingDetailError
from glosa.model import DocumentationNode, NodeKind


def _class_with_members() -> DocumentationNode:
    cls = DocumentationNode("List", NodeKind.CLASS, links=["https://example.com/List"])
    cls.append(DocumentationNode("E", NodeKind.TYPE_PARAMETER))
    cls.append(DocumentationNode("open", NodeKind.MODIFIER))
    cls.append(DocumentationNode("F", NodeKind.TYPE_PARAMETER))
    return cls


class TestDetails:
    def test_details_by_kind_in_order(self) -> None:
        cls = _class_with_members()
        assert [d.name for d in cls.details(NodeKind.TYPE_PARAMETER)] == ["E", "F"]
        assert cls.details(NodeKind.SUPERTYPE) == []

    def test_detail_returns_first(self) -> None:
        assert _class_with_members().detail(NodeKind.TYPE_PARAMETER).name == "E"

    def test_missing_detail_raises(self) -> None:
        cls = _class_with_members()
        with pytest.raises(MissingDetailError) as exc_info:
            cls.detail(NodeKind.TYPE)
        assert exc_info.value.node is cls
        assert exc_info.value.role is NodeKind.TYPE

    def test_all_details_and_links(self) -> None:
        cls = _class_with_members()
        assert len(cls.all_details) == 3
        assert cls.first_link == "https://example.com/List"
        assert DocumentationNode("x", NodeKind.TYPE).first_link is None

    def test_depth_first(self) -> None:
        fn = DocumentationNode("f", NodeKind.FUNCTION)
        param = fn.append(DocumentationNode("x", NodeKind.PARAMETER))
        param.append(DocumentationNode("Int", NodeKind.TYPE))
        fn.append(DocumentationNode("Unit", NodeKind.TYPE))
        assert [n.name for n in fn.depth_first()] == ["f", "x", "Int", "Unit"]


class TestOwner:
    def test_append_sets_owner(self) -> None:
        cls = DocumentationNode("List", NodeKind.CLASS)
        member = cls.append(DocumentationNode("size", NodeKind.PROPERTY))
        assert member.owner is cls
        assert cls.owner is None

    def test_owner_is_weak(self) -> None:
        """A detail does not keep its owner alive."""
        cls = DocumentationNode("List", NodeKind.CLASS)
        member = cls.append(DocumentationNode("size", NodeKind.PROPERTY))
        del cls
        gc.collect()
        assert member.owner is None

    def test_path_from_root(self) -> None:
        package = DocumentationNode("kotlin.collections", NodeKind.PACKAGE)
        cls = package.append(DocumentationNode("List", NodeKind.CLASS))
        fn = cls.append(DocumentationNode("get", NodeKind.FUNCTION))
        assert [n.name for n in fn.path] == ["kotlin.collections", "List", "get"]
