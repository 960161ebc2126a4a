"""Tests for the exception hierarchy and messages."""

import pytest

from glosa.errors import (
    ContentError,
    DispatchMismatchError,
    GlosaError,
    MissingDetailError,
    RenderError,
    UnknownFormatError,
    UnsupportedNodeKindError,
)
from glosa.model import DocumentationNode, NodeKind


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls",
        [RenderError, DispatchMismatchError, MissingDetailError, UnsupportedNodeKindError],
    )
    def test_render_errors(self, cls: type) -> None:
        assert issubclass(cls, RenderError)
        assert issubclass(cls, GlosaError)

    def test_missing_detail_is_a_mismatch(self) -> None:
        assert issubclass(MissingDetailError, DispatchMismatchError)

    def test_other_errors(self) -> None:
        assert issubclass(ContentError, GlosaError)
        assert issubclass(UnknownFormatError, GlosaError)
        assert not issubclass(ContentError, RenderError)


class TestMessages:
    def test_dispatch_mismatch(self) -> None:
        node = DocumentationNode("f", NodeKind.FUNCTION)
        error = DispatchMismatchError(node, "class-like")
        assert str(error) == "Function node 'f' is not a class-like declaration"
        assert error.node is node
        assert error.rule == "class-like"

    def test_missing_detail_with_kind(self) -> None:
        node = DocumentationNode("x", NodeKind.PARAMETER)
        error = MissingDetailError(node, NodeKind.TYPE)
        assert str(error) == "Parameter node 'x' has no required Type detail"

    def test_missing_detail_with_label(self) -> None:
        node = DocumentationNode("<init>", NodeKind.CONSTRUCTOR)
        assert "owner" in str(MissingDetailError(node, "owner"))

    def test_unsupported_kind(self) -> None:
        error = UnsupportedNodeKindError(NodeKind.ANNOTATION, "Deprecated")
        assert str(error) == "No rendering rule for Annotation node 'Deprecated'"

    def test_unknown_format_lists_available(self) -> None:
        error = UnknownFormatError("rst", ["markdown", "html"])
        assert str(error) == "Unknown output format 'rst'. Available: html, markdown"
