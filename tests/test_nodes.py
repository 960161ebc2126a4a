"""Tests for content tree nodes."""

import dataclasses

import pytest

from glosa.location import FileLocation
from glosa.nodes import (
    Anchor,
    Block,
    Code,
    Header,
    Identifier,
    Keyword,
    LineBreak,
    Link,
    Paragraph,
    Signature,
    SoftLineBreak,
    Symbol,
    Table,
    TableCell,
    TableRow,
    Text,
    plain_text,
    walk,
)


class TestTextLength:
    """text_length counts leaf characters and nothing else."""

    def test_leaf(self) -> None:
        assert Text("hello").text_length == 5
        assert Identifier("f", anchor_id="some-long-anchor").text_length == 1

    def test_markers_are_zero(self) -> None:
        assert Anchor("top").text_length == 0
        assert LineBreak().text_length == 0
        assert SoftLineBreak().text_length == 0

    def test_container_sums_children(self) -> None:
        sig = Signature(
            children=(
                Keyword("fun "),
                Identifier("f"),
                Symbol("("),
                SoftLineBreak(),
                Symbol(")"),
            )
        )
        assert sig.text_length == 7

    def test_link_target_is_not_counted(self) -> None:
        link = Link("https://example.com/a/very/long/target.html", children=(Text("abc"),))
        assert link.text_length == 3
        assert Link(FileLocation("x/y.html"), children=(Text("ab"),)).text_length == 2

    def test_table_columns_are_not_counted(self) -> None:
        table = Table(
            ("Name", "Summary"),
            children=(TableRow(children=(TableCell(children=(Text("a"),)),)),),
        )
        assert table.text_length == 1

    def test_empty_container(self) -> None:
        assert Block().text_length == 0


class TestNodeConstruction:
    def test_nodes_are_frozen(self) -> None:
        node = Text("a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.value = "b"  # type: ignore[misc]

    def test_nodes_compare_by_value(self) -> None:
        assert Paragraph(children=(Text("a"),)) == Paragraph(children=(Text("a"),))
        assert Text("a") != Symbol("a")

    @pytest.mark.parametrize("level", [0, 7, -1])
    def test_header_level_out_of_range(self, level: int) -> None:
        with pytest.raises(ValueError, match="between 1 and 6"):
            Header(level)

    def test_header_level_in_range(self) -> None:
        assert Header(6, children=(Text("x"),)).level == 6


class TestTraversal:
    def test_walk_is_depth_first(self) -> None:
        paragraph = Paragraph(children=(Text("a"), Code(children=(Text("b"),))))
        tree = Block(children=(paragraph, Text("c")))
        kinds = [type(n).__name__ for n in walk(tree)]
        assert kinds == ["Block", "Paragraph", "Text", "Code", "Text", "Text"]

    def test_plain_text(self) -> None:
        tree = Signature(children=(Keyword("val "), Link("u", children=(Identifier("x"),))))
        assert plain_text(tree) == "val x"
