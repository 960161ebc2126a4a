"""Tests for GitHub-flavored Markdown builder output."""

import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from glosa.builders import MarkdownBuilder, StructuredOutput
from glosa.nodes import (
    Anchor,
    BlockCode,
    Code,
    ContentNode,
    Emphasis,
    Header,
    Identifier,
    LineBreak,
    Link,
    ListItem,
    OrderedList,
    Paragraph,
    Signature,
    SoftLineBreak,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    UnorderedList,
)
from glosa.utils.text import escape_markdown


def render(*nodes: ContentNode) -> str:
    out = StructuredOutput(MarkdownBuilder())
    out.append_nodes(nodes)
    return out.build()


def p(*children: ContentNode) -> Paragraph:
    return Paragraph(children=children)


def cell(*children: ContentNode) -> TableCell:
    return TableCell(children=children)


def item(*children: ContentNode) -> ListItem:
    return ListItem(children=children)


class TestInline:
    def test_text_is_escaped(self) -> None:
        assert render(Text("a*b_c`d|e[f]")) == r"a\*b\_c\`d\|e\[f\]"

    def test_html_is_escaped(self) -> None:
        assert render(Identifier("Map<K, V>", anchor_id="ignored")) == "Map&lt;K, V&gt;"

    def test_formatting(self) -> None:
        tree = p(
            Strong(children=(Text("a"),)),
            Text(" "),
            Emphasis(children=(Text("b"),)),
            Text(" "),
            Strikethrough(children=(Text("c"),)),
        )
        assert render(tree) == "**a** *b* ~~c~~\n\n"

    def test_empty_formatting_emits_nothing(self) -> None:
        assert render(Strong(), Emphasis(children=(Text(""),))) == ""

    def test_leading_space_moves_outside_delimiters(self) -> None:
        tree = p(Text("a"), Emphasis(children=(Text(" b"),)))
        assert render(tree) == "a *b*\n\n"

    def test_trailing_space_moves_outside_delimiters(self) -> None:
        tree = p(Strong(children=(Text("Returns "),)), Text("x"))
        assert render(tree) == "**Returns** x\n\n"

    def test_whitespace_only_formatting_keeps_the_space(self) -> None:
        assert render(Text("a"), Strikethrough(children=(Text(" "),)), Text("b")) == "a b"

    def test_link(self) -> None:
        link = Link("https://e.com/x (1)", children=(Text("go"),))
        assert render(link) == "[go](https://e.com/x%20%281%29)"

    def test_anchor(self) -> None:
        assert render(Anchor("x")) == '<a name="x"></a>'

    def test_line_break(self) -> None:
        assert render(p(Text("a"), LineBreak(), Text("b"))) == "a\\\nb\n\n"


class TestCodeSpans:
    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("a*b", "`a*b`"),
            ("a`b", "``a`b``"),
            ("`x", "`` `x ``"),
            ("", "<code></code>"),
        ],
    )
    def test_code_span(self, code: str, expected: str) -> None:
        assert render(Code(children=(Text(code),))) == expected

    def test_link_inside_code_is_plain(self) -> None:
        code = Code(children=(Link("https://e.com", children=(Text("x"),)),))
        assert render(code) == "`x`"


class TestBlocks:
    def test_header(self) -> None:
        assert render(Header(2, children=(Text("Title"),))) == "## Title\n\n"

    def test_header_with_emphasis(self) -> None:
        header = Header(1, children=(Text("a"), Emphasis(children=(Text("b"),))))
        assert render(header) == "# a*b*\n\n"

    def test_consecutive_paragraphs(self) -> None:
        assert render(p(Text("a")), p(Text("b"))) == "a\n\nb\n\n"

    def test_block_code(self) -> None:
        code = BlockCode("kotlin", children=(Text("val x = a*b"),))
        assert render(code) == "```kotlin\nval x = a*b\n```\n\n"

    def test_block_code_fence_grows(self) -> None:
        code = BlockCode(children=(Text("```\nnested\n```"),))
        assert render(code) == "````\n```\nnested\n```\n````\n\n"

    def test_block_starts_on_new_line(self) -> None:
        assert render(Text("a"), Header(1, children=(Text("H"),))) == "a\n# H\n\n"


class TestLists:
    def test_unordered(self) -> None:
        tree = UnorderedList(children=(item(Text("a")), item(Text("b"))))
        assert render(tree) == "- a\n- b\n\n"

    def test_ordered(self) -> None:
        tree = OrderedList(children=(item(Text("a")), item(Text("b"))))
        assert render(tree) == "1. a\n2. b\n\n"

    def test_nested(self) -> None:
        inner = UnorderedList(children=(item(Text("b")),))
        tree = UnorderedList(children=(item(Text("a"), inner),))
        assert render(tree) == "- a\n  - b\n\n"

    def test_item_with_paragraphs(self) -> None:
        tree = OrderedList(children=(item(p(Text("a")), p(Text("b"))),))
        assert render(tree) == "1. a\n\n   b\n\n"


class TestTables:
    def test_table(self) -> None:
        row = TableRow(children=(cell(Text("a")), cell(Text("b"))))
        table = Table(("Name", "Summary"), children=(row,))
        assert render(table) == "| Name | Summary |\n| --- | --- |\n| a | b |\n\n"

    def test_empty_table(self) -> None:
        assert render(Table()) == "|  |\n| --- |\n\n"

    def test_short_rows_are_padded(self) -> None:
        row = TableRow(children=(cell(Text("a")),))
        table = Table(("Name", "Summary"), children=(row,))
        assert render(table).splitlines()[2] == "| a |  |"

    def test_cell_content_is_escaped_and_flattened(self) -> None:
        row = TableRow(
            children=(
                cell(Text("a|b")),
                cell(Text("x"), LineBreak(), Text("y")),
                cell(p(Text("one")), p(Text("two"))),
            )
        )
        lines = render(Table(children=(row,))).splitlines()
        assert lines[2] == r"| a\|b | x<br/>y | one two |"

    def test_pipes_in_cell_code_span_are_escaped(self) -> None:
        row = TableRow(children=(cell(Code(children=(Text("a || b"),))), cell(Text("x"))))
        table = Table(("A", "B"), children=(row,))
        assert render(table).splitlines()[2] == r"| `a \|\| b` | x |"

    def test_pipes_in_code_span_outside_tables_are_verbatim(self) -> None:
        assert render(Code(children=(Text("a || b"),))) == "`a || b`"


class TestSignatures:
    def test_short_signature_has_no_breaks(self) -> None:
        sig = Signature(children=(Text("a" * 10), SoftLineBreak(), Text("b")))
        assert render(sig) == "a" * 10 + "b"

    def test_long_signature_uses_hard_breaks(self) -> None:
        sig = Signature(children=(Text("a" * 70), SoftLineBreak(), Text("b")))
        assert render(sig) == "a" * 70 + "\\\nb"


class TestEscapingProperties:
    @given(text=st.text())
    def test_specials_are_always_escaped(self, text: str) -> None:
        escaped = escape_markdown(text)
        remainder = re.sub(r"\\[\\`*_\[\]|]", "", escaped)
        for char in "\\`*_[]|<>\"":
            assert char not in remainder

    @given(text=st.text())
    def test_page_output_matches_escaping(self, text: str) -> None:
        assert render(Text(text)) == escape_markdown(text)
