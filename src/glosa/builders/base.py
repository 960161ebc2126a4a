"""Content tree walker that drives an OutputBuilder.

StructuredOutput walks a content tree with match-based dispatch and calls
the builder's leaf and container methods. It owns the format-independent
policies:

- Links without a target render their children unlinked.
- Zero-length signatures emit nothing.
- Inside a signature whose text length reaches the configured threshold
  (62 by default), soft line breaks reach the builder as hard breaks;
  in shorter signatures and outside signatures they are dropped.

Thread Safety:
All per-render state lives in a RenderContext created for each
append_content() or render_page() call and passed down the recursion.
A StructuredOutput writes into one builder and must not be shared
between concurrent renders.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from glosa.builders.protocol import OutputBuilder
from glosa.config import RenderConfig, resolve_config
from glosa.errors import RenderError
from glosa.location import Location, resolve_href
from glosa.nodes import (
    Anchor,
    Block,
    BlockCode,
    BreadcrumbSeparator,
    Code,
    Container,
    ContentNode,
    Emphasis,
    Header,
    Identifier,
    IndentedSoftLineBreak,
    Keyword,
    LineBreak,
    Link,
    ListItem,
    NonBreakingSpace,
    OrderedList,
    Paragraph,
    Signature,
    SoftLineBreak,
    Strikethrough,
    Strong,
    Symbol,
    Table,
    TableCell,
    TableRow,
    Text,
    UnorderedList,
)
from glosa.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class RenderContext:
    """Per-render mutable state.

    Created fresh for each render, never shared between renders.
    """

    hard_line_breaks: bool = False

    @contextmanager
    def hard_breaks(self, enabled: bool) -> Iterator[None]:
        """Set the hard-break flag for the duration of the block.

        The previous value is restored on every exit path.
        """
        previous = self.hard_line_breaks
        self.hard_line_breaks = enabled
        try:
            yield
        finally:
            self.hard_line_breaks = previous


class StructuredOutput:
    """Render content trees through an OutputBuilder.

    Usage:
        >>> from glosa.builders.html import HtmlBuilder
        >>> from glosa.nodes import Keyword, Signature, Identifier
        >>> out = StructuredOutput(HtmlBuilder())
        >>> out.append_content(Signature(children=(Keyword("val "), Identifier("x"))))
        >>> out.build()
        '<span class="keyword">val </span><span class="identifier">x</span>'

    """

    __slots__ = ("_builder", "_location", "_config")

    def __init__(
        self,
        builder: OutputBuilder,
        location: Location | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        """Initialize the walker.

        Args:
            builder: Builder that receives the output
            location: Location of the page being rendered, for relative links
            config: Render config; defaults to the active context config
        """
        self._builder = builder
        self._location = location
        self._config = resolve_config(config)

    @property
    def builder(self) -> OutputBuilder:
        return self._builder

    def append_content(self, node: ContentNode) -> None:
        """Render one content tree into the builder."""
        self._render(node, RenderContext())

    def append_nodes(self, nodes: Iterable[ContentNode]) -> None:
        ctx = RenderContext()
        for node in nodes:
            self._render(node, ctx)

    def render_page(self, title: str, nodes: Iterable[ContentNode]) -> str:
        """Render a whole page and return the builder's text."""
        self._builder.append_page(title, lambda: self.append_nodes(nodes))
        return self._builder.build()

    def build(self) -> str:
        return self._builder.build()

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _render_children(self, node: Container, ctx: RenderContext) -> None:
        for child in node.children:
            self._render(child, ctx)

    def _render(self, node: ContentNode, ctx: RenderContext) -> None:
        b = self._builder

        def body() -> None:
            self._render_children(node, ctx)  # type: ignore[arg-type]

        match node:
            case Text():
                b.append_text(node.value)
            case Symbol():
                b.append_symbol(node.value)
            case Keyword():
                b.append_keyword(node.value)
            case Identifier():
                b.append_identifier(node.value, node.anchor_id)
            case Link():
                self._render_link(node, ctx)
            case Signature():
                self._render_signature(node, ctx)
            case Block():
                self._render_children(node, ctx)
            case Paragraph():
                b.append_paragraph(body)
            case Header():
                b.append_header(node.level, body)
            case Strong():
                b.append_strong(body)
            case Emphasis():
                b.append_emphasis(body)
            case Strikethrough():
                b.append_strikethrough(body)
            case Code():
                b.append_code(body)
            case UnorderedList():
                b.append_unordered_list(body)
            case OrderedList():
                b.append_ordered_list(body)
            case ListItem():
                b.append_list_item(body)
            case BlockCode():
                b.append_block_code(node.language, body)
            case Table():
                b.append_table(node.columns, body)
            case TableRow():
                b.append_table_row(body)
            case TableCell():
                b.append_table_cell(body)
            case Anchor():
                b.append_anchor(node.name)
            case LineBreak():
                b.append_line()
            case SoftLineBreak():
                if ctx.hard_line_breaks:
                    b.append_soft_line_break()
            case IndentedSoftLineBreak():
                if ctx.hard_line_breaks:
                    b.append_indented_soft_line_break()
            case NonBreakingSpace():
                b.append_non_breaking_space()
            case BreadcrumbSeparator():
                b.append_breadcrumb_separator()
            case _:
                raise RenderError(f"Cannot render content node {type(node).__name__}")

    def _render_link(self, link: Link, ctx: RenderContext) -> None:
        if link.target is None:
            logger.debug("Link without target, rendering children unlinked")
            self._render_children(link, ctx)
            return
        href = resolve_href(link.target, self._location)
        self._builder.append_link(href, lambda: self._render_children(link, ctx))

    def _render_signature(self, signature: Signature, ctx: RenderContext) -> None:
        length = signature.text_length
        if length == 0:
            return
        hard = length >= self._config.signature_break_threshold

        def body() -> None:
            with ctx.hard_breaks(hard):
                self._render_children(signature, ctx)

        self._builder.append_signature(body)
