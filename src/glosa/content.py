"""Compositional construction of content trees.

Leaves are appended to the innermost open container; containers are opened
with ``with`` blocks and frozen into immutable nodes when the block exits.

Example:
    >>> from glosa.content import content
    >>> with content() as c:
    ...     c.keyword("fun ")
    ...     c.identifier("f")
    ...     with c.link("https://example.com/Unit"):
    ...         c.identifier("Unit")
    >>> c.build().text_length
    9

Thread Safety:
A ContentBuilder accumulates mutable state; create one per tree.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from typing import TYPE_CHECKING

from glosa.errors import ContentError
from glosa.nodes import (
    Anchor,
    Block,
    BlockCode,
    BreadcrumbSeparator,
    Code,
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

if TYPE_CHECKING:
    from glosa.location import LinkTarget


class ContentBuilder:
    """Stack-based builder for content trees.

    Usage:
            >>> cb = ContentBuilder()
            >>> with cb.paragraph():
            ...     cb.text("Returns ")
            ...     with cb.code():
            ...         cb.text("null")
            >>> cb.build()
            Block(children=(Paragraph(children=(Text(value='Returns '), Code(children=(Text(value='null'),))),),))

    """

    __slots__ = ("_stack",)

    def __init__(self) -> None:
        self._stack: list[list[ContentNode]] = [[]]

    # =========================================================================
    # Leaves and markers
    # =========================================================================

    def append(self, node: ContentNode) -> ContentBuilder:
        """Append a finished node to the current container."""
        self._stack[-1].append(node)
        return self

    def text(self, value: str) -> ContentBuilder:
        return self.append(Text(value))

    def symbol(self, value: str) -> ContentBuilder:
        return self.append(Symbol(value))

    def keyword(self, value: str) -> ContentBuilder:
        return self.append(Keyword(value))

    def identifier(self, value: str, anchor_id: str | None = None) -> ContentBuilder:
        return self.append(Identifier(value, anchor_id))

    def anchor(self, name: str) -> ContentBuilder:
        return self.append(Anchor(name))

    def line_break(self) -> ContentBuilder:
        return self.append(LineBreak())

    def soft_line_break(self) -> ContentBuilder:
        return self.append(SoftLineBreak())

    def indented_soft_line_break(self) -> ContentBuilder:
        return self.append(IndentedSoftLineBreak())

    def non_breaking_space(self) -> ContentBuilder:
        return self.append(NonBreakingSpace())

    def breadcrumb_separator(self) -> ContentBuilder:
        return self.append(BreadcrumbSeparator())

    # =========================================================================
    # Containers
    # =========================================================================

    @contextmanager
    def _container(
        self, factory: Callable[[tuple[ContentNode, ...]], ContentNode]
    ) -> Iterator[None]:
        children: list[ContentNode] = []
        self._stack.append(children)
        try:
            yield
        finally:
            # Popped on every exit path; only a clean exit attaches the node
            self._stack.pop()
        self._stack[-1].append(factory(tuple(children)))

    def block(self) -> AbstractContextManager[None]:
        return self._container(lambda ch: Block(children=ch))

    def paragraph(self) -> AbstractContextManager[None]:
        return self._container(lambda ch: Paragraph(children=ch))

    def header(self, level: int) -> AbstractContextManager[None]:
        return self._container(lambda ch: Header(level, children=ch))

    def strong(self) -> AbstractContextManager[None]:
        return self._container(lambda ch: Strong(children=ch))

    def emphasis(self) -> AbstractContextManager[None]:
        return self._container(lambda ch: Emphasis(children=ch))

    def strikethrough(self) -> AbstractContextManager[None]:
        return self._container(lambda ch: Strikethrough(children=ch))

    def code(self) -> AbstractContextManager[None]:
        return self._container(lambda ch: Code(children=ch))

    def unordered_list(self) -> AbstractContextManager[None]:
        return self._container(lambda ch: UnorderedList(children=ch))

    def ordered_list(self) -> AbstractContextManager[None]:
        return self._container(lambda ch: OrderedList(children=ch))

    def list_item(self) -> AbstractContextManager[None]:
        return self._container(lambda ch: ListItem(children=ch))

    def block_code(self, language: str | None = None) -> AbstractContextManager[None]:
        return self._container(lambda ch: BlockCode(language, children=ch))

    def table(self, *columns: str) -> AbstractContextManager[None]:
        return self._container(lambda ch: Table(columns, children=ch))

    def table_row(self) -> AbstractContextManager[None]:
        return self._container(lambda ch: TableRow(children=ch))

    def table_cell(self) -> AbstractContextManager[None]:
        return self._container(lambda ch: TableCell(children=ch))

    def link(self, target: LinkTarget | None) -> AbstractContextManager[None]:
        return self._container(lambda ch: Link(target, children=ch))

    def signature(self) -> AbstractContextManager[None]:
        return self._container(lambda ch: Signature(children=ch))

    # =========================================================================
    # Result
    # =========================================================================

    def build(self) -> Block:
        """Return the finished tree as a Block.

        Raises:
            ContentError: If a container is still open
        """
        if len(self._stack) != 1:
            raise ContentError(
                f"Cannot build content with {len(self._stack) - 1} container(s) still open"
            )
        return Block(children=tuple(self._stack[0]))


@contextmanager
def content() -> Iterator[ContentBuilder]:
    """Yield a fresh ContentBuilder; call ``build()`` after the block."""
    yield ContentBuilder()
