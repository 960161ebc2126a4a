"""Typed content tree nodes for Glosa.

All content nodes are frozen dataclasses with slots for:
- Immutability: a tree never changes once its container has closed
- Format independence: values are raw text, escaping belongs to builders
- Pattern matching: Python 3.10+ match statements work naturally

Node Hierarchy:
ContentNode (base)
├── Leaf
│   ├── Text
│   ├── Symbol
│   ├── Keyword
│   └── Identifier
├── Container
│   ├── Block
│   ├── Paragraph
│   ├── Header
│   ├── Strong / Emphasis / Strikethrough / Code
│   ├── UnorderedList / OrderedList / ListItem
│   ├── BlockCode
│   ├── Table / TableRow / TableCell
│   ├── Link
│   └── Signature
└── Markers
    ├── Anchor
    ├── LineBreak
    ├── SoftLineBreak
    ├── IndentedSoftLineBreak
    ├── NonBreakingSpace
    └── BreadcrumbSeparator

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from glosa.location import LinkTarget

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class ContentNode:
    """Base class for all content nodes."""

    @property
    def text_length(self) -> int:
        """Sum of leaf value lengths in this subtree, ignoring markup."""
        return 0


# =============================================================================
# Leaves
# =============================================================================


@dataclass(frozen=True, slots=True)
class Leaf(ContentNode):
    """A node carrying raw semantic text."""

    value: str

    @property
    def text_length(self) -> int:
        return len(self.value)


@dataclass(frozen=True, slots=True)
class Text(Leaf):
    """Plain text."""


@dataclass(frozen=True, slots=True)
class Symbol(Leaf):
    """Punctuation in a signature, such as ``(`` or ``->``."""


@dataclass(frozen=True, slots=True)
class Keyword(Leaf):
    """A language keyword, such as ``fun `` or ``val ``."""


@dataclass(frozen=True, slots=True)
class Identifier(Leaf):
    """A declared name.

    ``anchor_id`` lets builders attach an element id so other pages can
    link straight to the declaration.

    """

    anchor_id: str | None = None


# =============================================================================
# Containers
# =============================================================================


@dataclass(frozen=True, slots=True)
class Container(ContentNode):
    """A node holding an ordered sequence of children."""

    children: tuple[ContentNode, ...] = field(default=(), kw_only=True)

    @property
    def text_length(self) -> int:
        return sum(child.text_length for child in self.children)


@dataclass(frozen=True, slots=True)
class Block(Container):
    """Neutral grouping with no markup of its own."""


@dataclass(frozen=True, slots=True)
class Paragraph(Container):
    pass


@dataclass(frozen=True, slots=True)
class Header(Container):
    """Section header.

    HTML: <h1>..<h6>
    Markdown: # .. ######

    """

    level: int = 1

    def __post_init__(self) -> None:
        if not 1 <= self.level <= 6:
            raise ValueError(f"Header level must be between 1 and 6, got {self.level}")


@dataclass(frozen=True, slots=True)
class Strong(Container):
    pass


@dataclass(frozen=True, slots=True)
class Emphasis(Container):
    pass


@dataclass(frozen=True, slots=True)
class Strikethrough(Container):
    pass


@dataclass(frozen=True, slots=True)
class Code(Container):
    """Inline code span."""


@dataclass(frozen=True, slots=True)
class UnorderedList(Container):
    pass


@dataclass(frozen=True, slots=True)
class OrderedList(Container):
    pass


@dataclass(frozen=True, slots=True)
class ListItem(Container):
    pass


@dataclass(frozen=True, slots=True)
class BlockCode(Container):
    """Code block with an optional language tag."""

    language: str | None = None


@dataclass(frozen=True, slots=True)
class Table(Container):
    """Table with column headers; children are TableRow nodes."""

    columns: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class TableRow(Container):
    pass


@dataclass(frozen=True, slots=True)
class TableCell(Container):
    pass


@dataclass(frozen=True, slots=True)
class Link(Container):
    """Hyperlink around its children.

    A link whose target is None renders its children unlinked.
    Only the children count towards text_length, never the target.

    """

    target: LinkTarget | None = None


@dataclass(frozen=True, slots=True)
class Signature(Container):
    """A rendered declaration.

    Builders switch soft line breaks to hard breaks inside long signatures.

    """


# =============================================================================
# Markers
# =============================================================================


@dataclass(frozen=True, slots=True)
class Anchor(ContentNode):
    """Named link target inside a page."""

    name: str


@dataclass(frozen=True, slots=True)
class LineBreak(ContentNode):
    """Hard line break, always rendered."""


@dataclass(frozen=True, slots=True)
class SoftLineBreak(ContentNode):
    """Line break rendered only inside long signatures."""


@dataclass(frozen=True, slots=True)
class IndentedSoftLineBreak(ContentNode):
    """Soft line break followed by continuation indentation."""


@dataclass(frozen=True, slots=True)
class NonBreakingSpace(ContentNode):
    pass


@dataclass(frozen=True, slots=True)
class BreadcrumbSeparator(ContentNode):
    pass


# =============================================================================
# Helpers
# =============================================================================


def walk(node: ContentNode) -> Iterator[ContentNode]:
    """Traverse a tree depth-first, yielding the node then its descendants."""
    yield node
    if isinstance(node, Container):
        for child in node.children:
            yield from walk(child)


def plain_text(node: ContentNode) -> str:
    """Concatenate the leaf values of a subtree."""
    return "".join(n.value for n in walk(node) if isinstance(n, Leaf))
