"""Semantic declaration model consumed by signature renderers.

An upstream model builder (symbol extraction, cross-reference resolution)
produces a tree of DocumentationNode objects. Each node has a kind, a name,
ordered detail nodes keyed by role and zero or more resolved link targets.

Key invariant: the owner relation is weak. A node never keeps its owner
alive; ``owner`` is a lookup that returns None once the owner is gone.
"""

from __future__ import annotations

import weakref
from collections.abc import Iterable, Iterator
from enum import Enum

from glosa.errors import MissingDetailError
from glosa.location import LinkTarget


class NodeKind(Enum):
    """Kind of a declaration node; values are display names."""

    MODULE = "Module"
    PACKAGE = "Package"
    CLASS = "Class"
    INTERFACE = "Interface"
    ENUM = "Enum"
    ENUM_ITEM = "EnumItem"
    OBJECT = "Object"
    TYPE_PARAMETER = "TypeParameter"
    TYPE = "Type"
    UPPER_BOUND = "UpperBound"
    SUPERTYPE = "Supertype"
    MODIFIER = "Modifier"
    CONSTRUCTOR = "Constructor"
    FUNCTION = "Function"
    PROPERTY = "Property"
    PARAMETER = "Parameter"
    RECEIVER = "Receiver"
    ANNOTATION = "Annotation"
    EXTERNAL_CLASS = "ExternalClass"
    SOURCE_URL = "SourceUrl"
    SOURCE_POSITION = "SourcePosition"


class DocumentationNode:
    """A declaration and its details."""

    __slots__ = ("name", "kind", "links", "_details", "_owner", "__weakref__")

    def __init__(
        self,
        name: str,
        kind: NodeKind,
        links: Iterable[LinkTarget] = (),
    ) -> None:
        self.name = name
        self.kind = kind
        self.links: list[LinkTarget] = list(links)
        self._details: list[DocumentationNode] = []
        self._owner: weakref.ref[DocumentationNode] | None = None

    def __repr__(self) -> str:
        return f"DocumentationNode({self.name!r}, {self.kind})"

    @property
    def owner(self) -> DocumentationNode | None:
        """The declaration this node belongs to, if it is still alive."""
        if self._owner is None:
            return None
        return self._owner()

    def append(self, child: DocumentationNode) -> DocumentationNode:
        """Attach a detail node and return it for chaining."""
        child._owner = weakref.ref(self)
        self._details.append(child)
        return child

    def details(self, kind: NodeKind) -> list[DocumentationNode]:
        """All details with the given role, in declaration order."""
        return [d for d in self._details if d.kind is kind]

    def detail(self, kind: NodeKind) -> DocumentationNode:
        """The single required detail with the given role.

        Raises:
            MissingDetailError: If the node has no such detail
        """
        for d in self._details:
            if d.kind is kind:
                return d
        raise MissingDetailError(self, kind)

    @property
    def all_details(self) -> tuple[DocumentationNode, ...]:
        return tuple(self._details)

    @property
    def first_link(self) -> LinkTarget | None:
        return self.links[0] if self.links else None

    @property
    def path(self) -> list[DocumentationNode]:
        """Owner chain from the root down to this node."""
        chain: list[DocumentationNode] = []
        node: DocumentationNode | None = self
        while node is not None:
            chain.append(node)
            node = node.owner
        chain.reverse()
        return chain

    def depth_first(self) -> Iterator[DocumentationNode]:
        """Traverse details depth-first, yielding self first."""
        yield self
        for d in self._details:
            yield from d.depth_first()
