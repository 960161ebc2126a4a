"""Exception classes for Glosa.

Provides standardized exceptions for error handling throughout Glosa.

Fatal conditions (a structural rule applied to the wrong kind of node, a
required detail missing from the input model) propagate to the caller.
Recoverable conditions (unknown node kinds, links without a target) are
handled where they occur and never raise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from glosa.model import DocumentationNode, NodeKind


class GlosaError(Exception):
    """Base exception for all Glosa errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(GlosaError):
    """Error during signature or output rendering.

    Raised when a renderer encounters a node it cannot render
    or fails to produce valid output.
    """

    pass


class DispatchMismatchError(RenderError):
    """A structural rendering rule was applied to a node of the wrong kind.

    Indicates a dispatch bug upstream, never a user-recoverable condition.
    """

    def __init__(self, node: DocumentationNode, rule: str) -> None:
        """Initialize dispatch mismatch error.

        Args:
            node: The node that was passed to the rule
            rule: Description of the rule (e.g., "class-like")
        """
        self.node = node
        self.rule = rule
        super().__init__(
            f"{node.kind.value} node {node.name!r} is not a {rule} declaration"
        )


class MissingDetailError(DispatchMismatchError):
    """A required singular detail is absent from a declaration node.

    Empty detail lists are normal; an absent required detail means the
    upstream model builder produced malformed input.
    """

    def __init__(self, node: DocumentationNode, role: NodeKind | str) -> None:
        """Initialize missing detail error.

        Args:
            node: The node missing the detail
            role: The detail role that was required
        """
        self.node = node
        self.role = role
        label = getattr(role, "value", role)
        RenderError.__init__(
            self,
            f"{node.kind.value} node {node.name!r} has no required {label} detail",
        )


class UnsupportedNodeKindError(RenderError):
    """No rendering rule exists for a node kind.

    Only raised in strict mode; by default unknown kinds render as
    plain text.
    """

    def __init__(self, kind: NodeKind, name: str) -> None:
        self.kind = kind
        self.name = name
        super().__init__(f"No rendering rule for {kind.value} node {name!r}")


class ContentError(GlosaError):
    """Error when building a content tree.

    Raised on construction misuse such as building while a
    container is still open.
    """

    pass


class UnknownFormatError(GlosaError):
    """Requested output format is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown output format {name!r}. Available: {', '.join(sorted(available))}"
        )
