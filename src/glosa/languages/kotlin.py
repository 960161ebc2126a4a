"""Kotlin signature renderer.

Rebuilds Kotlin declaration syntax from structural metadata: modifiers,
type parameters with bounds, receivers, supertypes and functional types
(``(A, B) -> C`` and ``R.(A) -> B``).

Dispatch:
Every declaration kind maps to one rule. Kinds without a rule render as
plain ``"<kind>: <name>"`` text, or raise UnsupportedNodeKindError when
``RenderConfig.strict_node_kinds`` is set. Applying a structural rule to
the wrong kind raises DispatchMismatchError.

Thread Safety:
Each render() call builds its own ContentBuilder. Safe to share one
KotlinLanguageService across threads.

"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from glosa.config import RenderConfig, resolve_config
from glosa.content import ContentBuilder
from glosa.errors import DispatchMismatchError, MissingDetailError, UnsupportedNodeKindError
from glosa.model import DocumentationNode, NodeKind
from glosa.nodes import Block
from glosa.utils.logger import get_logger

logger = get_logger(__name__)

# Modifiers implied by Kotlin defaults
SUPPRESSED_MODIFIERS = frozenset({"final", "internal"})

CLASS_KEYWORDS: dict[NodeKind, str] = {
    NodeKind.CLASS: "class ",
    NodeKind.INTERFACE: "trait ",
    NodeKind.ENUM: "enum class ",
    NodeKind.ENUM_ITEM: "enum val ",
    NodeKind.OBJECT: "object ",
}


class KotlinLanguageService:
    """Render declaration nodes as Kotlin signatures.

    Usage:
        >>> fn = DocumentationNode("f", NodeKind.FUNCTION)
        >>> param = fn.append(DocumentationNode("x", NodeKind.PARAMETER))
        >>> _ = param.append(DocumentationNode("Int", NodeKind.TYPE))
        >>> _ = fn.append(DocumentationNode("Unit", NodeKind.TYPE))
        >>> from glosa.nodes import plain_text
        >>> plain_text(KotlinLanguageService().render(fn))
        'fun f(x: Int): Unit'

    """

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None) -> None:
        self._config = config

    def render(self, node: DocumentationNode) -> Block:
        """Render a declaration node to a content fragment.

        Raises:
            DispatchMismatchError: If the input model is malformed
            UnsupportedNodeKindError: For unknown kinds in strict mode
        """
        c = ContentBuilder()
        match node.kind:
            case NodeKind.PACKAGE:
                self._render_package(c, node)
            case (
                NodeKind.CLASS
                | NodeKind.INTERFACE
                | NodeKind.ENUM
                | NodeKind.ENUM_ITEM
                | NodeKind.OBJECT
            ):
                self._render_class(c, node)
            case NodeKind.TYPE_PARAMETER:
                self._render_type_parameter(c, node)
            case NodeKind.TYPE | NodeKind.UPPER_BOUND | NodeKind.SUPERTYPE:
                self._render_type(c, node)
            case NodeKind.MODIFIER:
                self._render_modifier(c, node)
            case NodeKind.CONSTRUCTOR | NodeKind.FUNCTION:
                self._render_function(c, node)
            case NodeKind.PROPERTY:
                self._render_property(c, node)
            case _:
                if resolve_config(self._config).strict_node_kinds:
                    raise UnsupportedNodeKindError(node.kind, node.name)
                logger.debug(
                    "No signature rule for %s %r, rendering as text",
                    node.kind.value,
                    node.name,
                )
                c.text(f"{node.kind.value}: {node.name}")
        return c.build()

    def render_name(self, node: DocumentationNode) -> str:
        """Display name; constructors are named after their owner."""
        if node.kind is NodeKind.CONSTRUCTOR:
            return self._owner_of(node).name
        return node.name

    # =========================================================================
    # Helpers
    # =========================================================================

    def _owner_of(self, node: DocumentationNode) -> DocumentationNode:
        owner = node.owner
        if owner is None:
            raise MissingDetailError(node, "owner")
        return owner

    def _render_list(
        self,
        c: ContentBuilder,
        nodes: Sequence[DocumentationNode],
        render_item: Callable[[ContentBuilder, DocumentationNode], None],
        separator: str = ", ",
    ) -> None:
        for i, item in enumerate(nodes):
            if i:
                c.symbol(separator)
            render_item(c, item)

    def _render_linked(self, c: ContentBuilder, node: DocumentationNode) -> None:
        target = node.first_link
        if target is None:
            c.identifier(node.name)
        else:
            with c.link(target):
                c.identifier(node.name)

    def _render_receiver(self, c: ContentBuilder, node: DocumentationNode) -> None:
        receivers = node.details(NodeKind.RECEIVER)
        if not receivers:
            return
        if len(receivers) > 1:
            raise DispatchMismatchError(node, "single-receiver")
        self._render_type(c, receivers[0].detail(NodeKind.TYPE))
        c.symbol(".")

    # =========================================================================
    # Rules
    # =========================================================================

    def _render_package(self, c: ContentBuilder, node: DocumentationNode) -> None:
        c.keyword("package")
        c.text(" ")
        c.identifier(node.name)

    def _render_type(self, c: ContentBuilder, node: DocumentationNode) -> None:
        arguments = node.details(NodeKind.TYPE)
        count = len(arguments)

        if node.name == f"Function{count - 1}":
            # (A, B) -> R
            c.symbol("(")
            self._render_list(c, arguments[:-1], self._render_type)
            c.symbol(")")
            self._render_arrow(c, arguments[-1])
            return

        if count >= 2 and node.name == f"ExtensionFunction{count - 2}":
            # R.(A, B) -> T
            self._render_type(c, arguments[0])
            c.symbol(".")
            c.symbol("(")
            self._render_list(c, arguments[1:-1], self._render_type)
            c.symbol(")")
            self._render_arrow(c, arguments[-1])
            return

        self._render_linked(c, node)
        if arguments:
            c.symbol("<")
            self._render_list(c, arguments, self._render_type)
            c.symbol(">")

    def _render_arrow(self, c: ContentBuilder, return_type: DocumentationNode) -> None:
        c.text(" ")
        c.symbol("->")
        c.text(" ")
        self._render_type(c, return_type)

    def _render_modifier(self, c: ContentBuilder, node: DocumentationNode) -> None:
        if node.name not in SUPPRESSED_MODIFIERS:
            c.keyword(node.name)

    def _render_type_parameter(self, c: ContentBuilder, node: DocumentationNode) -> None:
        c.identifier(node.name)
        constraints = node.details(NodeKind.UPPER_BOUND)
        if constraints:
            c.symbol(" : ")
            self._render_list(c, constraints, self._render_type)

    def _render_parameter(self, c: ContentBuilder, node: DocumentationNode) -> None:
        c.identifier(node.name)
        c.symbol(": ")
        self._render_type(c, node.detail(NodeKind.TYPE))

    def _render_type_parameters_for_node(self, c: ContentBuilder, node: DocumentationNode) -> None:
        type_parameters = node.details(NodeKind.TYPE_PARAMETER)
        if type_parameters:
            c.symbol("<")
            # Declaration lists show names only; bounds belong to the type parameter rule
            self._render_list(c, type_parameters, self._render_type)
            c.symbol("> ")

    def _render_supertypes_for_node(self, c: ContentBuilder, node: DocumentationNode) -> None:
        supertypes = node.details(NodeKind.SUPERTYPE)
        if supertypes:
            c.symbol(" : ")
            self._render_list(c, supertypes, self._render_type)

    def _render_modifiers_for_node(self, c: ContentBuilder, node: DocumentationNode) -> None:
        for modifier in node.details(NodeKind.MODIFIER):
            if modifier.name in SUPPRESSED_MODIFIERS:
                continue
            # Interfaces are implicitly abstract
            if node.kind is NodeKind.INTERFACE and modifier.name == "abstract":
                continue
            self._render_modifier(c, modifier)
            c.text(" ")

    def _render_class(self, c: ContentBuilder, node: DocumentationNode) -> None:
        keyword = CLASS_KEYWORDS.get(node.kind)
        if keyword is None:
            raise DispatchMismatchError(node, "class-like")

        self._render_modifiers_for_node(c, node)
        c.keyword(keyword)
        c.identifier(node.name)
        self._render_type_parameters_for_node(c, node)
        self._render_supertypes_for_node(c, node)

    def _render_function(self, c: ContentBuilder, node: DocumentationNode) -> None:
        if node.kind not in (NodeKind.CONSTRUCTOR, NodeKind.FUNCTION):
            raise DispatchMismatchError(node, "function-like")
        is_function = node.kind is NodeKind.FUNCTION

        self._render_modifiers_for_node(c, node)
        if is_function:
            c.keyword("fun ")
        else:
            c.identifier(self._owner_of(node).name)
        self._render_type_parameters_for_node(c, node)
        self._render_receiver(c, node)

        if is_function:
            c.identifier(node.name)

        c.symbol("(")
        self._render_list(c, node.details(NodeKind.PARAMETER), self._render_parameter)
        c.symbol(")")
        if is_function:
            c.symbol(": ")
            self._render_type(c, node.detail(NodeKind.TYPE))

    def _render_property(self, c: ContentBuilder, node: DocumentationNode) -> None:
        if node.kind is not NodeKind.PROPERTY:
            raise DispatchMismatchError(node, "property")

        self._render_modifiers_for_node(c, node)
        c.keyword("val ")
        self._render_type_parameters_for_node(c, node)
        self._render_receiver(c, node)
        c.identifier(node.name)
        c.symbol(": ")
        self._render_type(c, node.detail(NodeKind.TYPE))
