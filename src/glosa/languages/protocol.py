"""LanguageService protocol, the stable interface for signature renderers.

Any renderer that turns a declaration node into a content tree conforms
to this protocol. ``KotlinLanguageService`` is the reference implementation.

Example:
    from glosa.languages.protocol import LanguageService

    def signature_of(language: LanguageService, node: DocumentationNode) -> Signature:
        return Signature(children=(language.render(node),))

"""

from typing import Protocol

from glosa.model import DocumentationNode
from glosa.nodes import ContentNode


class LanguageService(Protocol):
    """Protocol for signature renderers."""

    def render(self, node: DocumentationNode) -> ContentNode:
        """Render a declaration node to a content tree fragment."""
        ...

    def render_name(self, node: DocumentationNode) -> str:
        """Return the display name of a declaration node."""
        ...
