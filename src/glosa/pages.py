"""Page assembly helpers.

The page generator that decides which declarations land on which page lives
outside Glosa. These helpers cover the two things it needs from the core:
a page title computed from the declarations on the page, and the finished
page text for a chosen output format.

Example:
    >>> from glosa.pages import render_page
    >>> from glosa.nodes import Paragraph, Text
    >>> render_page([Paragraph(children=(Text("Hello"),))], format="markdown", title="Hi")
    'Hello\\n\\n'

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from glosa.builders import StructuredOutput, create_builder
from glosa.config import RenderConfig, resolve_config
from glosa.languages.protocol import LanguageService
from glosa.location import Location
from glosa.model import DocumentationNode
from glosa.nodes import ContentNode, Signature


def node_title(node: DocumentationNode, language: LanguageService) -> str:
    """Owner path of a node rendered as ``a / b / c``, skipping unnamed entries."""
    names = (language.render_name(n) for n in node.path)
    return " / ".join(name for name in names if name)


def page_title(nodes: Iterable[DocumentationNode], language: LanguageService) -> str:
    """Title for a page showing ``nodes``; distinct titles joined by ``, ``."""
    titles: list[str] = []
    for node in nodes:
        title = node_title(node, language)
        if title and title not in titles:
            titles.append(title)
    return ", ".join(titles)


def signature(node: DocumentationNode, language: LanguageService) -> Signature:
    """Render a declaration and wrap it as a signature container."""
    return Signature(children=(language.render(node),))


def render_page(
    contents: Sequence[ContentNode],
    *,
    format: str,
    title: str,
    location: Location | None = None,
    config: RenderConfig | None = None,
) -> str:
    """Render content trees into one finished page.

    Args:
        contents: Top-level content trees, in page order
        format: Registered builder name (``html``, ``markdown``, ``frontmatter``)
        title: Page title
        location: Location of the page, for relative links
        config: Render config; defaults to the active context config

    Returns:
        The page text

    Raises:
        UnknownFormatError: If ``format`` is not registered
    """
    config = resolve_config(config)
    builder = create_builder(format, config)
    return StructuredOutput(builder, location, config).render_page(title, contents)
