"""
Glosa: structured documentation rendering for API reference pages.

A format-agnostic content tree, a Kotlin signature renderer that rebuilds
declaration syntax from structural metadata, and output builders for HTML,
GitHub-flavored Markdown and front-matter Markdown.

Quick Start:
    >>> from glosa import DocumentationNode, KotlinLanguageService, NodeKind
    >>> from glosa import plain_text, render_page, signature
    >>> cls = DocumentationNode("Box", NodeKind.CLASS)
    >>> _ = cls.append(DocumentationNode("T", NodeKind.TYPE_PARAMETER))
    >>> kotlin = KotlinLanguageService()
    >>> plain_text(signature(cls, kotlin))
    'class Box<T> '
    >>> render_page([signature(cls, kotlin)], format="html", title="Box")[:15]
    '<!DOCTYPE html>'

Output Formats:
    html         HTML fragments inside a page template
    markdown     GitHub-flavored Markdown (alias: gfm)
    frontmatter  Markdown with ``layout: api`` front matter (alias: hexo)
"""

from glosa.builders import (
    BUILDERS,
    DefaultHtmlTemplate,
    DelegatingBuilder,
    FrontMatterBuilder,
    HtmlBuilder,
    HtmlTemplate,
    MarkdownBuilder,
    OutputBuilder,
    StructuredOutput,
    create_builder,
)
from glosa.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from glosa.content import ContentBuilder, content
from glosa.errors import (
    ContentError,
    DispatchMismatchError,
    GlosaError,
    MissingDetailError,
    RenderError,
    UnknownFormatError,
    UnsupportedNodeKindError,
)
from glosa.languages import KotlinLanguageService, LanguageService
from glosa.location import FileLocation, LinkTarget, Location, resolve_href
from glosa.model import DocumentationNode, NodeKind
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
    Leaf,
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
    plain_text,
    walk,
)
from glosa.pages import node_title, page_title, render_page, signature
from glosa.sourcelinks import SourceLinkDefinition, source_position, source_url
from glosa.utils.logger import setup_logging

__version__ = "0.1.0"

__all__ = [
    # Content tree
    "Anchor",
    "Block",
    "BlockCode",
    "BreadcrumbSeparator",
    "Code",
    "Container",
    "ContentNode",
    "Emphasis",
    "Header",
    "Identifier",
    "IndentedSoftLineBreak",
    "Keyword",
    "Leaf",
    "LineBreak",
    "Link",
    "ListItem",
    "NonBreakingSpace",
    "OrderedList",
    "Paragraph",
    "Signature",
    "SoftLineBreak",
    "Strikethrough",
    "Strong",
    "Symbol",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "UnorderedList",
    "plain_text",
    "walk",
    # Construction
    "ContentBuilder",
    "content",
    # Declaration model
    "DocumentationNode",
    "NodeKind",
    # Languages
    "KotlinLanguageService",
    "LanguageService",
    # Links
    "FileLocation",
    "LinkTarget",
    "Location",
    "resolve_href",
    # Builders
    "BUILDERS",
    "DefaultHtmlTemplate",
    "DelegatingBuilder",
    "FrontMatterBuilder",
    "HtmlBuilder",
    "HtmlTemplate",
    "MarkdownBuilder",
    "OutputBuilder",
    "StructuredOutput",
    "create_builder",
    # Pages
    "node_title",
    "page_title",
    "render_page",
    "signature",
    # Source links
    "SourceLinkDefinition",
    "source_position",
    "source_url",
    # Config
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
    # Errors
    "ContentError",
    "DispatchMismatchError",
    "GlosaError",
    "MissingDetailError",
    "RenderError",
    "UnknownFormatError",
    "UnsupportedNodeKindError",
    # Logging
    "setup_logging",
    "__version__",
]
