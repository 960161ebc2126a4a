"""Glosa output builders.

Builders serialize content trees into concrete markup dialects.

Available Builders:
- HtmlBuilder: HTML with semantic tags and styled signature spans
- MarkdownBuilder: GitHub-flavored Markdown
- FrontMatterBuilder: Markdown with a front-matter block for static sites

Thread Safety:
A builder owns one page's buffer. Create one builder per page; pages may be
rendered in parallel with independent builders.

"""

from collections.abc import Callable

from glosa.builders.base import RenderContext, StructuredOutput
from glosa.builders.delegating import DelegatingBuilder
from glosa.builders.frontmatter import FrontMatterBuilder
from glosa.builders.html import DefaultHtmlTemplate, HtmlBuilder, HtmlTemplate
from glosa.builders.markdown import MarkdownBuilder
from glosa.builders.protocol import Body, OutputBuilder
from glosa.config import RenderConfig
from glosa.errors import UnknownFormatError

BuilderFactory = Callable[[RenderConfig | None], OutputBuilder]

BUILDERS: dict[str, BuilderFactory] = {
    "html": lambda config: HtmlBuilder(config=config),
    "markdown": lambda config: MarkdownBuilder(),
    "gfm": lambda config: MarkdownBuilder(),
    "frontmatter": lambda config: FrontMatterBuilder(config=config),
    "hexo": lambda config: FrontMatterBuilder(config=config),
}


def create_builder(name: str, config: RenderConfig | None = None) -> OutputBuilder:
    """Create a fresh builder for the named format.

    Raises:
        UnknownFormatError: If no builder is registered under ``name``
    """
    factory = BUILDERS.get(name)
    if factory is None:
        raise UnknownFormatError(name, list(BUILDERS))
    return factory(config)


__all__ = [
    "BUILDERS",
    "Body",
    "DefaultHtmlTemplate",
    "DelegatingBuilder",
    "FrontMatterBuilder",
    "HtmlBuilder",
    "HtmlTemplate",
    "MarkdownBuilder",
    "OutputBuilder",
    "RenderContext",
    "StructuredOutput",
    "create_builder",
]
