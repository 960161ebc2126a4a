"""Front-matter Markdown builder for static-site generators.

Wraps a MarkdownBuilder and changes only what the site theme needs:

    ---
    title: kotlin.collections / List
    layout: api
    ---

    <div class="signature"><span class="keyword">val </span>...</div>

Signatures are wrapped in a styling div. Markdown is not parsed inside an
HTML block, so everything inside a signature is rendered by an HtmlBuilder
writing into the same buffer. Outside signatures, symbol, keyword and
identifier leaves still use the HTML span convention with Markdown-escaped
text; all other markup comes from the wrapped MarkdownBuilder.

Table cells are inline Markdown, so a signature inside a cell becomes a
``<span class="signature">`` whose content takes the Markdown-escaped path
used outside signatures.
"""

from __future__ import annotations

import re

from glosa.builders.delegating import DelegatingBuilder
from glosa.builders.html import HtmlBuilder
from glosa.builders.markdown import MarkdownBuilder
from glosa.builders.protocol import Body, OutputBuilder
from glosa.config import RenderConfig, resolve_config
from glosa.utils.text import escape_html, escape_markdown

_YAML_UNSAFE = re.compile(r"""[:#\[\]{}"'&*!|>%@`,]|^[-?\s]|\s$""")


def _yaml_scalar(value: str) -> str:
    """Quote a front-matter value when plain YAML would misread it."""
    if value and not _YAML_UNSAFE.search(value):
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class FrontMatterBuilder(DelegatingBuilder):
    """Markdown with a front-matter block and HTML signature markup.

    Usage:
        >>> b = FrontMatterBuilder()
        >>> b.append_page("List", lambda: b.append_keyword("val "))
        >>> print(b.build())
        ---
        title: List
        layout: api
        ---
        <BLANKLINE>
        <span class="keyword">val </span>

    """

    __slots__ = ("_markdown", "_html", "_signatures", "_layout")

    def __init__(self, *, config: RenderConfig | None = None) -> None:
        markdown = MarkdownBuilder()
        super().__init__(markdown)
        self._markdown = markdown
        self._html = HtmlBuilder(config=config, output=markdown.output)
        self._signatures = 0
        self._layout = resolve_config(config).front_matter_layout

    def _target(self) -> OutputBuilder:
        if self._in_html():
            return self._html
        return self._markdown

    def _in_html(self) -> bool:
        md = self._markdown
        return bool(self._signatures) and not md.in_verbatim and not md.in_table_cell

    def _outside_signature(self) -> bool:
        return not self._in_html() and not self._markdown.in_verbatim

    def _span(self, css_class: str, text: str) -> None:
        self._markdown.output.append(f'<span class="{css_class}">{escape_markdown(text)}</span>')

    # =========================================================================
    # Leaves
    # =========================================================================

    def append_symbol(self, text: str) -> None:
        if self._outside_signature():
            self._span("symbol", text)
        else:
            self._target().append_symbol(text)

    def append_keyword(self, text: str) -> None:
        if self._outside_signature():
            self._span("keyword", text)
        else:
            self._target().append_keyword(text)

    def append_identifier(self, text: str, anchor_id: str | None = None) -> None:
        if self._outside_signature():
            id_attr = f' id="{escape_html(anchor_id)}"' if anchor_id else ""
            self._markdown.output.append(
                f'<span class="identifier"{id_attr}>{escape_markdown(text)}</span>'
            )
        else:
            self._target().append_identifier(text, anchor_id)

    # =========================================================================
    # Markers
    # =========================================================================

    def append_soft_line_break(self) -> None:
        if self._markdown.in_verbatim:
            self._markdown.append_soft_line_break()
        else:
            self._markdown.output.append("<br/>")

    def append_indented_soft_line_break(self) -> None:
        if self._markdown.in_verbatim:
            self._markdown.append_indented_soft_line_break()
        else:
            self._markdown.output.append("<br/>&nbsp;&nbsp;&nbsp;&nbsp;")

    # =========================================================================
    # Containers
    # =========================================================================

    def append_signature(self, body: Body) -> None:
        sb = self._markdown.output
        if self._markdown.in_verbatim:
            body()
            return
        inline = self._markdown.in_table_cell
        if inline:
            # Cells are inline Markdown; a block div would end the table row
            sb.append('<span class="signature">')
        else:
            if sb and not sb.ends_with_newline():
                sb.append("\n")
            sb.append('<div class="signature">')
        self._signatures += 1
        try:
            body()
        finally:
            self._signatures -= 1
        sb.append("</span>" if inline else "</div>\n\n")

    # =========================================================================
    # Page
    # =========================================================================

    def append_page(self, title: str, body: Body) -> None:
        sb = self._markdown.output
        sb.append_line("---")
        sb.append_line(f"title: {_yaml_scalar(title)}")
        sb.append_line(f"layout: {self._layout}")
        sb.append_line("---")
        sb.append_line()
        self._markdown.append_page(title, body)
