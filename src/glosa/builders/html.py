"""HTML builder using StringBuilder pattern.

Semantic tags for containers, styled spans for signature tokens:

    <span class="keyword">fun </span><span class="identifier">f</span>

Every leaf and attribute value is HTML-escaped; hrefs are percent-encoded
first. The page wrapper comes from an HtmlTemplate.

Thread Safety:
One HtmlBuilder renders one page. Templates are immutable and may be shared.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from glosa.builders.protocol import Body
from glosa.config import RenderConfig, resolve_config
from glosa.stringbuilder import StringBuilder
from glosa.utils.text import encode_url, escape_html


class HtmlTemplate(Protocol):
    """Page header and footer around rendered HTML content."""

    def append_header(self, sb: StringBuilder, title: str) -> None: ...

    def append_footer(self, sb: StringBuilder) -> None: ...


@dataclass(frozen=True, slots=True)
class DefaultHtmlTemplate:
    """Minimal HTML5 document with an optional stylesheet link."""

    stylesheet: str | None = None

    def append_header(self, sb: StringBuilder, title: str) -> None:
        sb.append_line("<!DOCTYPE html>")
        sb.append_line("<html>")
        sb.append_line("<head>")
        sb.append_line('<meta charset="UTF-8">')
        sb.append_line(f"<title>{escape_html(title)}</title>")
        if self.stylesheet:
            sb.append_line(
                f'<link rel="stylesheet" href="{escape_html(encode_url(self.stylesheet))}">'
            )
        sb.append_line("</head>")
        sb.append_line("<body>")

    def append_footer(self, sb: StringBuilder) -> None:
        sb.append_line("</body>")
        sb.append_line("</html>")


class HtmlBuilder:
    """Render content to HTML.

    Usage:
        >>> b = HtmlBuilder()
        >>> b.append_strong(lambda: b.append_text("a < b"))
        >>> b.build()
        '<strong>a &lt; b</strong>'

    """

    __slots__ = ("_sb", "_template")

    def __init__(
        self,
        template: HtmlTemplate | None = None,
        *,
        config: RenderConfig | None = None,
        output: StringBuilder | None = None,
    ) -> None:
        self._sb = output if output is not None else StringBuilder()
        self._template = template or DefaultHtmlTemplate(
            stylesheet=resolve_config(config).stylesheet
        )

    def _wrap(self, open_tag: str, close_tag: str, body: Body) -> None:
        self._sb.append(open_tag)
        body()
        self._sb.append(close_tag)

    def _wrap_in_tag(self, tag: str, body: Body, newline: bool = False) -> None:
        self._wrap(f"<{tag}>", f"</{tag}>\n" if newline else f"</{tag}>", body)

    # =========================================================================
    # Leaves
    # =========================================================================

    def append_text(self, text: str) -> None:
        self._sb.append(escape_html(text))

    def append_symbol(self, text: str) -> None:
        self._sb.append(f'<span class="symbol">{escape_html(text)}</span>')

    def append_keyword(self, text: str) -> None:
        self._sb.append(f'<span class="keyword">{escape_html(text)}</span>')

    def append_identifier(self, text: str, anchor_id: str | None = None) -> None:
        id_attr = f' id="{escape_html(anchor_id)}"' if anchor_id else ""
        self._sb.append(f'<span class="identifier"{id_attr}>{escape_html(text)}</span>')

    # =========================================================================
    # Markers
    # =========================================================================

    def append_line(self) -> None:
        self._sb.append("<br/>")

    def append_soft_line_break(self) -> None:
        self._sb.append("<br/>")

    def append_indented_soft_line_break(self) -> None:
        self._sb.append("<br/>&nbsp;&nbsp;&nbsp;&nbsp;")

    def append_anchor(self, name: str) -> None:
        self._sb.append(f'<a name="{escape_html(name)}"></a>')

    def append_non_breaking_space(self) -> None:
        self._sb.append("&nbsp;")

    def append_breadcrumb_separator(self) -> None:
        self._sb.append("&nbsp;/&nbsp;")

    # =========================================================================
    # Containers
    # =========================================================================

    def append_paragraph(self, body: Body) -> None:
        self._wrap_in_tag("p", body, newline=True)

    def append_header(self, level: int, body: Body) -> None:
        self._wrap_in_tag(f"h{level}", body, newline=True)

    def append_unordered_list(self, body: Body) -> None:
        self._wrap("<ul>\n", "</ul>\n", body)

    def append_ordered_list(self, body: Body) -> None:
        self._wrap("<ol>\n", "</ol>\n", body)

    def append_list_item(self, body: Body) -> None:
        self._wrap_in_tag("li", body, newline=True)

    def append_table(self, columns: Sequence[str], body: Body) -> None:
        sb = self._sb
        sb.append("<table>\n")
        if columns:
            sb.append("<thead><tr>")
            for column in columns:
                sb.append(f"<th>{escape_html(column)}</th>")
            sb.append("</tr></thead>\n")
        sb.append("<tbody>\n")
        body()
        sb.append("</tbody>\n")
        sb.append("</table>\n")

    def append_table_row(self, body: Body) -> None:
        self._wrap_in_tag("tr", body, newline=True)

    def append_table_cell(self, body: Body) -> None:
        self._wrap_in_tag("td", body)

    def append_link(self, href: str, body: Body) -> None:
        self._wrap(f'<a href="{escape_html(encode_url(href))}">', "</a>", body)

    def append_strong(self, body: Body) -> None:
        self._wrap_in_tag("strong", body)

    def append_emphasis(self, body: Body) -> None:
        self._wrap_in_tag("em", body)

    def append_strikethrough(self, body: Body) -> None:
        self._wrap_in_tag("s", body)

    def append_code(self, body: Body) -> None:
        self._wrap_in_tag("code", body)

    def append_block_code(self, language: str | None, body: Body) -> None:
        if language and language.strip():
            open_tags = f'<pre><code class="lang-{escape_html(language.strip())}">'
        else:
            open_tags = "<pre><code>"
        self._wrap(open_tags, "</code></pre>\n", body)

    def append_signature(self, body: Body) -> None:
        body()

    # =========================================================================
    # Page
    # =========================================================================

    def append_page(self, title: str, body: Body) -> None:
        self._template.append_header(self._sb, title)
        body()
        self._template.append_footer(self._sb)

    def build(self) -> str:
        return self._sb.build()
