"""GitHub-flavored Markdown builder.

Containers whose syntax depends on their rendered content (list items,
tables, code spans, code blocks) render their body first, then take the
text back from the StringBuilder and emit the final Markdown around it.

Escaping:
Leaf text is escaped conservatively with escape_markdown: backslash before
``\\``, `````, ``*``, ``_``, ``[``, ``]``, ``|`` and HTML entities for
``&``, ``<``, ``>``, ``"``. Inside code spans and code blocks text is
emitted verbatim, since backslash escapes are literal there.

Thread Safety:
One MarkdownBuilder renders one page.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from glosa.builders.protocol import Body
from glosa.stringbuilder import StringBuilder
from glosa.utils.text import encode_url, escape_html, escape_markdown, longest_run

INDENT = "&nbsp;" * 4


@dataclass(slots=True)
class _ListState:
    ordered: bool
    counter: int = 0


@dataclass(slots=True)
class _TableState:
    rows: list[list[str]] = field(default_factory=list)
    current: list[str] | None = None


class MarkdownBuilder:
    """Render content to GitHub-flavored Markdown.

    Usage:
        >>> b = MarkdownBuilder()
        >>> b.append_header(2, lambda: b.append_text("Map<K, V>"))
        >>> b.build()
        '## Map&lt;K, V&gt;\\n\\n'

    """

    __slots__ = ("_sb", "_verbatim", "_cells", "_lists", "_tables")

    def __init__(self, *, output: StringBuilder | None = None) -> None:
        self._sb = output if output is not None else StringBuilder()
        self._verbatim = 0
        self._cells = 0
        self._lists: list[_ListState] = []
        self._tables: list[_TableState] = []

    @property
    def output(self) -> StringBuilder:
        """The buffer this builder writes to."""
        return self._sb

    @property
    def in_verbatim(self) -> bool:
        """True inside code spans and code blocks."""
        return self._verbatim > 0

    @property
    def in_table_cell(self) -> bool:
        """True while a table cell body is rendering; cells are single lines."""
        return self._cells > 0

    # =========================================================================
    # Helpers
    # =========================================================================

    def _capture(self, body: Body) -> str:
        mark = self._sb.mark()
        body()
        return self._sb.pop_since(mark)

    def _capture_verbatim(self, body: Body) -> str:
        self._verbatim += 1
        try:
            return self._capture(body)
        finally:
            self._verbatim -= 1

    def _ensure_line_start(self) -> None:
        if self._sb and not self._sb.ends_with_newline():
            self._sb.append("\n")

    def _leaf(self, text: str) -> None:
        self._sb.append(text if self._verbatim else escape_markdown(text))

    def _delimited(self, delimiter: str, body: Body) -> None:
        if self._verbatim:
            body()
            return
        text = self._capture(body)
        core = text.strip()
        if not core:
            self._sb.append(text)
            return
        # Delimiters must touch non-whitespace to open and close
        start = len(text) - len(text.lstrip())
        lead, trail = text[:start], text[start + len(core) :]
        self._sb.append(f"{lead}{delimiter}{core}{delimiter}{trail}")

    # =========================================================================
    # Leaves
    # =========================================================================

    def append_text(self, text: str) -> None:
        self._leaf(text)

    def append_symbol(self, text: str) -> None:
        self._leaf(text)

    def append_keyword(self, text: str) -> None:
        self._leaf(text)

    def append_identifier(self, text: str, anchor_id: str | None = None) -> None:
        self._leaf(text)

    # =========================================================================
    # Markers
    # =========================================================================

    def append_line(self) -> None:
        if self._verbatim:
            self._sb.append("\n")
        elif self._cells:
            self._sb.append("<br/>")
        else:
            self._sb.append("\\\n")

    def append_soft_line_break(self) -> None:
        self.append_line()

    def append_indented_soft_line_break(self) -> None:
        self.append_line()
        self._sb.append("    " if self._verbatim else INDENT)

    def append_anchor(self, name: str) -> None:
        if not self._verbatim:
            self._sb.append(f'<a name="{escape_html(name)}"></a>')

    def append_non_breaking_space(self) -> None:
        self._sb.append(" " if self._verbatim else "&nbsp;")

    def append_breadcrumb_separator(self) -> None:
        self._sb.append(" / ")

    # =========================================================================
    # Block containers
    # =========================================================================

    def append_paragraph(self, body: Body) -> None:
        self._ensure_line_start()
        text = self._capture(body).strip("\n")
        if text:
            self._sb.append(text).append("\n\n")

    def append_header(self, level: int, body: Body) -> None:
        self._ensure_line_start()
        text = " ".join(self._capture(body).split("\n")).strip()
        self._sb.append(f"{'#' * level} {text}\n\n")

    def append_unordered_list(self, body: Body) -> None:
        self._append_list(_ListState(ordered=False), body)

    def append_ordered_list(self, body: Body) -> None:
        self._append_list(_ListState(ordered=True), body)

    def _append_list(self, state: _ListState, body: Body) -> None:
        self._ensure_line_start()
        self._lists.append(state)
        try:
            body()
        finally:
            self._lists.pop()
        self._sb.append("\n")

    def append_list_item(self, body: Body) -> None:
        state = self._lists[-1] if self._lists else None
        if state is not None and state.ordered:
            state.counter += 1
            prefix = f"{state.counter}. "
        else:
            prefix = "- "

        text = self._capture(body).strip("\n")
        indent = " " * len(prefix)
        first, *rest = text.split("\n")
        self._sb.append(prefix + first)
        for line in rest:
            self._sb.append("\n")
            if line:
                self._sb.append(indent + line)
        self._sb.append("\n")

    def append_table(self, columns: Sequence[str], body: Body) -> None:
        self._ensure_line_start()
        table = _TableState()
        self._tables.append(table)
        try:
            body()
        finally:
            self._tables.pop()

        width = max([len(columns), 1, *(len(row) for row in table.rows)])
        header = [escape_markdown(c) for c in columns]
        header += [""] * (width - len(header))
        self._sb.append(_table_line(header))
        self._sb.append(_table_line(["---"] * width))
        for row in table.rows:
            self._sb.append(_table_line(row + [""] * (width - len(row))))
        self._sb.append("\n")

    def append_table_row(self, body: Body) -> None:
        if not self._tables:
            body()
            return
        table = self._tables[-1]
        outer = table.current
        table.current = []
        try:
            body()
            table.rows.append(table.current)
        finally:
            table.current = outer

    def append_table_cell(self, body: Body) -> None:
        self._cells += 1
        try:
            text = self._capture(body)
        finally:
            self._cells -= 1
        cell = " ".join(line.strip() for line in text.split("\n") if line.strip())
        table = self._tables[-1] if self._tables else None
        if table is None or table.current is None:
            self._sb.append(cell)
        else:
            table.current.append(cell)

    def append_block_code(self, language: str | None, body: Body) -> None:
        self._ensure_line_start()
        code = self._capture_verbatim(body).strip("\n")
        fence = "`" * max(3, longest_run(code, "`") + 1)
        info = language.strip() if language else ""
        self._sb.append(f"{fence}{info}\n")
        if code:
            self._sb.append(code).append("\n")
        self._sb.append(f"{fence}\n\n")

    # =========================================================================
    # Inline containers
    # =========================================================================

    def append_link(self, href: str, body: Body) -> None:
        if self._verbatim:
            body()
            return
        text = self._capture(body)
        url = encode_url(href).replace("(", "%28").replace(")", "%29")
        self._sb.append(f"[{text}]({url})")

    def append_strong(self, body: Body) -> None:
        self._delimited("**", body)

    def append_emphasis(self, body: Body) -> None:
        self._delimited("*", body)

    def append_strikethrough(self, body: Body) -> None:
        self._delimited("~~", body)

    def append_code(self, body: Body) -> None:
        if self._verbatim:
            body()
            return
        code = self._capture_verbatim(body).replace("\n", " ")
        if self._cells:
            # GFM splits table rows on pipes even inside code spans
            code = code.replace("|", "\\|")
        if not code:
            self._sb.append("<code></code>")
            return
        delimiter = "`" * (longest_run(code, "`") + 1)
        pad = " " if code.startswith("`") or code.endswith("`") else ""
        self._sb.append(f"{delimiter}{pad}{code}{pad}{delimiter}")

    def append_signature(self, body: Body) -> None:
        body()

    # =========================================================================
    # Page
    # =========================================================================

    def append_page(self, title: str, body: Body) -> None:
        body()

    def build(self) -> str:
        return self._sb.build()


def _table_line(cells: Sequence[str]) -> str:
    return "| " + " | ".join(cells) + " |\n"
