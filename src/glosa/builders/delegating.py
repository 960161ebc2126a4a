"""Builder decorator base: forwards the whole OutputBuilder contract.

Higher-level formats wrap a complete builder and override only the methods
they customize. ``_target()`` picks the builder that receives each call,
so a decorator can also switch delegates while inside a container.

Example:
    class UpperCaseText(DelegatingBuilder):
        def append_text(self, text: str) -> None:
            self._target().append_text(text.upper())

"""

from __future__ import annotations

from collections.abc import Sequence

from glosa.builders.protocol import Body, OutputBuilder


class DelegatingBuilder:
    """OutputBuilder that forwards every call to a wrapped builder."""

    __slots__ = ("_inner",)

    def __init__(self, inner: OutputBuilder) -> None:
        self._inner = inner

    @property
    def inner(self) -> OutputBuilder:
        return self._inner

    def _target(self) -> OutputBuilder:
        """Builder that receives forwarded calls."""
        return self._inner

    # -- Leaves ---------------------------------------------------------------

    def append_text(self, text: str) -> None:
        self._target().append_text(text)

    def append_symbol(self, text: str) -> None:
        self._target().append_symbol(text)

    def append_keyword(self, text: str) -> None:
        self._target().append_keyword(text)

    def append_identifier(self, text: str, anchor_id: str | None = None) -> None:
        self._target().append_identifier(text, anchor_id)

    # -- Markers --------------------------------------------------------------

    def append_line(self) -> None:
        self._target().append_line()

    def append_soft_line_break(self) -> None:
        self._target().append_soft_line_break()

    def append_indented_soft_line_break(self) -> None:
        self._target().append_indented_soft_line_break()

    def append_anchor(self, name: str) -> None:
        self._target().append_anchor(name)

    def append_non_breaking_space(self) -> None:
        self._target().append_non_breaking_space()

    def append_breadcrumb_separator(self) -> None:
        self._target().append_breadcrumb_separator()

    # -- Containers -----------------------------------------------------------

    def append_paragraph(self, body: Body) -> None:
        self._target().append_paragraph(body)

    def append_header(self, level: int, body: Body) -> None:
        self._target().append_header(level, body)

    def append_unordered_list(self, body: Body) -> None:
        self._target().append_unordered_list(body)

    def append_ordered_list(self, body: Body) -> None:
        self._target().append_ordered_list(body)

    def append_list_item(self, body: Body) -> None:
        self._target().append_list_item(body)

    def append_table(self, columns: Sequence[str], body: Body) -> None:
        self._target().append_table(columns, body)

    def append_table_row(self, body: Body) -> None:
        self._target().append_table_row(body)

    def append_table_cell(self, body: Body) -> None:
        self._target().append_table_cell(body)

    def append_link(self, href: str, body: Body) -> None:
        self._target().append_link(href, body)

    def append_strong(self, body: Body) -> None:
        self._target().append_strong(body)

    def append_emphasis(self, body: Body) -> None:
        self._target().append_emphasis(body)

    def append_strikethrough(self, body: Body) -> None:
        self._target().append_strikethrough(body)

    def append_code(self, body: Body) -> None:
        self._target().append_code(body)

    def append_block_code(self, language: str | None, body: Body) -> None:
        self._target().append_block_code(language, body)

    def append_signature(self, body: Body) -> None:
        self._target().append_signature(body)

    # -- Page -----------------------------------------------------------------

    def append_page(self, title: str, body: Body) -> None:
        self._inner.append_page(title, body)

    def build(self) -> str:
        return self._inner.build()
