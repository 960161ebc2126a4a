"""OutputBuilder protocol: the fixed contract every output format satisfies.

A builder owns one text buffer for one page. The tree walker
(``StructuredOutput``) calls leaf methods directly and container methods
with a ``body`` callable that renders the container's children; the builder
emits its opening markup, calls ``body()`` exactly once, then emits the
closing markup.

Every leaf method receives raw text and must escape it for its format.

Example:
    from glosa.builders.protocol import OutputBuilder

    def emphasize(builder: OutputBuilder, text: str) -> None:
        builder.append_emphasis(lambda: builder.append_text(text))

"""

from collections.abc import Callable, Sequence
from typing import Protocol

Body = Callable[[], None]


class OutputBuilder(Protocol):
    """Protocol for output builders.

    Implementations: HtmlBuilder, MarkdownBuilder, FrontMatterBuilder.

    """

    # -- Leaves ---------------------------------------------------------------

    def append_text(self, text: str) -> None: ...

    def append_symbol(self, text: str) -> None: ...

    def append_keyword(self, text: str) -> None: ...

    def append_identifier(self, text: str, anchor_id: str | None = None) -> None: ...

    # -- Markers --------------------------------------------------------------

    def append_line(self) -> None:
        """Hard line break."""
        ...

    def append_soft_line_break(self) -> None:
        """Line break inside a long signature."""
        ...

    def append_indented_soft_line_break(self) -> None:
        """Line break plus continuation indent inside a long signature."""
        ...

    def append_anchor(self, name: str) -> None: ...

    def append_non_breaking_space(self) -> None: ...

    def append_breadcrumb_separator(self) -> None: ...

    # -- Containers -----------------------------------------------------------

    def append_paragraph(self, body: Body) -> None: ...

    def append_header(self, level: int, body: Body) -> None: ...

    def append_unordered_list(self, body: Body) -> None: ...

    def append_ordered_list(self, body: Body) -> None: ...

    def append_list_item(self, body: Body) -> None: ...

    def append_table(self, columns: Sequence[str], body: Body) -> None: ...

    def append_table_row(self, body: Body) -> None: ...

    def append_table_cell(self, body: Body) -> None: ...

    def append_link(self, href: str, body: Body) -> None: ...

    def append_strong(self, body: Body) -> None: ...

    def append_emphasis(self, body: Body) -> None: ...

    def append_strikethrough(self, body: Body) -> None: ...

    def append_code(self, body: Body) -> None: ...

    def append_block_code(self, language: str | None, body: Body) -> None: ...

    def append_signature(self, body: Body) -> None: ...

    # -- Page -----------------------------------------------------------------

    def append_page(self, title: str, body: Body) -> None:
        """Wrap a whole page: metadata, header and footer templates."""
        ...

    def build(self) -> str:
        """Return the accumulated text."""
        ...
