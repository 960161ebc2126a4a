"""StringBuilder for O(n) page text accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation.

Builders that need to post-process a container's output (Markdown list
indentation, code span delimiters, table cells) take a mark before
rendering the body and pop everything written since.

Thread Safety:
StringBuilder instances are owned by one builder, which renders one page.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("<h1>")
            >>> mark = sb.mark()
            >>> sb.append("Hello")
            >>> sb.pop_since(mark)
            'Hello'
            >>> sb.append("</h1>").build()
            '<h1></h1>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped)."""
        if s:
            self._parts.append(s)
        return self

    def append_line(self, s: str = "") -> StringBuilder:
        """Append a string followed by newline."""
        if s:
            self._parts.append(s)
        self._parts.append("\n")
        return self

    def mark(self) -> int:
        """Return a position to pass to pop_since()."""
        return len(self._parts)

    def pop_since(self, mark: int) -> str:
        """Remove and return everything appended after ``mark``."""
        text = "".join(self._parts[mark:])
        del self._parts[mark:]
        return text

    def ends_with_newline(self) -> bool:
        return bool(self._parts) and self._parts[-1].endswith("\n")

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

    def clear(self) -> StringBuilder:
        self._parts.clear()
        return self

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
