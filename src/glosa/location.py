"""Link targets for content tree links.

A link target is either a URL string (used verbatim) or a ``Location``
handle pointing at another generated page. Locations are resolved relative
to the page being rendered, so the same content tree links correctly from
any page.

Thread Safety:
FileLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from typing import Protocol, TypeAlias, runtime_checkable


@runtime_checkable
class Location(Protocol):
    """A resolvable page location."""

    @property
    def path(self) -> str: ...

    def relative_path_to(self, other: Location, anchor: str | None = None) -> str:
        """Path from this location to ``other``, optionally with an anchor."""
        ...


@dataclass(frozen=True, slots=True)
class FileLocation:
    """Location of a generated file, addressed by a POSIX-style path.

    Examples:
            >>> here = FileLocation("kotlin/collections/index.html")
            >>> here.relative_path_to(FileLocation("kotlin/io/print.html"))
            '../io/print.html'
            >>> here.relative_path_to(here, "size")
            'index.html#size'

    """

    path: str

    def relative_path_to(self, other: Location, anchor: str | None = None) -> str:
        base = posixpath.dirname(self.path) or "."
        relative = posixpath.relpath(other.path, base)
        if anchor:
            return f"{relative}#{anchor}"
        return relative

    def __str__(self) -> str:
        return self.path


LinkTarget: TypeAlias = "str | Location"


def resolve_href(target: LinkTarget, current: Location | None = None) -> str:
    """Turn a link target into an href string.

    URL strings pass through unchanged. Locations become relative to
    ``current`` when the page location is known, otherwise their own path.
    """
    if isinstance(target, str):
        return target
    if current is not None:
        return current.relative_path_to(target)
    return target.path
