"""Source link facts: map local source paths to browsable URLs.

A pure string transform. Given the path of a declaration's source file and
a list of prefix mappings, produce the remote URL, optionally pointing at
the declaration's line.

Example:
    >>> links = [SourceLinkDefinition("/work/src", "https://host/repo/blob/main/src", "#L")]
    >>> source_url("/work/src/a/B.kt", links, line=12)
    'https://host/repo/blob/main/src/a/B.kt#L12'

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLinkDefinition:
    """Mapping from a local path prefix to a remote URL prefix.

    Attributes:
        path: Local path prefix
        url: Remote URL prefix substituted for ``path``
        line_suffix: Appended before the line number, e.g. ``#L``; no line
            anchor is added when None

    """

    path: str
    url: str
    line_suffix: str | None = None


def source_url(
    path: str,
    definitions: Sequence[SourceLinkDefinition],
    line: int | None = None,
) -> str | None:
    """Remote URL for ``path``, or None when no definition matches.

    The first definition whose local prefix matches wins.
    """
    for definition in definitions:
        if path.startswith(definition.path):
            url = definition.url + path[len(definition.path) :]
            if definition.line_suffix is not None and line is not None:
                url += f"{definition.line_suffix}{line}"
            return url
    return None


def source_position(path: str, line: int | None = None, column: int | None = None) -> str:
    """Format a source position as ``path``, ``path:line`` or ``path:line:column``."""
    if line is None:
        return path
    if column is None:
        return f"{path}:{line}"
    return f"{path}:{line}:{column}"
