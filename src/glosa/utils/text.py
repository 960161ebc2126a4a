"""Text escaping utilities for Glosa.

Every leaf emitted by a builder passes through one of these functions.
Content tree values are always raw; escaping happens only here.

Example:
    >>> from glosa.utils.text import escape_html, escape_markdown
    >>> escape_html("List<T>")
    'List&lt;T&gt;'
    >>> escape_markdown("a_b*c")
    'a\\\\_b\\\\*c'
"""

from __future__ import annotations

import html as html_module
import re
from urllib.parse import quote as url_quote

# Backslash first so inserted escapes are not escaped again
_MARKDOWN_SPECIAL = re.compile(r"([\\`*_\[\]|])")


def escape_html(text: str) -> str:
    """Escape HTML special characters in text and attribute values.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;

    Single quotes are left alone; all attributes are double-quoted.

    Examples:
        >>> escape_html('<a href="x">&</a>')
        '&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=False).replace('"', "&quot;")


def escape_markdown(text: str) -> str:
    """Escape text for literal display in GitHub-flavored Markdown.

    Conservative: backslash-escapes ``\\``, `````, ``*``, ``_``, ``[``, ``]``
    and ``|``, then entity-escapes ``&``, ``<``, ``>`` and ``"`` so that
    inline HTML cannot be injected through symbol names.

    Examples:
        >>> escape_markdown("Map<K, V>")
        'Map&lt;K, V&gt;'
        >>> escape_markdown("a|b")
        'a\\\\|b'
    """
    if not text:
        return ""
    return escape_html(_MARKDOWN_SPECIAL.sub(r"\\\1", text))


def encode_url(url: str) -> str:
    """Percent-encode a URL for use in an href.

    Decodes HTML entities first, then encodes spaces, non-ASCII and other
    unsafe characters while keeping RFC 3986 delimiters and existing
    percent-escapes intact. The result still needs attribute escaping.

    Examples:
        >>> encode_url("a b/c.html#x")
        'a%20b/c.html#x'
    """
    decoded = html_module.unescape(url)
    return url_quote(decoded, safe="/:?#[]@!$&'()*+,;=-_.~%")


def longest_run(text: str, char: str) -> int:
    """Return the length of the longest run of ``char`` in ``text``.

    Used to size Markdown code span and code fence delimiters.

    Examples:
        >>> longest_run("a``b`c", "`")
        2
    """
    best = current = 0
    for c in text:
        if c == char:
            current += 1
            if current > best:
                best = current
        else:
            current = 0
    return best
