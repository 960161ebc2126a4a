"""Utility modules for Glosa.

Provides:
- text: escape_html, escape_markdown, encode_url for output escaping
- logger: get_logger and setup_logging
"""

from glosa.utils.logger import get_logger, setup_logging
from glosa.utils.text import encode_url, escape_html, escape_markdown, longest_run

__all__ = [
    "encode_url",
    "escape_html",
    "escape_markdown",
    "get_logger",
    "longest_run",
    "setup_logging",
]
