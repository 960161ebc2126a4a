"""Logging helpers for Glosa.

Every module logs through a standard library logger under the ``glosa``
namespace. Glosa itself never configures handlers on import; applications
call ``setup_logging()`` (or configure ``logging`` themselves) to see the
debug messages emitted on rendering fallbacks.

Example:
    >>> from glosa.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering signature")
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER = "glosa"

_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``glosa.``.

    Example:
        >>> get_logger("mymodule").name
        'glosa.mymodule'
    """
    if not (name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}.")):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def setup_logging(level: str | int = "INFO") -> logging.Handler:
    """Attach a stderr handler to the ``glosa`` logger.

    Replaces a handler installed by an earlier call, so repeated calls
    never duplicate output.

    Args:
        level: Level name such as ``"DEBUG"`` or a ``logging`` constant

    Returns:
        The installed handler
    """
    root = logging.getLogger(ROOT_LOGGER)
    for handler in list(root.handlers):
        if getattr(handler, "_glosa_default", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._glosa_default = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)
    return handler
