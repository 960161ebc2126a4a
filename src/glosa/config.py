"""ContextVar-based render configuration for Glosa.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per documentation build, read by every signature
renderer and output walker in the context.

Thread Safety:
    ContextVars are thread-local. Each thread has independent storage,
    so pages rendered in parallel never see each other's configuration.

Usage:
    from glosa.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(front_matter_layout="reference")):
        text = render_page(contents, format="frontmatter", title="kotlin")

    # Or pass config explicitly; an explicit config wins over the context
    output = StructuredOutput(builder, config=RenderConfig(strict_node_kinds=True))

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        signature_break_threshold: Flattened signature length at which soft
            line breaks start rendering as hard breaks
        strict_node_kinds: Raise UnsupportedNodeKindError instead of
            rendering unknown declaration kinds as plain text
        front_matter_layout: Layout token written into front matter
        stylesheet: Optional stylesheet href for the default HTML template

    """

    signature_break_threshold: int = 62
    strict_node_kinds: bool = False
    front_matter_layout: str = "api"
    stylesheet: str | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "signature_break_threshold": 80,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.signature_break_threshold
            80

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(strict_node_kinds=True)):
        ...     get_render_config().strict_node_kinds
        True

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


def resolve_config(config: RenderConfig | None) -> RenderConfig:
    """Return ``config`` if given, otherwise the active context config."""
    return config if config is not None else _render_config.get()


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    "resolve_config",
]
