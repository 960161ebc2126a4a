"""Tests for ContextVar-based render configuration.

Validates thread isolation, context manager behavior, and that explicit
configs passed to renderers win over the context.
"""

from threading import Thread

import pytest

from glosa import (
    KotlinLanguageService,
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from glosa.builders import HtmlBuilder, StructuredOutput
from glosa.errors import UnsupportedNodeKindError
from glosa.model import DocumentationNode, NodeKind
from glosa.nodes import Signature, SoftLineBreak, Text


class TestRenderConfigDataclass:
    """Test RenderConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = RenderConfig()
        assert config.signature_break_threshold == 62
        assert config.strict_node_kinds is False
        assert config.front_matter_layout == "api"
        assert config.stylesheet is None

    def test_immutability(self) -> None:
        """Config is frozen and cannot be modified."""
        config = RenderConfig()
        with pytest.raises(AttributeError):
            config.strict_node_kinds = True  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = RenderConfig.from_dict(
            {"front_matter_layout": "reference", "link_style": "absolute"}
        )
        assert config.front_matter_layout == "reference"
        assert config.signature_break_threshold == 62

    def test_from_dict_empty(self) -> None:
        assert RenderConfig.from_dict({}) == RenderConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        """Reset config after each test."""
        reset_render_config()

    def test_default_config(self) -> None:
        assert get_render_config() == RenderConfig()

    def test_set_and_get(self) -> None:
        set_render_config(RenderConfig(strict_node_kinds=True))
        assert get_render_config().strict_node_kinds is True

    def test_reset_restores_default(self) -> None:
        set_render_config(RenderConfig(signature_break_threshold=10))
        reset_render_config()
        assert get_render_config().signature_break_threshold == 62


class TestRenderConfigContext:
    """Test render_config_context context manager."""

    def test_context_sets_config(self) -> None:
        with render_config_context(RenderConfig(front_matter_layout="docs")):
            assert get_render_config().front_matter_layout == "docs"
        # Restored after context
        assert get_render_config().front_matter_layout == "api"

    def test_nested_contexts(self) -> None:
        with render_config_context(RenderConfig(strict_node_kinds=True)):
            with render_config_context(RenderConfig(signature_break_threshold=5)):
                assert get_render_config().signature_break_threshold == 5
                assert get_render_config().strict_node_kinds is False
            assert get_render_config().strict_node_kinds is True
        assert get_render_config() == RenderConfig()

    def test_context_restores_on_exception(self) -> None:
        with pytest.raises(ValueError, match="test"):
            with render_config_context(RenderConfig(strict_node_kinds=True)):
                raise ValueError("test")
        assert get_render_config().strict_node_kinds is False


class TestConfigConsumers:
    """Renderers read the context config unless one is passed explicitly."""

    def _long_signature_output(self, config: RenderConfig | None = None) -> str:
        out = StructuredOutput(HtmlBuilder(), config=config)
        out.append_content(Signature(children=(Text("x" * 20), SoftLineBreak())))
        return out.build()

    def test_threshold_from_context(self) -> None:
        assert "<br/>" not in self._long_signature_output()
        with render_config_context(RenderConfig(signature_break_threshold=20)):
            assert "<br/>" in self._long_signature_output()

    def test_explicit_config_wins(self) -> None:
        with render_config_context(RenderConfig(signature_break_threshold=20)):
            output = self._long_signature_output(RenderConfig())
        assert "<br/>" not in output

    def test_strict_kinds_from_context(self) -> None:
        node = DocumentationNode("Deprecated", NodeKind.ANNOTATION)
        with render_config_context(RenderConfig(strict_node_kinds=True)):
            with pytest.raises(UnsupportedNodeKindError):
                KotlinLanguageService().render(node)


class TestThreadIsolation:
    """Test thread-local configuration isolation."""

    def test_thread_isolation(self) -> None:
        """Each thread sees its own config."""
        results: dict[int, str] = {}

        def worker(thread_id: int, layout: str) -> None:
            set_render_config(RenderConfig(front_matter_layout=layout))
            results[thread_id] = get_render_config().front_matter_layout

        threads = [Thread(target=worker, args=(i, f"layout-{i}")) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {i: f"layout-{i}" for i in range(4)}
        # Main thread untouched
        assert get_render_config().front_matter_layout == "api"
