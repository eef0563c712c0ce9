"""Unit tests for tool registry resolution and module loading helpers."""

from __future__ import annotations

import types
from pathlib import Path

import pytest

from doc_renderer.application.results import RenderOutcome, ViewOutcome
from doc_renderer.errors import PluginError
from doc_renderer.plugins.base import RendererPlugin, ViewerPlugin
from doc_renderer.plugins.registry import (
    ToolRegistry,
    _import_module_or_path,
    _register_from_module,
    create_default_registry,
)


class _Renderer:
    """Simple renderer test double."""

    executable = "fake-renderer"

    def __init__(self, name: str) -> None:
        self.name = name

    def render(self, input_path: str, output_path: str) -> RenderOutcome:
        return RenderOutcome(command=(input_path, output_path), returncode=0)


class _Viewer:
    """Simple viewer test double."""

    executable = "fake-viewer"

    def __init__(self, name: str) -> None:
        self.name = name

    def open(self, path: Path) -> ViewOutcome:
        return ViewOutcome(command=(str(path),), returncode=0)


def test_default_registry_holds_builtin_presets() -> None:
    """Expose pandoc renderers and common viewers out of the box."""
    registry = create_default_registry()
    assert "pandoc" in registry.renderer_names()
    assert "pandoc-xelatex" in registry.renderer_names()
    assert {"evince", "xdg-open", "zathura"} <= set(registry.viewer_names())
    assert registry.get_renderer("pandoc").executable == "pandoc"
    assert isinstance(registry.get_renderer("pandoc"), RendererPlugin)
    assert isinstance(registry.get_viewer("evince"), ViewerPlugin)


def test_register_requires_non_empty_name() -> None:
    """Reject tools without a non-empty name."""
    registry = ToolRegistry()
    with pytest.raises(PluginError, match="non-empty 'name'"):
        registry.register_renderer(_Renderer(name="  "))
    with pytest.raises(PluginError, match="non-empty 'name'"):
        registry.register_viewer(_Viewer(name=""))


def test_register_requires_capability_method() -> None:
    """Reject objects that do not implement the capability."""
    registry = ToolRegistry()
    with pytest.raises(PluginError, match="render"):
        registry.register_renderer(types.SimpleNamespace(name="x"))  # type: ignore[arg-type]
    with pytest.raises(PluginError, match="open"):
        registry.register_viewer(types.SimpleNamespace(name="x"))  # type: ignore[arg-type]


def test_get_unknown_tool_lists_available_names() -> None:
    """Raise clear error for unknown renderer or viewer lookup."""
    registry = ToolRegistry()
    registry.register_renderer(_Renderer("a"))
    with pytest.raises(PluginError, match="Unknown renderer 'missing'.*a"):
        registry.get_renderer("missing")
    with pytest.raises(PluginError, match="Unknown viewer"):
        registry.get_viewer("missing")


def test_later_registration_overrides_earlier() -> None:
    """Let plugins replace a preset by registering the same name."""
    registry = create_default_registry()
    replacement = _Renderer("pandoc")
    registry.register_renderer(replacement)
    assert registry.get_renderer("pandoc") is replacement


def test_register_from_module_prefers_register_plugins() -> None:
    """Call register_plugins(registry) when the module defines it."""
    registry = ToolRegistry()
    module = types.ModuleType("m")

    def register_plugins(target: ToolRegistry) -> None:
        target.register_viewer(_Viewer("from-hook"))

    module.register_plugins = register_plugins  # type: ignore[attr-defined]
    module.RENDERERS = [_Renderer("ignored")]  # type: ignore[attr-defined]
    _register_from_module(module, registry)

    assert registry.viewer_names() == ["from-hook"]
    assert registry.renderer_names() == []


def test_register_from_module_reads_sequences() -> None:
    """Register RENDERERS and VIEWERS sequences."""
    registry = ToolRegistry()
    module = types.ModuleType("m")
    module.RENDERERS = [_Renderer("r1")]  # type: ignore[attr-defined]
    module.VIEWERS = [_Viewer("v1"), _Viewer("v2")]  # type: ignore[attr-defined]
    _register_from_module(module, registry)

    assert registry.renderer_names() == ["r1"]
    assert registry.viewer_names() == ["v1", "v2"]


def test_register_from_module_without_exports_raises() -> None:
    """Reject modules exposing nothing to register."""
    with pytest.raises(PluginError, match="must expose"):
        _register_from_module(types.ModuleType("empty"), ToolRegistry())


def test_import_module_or_path_from_file(tmp_path: Path) -> None:
    """Load a plugin module from a filesystem path."""
    plugin_file = tmp_path / "my_tools.py"
    plugin_file.write_text("VALUE = 42\n", encoding="utf-8")
    module = _import_module_or_path(str(plugin_file))
    assert module.VALUE == 42


def test_import_module_or_path_errors() -> None:
    """Wrap import failures in PluginError."""
    with pytest.raises(PluginError, match="Unable to import"):
        _import_module_or_path("doc_renderer_no_such_module_xyz")


def test_import_module_or_path_execution_error(tmp_path: Path) -> None:
    """Wrap errors raised while executing a plugin file."""
    plugin_file = tmp_path / "broken.py"
    plugin_file.write_text("raise RuntimeError('boom')\n", encoding="utf-8")
    with pytest.raises(PluginError, match="boom"):
        _import_module_or_path(str(plugin_file))
