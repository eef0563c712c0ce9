"""Tool registry and plugin discovery helpers."""

from __future__ import annotations

import importlib
import importlib.util
from collections.abc import Iterable
from pathlib import Path
from types import ModuleType

from doc_renderer.errors import PluginError
from doc_renderer.plugins.base import RendererPlugin, ViewerPlugin
from doc_renderer.plugins.builtins import builtin_renderers, builtin_viewers
from doc_renderer.types import ToolKind


def _plugin_name(plugin: RendererPlugin | ViewerPlugin, kind: ToolKind) -> str:
    name = str(getattr(plugin, "name", "")).strip()
    if not name:
        raise PluginError(f"{kind.capitalize()} must define a non-empty 'name'.")
    return name


class ToolRegistry:
    """Registry of named renderers and viewers.

    Registering a name twice replaces the earlier entry, so plugin modules
    can override built-in presets.
    """

    def __init__(self) -> None:
        self._renderers: dict[str, RendererPlugin] = {}
        self._viewers: dict[str, ViewerPlugin] = {}

    def register_renderer(self, renderer: RendererPlugin) -> None:
        """Register renderer instance by unique name.

        Raises
        ------
        PluginError
            If the renderer has no name or lacks ``render``.
        """
        name = _plugin_name(renderer, "renderer")
        if not callable(getattr(renderer, "render", None)):
            raise PluginError(f"Renderer '{name}' must implement render().")
        self._renderers[name] = renderer

    def register_viewer(self, viewer: ViewerPlugin) -> None:
        """Register viewer instance by unique name.

        Raises
        ------
        PluginError
            If the viewer has no name or lacks ``open``.
        """
        name = _plugin_name(viewer, "viewer")
        if not callable(getattr(viewer, "open", None)):
            raise PluginError(f"Viewer '{name}' must implement open().")
        self._viewers[name] = viewer

    def renderer_names(self) -> list[str]:
        return sorted(self._renderers)

    def viewer_names(self) -> list[str]:
        return sorted(self._viewers)

    def get_renderer(self, name: str) -> RendererPlugin:
        """Get renderer by name.

        Raises
        ------
        PluginError
            If the name is not registered.
        """
        try:
            return self._renderers[name]
        except KeyError as exc:
            raise PluginError(
                f"Unknown renderer '{name}'. "
                f"Available renderers: {', '.join(self.renderer_names())}"
            ) from exc

    def get_viewer(self, name: str) -> ViewerPlugin:
        """Get viewer by name.

        Raises
        ------
        PluginError
            If the name is not registered.
        """
        try:
            return self._viewers[name]
        except KeyError as exc:
            raise PluginError(
                f"Unknown viewer '{name}'. "
                f"Available viewers: {', '.join(self.viewer_names())}"
            ) from exc

    def load_module(self, module_or_path: str) -> None:
        """Load renderer/viewer providers from module name or file path.

        .. warning::
            This executes code from the specified module. Only load plugins
            from trusted sources.

        Parameters
        ----------
        module_or_path : str
            Python import path or filesystem path to a plugin module.
        """
        module = _import_module_or_path(module_or_path)
        _register_from_module(module, self)


def _import_module_or_path(module_or_path: str) -> ModuleType:
    """Import module by import path or filesystem path.

    .. warning::
        This function executes arbitrary Python code from the specified module
        or file. Plugin loading should only happen on explicit user request
        (``--plugin-module``).

    Parameters
    ----------
    module_or_path : str
        Python module path or local file path.

    Returns
    -------
    ModuleType
        Imported module object.

    Raises
    ------
    PluginError
        If import cannot be completed.
    """
    candidate = Path(module_or_path)
    if candidate.exists():
        spec = importlib.util.spec_from_file_location(candidate.stem, candidate)
        if spec is None or spec.loader is None:
            raise PluginError(f"Unable to load plugin module from {candidate}.")
        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            raise PluginError(
                f"Unable to execute plugin module {candidate}: {exc}"
            ) from exc
        return module

    try:
        return importlib.import_module(module_or_path)
    except Exception as exc:
        raise PluginError(
            f"Unable to import plugin module '{module_or_path}': {exc}"
        ) from exc


def _register_from_module(module: ModuleType, registry: ToolRegistry) -> None:
    """Register tool definitions found in module.

    A module either exposes ``register_plugins(registry)`` or one or both of
    the ``RENDERERS`` and ``VIEWERS`` sequences.
    """
    if hasattr(module, "register_plugins"):
        module.register_plugins(registry)
        return

    renderers = getattr(module, "RENDERERS", None)
    viewers = getattr(module, "VIEWERS", None)
    if renderers is None and viewers is None:
        raise PluginError(
            "Plugin module must expose register_plugins(registry), RENDERERS or VIEWERS."
        )
    for renderer in renderers or []:
        registry.register_renderer(renderer)
    for viewer in viewers or []:
        registry.register_viewer(viewer)


def create_default_registry(
    extra_modules: Iterable[str] | None = None,
) -> ToolRegistry:
    """Create registry holding the built-in presets plus external plugins.

    Parameters
    ----------
    extra_modules : Iterable[str] | None, optional
        Additional plugin modules to load, in order.

    Returns
    -------
    ToolRegistry
        Populated registry.
    """
    registry = ToolRegistry()
    for renderer in builtin_renderers():
        registry.register_renderer(renderer)
    for viewer in builtin_viewers():
        registry.register_viewer(viewer)
    for module in extra_modules or []:
        registry.load_module(module)
    return registry
