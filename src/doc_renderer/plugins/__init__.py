"""Plugin interfaces and registry for renderer/viewer presets."""

from .base import RendererPlugin, ViewerPlugin
from .registry import ToolRegistry, create_default_registry

__all__ = ["RendererPlugin", "ViewerPlugin", "ToolRegistry", "create_default_registry"]
