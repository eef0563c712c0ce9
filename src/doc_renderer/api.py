"""Public document rendering API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable
from typing import Optional

from doc_renderer.adapters.renderers import CommandRenderer
from doc_renderer.adapters.viewers import CommandViewer
from doc_renderer.application.results import PipelineResult
from doc_renderer.application.use_cases import build_pipeline_options
from doc_renderer.application.use_cases import run_conversion_pipeline
from doc_renderer.errors import ConfigurationError
from doc_renderer.plugins.base import RendererPlugin, ViewerPlugin
from doc_renderer.plugins.builtins import DEFAULT_RENDERER, DEFAULT_VIEWER
from doc_renderer.plugins.registry import ToolRegistry, create_default_registry


def resolve_renderer(
    registry: ToolRegistry,
    name: Optional[str] = None,
    command: Optional[str] = None,
    extra_args: Optional[Iterable[str]] = None,
) -> RendererPlugin:
    """Pick a renderer: explicit command first, then preset name, then default."""
    renderer: RendererPlugin
    if command:
        renderer = CommandRenderer.from_command_string(command)
    else:
        renderer = registry.get_renderer(name or DEFAULT_RENDERER)
    extra = list(extra_args or [])
    if extra:
        if not isinstance(renderer, CommandRenderer):
            raise ConfigurationError(
                f"Renderer '{renderer.name}' does not accept extra arguments."
            )
        renderer = renderer.with_extra_args(extra)
    return renderer


def resolve_viewer(
    registry: ToolRegistry,
    name: Optional[str] = None,
    command: Optional[str] = None,
) -> ViewerPlugin:
    """Pick a viewer: explicit command first, then preset name, then default."""
    if command:
        return CommandViewer.from_command_string(command)
    return registry.get_viewer(name or DEFAULT_VIEWER)


def render_document(
    input_path: str,
    *,
    source_suffix: str = ".md",
    target_suffix: str = ".pdf",
    destination_dir: Optional[Path] = None,
    renderer: Optional[str] = None,
    renderer_command: Optional[str] = None,
    renderer_args: Optional[Iterable[str]] = None,
    viewer: Optional[str] = None,
    viewer_command: Optional[str] = None,
    plugin_modules: Optional[Iterable[str]] = None,
    stage: bool = True,
    view: bool = True,
) -> PipelineResult:
    """Render a source document, stage the artifact and open it.

    ``renderer``/``viewer`` name registered presets; ``renderer_command`` and
    ``viewer_command`` take precedence and accept shell-style templates with
    ``{input}``/``{output}`` and ``{path}`` placeholders.
    """
    registry = create_default_registry(extra_modules=plugin_modules)
    options = build_pipeline_options(
        source_suffix=source_suffix,
        target_suffix=target_suffix,
        stage=stage,
        destination_dir=destination_dir,
        view=view,
    )
    return run_conversion_pipeline(
        input_path=input_path,
        options=options,
        renderer=resolve_renderer(registry, renderer, renderer_command, renderer_args),
        viewer=resolve_viewer(registry, viewer, viewer_command),
    )
