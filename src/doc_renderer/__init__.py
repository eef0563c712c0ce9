"""Render text documents to fixed-layout artifacts through external tools."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from doc_renderer.application.results import PipelineResult
from doc_renderer.paths import derive_output_path

__version__ = "0.1.0"


def render_document(
    input_path: str,
    *,
    source_suffix: str = ".md",
    target_suffix: str = ".pdf",
    destination_dir: Path | None = None,
    renderer: str | None = None,
    renderer_command: str | None = None,
    renderer_args: Iterable[str] | None = None,
    viewer: str | None = None,
    viewer_command: str | None = None,
    plugin_modules: Iterable[str] | None = None,
    stage: bool = True,
    view: bool = True,
) -> PipelineResult:
    """Render ``input_path`` and hand the artifact to a viewer.

    Parameters
    ----------
    input_path : str
        Source document. Its ``.md`` extension is replaced by ``.pdf`` to
        name the artifact.
    destination_dir : Path | None, default=None
        Directory that receives a copy of the artifact. Defaults to two
        levels above the working directory.
    renderer, viewer : str | None
        Registered preset names (``pandoc`` and ``evince`` by default).
    renderer_command, viewer_command : str | None
        Custom command templates overriding the presets.
    stage, view : bool, default=True
        Whether to copy the artifact and whether to open it.

    Returns
    -------
    PipelineResult
        Renderer status, artifact presence, staged path and viewer status.
    """
    from .api import render_document as _impl

    return _impl(
        input_path,
        source_suffix=source_suffix,
        target_suffix=target_suffix,
        destination_dir=destination_dir,
        renderer=renderer,
        renderer_command=renderer_command,
        renderer_args=renderer_args,
        viewer=viewer,
        viewer_command=viewer_command,
        plugin_modules=plugin_modules,
        stage=stage,
        view=view,
    )


__all__ = [
    "PipelineResult",
    "derive_output_path",
    "render_document",
]
