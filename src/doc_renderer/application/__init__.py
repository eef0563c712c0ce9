"""Application-layer use-cases and option objects."""

from __future__ import annotations

from pathlib import Path

from doc_renderer.application.options import (
    PipelineOptions,
    RenderOptions,
    StagingOptions,
    ViewOptions,
)
from doc_renderer.application.ports import ArtifactStager, Renderer, Viewer
from doc_renderer.application.results import (
    PipelineResult,
    RenderOutcome,
    ViewOutcome,
)


def build_pipeline_options(
    *,
    source_suffix: str = ".md",
    target_suffix: str = ".pdf",
    stage: bool = True,
    destination_dir: Path | None = None,
    view: bool = True,
) -> PipelineOptions:
    """Build typed pipeline options via lazy use-case import."""
    from doc_renderer.application.use_cases import build_pipeline_options as _impl

    return _impl(
        source_suffix=source_suffix,
        target_suffix=target_suffix,
        stage=stage,
        destination_dir=destination_dir,
        view=view,
    )


def run_conversion_pipeline(
    *,
    input_path: str,
    options: PipelineOptions,
    renderer: Renderer | None = None,
    viewer: Viewer | None = None,
    stager: ArtifactStager | None = None,
) -> PipelineResult:
    """Run the conversion pipeline via lazy use-case import."""
    from doc_renderer.application.use_cases import run_conversion_pipeline as _impl

    return _impl(
        input_path=input_path,
        options=options,
        renderer=renderer,
        viewer=viewer,
        stager=stager,
    )


__all__ = [
    "PipelineOptions",
    "RenderOptions",
    "StagingOptions",
    "ViewOptions",
    "PipelineResult",
    "RenderOutcome",
    "ViewOutcome",
    "build_pipeline_options",
    "run_conversion_pipeline",
]
