"""Application use-cases orchestrating the conversion pipeline."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from doc_renderer.application.options import (
    DEFAULT_DESTINATION_DIR,
    PipelineOptions,
    RenderOptions,
    StagingOptions,
    ViewOptions,
)
from doc_renderer.application.ports import ArtifactStager, Renderer, Viewer
from doc_renderer.application.results import PipelineResult, ViewOutcome
from doc_renderer.errors import ConfigurationError
from doc_renderer.infrastructure.staging import FileArtifactStager
from doc_renderer.paths import derive_output_path
from doc_renderer.plugins.builtins import DEFAULT_RENDERER, DEFAULT_VIEWER
from doc_renderer.plugins.registry import create_default_registry
from doc_renderer.schemas import PipelineConfig
from doc_renderer.validate import artifact_exists

logger = logging.getLogger(__name__)


def run_conversion_pipeline(
    *,
    input_path: str,
    options: PipelineOptions,
    renderer: Renderer | None = None,
    viewer: Viewer | None = None,
    stager: ArtifactStager | None = None,
) -> PipelineResult:
    """Use-case: render a document, then stage and open the artifact.

    Parameters
    ----------
    input_path : str
        Source document path, passed to the renderer as given.
    options : PipelineOptions
        Path derivation, staging and viewer settings.
    renderer, viewer, stager : optional
        Collaborators; the built-in pandoc renderer, evince viewer and
        file-copy stager are used when omitted.

    Returns
    -------
    PipelineResult
        Renderer status, artifact presence, staged path and viewer status.

    Raises
    ------
    ConfigurationError
        If the options fail validation.
    StagingError
        If the artifact exists but cannot be copied.
    """
    try:
        config = PipelineConfig(
            input_path=input_path,
            source_suffix=options.render.source_suffix,
            target_suffix=options.render.target_suffix,
            destination_dir=options.staging.destination_dir,
            stage=options.staging.enabled,
            view=options.view.enabled,
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid pipeline parameters: {exc}") from exc

    if renderer is None or viewer is None:
        registry = create_default_registry()
        renderer = renderer or registry.get_renderer(DEFAULT_RENDERER)
        viewer = viewer or registry.get_viewer(DEFAULT_VIEWER)
    stager = stager or FileArtifactStager()

    output_path = derive_output_path(
        config.input_path, config.source_suffix, config.target_suffix
    )
    logger.info("rendering %s -> %s", config.input_path, output_path)

    render = renderer.render(config.input_path, output_path)
    if not artifact_exists(output_path):
        if render.succeeded:
            logger.warning(
                "renderer exited 0 but did not produce %s", output_path
            )
        else:
            logger.info(
                "renderer exited %d and did not produce %s",
                render.returncode,
                output_path,
            )
        return PipelineResult(
            input_path=config.input_path,
            output_path=output_path,
            render=render,
            artifact_present=False,
        )
    if not render.succeeded:
        logger.warning(
            "renderer exited %d but %s exists; continuing",
            render.returncode,
            output_path,
        )

    target = Path(output_path)
    staged_path: Path | None = None
    if config.stage:
        staged_path = stager.stage(target, config.destination_dir)
        logger.info("staged %s at %s", output_path, staged_path)
        target = staged_path

    view: ViewOutcome | None = None
    if config.view:
        view = viewer.open(target)
        if not view.launched:
            logger.warning("viewer could not be launched: %s", view.error)
        elif view.returncode != 0:
            logger.warning("viewer exited %d", view.returncode)

    return PipelineResult(
        input_path=config.input_path,
        output_path=output_path,
        render=render,
        artifact_present=True,
        staged_path=staged_path,
        view=view,
    )


def build_pipeline_options(
    *,
    source_suffix: str = ".md",
    target_suffix: str = ".pdf",
    stage: bool = True,
    destination_dir: Path | None = None,
    view: bool = True,
) -> PipelineOptions:
    """Build typed option object from command/API params."""
    return PipelineOptions(
        render=RenderOptions(
            source_suffix=source_suffix,
            target_suffix=target_suffix,
        ),
        staging=StagingOptions(
            enabled=stage,
            destination_dir=destination_dir or DEFAULT_DESTINATION_DIR,
        ),
        view=ViewOptions(enabled=view),
    )
