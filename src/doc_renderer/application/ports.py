"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from doc_renderer.application.results import RenderOutcome, ViewOutcome


class Renderer(Protocol):
    """Produce a rendered artifact from a source document."""

    def render(self, input_path: str, output_path: str) -> RenderOutcome:
        """Render ``input_path`` into ``output_path`` and report the status."""


class Viewer(Protocol):
    """Display a rendered artifact."""

    def open(self, path: Path) -> ViewOutcome:
        """Open ``path`` and block until the viewer exits."""


class ArtifactStager(Protocol):
    """Place a copy of the rendered artifact at its destination."""

    def stage(self, artifact_path: Path, destination_dir: Path) -> Path:
        """Copy the artifact and return the path of the copy."""
