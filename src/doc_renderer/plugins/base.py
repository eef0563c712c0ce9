"""Plugin protocols for substitutable renderers and viewers."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from doc_renderer.application.results import RenderOutcome, ViewOutcome


@runtime_checkable
class RendererPlugin(Protocol):
    """Named renderer registered with the tool registry."""

    name: str

    @property
    def executable(self) -> str:
        """Program looked up on ``PATH`` when the renderer runs."""

    def render(self, input_path: str, output_path: str) -> RenderOutcome:
        """Render ``input_path`` into ``output_path``.

        Parameters
        ----------
        input_path : str
            Source document path.
        output_path : str
            Rendered artifact path.

        Returns
        -------
        RenderOutcome
            Command line and exit status.
        """


@runtime_checkable
class ViewerPlugin(Protocol):
    """Named viewer registered with the tool registry."""

    name: str

    @property
    def executable(self) -> str:
        """Program looked up on ``PATH`` when the viewer runs."""

    def open(self, path: Path) -> ViewOutcome:
        """Open ``path`` and block until the viewer exits."""
