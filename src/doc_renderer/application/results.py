"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from doc_renderer.types import CommandLine


@dataclass(frozen=True)
class RenderOutcome:
    """Status of one renderer invocation."""

    command: CommandLine
    returncode: int

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


@dataclass(frozen=True)
class ViewOutcome:
    """Status of one viewer invocation.

    ``error`` is set when the viewer program could not be launched at all.
    """

    command: CommandLine
    returncode: int
    error: str | None = None

    @property
    def launched(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class PipelineResult:
    """Structured pipeline outcome.

    The renderer status and the presence of the artifact are kept apart: a
    renderer may exit 0 without writing anything, or fail after writing a
    usable file.
    """

    input_path: str
    output_path: str
    render: RenderOutcome
    artifact_present: bool
    staged_path: Path | None = None
    view: ViewOutcome | None = None

    @property
    def exit_code(self) -> int:
        """Process exit status for this run.

        The renderer status is propagated when no artifact was produced;
        otherwise the run counts as a success whatever the viewer did.
        """
        if not self.artifact_present:
            return self.render.returncode
        return 0
