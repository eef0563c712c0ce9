"""Typed option objects shared across pipeline use-cases."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_DESTINATION_DIR = Path("..") / ".."


@dataclass(frozen=True)
class RenderOptions:
    """Path derivation configuration."""

    source_suffix: str = ".md"
    target_suffix: str = ".pdf"


@dataclass(frozen=True)
class StagingOptions:
    """Artifact staging configuration."""

    enabled: bool = True
    destination_dir: Path = DEFAULT_DESTINATION_DIR


@dataclass(frozen=True)
class ViewOptions:
    """Viewer launch configuration."""

    enabled: bool = True


@dataclass(frozen=True)
class PipelineOptions:
    """Shared options passed through the conversion pipeline."""

    render: RenderOptions = RenderOptions()
    staging: StagingOptions = StagingOptions()
    view: ViewOptions = ViewOptions()
