"""Unit tests for pydantic config schemas and artifact verification."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from doc_renderer.schemas import (
    PipelineConfig,
    RendererCommandConfig,
    ViewerCommandConfig,
)
from doc_renderer.validate import artifact_exists


def test_pipeline_config_defaults() -> None:
    """Default to .md -> .pdf, staging two levels up and viewing enabled."""
    config = PipelineConfig(input_path="doc.md")
    assert config.source_suffix == ".md"
    assert config.target_suffix == ".pdf"
    assert config.destination_dir == Path("../..")
    assert config.stage is True
    assert config.view is True


@pytest.mark.parametrize("suffix", ["md", ".", "./x", ".a\\b", ""])
def test_pipeline_config_rejects_bad_suffix(suffix: str) -> None:
    """Reject suffixes without a leading dot or containing separators."""
    with pytest.raises(ValidationError):
        PipelineConfig(input_path="doc.md", source_suffix=suffix)


def test_pipeline_config_rejects_empty_input_and_unknown_fields() -> None:
    """Require a non-empty input path and forbid extra keys."""
    with pytest.raises(ValidationError):
        PipelineConfig(input_path="")
    with pytest.raises(ValidationError):
        PipelineConfig(input_path="doc.md", timeout=3)  # type: ignore[call-arg]


def test_renderer_template_requires_both_placeholders() -> None:
    """Require {input} and {output} in renderer templates."""
    RendererCommandConfig(template=("pandoc", "{input}", "-o", "{output}"))
    with pytest.raises(ValidationError, match="\\{output\\}"):
        RendererCommandConfig(template=("pandoc", "{input}"))
    with pytest.raises(ValidationError, match="name a program"):
        RendererCommandConfig(template=())


def test_viewer_template_requires_path_placeholder() -> None:
    """Require {path} in viewer templates."""
    ViewerCommandConfig(template=("evince", "{path}"))
    with pytest.raises(ValidationError, match="\\{path\\}"):
        ViewerCommandConfig(template=("evince",))


def test_artifact_exists_only_for_regular_files(tmp_path: Path) -> None:
    """Treat directories and missing paths as absent artifacts."""
    pdf = tmp_path / "doc.pdf"
    assert artifact_exists(pdf) is False
    pdf.write_bytes(b"%PDF")
    assert artifact_exists(pdf) is True
    assert artifact_exists(str(pdf)) is True
    (tmp_path / "dir.pdf").mkdir()
    assert artifact_exists(tmp_path / "dir.pdf") is False
