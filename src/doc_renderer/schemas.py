"""Pydantic schemas for runtime validation of pipeline inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

INPUT_PLACEHOLDER = "{input}"
OUTPUT_PLACEHOLDER = "{output}"
PATH_PLACEHOLDER = "{path}"


def _check_suffix(value: str) -> str:
    if not value.startswith(".") or len(value) < 2:
        raise ValueError("suffix must start with '.' and name an extension.")
    if "/" in value or "\\" in value:
        raise ValueError("suffix cannot contain a path separator.")
    return value


def _check_template(value: tuple[str, ...], placeholders: tuple[str, ...]) -> tuple[str, ...]:
    if not value or not value[0].strip():
        raise ValueError("command template must name a program.")
    joined = " ".join(value)
    missing = [item for item in placeholders if item not in joined]
    if missing:
        raise ValueError(f"command template is missing {', '.join(missing)}.")
    return value


class PipelineConfig(BaseModel):
    """Validated input for a single conversion pipeline run."""

    model_config = ConfigDict(extra="forbid")

    input_path: str = Field(min_length=1)
    source_suffix: str = ".md"
    target_suffix: str = ".pdf"
    destination_dir: Path = Path("..") / ".."
    stage: bool = True
    view: bool = True

    @field_validator("source_suffix", "target_suffix")
    @classmethod
    def _validate_suffix(cls, value: str) -> str:
        return _check_suffix(value)


class RendererCommandConfig(BaseModel):
    """Validated renderer command template."""

    model_config = ConfigDict(extra="forbid")

    template: tuple[str, ...]
    extra_args: tuple[str, ...] = ()

    @field_validator("template")
    @classmethod
    def _validate_template(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return _check_template(value, (INPUT_PLACEHOLDER, OUTPUT_PLACEHOLDER))


class ViewerCommandConfig(BaseModel):
    """Validated viewer command template."""

    model_config = ConfigDict(extra="forbid")

    template: tuple[str, ...]

    @field_validator("template")
    @classmethod
    def _validate_template(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return _check_template(value, (PATH_PLACEHOLDER,))
