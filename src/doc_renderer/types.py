"""Shared type aliases for pipeline modules."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Literal, TypeAlias

ToolKind: TypeAlias = Literal["renderer", "viewer"]

PathLike: TypeAlias = str | Path
CommandTemplate: TypeAlias = Sequence[str]
CommandLine: TypeAlias = tuple[str, ...]
