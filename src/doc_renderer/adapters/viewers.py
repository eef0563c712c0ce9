"""Command-line viewers implementing the ``Viewer`` port."""

from __future__ import annotations

import shlex
from pathlib import Path

from pydantic import ValidationError

from doc_renderer.adapters.process import expand_template, run_blocking
from doc_renderer.application.results import ViewOutcome
from doc_renderer.errors import ConfigurationError
from doc_renderer.schemas import ViewerCommandConfig
from doc_renderer.types import CommandLine, CommandTemplate


class CommandViewer:
    """Open a rendered artifact with an external program.

    The template must contain a ``{path}`` placeholder, e.g.
    ``("evince", "{path}")``.
    """

    def __init__(self, name: str, template: CommandTemplate) -> None:
        try:
            config = ViewerCommandConfig(template=tuple(template))
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid viewer command for '{name}': {exc}"
            ) from exc
        self.name = name
        self.template = config.template

    @classmethod
    def from_command_string(cls, command: str, name: str = "custom") -> CommandViewer:
        """Build a viewer from a shell-style command string."""
        try:
            template = shlex.split(command)
        except ValueError as exc:
            raise ConfigurationError(f"Cannot parse command '{command}': {exc}") from exc
        return cls(name=name, template=template)

    @property
    def executable(self) -> str:
        return self.template[0]

    def command_for(self, path: Path) -> CommandLine:
        return expand_template(self.template, {"path": str(path)})

    def open(self, path: Path) -> ViewOutcome:
        """Launch the viewer on ``path`` and block until it exits."""
        command = self.command_for(path)
        status = run_blocking(command)
        return ViewOutcome(
            command=command, returncode=status.returncode, error=status.error
        )
