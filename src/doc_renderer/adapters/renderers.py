"""Command-line renderers implementing the ``Renderer`` port."""

from __future__ import annotations

import logging
import shlex
from collections.abc import Iterable

from pydantic import ValidationError

from doc_renderer.adapters.process import expand_template, run_blocking
from doc_renderer.application.results import RenderOutcome
from doc_renderer.errors import ConfigurationError
from doc_renderer.schemas import RendererCommandConfig
from doc_renderer.types import CommandLine, CommandTemplate

logger = logging.getLogger(__name__)


class CommandRenderer:
    """Render a document by running an external program.

    Parameters
    ----------
    name : str
        Preset name used in diagnostics and the plugin registry.
    template : Sequence[str]
        Program and arguments containing ``{input}`` and ``{output}``
        placeholders, e.g. ``("pandoc", "{input}", "-o", "{output}")``.
    extra_args : Iterable[str], optional
        Arguments appended after the expanded template.

    Raises
    ------
    ConfigurationError
        If the template names no program or lacks a placeholder.
    """

    def __init__(
        self,
        name: str,
        template: CommandTemplate,
        extra_args: Iterable[str] = (),
    ) -> None:
        try:
            config = RendererCommandConfig(
                template=tuple(template), extra_args=tuple(extra_args)
            )
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid renderer command for '{name}': {exc}"
            ) from exc
        self.name = name
        self.template = config.template
        self.extra_args = config.extra_args

    @classmethod
    def from_command_string(cls, command: str, name: str = "custom") -> CommandRenderer:
        """Build a renderer from a shell-style command string."""
        try:
            template = shlex.split(command)
        except ValueError as exc:
            raise ConfigurationError(f"Cannot parse command '{command}': {exc}") from exc
        return cls(name=name, template=template)

    @property
    def executable(self) -> str:
        return self.template[0]

    def with_extra_args(self, extra_args: Iterable[str]) -> CommandRenderer:
        """Return a copy of this renderer with additional trailing arguments."""
        return CommandRenderer(
            name=self.name,
            template=self.template,
            extra_args=(*self.extra_args, *extra_args),
        )

    def command_for(self, input_path: str, output_path: str) -> CommandLine:
        """Expand the template for one conversion."""
        command = expand_template(
            self.template, {"input": input_path, "output": output_path}
        )
        return (*command, *self.extra_args)

    def render(self, input_path: str, output_path: str) -> RenderOutcome:
        """Run the renderer and block until it exits.

        Parameters
        ----------
        input_path : str
            Source document path.
        output_path : str
            Destination of the rendered artifact.

        Returns
        -------
        RenderOutcome
            Command line and exit status. A non-zero status is reported, not
            raised.
        """
        command = self.command_for(input_path, output_path)
        status = run_blocking(command)
        if status.error is not None:
            logger.warning(
                "renderer '%s' could not be launched: %s", self.name, status.error
            )
        return RenderOutcome(command=command, returncode=status.returncode)
