"""Blocking child-process helpers shared by renderer and viewer adapters."""

from __future__ import annotations

import logging
import re
import shlex
import subprocess
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from doc_renderer.types import CommandLine

logger = logging.getLogger(__name__)

# Shell conventions for commands that cannot be started.
EXIT_NOT_FOUND = 127
EXIT_NOT_EXECUTABLE = 126

_PLACEHOLDER = re.compile(r"\{(input|output|path)\}")


@dataclass(frozen=True)
class ProcessStatus:
    """Exit status of a finished child process."""

    returncode: int
    error: str | None = None


def expand_template(
    template: Sequence[str], values: Mapping[str, str]
) -> CommandLine:
    """Substitute ``{input}``, ``{output}`` and ``{path}`` placeholders.

    Substitution is a single pass, so braces inside the substituted paths are
    never expanded again. Unknown placeholders are left as written.
    """

    def _replace(match: re.Match[str]) -> str:
        return values.get(match.group(1), match.group(0))

    return tuple(_PLACEHOLDER.sub(_replace, part) for part in template)


def run_blocking(command: CommandLine) -> ProcessStatus:
    """Run ``command`` to completion with inherited stdio.

    Output is not captured, so the child's diagnostics reach the terminal
    unchanged. There is no timeout.

    Parameters
    ----------
    command : tuple[str, ...]
        Program and arguments.

    Returns
    -------
    ProcessStatus
        Exit status; launch failures map to 127 (not found) or 126.
    """
    logger.info("running: %s", shlex.join(command))
    try:
        completed = subprocess.run(list(command), check=False)
    except FileNotFoundError as exc:
        logger.debug("launch failed", exc_info=True)
        return ProcessStatus(returncode=EXIT_NOT_FOUND, error=str(exc))
    except OSError as exc:
        logger.debug("launch failed", exc_info=True)
        return ProcessStatus(returncode=EXIT_NOT_EXECUTABLE, error=str(exc))
    returncode = completed.returncode
    if returncode < 0:
        # Killed by signal N; report 128 + N like a shell does.
        returncode = 128 - returncode
    logger.info("%s exited %d", command[0], returncode)
    return ProcessStatus(returncode=returncode)
