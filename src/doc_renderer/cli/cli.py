#!/usr/bin/env python3
"""
doc_renderer.cli.cli

Typer-based CLI that renders a Markdown document to PDF with an external
renderer, stages a copy of the PDF and opens it in a viewer.

Examples
--------
Render with the defaults (pandoc, copy to ../.., open with evince):

    render-doc report.md

Use another viewer and keep the PDF where it was rendered:

    render-doc report.md --viewer zathura --no-stage

Check which external tools are available:

    render-doc-doctor
"""

from __future__ import annotations

import logging
import shutil
import sys
import traceback
from pathlib import Path

import typer

from doc_renderer.application.results import PipelineResult
from doc_renderer.errors import DocRendererError, PluginError, UsageError

app = typer.Typer(
    name="render-doc",
    help="Render a Markdown document to PDF, stage a copy and open it.",
    add_completion=False,
)

doctor_app = typer.Typer(
    name="render-doc-doctor",
    help="Report renderer/viewer presets and whether their programs are installed.",
    add_completion=False,
)

USAGE_ARGS = "<path-to-source-document>"
PLUGIN_MODULE_HELP = "Plugin module import path or file path (repeatable)."
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


# -----------------------------
# Utilities
# -----------------------------
def _configure_logging(verbose: bool, debug: bool) -> None:
    """Route library logging to stderr at the requested level."""
    level = logging.WARNING
    if verbose:
        level = logging.INFO
    if debug:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def _program_name(ctx: typer.Context) -> str:
    return ctx.find_root().info_name or Path(sys.argv[0]).name


def _require_single_source(ctx: typer.Context, sources: list[str] | None) -> str:
    """Return the only positional argument or exit with the usage status.

    Parameters
    ----------
    ctx : typer.Context
        Context used to name the invoked program.
    sources : list[str] | None
        Positional arguments as collected by Typer.

    Returns
    -------
    str
        The source document path.
    """
    if sources is None or len(sources) != 1:
        typer.echo(f"Usage: {_program_name(ctx)} {USAGE_ARGS}", err=True)
        raise typer.Exit(code=UsageError.exit_code)
    return sources[0]


def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly pipeline error.

    Parameters
    ----------
    exc : Exception
        Exception raised by the pipeline.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _report(result: PipelineResult) -> None:
    """Echo the separate renderer and artifact outcomes."""
    if not result.artifact_present:
        if result.render.succeeded:
            typer.echo(
                f"✗ Renderer exited 0 but {result.output_path} was not produced.",
                err=True,
            )
        else:
            typer.echo(
                f"✗ Renderer exited {result.render.returncode}; "
                f"{result.output_path} was not produced.",
                err=True,
            )
        return
    typer.echo(f"✓ Rendered: {result.output_path}")
    if result.staged_path is not None:
        typer.echo(f"✓ Staged: {result.staged_path}")


def _resolve_executable(program: str) -> str | None:
    """Locate ``program`` on ``PATH``."""
    return shutil.which(program)


def _locate(tool: object) -> str:
    """Describe where the program behind a preset resolves."""
    program = getattr(tool, "executable", None)
    if not program:
        return "<no executable>"
    return _resolve_executable(program) or "<not installed>"


# -----------------------------
# Commands
# -----------------------------
@app.command()
def main(
    ctx: typer.Context,
    sources: list[str] | None = typer.Argument(
        None,
        metavar="PATH",
        help="Source document to render (exactly one).",
        show_default=False,
    ),
    dest_dir: Path | None = typer.Option(
        None,
        "--dest-dir",
        envvar="DOC_RENDERER_DEST_DIR",
        help="Directory receiving a copy of the PDF. [default: ../..]",
    ),
    renderer: str | None = typer.Option(
        None,
        "--renderer",
        envvar="DOC_RENDERER_RENDERER",
        help="Renderer preset name. [default: pandoc]",
    ),
    renderer_command: str | None = typer.Option(
        None,
        "--renderer-command",
        envvar="DOC_RENDERER_RENDERER_COMMAND",
        help="Custom renderer command with {input} and {output} placeholders.",
    ),
    renderer_arg: list[str] | None = typer.Option(
        None,
        "--renderer-arg",
        help="Extra argument appended to the renderer command (repeatable).",
    ),
    viewer: str | None = typer.Option(
        None,
        "--viewer",
        envvar="DOC_RENDERER_VIEWER",
        help="Viewer preset name. [default: evince]",
    ),
    viewer_command: str | None = typer.Option(
        None,
        "--viewer-command",
        envvar="DOC_RENDERER_VIEWER_COMMAND",
        help="Custom viewer command with a {path} placeholder.",
    ),
    source_suffix: str = typer.Option(
        ".md", "--source-suffix", help="Extension replaced to name the PDF."
    ),
    target_suffix: str = typer.Option(
        ".pdf", "--target-suffix", help="Extension of the rendered artifact."
    ),
    plugin_module: list[str] | None = typer.Option(
        None, "--plugin-module", help=PLUGIN_MODULE_HELP
    ),
    no_stage: bool = typer.Option(
        False, "--no-stage", help="Do not copy the PDF to the destination directory."
    ),
    no_view: bool = typer.Option(False, "--no-view", help="Do not open a viewer."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pipeline steps."),
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
) -> None:
    """Render PATH to PDF, copy the PDF to the destination and open it.

    Parameters
    ----------
    ctx : typer.Context
        Typer context, used to name the program in usage errors.
    sources : list[str] | None
        Positional arguments; exactly one is accepted.

    Notes
    -----
    - Wrong positional argument count exits with status 10.
    - When no PDF is produced the renderer's exit status is returned.
    - The viewer's exit status never changes the result.
    """
    input_path = _require_single_source(ctx, sources)
    _configure_logging(verbose, debug)

    try:
        from doc_renderer.api import render_document

        result = render_document(
            input_path,
            source_suffix=source_suffix,
            target_suffix=target_suffix,
            destination_dir=dest_dir,
            renderer=renderer,
            renderer_command=renderer_command,
            renderer_args=renderer_arg,
            viewer=viewer,
            viewer_command=viewer_command,
            plugin_modules=plugin_module,
            stage=not no_stage,
            view=not no_view,
        )
    except DocRendererError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_error(exc, debug))

    _report(result)
    raise typer.Exit(code=result.exit_code)


@doctor_app.command()
def doctor(
    plugin_module: list[str] | None = typer.Option(
        None, "--plugin-module", help=PLUGIN_MODULE_HELP
    ),
) -> None:
    """Print interpreter and package versions and tool availability."""
    from doc_renderer import __version__
    from doc_renderer.plugins.registry import create_default_registry

    typer.echo(f"Python: {sys.version.split()[0]}")
    typer.echo(f"doc-renderer: {__version__}")

    try:
        registry = create_default_registry(extra_modules=plugin_module)
    except PluginError as exc:
        raise typer.Exit(code=_print_error(exc, debug=False))

    for name in registry.renderer_names():
        typer.echo(f"renderer {name}: {_locate(registry.get_renderer(name))}")
    for name in registry.viewer_names():
        typer.echo(f"viewer {name}: {_locate(registry.get_viewer(name))}")


if __name__ == "__main__":
    app()
