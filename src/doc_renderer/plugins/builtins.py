"""Built-in renderer and viewer presets."""

from __future__ import annotations

from doc_renderer.adapters.renderers import CommandRenderer
from doc_renderer.adapters.viewers import CommandViewer

DEFAULT_RENDERER = "pandoc"
DEFAULT_VIEWER = "evince"


def builtin_renderers() -> list[CommandRenderer]:
    """Return renderer presets shipped with the package."""
    return [
        CommandRenderer("pandoc", ("pandoc", "{input}", "-o", "{output}")),
        CommandRenderer(
            "pandoc-xelatex",
            ("pandoc", "{input}", "--pdf-engine=xelatex", "-o", "{output}"),
        ),
        CommandRenderer(
            "pandoc-weasyprint",
            ("pandoc", "{input}", "--pdf-engine=weasyprint", "-o", "{output}"),
        ),
    ]


def builtin_viewers() -> list[CommandViewer]:
    """Return viewer presets shipped with the package.

    ``xdg-open`` and ``open`` hand the file to the desktop and usually return
    before the document window closes.
    """
    return [
        CommandViewer("evince", ("evince", "{path}")),
        CommandViewer("okular", ("okular", "{path}")),
        CommandViewer("zathura", ("zathura", "{path}")),
        CommandViewer("xdg-open", ("xdg-open", "{path}")),
        CommandViewer("open", ("open", "-W", "{path}")),
    ]
