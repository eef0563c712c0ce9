"""End-to-end render, stage and view run through the console script."""

from __future__ import annotations

import os
import subprocess

from conftest import StubTools, Workspace


def test_console_script_renders_stages_and_views(
    workspace: Workspace, stub_tools: StubTools
) -> None:
    """Run render-doc as a real process with stub tools from the environment."""
    (workspace.workdir / "doc.md").write_text("# Doc\n", encoding="utf-8")

    result = subprocess.run(
        ["render-doc", "doc.md"],
        capture_output=True,
        text=True,
        check=False,
        cwd=workspace.workdir,
        env={
            **os.environ,
            "DOC_RENDERER_RENDERER_COMMAND": stub_tools.renderer_command,
            "DOC_RENDERER_VIEWER_COMMAND": stub_tools.viewer_command,
        },
    )

    assert result.returncode == 0, result.stderr
    staged = workspace.destination / "doc.pdf"
    assert staged.read_bytes() == (workspace.workdir / "doc.pdf").read_bytes()
    assert stub_tools.viewer_calls() == [["../../doc.pdf"]]
