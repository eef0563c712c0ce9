"""Shared pytest configuration, marker assignment and stub tools."""

from __future__ import annotations

import json
import shlex
import sys
from dataclasses import dataclass
from pathlib import Path

import pytest

RENDERER_STUB = '''\
import sys
from pathlib import Path

args = sys.argv[1:]
source = Path(args[0])
output = Path(args[args.index("-o") + 1])
output.write_bytes(b"%PDF-1.4 stub\\n" + source.read_bytes())
'''

NOOP_RENDERER_STUB = '''\
import sys

sys.stderr.write("stub renderer: refusing to render\\n")
sys.exit(3)
'''

VIEWER_STUB = '''\
import json
import sys
from pathlib import Path

log = Path(__file__).with_suffix(".calls")
with log.open("a", encoding="utf-8") as handle:
    handle.write(json.dumps(sys.argv[1:]) + "\\n")
'''


@dataclass(frozen=True)
class StubTools:
    """Command strings for stub renderer/viewer scripts run by this interpreter."""

    renderer_command: str
    noop_renderer_command: str
    viewer_command: str
    viewer_log: Path

    def viewer_calls(self) -> list[list[str]]:
        if not self.viewer_log.exists():
            return []
        lines = self.viewer_log.read_text(encoding="utf-8").splitlines()
        return [json.loads(line) for line in lines]


@dataclass(frozen=True)
class Workspace:
    """Working directory nested two levels below the default destination."""

    workdir: Path
    destination: Path


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def stub_tools(tmp_path: Path) -> StubTools:
    """Write stub renderer and viewer scripts outside the workspace."""
    tools_dir = tmp_path / "tools"
    tools_dir.mkdir()
    renderer = tools_dir / "renderer.py"
    renderer.write_text(RENDERER_STUB, encoding="utf-8")
    noop = tools_dir / "noop_renderer.py"
    noop.write_text(NOOP_RENDERER_STUB, encoding="utf-8")
    viewer = tools_dir / "viewer.py"
    viewer.write_text(VIEWER_STUB, encoding="utf-8")
    return StubTools(
        renderer_command=shlex.join(
            [sys.executable, str(renderer), "{input}", "-o", "{output}"]
        ),
        noop_renderer_command=shlex.join(
            [sys.executable, str(noop), "{input}", "-o", "{output}"]
        ),
        viewer_command=shlex.join([sys.executable, str(viewer), "{path}"]),
        viewer_log=viewer.with_suffix(".calls"),
    )


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Workspace:
    """Change into ``<tmp>/dest/inner/work`` so ``../..`` is ``<tmp>/dest``."""
    destination = tmp_path / "dest"
    workdir = destination / "inner" / "work"
    workdir.mkdir(parents=True)
    monkeypatch.chdir(workdir)
    return Workspace(workdir=workdir, destination=destination)
