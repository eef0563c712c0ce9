"""Staging adapter implementation."""

from __future__ import annotations

import shutil
from pathlib import Path

from doc_renderer.errors import StagingError


class FileArtifactStager:
    """Copy the rendered artifact into a destination directory."""

    def stage(self, artifact_path: Path, destination_dir: Path) -> Path:
        """Copy ``artifact_path`` into ``destination_dir``.

        Parameters
        ----------
        artifact_path : Path
            Rendered artifact produced by the renderer.
        destination_dir : Path
            Existing directory that receives the copy. Relative paths are
            resolved against the current working directory.

        Returns
        -------
        Path
            Path of the copy. An existing file of the same name is replaced.

        Raises
        ------
        StagingError
            If the destination is not a directory or the copy fails.
        """
        if not destination_dir.is_dir():
            raise StagingError(
                f"Destination directory '{destination_dir}' does not exist."
            )
        target = destination_dir / artifact_path.name
        try:
            shutil.copy2(artifact_path, target)
        except shutil.SameFileError:
            return target
        except OSError as exc:
            raise StagingError(
                f"Unable to copy '{artifact_path}' to '{target}': {exc}"
            ) from exc
        return target
