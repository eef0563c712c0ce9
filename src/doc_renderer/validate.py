"""Rendered artifact verification helpers."""

from __future__ import annotations

import os

from doc_renderer.types import PathLike


def artifact_exists(output_path: PathLike) -> bool:
    """Check whether the renderer left a regular file at ``output_path``.

    Parameters
    ----------
    output_path : str | Path
        Derived artifact path.

    Returns
    -------
    bool
        ``True`` when a regular file (or a symlink to one) exists.
    """
    return os.path.isfile(output_path)
