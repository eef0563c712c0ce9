"""Derivation of the rendered artifact path from the source document path."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

SOURCE_SUFFIX = ".md"
TARGET_SUFFIX = ".pdf"

_SEPARATORS = tuple(sep for sep in (os.sep, os.altsep) if sep)


def _final_component(path: str) -> str:
    """Return the text after the last path separator."""
    cut = max(path.rfind(sep) for sep in _SEPARATORS)
    return path[cut + 1 :]


def derive_output_path(
    input_path: str,
    source_suffix: str = SOURCE_SUFFIX,
    target_suffix: str = TARGET_SUFFIX,
) -> str:
    """Replace a trailing source extension with the target extension.

    Only the extension of the final path component is considered, so
    ``md5notes.md`` becomes ``md5notes.pdf`` and ``a.md.txt`` is left alone.
    A component consisting only of the suffix (``.md``) has no stem and is
    also left alone. Paths are treated as plain strings: separators and
    relative components are passed through untouched.

    Parameters
    ----------
    input_path : str
        Source document path as supplied on the command line.
    source_suffix : str, default=".md"
        Extension recognized on the source document.
    target_suffix : str, default=".pdf"
        Extension of the rendered artifact.

    Returns
    -------
    str
        Derived artifact path, or ``input_path`` unchanged when the source
        extension does not apply.
    """
    name = _final_component(input_path)
    if len(name) <= len(source_suffix) or not name.endswith(source_suffix):
        logger.warning(
            "'%s' does not end with %s; output path left unchanged",
            input_path,
            source_suffix,
        )
        return input_path
    return input_path[: -len(source_suffix)] + target_suffix
