"""Exception hierarchy for the document rendering pipeline."""

from __future__ import annotations


class DocRendererError(Exception):
    """Base error for doc_renderer failures.

    Attributes
    ----------
    exit_code : int
        Process exit status the CLI reports for this error.
    """

    exit_code = 1


class UsageError(DocRendererError):
    """Raised when the command line does not name exactly one document."""

    exit_code = 10


class ConfigurationError(DocRendererError):
    """Raised when pipeline options fail validation."""

    exit_code = 2


class PluginError(ConfigurationError):
    """Raised when a renderer/viewer plugin cannot be loaded or resolved."""


class StagingError(DocRendererError):
    """Raised when the rendered artifact cannot be copied to its destination."""
