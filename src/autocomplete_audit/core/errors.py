"""Exceptions raised by the collaborators around the audit rule."""

from __future__ import annotations


class AuditError(Exception):
    """Base class for failures that stop an audit run."""


class PageLoadError(AuditError):
    """The target page could not be fetched or rendered."""


class ArtifactFormatError(AuditError, ValueError):
    """A form elements document does not have the expected shape."""


class UnknownMessageError(AuditError, KeyError):
    """No catalog entry exists for the requested message identifier."""

    def __str__(self) -> str:
        return Exception.__str__(self)


class ConfigurationError(AuditError, ValueError):
    """An option from the environment or the command line is unusable."""
