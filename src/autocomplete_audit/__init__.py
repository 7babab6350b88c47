"""Audit of WHATWG ``autocomplete`` attributes on page form inputs."""

from .audits.autocomplete import audit_autocomplete, is_valid_autocomplete

__version__ = "0.1.0"

__all__ = ["audit_autocomplete", "is_valid_autocomplete"]
