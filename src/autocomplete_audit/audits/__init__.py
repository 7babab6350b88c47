"""Page audits operating on collected form records."""

from .autocomplete import AUDIT_ID, audit_autocomplete, audit_meta, is_valid_autocomplete

__all__ = ["AUDIT_ID", "audit_autocomplete", "audit_meta", "is_valid_autocomplete"]
