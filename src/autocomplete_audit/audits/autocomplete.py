"""Checks that every page input carries a valid ``autocomplete`` attribute."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..core.artifacts import AuditVerdict
from ..core.models import AutocompleteValidity, FormInput, FormRecord, TableHeading
from ..core.vocabulary import AUTOFILL_FIELD_NAMES, CONTACT_PREFIXES, SECTION_MARKER
from ..i18n.messages import get_message
from .details import make_node_value, make_table_details, truncate_snippet

logger = logging.getLogger(__name__)

AUDIT_ID = "autocomplete"
REQUIRED_ARTIFACTS = ("FormElements",)


def audit_meta(locale: Optional[str] = None) -> Dict[str, Any]:
    return {
        "id": AUDIT_ID,
        "title": get_message("title", locale),
        "failureTitle": get_message("failure_title", locale),
        "description": get_message("description", locale),
        "requiredArtifacts": list(REQUIRED_ARTIFACTS),
    }


def is_valid_autocomplete(autocomplete_attr: Optional[str]) -> AutocompleteValidity:
    """Validates the section, contact prefix and field name of an attribute.

    Only values split into exactly two (``prefix field``) or three
    (``section-* prefix field``) space-separated tokens are parsed; any other
    value is checked as a whole against the field names.
    """

    if not autocomplete_attr:
        return AutocompleteValidity(attribute=False)

    if " " in autocomplete_attr:
        tokens = autocomplete_attr.split(" ")
        if len(tokens) == 2:
            prefix, field_name = tokens
            return AutocompleteValidity(
                attribute=field_name in AUTOFILL_FIELD_NAMES,
                prefix=prefix in CONTACT_PREFIXES,
            )
        if len(tokens) == 3:
            section, prefix, field_name = tokens
            return AutocompleteValidity(
                attribute=field_name in AUTOFILL_FIELD_NAMES,
                prefix=prefix in CONTACT_PREFIXES,
                section=section[: len(SECTION_MARKER)] == SECTION_MARKER,
            )

    return AutocompleteValidity(attribute=autocomplete_attr in AUTOFILL_FIELD_NAMES)


def _failure_item(form_input: FormInput) -> Dict[str, Any]:
    snippet = truncate_snippet(form_input.snippet)
    return {"node": make_node_value(snippet, form_input.node_label)}


def audit_autocomplete(
    forms: Iterable[FormRecord],
    *,
    locale: Optional[str] = None,
) -> AuditVerdict:
    """Runs the autocomplete audit over already collected form records."""

    failing_items: List[Dict[str, Any]] = []
    checked = 0

    for form in forms:
        for form_input in form.inputs:
            checked += 1
            validity = is_valid_autocomplete(form_input.autocomplete_attr)
            if validity.is_valid:
                continue
            logger.debug(
                "Invalid autocomplete %r on %s (%s)",
                form_input.autocomplete_attr,
                form_input.node_label,
                validity,
            )
            failing_items.append(_failure_item(form_input))

    headings: List[TableHeading] = [
        {"key": "node", "itemType": "node", "text": get_message("column_failing_elem", locale)},
    ]
    details = make_table_details(headings, failing_items)

    display_value = None
    if failing_items:
        display_value = get_message(
            "display_value_elements_found", locale, node_count=len(failing_items)
        )

    score = 0 if failing_items else 1
    logger.debug("Checked %d inputs, %d failing", checked, len(failing_items))

    return AuditVerdict(
        audit_id=AUDIT_ID,
        title=get_message("title" if score else "failure_title", locale),
        score=score,
        display_value=display_value,
        details=details,
    )
