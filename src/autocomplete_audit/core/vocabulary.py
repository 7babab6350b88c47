"""Autofill tokens accepted by the WHATWG ``autocomplete`` attribute.

See https://html.spec.whatwg.org/multipage/form-control-infrastructure.html#autofill
"""

from __future__ import annotations

AUTOFILL_FIELD_NAMES: frozenset[str] = frozenset(
    {
        # identity
        "name",
        "honorific-prefix",
        "given-name",
        "additional-name",
        "family-name",
        "honorific-suffix",
        "nickname",
        # credentials
        "username",
        "new-password",
        "current-password",
        "one-time-code",
        # organization
        "organization-title",
        "organization",
        # address
        "street-address",
        "address-line1",
        "address-line2",
        "address-line3",
        "address-level4",
        "address-level3",
        "address-level2",
        "address-level1",
        "country",
        "country-name",
        "postal-code",
        # payment
        "cc-name",
        "cc-given-name",
        "cc-additional-name",
        "cc-family-name",
        "cc-number",
        "cc-exp",
        "cc-exp-month",
        "cc-exp-year",
        "cc-csc",
        "cc-type",
        "transaction-currency",
        "transaction-amount",
        # personal
        "language",
        "bday",
        "bday-day",
        "bday-month",
        "bday-year",
        "sex",
        "url",
        "photo",
        # contact
        "tel",
        "tel-country-code",
        "tel-national",
        "tel-area-code",
        "tel-local",
        "tel-local-prefix",
        "tel-local-suffix",
        "tel-extension",
        "email",
        "impp",
        # toggles
        "on",
        "off",
    }
)

CONTACT_PREFIXES: frozenset[str] = frozenset(
    {"home", "work", "mobile", "fax", "pager", "shipping", "billing"}
)

SECTION_MARKER = "section-"
