"""Helper utilities used by recon modules."""

from __future__ import annotations

from typing import Optional, Tuple

from bs4.element import Tag


def parse_session_cookie(raw: Optional[str]) -> Optional[Tuple[str, str]]:
    """Splits a ``NAME=VALUE`` cookie string, ignoring incomplete values."""

    if not raw:
        return None
    name, _, value = raw.partition("=")
    name, value = name.strip(), value.strip()
    if not name or not value:
        return None
    return name, value


def choose_node_label(
    *,
    tag: Optional[str],
    aria: Optional[str],
    label: Optional[str],
    placeholder: Optional[str],
    name: Optional[str],
    element_id: Optional[str],
) -> str:
    """Best-effort human readable label for a form control."""

    for value in (aria, label, placeholder, name, element_id):
        if value and value.strip():
            return value.strip()
    return (tag or "").lower()


def _attribute_text(value: object) -> str:
    if isinstance(value, (list, tuple)):
        value = " ".join(str(item) for item in value)
    return str(value).replace("&", "&amp;").replace('"', "&quot;")


def render_snippet(element: Tag) -> str:
    """Renders ``<tag attr="value" ...`` keeping the source attribute order.

    The closing ``>`` is left off: the audit report appends it after
    trimming ``title=`` metadata.
    """

    pieces = [element.name or ""]
    for attribute, value in element.attrs.items():
        pieces.append(f'{attribute}="{_attribute_text(value)}"')
    return f"<{' '.join(pieces)}"
