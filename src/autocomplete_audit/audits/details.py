"""Helpers that build the report detail structures shared by audits."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from ..core.models import NodeValue, TableHeading

TITLE_ATTRIBUTE_MARKER = " title="


def truncate_snippet(snippet: str) -> str:
    """Drops any trailing ``title=`` metadata and closes the tag with ``>``."""

    return snippet.partition(TITLE_ATTRIBUTE_MARKER)[0] + ">"


def make_node_value(snippet: str, node_label: str) -> NodeValue:
    return {"type": "node", "snippet": snippet, "nodeLabel": node_label}


def make_table_details(
    headings: Sequence[TableHeading],
    items: Sequence[Dict[str, Any]],
) -> Dict[str, Any]:
    """Wraps headings and rows into a ``table`` details object."""

    rows: List[Dict[str, Any]] = [dict(item) for item in items]
    return {
        "type": "table",
        "headings": [dict(heading) for heading in headings],
        "items": rows,
    }
