"""Shared data structures used by the collector and the audit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, TypedDict


@dataclass(frozen=True, slots=True)
class FormInput:
    """A single form control as seen by the audit."""

    snippet: str
    node_label: str
    autocomplete_attr: Optional[str] = None
    element_id: Optional[str] = None
    name: Optional[str] = None
    placeholder: Optional[str] = None


@dataclass(frozen=True, slots=True)
class FormRecord:
    """Ordered inputs belonging to one ``<form>`` (or to the implicit form)."""

    inputs: Tuple[FormInput, ...] = ()

    @classmethod
    def from_inputs(cls, inputs: Iterable[FormInput]) -> "FormRecord":
        return cls(inputs=tuple(inputs))


@dataclass(frozen=True, slots=True)
class AutocompleteValidity:
    """Outcome of checking each grammatical part of an autocomplete value."""

    attribute: bool = True
    prefix: bool = True
    section: bool = True

    @property
    def is_valid(self) -> bool:
        return self.attribute and self.prefix and self.section


class NodeValue(TypedDict):
    """Reference to an offending element in the report details."""

    type: str
    snippet: str
    nodeLabel: str


class TableHeading(TypedDict):
    key: str
    itemType: str
    text: str
