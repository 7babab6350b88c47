"""Artifact data structures exchanged between the collector, the audit and the CLI."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from .errors import ArtifactFormatError
from .models import FormInput, FormRecord


def _freeze_forms(forms: Iterable[FormRecord]) -> Tuple[FormRecord, ...]:
    return tuple(forms)


def _optional_text(raw: Dict[str, Any], key: str) -> Optional[str]:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ArtifactFormatError(f"Field '{key}' must be a string, got {type(value).__name__}")
    return value


def _input_from_dict(raw: Any) -> FormInput:
    if not isinstance(raw, dict):
        raise ArtifactFormatError("Each input must be a JSON object")
    return FormInput(
        snippet=_optional_text(raw, "snippet") or "",
        node_label=_optional_text(raw, "nodeLabel") or "",
        autocomplete_attr=_optional_text(raw, "autocomplete"),
        element_id=_optional_text(raw, "id"),
        name=_optional_text(raw, "name"),
        placeholder=_optional_text(raw, "placeholder"),
    )


def _input_to_dict(form_input: FormInput) -> Dict[str, Any]:
    return {
        "autocomplete": form_input.autocomplete_attr,
        "snippet": form_input.snippet,
        "nodeLabel": form_input.node_label,
        "id": form_input.element_id,
        "name": form_input.name,
        "placeholder": form_input.placeholder,
    }


@dataclass(frozen=True)
class FormElementsArtifact:
    """Forms gathered from a page, in document order."""

    forms: Tuple[FormRecord, ...]
    source: str = ""

    @property
    def input_count(self) -> int:
        return sum(len(form.inputs) for form in self.forms)

    @classmethod
    def from_forms(cls, forms: Sequence[FormRecord], source: str = "") -> "FormElementsArtifact":
        return cls(forms=_freeze_forms(forms), source=source)

    def to_json(self) -> str:
        data = {
            "source": self.source,
            "forms": [
                {"inputs": [_input_to_dict(form_input) for form_input in form.inputs]}
                for form in self.forms
            ],
        }
        return json.dumps(data, indent=4, ensure_ascii=False)

    def save(self, path: Path) -> None:
        path.write_text(self.to_json(), encoding="utf-8")

    @classmethod
    def from_json(cls, text: str) -> "FormElementsArtifact":
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ArtifactFormatError(f"Invalid JSON: {exc}") from exc

        if not isinstance(raw, dict) or not isinstance(raw.get("forms"), list):
            raise ArtifactFormatError("Expected an object with a 'forms' list")

        forms: List[FormRecord] = []
        for raw_form in raw["forms"]:
            if not isinstance(raw_form, dict) or not isinstance(raw_form.get("inputs", []), list):
                raise ArtifactFormatError("Each form must be an object with an 'inputs' list")
            forms.append(
                FormRecord.from_inputs(_input_from_dict(item) for item in raw_form.get("inputs", []))
            )

        source = raw.get("source") or ""
        return cls(forms=_freeze_forms(forms), source=str(source))

    @classmethod
    def load(cls, path: Path) -> "FormElementsArtifact":
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ArtifactFormatError(f"{path} is not UTF-8 text: {exc}") from exc
        return cls.from_json(text)


@dataclass
class AuditVerdict:
    """Result of an audit run, shaped for the reporting layer."""

    audit_id: str
    score: int
    title: str = ""
    display_value: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return self.score == 1

    @property
    def items(self) -> List[Dict[str, Any]]:
        return list(self.details.get("items", []))

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.audit_id,
            "title": self.title,
            "score": self.score,
        }
        if self.display_value is not None:
            data["displayValue"] = self.display_value
        data["details"] = self.details
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=4, ensure_ascii=False)

    def save(self, path: Path) -> None:
        path.write_text(self.to_json(), encoding="utf-8")

    @classmethod
    def load(cls, path: Path) -> "AuditVerdict":
        raw = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            audit_id=raw.get("id", ""),
            title=raw.get("title", ""),
            score=int(raw.get("score", 0)),
            display_value=raw.get("displayValue"),
            details=dict(raw.get("details", {})),
        )
