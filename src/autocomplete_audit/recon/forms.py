"""Extracts form records from page markup for the autocomplete audit."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..core.models import FormInput, FormRecord
from .utils import choose_node_label, render_snippet

logger = logging.getLogger(__name__)

IGNORED_INPUT_TYPES = {"hidden", "submit", "button", "reset", "image"}
CONTROL_TAGS = ["input", "textarea", "select"]


@dataclass(slots=True)
class FormElementsCollector:
    """Groups the controls of a page into ordered form records."""

    parser: str = "html.parser"
    _label_texts: Dict[str, str] = field(default_factory=dict)

    # ------------------------------------------------------------------
    # Collection routines
    # ------------------------------------------------------------------
    def collect_from_page(self, page: Any) -> List[FormRecord]:
        """Collects forms from the rendered DOM of a Playwright page."""

        html = self._read_page_html(page)
        if not html:
            return []
        return self.collect_from_html(html)

    def collect_from_html(self, html: str) -> List[FormRecord]:
        soup = BeautifulSoup(html, self.parser)
        return self.collect_from_soup(soup)

    def collect_from_soup(self, soup: BeautifulSoup) -> List[FormRecord]:
        self._label_texts = self._index_labels(soup)
        forms: List[FormRecord] = []

        for form in soup.find_all("form"):
            inputs = [
                self._build_input(element)
                for element in form.find_all(CONTROL_TAGS)
                if self._is_auditable(element)
            ]
            forms.append(FormRecord.from_inputs(inputs))

        loose_inputs = [
            self._build_input(element)
            for element in soup.find_all(CONTROL_TAGS)
            if element.find_parent("form") is None and self._is_auditable(element)
        ]
        if loose_inputs:
            forms.append(FormRecord.from_inputs(loose_inputs))

        logger.debug(
            "Collected %d forms (%d loose inputs)", len(forms), len(loose_inputs)
        )
        return forms

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _build_input(self, element: Tag) -> FormInput:
        element_id = element.get("id")
        name = element.get("name")
        placeholder = element.get("placeholder")

        return FormInput(
            snippet=render_snippet(element),
            node_label=choose_node_label(
                tag=element.name,
                aria=element.get("aria-label"),
                label=self._label_for(element),
                placeholder=placeholder,
                name=name,
                element_id=element_id,
            ),
            autocomplete_attr=element.get("autocomplete"),
            element_id=element_id,
            name=name,
            placeholder=placeholder,
        )

    def _label_for(self, element: Tag) -> Optional[str]:
        element_id = element.get("id")
        if element_id and element_id in self._label_texts:
            return self._label_texts[element_id]

        wrapper = element.find_parent("label")
        if wrapper is not None:
            return wrapper.get_text(" ", strip=True) or None
        return None

    @staticmethod
    def _index_labels(soup: BeautifulSoup) -> Dict[str, str]:
        labels: Dict[str, str] = {}
        for label in soup.find_all("label"):
            target = label.get("for")
            text = label.get_text(" ", strip=True)
            if target and text:
                labels.setdefault(target, text)
        return labels

    @staticmethod
    def _is_auditable(element: Tag) -> bool:
        if element.name != "input":
            return True
        input_type = (element.get("type") or "").lower()
        return input_type not in IGNORED_INPUT_TYPES

    @staticmethod
    def _read_page_html(page: Any) -> str:
        try:
            return page.content()
        except Exception:
            logger.debug("Could not read page content", exc_info=True)
            return ""
