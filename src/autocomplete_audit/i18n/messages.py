"""String tables for the audit's user-facing text."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Tuple, Union

from ..core.errors import UnknownMessageError

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en-US"

# Plural-aware entries hold (singular, plural).
Message = Union[str, Tuple[str, str]]

UI_STRINGS: Mapping[str, Mapping[str, Message]] = {
    "en-US": {
        "title": "Input elements use autocomplete",
        "failure_title": "Input elements do not have correct attributes for autocomplete",
        "description": (
            "Autocomplete helps users submit forms quicker. To reduce user "
            "effort, consider enabling autocomplete by setting the `autocomplete` "
            "attribute to a valid value. [Learn more]"
            "(https://developers.google.com/web/fundamentals/design-and-ux/input/forms"
            "#use_metadata_to_enable_auto-complete)"
        ),
        "column_failing_elem": "Failing Elements",
        "display_value_elements_found": (
            "{node_count} element found",
            "{node_count} elements found",
        ),
    },
    "pt-BR": {
        "title": "Os elementos de entrada usam preenchimento automático",
        "failure_title": (
            "Os elementos de entrada não têm atributos corretos "
            "para preenchimento automático"
        ),
        "description": (
            "O preenchimento automático ajuda os usuários a enviar formulários "
            "mais rápido. Para reduzir o esforço, defina o atributo `autocomplete` "
            "com um valor válido. [Saiba mais]"
            "(https://developers.google.com/web/fundamentals/design-and-ux/input/forms"
            "#use_metadata_to_enable_auto-complete)"
        ),
        "column_failing_elem": "Elementos com falha",
        "display_value_elements_found": (
            "{node_count} elemento encontrado",
            "{node_count} elementos encontrados",
        ),
    },
}


def resolve_locale(locale: Optional[str]) -> str:
    """Returns a supported locale, falling back to :data:`DEFAULT_LOCALE`."""

    if not locale:
        return DEFAULT_LOCALE
    if locale in UI_STRINGS:
        return locale

    # "pt" or "pt_br" still map onto "pt-BR"
    normalized = locale.replace("_", "-").lower()
    for candidate in UI_STRINGS:
        if candidate.lower() == normalized or candidate.lower().split("-")[0] == normalized:
            return candidate

    logger.debug("Locale %r not available, using %s", locale, DEFAULT_LOCALE)
    return DEFAULT_LOCALE


def get_message(message_id: str, locale: Optional[str] = None, **params: Any) -> str:
    """Formats the message ``message_id`` for ``locale`` with named ``params``."""

    table = UI_STRINGS[resolve_locale(locale)]
    try:
        entry = table[message_id]
    except KeyError:
        raise UnknownMessageError(f"Unknown message id: {message_id}") from None

    if isinstance(entry, tuple):
        singular, plural = entry
        entry = singular if params.get("node_count") == 1 else plural

    return entry.format(**params) if params else entry
