"""Simple i18n helper utilities."""

from __future__ import annotations

from typing import Final

import streamlit as st

import config


WIZARD_TITLE: Final[tuple[str, str]] = ("Neues Produkt anlegen", "Add New Product")
ADD_VARIANT_LABEL: Final[tuple[str, str]] = ("Variante hinzufügen", "Add variant")
REMOVE_VARIANT_LABEL: Final[tuple[str, str]] = ("Variante entfernen", "Remove variant")
SUBMIT_LABEL: Final[tuple[str, str]] = ("Alle Varianten speichern", "Submit all variants")
START_OVER_LABEL: Final[tuple[str, str]] = ("Neu beginnen", "Start over")
LAST_VARIANT_ERROR: Final[tuple[str, str]] = (
    "Mindestens eine Variante muss bestehen bleiben.",
    "At least one variant is required.",
)
INVALID_SIZE_QUANTITY: Final[tuple[str, str]] = (
    "Bitte eine Größe wählen und eine gültige Menge eingeben.",
    "Please select a size and enter a valid quantity",
)
SUBMISSION_SUCCESS: Final[tuple[str, str]] = (
    "{count} Produkte erfolgreich angelegt!",
    "Successfully added {count} products!",
)
SUBMISSION_FAILED: Final[tuple[str, str]] = (
    "Variante {page} konnte nicht gespeichert werden: {message}",
    "Failed to submit variant {page}: {message}",
)
SUBMISSION_PARTIAL: Final[tuple[str, str]] = (
    "{count} Variante(n) wurden bereits angelegt und nicht zurückgenommen.",
    "{count} variant(s) were already created and have not been rolled back.",
)


def tr(de: str, en: str, lang: str | None = None) -> str:
    """Return the string matching the current language.

    Args:
        de: German text.
        en: English text.
        lang: Optional language override (``"de"`` or ``"en"``).

    Returns:
        The localized string for the requested language.
    """
    code = lang or st.session_state.get("lang", config.DEFAULT_LANGUAGE)
    return de if code == "de" else en


def trf(pair: tuple[str, str], lang: str | None = None, **values: object) -> str:
    """Translate ``pair`` and fill its ``str.format`` placeholders."""

    return tr(*pair, lang=lang).format(**values)
