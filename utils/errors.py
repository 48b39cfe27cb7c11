"""Render localized wizard errors in Streamlit."""

from __future__ import annotations

import streamlit as st

import config
from core.errors import LocalizedText
from utils.i18n import tr

Message = str | LocalizedText


def resolve_message(message: Message, *, lang: str | None = None) -> str:
    """Pick the active language from a ``(de, en)`` pair; plain strings pass through."""

    if isinstance(message, str):
        return message
    return tr(*message, lang=lang)


def display_error(msg: Message, detail: str | None = None, *, lang: str | None = None) -> None:
    """Show ``msg`` as an error box.

    ``detail`` (server messages, created product ids) is only rendered when
    ``SELLER_WIZARD_DEBUG`` is enabled.
    """

    st.error(resolve_message(msg, lang=lang))
    if not (detail and config.DEBUG):
        return
    with st.expander(tr("Technische Details", "Technical details", lang=lang)):
        st.code(detail, language="text")


__all__ = ["Message", "display_error", "resolve_message"]
