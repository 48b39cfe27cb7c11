import streamlit as st

from utils.errors import resolve_message
from utils.i18n import SUBMISSION_SUCCESS, tr, trf


def test_tr_follows_session_language() -> None:
    st.session_state["lang"] = "de"
    assert tr("Hallo", "Hello") == "Hallo"

    st.session_state["lang"] = "en"
    assert tr("Hallo", "Hello") == "Hello"
    assert tr("Hallo", "Hello", lang="de") == "Hallo"


def test_trf_formats_placeholders() -> None:
    assert trf(SUBMISSION_SUCCESS, lang="en", count=2) == "Successfully added 2 products!"
    assert trf(SUBMISSION_SUCCESS, lang="de", count=3) == "3 Produkte erfolgreich angelegt!"


def test_resolve_message_accepts_plain_strings() -> None:
    assert resolve_message("plain") == "plain"
    assert resolve_message(("Fehler", "Error"), lang="en") == "Error"
