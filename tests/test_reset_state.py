"""Regression tests for :func:`state.reset_state`."""

import streamlit as st

from constants.keys import StateKeys, UIKeys
from state import ensure_state, reset_state
from state.preview_handles import PreviewRegistry
from state.variant_store import VariantStore, create_page
from tests.fakes import FakeUpload, make_png
from wizard.controller import VariantPageController


def test_ensure_state_seeds_wizard_defaults() -> None:
    st.session_state.clear()
    ensure_state()

    assert isinstance(st.session_state[StateKeys.VARIANT_STORE], VariantStore)
    assert isinstance(st.session_state[StateKeys.PREVIEW_REGISTRY], PreviewRegistry)
    assert st.session_state[StateKeys.WIZARD_ERROR] is None
    assert st.session_state[UIKeys.NAME] == ""
    assert st.session_state[UIKeys.IS_RETURNABLE] is True
    assert st.session_state[StateKeys.SESSION_ID]


def test_ensure_state_keeps_existing_pages() -> None:
    st.session_state.clear()
    ensure_state()
    store = create_page(st.session_state[StateKeys.VARIANT_STORE])
    st.session_state[StateKeys.VARIANT_STORE] = store
    st.session_state["lang"] = "de"

    ensure_state()

    assert st.session_state[StateKeys.VARIANT_STORE] is store


def test_ensure_state_replaces_foreign_store_value() -> None:
    st.session_state.clear()
    st.session_state[StateKeys.VARIANT_STORE] = {"pages": []}

    ensure_state()

    assert isinstance(st.session_state[StateKeys.VARIANT_STORE], VariantStore)


def test_reset_state_preserves_language_and_session() -> None:
    st.session_state.clear()
    ensure_state()
    session_id = st.session_state[StateKeys.SESSION_ID]
    st.session_state["lang"] = "de"
    st.session_state[UIKeys.LANG_SELECT] = "de"
    st.session_state[UIKeys.NAME] = "Tee"

    reset_state()

    assert st.session_state["lang"] == "de"
    assert st.session_state[UIKeys.LANG_SELECT] == "de"
    assert st.session_state[StateKeys.SESSION_ID] == session_id
    assert st.session_state[UIKeys.NAME] == ""


def test_reset_state_rehydrates_lang_select_when_missing() -> None:
    st.session_state.clear()
    ensure_state()

    st.session_state["lang"] = "de"
    st.session_state.pop(UIKeys.LANG_SELECT, None)

    reset_state()

    assert st.session_state[UIKeys.LANG_SELECT] == "de"


def test_reset_state_releases_local_images() -> None:
    st.session_state.clear()
    ensure_state()
    controller = VariantPageController()
    controller.select_files([FakeUpload("a.png", make_png())])
    controller.create_new_page()
    controller.select_files([FakeUpload("b.png", make_png("blue"))])
    registry = controller.registry
    assert len(registry) == 2

    reset_state()

    assert len(registry) == 0
    assert st.session_state[StateKeys.PREVIEW_REGISTRY] is not registry
