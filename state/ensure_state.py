"""Helpers for initializing Streamlit session state."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Mapping, MutableMapping
from types import MappingProxyType
from typing import Any, Callable, cast

import streamlit as st

import config
from constants.keys import FORM_FIELD_KEYS, StateKeys, UIKeys
from models.product_page import ProductPage
from state.preview_handles import PreviewRegistry
from state.variant_store import VariantStore, initial_store, owned_files

logger = logging.getLogger(__name__)

_EMPTY_PAGE = ProductPage()

_DEFAULT_STATE_FACTORIES: Mapping[str, Callable[[], Any]] = MappingProxyType(
    {
        StateKeys.VARIANT_STORE: initial_store,
        StateKeys.PREVIEW_REGISTRY: PreviewRegistry,
        StateKeys.WIZARD_ERROR: lambda: None,
        StateKeys.WIZARD_NOTICE: lambda: None,
        StateKeys.LAST_REPORT: lambda: None,
        StateKeys.SESSION_ID: lambda: uuid.uuid4().hex[:12],
        "lang": lambda: config.DEFAULT_LANGUAGE,
        UIKeys.LANG_SELECT: lambda: "de" if config.DEFAULT_LANGUAGE == "de" else "en",
        **{key: (lambda name=name: getattr(_EMPTY_PAGE, name)) for name, key in FORM_FIELD_KEYS.items()},
    }
)

_PRESERVED_KEYS: tuple[str, ...] = ("lang", UIKeys.LANG_SELECT, UIKeys.UPLOADER_NONCE, StateKeys.SESSION_ID)

SessionState = MutableMapping[str, Any]


def _session(state: SessionState | None) -> SessionState:
    return cast(SessionState, st.session_state if state is None else state)


def ensure_state(state: SessionState | None = None) -> None:
    """Seed the session with wizard defaults without overwriting data."""

    state = _session(state)
    for key, factory in _DEFAULT_STATE_FACTORIES.items():
        if key not in state:
            state[key] = factory()
    if not isinstance(state.get(StateKeys.VARIANT_STORE), VariantStore):
        logger.warning("Replacing unexpected variant store value in session state")
        state[StateKeys.VARIANT_STORE] = initial_store()
    if not isinstance(state.get(StateKeys.PREVIEW_REGISTRY), PreviewRegistry):
        state[StateKeys.PREVIEW_REGISTRY] = PreviewRegistry()


def reset_state(state: SessionState | None = None, *, keep: Iterable[str] = ()) -> None:
    """Release local images and reseed the wizard.

    Keys in ``_PRESERVED_KEYS`` always survive. ``keep`` names further keys
    to carry over, such as the success notice.
    """

    state = _session(state)
    preserved = {key: state[key] for key in (*_PRESERVED_KEYS, *keep) if key in state}
    registry = state.get(StateKeys.PREVIEW_REGISTRY)
    store = state.get(StateKeys.VARIANT_STORE)
    if isinstance(registry, PreviewRegistry):
        if isinstance(store, VariantStore):
            registry.release_all(owned_files(store))
        registry.release_all(state.get(UIKeys.FILES) or ())
        registry.clear()
    state.clear()
    state.update(preserved)
    if UIKeys.LANG_SELECT not in state and "lang" in state:
        state[UIKeys.LANG_SELECT] = state["lang"]
    ensure_state(state)
