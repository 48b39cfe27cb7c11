# app.py — Seller variant wizard (Streamlit entrypoint)
from __future__ import annotations

from pathlib import Path
import sys

import streamlit as st

APP_ROOT = Path(__file__).resolve().parent
if str(APP_ROOT) not in sys.path:
    sys.path.insert(0, str(APP_ROOT))

import config  # noqa: E402
from constants.keys import StateKeys, UIKeys  # noqa: E402
from state import ensure_state  # noqa: E402
from utils.i18n import tr  # noqa: E402
from utils.logging_context import configure_logging, set_session_id  # noqa: E402
from utils.telemetry import setup_tracing  # noqa: E402
from wizard import run_wizard  # noqa: E402

APP_VERSION = "0.3.0"

configure_logging()
setup_tracing()

st.set_page_config(
    page_title="Seller Dashboard · Add Product",
    page_icon="🛍️",
    layout="wide",
)

ensure_state()
set_session_id(str(st.session_state.get(StateKeys.SESSION_ID)))
st.session_state.setdefault("app_version", APP_VERSION)

with st.sidebar:
    st.selectbox(
        tr("Sprache", "Language"),
        options=["en", "de"],
        key=UIKeys.LANG_SELECT,
        on_change=lambda: st.session_state.update({"lang": st.session_state[UIKeys.LANG_SELECT]}),
    )
    st.link_button(tr("Zum Dashboard", "Back to dashboard"), config.DASHBOARD_URL)
    if not config.get_seller_access_token():
        st.warning(
            tr(
                "⚠️ SELLER_ACCESS_TOKEN ist nicht gesetzt; Anfragen werden ohne Anmeldung gesendet.",
                "⚠️ SELLER_ACCESS_TOKEN is not set; requests are sent unauthenticated.",
            )
        )

run_wizard()
