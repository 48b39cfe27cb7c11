from __future__ import annotations

import sys
from pathlib import Path

import pytest
import streamlit as st


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tests.fakes import FakeSellerApi, make_png  # noqa: E402


class _SessionDict(dict[str, object]):
    """Lightweight replacement for ``st.session_state`` during tests."""


@pytest.fixture(autouse=True)
def _stub_streamlit_session_state(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace Streamlit's runtime-bound session state with a plain dictionary."""

    session_state = _SessionDict()
    monkeypatch.setattr(st, "session_state", session_state, raising=False)
    yield


@pytest.fixture
def png_bytes() -> bytes:
    return make_png()


@pytest.fixture
def fake_api() -> FakeSellerApi:
    return FakeSellerApi()
