"""Central configuration for the seller variant wizard.

Values are read from the environment (``.env`` files are honoured through
``python-dotenv``) and, for the seller access token, from Streamlit secrets.
The backend is treated as an opaque REST service: ``SELLER_API_BASE_URL``
points at the API root that serves ``/products/upload-images`` and
``/seller/products``.
"""

from __future__ import annotations

import logging
import os
import warnings
from typing import Callable, Iterator, Mapping, TypeVar

import streamlit as st
from dotenv import load_dotenv

load_dotenv()


logger = logging.getLogger(__name__)

_MEGABYTE = 1024 * 1024
_TOKEN_NAME = "SELLER_ACCESS_TOKEN"

_N = TypeVar("_N", int, float)


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in {"1", "true", "yes", "on"}


def _positive_env(raw: str | None, *, env_var: str, default: _N, cast: Callable[[str], _N]) -> _N:
    """Parse ``raw`` with ``cast``; blanks use ``default``, bad values warn and use it."""

    text = (raw or "").strip()
    if not text:
        return default
    try:
        value = cast(text)
    except ValueError:
        warnings.warn(f"{env_var}={text!r} is not a number; using {default}.", RuntimeWarning)
        return default
    if value <= 0:
        warnings.warn(f"{env_var} must be positive; using {default}.", RuntimeWarning)
        return default
    return value


def _parse_positive_int_env(raw: str | None, *, env_var: str, default: int) -> int:
    return _positive_env(raw, env_var=env_var, default=default, cast=lambda text: int(float(text)))


def _parse_positive_float_env(raw: str | None, *, env_var: str, default: float) -> float:
    return _positive_env(raw, env_var=env_var, default=default, cast=float)


def _secret_text(value: object) -> str:
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("utf-8", errors="ignore")
    return "" if value is None else str(value).strip()


def _secret_lookup(key: str) -> object:
    # st.secrets raises different errors without a secrets.toml
    try:
        return st.secrets[key]
    except Exception:
        return None


def _token_candidates() -> Iterator[object]:
    """Token sources in priority order."""

    yield _secret_lookup(_TOKEN_NAME)
    section = _secret_lookup("seller")
    if isinstance(section, Mapping):
        yield section.get(_TOKEN_NAME)
    yield os.getenv(_TOKEN_NAME)


_missing_token_logged = False


def get_seller_access_token() -> str:
    """Return the seller bearer token.

    Looks at the ``SELLER_ACCESS_TOKEN`` secret, then the ``[seller]`` secrets
    section, then the environment. A missing token is logged once until one
    shows up again.
    """

    global _missing_token_logged

    for candidate in _token_candidates():
        token = _secret_text(candidate)
        if token:
            _missing_token_logged = False
            return token
    if not _missing_token_logged:
        logger.info("SELLER_ACCESS_TOKEN not configured; API calls will be sent without authentication.")
        _missing_token_logged = True
    return ""


def _normalise_base_url(value: str | None, *, default: str) -> str:
    candidate = (value or "").strip()
    if not candidate:
        return default
    if not candidate.startswith(("http://", "https://")):
        logger.warning("SELLER_API_BASE_URL '%s' lacks a scheme; assuming https.", candidate)
        candidate = f"https://{candidate}"
    return candidate.rstrip("/")


DEFAULT_LANGUAGE = os.getenv("LANGUAGE", "en")
DEBUG = _env_flag("SELLER_WIZARD_DEBUG")

SELLER_API_BASE_URL = _normalise_base_url(os.getenv("SELLER_API_BASE_URL"), default="http://localhost:3000/api")
SELLER_API_TIMEOUT = _parse_positive_float_env(os.getenv("SELLER_API_TIMEOUT"), env_var="SELLER_API_TIMEOUT", default=30.0)
DASHBOARD_URL = os.getenv("SELLER_DASHBOARD_URL", "/seller/dashboard")

# Mirrors the limits enforced by the backend upload route.
MAX_IMAGE_BYTES = _parse_positive_int_env(os.getenv("MAX_IMAGE_BYTES"), env_var="MAX_IMAGE_BYTES", default=10 * _MEGABYTE)
MAX_FILES_PER_UPLOAD = _parse_positive_int_env(
    os.getenv("MAX_FILES_PER_UPLOAD"), env_var="MAX_FILES_PER_UPLOAD", default=10
)
MAX_UPLOAD_TOTAL_BYTES = _parse_positive_int_env(
    os.getenv("MAX_UPLOAD_TOTAL_BYTES"), env_var="MAX_UPLOAD_TOTAL_BYTES", default=100 * _MEGABYTE
)


__all__ = [
    "DASHBOARD_URL",
    "DEBUG",
    "DEFAULT_LANGUAGE",
    "MAX_FILES_PER_UPLOAD",
    "MAX_IMAGE_BYTES",
    "MAX_UPLOAD_TOTAL_BYTES",
    "SELLER_API_BASE_URL",
    "SELLER_API_TIMEOUT",
    "get_seller_access_token",
]
