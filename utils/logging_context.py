"""Per-session logging context for the variant wizard.

Every log record carries the Streamlit session id and the variant page being
edited or submitted, so interleaved sessions stay readable in one log.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import Iterator

LOG_FORMAT = "%(asctime)s %(levelname)s [session=%(session_id)s page=%(wizard_page)s] %(name)s: %(message)s"

_UNSET = "-"
_CONTEXT_VARS: dict[str, contextvars.ContextVar[str]] = {
    "session_id": contextvars.ContextVar("session_id", default=_UNSET),
    "wizard_page": contextvars.ContextVar("wizard_page", default=_UNSET),
}
_base_record_factory = logging.getLogRecordFactory()
_factory_installed = False


def _as_field(value: object | None) -> str:
    text = "" if value is None else str(value).strip()
    return text or _UNSET


def _stamp(record: logging.LogRecord) -> logging.LogRecord:
    for name, var in _CONTEXT_VARS.items():
        setattr(record, name, var.get())
    return record


def _context_record_factory(*args: object, **kwargs: object) -> logging.LogRecord:
    return _stamp(_base_record_factory(*args, **kwargs))


def configure_logging(*, level: int = logging.INFO) -> None:
    """Install the context-aware record factory and a matching root format.

    Safe to call on every Streamlit rerun.
    """

    global _factory_installed
    if not _factory_installed:
        logging.setLogRecordFactory(_context_record_factory)
        _factory_installed = True
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
        return
    for handler in root.handlers:
        if handler.formatter is None:
            handler.setFormatter(logging.Formatter(LOG_FORMAT))


def set_session_id(session_id: str | None) -> None:
    configure_logging()
    _CONTEXT_VARS["session_id"].set(_as_field(session_id))


def set_wizard_page(page: int | None) -> None:
    _CONTEXT_VARS["wizard_page"].set(_as_field(page))


def current_context() -> dict[str, str]:
    return {name: var.get() for name, var in _CONTEXT_VARS.items()}


@contextmanager
def log_context(*, session_id: str | None = None, wizard_page: int | None = None) -> Iterator[None]:
    """Bind ``session_id`` and/or ``wizard_page`` for the duration of the block."""

    overrides = {"session_id": session_id, "wizard_page": wizard_page}
    tokens = [
        (_CONTEXT_VARS[name], _CONTEXT_VARS[name].set(_as_field(value)))
        for name, value in overrides.items()
        if value is not None
    ]
    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)


__all__ = [
    "LOG_FORMAT",
    "configure_logging",
    "current_context",
    "log_context",
    "set_session_id",
    "set_wizard_page",
]
