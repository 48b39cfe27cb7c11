"""Structured log lines for calls against the seller backend."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import time
from pathlib import Path
from typing import Any, Mapping

LOGGER = logging.getLogger("seller_wizard.api")

_REDACTED = "[redacted]"
_SECRET_ENV_VARS = ("SELLER_ACCESS_TOKEN",)


def _redact(text: str) -> str:
    for name in _SECRET_ENV_VARS:
        secret = os.getenv(name)
        if secret:
            text = text.replace(secret, _REDACTED)
    return text


def _level_number(level: str) -> int:
    number = logging.getLevelName(level.upper())
    return number if isinstance(number, int) else logging.INFO


def _dump_payload(action: str, payload: Mapping[str, Any]) -> str:
    target = Path(tempfile.gettempdir()) / f"seller_wizard_{action}_{int(time.time())}.json"
    target.write_text(_redact(json.dumps(payload, ensure_ascii=False, indent=2)), encoding="utf-8")
    return str(target)


def log_event(
    level: str,
    *,
    action: str,
    page: int | None = None,
    status: int | None = None,
    duration: float | None = None,
    detail: str | None = None,
    payload: Mapping[str, Any] | None = None,
) -> str:
    """Log one backend call as a JSON object.

    Args:
        level: Logging level name such as ``"info"`` or ``"warning"``.
        action: ``"upload_images"`` or ``"create_product"``.
        page: Variant page the call belongs to.
        status: HTTP status of the response.
        duration: Seconds spent on the call.
        detail: Server message or exception name.
        payload: Request body, written to a temp file when
            ``SELLER_WIZARD_DEBUG`` is set.

    Returns:
        The path of the payload dump, or ``""`` when nothing was written.
    """

    fields = {
        "level": level.lower(),
        "action": action,
        "page": page,
        "status": status,
        "duration": None if duration is None else round(duration, 3),
        "detail": detail,
    }
    line = {key: _redact(str(value)) for key, value in fields.items() if value is not None}
    LOGGER.log(_level_number(level), json.dumps(line))
    if payload and os.getenv("SELLER_WIZARD_DEBUG"):
        return _dump_payload(action, payload)
    return ""


__all__ = ["log_event"]
