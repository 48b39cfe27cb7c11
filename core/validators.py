"""Helper validators for price, quantity, and image reference inputs."""

from __future__ import annotations

import re
from typing import Final

# Digits, at most one decimal point, at most two decimals. Empty is allowed
# while the seller is still typing.
PRICE_INPUT_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\d*\.?\d{0,2}$")

LOCAL_PREVIEW_PREFIX: Final[str] = "blob:"
REMOTE_IMAGE_PREFIXES: Final[tuple[str, ...]] = ("http://", "https://")


def is_price_input(value: str) -> bool:
    """Return ``True`` when ``value`` is an acceptable (partial) price entry."""

    return bool(PRICE_INPUT_PATTERN.match(value))


def parse_price(value: object) -> float | None:
    """Convert a price entry to a non-negative float or ``None``."""

    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value) if value >= 0 else None
    if not isinstance(value, str):
        return None
    candidate = value.strip()
    if not candidate or candidate == "." or not is_price_input(candidate):
        return None
    return float(candidate)


def parse_quantity(value: object) -> int | None:
    """Return ``value`` as a positive integer or ``None``."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, float):
        return int(value) if value.is_integer() and value > 0 else None
    if isinstance(value, str):
        cleaned = value.strip()
        if not cleaned.isdigit():
            return None
        parsed = int(cleaned)
        return parsed if parsed > 0 else None
    return None


def is_local_preview(reference: object) -> bool:
    return isinstance(reference, str) and reference.startswith(LOCAL_PREVIEW_PREFIX)


def is_remote_image(reference: object) -> bool:
    return isinstance(reference, str) and reference.startswith(REMOTE_IMAGE_PREFIXES)


__all__ = [
    "LOCAL_PREVIEW_PREFIX",
    "PRICE_INPUT_PATTERN",
    "REMOTE_IMAGE_PREFIXES",
    "is_local_preview",
    "is_price_input",
    "is_remote_image",
    "parse_price",
    "parse_quantity",
]
