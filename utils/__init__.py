"""Utility helpers for the seller variant wizard."""

from __future__ import annotations

from .errors import display_error as display_error
from .i18n import tr as tr

__all__ = ["display_error", "tr"]
