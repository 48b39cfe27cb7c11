"""Multi-variant product wizard package."""

from __future__ import annotations

from .controller import VariantPageController
from .submission import SubmissionReport, submit_variants
from .validation import PageValidationResult, validate_pages


def run_wizard() -> VariantPageController:
    """Render the wizard for the active Streamlit session."""

    from .ui import render_wizard

    return render_wizard()


__all__ = [
    "PageValidationResult",
    "SubmissionReport",
    "VariantPageController",
    "run_wizard",
    "submit_variants",
    "validate_pages",
]
