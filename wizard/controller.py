"""Session-bound controller for the variant pages of the product wizard."""

from __future__ import annotations

import logging
from typing import Iterable, MutableMapping, Protocol, cast

import streamlit as st

import config
from constants.catalog import subcategories_for
from constants.keys import FORM_FIELD_KEYS, VARIANT_FIELD_KEYS, StateKeys, UIKeys
from core.errors import ImageRejectedError, LastVariantError, LocalizedText
from core.validators import is_price_input
from models.product_page import ProductPage
from state.preview_handles import PreviewRegistry, validate_image_upload
from state import ensure_state, reset_state, variant_store
from state.variant_store import VariantStore
from utils.i18n import INVALID_SIZE_QUANTITY, LAST_VARIANT_ERROR
from utils.logging_context import set_wizard_page
from wizard.submission import SellerApi, SubmissionReport, submit_variants

logger = logging.getLogger(__name__)

_PRICE_FIELDS = {"mrp_price": UIKeys.MRP_PRICE, "selling_price": UIKeys.SELLING_PRICE}

_FORM_DEFAULTS: dict[str, object] = {name: getattr(ProductPage(), name) for name in FORM_FIELD_KEYS}


class SelectedFile(Protocol):
    """The parts of Streamlit's ``UploadedFile`` the wizard relies on."""

    name: str
    type: str

    def getvalue(self) -> bytes: ...


class VariantPageController:
    """Bind the variant store to the live form held in session state.

    The live form (``UIKeys`` ``form.*`` entries) always edits the current
    page. Navigation and page-count changes snapshot it into the store first
    and rehydrate it from the target page afterwards.
    """

    def __init__(self, session_state: MutableMapping[str, object] | None = None) -> None:
        self._session_state = cast(
            MutableMapping[str, object],
            session_state if session_state is not None else st.session_state,
        )
        self.ensure_defaults()

    # -- state access ---------------------------------------------------------

    def ensure_defaults(self) -> None:
        ensure_state(self._session_state)

    @property
    def store(self) -> VariantStore:
        return cast(VariantStore, self._session_state[StateKeys.VARIANT_STORE])

    def _set_store(self, store: VariantStore) -> None:
        self._session_state[StateKeys.VARIANT_STORE] = store
        set_wizard_page(store.current)

    @property
    def registry(self) -> PreviewRegistry:
        return cast(PreviewRegistry, self._session_state[StateKeys.PREVIEW_REGISTRY])

    @property
    def current_page_number(self) -> int:
        return self.store.current

    @property
    def page_count(self) -> int:
        return variant_store.page_count(self.store)

    @property
    def error(self) -> LocalizedText | None:
        return cast(LocalizedText | None, self._session_state.get(StateKeys.WIZARD_ERROR))

    def _report_error(self, message: LocalizedText | None) -> None:
        self._session_state[StateKeys.WIZARD_ERROR] = message

    def clear_messages(self) -> None:
        self._session_state[StateKeys.WIZARD_ERROR] = None
        self._session_state[StateKeys.WIZARD_NOTICE] = None

    # -- live form ------------------------------------------------------------

    def read_live_form(self) -> ProductPage:
        """Build a page snapshot from the live form values."""

        values: dict[str, object] = {}
        for name, key in FORM_FIELD_KEYS.items():
            value = self._session_state.get(key, _FORM_DEFAULTS[name])
            if isinstance(value, list):
                value = tuple(value)
            if value is None:
                value = _FORM_DEFAULTS[name]
            values[name] = value
        return ProductPage.model_validate(values)

    def write_live_form(self, page: ProductPage) -> None:
        for name, key in FORM_FIELD_KEYS.items():
            self._session_state[key] = getattr(page, name)

    def _edit_live(self, **changes: object) -> ProductPage:
        updated = variant_store.edit_page(self.read_live_form(), **changes)
        for name in changes:
            self._session_state[FORM_FIELD_KEYS[name]] = getattr(updated, name)
        return updated

    # -- page store operations -----------------------------------------------

    def save_current_page_data(self) -> None:
        """Snapshot the live form into the current page slot."""

        store = self.store
        self._set_store(variant_store.replace_page(store, store.current, self.read_live_form()))

    def load_page_data(self, page: int) -> bool:
        """Copy page ``page`` (1-based) into the live form; no-op when out of range."""

        store = self.store
        if not variant_store.in_range(store, page):
            logger.warning("Cannot load page %s; store has %d page(s)", page, variant_store.page_count(store))
            return False
        self.write_live_form(variant_store.page_at(store, page))
        return True

    def go_to_page(self, page: int) -> bool:
        if not variant_store.in_range(self.store, page):
            logger.info("Ignoring navigation to page %s", page)
            return False
        self.save_current_page_data()
        self._set_store(variant_store.go_to_page(self.store, page))
        self.load_page_data(page)
        return True

    def create_new_page(self) -> int:
        """Add a variant seeded from the current page and switch to it.

        Returns:
            The number of the new page.
        """

        self.save_current_page_data()
        store = variant_store.create_page(self.store)
        self._set_store(store)
        for name in VARIANT_FIELD_KEYS:
            self._session_state[FORM_FIELD_KEYS[name]] = _FORM_DEFAULTS[name]
        logger.info("Created variant page %d", store.current)
        return store.current

    def remove_variant(self) -> bool:
        """Remove the current variant and release its local images."""

        self.save_current_page_data()
        try:
            store, removed = variant_store.remove_page(self.store)
        except LastVariantError:
            self._report_error(LAST_VARIANT_ERROR)
            return False
        self.registry.release_all(removed.files)
        self._set_store(store)
        self.load_page_data(store.current)
        logger.info("Removed a variant; %d page(s) left", variant_store.page_count(store))
        return True

    def teardown(self, *, keep: Iterable[str] = ()) -> None:
        """Release every local image and start over with a single empty page.

        Language and session id survive; ``keep`` names further state keys to
        carry over.
        """

        self.save_current_page_data()
        reset_state(self._session_state, keep=keep)
        set_wizard_page(self.store.current)

    # -- live form edits ------------------------------------------------------

    def select_files(self, uploads: Iterable[SelectedFile]) -> list[ImageRejectedError]:
        """Replace the current page's local images with the valid ``uploads``.

        Returns:
            One error per rejected file; accepted files are kept.
        """

        rejected: list[ImageRejectedError] = []
        accepted = []
        for upload in uploads:
            data = upload.getvalue()
            try:
                validate_image_upload(upload.name, upload.type, data, max_bytes=config.MAX_IMAGE_BYTES)
            except ImageRejectedError as exc:
                rejected.append(exc)
                continue
            accepted.append(self.registry.acquire(upload.name, upload.type, data))
        updated, previous = variant_store.attach_files(self.read_live_form(), accepted)
        self._edit_live(files=updated.files, images=updated.images)
        self.registry.release_all(previous)
        return rejected

    def remove_preview_image(self, index: int) -> None:
        updated, released = variant_store.remove_image(self.read_live_form(), index)
        self._edit_live(files=updated.files, images=updated.images)
        if released is not None:
            self.registry.release(released)

    def add_size_quantity(self, size: str | None, quantity: object) -> bool:
        if not size:
            self._report_error(INVALID_SIZE_QUANTITY)
            return False
        try:
            updated = variant_store.upsert_size(self.read_live_form(), size, quantity)
        except ValueError:
            self._report_error(INVALID_SIZE_QUANTITY)
            return False
        self._edit_live(selected_sizes=updated.selected_sizes)
        return True

    def remove_size_quantity(self, size: str) -> None:
        updated = variant_store.remove_size(self.read_live_form(), size)
        self._edit_live(selected_sizes=updated.selected_sizes)

    def change_category(self, category: str) -> None:
        """Select ``category`` and drop a subcategory that no longer fits."""

        current_sub = cast(str, self._session_state.get(UIKeys.SUBCATEGORY, ""))
        self._session_state[UIKeys.CATEGORY] = category
        if current_sub not in subcategories_for(category):
            self._session_state[UIKeys.SUBCATEGORY] = ""

    def set_price_input(self, field: str, raw: str) -> bool:
        """Store a price entry when it matches the price format."""

        key = _PRICE_FIELDS[field]
        candidate = (raw or "").strip()
        if candidate and not is_price_input(candidate):
            return False
        self._session_state[key] = candidate
        return True

    # -- submission -----------------------------------------------------------

    def submit(self, api: SellerApi) -> SubmissionReport:
        """Save, validate, and submit every variant page."""

        self.save_current_page_data()
        report = submit_variants(self.store, api, self.registry)
        self._session_state[StateKeys.LAST_REPORT] = report
        if report.validation is not None and not report.validation.ok:
            failing = report.validation.page
            if failing is not None and failing != self.current_page_number:
                self.go_to_page(failing)
            self._report_error(report.message)
            return report
        if not report.ok:
            self._report_error(report.message)
            return report
        self._report_error(None)
        self._session_state[StateKeys.WIZARD_NOTICE] = report.message
        self.teardown(keep=(StateKeys.WIZARD_NOTICE, StateKeys.LAST_REPORT))
        return report


__all__ = ["SelectedFile", "VariantPageController"]
