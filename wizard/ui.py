"""Streamlit rendering of the multi-variant product wizard.

Every state change runs inside a widget callback so the controller can
rewrite the live form keys before the widgets of the next run are created.
"""

from __future__ import annotations

import logging
from typing import Sequence

import streamlit as st

import config
from constants.catalog import CATEGORIES, COLORS, SIZES, color_code_for, size_sort_key, subcategories_for
from constants.keys import StateKeys, UIKeys
from core.errors import ImageRejectedError, LocalizedText
from core.validators import is_remote_image
from integrations.seller_api import SellerApiClient
from models.product_page import LocalImage, SizeQuantity
from utils.errors import display_error, resolve_message
from utils.i18n import (
    ADD_VARIANT_LABEL,
    REMOVE_VARIANT_LABEL,
    START_OVER_LABEL,
    SUBMISSION_PARTIAL,
    SUBMIT_LABEL,
    WIZARD_TITLE,
    tr,
    trf,
)
from wizard.controller import VariantPageController
from wizard.submission import SubmissionReport

logger = logging.getLogger(__name__)

_PRICE_WIDGET_KEYS = {
    "mrp_price": ("ui.mrp_price_input", UIKeys.MRP_PRICE),
    "selling_price": ("ui.selling_price_input", UIKeys.SELLING_PRICE),
}
_REJECTED_FILES_KEY = "ui.rejected_files"


def _uploader_key() -> str:
    # A fresh key empties the uploader after page switches and removals.
    return f"{UIKeys.FILE_UPLOADER}.{st.session_state.get(UIKeys.UPLOADER_NONCE, 0)}"


def _bump_uploader() -> None:
    st.session_state[UIKeys.UPLOADER_NONCE] = int(st.session_state.get(UIKeys.UPLOADER_NONCE, 0)) + 1


# -- callbacks -----------------------------------------------------------------


def _on_go_to_page(controller: VariantPageController, page: int) -> None:
    controller.clear_messages()
    if controller.go_to_page(page):
        _bump_uploader()


def _on_add_variant(controller: VariantPageController) -> None:
    controller.clear_messages()
    controller.create_new_page()
    _bump_uploader()


def _on_remove_variant(controller: VariantPageController) -> None:
    controller.clear_messages()
    if controller.remove_variant():
        _bump_uploader()


def _on_category_change(controller: VariantPageController) -> None:
    controller.change_category(str(st.session_state.get(UIKeys.CATEGORY) or ""))


def _on_price_change(controller: VariantPageController, field: str) -> None:
    widget_key, form_key = _PRICE_WIDGET_KEYS[field]
    raw = str(st.session_state.get(widget_key) or "")
    if not controller.set_price_input(field, raw):
        st.session_state[widget_key] = st.session_state.get(form_key, "")


def _on_add_size(controller: VariantPageController) -> None:
    controller.clear_messages()
    added = controller.add_size_quantity(
        st.session_state.get(UIKeys.SIZE_SELECT),
        st.session_state.get(UIKeys.QUANTITY_INPUT),
    )
    if added:
        st.session_state[UIKeys.SIZE_SELECT] = None
        st.session_state[UIKeys.QUANTITY_INPUT] = 0


def _on_files_selected(controller: VariantPageController, key: str) -> None:
    uploads = st.session_state.get(key) or []
    rejected: list[ImageRejectedError] = controller.select_files(uploads)
    st.session_state[_REJECTED_FILES_KEY] = [(exc.filename, exc.localized) for exc in rejected]


def _on_submit(controller: VariantPageController) -> None:
    controller.clear_messages()
    client = SellerApiClient.from_config()
    try:
        controller.submit(client)
    finally:
        client.close()
    _bump_uploader()


def _on_start_over(controller: VariantPageController) -> None:
    controller.teardown()
    _bump_uploader()


# -- rendering -----------------------------------------------------------------


def _render_messages(controller: VariantPageController) -> None:
    notice = st.session_state.get(StateKeys.WIZARD_NOTICE)
    if notice:
        st.success(resolve_message(notice))
        st.link_button(tr("Zum Dashboard", "Go to dashboard"), config.DASHBOARD_URL)
    error: LocalizedText | None = controller.error
    if error:
        report = st.session_state.get(StateKeys.LAST_REPORT)
        detail = None
        if isinstance(report, SubmissionReport) and report.partial:
            detail = ", ".join(f"#{item.page} {item.color} ({item.product_id or '-'})" for item in report.created)
        display_error(error, detail)
        if isinstance(report, SubmissionReport) and report.partial:
            st.warning(trf(SUBMISSION_PARTIAL, count=len(report.created)))
    for filename, reason in st.session_state.get(_REJECTED_FILES_KEY) or []:
        st.warning(f"{filename}: {resolve_message(reason)}")


def _render_page_switcher(controller: VariantPageController) -> None:
    count = controller.page_count
    columns = st.columns(count + 2)
    for number in range(1, count + 1):
        columns[number - 1].button(
            tr(f"Variante {number}", f"Variant {number}"),
            key=f"ui.page_button.{number}",
            type="primary" if number == controller.current_page_number else "secondary",
            on_click=_on_go_to_page,
            args=(controller, number),
            use_container_width=True,
        )
    columns[count].button(
        tr(*ADD_VARIANT_LABEL),
        key="ui.add_variant",
        on_click=_on_add_variant,
        args=(controller,),
        use_container_width=True,
    )
    columns[count + 1].button(
        tr(*REMOVE_VARIANT_LABEL),
        key="ui.remove_variant",
        on_click=_on_remove_variant,
        args=(controller,),
        disabled=count <= 1,
        use_container_width=True,
    )


def _render_base_fields(controller: VariantPageController) -> None:
    st.text_input(tr("Produktname", "Product Name"), key=UIKeys.NAME, placeholder=tr("Produktname eingeben", "Enter product name"))
    left, right = st.columns(2)
    category = str(st.session_state.get(UIKeys.CATEGORY) or "")
    left.selectbox(
        tr("Kategorie", "Category"),
        options=["", *CATEGORIES],
        key=UIKeys.CATEGORY,
        on_change=_on_category_change,
        args=(controller,),
        format_func=lambda value: value or tr("Kategorie wählen", "Select category"),
    )
    right.selectbox(
        tr("Unterkategorie", "Subcategory"),
        options=["", *subcategories_for(category)],
        key=UIKeys.SUBCATEGORY,
        disabled=not category,
        format_func=lambda value: value or tr("Unterkategorie wählen", "Select subcategory"),
    )
    st.text_area(
        tr("Beschreibung", "Description"),
        key=UIKeys.DESCRIPTION,
        placeholder=tr("Beschreibe dein Produkt", "Describe your product"),
        height=120,
    )
    price_columns = st.columns(2)
    labels = {"mrp_price": ("UVP", "MRP Price"), "selling_price": ("Verkaufspreis", "Selling Price")}
    for column, (field, (widget_key, form_key)) in zip(price_columns, _PRICE_WIDGET_KEYS.items()):
        st.session_state[widget_key] = st.session_state.get(form_key, "")
        column.text_input(
            tr(*labels[field]),
            key=widget_key,
            on_change=_on_price_change,
            args=(controller, field),
            placeholder="0.00",
        )
    st.toggle(tr("Rückgabe möglich", "Returnable"), key=UIKeys.IS_RETURNABLE)


def _render_color_picker() -> None:
    names = [color.name for color in COLORS]
    st.selectbox(
        tr("Farbe", "Color"),
        options=["", *names],
        key=UIKeys.SELECTED_COLOR,
        format_func=lambda value: value or tr("Farbe wählen", "Select color"),
    )
    selected = st.session_state.get(UIKeys.SELECTED_COLOR)
    if selected:
        st.markdown(
            f"<span style='display:inline-block;width:1.2rem;height:1.2rem;border-radius:50%;"
            f"border:1px solid #ccc;background:{color_code_for(selected)}'></span> {selected}",
            unsafe_allow_html=True,
        )


def _render_sizes(controller: VariantPageController) -> None:
    size_column, quantity_column, action_column = st.columns([2, 2, 1])
    size_column.selectbox(
        tr("Größe", "Size"),
        options=list(SIZES),
        index=None,
        key=UIKeys.SIZE_SELECT,
        placeholder=tr("Größe wählen", "Select size"),
    )
    quantity_column.number_input(tr("Menge", "Quantity"), min_value=0, step=1, key=UIKeys.QUANTITY_INPUT)
    action_column.button(
        tr("Hinzufügen", "Add"),
        key="ui.add_size",
        on_click=_on_add_size,
        args=(controller,),
        use_container_width=True,
    )
    sizes: Sequence[SizeQuantity] = st.session_state.get(UIKeys.SELECTED_SIZES) or ()
    for entry in sorted(sizes, key=lambda item: size_sort_key(item.size)):
        label_column, remove_column = st.columns([4, 1])
        label_column.write(f"{entry.size}: {entry.quantity}")
        remove_column.button(
            "✕",
            key=f"ui.remove_size.{entry.size}",
            on_click=controller.remove_size_quantity,
            args=(entry.size,),
        )
    total = sum(entry.quantity for entry in sizes)
    if total:
        st.caption(tr(f"{total} Artikel", f"{total} items") if total != 1 else tr("1 Artikel", "1 item"))


def _render_images(controller: VariantPageController) -> None:
    key = _uploader_key()
    st.file_uploader(
        tr("Produktbilder", "Product images"),
        type=["png", "jpg", "jpeg", "webp", "gif"],
        accept_multiple_files=True,
        key=key,
        on_change=_on_files_selected,
        args=(controller, key),
    )
    images: Sequence[str] = st.session_state.get(UIKeys.IMAGES) or ()
    files: Sequence[LocalImage] = st.session_state.get(UIKeys.FILES) or ()
    by_handle = {image.handle: image for image in files}
    if not images:
        return
    columns = st.columns(min(len(images), 4))
    for index, reference in enumerate(images):
        column = columns[index % len(columns)]
        local = by_handle.get(reference)
        if local is not None and controller.registry.is_active(local):
            column.image(controller.registry.read(local), caption=local.filename)
        elif is_remote_image(reference):
            column.image(reference)
        column.button(
            tr("Entfernen", "Remove"),
            key=f"ui.remove_image.{index}.{reference}",
            on_click=controller.remove_preview_image,
            args=(index,),
        )


def render_wizard(controller: VariantPageController | None = None) -> VariantPageController:
    """Render the whole wizard and return its controller."""

    controller = controller or VariantPageController()
    st.title(tr(*WIZARD_TITLE))
    _render_messages(controller)
    _render_page_switcher(controller)
    st.subheader(tr(f"Variante {controller.current_page_number}", f"Variant {controller.current_page_number}"))
    _render_base_fields(controller)
    _render_color_picker()
    _render_sizes(controller)
    _render_images(controller)
    submit_column, reset_column = st.columns([3, 1])
    submit_column.button(
        tr(*SUBMIT_LABEL),
        key="ui.submit",
        type="primary",
        on_click=_on_submit,
        args=(controller,),
        use_container_width=True,
    )
    reset_column.button(
        tr(*START_OVER_LABEL),
        key="ui.start_over",
        on_click=_on_start_over,
        args=(controller,),
        use_container_width=True,
    )
    return controller


__all__ = ["render_wizard"]
