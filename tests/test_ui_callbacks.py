"""Widget callbacks of the wizard UI, exercised without a Streamlit runtime."""

from __future__ import annotations

import streamlit as st

from constants.keys import StateKeys, UIKeys
from models.product_page import SizeQuantity
from tests.fakes import FakeUpload, make_png
from wizard import ui
from wizard.controller import VariantPageController


def test_price_callback_reverts_malformed_entry() -> None:
    controller = VariantPageController()
    st.session_state["ui.mrp_price_input"] = "12.5"
    ui._on_price_change(controller, "mrp_price")
    assert st.session_state[UIKeys.MRP_PRICE] == "12.5"

    st.session_state["ui.mrp_price_input"] = "12.5x"
    ui._on_price_change(controller, "mrp_price")

    assert st.session_state[UIKeys.MRP_PRICE] == "12.5"
    assert st.session_state["ui.mrp_price_input"] == "12.5"


def test_add_size_callback_clears_inputs() -> None:
    controller = VariantPageController()
    st.session_state[UIKeys.SIZE_SELECT] = "XL"
    st.session_state[UIKeys.QUANTITY_INPUT] = 2

    ui._on_add_size(controller)

    assert st.session_state[UIKeys.SELECTED_SIZES] == (SizeQuantity(size="XL", quantity=2),)
    assert st.session_state[UIKeys.SIZE_SELECT] is None
    assert st.session_state[UIKeys.QUANTITY_INPUT] == 0


def test_files_callback_records_rejections() -> None:
    controller = VariantPageController()
    key = ui._uploader_key()
    st.session_state[key] = [FakeUpload("a.png", make_png()), FakeUpload("b.txt", b"x", type="text/plain")]

    ui._on_files_selected(controller, key)

    assert [image.filename for image in st.session_state[UIKeys.FILES]] == ["a.png"]
    assert [name for name, _ in st.session_state["ui.rejected_files"]] == ["b.txt"]


def test_navigation_callbacks_reset_uploader() -> None:
    controller = VariantPageController()
    first_key = ui._uploader_key()

    ui._on_add_variant(controller)
    assert controller.page_count == 2
    assert ui._uploader_key() != first_key

    ui._on_go_to_page(controller, 1)
    assert controller.current_page_number == 1

    ui._on_remove_variant(controller)
    assert controller.page_count == 1


def test_start_over_releases_images_and_keeps_session_settings() -> None:
    controller = VariantPageController()
    st.session_state[UIKeys.LANG_SELECT] = "de"
    session_id = st.session_state[StateKeys.SESSION_ID]
    controller.select_files([FakeUpload("a.png", make_png())])
    controller.create_new_page()
    controller.select_files([FakeUpload("b.png", make_png("blue"))])
    registry = controller.registry
    used_key = ui._uploader_key()

    ui._on_start_over(controller)

    assert len(registry) == 0
    assert controller.page_count == 1
    assert controller.registry is not registry
    assert st.session_state[UIKeys.LANG_SELECT] == "de"
    assert st.session_state[StateKeys.SESSION_ID] == session_id
    assert st.session_state[StateKeys.WIZARD_NOTICE] is None
    assert ui._uploader_key() != used_key
