from __future__ import annotations

import pytest

from constants.catalog import SIZES
from models.product_page import ProductPage, SizeQuantity
from wizard.payload import build_product_payload, build_size_quantities, resolve_category


def test_size_quantities_cover_every_size() -> None:
    quantities = build_size_quantities([SizeQuantity(size="M", quantity=2), SizeQuantity(size="XL", quantity=1)])

    assert list(quantities) == list(SIZES)
    assert quantities["M"] == 2
    assert quantities["XL"] == 1
    assert quantities["XS"] == 0


def test_payload_uses_camel_case_and_colour_inventory() -> None:
    shared = ProductPage(
        name="Tee",
        description="Soft cotton",
        mrp_price="999",
        selling_price="799.50",
        category="Men",
        subcategory="T-Shirts",
        is_returnable=False,
        selected_color="Navy",
        selected_sizes=(SizeQuantity(size="L", quantity=4),),
    )

    body = build_product_payload(shared, shared, ["https://cdn.example.com/1.png"]).to_request_body()

    assert body["name"] == "Tee"
    assert body["mrpPrice"] == 999.0
    assert body["sellingPrice"] == 799.5
    assert body["isReturnable"] is False
    assert body["images"] == ["https://cdn.example.com/1.png"]
    assert body["sizeQuantities"]["L"] == 4
    assert body["colorInventories"] == [
        {"color": "Navy", "colorCode": "#000080", "inventory": body["sizeQuantities"]},
    ]


def test_variant_payload_falls_back_to_shared_fields() -> None:
    shared = ProductPage(
        name="Tee",
        description="Soft cotton",
        mrp_price="999",
        selling_price="799",
        category="Men",
        subcategory="T-Shirts",
    )
    variant = ProductPage(selected_color="Unlisted", selected_sizes=(SizeQuantity(size="S", quantity=1),))

    payload = build_product_payload(variant, shared, [])

    assert payload.name == "Tee"
    assert payload.category == "Men"
    assert payload.mrp_price == 999.0
    assert payload.color_inventories[0].color_code == ""


_SHARED = ProductPage(name="Tee", category="Men", subcategory="T-Shirts")


def test_category_pair_falls_back_together() -> None:
    assert resolve_category(ProductPage(), _SHARED) == ("Men", "T-Shirts")


def test_own_category_keeps_own_subcategory() -> None:
    assert resolve_category(ProductPage(category="Women", subcategory="Tops"), _SHARED) == ("Women", "Tops")
    assert resolve_category(ProductPage(category="Women"), _SHARED) == ("Women", "")


def test_payload_rejects_bad_prices() -> None:
    page = ProductPage(name="Tee", mrp_price="abc", selling_price="1", category="Men", subcategory="Shirts")

    with pytest.raises(ValueError):
        build_product_payload(page, page, [])
