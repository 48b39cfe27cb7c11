"""Builders for the product create payload of a variant page."""

from __future__ import annotations

from typing import Iterable, Sequence

from constants.catalog import SIZES, color_code_for
from core.validators import parse_price
from models.product_page import ColorInventory, ProductPage, ProductPayload, SizeQuantity


def build_size_quantities(sizes: Iterable[SizeQuantity]) -> dict[str, int]:
    """Map every size of the enumeration to its quantity (absent sizes are 0)."""

    quantities = {size: 0 for size in SIZES}
    for entry in sizes:
        if entry.size in quantities:
            quantities[entry.size] = entry.quantity
    return quantities


def build_color_inventory(color: str, size_quantities: dict[str, int]) -> ColorInventory:
    return ColorInventory(color=color, color_code=color_code_for(color), inventory=dict(size_quantities))


def _shared(value: str, fallback: str) -> str:
    return value if value.strip() else fallback


def resolve_category(page: ProductPage, shared: ProductPage) -> tuple[str, str]:
    """Return the category and subcategory ``page`` is filed under.

    The two travel together: a page with its own category keeps its own
    subcategory (even when empty), otherwise both come from ``shared``.
    """

    if page.category.strip():
        return page.category, page.subcategory
    return shared.category, shared.subcategory


def build_product_payload(page: ProductPage, shared: ProductPage, image_urls: Sequence[str]) -> ProductPayload:
    """Assemble the create payload for ``page``.

    Empty base fields fall back to ``shared`` (the first page).
    """

    mrp = parse_price(_shared(page.mrp_price, shared.mrp_price))
    selling = parse_price(_shared(page.selling_price, shared.selling_price))
    if mrp is None or selling is None:
        raise ValueError("variant prices must be non-negative numbers")
    category, subcategory = resolve_category(page, shared)
    size_quantities = build_size_quantities(page.selected_sizes)
    return ProductPayload(
        name=_shared(page.name, shared.name),
        description=_shared(page.description, shared.description),
        mrp_price=mrp,
        selling_price=selling,
        is_returnable=page.is_returnable,
        category=category,
        subcategory=subcategory,
        images=list(image_urls),
        size_quantities=size_quantities,
        color_inventories=[build_color_inventory(page.selected_color, size_quantities)],
    )


__all__ = ["build_color_inventory", "build_product_payload", "build_size_quantities", "resolve_category"]
