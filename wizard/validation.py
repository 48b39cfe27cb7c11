from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from constants.catalog import is_valid_subcategory
from core.errors import LocalizedText
from core.validators import is_local_preview, is_remote_image, parse_price
from models.product_page import ProductPage
from wizard.payload import resolve_category

# Required on page 1; later pages fall back to these values.
BASE_REQUIRED_FIELDS: tuple[str, ...] = (
    "name",
    "category",
    "subcategory",
    "mrp_price",
    "selling_price",
)

FIELD_LABELS: dict[str, LocalizedText] = {
    "name": ("Produktname", "product name"),
    "category": ("Kategorie", "category"),
    "subcategory": ("Unterkategorie", "subcategory"),
    "mrp_price": ("UVP", "MRP price"),
    "selling_price": ("Verkaufspreis", "selling price"),
}


@dataclass(frozen=True)
class PageValidationResult:
    """Outcome of validating all variant pages before submission."""

    ok: bool
    page: int | None = None
    field: str | None = None
    message: LocalizedText | None = None


def _fail(page: int, field: str, message: LocalizedText) -> PageValidationResult:
    return PageValidationResult(ok=False, page=page, field=field, message=message)


def has_images(page: ProductPage) -> bool:
    """Whether ``page`` has local files or a usable first image reference."""

    if page.files:
        return True
    if not page.images:
        return False
    first = page.images[0]
    return is_local_preview(first) or is_remote_image(first)


def _validate_base_fields(page: ProductPage) -> PageValidationResult | None:
    for field in BASE_REQUIRED_FIELDS:
        value = getattr(page, field)
        if not (isinstance(value, str) and value.strip()):
            de, en = FIELD_LABELS[field]
            return _fail(
                1,
                field,
                (f"Variante 1: {de} fehlt.", f"Variant 1: {en} is required."),
            )
    return None


def _validate_category(number: int, page: ProductPage, shared: ProductPage) -> PageValidationResult | None:
    category, subcategory = resolve_category(page, shared)
    if is_valid_subcategory(category, subcategory):
        return None
    if not subcategory.strip():
        return _fail(
            number,
            "subcategory",
            (f"Variante {number}: Unterkategorie fehlt.", f"Variant {number}: subcategory is required."),
        )
    return _fail(
        number,
        "subcategory",
        (
            f"Variante {number}: „{subcategory}“ gehört nicht zu „{category}“.",
            f"Variant {number}: '{subcategory}' is not a subcategory of '{category}'.",
        ),
    )


def _validate_prices(number: int, page: ProductPage, shared: ProductPage) -> PageValidationResult | None:
    mrp = parse_price(page.mrp_price.strip() or shared.mrp_price)
    selling = parse_price(page.selling_price.strip() or shared.selling_price)
    if mrp is None or selling is None:
        return _fail(
            number,
            "mrp_price" if mrp is None else "selling_price",
            (
                f"Variante {number}: Preise müssen gültige Zahlen sein.",
                f"Variant {number}: prices must be valid numbers.",
            ),
        )
    if selling > mrp:
        return _fail(
            number,
            "selling_price",
            (
                f"Variante {number}: Der Verkaufspreis darf die UVP nicht übersteigen.",
                f"Variant {number}: selling price cannot exceed the MRP price.",
            ),
        )
    return None


def validate_pages(pages: Sequence[ProductPage]) -> PageValidationResult:
    """Validate ``pages`` in order and stop at the first failure.

    Page 1 carries the shared product fields. Every page needs a subcategory
    that belongs to its category, a colour, at least one image, and at least
    one size with stock.
    """

    if not pages:
        return _fail(1, "pages", ("Keine Varianten vorhanden.", "There are no variants to submit."))
    shared = pages[0]
    for number, page in enumerate(pages, start=1):
        if number == 1:
            failure = _validate_base_fields(page)
            if failure is not None:
                return failure
        failure = _validate_category(number, page, shared) or _validate_prices(number, page, shared)
        if failure is not None:
            return failure
        if not page.selected_color:
            return _fail(
                number,
                "selected_color",
                (f"Variante {number}: Bitte eine Farbe wählen.", f"Variant {number}: please select a color."),
            )
        if not has_images(page):
            return _fail(
                number,
                "images",
                (
                    f"Variante {number}: Bitte mindestens ein Bild hochladen.",
                    f"Variant {number}: please upload at least one image.",
                ),
            )
        if not page.has_positive_stock:
            return _fail(
                number,
                "selected_sizes",
                (
                    f"Variante {number}: Bitte mindestens eine Größe mit Menge hinzufügen.",
                    f"Variant {number}: please add at least one size with quantity.",
                ),
            )
    return PageValidationResult(ok=True)


__all__ = [
    "BASE_REQUIRED_FIELDS",
    "PageValidationResult",
    "has_images",
    "validate_pages",
]
