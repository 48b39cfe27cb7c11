"""Immutable store of variant pages and its pure transitions.

A :class:`VariantStore` holds the ordered pages of the product wizard and the
1-based number of the current page. Every transition returns a new store and
leaves its input untouched, so the session layer only ever swaps one value
for another.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Iterable

from core.errors import LastVariantError
from core.validators import parse_quantity
from models.product_page import LocalImage, ProductPage, SizeQuantity

logger = logging.getLogger(__name__)

# Fields a new variant inherits from the page it was created from.
SHARED_FIELDS: tuple[str, ...] = (
    "name",
    "description",
    "mrp_price",
    "selling_price",
    "category",
    "subcategory",
    "is_returnable",
)


@dataclass(frozen=True)
class VariantStore:
    pages: tuple[ProductPage, ...]
    current: int = 1

    def __post_init__(self) -> None:
        if not self.pages:
            raise ValueError("a variant store needs at least one page")
        if not 1 <= self.current <= len(self.pages):
            raise ValueError(f"current page {self.current} outside 1..{len(self.pages)}")


def initial_store() -> VariantStore:
    return VariantStore(pages=(ProductPage(),), current=1)


def page_count(store: VariantStore) -> int:
    return len(store.pages)


def in_range(store: VariantStore, page: object) -> bool:
    return isinstance(page, int) and not isinstance(page, bool) and 1 <= page <= len(store.pages)


def page_at(store: VariantStore, page: int) -> ProductPage:
    """Return the page numbered ``page`` (1-based)."""

    if not in_range(store, page):
        raise IndexError(f"page {page} outside 1..{len(store.pages)}")
    return store.pages[page - 1]


def current_page(store: VariantStore) -> ProductPage:
    return store.pages[store.current - 1]


def edit_page(page: ProductPage, **changes: Any) -> ProductPage:
    """Return a validated copy of ``page`` with ``changes`` applied."""

    if not changes:
        return page
    return ProductPage.model_validate({**dict(page), **changes})


def replace_page(store: VariantStore, page: int, snapshot: ProductPage) -> VariantStore:
    if not in_range(store, page):
        raise IndexError(f"page {page} outside 1..{len(store.pages)}")
    pages = list(store.pages)
    pages[page - 1] = snapshot
    return replace(store, pages=tuple(pages))


def update_current_page(store: VariantStore, **changes: Any) -> VariantStore:
    """Return ``store`` with ``changes`` applied to the current page."""

    return replace_page(store, store.current, edit_page(current_page(store), **changes))


def go_to_page(store: VariantStore, page: int) -> VariantStore:
    """Make ``page`` current; out-of-range pages return ``store`` unchanged."""

    if not in_range(store, page):
        logger.info("Ignoring navigation to page %s (have %d)", page, len(store.pages))
        return store
    if page == store.current:
        return store
    return replace(store, current=page)


def seed_from(page: ProductPage) -> ProductPage:
    """Return a fresh variant sharing the base fields of ``page``."""

    return ProductPage(**{field: getattr(page, field) for field in SHARED_FIELDS})


def create_page(store: VariantStore) -> VariantStore:
    """Append a variant seeded from the current page and make it current."""

    seeded = seed_from(current_page(store))
    pages = store.pages + (seeded,)
    return VariantStore(pages=pages, current=len(pages))


def remove_page(store: VariantStore) -> tuple[VariantStore, ProductPage]:
    """Remove the current page.

    Returns:
        The new store and the removed page, whose local files the caller
        must release.

    Raises:
        LastVariantError: When only one page is left.
    """

    if len(store.pages) <= 1:
        raise LastVariantError()
    index = store.current - 1
    removed = store.pages[index]
    pages = store.pages[:index] + store.pages[index + 1 :]
    return VariantStore(pages=pages, current=min(store.current, len(pages))), removed


def owned_files(store: VariantStore) -> tuple[LocalImage, ...]:
    """Every local file owned by any page of ``store``."""

    return tuple(image for page in store.pages for image in page.files)


# -- size edits ---------------------------------------------------------------


def upsert_size(page: ProductPage, size: str, quantity: object) -> ProductPage:
    """Set the stock of ``size``, updating in place or appending.

    Raises:
        ValueError: When ``quantity`` is not a positive integer or ``size`` is
            not part of the size enumeration.
    """

    parsed = parse_quantity(quantity)
    if parsed is None:
        raise ValueError(f"quantity must be a positive integer, got {quantity!r}")
    entry = SizeQuantity(size=size, quantity=parsed)
    sizes = list(page.selected_sizes)
    for index, existing in enumerate(sizes):
        if existing.size == size:
            sizes[index] = entry
            break
    else:
        sizes.append(entry)
    return edit_page(page, selected_sizes=tuple(sizes))


def remove_size(page: ProductPage, size: str) -> ProductPage:
    remaining = tuple(entry for entry in page.selected_sizes if entry.size != size)
    if len(remaining) == len(page.selected_sizes):
        return page
    return edit_page(page, selected_sizes=remaining)


# -- image edits --------------------------------------------------------------


def attach_files(page: ProductPage, files: Iterable[LocalImage]) -> tuple[ProductPage, tuple[LocalImage, ...]]:
    """Replace the page's local selection with ``files``.

    Remote images already on the page are kept behind the new previews.

    Returns:
        The updated page and the previously owned files to release.
    """

    new_files = tuple(files)
    remote = tuple(ref for ref in page.images if ref not in {image.handle for image in page.files})
    previews = tuple(image.handle for image in new_files)
    updated = edit_page(page, files=new_files, images=previews + remote)
    return updated, page.files


def remove_image(page: ProductPage, index: int) -> tuple[ProductPage, LocalImage | None]:
    """Drop the image at ``index`` from the page's previews.

    Returns:
        The updated page and the local file to release, or ``None`` when the
        removed entry was a remote URL.
    """

    if not 0 <= index < len(page.images):
        return page, None
    reference = page.images[index]
    images = page.images[:index] + page.images[index + 1 :]
    released: LocalImage | None = None
    files = page.files
    for candidate in page.files:
        if candidate.handle == reference:
            released = candidate
            files = tuple(image for image in page.files if image.handle != reference)
            break
    return edit_page(page, images=images, files=files), released


__all__ = [
    "SHARED_FIELDS",
    "VariantStore",
    "attach_files",
    "create_page",
    "current_page",
    "edit_page",
    "go_to_page",
    "in_range",
    "initial_store",
    "owned_files",
    "page_at",
    "page_count",
    "remove_image",
    "remove_page",
    "remove_size",
    "replace_page",
    "seed_from",
    "update_current_page",
    "upsert_size",
]
