"""Pydantic models for variant pages and the product create payload."""

from __future__ import annotations

from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from constants.catalog import SIZES


class LocalImage(BaseModel):
    """A locally selected image that has not been uploaded yet.

    Only the handle travels with the page; the bytes stay in the
    :class:`state.preview_handles.PreviewRegistry` until released.
    """

    model_config = ConfigDict(frozen=True)

    handle: str
    filename: str
    content_type: str = "application/octet-stream"
    size: int = Field(default=0, ge=0)


class SizeQuantity(BaseModel):
    """Stock for a single size of a variant."""

    model_config = ConfigDict(frozen=True)

    size: str
    quantity: int = Field(ge=0)

    @field_validator("size")
    @classmethod
    def _known_size(cls, value: str) -> str:
        if value not in SIZES:
            raise ValueError(f"unknown size '{value}'")
        return value


class ProductPage(BaseModel):
    """Snapshot of one sellable variant in the wizard."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    description: str = ""
    mrp_price: str = ""
    selling_price: str = ""
    category: str = ""
    subcategory: str = ""
    is_returnable: bool = True
    selected_color: str = ""
    selected_sizes: Tuple[SizeQuantity, ...] = ()
    files: Tuple[LocalImage, ...] = ()
    images: Tuple[str, ...] = ()

    @field_validator("selected_sizes")
    @classmethod
    def _unique_sizes(cls, value: Tuple[SizeQuantity, ...]) -> Tuple[SizeQuantity, ...]:
        seen: set[str] = set()
        for entry in value:
            if entry.size in seen:
                raise ValueError(f"duplicate size '{entry.size}'")
            seen.add(entry.size)
        return value

    @property
    def has_positive_stock(self) -> bool:
        return any(entry.quantity > 0 for entry in self.selected_sizes)


class ColorInventory(BaseModel):
    """Per-colour stock record sent with a product."""

    model_config = ConfigDict(populate_by_name=True)

    color: str
    color_code: str = Field(default="", alias="colorCode")
    inventory: Dict[str, int] = Field(default_factory=dict)


class ProductPayload(BaseModel):
    """JSON body accepted by the product create endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str = ""
    mrp_price: float = Field(alias="mrpPrice", ge=0)
    selling_price: float = Field(alias="sellingPrice", ge=0)
    is_returnable: bool = Field(default=True, alias="isReturnable")
    category: str
    subcategory: str
    images: List[str] = Field(default_factory=list)
    size_quantities: Dict[str, int] = Field(default_factory=dict, alias="sizeQuantities")
    color_inventories: List[ColorInventory] = Field(default_factory=list, alias="colorInventories")

    def to_request_body(self) -> dict[str, object]:
        """Return the camelCase JSON body for the backend."""

        return self.model_dump(by_alias=True)


__all__ = [
    "ColorInventory",
    "LocalImage",
    "ProductPage",
    "ProductPayload",
    "SizeQuantity",
]
