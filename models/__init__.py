"""Data models for the seller variant wizard."""

from .product_page import ColorInventory, LocalImage, ProductPage, ProductPayload, SizeQuantity

__all__ = [
    "ColorInventory",
    "LocalImage",
    "ProductPage",
    "ProductPayload",
    "SizeQuantity",
]
