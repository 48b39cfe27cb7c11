"""Backend integrations for the seller variant wizard."""

from .seller_api import CreatedProductResponse, SellerApiClient

__all__ = ["CreatedProductResponse", "SellerApiClient"]
