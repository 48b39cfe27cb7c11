"""Core package for the seller variant wizard."""

from .errors import (
    LastVariantError,
    ProductCreateError,
    SellerApiError,
    UploadError,
    VariantWizardError,
)

__all__ = [
    "LastVariantError",
    "ProductCreateError",
    "SellerApiError",
    "UploadError",
    "VariantWizardError",
]
