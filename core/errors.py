"""Custom exception types for the variant wizard and the seller API."""

from __future__ import annotations

LocalizedText = tuple[str, str]


class VariantWizardError(Exception):
    """Base exception for variant wizard issues."""


class LastVariantError(VariantWizardError):
    """Raised when removing the only remaining variant page."""

    def __init__(self) -> None:
        super().__init__("At least one variant page must remain.")


class ImageRejectedError(VariantWizardError):
    """Raised when a locally selected file fails image validation."""

    def __init__(self, filename: str, reason: LocalizedText) -> None:
        super().__init__(f"{filename}: {reason[1]}")
        self.filename = filename
        self.localized = reason


class ReleasedHandleError(KeyError):
    """Raised when reading a local image handle that was already released."""


class SellerApiError(VariantWizardError):
    """Base exception for failed calls against the seller backend."""

    def __init__(self, message: str, *, status: int | None = None, page: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.page = page

    def for_page(self, page: int) -> "SellerApiError":
        """Attach the variant page number the failed call belonged to."""

        self.page = page
        return self


class UploadError(SellerApiError):
    """Raised when the image upload endpoint rejects a request."""


class ProductCreateError(SellerApiError):
    """Raised when the product create endpoint rejects a payload."""


class MissingImagesError(SellerApiError):
    """Raised when a page reaches submission with only local previews."""


__all__ = [
    "ImageRejectedError",
    "LastVariantError",
    "LocalizedText",
    "MissingImagesError",
    "ProductCreateError",
    "ReleasedHandleError",
    "SellerApiError",
    "UploadError",
    "VariantWizardError",
]
