"""Test doubles shared across the test-suite."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Any, Sequence

from PIL import Image

from core.errors import ProductCreateError, UploadError
from integrations.seller_api import CreatedProductResponse, UploadFile


def make_png(color: str = "red", size: tuple[int, int] = (4, 4)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


@dataclass
class FakeUpload:
    """Mimics the parts of Streamlit's ``UploadedFile`` the wizard reads."""

    name: str
    data: bytes
    type: str = "image/png"

    def getvalue(self) -> bytes:
        return self.data


@dataclass
class FakeSellerApi:
    """Records calls and answers like the seller backend."""

    fail_upload_on_call: int | None = None
    fail_create_on_call: int | None = None
    uploads: list[list[UploadFile]] = field(default_factory=list)
    creates: list[dict[str, Any]] = field(default_factory=list)

    @property
    def call_count(self) -> int:
        return len(self.uploads) + len(self.creates)

    def upload_images(self, files: Sequence[UploadFile]) -> list[str]:
        self.uploads.append(list(files))
        if self.fail_upload_on_call == len(self.uploads):
            raise UploadError("Failed to upload one or more images.", status=500)
        call = len(self.uploads)
        return [f"https://cdn.example.com/{call}/{name}" for name, _, _ in files]

    def create_product(self, payload: dict[str, Any]) -> CreatedProductResponse:
        self.creates.append(payload)
        if self.fail_create_on_call == len(self.creates):
            raise ProductCreateError("Invalid category", status=400)
        product_id = f"prod-{len(self.creates)}"
        return CreatedProductResponse(product_id=product_id, message="Product created successfully", raw={"id": product_id})
