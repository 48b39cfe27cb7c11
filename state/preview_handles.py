"""Ownership of locally selected image bytes.

Pages only carry :class:`~models.product_page.LocalImage` handles. The bytes
behind a handle live in a :class:`PreviewRegistry` from ``acquire`` until
``release``; the wizard releases handles when a preview is removed, a page is
removed, a selection is replaced, or the wizard is torn down.
"""

from __future__ import annotations

import io
import logging
import uuid
from typing import Iterable

from PIL import Image, UnidentifiedImageError

from core.errors import ImageRejectedError, ReleasedHandleError
from core.validators import LOCAL_PREVIEW_PREFIX
from models.product_page import LocalImage

logger = logging.getLogger(__name__)


class PreviewRegistry:
    """Own the bytes of every live local image handle."""

    def __init__(self) -> None:
        self._blobs: dict[str, bytes] = {}

    def acquire(self, filename: str, content_type: str, data: bytes) -> LocalImage:
        handle = f"{LOCAL_PREVIEW_PREFIX}{uuid.uuid4()}"
        self._blobs[handle] = bytes(data)
        logger.debug("Acquired %s for %s (%d bytes)", handle, filename, len(data))
        return LocalImage(handle=handle, filename=filename, content_type=content_type, size=len(data))

    def release(self, image: LocalImage | str) -> None:
        """Drop the bytes behind ``image``; unknown handles are ignored."""

        handle = image if isinstance(image, str) else image.handle
        if self._blobs.pop(handle, None) is not None:
            logger.debug("Released %s", handle)

    def release_all(self, images: Iterable[LocalImage | str]) -> None:
        for image in images:
            self.release(image)

    def read(self, image: LocalImage) -> bytes:
        try:
            return self._blobs[image.handle]
        except KeyError:
            raise ReleasedHandleError(image.handle) from None

    def is_active(self, image: LocalImage | str) -> bool:
        handle = image if isinstance(image, str) else image.handle
        return handle in self._blobs

    def active_handles(self) -> set[str]:
        return set(self._blobs)

    def clear(self) -> None:
        count = len(self._blobs)
        self._blobs.clear()
        if count:
            logger.debug("Released %d local image handles", count)

    def __len__(self) -> int:
        return len(self._blobs)


def validate_image_upload(
    filename: str,
    content_type: str | None,
    data: bytes,
    *,
    max_bytes: int,
) -> None:
    """Raise :class:`ImageRejectedError` unless ``data`` is an acceptable image."""

    size = len(data)
    if size == 0:
        raise ImageRejectedError(filename, ("Die Datei ist leer.", "The file is empty."))
    if size > max_bytes:
        limit_mb = max_bytes / (1024 * 1024)
        raise ImageRejectedError(
            filename,
            (
                f"Die Datei ist zu groß (max. {limit_mb:.0f} MB).",
                f"The file is too large (max {limit_mb:.0f}MB).",
            ),
        )
    if not (content_type or "").startswith("image/"):
        raise ImageRejectedError(filename, ("Die Datei ist kein Bild.", "The file is not an image."))
    try:
        with Image.open(io.BytesIO(data)) as image:
            image.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as exc:
        logger.info("Rejected %s: %s", filename, exc)
        raise ImageRejectedError(
            filename,
            ("Das Bild konnte nicht gelesen werden.", "The image could not be read."),
        ) from exc


__all__ = ["PreviewRegistry", "validate_image_upload"]
