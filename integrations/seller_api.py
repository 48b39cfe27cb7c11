"""HTTP client for the marketplace seller endpoints used by the wizard.

Only two endpoints are used: the multipart image upload and the product
create call. Success is decided from the HTTP status and the structured
``success`` flag of the JSON body, never from message wording.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

import requests
from requests import Response

import config
from core.errors import ProductCreateError, SellerApiError, UploadError
from infra.logging import log_event

logger = logging.getLogger(__name__)

USER_AGENT = "SellerVariantWizard/1.0"
UPLOAD_PATH = "/products/upload-images"
CREATE_PRODUCT_PATH = "/seller/products"

# (filename, content type, bytes)
UploadFile = tuple[str, str, bytes]


@dataclass(frozen=True)
class CreatedProductResponse:
    """Structured result of a successful product create call."""

    product_id: str | None
    message: str
    raw: Mapping[str, Any] = field(default_factory=dict)


def _json_body(resp: Response) -> dict[str, Any]:
    try:
        body = resp.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _server_message(body: Mapping[str, Any], fallback: str) -> str:
    for key in ("message", "error", "detail"):
        value = body.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return fallback


def _is_success(resp: Response, body: Mapping[str, Any]) -> bool:
    return 200 <= resp.status_code < 300 and body.get("success") is not False


def _extract_product_id(body: Mapping[str, Any]) -> str | None:
    for container in (body, body.get("product"), body.get("data")):
        if not isinstance(container, Mapping):
            continue
        for key in ("id", "productId", "_id"):
            value = container.get(key)
            if value not in (None, ""):
                return str(value)
    return None


class SellerApiClient:
    """Thin ``requests`` wrapper around the seller REST endpoints."""

    def __init__(
        self,
        base_url: str,
        *,
        access_token: str = "",
        timeout: float = 30.0,
        max_files: int = 10,
        max_total_bytes: int = 100 * 1024 * 1024,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_files = max_files
        self.max_total_bytes = max_total_bytes
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})
        if access_token:
            self._session.headers["Authorization"] = f"Bearer {access_token}"

    @classmethod
    def from_config(cls, *, session: requests.Session | None = None) -> "SellerApiClient":
        return cls(
            config.SELLER_API_BASE_URL,
            access_token=config.get_seller_access_token(),
            timeout=config.SELLER_API_TIMEOUT,
            max_files=config.MAX_FILES_PER_UPLOAD,
            max_total_bytes=config.MAX_UPLOAD_TOTAL_BYTES,
            session=session,
        )

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _post(self, action: str, path: str, *, error_type: type[SellerApiError], **kwargs: Any) -> tuple[Response, dict[str, Any]]:
        started = time.perf_counter()
        try:
            resp = self._session.post(self._url(path), timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            log_event("warning", action=action, duration=time.perf_counter() - started, detail=type(exc).__name__)
            raise error_type(f"network error: {exc}") from exc
        body = _json_body(resp)
        duration = time.perf_counter() - started
        if not _is_success(resp, body):
            message = _server_message(body, f"request failed (status {resp.status_code})")
            log_event("warning", action=action, status=resp.status_code, duration=duration, detail=message, payload=kwargs.get("json"))
            raise error_type(message, status=resp.status_code)
        log_event("info", action=action, status=resp.status_code, duration=duration)
        return resp, body

    def upload_images(self, files: Sequence[UploadFile]) -> list[str]:
        """Upload ``files`` in one multipart request.

        Args:
            files: ``(filename, content_type, data)`` tuples, in display order.

        Returns:
            Remote URLs, one per file, in the order the files were sent.

        Raises:
            UploadError: If the request is rejected locally or by the server,
                or the response does not carry one URL per file.
        """

        if not files:
            raise UploadError("no image files provided")
        if len(files) > self.max_files:
            raise UploadError(f"maximum {self.max_files} files allowed per upload")
        total = sum(len(data) for _, _, data in files)
        if total > self.max_total_bytes:
            raise UploadError(f"total size exceeds {self.max_total_bytes // (1024 * 1024)}MB limit")

        multipart = [("images", (filename, data, content_type)) for filename, content_type, data in files]
        _, body = self._post("upload_images", UPLOAD_PATH, error_type=UploadError, files=multipart)
        urls = body.get("imageUrls")
        if not isinstance(urls, list) or len(urls) != len(files) or not all(isinstance(url, str) and url for url in urls):
            logger.warning("Upload response carried %r for %d files", urls, len(files))
            raise UploadError("upload response did not include one URL per image")
        return list(urls)

    def create_product(self, payload: Mapping[str, Any]) -> CreatedProductResponse:
        """Create one product from the camelCase ``payload``.

        Raises:
            ProductCreateError: If the backend rejects the payload.
        """

        _, body = self._post("create_product", CREATE_PRODUCT_PATH, error_type=ProductCreateError, json=dict(payload))
        return CreatedProductResponse(
            product_id=_extract_product_id(body),
            message=_server_message(body, "created"),
            raw=body,
        )

    def close(self) -> None:
        self._session.close()


__all__ = ["CreatedProductResponse", "SellerApiClient", "UploadFile"]
