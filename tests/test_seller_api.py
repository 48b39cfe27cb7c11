from __future__ import annotations

from typing import Any

import pytest
import requests

from core.errors import ProductCreateError, UploadError
from integrations.seller_api import SellerApiClient


class _Response:
    def __init__(self, status_code: int, body: Any) -> None:
        self.status_code = status_code
        self._body = body

    def json(self) -> Any:
        if isinstance(self._body, Exception):
            raise self._body
        return self._body


class _Session:
    def __init__(self, *responses: Any) -> None:
        self.headers: dict[str, str] = {}
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self._responses = list(responses)
        self.closed = False

    def post(self, url: str, **kwargs: Any) -> Any:
        self.calls.append((url, kwargs))
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True


def _client(session: _Session, **kwargs: Any) -> SellerApiClient:
    return SellerApiClient("https://shop.example.com/api/", access_token="secret", session=session, **kwargs)  # type: ignore[arg-type]


def test_client_sets_auth_header_and_strips_slash() -> None:
    session = _Session()
    client = _client(session)

    assert client.base_url == "https://shop.example.com/api"
    assert session.headers["Authorization"] == "Bearer secret"
    assert session.headers["User-Agent"].startswith("SellerVariantWizard")


def test_upload_images_posts_multipart_and_returns_urls() -> None:
    session = _Session(_Response(200, {"imageUrls": ["https://cdn/a.png", "https://cdn/b.png"]}))
    client = _client(session)

    urls = client.upload_images([("a.png", "image/png", b"aa"), ("b.png", "image/jpeg", b"bb")])

    assert urls == ["https://cdn/a.png", "https://cdn/b.png"]
    url, kwargs = session.calls[0]
    assert url == "https://shop.example.com/api/products/upload-images"
    assert kwargs["files"] == [
        ("images", ("a.png", b"aa", "image/png")),
        ("images", ("b.png", b"bb", "image/jpeg")),
    ]


def test_upload_images_requires_one_url_per_file() -> None:
    session = _Session(_Response(200, {"imageUrls": ["https://cdn/a.png"]}))

    with pytest.raises(UploadError):
        _client(session).upload_images([("a.png", "image/png", b"a"), ("b.png", "image/png", b"b")])


def test_upload_images_enforces_limits_before_sending() -> None:
    session = _Session()
    client = _client(session, max_files=1, max_total_bytes=4)

    with pytest.raises(UploadError):
        client.upload_images([])
    with pytest.raises(UploadError):
        client.upload_images([("a.png", "image/png", b"a"), ("b.png", "image/png", b"b")])
    with pytest.raises(UploadError):
        client.upload_images([("a.png", "image/png", b"too large")])
    assert session.calls == []


def test_upload_error_carries_server_message_and_status() -> None:
    session = _Session(_Response(500, {"error": "Failed to upload one or more images"}))

    with pytest.raises(UploadError) as excinfo:
        _client(session).upload_images([("a.png", "image/png", b"a")])

    assert excinfo.value.status == 500
    assert excinfo.value.message == "Failed to upload one or more images"


def test_create_product_sends_json_and_extracts_id() -> None:
    session = _Session(_Response(201, {"success": True, "message": "Product created", "product": {"_id": "abc"}}))

    response = _client(session).create_product({"name": "Tee"})

    assert response.product_id == "abc"
    assert response.message == "Product created"
    url, kwargs = session.calls[0]
    assert url == "https://shop.example.com/api/seller/products"
    assert kwargs["json"] == {"name": "Tee"}


def test_create_product_success_flag_false_is_a_failure() -> None:
    # a 200 whose message happens to contain "success" still fails
    session = _Session(_Response(200, {"success": False, "message": "not a success"}))

    with pytest.raises(ProductCreateError) as excinfo:
        _client(session).create_product({"name": "Tee"})

    assert excinfo.value.message == "not a success"


def test_create_product_non_json_error_body() -> None:
    session = _Session(_Response(502, ValueError("no json")))

    with pytest.raises(ProductCreateError) as excinfo:
        _client(session).create_product({"name": "Tee"})

    assert excinfo.value.status == 502
    assert "502" in excinfo.value.message


def test_network_errors_are_wrapped() -> None:
    session = _Session(requests.ConnectionError("refused"))

    with pytest.raises(ProductCreateError) as excinfo:
        _client(session).create_product({"name": "Tee"})

    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_close_closes_session() -> None:
    session = _Session()
    _client(session).close()

    assert session.closed
