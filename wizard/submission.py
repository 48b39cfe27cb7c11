"""Sequential submission of every variant page to the seller backend.

Each page becomes one product: its local files are uploaded in a single
request, then one create request is issued with the page's colour inventory.
Pages are processed strictly in order. The first failure stops the run and
products created before it stay created; the report lists them so the seller
can reconcile by hand.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol, Sequence

from core.errors import (
    LocalizedText,
    MissingImagesError,
    ProductCreateError,
    ReleasedHandleError,
    SellerApiError,
)
from core.validators import is_remote_image
from integrations.seller_api import CreatedProductResponse, UploadFile
from models.product_page import ProductPage
from state.preview_handles import PreviewRegistry
from state.variant_store import VariantStore
from utils.i18n import SUBMISSION_FAILED, SUBMISSION_SUCCESS
from utils.logging_context import log_context
from utils.telemetry import page_span
from wizard.payload import build_product_payload
from wizard.validation import PageValidationResult, validate_pages

logger = logging.getLogger(__name__)


class SellerApi(Protocol):
    def upload_images(self, files: Sequence[UploadFile]) -> list[str]: ...

    def create_product(self, payload: dict[str, object]) -> CreatedProductResponse: ...


@dataclass(frozen=True)
class CreatedProduct:
    page: int
    name: str
    color: str
    product_id: str | None = None


@dataclass
class SubmissionReport:
    """What happened during one submission run."""

    created: list[CreatedProduct] = field(default_factory=list)
    validation: PageValidationResult | None = None
    failed_page: int | None = None
    error: LocalizedText | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and (self.validation is None or self.validation.ok)

    @property
    def partial(self) -> bool:
        return bool(self.created) and not self.ok

    @property
    def message(self) -> LocalizedText:
        if self.validation is not None and not self.validation.ok and self.validation.message:
            return self.validation.message
        if self.error is not None:
            return self.error
        return (
            SUBMISSION_SUCCESS[0].format(count=len(self.created)),
            SUBMISSION_SUCCESS[1].format(count=len(self.created)),
        )


def resolve_image_urls(page: ProductPage, number: int, api: SellerApi, registry: PreviewRegistry) -> list[str]:
    """Return the remote image URLs for ``page``, uploading local files first."""

    if page.files:
        try:
            files: list[UploadFile] = [
                (image.filename, image.content_type, registry.read(image)) for image in page.files
            ]
        except ReleasedHandleError as exc:
            raise MissingImagesError(f"local image {exc.args[0]} was already released", page=number) from exc
        return api.upload_images(files)
    remote = [ref for ref in page.images if is_remote_image(ref)]
    if not remote:
        raise MissingImagesError("only local previews are available and their files are gone", page=number)
    return remote


def _failure(report: SubmissionReport, number: int, message: str) -> SubmissionReport:
    report.failed_page = number
    report.error = (
        SUBMISSION_FAILED[0].format(page=number, message=message),
        SUBMISSION_FAILED[1].format(page=number, message=message),
    )
    return report


def submit_variants(store: VariantStore, api: SellerApi, registry: PreviewRegistry) -> SubmissionReport:
    """Validate and submit every page of ``store``.

    The caller must have saved the live form into ``store`` beforehand.
    Validation failures return before any network call.
    """

    report = SubmissionReport()
    validation = validate_pages(store.pages)
    if not validation.ok:
        logger.info("Submission blocked at page %s (%s)", validation.page, validation.field)
        report.validation = validation
        return report
    report.validation = validation

    shared = store.pages[0]
    for number, page in enumerate(store.pages, start=1):
        with log_context(wizard_page=number), page_span(number, page.selected_color) as span:
            try:
                image_urls = resolve_image_urls(page, number, api, registry)
                try:
                    payload = build_product_payload(page, shared, image_urls)
                except ValueError as exc:
                    raise ProductCreateError(str(exc)) from exc
                response = api.create_product(payload.to_request_body())
            except SellerApiError as exc:
                exc.for_page(number)
                span.record_exception(exc)
                logger.warning("Variant %d failed after %d created: %s", number, len(report.created), exc.message)
                return _failure(report, number, exc.message)
            report.created.append(
                CreatedProduct(
                    page=number,
                    name=payload.name,
                    color=page.selected_color,
                    product_id=response.product_id,
                )
            )
            logger.info("Variant %d created (%s)", number, response.product_id or "no id")
    return report


__all__ = [
    "CreatedProduct",
    "SellerApi",
    "SubmissionReport",
    "resolve_image_urls",
    "submit_variants",
]
