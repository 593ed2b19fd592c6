"""
Response envelope shared by every Paystack endpoint.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, kw_only=True)
class PaystackMeta:
    """
    Pagination information for list endpoints.

    Attributes:
        total: Total number of records.
        skipped: Number of records skipped before this page.
        per_page: Page size (``perPage`` on the wire).
        page: Current page number.
        page_count: Number of pages (``pageCount`` on the wire).
    """

    total: int = 0
    skipped: int = 0
    per_page: int = 0
    page: int = 0
    page_count: int = 0


@dataclass(frozen=True, kw_only=True)
class PaystackResponse(Generic[T]):
    """
    Envelope wrapping every Paystack response.

    ``data`` is only populated for a successful call. ``meta`` is only
    present on paginated list endpoints.
    """

    status: bool
    message: str = ""
    data: T | None = None
    meta: PaystackMeta | None = None
