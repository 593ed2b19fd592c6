"""
Transaction-related domain models.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any


@dataclass(frozen=True, kw_only=True)
class InitializeTransactionRequest:
    """
    Body of ``POST /transaction/initialize``.

    Optional fields left as None are omitted from the request body.

    Attributes:
        amount: Amount in the currency's subunit (kobo, pesewas, cents).
        email: Customer email address.
        reference: Unique transaction reference. Generated by Paystack if omitted.
        currency: Transaction currency.
        callback_url: URL to redirect to after payment.
        channels: Payment channels to offer (card, bank, ussd, ...).
        metadata: Arbitrary metadata stored with the transaction.
        split_code: Split code for a transaction split.
        customer: Customer code or email.
        plan: Plan code, for subscriptions.
        invoice_limit: Number of times to charge the customer during a subscription.
    """

    amount: int | Decimal
    email: str
    reference: str | None = None
    currency: str = "NGN"
    callback_url: str | None = None
    channels: list[str] | None = None
    metadata: dict[str, Any] | None = None
    split_code: str | None = None
    customer: str | None = None
    plan: str | None = None
    invoice_limit: int | None = None


@dataclass(frozen=True, kw_only=True)
class InitializedTransaction:
    """Checkout details returned by a transaction initialization."""

    authorization_url: str
    access_code: str
    reference: str


@dataclass(frozen=True, kw_only=True)
class ListTransactionsRequest:
    """
    Filters for ``GET /transaction``.

    Only values that differ from the defaults are sent as query parameters.

    Attributes:
        per_page: Records per page, between 1 and 100.
        page: Page number, starting at 1.
        customer: Customer ID to filter on.
        status: Transaction status (failed, success, abandoned).
        from_date: Start of the listing window.
        to_date: End of the listing window.
        amount: Exact amount to filter on.
    """

    per_page: int = 50
    page: int = 1
    customer: str | None = None
    status: str | None = None
    from_date: datetime | None = None
    to_date: datetime | None = None
    amount: int | Decimal | None = None


@dataclass(frozen=True, kw_only=True)
class TransactionCustomer:
    id: int
    customer_code: str = ""
    email: str = ""
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None


@dataclass(frozen=True, kw_only=True)
class TransactionAuthorization:
    """Reusable card or bank authorization attached to a transaction."""

    authorization_code: str = ""
    bin: str = ""
    last4: str = ""
    exp_month: str = ""
    exp_year: str = ""
    channel: str = ""
    card_type: str = ""
    bank: str = ""
    country_code: str = ""
    brand: str = ""
    reusable: bool = False
    signature: str = ""
    account_name: str | None = None


@dataclass(frozen=True, kw_only=True)
class TransactionPlan:
    id: int
    name: str = ""
    plan_code: str = ""
    description: str | None = None
    amount: int | Decimal = 0
    interval: str = ""
    currency: str = ""


@dataclass(frozen=True, kw_only=True)
class Transaction:
    """
    A Paystack transaction record.

    Amounts are in the currency's subunit.
    """

    id: int
    reference: str
    status: str = ""
    domain: str = ""
    receipt_number: str | None = None
    amount: int | Decimal = 0
    message: str | None = None
    gateway_response: str = ""
    paid_at: datetime | None = None
    created_at: datetime | None = None
    channel: str = ""
    currency: str = ""
    ip_address: str | None = None
    metadata: dict[str, Any] | None = None
    fees: int | Decimal | None = None
    customer: TransactionCustomer | None = None
    authorization: TransactionAuthorization | None = None
    plan: TransactionPlan | None = None
