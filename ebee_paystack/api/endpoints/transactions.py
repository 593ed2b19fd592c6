"""Transaction-related API endpoints."""

from typing import Any

from ebee_paystack.api.endpoints.common import (
    DEFAULT_PER_PAGE,
    build_endpoint,
    escape,
    format_timestamp,
    parse_timestamp,
    require_per_page,
    require_text,
)
from ebee_paystack.api.http_client import PaystackHttpClient
from ebee_paystack.exceptions import InvalidArgumentError
from ebee_paystack.models.common import PaystackResponse
from ebee_paystack.models.transactions import (
    InitializedTransaction,
    InitializeTransactionRequest,
    ListTransactionsRequest,
    Transaction,
    TransactionAuthorization,
    TransactionCustomer,
    TransactionPlan,
)

DEFAULT_PAGE = 1


class TransactionsClient:
    """Client for Paystack's transaction endpoints."""

    def __init__(self, http: PaystackHttpClient) -> None:
        """
        Args:
            http: Configured Paystack HTTP client.
        """
        self._http = http

    async def initialize_transaction(
        self,
        request: InitializeTransactionRequest,
        *,
        timeout: float | None = None,
    ) -> PaystackResponse[InitializedTransaction]:
        """
        Initialize a transaction and get a checkout URL.

        Args:
            request: Transaction details. Amount is in the currency's subunit.
            timeout: Per-call timeout in seconds.

        Returns:
            Envelope holding the authorization URL, access code and reference.

        Raises:
            InvalidArgumentError: If email is blank or amount is not positive.
        """
        if request is None:
            raise InvalidArgumentError("request is required", argument="request")
        require_text(request.email, "Email is required", argument="request")
        if request.amount <= 0:
            raise InvalidArgumentError("Amount must be greater than zero", argument="request")

        return await self._http.post(
            "/transaction/initialize",
            request,
            parse=_parse_initialized_transaction,
            timeout=timeout,
        )

    async def verify_transaction(
        self,
        reference: str,
        *,
        timeout: float | None = None,
    ) -> PaystackResponse[Transaction]:
        """
        Confirm the status of a transaction.

        Raises:
            InvalidArgumentError: If the reference is blank.
        """
        require_text(reference, "Reference is required", argument="reference")

        return await self._http.get(
            f"/transaction/verify/{escape(reference)}",
            parse=_parse_transaction,
            timeout=timeout,
        )

    async def list_transactions(
        self,
        request: ListTransactionsRequest | None = None,
        *,
        timeout: float | None = None,
    ) -> PaystackResponse[list[Transaction]]:
        """
        List transactions on the integration.

        Only filters that differ from their defaults are sent.

        Args:
            request: Paging and filter options. Defaults to the first page of 50.
            timeout: Per-call timeout in seconds.

        Returns:
            Envelope holding the transactions and pagination meta.

        Raises:
            InvalidArgumentError: If per_page is out of range or page is below 1.
        """
        request = request or ListTransactionsRequest()

        require_per_page(request.per_page)
        if request.page < 1:
            raise InvalidArgumentError("page must be greater than zero", argument="page")

        query = []
        if request.per_page != DEFAULT_PER_PAGE:
            query.append(("perPage", str(request.per_page)))
        if request.page != DEFAULT_PAGE:
            query.append(("page", str(request.page)))
        if request.customer is not None and request.customer.strip():
            query.append(("customer", escape(request.customer)))
        if request.status is not None and request.status.strip():
            query.append(("status", escape(request.status)))
        if request.from_date is not None:
            query.append(("from", format_timestamp(request.from_date)))
        if request.to_date is not None:
            query.append(("to", format_timestamp(request.to_date)))
        if request.amount is not None:
            query.append(("amount", str(request.amount)))

        return await self._http.get(
            build_endpoint("/transaction", query),
            parse=_parse_transactions,
            timeout=timeout,
        )

    async def fetch_transaction(
        self,
        transaction_id: int,
        *,
        timeout: float | None = None,
    ) -> PaystackResponse[Transaction]:
        """
        Get the details of a single transaction.

        Raises:
            InvalidArgumentError: If the transaction ID is not positive.
        """
        if transaction_id <= 0:
            msg = "Transaction ID must be greater than zero"
            raise InvalidArgumentError(msg, argument="transaction_id")

        return await self._http.get(
            f"/transaction/{transaction_id}",
            parse=_parse_transaction,
            timeout=timeout,
        )


def _parse_initialized_transaction(data: dict[str, Any]) -> InitializedTransaction:
    return InitializedTransaction(
        authorization_url=data.get("authorization_url") or "",
        access_code=data.get("access_code") or "",
        reference=data.get("reference") or "",
    )


def _parse_transactions(data: list[dict[str, Any]]) -> list[Transaction]:
    return [_parse_transaction(t) for t in data]


def _parse_transaction(data: dict[str, Any]) -> Transaction:
    customer = data.get("customer")
    authorization = data.get("authorization")
    plan = data.get("plan")

    return Transaction(
        id=data.get("id") or 0,
        reference=data.get("reference") or "",
        status=data.get("status") or "",
        domain=data.get("domain") or "",
        receipt_number=data.get("receipt_number"),
        amount=data.get("amount") or 0,
        message=data.get("message"),
        gateway_response=data.get("gateway_response") or "",
        paid_at=parse_timestamp(data.get("paid_at") or data.get("paidAt")),
        created_at=parse_timestamp(data.get("created_at") or data.get("createdAt")),
        channel=data.get("channel") or "",
        currency=data.get("currency") or "",
        ip_address=data.get("ip_address"),
        metadata=data.get("metadata") if isinstance(data.get("metadata"), dict) else None,
        fees=data.get("fees"),
        customer=_parse_customer(customer) if customer else None,
        authorization=_parse_authorization(authorization) if authorization else None,
        # Paystack sends an empty object when the transaction has no plan.
        plan=_parse_plan(plan) if isinstance(plan, dict) and plan.get("id") else None,
    )


def _parse_customer(data: dict[str, Any]) -> TransactionCustomer:
    return TransactionCustomer(
        id=data.get("id") or 0,
        customer_code=data.get("customer_code") or "",
        email=data.get("email") or "",
        first_name=data.get("first_name"),
        last_name=data.get("last_name"),
        phone=data.get("phone"),
    )


def _parse_authorization(data: dict[str, Any]) -> TransactionAuthorization:
    return TransactionAuthorization(
        authorization_code=data.get("authorization_code") or "",
        bin=data.get("bin") or "",
        last4=data.get("last4") or "",
        exp_month=data.get("exp_month") or "",
        exp_year=data.get("exp_year") or "",
        channel=data.get("channel") or "",
        card_type=data.get("card_type") or "",
        bank=data.get("bank") or "",
        country_code=data.get("country_code") or "",
        brand=data.get("brand") or "",
        reusable=bool(data.get("reusable", False)),
        signature=data.get("signature") or "",
        account_name=data.get("account_name"),
    )


def _parse_plan(data: dict[str, Any]) -> TransactionPlan:
    return TransactionPlan(
        id=data.get("id") or 0,
        name=data.get("name") or "",
        plan_code=data.get("plan_code") or "",
        description=data.get("description"),
        amount=data.get("amount") or 0,
        interval=data.get("interval") or "",
        currency=data.get("currency") or "",
    )
