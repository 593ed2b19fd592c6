"""Bank-related API endpoints."""

from typing import Any

from ebee_paystack.api.endpoints.common import (
    DEFAULT_PER_PAGE,
    build_endpoint,
    escape,
    parse_timestamp,
    require_per_page,
    require_text,
)
from ebee_paystack.api.http_client import PaystackHttpClient
from ebee_paystack.exceptions import InvalidArgumentError
from ebee_paystack.models.banks import Bank, ResolveAccountRequest, ResolvedAccount
from ebee_paystack.models.common import PaystackResponse


class BanksClient:
    """Client for Paystack's bank endpoints."""

    def __init__(self, http: PaystackHttpClient) -> None:
        """
        Args:
            http: Configured Paystack HTTP client.
        """
        self._http = http

    async def list_banks(
        self,
        country: str | None = None,
        *,
        use_cursor: bool = False,
        per_page: int = DEFAULT_PER_PAGE,
        timeout: float | None = None,
    ) -> PaystackResponse[list[Bank]]:
        """
        List banks supported by Paystack.

        Args:
            country: Country to list banks for (e.g. "nigeria", "ghana").
            use_cursor: Request cursor-based pagination.
            per_page: Records per page, between 1 and 100.
            timeout: Per-call timeout in seconds.

        Returns:
            Envelope holding the banks.

        Raises:
            InvalidArgumentError: If per_page is out of range.
        """
        require_per_page(per_page)

        query = []
        if country is not None and country.strip():
            query.append(("country", escape(country)))
        if use_cursor:
            query.append(("use_cursor", "true"))
        if per_page != DEFAULT_PER_PAGE:
            query.append(("perPage", str(per_page)))

        return await self._http.get(
            build_endpoint("/bank", query), parse=_parse_banks, timeout=timeout
        )

    async def resolve_account(
        self,
        request: ResolveAccountRequest,
        *,
        timeout: float | None = None,
    ) -> PaystackResponse[ResolvedAccount]:
        """
        Resolve an account number to its account name.

        Args:
            request: Account number and bank code.
            timeout: Per-call timeout in seconds.

        Returns:
            Envelope holding the resolved account.

        Raises:
            InvalidArgumentError: If the account number or bank code is blank.
        """
        if request is None:
            raise InvalidArgumentError("request is required", argument="request")
        require_text(request.account_number, "Account number is required", argument="request")
        require_text(request.bank_code, "Bank code is required", argument="request")

        endpoint = build_endpoint(
            "/bank/resolve",
            [
                ("account_number", escape(request.account_number)),
                ("bank_code", escape(request.bank_code)),
            ],
        )
        return await self._http.get(endpoint, parse=_parse_resolved_account, timeout=timeout)


def _parse_banks(data: list[dict[str, Any]]) -> list[Bank]:
    return [
        Bank(
            id=b.get("id") or 0,
            name=b.get("name") or "",
            slug=b.get("slug") or "",
            code=b.get("code") or "",
            longcode=b.get("longcode"),
            gateway=b.get("gateway"),
            pay_with_bank=bool(b.get("pay_with_bank", False)),
            pay_with_bank_transfer=bool(b.get("pay_with_bank_transfer", False)),
            active=bool(b.get("active", False)),
            country=b.get("country") or "",
            currency=b.get("currency") or "",
            type=b.get("type") or "",
            created_at=parse_timestamp(b.get("createdAt")),
            updated_at=parse_timestamp(b.get("updatedAt")),
        )
        for b in data
    ]


def _parse_resolved_account(data: dict[str, Any]) -> ResolvedAccount:
    return ResolvedAccount(
        account_number=data.get("account_number") or "",
        account_name=data.get("account_name") or "",
        bank_id=data.get("bank_id") or 0,
    )
