"""
Resource group protocols.

Each protocol is the minimal contract for one group of Paystack endpoints.
The client facade holds one implementation of each, so any of them can be
replaced (e.g. by a fake in tests) without touching the others.
"""

from typing import Protocol, runtime_checkable

from ebee_paystack.models.banks import Bank, ResolveAccountRequest, ResolvedAccount
from ebee_paystack.models.common import PaystackResponse
from ebee_paystack.models.transactions import (
    InitializedTransaction,
    InitializeTransactionRequest,
    ListTransactionsRequest,
    Transaction,
)


@runtime_checkable
class BanksAPI(Protocol):
    """Bank listing and account resolution."""

    async def list_banks(
        self,
        country: str | None = None,
        *,
        use_cursor: bool = False,
        per_page: int = 50,
        timeout: float | None = None,
    ) -> PaystackResponse[list[Bank]]:
        """List banks supported by Paystack."""
        ...

    async def resolve_account(
        self,
        request: ResolveAccountRequest,
        *,
        timeout: float | None = None,
    ) -> PaystackResponse[ResolvedAccount]:
        """Resolve an account number to its account name."""
        ...


@runtime_checkable
class TransactionsAPI(Protocol):
    """Transaction lifecycle: initialize, verify, list and fetch."""

    async def initialize_transaction(
        self,
        request: InitializeTransactionRequest,
        *,
        timeout: float | None = None,
    ) -> PaystackResponse[InitializedTransaction]:
        """Initialize a transaction."""
        ...

    async def verify_transaction(
        self,
        reference: str,
        *,
        timeout: float | None = None,
    ) -> PaystackResponse[Transaction]:
        """Verify a transaction by reference."""
        ...

    async def list_transactions(
        self,
        request: ListTransactionsRequest | None = None,
        *,
        timeout: float | None = None,
    ) -> PaystackResponse[list[Transaction]]:
        """List transactions."""
        ...

    async def fetch_transaction(
        self,
        transaction_id: int,
        *,
        timeout: float | None = None,
    ) -> PaystackResponse[Transaction]:
        """Fetch a transaction by ID."""
        ...
