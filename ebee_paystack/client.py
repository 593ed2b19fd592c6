"""
Paystack client facade.

This is the main entry point for users of the library. It owns the HTTP
client and exposes each resource group as an attribute.
"""

from typing import Self

import httpx
import structlog

from ebee_paystack.api.endpoints import BanksClient, TransactionsClient
from ebee_paystack.api.http_client import PaystackHttpClient
from ebee_paystack.api.protocol import BanksAPI, TransactionsAPI
from ebee_paystack.config import PaystackConfig

logger = structlog.get_logger(__name__)


class PaystackClient:
    """
    Async client for the Paystack API.

    Example:
        ```python
        config = PaystackConfig(secret_key="sk_test_...")

        async with PaystackClient(config) as paystack:
            banks = await paystack.banks.list_banks(country="nigeria")

            init = await paystack.transactions.initialize_transaction(
                InitializeTransactionRequest(amount=500000, email="customer@example.com")
            )
            print(init.data.authorization_url)
        ```

    Args:
        config: Client configuration. Read from ``PAYSTACK_*`` environment
            variables if not provided.
        transport: Optional httpx transport for testing (mock transport).
        banks: Replacement for the bank endpoints client.
        transactions: Replacement for the transaction endpoints client.
    """

    def __init__(
        self,
        config: PaystackConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        banks: BanksAPI | None = None,
        transactions: TransactionsAPI | None = None,
    ) -> None:
        self._config = config or PaystackConfig.from_env()
        self._http = PaystackHttpClient(self._config, transport=transport)
        self._banks = banks or BanksClient(self._http)
        self._transactions = transactions or TransactionsClient(self._http)

    async def __aenter__(self) -> Self:
        """Enter async context."""
        await self._http.__aenter__()
        logger.debug("Client initialized")
        return self

    async def __aexit__(
        self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object
    ) -> None:
        """Exit async context."""
        await self.close()

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._http.close()
        logger.debug("Client closed")

    @property
    def config(self) -> PaystackConfig:
        return self._config

    @property
    def banks(self) -> BanksAPI:
        """Bank listing and account resolution."""
        return self._banks

    @property
    def transactions(self) -> TransactionsAPI:
        """Transaction initialize, verify, list and fetch."""
        return self._transactions
