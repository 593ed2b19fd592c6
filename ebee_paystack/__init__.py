"""
Paystack Python Client.

A typed, async Python client for the Paystack REST API.

Example:
    ```python
    from ebee_paystack import PaystackClient, PaystackConfig, ResolveAccountRequest

    async with PaystackClient(PaystackConfig(secret_key="sk_test_...")) as paystack:
        # List banks
        banks = await paystack.banks.list_banks(country="nigeria")

        # Resolve an account number
        account = await paystack.banks.resolve_account(
            ResolveAccountRequest(account_number="0022728151", bank_code="063")
        )
        print(account.data.account_name)
    ```
"""

from ebee_paystack.client import PaystackClient
from ebee_paystack.config import LogLevel, PaystackConfig
from ebee_paystack.exceptions import (
    APIError,
    ConfigurationError,
    DecodeError,
    ErrorKind,
    InvalidArgumentError,
    NetworkError,
    PaystackError,
)
from ebee_paystack.models import (
    Bank,
    InitializedTransaction,
    InitializeTransactionRequest,
    ListTransactionsRequest,
    PaystackMeta,
    PaystackResponse,
    ResolveAccountRequest,
    ResolvedAccount,
    Transaction,
)

__version__ = "1.0.0"

__all__ = [
    # Main client
    "PaystackClient",
    "PaystackConfig",
    "LogLevel",
    # Models
    "PaystackResponse",
    "PaystackMeta",
    "Bank",
    "ResolveAccountRequest",
    "ResolvedAccount",
    "InitializeTransactionRequest",
    "InitializedTransaction",
    "ListTransactionsRequest",
    "Transaction",
    # Exceptions
    "PaystackError",
    "ErrorKind",
    "InvalidArgumentError",
    "ConfigurationError",
    "APIError",
    "DecodeError",
    "NetworkError",
]
