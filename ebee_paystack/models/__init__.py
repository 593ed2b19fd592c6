"""
Domain models for the Paystack API.

These are immutable (frozen) dataclasses mirroring Paystack's JSON payloads.
"""

from ebee_paystack.models.banks import Bank, ResolveAccountRequest, ResolvedAccount
from ebee_paystack.models.common import PaystackMeta, PaystackResponse
from ebee_paystack.models.transactions import (
    InitializedTransaction,
    InitializeTransactionRequest,
    ListTransactionsRequest,
    Transaction,
    TransactionAuthorization,
    TransactionCustomer,
    TransactionPlan,
)

__all__ = [
    # Envelope
    "PaystackResponse",
    "PaystackMeta",
    # Banks
    "Bank",
    "ResolveAccountRequest",
    "ResolvedAccount",
    # Transactions
    "InitializeTransactionRequest",
    "InitializedTransaction",
    "ListTransactionsRequest",
    "Transaction",
    "TransactionAuthorization",
    "TransactionCustomer",
    "TransactionPlan",
]
