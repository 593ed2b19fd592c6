"""
Paystack resource clients.

Each client validates its arguments, builds the endpoint and delegates to
the shared HTTP client.
"""

from ebee_paystack.api.endpoints.banks import BanksClient
from ebee_paystack.api.endpoints.transactions import TransactionsClient

__all__ = ["BanksClient", "TransactionsClient"]
