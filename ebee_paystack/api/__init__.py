"""
Paystack API client layer.

Provides async HTTP communication with the Paystack API.
"""

from ebee_paystack.api.endpoints import BanksClient, TransactionsClient
from ebee_paystack.api.http_client import PaystackHttpClient, sanitize_for_log, sanitize_value
from ebee_paystack.api.protocol import BanksAPI, TransactionsAPI

__all__ = [
    "BanksAPI",
    "BanksClient",
    "PaystackHttpClient",
    "TransactionsAPI",
    "TransactionsClient",
    "sanitize_for_log",
    "sanitize_value",
]
