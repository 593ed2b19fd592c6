"""
Bank-related domain models.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, kw_only=True)
class Bank:
    """
    A bank supported by Paystack.

    Attributes:
        id: Paystack bank ID.
        name: Bank name.
        slug: Bank slug identifier.
        code: Bank code used for transfers and account resolution.
        longcode: Long bank code.
        gateway: Bank gateway.
        pay_with_bank: Whether the bank supports pay with bank.
        pay_with_bank_transfer: Whether the bank supports pay with transfer.
        active: Whether the bank is active.
        country: Country where the bank operates.
        currency: Currency used by the bank.
        type: Bank type (e.g. "nuban").
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    id: int
    name: str
    slug: str = ""
    code: str = ""
    longcode: str | None = None
    gateway: str | None = None
    pay_with_bank: bool = False
    pay_with_bank_transfer: bool = False
    active: bool = False
    country: str = ""
    currency: str = ""
    type: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class ResolveAccountRequest:
    """Account number and bank code to resolve to an account name."""

    account_number: str
    bank_code: str


@dataclass(frozen=True, kw_only=True)
class ResolvedAccount:
    """Result of an account resolution."""

    account_number: str
    account_name: str
    bank_id: int = 0
