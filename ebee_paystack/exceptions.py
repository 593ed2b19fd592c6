"""
Paystack SDK exception hierarchy.

All exceptions inherit from PaystackError for easy catching. Each class
carries an ErrorKind so callers can branch on the failure category without
an isinstance ladder.
"""

from enum import StrEnum
from typing import Any, ClassVar


class ErrorKind(StrEnum):
    """Category of a failed operation."""

    ARGUMENT = "argument"
    API = "api"
    DECODE = "decode"
    TRANSPORT = "transport"
    CONFIGURATION = "configuration"


class PaystackError(Exception):
    """Base exception for all ebee_paystack errors."""

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class InvalidArgumentError(PaystackError, ValueError):
    """Caller input violates a local precondition. No request was sent."""

    kind = ErrorKind.ARGUMENT

    def __init__(self, message: str, *, argument: str | None = None) -> None:
        super().__init__(message, argument=argument)
        self.argument = argument


class ConfigurationError(PaystackError, ValueError):
    """Client configuration is invalid."""

    kind = ErrorKind.CONFIGURATION

    def __init__(self, failures: list[str]) -> None:
        super().__init__("Invalid Paystack configuration: " + "; ".join(failures))
        self.failures = failures


class APIError(PaystackError):
    """Paystack returned a non-success HTTP status."""

    kind = ErrorKind.API

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        response_content: str | None = None,
        endpoint: str | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code, endpoint=endpoint)
        self.status_code = status_code
        self.response_content = response_content
        self.endpoint = endpoint


class DecodeError(PaystackError):
    """Response had a success status but its body could not be decoded."""

    kind = ErrorKind.DECODE

    def __init__(
        self,
        message: str = "Failed to deserialize response",
        *,
        status_code: int | None = None,
        endpoint: str | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code, endpoint=endpoint)
        self.status_code = status_code
        self.endpoint = endpoint


class NetworkError(PaystackError):
    """Network-level error (connection failed, timeout)."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, *, endpoint: str | None = None) -> None:
        super().__init__(message, endpoint=endpoint)
        self.endpoint = endpoint
