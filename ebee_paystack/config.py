"""
Paystack client configuration.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Self
from urllib.parse import urlparse

from ebee_paystack.exceptions import ConfigurationError

TRACE = 5

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class LogLevel(StrEnum):
    """Minimum severity the client writes when logging is enabled."""

    NONE = "none"
    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "information"
    DEBUG = "debug"
    TRACE = "trace"

    def allows(self, severity: int) -> bool:
        """Check whether an event of the given stdlib severity passes this threshold."""
        threshold = _THRESHOLDS.get(self)
        if threshold is None:
            return False
        return severity >= threshold


_THRESHOLDS: dict[LogLevel, int] = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.INFORMATION: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.TRACE: TRACE,
}


@dataclass(frozen=True, kw_only=True)
class PaystackConfig:
    """
    Attributes:
        secret_key: Paystack secret key, sent as a bearer token.
        base_url: Base URL for the Paystack API.
        timeout: Request timeout in seconds.
        enable_logging: Whether requests and responses are logged.
        log_level: Minimum severity written when logging is enabled.
        user_agent: User-Agent header value.
    """

    secret_key: str = field(repr=False)
    base_url: str = "https://api.paystack.co"
    timeout: float = 30.0
    enable_logging: bool = False
    log_level: LogLevel = LogLevel.INFORMATION
    user_agent: str = "Ebee.Paystack/1.0.0"

    def __post_init__(self) -> None:
        failures = []
        if not self.secret_key or not self.secret_key.strip():
            failures.append("secret_key is required")
        if not self.base_url or not self.base_url.strip():
            failures.append("base_url is required")
        elif not _is_absolute_url(self.base_url):
            failures.append("base_url must be a valid absolute URL")
        if self.timeout <= 0:
            failures.append("timeout must be positive")
        if self.log_level not in tuple(LogLevel):
            failures.append(f"unknown log_level {self.log_level!r}")
        if failures:
            raise ConfigurationError(failures)
        # Accept plain strings such as "debug" for the log level.
        object.__setattr__(self, "log_level", LogLevel(self.log_level))

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, *, prefix: str = "PAYSTACK_"
    ) -> Self:
        """
        Build a configuration from environment variables.

        Reads ``SECRET_KEY``, ``BASE_URL``, ``TIMEOUT``, ``ENABLE_LOGGING`` and
        ``LOG_LEVEL`` under the given prefix. Missing optional variables keep
        their defaults.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.
            prefix: Variable name prefix.

        Raises:
            ConfigurationError: If the resulting configuration is invalid.
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {"secret_key": env.get(f"{prefix}SECRET_KEY", "")}

        if base_url := env.get(f"{prefix}BASE_URL"):
            kwargs["base_url"] = base_url
        if timeout := env.get(f"{prefix}TIMEOUT"):
            try:
                kwargs["timeout"] = float(timeout)
            except ValueError as e:
                raise ConfigurationError([f"timeout must be a number, got {timeout!r}"]) from e
        if enable_logging := env.get(f"{prefix}ENABLE_LOGGING"):
            kwargs["enable_logging"] = enable_logging.strip().lower() in _TRUTHY
        if log_level := env.get(f"{prefix}LOG_LEVEL"):
            kwargs["log_level"] = log_level.strip().lower()

        return cls(**kwargs)

    def should_log(self, severity: int) -> bool:
        """Check whether an event of the given severity should be written."""
        return self.enable_logging and self.log_level.allows(severity)


def _is_absolute_url(url: str) -> bool:
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)
