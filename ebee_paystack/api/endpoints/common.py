"""Helpers shared by the resource clients: query strings, timestamps, validation."""

from datetime import datetime, timezone
from typing import Any
from urllib.parse import quote

from ebee_paystack.exceptions import InvalidArgumentError

DEFAULT_PER_PAGE = 50
MIN_PER_PAGE = 1
MAX_PER_PAGE = 100


def build_endpoint(path: str, query: list[tuple[str, str]]) -> str:
    """
    Append a query string to a path.

    Values are expected to be escaped already (see ``escape``).
    """
    if not query:
        return path
    return path + "?" + "&".join(f"{key}={value}" for key, value in query)


def escape(value: str) -> str:
    """Percent-escape everything outside the RFC 3986 unreserved set."""
    return quote(value, safe="")


def format_timestamp(value: datetime) -> str:
    """Format a datetime as ``yyyy-MM-ddTHH:mm:ss.fffZ``. Naive values are taken as UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp to a UTC-aware datetime."""
    if value is None:
        return None
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def require_text(value: str | None, message: str, *, argument: str) -> str:
    if value is None or not value.strip():
        raise InvalidArgumentError(message, argument=argument)
    return value


def require_per_page(per_page: int, *, argument: str = "per_page") -> None:
    if not MIN_PER_PAGE <= per_page <= MAX_PER_PAGE:
        msg = f"{argument} must be between {MIN_PER_PAGE} and {MAX_PER_PAGE}"
        raise InvalidArgumentError(msg, argument=argument)
