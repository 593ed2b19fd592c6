"""
Async HTTP client for the Paystack API.

Provides a single choke point for outbound calls: auth and content headers,
JSON payload serialization, response envelope decoding, error mapping and
sanitized request/response logging.
"""

import asyncio
import dataclasses
import json
import logging
import time
from collections.abc import Callable, Mapping
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, TypeVar
from urllib.parse import parse_qsl, quote

import httpx
import structlog

from ebee_paystack.config import PaystackConfig
from ebee_paystack.exceptions import APIError, DecodeError, NetworkError
from ebee_paystack.models.common import PaystackMeta, PaystackResponse

logger = structlog.get_logger(__name__)

T = TypeVar("T")

SENSITIVE_KEYS = frozenset(
    {
        "secret_key",
        "secretkey",
        "authorization_code",
        "authorizationcode",
        "access_code",
        "accesscode",
        "pin",
        "cvv",
        "card_number",
        "cardnumber",
        "account_number",
        "accountnumber",
        "bvn",
        "password",
        "token",
    }
)

MAX_LOGGED_STRING = 500
TRUNCATED_STRING = 50
MAX_LOGGED_CONTENT = 1000
ELLIPSIS = "..."
UNSANITIZABLE_PAYLOAD = "[Could not sanitize payload]"


def to_json_payload(value: Any) -> Any:
    """
    Convert a request payload into JSON-ready data.

    Dataclass fields are emitted under their (snake_case) attribute names and
    fields set to None are left out, matching the wire format Paystack expects.

    Args:
        value: Dataclass instance, mapping, sequence or scalar.

    Returns:
        Plain dict/list/scalar structure accepted by ``json.dumps``.

    Raises:
        TypeError: If the value contains something that has no JSON form.
    """
    match value:
        case None | bool() | int() | float() | str():
            return value
        case Enum():
            return value.value
        case Decimal():
            return int(value) if value == value.to_integral_value() else float(value)
        case datetime() | date():
            return value.isoformat()
        case Mapping():
            return {str(k): to_json_payload(v) for k, v in value.items()}
        case list() | tuple() | set() | frozenset():
            return [to_json_payload(item) for item in value]

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        result = {}
        for f in dataclasses.fields(value):
            field_value = getattr(value, f.name)
            if field_value is None:
                continue
            result[f.name] = to_json_payload(field_value)
        return result

    msg = f"Cannot serialize {type(value).__name__} to JSON"
    raise TypeError(msg)


def mask_sensitive_value(value: str) -> str:
    """
    Mask a sensitive string, keeping a few characters at each end.

    Short values are fully starred, mid-length ones keep two characters at
    each end, longer ones keep four with at most ten stars in between.
    Blank values are returned unchanged.
    """
    if not value or value.isspace():
        return value

    length = len(value)
    if length <= 4:
        return "*" * length
    if length <= 8:
        return value[:2] + "*" * (length - 4) + value[-2:]
    return value[:4] + "*" * min(length - 8, 10) + value[-4:]


def _truncate(value: str) -> str:
    if len(value) > MAX_LOGGED_STRING:
        return value[:TRUNCATED_STRING] + ELLIPSIS
    return value


def sanitize_value(value: Any) -> Any:
    """
    Build a log-safe copy of a JSON-shaped value.

    Recursively masks values under sensitive keys (matched case-insensitively)
    and truncates long strings. The input is never modified.

    Args:
        value: Decoded JSON data (dict, list, str, number, bool or None).

    Returns:
        Copy with the same shape and sensitive leaves masked.
    """
    match value:
        case Mapping():
            result = {}
            for key, item in value.items():
                if str(key).lower() in SENSITIVE_KEYS:
                    result[key] = mask_sensitive_value(item if isinstance(item, str) else "")
                else:
                    result[key] = sanitize_value(item)
            return result
        case list() | tuple():
            return [sanitize_value(item) for item in value]
        case str():
            return _truncate(value)
        case bool() | int() | float() | None:
            return value
        case _:
            return str(value)


def sanitize_for_log(payload: Any) -> Any:
    """
    Sanitize an outgoing payload before logging.

    Never raises: a payload that cannot be converted is logged as a placeholder.
    """
    try:
        return sanitize_value(to_json_payload(payload))
    except Exception:
        return UNSANITIZABLE_PAYLOAD


def sanitize_response_content(content: str) -> str:
    """
    Sanitize a raw response body before logging.

    JSON bodies are sanitized and re-serialized. Anything else is logged as
    text, cut to the first 1000 characters.
    """
    if not content or content.isspace():
        return content

    try:
        return json.dumps(sanitize_value(json.loads(content)), ensure_ascii=False)
    except Exception:
        if len(content) > MAX_LOGGED_CONTENT:
            return content[:MAX_LOGGED_CONTENT] + ELLIPSIS
        return content


def sanitize_endpoint(endpoint: str) -> str:
    """Mask sensitive query parameters (e.g. account_number) in an endpoint."""
    path, sep, query = endpoint.partition("?")
    if not sep:
        return endpoint

    parts = []
    for key, value in parse_qsl(query, keep_blank_values=True):
        if key.lower() in SENSITIVE_KEYS:
            value = mask_sensitive_value(value)
        parts.append(f"{quote(key, safe='')}={quote(value, safe='*:')}")
    return f"{path}?{'&'.join(parts)}"


def parse_envelope(body: Any, parse: Callable[[Any], T] | None = None) -> PaystackResponse[T]:
    """
    Decode a Paystack response body into a typed envelope.

    Args:
        body: Decoded JSON body.
        parse: Converts the raw ``data`` member into its typed form.

    Returns:
        The typed envelope.

    Raises:
        DecodeError: If the body is not an envelope or ``data`` cannot be parsed.
    """
    if not isinstance(body, dict):
        raise DecodeError()

    raw_data = body.get("data")
    try:
        data = parse(raw_data) if parse is not None and raw_data is not None else raw_data
        meta = _parse_meta(body.get("meta"))
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise DecodeError() from e

    return PaystackResponse(
        status=bool(body.get("status", False)),
        message=str(body.get("message") or ""),
        data=data,
        meta=meta,
    )


def _parse_meta(raw: Any) -> PaystackMeta | None:
    if not isinstance(raw, dict):
        return None
    return PaystackMeta(
        total=int(raw.get("total") or 0),
        skipped=int(raw.get("skipped") or 0),
        per_page=int(raw.get("perPage") or 0),
        page=int(raw.get("page") or 0),
        page_count=int(raw.get("pageCount") or 0),
    )


def _error_message(content: str, status_code: int) -> str:
    try:
        body = json.loads(content)
    except (ValueError, RecursionError):
        body = None

    if isinstance(body, dict):
        return str(body.get("message") or "Request failed")
    return f"Request failed with status {status_code}"


class PaystackHttpClient:
    """Async HTTP client for the Paystack API."""

    def __init__(
        self,
        config: PaystackConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            config: Client configuration.
            transport: Optional transport for testing (mock transport).
        """
        self._config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._client_lock = asyncio.Lock()

    async def __aenter__(self) -> "PaystackHttpClient":
        await self._ensure_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    @property
    def config(self) -> PaystackConfig:
        return self._config

    async def _ensure_client(self) -> httpx.AsyncClient:
        async with self._client_lock:
            if self._client is None:
                self._client = httpx.AsyncClient(
                    base_url=self._config.base_url,
                    timeout=self._config.timeout,
                    transport=self._transport,
                    headers={
                        "Authorization": f"Bearer {self._config.secret_key}",
                        "Accept": "application/json",
                        "User-Agent": self._config.user_agent,
                    },
                )
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client. Safe to call more than once."""
        async with self._client_lock:
            if self._client is None:
                logger.debug("Client not open.")
                return
            await self._client.aclose()
            self._client = None

    async def get(
        self,
        endpoint: str,
        *,
        parse: Callable[[Any], T] | None = None,
        timeout: float | None = None,
    ) -> PaystackResponse[T]:
        """Make a GET request."""
        return await self.request("GET", endpoint, parse=parse, timeout=timeout)

    async def post(
        self,
        endpoint: str,
        payload: Any = None,
        *,
        parse: Callable[[Any], T] | None = None,
        timeout: float | None = None,
    ) -> PaystackResponse[T]:
        """Make a POST request with an optional JSON payload."""
        return await self.request("POST", endpoint, payload=payload, parse=parse, timeout=timeout)

    async def put(
        self,
        endpoint: str,
        payload: Any = None,
        *,
        parse: Callable[[Any], T] | None = None,
        timeout: float | None = None,
    ) -> PaystackResponse[T]:
        """Make a PUT request with an optional JSON payload."""
        return await self.request("PUT", endpoint, payload=payload, parse=parse, timeout=timeout)

    async def delete(
        self,
        endpoint: str,
        *,
        parse: Callable[[Any], T] | None = None,
        timeout: float | None = None,
    ) -> PaystackResponse[T]:
        """Make a DELETE request."""
        return await self.request("DELETE", endpoint, parse=parse, timeout=timeout)

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        payload: Any = None,
        parse: Callable[[Any], T] | None = None,
        timeout: float | None = None,
    ) -> PaystackResponse[T]:
        """
        Make an API request.

        Args:
            method: HTTP method (GET, POST, etc.).
            endpoint: API endpoint including any query string (e.g., "/bank?country=nigeria").
            payload: Request body for POST/PUT, a dataclass or JSON-ready data.
            parse: Converts the envelope's ``data`` member into its typed form.
            timeout: Per-call timeout in seconds, overriding the configured one.

        Returns:
            Decoded response envelope.

        Raises:
            APIError: If Paystack returns a non-success status.
            DecodeError: If a successful response cannot be decoded.
            NetworkError: If the request fails due to network issues or times out.
        """
        client = await self._ensure_client()
        body = to_json_payload(payload) if payload is not None else None

        logged_endpoint = sanitize_endpoint(endpoint)
        self._log_request(method, logged_endpoint, payload)

        started = time.perf_counter()
        try:
            response = await client.request(
                method=method,
                url=endpoint,
                json=body,
                timeout=timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT,
            )
        except httpx.TimeoutException as e:
            msg = f"Request timed out: {method} {logged_endpoint}"
            raise NetworkError(msg, endpoint=logged_endpoint) from e
        except httpx.RequestError as e:
            msg = f"Request failed: {method} {logged_endpoint}: {e}"
            raise NetworkError(msg, endpoint=logged_endpoint) from e
        elapsed_ms = (time.perf_counter() - started) * 1000

        self._log_response(method, logged_endpoint, response, elapsed_ms)

        return self._process_response(response, logged_endpoint, parse)

    def _log_request(self, method: str, endpoint: str, payload: Any) -> None:
        if not self._config.should_log(logging.INFO):
            return

        logger.info(
            "Paystack API request",
            method=method,
            endpoint=endpoint,
            payload=sanitize_for_log(payload) if payload is not None else None,
        )

    def _log_response(
        self, method: str, endpoint: str, response: httpx.Response, elapsed_ms: float
    ) -> None:
        severity = logging.INFO if response.is_success else logging.WARNING
        if not self._config.should_log(severity):
            return

        log = logger.info if response.is_success else logger.warning
        log(
            "Paystack API response",
            method=method,
            endpoint=endpoint,
            status_code=response.status_code,
            elapsed_ms=round(elapsed_ms, 2),
            content=sanitize_response_content(response.text),
        )

    @staticmethod
    def _process_response(
        response: httpx.Response,
        endpoint: str,
        parse: Callable[[Any], T] | None,
    ) -> PaystackResponse[T]:
        content = response.text

        if not response.is_success:
            raise APIError(
                _error_message(content, response.status_code),
                status_code=response.status_code,
                response_content=content,
                endpoint=endpoint,
            )

        try:
            body = json.loads(content)
        except (ValueError, RecursionError) as e:
            raise DecodeError(status_code=response.status_code, endpoint=endpoint) from e

        try:
            return parse_envelope(body, parse)
        except DecodeError as e:
            raise DecodeError(status_code=response.status_code, endpoint=endpoint) from e
