"""Tests for PaystackHttpClient."""

import asyncio
import json
from dataclasses import dataclass

import httpx
import pytest
from structlog.testing import capture_logs

from ebee_paystack.api.http_client import PaystackHttpClient
from ebee_paystack.config import LogLevel, PaystackConfig
from ebee_paystack.exceptions import APIError, DecodeError, NetworkError
from ebee_paystack.models.common import PaystackMeta
from ebee_paystack.models.transactions import InitializeTransactionRequest
from ebee_paystack.tests.conftest import TEST_SECRET_KEY
from ebee_paystack.tests.utils.mock_transport import (
    FailingTransport,
    MockTransport,
    success_envelope,
)

# Request headers tests


@pytest.mark.asyncio
async def test_request_includes_default_headers(
    config: PaystackConfig,
    mock_transport: MockTransport,
) -> None:
    """Test that every request carries auth, accept and user-agent headers."""
    mock_transport.add_response(json_data=success_envelope())

    async with PaystackHttpClient(config, transport=mock_transport) as client:
        await client.get("/bank")

    request = mock_transport.requests[0]
    assert request.headers.get("authorization") == f"Bearer {TEST_SECRET_KEY}"
    assert request.headers.get("accept") == "application/json"
    assert request.headers.get("user-agent") == "Ebee.Paystack/1.0.0"


@pytest.mark.asyncio
async def test_request_uses_base_url(mock_transport: MockTransport) -> None:
    config = PaystackConfig(secret_key=TEST_SECRET_KEY, base_url="https://sandbox.example.com")
    mock_transport.add_response(json_data=success_envelope())

    async with PaystackHttpClient(config, transport=mock_transport) as client:
        await client.get("/transaction/42")

    assert str(mock_transport.requests[0].url) == "https://sandbox.example.com/transaction/42"


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["GET", "POST", "PUT", "DELETE"])
async def test_verb_methods_use_matching_http_method(
    config: PaystackConfig,
    mock_transport: MockTransport,
    method: str,
) -> None:
    mock_transport.add_response(json_data=success_envelope())

    async with PaystackHttpClient(config, transport=mock_transport) as client:
        call = getattr(client, method.lower())
        await call("/resource")

    assert mock_transport.requests[0].method == method


# Request body tests


@pytest.mark.asyncio
async def test_post_serializes_dataclass_payload_without_none_fields(
    config: PaystackConfig,
    mock_transport: MockTransport,
) -> None:
    """Test that absent optional fields are left out of the request body."""
    mock_transport.add_response(json_data=success_envelope())
    payload = InitializeTransactionRequest(
        amount=20000,
        email="customer@example.com",
        callback_url="https://shop.example.com/callback",
        channels=["card", "bank"],
    )

    async with PaystackHttpClient(config, transport=mock_transport) as client:
        await client.post("/transaction/initialize", payload)

    request = mock_transport.requests[0]
    assert request.headers.get("content-type") == "application/json"
    assert json.loads(request.content) == {
        "amount": 20000,
        "email": "customer@example.com",
        "currency": "NGN",
        "callback_url": "https://shop.example.com/callback",
        "channels": ["card", "bank"],
    }


@pytest.mark.asyncio
async def test_put_sends_dict_payload(
    config: PaystackConfig,
    mock_transport: MockTransport,
) -> None:
    mock_transport.add_response(json_data=success_envelope())

    async with PaystackHttpClient(config, transport=mock_transport) as client:
        await client.put("/customer/CUS_123", {"first_name": "Ada", "phone": None})

    assert json.loads(mock_transport.requests[0].content) == {"first_name": "Ada", "phone": None}


@pytest.mark.asyncio
async def test_post_without_payload_sends_no_body(
    config: PaystackConfig,
    mock_transport: MockTransport,
) -> None:
    mock_transport.add_response(json_data=success_envelope())

    async with PaystackHttpClient(config, transport=mock_transport) as client:
        await client.post("/transaction/export")

    assert mock_transport.requests[0].content == b""


@pytest.mark.asyncio
async def test_logging_does_not_alter_sent_payload(
    logging_config: PaystackConfig,
    mock_transport: MockTransport,
) -> None:
    """Test that sensitive values go over the wire unmasked even when logged masked."""
    mock_transport.add_response(json_data=success_envelope())
    payload = {"pin": "1234", "card_number": "4084084084084081"}

    with capture_logs():
        async with PaystackHttpClient(logging_config, transport=mock_transport) as client:
            await client.post("/charge/submit_pin", payload)

    assert json.loads(mock_transport.requests[0].content) == {
        "pin": "1234",
        "card_number": "4084084084084081",
    }
    assert payload == {"pin": "1234", "card_number": "4084084084084081"}


# Response handling tests


@pytest.mark.asyncio
async def test_request_returns_envelope(
    config: PaystackConfig,
    mock_transport: MockTransport,
) -> None:
    mock_transport.add_response(
        json_data={
            "status": True,
            "message": "Transactions retrieved",
            "data": [{"id": 1}],
            "meta": {"total": 7, "skipped": 0, "perPage": 5, "page": 1, "pageCount": 2},
        }
    )

    async with PaystackHttpClient(config, transport=mock_transport) as client:
        result = await client.get("/transaction")

    assert result.status is True
    assert result.message == "Transactions retrieved"
    assert result.data == [{"id": 1}]
    assert result.meta == PaystackMeta(total=7, skipped=0, per_page=5, page=1, page_count=2)


@pytest.mark.asyncio
async def test_request_applies_parser_to_data(
    config: PaystackConfig,
    mock_transport: MockTransport,
) -> None:
    @dataclass(frozen=True)
    class Item:
        id: int

    mock_transport.add_response(json_data=success_envelope({"id": 9}))

    async with PaystackHttpClient(config, transport=mock_transport) as client:
        result = await client.get("/item/9", parse=lambda d: Item(id=d["id"]))

    assert result.data == Item(id=9)
    assert result.meta is None


@pytest.mark.asyncio
async def test_parser_is_skipped_for_null_data(
    config: PaystackConfig,
    mock_transport: MockTransport,
) -> None:
    mock_transport.add_response(json_data={"status": True, "message": "Deleted", "data": None})

    async with PaystackHttpClient(config, transport=mock_transport) as client:
        result = await client.delete("/plan/PLN_1", parse=lambda d: d["never"])

    assert result.data is None
    assert result.message == "Deleted"


# Error handling tests


@pytest.mark.asyncio
async def test_error_status_raises_api_error_with_envelope_message(
    config: PaystackConfig,
    mock_transport: MockTransport,
) -> None:
    body = b'{"status":false,"message":"Invalid key"}'
    mock_transport.add_response(status_code=httpx.codes.BAD_REQUEST, content=body)

    async with PaystackHttpClient(config, transport=mock_transport) as client:
        with pytest.raises(APIError) as exc_info:
            await client.get("/bank")

    assert exc_info.value.message == "Invalid key"
    assert exc_info.value.status_code == 400
    assert exc_info.value.response_content == body.decode()


@pytest.mark.asyncio
async def test_error_status_without_message_uses_default(
    config: PaystackConfig,
    mock_transport: MockTransport,
) -> None:
    mock_transport.add_response(status_code=httpx.codes.NOT_FOUND, json_data={"status": False})

    async with PaystackHttpClient(config, transport=mock_transport) as client:
        with pytest.raises(APIError) as exc_info:
            await client.get("/transaction/404")

    assert exc_info.value.message == "Request failed"
    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_error_status_with_non_json_body_uses_status_message(
    config: PaystackConfig,
    mock_transport: MockTransport,
) -> None:
    mock_transport.add_response(status_code=httpx.codes.BAD_GATEWAY, content=b"<html>502</html>")

    async with PaystackHttpClient(config, transport=mock_transport) as client:
        with pytest.raises(APIError) as exc_info:
            await client.get("/bank")

    assert exc_info.value.message == "Request failed with status 502"
    assert exc_info.value.response_content == "<html>502</html>"


@pytest.mark.asyncio
async def test_success_status_with_invalid_json_raises_decode_error(
    config: PaystackConfig,
    mock_transport: MockTransport,
) -> None:
    mock_transport.add_response(status_code=httpx.codes.OK, content=b"not json")

    async with PaystackHttpClient(config, transport=mock_transport) as client:
        with pytest.raises(DecodeError) as exc_info:
            await client.get("/bank")

    assert not isinstance(exc_info.value, APIError)
    assert exc_info.value.status_code == 200


@pytest.mark.asyncio
@pytest.mark.parametrize("content", [b"null", b"[1, 2]", b""])
async def test_success_status_with_non_envelope_raises_decode_error(
    config: PaystackConfig,
    mock_transport: MockTransport,
    content: bytes,
) -> None:
    mock_transport.add_response(status_code=httpx.codes.OK, content=content)

    async with PaystackHttpClient(config, transport=mock_transport) as client:
        with pytest.raises(DecodeError):
            await client.get("/bank")


@pytest.mark.asyncio
async def test_parser_failure_raises_decode_error(
    config: PaystackConfig,
    mock_transport: MockTransport,
) -> None:
    mock_transport.add_response(json_data=success_envelope({"unexpected": True}))

    async with PaystackHttpClient(config, transport=mock_transport) as client:
        with pytest.raises(DecodeError):
            await client.get("/bank/resolve", parse=lambda d: d["account_name"])


@pytest.mark.asyncio
async def test_deeply_nested_success_body_raises_decode_error(
    config: PaystackConfig,
    mock_transport: MockTransport,
) -> None:
    mock_transport.add_response(
        status_code=httpx.codes.OK, content=b"[" * 100_000 + b"]" * 100_000
    )

    async with PaystackHttpClient(config, transport=mock_transport) as client:
        with pytest.raises(DecodeError) as exc_info:
            await client.get("/bank")

    assert exc_info.value.status_code == 200


@pytest.mark.asyncio
async def test_deeply_nested_error_body_uses_status_message(
    config: PaystackConfig,
    mock_transport: MockTransport,
) -> None:
    mock_transport.add_response(
        status_code=httpx.codes.BAD_REQUEST, content=b"[" * 100_000 + b"]" * 100_000
    )

    async with PaystackHttpClient(config, transport=mock_transport) as client:
        with pytest.raises(APIError) as exc_info:
            await client.get("/bank")

    assert exc_info.value.message == "Request failed with status 400"


@pytest.mark.asyncio
async def test_api_error_masks_sensitive_query_values(
    config: PaystackConfig,
    mock_transport: MockTransport,
) -> None:
    mock_transport.add_response(
        status_code=httpx.codes.BAD_REQUEST,
        json_data={"status": False, "message": "Could not resolve"},
    )

    async with PaystackHttpClient(config, transport=mock_transport) as client:
        with pytest.raises(APIError) as exc_info:
            await client.get("/bank/resolve?account_number=0022728151&bank_code=063")

    assert "0022728151" not in str(exc_info.value)
    assert exc_info.value.endpoint == "/bank/resolve?account_number=0022**8151&bank_code=063"


@pytest.mark.asyncio
async def test_decode_error_masks_sensitive_query_values(
    config: PaystackConfig,
    mock_transport: MockTransport,
) -> None:
    mock_transport.add_response(status_code=httpx.codes.OK, content=b"not json")

    async with PaystackHttpClient(config, transport=mock_transport) as client:
        with pytest.raises(DecodeError) as exc_info:
            await client.get("/bank/resolve?account_number=0022728151&bank_code=063")

    assert "0022728151" not in str(exc_info.value)


@pytest.mark.asyncio
async def test_connection_failure_raises_network_error(config: PaystackConfig) -> None:
    transport = FailingTransport(httpx.ConnectError("connection refused"))

    async with PaystackHttpClient(config, transport=transport) as client:
        with pytest.raises(NetworkError) as exc_info:
            await client.get("/bank")

    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_network_error_masks_sensitive_query_values(config: PaystackConfig) -> None:
    transport = FailingTransport(httpx.ConnectError("connection refused"))

    async with PaystackHttpClient(config, transport=transport) as client:
        with pytest.raises(NetworkError) as exc_info:
            await client.get("/bank/resolve?account_number=0022728151&bank_code=063")

    assert "0022728151" not in str(exc_info.value)
    assert exc_info.value.endpoint == "/bank/resolve?account_number=0022**8151&bank_code=063"


@pytest.mark.asyncio
async def test_timeout_raises_network_error(config: PaystackConfig) -> None:
    transport = FailingTransport(httpx.ReadTimeout("timed out"))

    async with PaystackHttpClient(config, transport=transport) as client:
        with pytest.raises(NetworkError, match="timed out"):
            await client.get("/bank", timeout=0.5)


@pytest.mark.asyncio
async def test_cancellation_propagates(config: PaystackConfig) -> None:
    started = asyncio.Event()

    class HangingTransport(httpx.AsyncBaseTransport):
        async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
            started.set()
            await asyncio.sleep(60)
            return httpx.Response(httpx.codes.OK)

    async with PaystackHttpClient(config, transport=HangingTransport()) as client:
        task = asyncio.create_task(client.get("/bank"))
        await started.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task


# Logging tests


@pytest.mark.asyncio
async def test_logging_disabled_by_default(
    config: PaystackConfig,
    mock_transport: MockTransport,
) -> None:
    mock_transport.add_response(json_data=success_envelope())

    with capture_logs() as logs:
        async with PaystackHttpClient(config, transport=mock_transport) as client:
            await client.post("/transaction/initialize", {"email": "a@b.co"})

    assert [log for log in logs if log["event"].startswith("Paystack API")] == []


@pytest.mark.asyncio
async def test_logs_sanitized_request_and_response(
    logging_config: PaystackConfig,
    mock_transport: MockTransport,
) -> None:
    mock_transport.add_response(
        json_data=success_envelope(
            {"authorization_url": "https://checkout.paystack.com/x", "access_code": "0peioxfhpn"}
        )
    )

    with capture_logs() as logs:
        async with PaystackHttpClient(logging_config, transport=mock_transport) as client:
            await client.post("/transaction/initialize", {"email": "a@b.co", "pin": "1234"})

    request_log, response_log = [log for log in logs if log["event"].startswith("Paystack API")]

    assert request_log["event"] == "Paystack API request"
    assert request_log["log_level"] == "info"
    assert request_log["method"] == "POST"
    assert request_log["endpoint"] == "/transaction/initialize"
    assert request_log["payload"] == {"email": "a@b.co", "pin": "****"}

    assert response_log["event"] == "Paystack API response"
    assert response_log["log_level"] == "info"
    assert response_log["status_code"] == 200
    assert response_log["elapsed_ms"] >= 0
    assert "0peioxfhpn" not in response_log["content"]
    assert json.loads(response_log["content"])["data"]["access_code"] == "0pei**fhpn"


@pytest.mark.asyncio
async def test_logged_endpoint_masks_sensitive_query_values(
    logging_config: PaystackConfig,
    mock_transport: MockTransport,
) -> None:
    mock_transport.add_response(json_data=success_envelope())

    with capture_logs() as logs:
        async with PaystackHttpClient(logging_config, transport=mock_transport) as client:
            await client.get("/bank/resolve?account_number=0022728151&bank_code=063")

    assert "account_number=0022728151" in str(mock_transport.requests[0].url)
    for log in logs:
        assert "0022728151" not in str(log)


@pytest.mark.asyncio
async def test_failed_response_logs_warning(
    logging_config: PaystackConfig,
    mock_transport: MockTransport,
) -> None:
    mock_transport.add_response(
        status_code=httpx.codes.UNAUTHORIZED,
        json_data={"status": False, "message": "Invalid key"},
    )

    with capture_logs() as logs:
        async with PaystackHttpClient(logging_config, transport=mock_transport) as client:
            with pytest.raises(APIError):
                await client.get("/bank")

    response_log = next(log for log in logs if log["event"] == "Paystack API response")
    assert response_log["log_level"] == "warning"
    assert response_log["status_code"] == 401


@pytest.mark.asyncio
async def test_warning_threshold_logs_only_failures(mock_transport: MockTransport) -> None:
    config = PaystackConfig(
        secret_key=TEST_SECRET_KEY, enable_logging=True, log_level=LogLevel.WARNING
    )
    mock_transport.add_response(json_data=success_envelope())
    mock_transport.add_response(status_code=httpx.codes.BAD_REQUEST, json_data={"status": False})

    with capture_logs() as logs:
        async with PaystackHttpClient(config, transport=mock_transport) as client:
            await client.get("/bank")
            with pytest.raises(APIError):
                await client.get("/bank")

    api_logs = [log for log in logs if log["event"].startswith("Paystack API")]
    assert len(api_logs) == 1
    assert api_logs[0]["log_level"] == "warning"


@pytest.mark.asyncio
async def test_none_threshold_logs_nothing(mock_transport: MockTransport) -> None:
    config = PaystackConfig(secret_key=TEST_SECRET_KEY, enable_logging=True, log_level=LogLevel.NONE)
    mock_transport.add_response(status_code=httpx.codes.BAD_REQUEST, json_data={"status": False})

    with capture_logs() as logs:
        async with PaystackHttpClient(config, transport=mock_transport) as client:
            with pytest.raises(APIError):
                await client.get("/bank")

    assert [log for log in logs if log["event"].startswith("Paystack API")] == []


# Context manager tests


@pytest.mark.asyncio
async def test_client_closes_on_exit(
    config: PaystackConfig,
    mock_transport: MockTransport,
) -> None:
    async with PaystackHttpClient(config, transport=mock_transport) as client:
        assert client._client is not None

    assert client._client is None


@pytest.mark.asyncio
async def test_close_is_idempotent(
    config: PaystackConfig,
    mock_transport: MockTransport,
) -> None:
    client = PaystackHttpClient(config, transport=mock_transport)
    await client._ensure_client()
    await client.close()
    await client.close()  # Should not raise

    assert client._client is None


@pytest.mark.asyncio
async def test_request_opens_client_lazily(
    config: PaystackConfig,
    mock_transport: MockTransport,
) -> None:
    mock_transport.add_response(json_data=success_envelope())
    client = PaystackHttpClient(config, transport=mock_transport)

    await client.get("/bank")
    await client.close()

    assert len(mock_transport.requests) == 1
