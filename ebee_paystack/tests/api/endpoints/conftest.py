from typing import Any
from unittest.mock import AsyncMock, Mock

import pytest

from ebee_paystack.models.common import PaystackResponse


@pytest.fixture
def mock_http() -> Mock:
    http = Mock()
    http.get = AsyncMock(return_value=PaystackResponse(status=True, message="Success"))
    http.post = AsyncMock(return_value=PaystackResponse(status=True, message="Success"))
    return http


def requested_endpoint(call: Any) -> str:
    """Endpoint argument of a recorded ``get``/``post`` call."""
    return call.args[0]
