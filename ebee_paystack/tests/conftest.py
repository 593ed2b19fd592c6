import pytest

from ebee_paystack.config import PaystackConfig
from ebee_paystack.tests.utils.mock_transport import MockTransport

TEST_SECRET_KEY = "sk_test_0123456789abcdef"


@pytest.fixture
def config() -> PaystackConfig:
    """Create test config."""
    return PaystackConfig(secret_key=TEST_SECRET_KEY)


@pytest.fixture
def logging_config() -> PaystackConfig:
    """Create test config with logging enabled at the default level."""
    return PaystackConfig(secret_key=TEST_SECRET_KEY, enable_logging=True)


@pytest.fixture
def mock_transport() -> MockTransport:
    """Create mock transport."""
    return MockTransport()
