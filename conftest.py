from unittest.mock import Mock

import pytest
import structlog
from structlog.testing import capture_logs

from stripe_bindings.client.async_client import AsyncClient
from stripe_bindings.client.client import Client
from stripe_bindings.client.config import ClientConfig


@pytest.fixture(autouse=True)
def log_capture():
    from structlog.testing import LogCapture

    capture = LogCapture()
    structlog.configure(
        processors=[capture],
    )
    return capture


@pytest.fixture
def cap_structlogs():
    with capture_logs() as cap_logs:
        yield cap_logs


@pytest.fixture
def client_config():
    return ClientConfig(secret_key="sk_test_123")  # noqa: S106


@pytest.fixture
def client(client_config: ClientConfig):
    with Client(client_config) as clt:
        yield clt


@pytest.fixture
async def async_client(client_config: ClientConfig):
    async with AsyncClient(client_config) as clt:
        yield clt


@pytest.fixture
def mock_client():
    return Mock(spec=Client)


@pytest.fixture
def mock_async_client():
    return Mock(spec=AsyncClient)
