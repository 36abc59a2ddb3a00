"""
Shared fixtures for pya2s tests
"""

import pytest

from pya2s import A2SClient, ClientConfig
from pya2s.testing import MockA2SServer


@pytest.fixture
def mock_server():
    server = MockA2SServer()
    server.start()
    yield server
    server.stop()


@pytest.fixture
def client(mock_server):
    config = ClientConfig(timeout=1.0, retry_delay=0.01)
    client = A2SClient(config=config)
    client.connect(mock_server.address)
    yield client
    client.close()
