"""
Shared fixtures for the workbench tests.
"""

import httpx
import pytest

from fake_service import BASE_URL, FakeFaqService
from services import FaqApiClient
from ui.event_handlers import create_app_state


@pytest.fixture
def service():
    return FakeFaqService()


@pytest.fixture
def client(service):
    api = FaqApiClient(BASE_URL, transport=httpx.MockTransport(service.handler))
    yield api
    api.close()


@pytest.fixture
def app_state(client):
    return create_app_state(client)
