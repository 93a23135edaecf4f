"""
Fixtures for offline tests: fake objects API and clients wired to it
"""

import sys
from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio

sys.path.insert(0, str(Path(__file__).parent))

from fake_objects_api import FakeObjectsApi
from restful_crud.client import ObjectsApiClient
from restful_crud.config import HarnessConfig

FAKE_BASE_URL = "https://objects.fake.test"


@pytest.fixture
def offline_config() -> HarnessConfig:
    return HarnessConfig(api_base_url=FAKE_BASE_URL, request_timeout=5.0, list_min_count=13)


@pytest.fixture
def fake_api() -> FakeObjectsApi:
    return FakeObjectsApi()


@pytest_asyncio.fixture
async def offline_client(offline_config, fake_api) -> AsyncGenerator[ObjectsApiClient, None]:
    async with ObjectsApiClient(offline_config, transport=fake_api.transport()) as client:
        yield client
