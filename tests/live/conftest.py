"""
Fixtures for the live objects API suite
"""

import pytest_asyncio

from restful_crud.scenario import ObjectsCrudScenario


@pytest_asyncio.fixture
async def scenario(objects_client) -> ObjectsCrudScenario:
    """CRUD steps bound to a fresh client for this test"""
    return ObjectsCrudScenario(objects_client)
