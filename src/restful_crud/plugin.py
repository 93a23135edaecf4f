"""
pytest plugin: priority-ordered execution and objects API fixtures

Any class or module marked `priority_ordered` has its collected tests run in
ascending declared priority, stable for equal priorities. Other tests keep
pytest's collection order.

    crud = PriorityRegistry()

    @pytest.mark.priority_ordered(registry=crud)
    class TestObjects:
        @crud.priority(1)
        async def test_create(self, fixture_context): ...
"""

import itertools
import logging
import os
from typing import AsyncGenerator, List

import pytest
import pytest_asyncio

from restful_crud.client import ObjectsApiClient
from restful_crud.config import HarnessConfig, env_flag, get_config
from restful_crud.exceptions import UndeclaredPriorityError
from restful_crud.fixtures import FixtureContext
from restful_crud.ordering import PriorityOrderer, PriorityRegistry, default_registry

logger = logging.getLogger(__name__)

ORDER_MARKER = "priority_ordered"
LIVE_MARKER = "live"


def pytest_addoption(parser):
    """Add custom command line options"""
    group = parser.getgroup("restful_crud")
    group.addoption(
        "--run-live",
        action="store_true",
        default=False,
        help="Run tests marked 'live' against the real objects API"
    )
    group.addoption(
        "--priority-strict",
        action="store_true",
        default=False,
        help="Fail collection when a priority_ordered test has no declared priority"
    )


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        f"{ORDER_MARKER}(registry=None): run the tests of this class or module in declared priority order"
    )
    config.addinivalue_line(
        "markers",
        f"{LIVE_MARKER}: test talks to the real objects API (enable with --run-live or RUN_LIVE_API_TESTS=1)"
    )

    _configure_logging()


def _configure_logging():
    # Runs in every pytest session in the environment; never raise here
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning(f"Ignoring LOG_LEVEL {level!r}: not a logging level, using INFO")
        level = "INFO"
    logging.getLogger("restful_crud").setLevel(level)


def _marker_registry(marker) -> PriorityRegistry:
    registry = marker.kwargs.get("registry")
    if registry is None and marker.args:
        registry = marker.args[0]
    return registry if registry is not None else default_registry


def order_items(items: List[pytest.Item], strict: bool = False) -> List[pytest.Item]:
    """
    Reorder each consecutive run of sibling items whose closest
    `priority_ordered` marker is set; leave every other item where it is
    """
    ordered: List[pytest.Item] = []

    for parent, group in itertools.groupby(items, key=lambda item: item.parent):
        siblings = list(group)
        marker = siblings[0].get_closest_marker(ORDER_MARKER)
        if marker is None:
            ordered.extend(siblings)
            continue

        registry = _marker_registry(marker)
        if strict:
            registry.require_declared(siblings)

        sequence = PriorityOrderer(registry).order(siblings)
        logger.debug(f"Ordered {parent.nodeid}: {[item.name for item in sequence]}")
        ordered.extend(sequence)

    return ordered


@pytest.hookimpl(trylast=True)
def pytest_collection_modifyitems(session, config, items):
    """Apply priority ordering after every other plugin has reordered"""
    strict = config.getoption("--priority-strict") or env_flag("PRIORITY_STRICT")
    try:
        items[:] = order_items(items, strict=strict)
    except UndeclaredPriorityError as e:
        raise pytest.UsageError(str(e)) from e


def pytest_runtest_setup(item):
    """Skip live tests unless explicitly enabled"""
    if item.get_closest_marker(LIVE_MARKER) is None:
        return
    if not (item.config.getoption("--run-live") or env_flag("RUN_LIVE_API_TESTS")):
        pytest.skip("Live objects API test: pass --run-live or set RUN_LIVE_API_TESTS=1")


@pytest.fixture(scope="session")
def harness_config() -> HarnessConfig:
    """Validated configuration for the test session"""
    return get_config()


@pytest.fixture(scope="class")
def fixture_context():
    """Shared state for one ordered run; reset when the class or module finishes"""
    context = FixtureContext()
    yield context
    context.reset()


@pytest_asyncio.fixture
async def objects_client(harness_config) -> AsyncGenerator[ObjectsApiClient, None]:
    """Objects API client for a single test"""
    async with ObjectsApiClient(harness_config) as client:
        yield client
