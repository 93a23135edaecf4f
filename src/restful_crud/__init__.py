"""
restful-crud

Ordered end-to-end CRUD testing of the restful-api.dev objects API.
Test cases declare an integer priority and run in ascending priority order,
sharing a run-scoped fixture context that carries the created object id.
"""

from restful_crud.fixtures import FixtureContext
from restful_crud.ordering import PriorityOrderer, PriorityRegistry, default_registry, priority

__version__ = "1.0.0"

__all__ = [
    "FixtureContext",
    "PriorityOrderer",
    "PriorityRegistry",
    "default_registry",
    "priority",
]
