"""
Sequential CRUD scenario against /objects

Five steps sharing one FixtureContext:
    1. list   - GET /objects, known seed objects present
    2. create - POST /objects, records the new id
    3. read   - GET /objects/{id}
    4. update - PUT /objects/{id}
    5. delete - DELETE /objects/{id}, invalidates the id
Steps 3-5 fail with MissingFixtureStateError if step 2 has not recorded an id.
"""

import logging
from typing import Awaitable, Callable, List, Optional

from restful_crud.assertions import (
    assert_at_least,
    assert_contains,
    assert_field,
    assert_present,
    assert_status,
)
from restful_crud.client import ObjectsApiClient
from restful_crud.data_factory import MACBOOK_NAME, DataFactory
from restful_crud.fixtures import FixtureContext
from restful_crud.models import ApiObject, DeleteConfirmation
from restful_crud.ordering import PriorityRegistry
from restful_crud.utils.error_handling import set_step_context
from restful_crud.utils.fields import get_data_value

logger = logging.getLogger(__name__)

Step = Callable[[FixtureContext], Awaitable[None]]

crud_priorities = PriorityRegistry()

# Seed objects the service ships with: id -> (name, expected data fields)
KNOWN_OBJECTS = {
    "1": ("Google Pixel 6 Pro", {"color": "Cloudy White", "capacity": "128 GB"}),
    "5": ("Samsung Galaxy Z Fold2", {"color": "Brown", "price": "689.99"}),
}

CPU_KEYS = ("CPU model", "CPU_model")
HARD_DISK_KEYS = ("Hard disk size", "Hard_disk_size")


class ObjectsCrudScenario:
    """The five ordered CRUD steps, bound to one client"""

    def __init__(self, client: ObjectsApiClient, factory: Optional[DataFactory] = None, list_min_count: Optional[int] = None):
        self.client = client
        self.factory = factory or DataFactory()
        self.list_min_count = list_min_count if list_min_count is not None else client.config.list_min_count

    def steps(self) -> List[Step]:
        """Step callables in declaration order, not execution order"""
        return [
            self.list_all_objects,
            self.create_object,
            self.get_object_by_id,
            self.update_object,
            self.delete_object,
        ]

    @crud_priorities.priority(1)
    async def list_all_objects(self, context: FixtureContext) -> None:
        set_step_context("list_all_objects")
        response = await self.client.list_objects()

        assert_status(response, 200)
        objects = response.parse_list(ApiObject)
        assert_at_least("object count", self.list_min_count, len(objects))

        by_id = {obj.id: obj for obj in objects}
        for object_id, (name, fields) in KNOWN_OBJECTS.items():
            obj = by_id.get(object_id)
            assert_present(f"objects[{object_id}]", obj)
            assert_field(f"objects[{object_id}].name", name, obj.name)
            for key, expected in fields.items():
                assert_field(f"objects[{object_id}].data.{key}", expected, get_data_value(obj.data, key))

    @crud_priorities.priority(2)
    async def create_object(self, context: FixtureContext) -> None:
        set_step_context("create_object")
        payload = self.factory.macbook()
        response = await self.client.create_object(payload)

        assert_status(response, 200)
        created = response.parse_as(ApiObject)
        assert_present("id", created.id)
        context.record_created(created.id)

        assert_field("name", MACBOOK_NAME, created.name)
        assert_field("data.CPU model", "Intel Core i9", get_data_value(created.data, *CPU_KEYS))
        assert_field("data.year", "2019", get_data_value(created.data, "year"))
        assert_field("data.price", "1849.99", get_data_value(created.data, "price"))
        assert_field("data.Hard disk size", "1 TB", get_data_value(created.data, *HARD_DISK_KEYS))

    @crud_priorities.priority(3)
    async def get_object_by_id(self, context: FixtureContext) -> None:
        set_step_context("get_object_by_id")
        object_id = context.require_object_id(required_by="get_object_by_id")
        response = await self.client.get_object(object_id)

        assert_status(response, 200)
        obj = response.parse_as(ApiObject)
        assert_field("id", object_id, obj.id)
        assert_field("name", MACBOOK_NAME, obj.name)
        assert_field("data.year", "2019", get_data_value(obj.data, "year"))
        assert_field("data.price", "1849.99", get_data_value(obj.data, "price"))
        assert_field("data.CPU model", "Intel Core i9", get_data_value(obj.data, *CPU_KEYS))

    @crud_priorities.priority(4)
    async def update_object(self, context: FixtureContext) -> None:
        set_step_context("update_object")
        object_id = context.require_object_id(required_by="update_object")
        response = await self.client.update_object(object_id, self.factory.macbook_update())

        assert_status(response, 200)
        obj = response.parse_as(ApiObject)
        assert_field("name", MACBOOK_NAME, obj.name)
        assert_field("data.color", "silver", get_data_value(obj.data, "color"))
        assert_field("data.price", "2049.99", get_data_value(obj.data, "price"))
        assert_field("data.year", "2019", get_data_value(obj.data, "year"))

    @crud_priorities.priority(5)
    async def delete_object(self, context: FixtureContext) -> None:
        set_step_context("delete_object")
        object_id = context.require_object_id(required_by="delete_object")
        response = await self.client.delete_object(object_id)

        assert_status(response, 200)
        confirmation = response.parse_as(DeleteConfirmation)
        assert_contains("message", object_id, confirmation.message)
        assert_contains("message", "deleted", confirmation.message, ignore_case=True)
        logger.info(f"Deleted object {object_id}")
        context.invalidate()
