"""
Test data factory for object payloads
Fixed scenario payloads plus Faker-generated ones for ad-hoc objects
"""

from typing import Any, Dict, Optional

from faker import Faker

from restful_crud.models import ObjectPayload

MACBOOK_NAME = "Apple MacBook Pro 16"


class DataFactory:
    """Object payload generator"""

    def __init__(self, seed: Optional[int] = None):
        self.fake = Faker()
        if seed is not None:
            self.fake.seed_instance(seed)

    def macbook(self, **overrides) -> ObjectPayload:
        """Payload sent by the create step"""
        data: Dict[str, Any] = {
            "year": 2019,
            "price": 1849.99,
            "CPU_model": "Intel Core i9",
            "Hard_disk_size": "1 TB",
        }
        data.update(overrides)
        return ObjectPayload(name=MACBOOK_NAME, data=data)

    def macbook_update(self, **overrides) -> ObjectPayload:
        """Payload sent by the update step"""
        values: Dict[str, Any] = {"price": 2049.99, "color": "silver"}
        values.update(overrides)
        return self.macbook(**values)

    def random_object(self, **overrides) -> ObjectPayload:
        """Generate an arbitrary device-like object"""
        data: Dict[str, Any] = {
            "year": self.fake.random_int(min=2010, max=2025),
            "price": round(self.fake.pyfloat(min_value=10, max_value=5000, right_digits=2), 2),
            "color": self.fake.color_name(),
            "Serial number": self.fake.bothify("??-#####").upper(),
        }
        data.update(overrides)
        return ObjectPayload(name=f"{self.fake.company()} {self.fake.word().title()}", data=data)
