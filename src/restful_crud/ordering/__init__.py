"""
Priority-based test ordering
"""

from restful_crud.ordering.orderer import PriorityOrderer
from restful_crud.ordering.registry import (
    DEFAULT_PRIORITY,
    PriorityRegistry,
    case_id,
    default_registry,
    priority,
)

__all__ = [
    "DEFAULT_PRIORITY",
    "PriorityOrderer",
    "PriorityRegistry",
    "case_id",
    "default_registry",
    "priority",
]
