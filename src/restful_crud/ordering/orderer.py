"""
Deterministic priority orderer

Groups test cases by declared priority and emits the groups in ascending
priority order. Cases sharing a priority keep their discovery order.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, TypeVar

from restful_crud.ordering.registry import PriorityRegistry, default_registry

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PriorityOrderer:
    """Orders test cases by the priorities held in a PriorityRegistry"""

    def __init__(self, registry: Optional[PriorityRegistry] = None):
        self.registry = registry if registry is not None else default_registry

    def iter_ordered(self, cases: Iterable[T]) -> Iterator[T]:
        """Yield cases in ascending priority, stable within a priority"""
        buckets: Dict[int, List[T]] = {}

        for case in cases:
            buckets.setdefault(self.registry.read_priority(case), []).append(case)

        for key in sorted(buckets):
            logger.debug(f"Priority {key}: {len(buckets[key])} case(s)")
            yield from buckets[key]

    def order(self, cases: Iterable[T]) -> List[T]:
        """Eager form of iter_ordered()"""
        return list(self.iter_ordered(cases))
