"""
Priority registry

Explicit map from test-case identity to declared integer priority. Cases are
registered up front through `declare()` or the `priority()` decorator; the
orderer only ever reads the map, it never inspects the cases themselves.
"""

import logging
from typing import Any, Callable, Dict, Hashable, Iterable, List, TypeVar

from restful_crud.exceptions import PriorityDeclarationError, UndeclaredPriorityError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

DEFAULT_PRIORITY = 0


def case_id(test_case: Any) -> Hashable:
    """
    Resolve the registry key for a test case

    - str: used as is
    - collected pytest function item: "<module>.<Class>.<name>" built from the
      item's module, class and original (unparametrized) name
    - callable: "<module>.<qualname>"
    - anything else hashable: the object itself
    """
    if isinstance(test_case, str):
        return test_case

    originalname = getattr(test_case, "originalname", None)
    module = getattr(test_case, "module", None)
    if originalname is not None and module is not None:
        cls = getattr(test_case, "cls", None)
        qualname = f"{cls.__qualname__}.{originalname}" if cls is not None else originalname
        return f"{module.__name__}.{qualname}"

    qualname = getattr(test_case, "__qualname__", None)
    if callable(test_case) and qualname is not None:
        return f"{test_case.__module__}.{qualname}"

    return test_case


class PriorityRegistry:
    """Declared priorities keyed by test-case identity"""

    def __init__(self, default: int = DEFAULT_PRIORITY):
        self.default = default
        self._priorities: Dict[Hashable, int] = {}

    def declare(self, test_case: Any, priority: int) -> None:
        """Attach a priority to a test case"""
        if not isinstance(priority, int) or isinstance(priority, bool):
            raise PriorityDeclarationError(f"Priority must be an int, got {priority!r}")

        key = case_id(test_case)
        existing = self._priorities.get(key)
        if existing is not None and existing != priority:
            raise PriorityDeclarationError(
                f"{key} already declared with priority {existing}, cannot redeclare as {priority}"
            )

        self._priorities[key] = priority
        logger.debug(f"Declared priority {priority} for {key}")

    def read_priority(self, test_case: Any) -> int:
        """Declared priority, or the default when none was declared"""
        return self._priorities.get(case_id(test_case), self.default)

    def priority(self, value: int) -> Callable[[F], F]:
        """Decorator registering the decorated test with `value`"""
        def decorator(func: F) -> F:
            self.declare(func, value)
            return func
        return decorator

    def is_declared(self, test_case: Any) -> bool:
        return case_id(test_case) in self._priorities

    def undeclared(self, cases: Iterable[Any]) -> List[Any]:
        """Cases with no declaration, in input order"""
        return [case for case in cases if not self.is_declared(case)]

    def require_declared(self, cases: Iterable[Any]) -> None:
        """Raise UndeclaredPriorityError if any case lacks a declaration"""
        missing = self.undeclared(cases)
        if missing:
            raise UndeclaredPriorityError(str(case_id(case)) for case in missing)

    def clear(self) -> None:
        self._priorities.clear()

    def __contains__(self, test_case: Any) -> bool:
        return self.is_declared(test_case)

    def __len__(self) -> int:
        return len(self._priorities)


default_registry = PriorityRegistry()
priority = default_registry.priority
