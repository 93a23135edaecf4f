"""
Priority orderer: ascending priority, stability, bijection
"""

import random
from collections import Counter

import pytest

from restful_crud.ordering import PriorityOrderer, PriorityRegistry


@pytest.fixture
def registry() -> PriorityRegistry:
    return PriorityRegistry()


@pytest.fixture
def orderer(registry) -> PriorityOrderer:
    return PriorityOrderer(registry)


class Case:
    """Opaque test case that must never be executed by the orderer"""

    def __init__(self, label: str):
        self.label = label

    def __call__(self):
        raise AssertionError(f"orderer executed case {self.label}")

    def __repr__(self):
        return f"Case({self.label})"


class TestOrdering:

    def test_documented_example(self, registry, orderer):
        """A undeclared (0), B=5, C=1, D=1 -> A, C, D, B"""
        registry.declare("B", 5)
        registry.declare("C", 1)
        registry.declare("D", 1)

        assert orderer.order(["A", "B", "C", "D"]) == ["A", "C", "D", "B"]

    def test_empty_input(self, orderer):
        assert orderer.order([]) == []
        assert list(orderer.iter_ordered(iter(()))) == []

    def test_single_case(self, registry, orderer):
        registry.declare("only", 9)
        assert orderer.order(["only"]) == ["only"]

    def test_all_equal_priorities_keep_input_order(self, registry, orderer):
        cases = ["e", "b", "d", "a", "c"]
        for case in cases:
            registry.declare(case, 2)
        assert orderer.order(cases) == cases

    def test_undeclared_sorts_between_negative_and_positive(self, registry, orderer):
        registry.declare("neg", -1)
        registry.declare("pos", 1)
        assert orderer.order(["pos", "default", "neg"]) == ["neg", "default", "pos"]

    def test_duplicate_entries_are_all_kept(self, registry, orderer):
        registry.declare("x", 1)
        assert orderer.order(["x", "y", "x", "y"]) == ["y", "y", "x", "x"]

    def test_crud_sequence_from_scrambled_discovery(self, registry, orderer):
        for priority, name in enumerate(["list", "create", "read", "update", "delete"], start=1):
            registry.declare(name, priority)

        discovered = ["delete", "read", "list", "update", "create"]
        assert orderer.order(discovered) == ["list", "create", "read", "update", "delete"]

    def test_orderer_does_not_execute_or_mutate_cases(self, registry, orderer):
        cases = [Case("a"), Case("b"), Case("c")]
        registry.declare(cases[0], 3)
        snapshot = list(cases)

        result = orderer.order(cases)

        assert result == [cases[1], cases[2], cases[0]]
        assert cases == snapshot

    def test_iter_ordered_is_lazy(self, registry, orderer):
        consumed = []

        def discovery():
            for name in ["b", "a"]:
                consumed.append(name)
                yield name

        iterator = orderer.iter_ordered(discovery())
        assert consumed == []
        assert list(iterator) == ["b", "a"]
        assert consumed == ["b", "a"]

    def test_default_registry_is_used_when_none_given(self):
        from restful_crud.ordering import default_registry

        assert PriorityOrderer().registry is default_registry


class TestOrderingProperties:
    """Randomized checks of the ordering invariants"""

    @pytest.mark.parametrize("seed", range(25))
    def test_invariants_hold_for_random_inputs(self, seed):
        rng = random.Random(seed)
        registry = PriorityRegistry()
        cases = [Case(str(i)) for i in range(rng.randint(0, 40))]
        for case in cases:
            if rng.random() < 0.8:
                registry.declare(case, rng.randint(-3, 3))

        result = PriorityOrderer(registry).order(cases)
        priorities = [registry.read_priority(case) for case in result]

        # non-decreasing priority
        assert priorities == sorted(priorities)

        # bijection
        assert len(result) == len(cases)
        assert Counter(map(id, result)) == Counter(map(id, cases))

        # stability within each priority
        for value in set(priorities):
            expected = [case for case in cases if registry.read_priority(case) == value]
            actual = [case for case in result if registry.read_priority(case) == value]
            assert actual == expected
