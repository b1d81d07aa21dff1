"""Tests for cycle identity and registry storage."""

import pytest

from cyclefinder.errors import CapacityExceededError
from cyclefinder.graph.cycle_registry import Cycle, CycleRegistry


class TestIdentity:
    """Equivalence of candidates: length, perimeter and vertex set."""

    def test_reverse_traversal_collapses(self) -> None:
        registry = CycleRegistry()
        assert registry.try_register(("A", "B", "C", "A"), 4, 6) is not None
        assert registry.try_register(("A", "C", "B", "A"), 4, 6) is None
        assert len(registry) == 1

    def test_rotation_collapses(self) -> None:
        registry = CycleRegistry()
        registry.try_register(("A", "B", "C", "A"), 4, 6)
        assert registry.try_register(("B", "C", "A", "B"), 4, 6) is None
        assert registry.try_register(("C", "A", "B", "C"), 4, 6) is None
        assert len(registry) == 1

    def test_first_discovery_is_kept(self) -> None:
        registry = CycleRegistry()
        registry.try_register(("B", "A", "C", "B"), 4, 6)
        registry.try_register(("A", "B", "C", "A"), 4, 6)
        assert registry.cycles[0].nodes == ("B", "A", "C", "B")

    def test_different_perimeter_is_distinct(self) -> None:
        registry = CycleRegistry()
        registry.try_register(("A", "B", "C", "A"), 4, 6)
        assert registry.try_register(("A", "B", "C", "A"), 4, 7) is not None
        assert len(registry) == 2

    def test_different_vertex_set_is_distinct(self) -> None:
        registry = CycleRegistry()
        registry.try_register(("A", "B", "C", "A"), 4, 3)
        assert registry.try_register(("A", "C", "D", "A"), 4, 3) is not None

    def test_entries_past_length_are_ignored(self) -> None:
        registry = CycleRegistry()
        cycle = registry.try_register(("A", "B", "C", "A", "Z"), 4, 6)
        assert cycle == Cycle(("A", "B", "C", "A"), 4, 6)
        assert registry.try_register(("A", "C", "B", "A", "Q", "R"), 4, 6) is None

    @pytest.mark.parametrize("length", [0, 1, 2])
    def test_short_candidates_rejected(self, length: int) -> None:
        registry = CycleRegistry()
        with pytest.raises(ValueError):
            registry.try_register(("A", "B", "A"), length, 2)
        assert len(registry) == 0

    def test_length_beyond_nodes_rejected(self) -> None:
        with pytest.raises(ValueError):
            CycleRegistry().try_register(("A", "B", "C"), 5, 2)


class TestStorage:
    """Insertion order, queries and capacity."""

    def test_insertion_order_and_queries(self) -> None:
        registry = CycleRegistry()
        registry.try_register(("A", "B", "C", "D", "A"), 5, 4)
        registry.try_register(("A", "B", "C", "A"), 4, 3)
        registry.try_register(("A", "C", "D", "A"), 4, 3)

        assert [c.length for c in registry] == [5, 4, 4]
        assert [c.nodes for c in registry.by_length(4)] == [
            ("A", "B", "C", "A"),
            ("A", "C", "D", "A"),
        ]
        assert registry.counts_by_length() == {5: 1, 4: 2}
        assert Cycle(("C", "B", "A", "C"), 4, 3) in registry
        assert Cycle(("C", "B", "A", "C"), 4, 9) not in registry

    def test_cycle_accessors(self) -> None:
        cycle = Cycle(("A", "B", "C", "D", "A"), 5, 10)
        assert cycle.vertex_set == frozenset("ABCD")
        assert cycle.edge_count == 4

    def test_capacity_exceeded(self) -> None:
        registry = CycleRegistry(max_cycles=1)
        registry.try_register(("A", "B", "C", "A"), 4, 6)
        # duplicates never count against the bound
        assert registry.try_register(("A", "C", "B", "A"), 4, 6) is None
        with pytest.raises(CapacityExceededError) as exc_info:
            registry.try_register(("A", "B", "D", "A"), 4, 6)
        assert exc_info.value.what == "cycles"
        assert len(registry) == 1

    def test_cycles_property_is_a_copy(self) -> None:
        registry = CycleRegistry()
        registry.try_register(("A", "B", "C", "A"), 4, 6)
        registry.cycles.clear()
        assert len(registry) == 1
