# cyclefinder/graph/cycle_registry.py
"""
Cycle registry

-----------------------------
Purpose:
    - Deduplicate candidate cycles by identity (length, perimeter, vertex set)
    - Store accepted cycles in discovery order
    - Enforce the configured cycle-count bound
"""

import logging
from collections import Counter
from typing import Dict, FrozenSet, Hashable, Iterator, List, NamedTuple, Optional, Sequence, Tuple

from cyclefinder import config
from cyclefinder.errors import CapacityExceededError

log = logging.getLogger(__name__)

CycleKey = Tuple[int, int, FrozenSet[Hashable]]


class Cycle(NamedTuple):
    """
    Accepted cycle

    ``nodes`` holds the closed walk including the repeated root at the end,
    so ``length`` (== len(nodes)) is the edge count plus one.
    """
    nodes: Tuple[Hashable, ...]
    length: int
    perimeter: int

    @property
    def vertex_set(self) -> FrozenSet[Hashable]:
        return frozenset(self.nodes[:self.length])

    @property
    def edge_count(self) -> int:
        return self.length - 1


class CycleRegistry:
    """
    Append-only collection of pairwise non-equivalent cycles

    Two candidates are equivalent when they have equal length, equal
    perimeter and the same set of member vertices over their first
    ``length`` slots. Rotations and reversed traversals therefore collapse
    into the first one discovered.
    """

    def __init__(self, max_cycles: Optional[int] = None) -> None:
        self.max_cycles = config.MAX_CYCLES if max_cycles is None else max_cycles
        self._cycles: List[Cycle] = []
        self._index: Dict[CycleKey, Cycle] = {}

    @staticmethod
    def identity(nodes: Sequence[Hashable], length: int, perimeter: int) -> CycleKey:
        return length, perimeter, frozenset(nodes[:length])

    def try_register(self, nodes: Sequence[Hashable], length: int, perimeter: int) -> Optional[Cycle]:
        """
        Store the candidate unless an equivalent cycle is already present

        Parameters
        ----------
        nodes : Sequence[Hashable]
            Vertex sequence; entries past ``length`` are ignored
        length : int
            Vertex-count length (edges + 1)
        perimeter : int
            Sum of traversed edge weights

        Returns
        -------
        Optional[Cycle]
            The new cycle, or None if rejected as a duplicate

        Raises
        ------
        ValueError
            If ``length`` is not in 3..len(nodes)
        CapacityExceededError
            If accepting the cycle would exceed max_cycles
        """
        if length < 3 or length > len(nodes):
            raise ValueError(f"Invalid cycle length {length} for {len(nodes)} nodes")

        key = self.identity(nodes, length, perimeter)
        if key in self._index:
            log.debug("Duplicate cycle rejected: %s (perimeter %d)",
                      "-".join(map(str, nodes[:length])), perimeter)
            return None

        if len(self._cycles) >= self.max_cycles:
            raise CapacityExceededError("cycles", self.max_cycles)

        cycle = Cycle(tuple(nodes[:length]), length, perimeter)
        self._cycles.append(cycle)
        self._index[key] = cycle
        log.debug("Cycle accepted: %s (perimeter %d)",
                  "-".join(map(str, cycle.nodes)), perimeter)
        return cycle

    def __contains__(self, cycle: Cycle) -> bool:
        return self.identity(cycle.nodes, cycle.length, cycle.perimeter) in self._index

    def __iter__(self) -> Iterator[Cycle]:
        return iter(self._cycles)

    def __len__(self) -> int:
        return len(self._cycles)

    @property
    def cycles(self) -> List[Cycle]:
        return list(self._cycles)

    def by_length(self, length: int) -> List[Cycle]:
        return [c for c in self._cycles if c.length == length]

    def counts_by_length(self) -> Dict[int, int]:
        return dict(Counter(c.length for c in self._cycles))
