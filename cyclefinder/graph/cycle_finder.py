# cyclefinder/graph/cycle_finder.py
"""
Simple-cycle enumeration by depth-first search

-----------------------------
Purpose:
    - Run a DFS from every vertex of a GraphStore
    - Submit every path that closes back on its root to a CycleRegistry
    - Exclude length-2 walks (an edge traversed there and back)
"""

import logging
from typing import Hashable, Iterator, List, Optional, Tuple

from cyclefinder import config
from cyclefinder.errors import ConfigurationError
from cyclefinder.graph.cycle_registry import Cycle, CycleRegistry
from cyclefinder.graph.graph_store import GraphStore
from cyclefinder.graph.path_tracker import PathTracker

log = logging.getLogger(__name__)

# Shortest path (vertex count) that may close back on its root
MIN_CLOSING_PATH = 3
# Shortest cycle, vertex-count convention (a triangle plus its closing root)
MIN_CYCLE_LENGTH = MIN_CLOSING_PATH + 1


class CycleFinder:
    """
    DFS cycle finder over a GraphStore

    The search uses an explicit stack of neighbor iterators, one frame per
    vertex on the current path, so depth is bounded by the vertex count and
    not by the interpreter recursion limit.

    Attributes
    ----------
    graph : GraphStore
        Graph to search (read only)
    max_length : Optional[int]
        Longest cycle to report, vertex-count convention (None = unbounded)
    max_cycles : Optional[int]
        Registry bound passed to each fresh CycleRegistry
    """

    def __init__(
        self,
        graph: GraphStore,
        max_length: Optional[int] = None,
        max_cycles: Optional[int] = None,
    ) -> None:
        """
        Raises
        ------
        ConfigurationError
            If max_length is set below the length of a triangle
        """
        self.graph = graph
        self.max_length = config.MAX_LENGTH if max_length is None else max_length
        if self.max_length is not None and self.max_length < MIN_CYCLE_LENGTH:
            raise ConfigurationError(
                f"max_length must be >= {MIN_CYCLE_LENGTH} (a triangle), got {self.max_length}"
            )
        self.max_cycles = max_cycles

    def new_registry(self) -> CycleRegistry:
        return CycleRegistry(max_cycles=self.max_cycles)

    def find_all(self) -> CycleRegistry:
        """
        Search from every vertex in vertex-set order

        Returns
        -------
        CycleRegistry
            Fresh registry holding every accepted cycle
        """
        registry = self.new_registry()
        log.info("Searching cycles over %d vertices (max length: %s)",
                 self.graph.vertex_count,
                 "unbounded" if self.max_length is None else self.max_length)

        for root in self.graph.vertices:
            self.find_cycles_from(root, registry)

        log.info("Found %d distinct cycles", len(registry))
        return registry

    def find_cycles_from(
        self,
        root: Hashable,
        registry: Optional[CycleRegistry] = None,
    ) -> CycleRegistry:
        """
        Search only the cycles that close back on ``root``

        Parameters
        ----------
        root : Hashable
            Start vertex
        registry : Optional[CycleRegistry]
            Registry to submit candidates to (a fresh one if None)

        Raises
        ------
        UnknownVertexError
            If root is not in the graph
        """
        if registry is None:
            registry = self.new_registry()

        path = PathTracker(root)
        stack: List[Iterator[Tuple[Hashable, int]]] = [iter(self.graph.neighbors(root))]

        while stack:
            step = next(stack[-1], None)
            if step is None:
                # neighbors exhausted: backtrack
                stack.pop()
                if len(path) > 1:
                    path.pop()
                continue

            neighbor, weight = step
            if not self._may_descend(path, neighbor):
                continue

            path.push(neighbor, weight)
            if neighbor == path.first():
                registry.try_register(path.nodes(), len(path), path.perimeter)
                path.pop()
                continue
            stack.append(iter(self.graph.neighbors(neighbor)))

        return registry

    def _may_descend(self, path: PathTracker, neighbor: Hashable) -> bool:
        length = len(path)
        if self.max_length is not None and length + 1 > self.max_length:
            return False
        if neighbor == path.first():
            return length >= MIN_CLOSING_PATH
        return not path.contains(neighbor)


def find_cycles(
    graph: GraphStore,
    max_length: Optional[int] = None,
    max_cycles: Optional[int] = None,
) -> List[Cycle]:
    """Enumerate the distinct cycles of ``graph`` with a fresh finder and registry"""
    return CycleFinder(graph, max_length=max_length, max_cycles=max_cycles).find_all().cycles
