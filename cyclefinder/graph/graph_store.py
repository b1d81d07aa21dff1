# cyclefinder/graph/graph_store.py
"""
Undirected weighted graph over a fixed vertex set

-----------------------------
Purpose:
    - Hold the fixed vertex set and one adjacency list per vertex
    - Insert each edge into both endpoints' adjacency lists
    - Keep the ordered log of accepted edges
"""

import logging
from collections import deque
from typing import Deque, Dict, Hashable, Iterable, List, NamedTuple, Optional, Tuple

import numpy as np

from cyclefinder import config
from cyclefinder.errors import CapacityExceededError, UnknownVertexError

log = logging.getLogger(__name__)

Vertex = Hashable


class Edge(NamedTuple):
    """One undirected weighted edge as it was added"""
    start: Vertex
    end: Vertex
    weight: int


class GraphStore:
    """
    Graph with a fixed vertex set and symmetric adjacency lists

    Each new edge is prepended to both endpoints' lists, so ``neighbors``
    yields the most recently added edge first.

    Attributes
    ----------
    _adjacency : Dict[Vertex, Deque[Tuple[Vertex, int]]]
        Vertex -> (neighbor, weight) pairs, newest first
    _edges : List[Edge]
        Accepted edges in insertion order
    """

    def __init__(
        self,
        vertices: Iterable[Vertex],
        max_vertices: Optional[int] = None,
        max_edges: Optional[int] = None,
    ) -> None:
        """
        Parameters
        ----------
        vertices : Iterable[Vertex]
            Fixed vertex set; duplicates are ignored, order is kept
        max_vertices : Optional[int]
            Vertex bound (config.MAX_VERTICES if None)
        max_edges : Optional[int]
            Edge bound (config.MAX_EDGES if None)

        Raises
        ------
        CapacityExceededError
            If the vertex set is larger than max_vertices
        """
        self.max_vertices = config.MAX_VERTICES if max_vertices is None else max_vertices
        self.max_edges = config.MAX_EDGES if max_edges is None else max_edges

        self._adjacency: Dict[Vertex, Deque[Tuple[Vertex, int]]] = {}
        for v in vertices:
            if v in self._adjacency:
                continue
            if len(self._adjacency) >= self.max_vertices:
                raise CapacityExceededError("vertices", self.max_vertices)
            self._adjacency[v] = deque()
        self._edges: List[Edge] = []

    @classmethod
    def from_edges(
        cls,
        vertices: Iterable[Vertex],
        edges: Iterable[Tuple[Vertex, Vertex, int]],
        **bounds: Optional[int],
    ) -> "GraphStore":
        """Build a graph from a vertex set and a stream of (u, v, weight) triples"""
        graph = cls(vertices, **bounds)
        for u, v, w in edges:
            graph.add_edge(u, v, w)
        log.info("Graph built: %d vertices, %d edges",
                 graph.vertex_count, graph.edge_count)
        return graph

    def add_edge(self, start: Vertex, end: Vertex, weight: int) -> None:
        """
        Insert an undirected edge into both endpoints' adjacency lists

        Raises
        ------
        UnknownVertexError
            If either endpoint is not in the vertex set
        ValueError
            If the weight is not a non-negative integer
        CapacityExceededError
            If the edge bound would be exceeded
        """
        if start not in self._adjacency:
            raise UnknownVertexError(start)
        if end not in self._adjacency:
            raise UnknownVertexError(end)
        if isinstance(weight, bool) or not isinstance(weight, (int, np.integer)):
            raise ValueError(f"Edge weight must be an integer, got {weight!r}")
        if weight < 0:
            raise ValueError(f"Edge weight must be >= 0, got {weight}")
        if len(self._edges) >= self.max_edges:
            raise CapacityExceededError("edges", self.max_edges)

        weight = int(weight)
        self._adjacency[start].appendleft((end, weight))
        self._adjacency[end].appendleft((start, weight))
        self._edges.append(Edge(start, end, weight))

        if start == end:
            log.debug("Self-loop stored on %r (never part of a cycle)", start)

    def neighbors(self, vertex: Vertex) -> Tuple[Tuple[Vertex, int], ...]:
        """(neighbor, weight) pairs of ``vertex``, most recently added first"""
        try:
            return tuple(self._adjacency[vertex])
        except KeyError:
            raise UnknownVertexError(vertex) from None

    def __contains__(self, vertex: Vertex) -> bool:
        return vertex in self._adjacency

    @property
    def vertices(self) -> List[Vertex]:
        return list(self._adjacency)

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges)

    @property
    def vertex_count(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return len(self._edges)
