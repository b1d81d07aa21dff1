# cyclefinder/graph/path_tracker.py
"""Current DFS path from a fixed root plus its running perimeter"""

from typing import Hashable, List, Tuple


class PathTracker:
    """
    Mutable path state shared by one DFS run

    ``push`` appends a vertex and adds the traversed edge weight,
    ``pop`` undoes exactly the last ``push``.
    """

    def __init__(self, root: Hashable) -> None:
        self._nodes: List[Hashable] = [root]
        self._weights: List[int] = []
        self.perimeter = 0

    def push(self, vertex: Hashable, weight: int) -> None:
        self._nodes.append(vertex)
        self._weights.append(weight)
        self.perimeter += weight

    def pop(self) -> Tuple[Hashable, int]:
        """Remove the last pushed vertex; the root cannot be popped"""
        if not self._weights:
            raise IndexError("pop from a path holding only its root")
        weight = self._weights.pop()
        self.perimeter -= weight
        return self._nodes.pop(), weight

    def contains(self, vertex: Hashable) -> bool:
        return vertex in self._nodes

    def first(self) -> Hashable:
        return self._nodes[0]

    def nodes(self) -> Tuple[Hashable, ...]:
        return tuple(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)
