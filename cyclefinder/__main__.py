# cyclefinder/__main__.py
"""
Command-line entry point

-----------------------------
Features:
    1. Read the edge list (skip or strict malformed-record policy)
    2. Build the graph over the configured vertex set
    3. Enumerate distinct cycles
    4. Print the report (and optionally graph statistics)

Usage:
    python -m cyclefinder [EDGE_FILE] [--stats] [--strict]
"""

import logging
import sys
from pathlib import Path
from typing import Hashable, List, Optional, Sequence

from cyclefinder import config
from cyclefinder.errors import CycleFinderError
from cyclefinder.graph.cycle_finder import CycleFinder
from cyclefinder.graph.cycle_registry import CycleRegistry
from cyclefinder.graph.graph_store import GraphStore
from cyclefinder.graph.stats import graph_stats
from cyclefinder.io.edge_reader import POLICY_STRICT, read_edges
from cyclefinder.report import format_report, format_stats

log = logging.getLogger("CycleCensus")


class CycleCensus:
    """
    One enumeration run: edge file -> graph -> cycle registry -> report

    Every run owns its own GraphStore and CycleRegistry.
    """

    def __init__(
        self,
        vertices: Optional[Sequence[Hashable]] = None,
        policy: Optional[str] = None,
        max_length: Optional[int] = None,
    ) -> None:
        self.vertices = list(config.VERTICES if vertices is None else vertices)
        self.policy = policy or config.MALFORMED_POLICY
        self.max_length = max_length
        self.graph: Optional[GraphStore] = None
        self.registry: Optional[CycleRegistry] = None

    def load_graph(self, path: Path) -> GraphStore:
        """
        Raises
        ------
        InputUnavailableError, MalformedRecordError, UnknownVertexError, CapacityExceededError
        """
        edges = read_edges(path, self.policy)
        self.graph = GraphStore.from_edges(self.vertices, edges)
        return self.graph

    def find_cycles(self) -> CycleRegistry:
        if self.graph is None:
            raise RuntimeError("Graph not built. Call load_graph() first.")
        self.registry = CycleFinder(self.graph, max_length=self.max_length).find_all()
        return self.registry

    def run(self, path: Path, with_stats: bool = False) -> str:
        """Run the whole pipeline and return the report text"""
        self.load_graph(path)
        registry = self.find_cycles()

        parts = []
        if with_stats:
            parts.append(format_stats(graph_stats(self.graph)))
        parts.append(format_report(registry))
        return "\n".join(parts)


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    argv = sys.argv[1:] if argv is None else argv
    flags = {a for a in argv if a.startswith("--")}
    positional = [a for a in argv if not a.startswith("--")]

    unknown = flags - {"--stats", "--strict"}
    if unknown or len(positional) > 1:
        print(__doc__.strip().splitlines()[-1].strip(), file=sys.stderr)
        return 2

    path = Path(positional[0] if positional else config.INPUT_PATH)
    policy = POLICY_STRICT if "--strict" in flags else None

    try:
        report = CycleCensus(policy=policy).run(path, with_stats="--stats" in flags)
    except CycleFinderError as e:
        log.error("Cycle search aborted: %s", e)
        return 1

    print(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
