# cyclefinder/report.py
"""
Text report of the cycles found, grouped by length

Lengths follow the registry convention (edges + 1), so a triangle has
length 4, a quadrilateral 5 and a pentagon 6.
"""

from typing import Any, Dict, List, Tuple

from cyclefinder.graph.cycle_registry import Cycle, CycleRegistry

# (length, singular name, plural name)
SHAPES: Tuple[Tuple[int, str, str], ...] = (
    (4, "Triangle", "Triangles"),
    (5, "Quadrilateral", "Quadrilaterals"),
    (6, "Pentagon", "Pentagons"),
)


def classify(registry: CycleRegistry) -> Dict[int, List[Cycle]]:
    """Reported cycles per length class, each list in discovery order"""
    return {length: registry.by_length(length) for length, _, _ in SHAPES}


def format_report(registry: CycleRegistry) -> str:
    counts = registry.counts_by_length()

    lines = [f"Total cycles: {len(registry)}"]
    for length, _, plural in SHAPES:
        lines.append(f"{plural}: {counts.get(length, 0)}")

    groups = classify(registry)
    # (ordinal within class, shape name) for every reported cycle
    labels: Dict[Cycle, Tuple[int, str]] = {}
    for length, name, _ in SHAPES:
        for ordinal, cycle in enumerate(groups[length], 1):
            labels[cycle] = (ordinal, name)

    for cycle in registry:
        if cycle not in labels:
            continue
        ordinal, name = labels[cycle]
        members = " ".join(str(v) for v in cycle.nodes)
        lines.append(f"{ordinal}. {name}: {members} Perimeter: {cycle.perimeter}")
    return "\n".join(lines)


def format_stats(stats: Dict[str, Any]) -> str:
    lines = ["=== Graph Statistics ==="]
    for key, value in stats.items():
        lines.append(f"{key:25s}: {value}")
    lines.append("=== ================ ===")
    return "\n".join(lines)
