# cyclefinder/graph/stats.py
"""
Graph statistics via python-igraph

-----------------------------
Purpose:
    - Convert a GraphStore into an undirected igraph.Graph
    - Summarize size, connectivity, degree distribution and girth
"""

import logging
import math
from typing import Any, Dict

import numpy as np
from igraph import Graph

from cyclefinder.graph.graph_store import GraphStore

log = logging.getLogger(__name__)


def to_igraph(graph: GraphStore) -> Graph:
    """
    Build an undirected igraph.Graph with the same vertices and edges

    Multi-edges and self-loops are kept; the vertex label is stored in the
    ``label`` vertex attribute and the weight in the ``weight`` edge attribute.
    """
    labels = graph.vertices
    idx = {v: i for i, v in enumerate(labels)}

    g = Graph(directed=False)
    g.add_vertices(len(labels))
    if labels:
        g.vs["label"] = [str(v) for v in labels]

    edges = graph.edges
    if edges:
        g.add_edges([(idx[e.start], idx[e.end]) for e in edges])
        g.es["weight"] = [e.weight for e in edges]
    return g


def graph_stats(graph: GraphStore) -> Dict[str, Any]:
    """
    Get graph statistics

    Returns
    -------
    Dict[str, Any]
        vertices, edges, component sizes, density, degree summary,
        total weight, girth (0 when acyclic) and clustering coefficient
    """
    g = to_igraph(graph)
    log.debug("Computing statistics for %d vertices, %d edges", g.vcount(), g.ecount())

    num_vertices = g.vcount()
    num_edges    = g.ecount()

    # Connectivity
    comp_sizes     = g.connected_components().sizes() if num_vertices else []
    num_components = len(comp_sizes)
    largest_comp   = max(comp_sizes) if comp_sizes else 0

    # Degree distribution
    degrees = np.asarray(g.degree(), dtype=float)
    if degrees.size:
        max_deg, min_deg = int(degrees.max()), int(degrees.min())
        avg_deg, median_deg = float(degrees.mean()), float(np.median(degrees))
    else:
        max_deg = min_deg = 0
        avg_deg = median_deg = 0.0

    # girth() reports inf (or 0 on older releases) for forests
    girth = g.girth() if num_edges else 0
    if not girth or math.isinf(girth):
        girth = 0

    clustering = g.transitivity_undirected() if num_vertices else float("nan")

    return {
        "vertices": num_vertices,
        "edges": num_edges,
        "component_count": num_components,
        "largest_component_size": largest_comp,
        "is_connected": num_components == 1,
        "density": g.density() if num_vertices > 1 else 0.0,
        "max_degree": max_deg,
        "min_degree": min_deg,
        "avg_degree": avg_deg,
        "median_degree": median_deg,
        "total_weight": int(np.sum(g.es["weight"])) if num_edges else 0,
        "girth": int(girth),
        "clustering_coefficient": clustering,
    }
