"""
Closeness Centrality.

Score(s) = (N - 1) / sum of BFS hop distances from s along out-edges.
Unreachable nodes are left out of the sum rather than making it infinite,
so a node that reaches little scores high. A node that reaches nothing
(sum == 0) scores math.inf; a single-node graph scores 0.0.

Distances come from NetworkX; only the sum policy is local.

Time Complexity: O(V × (V + E)) — one BFS per node
Memory: O(V + E)
"""

import math
from typing import Dict, List, Optional

import networkx as nx

from core.graph.graph_metrics import to_networkx
from core.graph.model import Graph


def _distances(G: nx.MultiDiGraph, n: int, source: int) -> List[Optional[int]]:
    distance: List[Optional[int]] = [None] * n
    for node_id, hops in nx.single_source_shortest_path_length(G, source).items():
        distance[node_id] = hops
    return distance


def shortest_path_lengths(graph: Graph, source: int) -> List[Optional[int]]:
    """
    BFS hop distances from ``source`` following out-edges.

    Returns:
        List indexed by node id; None for nodes that are never reached.
    """
    return _distances(to_networkx(graph), graph.number_of_nodes(), source)


def compute_closeness(graph: Graph) -> Dict[int, float]:
    """Return {node_id: closeness} for every node."""
    n = graph.number_of_nodes()
    if n == 0:
        return {}
    if n == 1:
        return {0: 0.0}

    G = to_networkx(graph)
    closeness: Dict[int, float] = {}
    for node in graph.nodes:
        distances = _distances(G, n, node.node_id)
        total = sum(d for d in distances if d is not None)
        closeness[node.node_id] = (n - 1) / total if total > 0 else math.inf

    return closeness
