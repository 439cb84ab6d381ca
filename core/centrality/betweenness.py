"""
Betweenness Centrality.

Brandes' accumulation on an unweighted directed graph: one BFS per source
counts shortest paths (sigma) and records predecessors, then a reverse
pass over the discovery order accumulates dependencies (delta).
Scores are raw sums over ordered (s, t) pairs, no (N-1)(N-2) scaling.

Time Complexity: O(V × (V + E))
Memory: O(V + E)
"""

from collections import deque
from typing import Dict, List

from core.graph.model import Graph


def _accumulate_from(graph: Graph, source: int, betweenness: List[float]) -> None:
    n = graph.number_of_nodes()
    dist = [-1] * n
    sigma = [0] * n
    pred: List[List[int]] = [[] for _ in range(n)]
    dist[source] = 0
    sigma[source] = 1

    # Discovery order; reversed it visits dependents before predecessors
    order: List[int] = []
    queue = deque([source])

    while queue:
        v = queue.popleft()
        order.append(v)
        for w in graph.nodes[v].edges_out:
            if dist[w] < 0:
                dist[w] = dist[v] + 1
                queue.append(w)
            if dist[w] == dist[v] + 1:
                sigma[w] += sigma[v]
                pred[w].append(v)

    delta = [0.0] * n
    while order:
        w = order.pop()
        for v in pred[w]:
            delta[v] += (sigma[v] / sigma[w]) * (1.0 + delta[w])
        if w != source:
            betweenness[w] += delta[w]


def compute_betweenness(graph: Graph) -> Dict[int, float]:
    """Return {node_id: unnormalized betweenness} for every node."""
    betweenness = [0.0] * graph.number_of_nodes()
    for node in graph.nodes:
        _accumulate_from(graph, node.node_id, betweenness)
    return {node.node_id: betweenness[node.node_id] for node in graph.nodes}
