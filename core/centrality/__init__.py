"""
Centrality Engine.

Degree, closeness and betweenness scoring over a generated graph. Every
function returns a fresh {node_id: score} mapping and leaves the graph as is.
"""

from core.centrality.betweenness import compute_betweenness
from core.centrality.closeness import compute_closeness
from core.centrality.degree import compute_degree
from core.centrality.registry import CENTRALITY_FUNCTIONS, Metric, compute_scores

__all__ = [
    "compute_betweenness",
    "compute_closeness",
    "compute_degree",
    "compute_scores",
    "CENTRALITY_FUNCTIONS",
    "Metric",
]
