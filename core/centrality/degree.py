"""
Degree Centrality.

Score = in-degree + out-degree. Parallel edges count once per edge.

Time Complexity: O(V)
Memory: O(V)
"""

from typing import Dict

from core.graph.model import Graph


def compute_degree(graph: Graph) -> Dict[int, float]:
    """Return {node_id: in_degree + out_degree} for every node."""
    return {
        node.node_id: float(len(node.edges_in) + len(node.edges_out))
        for node in graph.nodes
    }
