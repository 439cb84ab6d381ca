"""
Graph Metrics — summary statistics for a generated graph.

Time Complexity: O(V + E)
Memory: O(V + E) for the NetworkX copy
"""

from typing import Any, Dict

import networkx as nx

from core.graph.model import Graph


def to_networkx(graph: Graph) -> nx.MultiDiGraph:
    """Convert to a NetworkX MultiDiGraph, keeping parallel edges and labels."""
    G = nx.MultiDiGraph()
    G.add_nodes_from((node.node_id, {"label": node.label}) for node in graph.nodes)
    G.add_edges_from((edge.source, edge.target) for edge in graph.edges)
    return G


def compute_graph_summary(graph: Graph) -> Dict[str, Any]:
    """Return basic graph-level metrics."""
    G = to_networkx(graph)
    simple = nx.DiGraph(G)
    n = simple.number_of_nodes()
    return {
        "total_nodes": G.number_of_nodes(),
        "total_edges": G.number_of_edges(),
        "unique_edges": simple.number_of_edges(),
        "parallel_edges": G.number_of_edges() - simple.number_of_edges(),
        "density": round(nx.density(simple), 4) if n > 1 else 0.0,
        "is_weakly_connected": nx.is_weakly_connected(simple) if n > 0 else False,
        "num_weakly_connected_components": nx.number_weakly_connected_components(simple),
    }
