"""
JSON Output Formatter.

Produces the payloads handed to the presentation layer:

    format_graph  -> {"nodes": [...], "edges": [...]}
    format_scores -> {"metric": ..., "nodes": [...], "summary": {...}}

Non-finite scores are emitted as None so the payload stays valid JSON.

Time Complexity: O(V + E)
Memory: O(V + E)
"""

import math
from typing import Any, Dict, List

import numpy as np

from app.config import CENTRALITY_PERCENTILE
from core.centrality.registry import Metric
from core.graph.model import Graph
from core.output.normalization import normalize_scores


def _json_score(score: float) -> float | None:
    return score if math.isfinite(score) else None


def format_graph(graph: Graph) -> Dict[str, Any]:
    """Build the JSON-compatible node/edge payload for a graph."""
    nodes = [
        {
            "id": node.node_id,
            "label": node.label,
            "edges_out": list(node.edges_out),
            "edges_in": list(node.edges_in),
            "out_degree": node.out_degree,
            "in_degree": node.in_degree,
        }
        for node in graph.nodes
    ]
    edges = [{"source": edge.source, "target": edge.target} for edge in graph.edges]
    return {"nodes": nodes, "edges": edges}


def _top_nodes(scores: Dict[int, float]) -> List[int]:
    """Node ids whose score is at or above the configured percentile."""
    if not scores:
        return []
    finite = [s for s in scores.values() if math.isfinite(s)]
    if not finite:
        return sorted(scores)

    threshold = float(np.percentile(finite, CENTRALITY_PERCENTILE))
    return sorted(
        node_id for node_id, score in scores.items()
        if not math.isfinite(score) or score >= threshold
    )


def format_scores(
    graph: Graph,
    metric: Metric,
    scores: Dict[int, float],
    processing_time: float = 0.0,
) -> Dict[str, Any]:
    """Build the JSON-compatible score payload, nodes in id order."""
    normalized = normalize_scores(scores)

    nodes: List[Dict[str, Any]] = []
    for node in graph.nodes:
        score = scores[node.node_id]
        nodes.append(
            {
                "id": node.node_id,
                "label": node.label,
                "score": _json_score(score),
                "normalized_score": round(normalized[node.node_id], 6),
            }
        )

    finite = [s for s in scores.values() if math.isfinite(s)]
    summary = {
        "total_nodes": graph.number_of_nodes(),
        "min_score": _json_score(min(finite)) if finite else None,
        "max_score": _json_score(max(finite)) if finite else None,
        "unbounded_nodes": sum(1 for s in scores.values() if not math.isfinite(s)),
        "top_nodes": _top_nodes(scores),
        "processing_time_seconds": round(processing_time, 4),
    }

    return {"metric": metric.value, "nodes": nodes, "summary": summary}
