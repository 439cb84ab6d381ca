"""
Score Normalizer.

Min-max scales raw centrality scores to [0, 1] for display. Infinite
scores (closeness of a node that reaches nothing) sit at the top of the
scale. The raw scores remain the committed result.

Time Complexity: O(V)
Memory: O(V)
"""

import math
from typing import Dict


def normalize_scores(scores: Dict[int, float]) -> Dict[int, float]:
    """Return {node_id: score in [0, 1]}; all-equal finite scores map to 0.0."""
    finite = [s for s in scores.values() if math.isfinite(s)]
    if not finite:
        return {node_id: 1.0 for node_id in scores}

    low, high = min(finite), max(finite)
    span = high - low

    normalized: Dict[int, float] = {}
    for node_id, score in scores.items():
        if not math.isfinite(score):
            normalized[node_id] = 1.0
        elif span > 0:
            normalized[node_id] = (score - low) / span
        else:
            normalized[node_id] = 0.0
    return normalized
