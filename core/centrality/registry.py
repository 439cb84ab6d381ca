"""
Centrality Registry — maps each Metric to its scoring function.
"""

from enum import Enum
from typing import Callable, Dict

from core.centrality.betweenness import compute_betweenness
from core.centrality.closeness import compute_closeness
from core.centrality.degree import compute_degree
from core.graph.model import Graph


class Metric(str, Enum):
    DEGREE = "degree"
    CLOSENESS = "closeness"
    BETWEENNESS = "betweenness"

    @classmethod
    def parse(cls, value: "str | int | Metric") -> "Metric":
        """
        Resolve a metric from its name or its numeric code (1, 2, 3).

        Raises:
            ValueError: if the value names no known metric.
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key in _CODES:
            return _CODES[key]
        try:
            return cls(key)
        except ValueError:
            options = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown centrality metric '{value}'. Expected one of: {options}.") from None


_CODES: Dict[str, Metric] = {
    "1": Metric.DEGREE,
    "2": Metric.CLOSENESS,
    "3": Metric.BETWEENNESS,
}

CENTRALITY_FUNCTIONS: Dict[Metric, Callable[[Graph], Dict[int, float]]] = {
    Metric.DEGREE: compute_degree,
    Metric.CLOSENESS: compute_closeness,
    Metric.BETWEENNESS: compute_betweenness,
}


def compute_scores(graph: Graph, metric: "str | int | Metric") -> Dict[int, float]:
    """Score every node of ``graph`` under ``metric``."""
    return CENTRALITY_FUNCTIONS[Metric.parse(metric)](graph)
