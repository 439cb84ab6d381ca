"""
Centrality Service — owns the current graph and runs scoring passes.

   1. Generate a random directed graph (replaces the current one)
   2. Score the current graph under a chosen metric
   3. Format graph / score payloads for the presentation layer

The new graph is fully built before it replaces the old one, so callers
never see a partially generated graph.
"""

import contextlib
import logging
import threading
import time
from typing import Any, Dict, Optional

from app.config import (
    DEFAULT_MAX_OUT_DEGREE,
    DEFAULT_MIN_OUT_DEGREE,
    DEFAULT_NODE_COUNT,
)
from core.centrality.registry import CENTRALITY_FUNCTIONS, Metric
from core.graph.generator import generate_graph
from core.graph.graph_metrics import compute_graph_summary
from core.graph.model import Graph
from core.output.json_formatter import format_graph, format_scores

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def log_timer(label: str):
    start = time.time()
    yield
    elapsed = time.time() - start
    logger.info("Module [%s] took %.4f seconds", label, elapsed)


class GraphNotGeneratedError(LookupError):
    """Raised when scoring is requested before any graph exists."""


class CentralityService:
    """Holds one graph at a time and scores it on request."""

    def __init__(self):
        self._lock = threading.Lock()
        self._graph: Optional[Graph] = None
        self._last_metric: Optional[Metric] = None

    def generate(
        self,
        node_count: int = DEFAULT_NODE_COUNT,
        min_out_degree: int = DEFAULT_MIN_OUT_DEGREE,
        max_out_degree: Optional[int] = DEFAULT_MAX_OUT_DEGREE,
        seed: Optional[int] = None,
    ) -> Graph:
        """Generate a new graph and make it the current one."""
        with log_timer("graph_generation"):
            graph = generate_graph(node_count, min_out_degree, max_out_degree, seed=seed)

        with self._lock:
            self._graph = graph
            self._last_metric = None

        logger.info(
            "Generated graph: %d nodes, %d edges",
            graph.number_of_nodes(),
            graph.number_of_edges(),
        )
        return graph

    def has_graph(self) -> bool:
        return self._graph is not None

    def current_graph(self) -> Graph:
        with self._lock:
            if self._graph is None:
                raise GraphNotGeneratedError("No graph has been generated yet.")
            return self._graph

    @property
    def last_metric(self) -> Optional[Metric]:
        return self._last_metric

    def describe(self, graph: Optional[Graph] = None) -> Dict[str, Any]:
        """
        Return a graph payload with its summary block.

        Describes the current graph unless ``graph`` is given. last_metric is
        the metric last scored on that graph, or None.
        """
        if graph is None:
            graph = self.current_graph()
        last = self._last_metric if graph is self._graph else None
        return {
            **format_graph(graph),
            "summary": compute_graph_summary(graph),
            "last_metric": last.value if last is not None else None,
        }

    def score(self, metric: "str | int | Metric") -> Dict[str, Any]:
        """
        Score the current graph.

        Returns:
            JSON-compatible dict with metric, per-node scores and summary.
        """
        resolved = Metric.parse(metric)
        graph = self.current_graph()

        start = time.time()
        with log_timer(f"{resolved.value}_centrality"):
            scores = CENTRALITY_FUNCTIONS[resolved](graph)
        elapsed = time.time() - start

        with self._lock:
            if self._graph is graph:
                self._last_metric = resolved

        return format_scores(graph, resolved, scores, processing_time=elapsed)
