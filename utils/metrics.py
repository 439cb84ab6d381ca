"""
Processing statistics tracker.

Stores metrics from the most recent scoring run for the /metrics endpoint.

Time Complexity: O(1) per operation
Memory: O(M) for M distinct metrics
"""

from typing import Any, Dict


class MetricsTracker:
    """Tracks graph generation and scoring statistics across API calls."""

    def __init__(self):
        self._last_metrics: Dict[str, Any] = {
            "status": "no_processing_yet",
            "total_runs": 0,
            "graphs_generated": 0,
            "runs_by_metric": {},
        }
        self._total_runs: int = 0
        self._graphs_generated: int = 0
        self._runs_by_metric: Dict[str, int] = {}

    def record_generation(self, summary: Dict[str, Any]) -> None:
        """Record a graph generation."""
        self._graphs_generated += 1
        self._last_metrics = {
            **self._last_metrics,
            "status": "ready",
            "graphs_generated": self._graphs_generated,
            "last_graph": summary,
        }

    def record(self, metric: str, summary: Dict[str, Any]) -> None:
        """Record metrics from a scoring run."""
        self._total_runs += 1
        self._runs_by_metric[metric] = self._runs_by_metric.get(metric, 0) + 1
        self._last_metrics = {
            **self._last_metrics,
            "status": "ready",
            "total_runs": self._total_runs,
            "runs_by_metric": dict(self._runs_by_metric),
            "last_run": {"metric": metric, **summary},
        }

    def get_metrics(self) -> Dict[str, Any]:
        """Return the latest metrics."""
        return self._last_metrics
