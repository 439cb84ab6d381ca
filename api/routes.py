"""
API Routes — graph generation, centrality scoring, health, and metrics.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from app.config import (
    APP_VERSION,
    DEFAULT_MAX_OUT_DEGREE,
    DEFAULT_MIN_OUT_DEGREE,
    DEFAULT_NODE_COUNT,
)
from services.centrality_service import CentralityService, GraphNotGeneratedError
from utils.metrics import MetricsTracker
from utils.validators import validate_generation_params

router = APIRouter()
metrics_tracker = MetricsTracker()
centrality_service = CentralityService()


@router.get("/health")
async def health():
    """Return system health status."""
    return {"status": "healthy", "version": APP_VERSION}


@router.get("/metrics")
async def metrics():
    """Return statistics from the most recent generation and scoring runs."""
    return metrics_tracker.get_metrics()


@router.post("/graph")
def generate(
    node_count: int = DEFAULT_NODE_COUNT,
    min_out_degree: int = DEFAULT_MIN_OUT_DEGREE,
    max_out_degree: Optional[int] = DEFAULT_MAX_OUT_DEGREE,
    seed: Optional[int] = None,
):
    """
    Generate a new random graph and make it the current one.

    max_out_degree left unset means target nodes are not capped.
    """
    validation_error = validate_generation_params(node_count, min_out_degree, max_out_degree)
    if validation_error:
        raise HTTPException(status_code=400, detail=validation_error)

    graph = centrality_service.generate(node_count, min_out_degree, max_out_degree, seed=seed)
    payload = centrality_service.describe(graph)
    metrics_tracker.record_generation(payload["summary"])

    return JSONResponse(content=payload)


@router.get("/graph")
def current_graph():
    """Return the current graph."""
    try:
        payload = centrality_service.describe()
    except GraphNotGeneratedError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return JSONResponse(content=payload)


@router.get("/centrality/{metric}")
def centrality(metric: str):
    """
    Score every node of the current graph.

    metric is one of degree, closeness, betweenness (or 1, 2, 3).
    """
    try:
        result = centrality_service.score(metric)
    except GraphNotGeneratedError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    metrics_tracker.record(result["metric"], result["summary"])
    return JSONResponse(content=result)
