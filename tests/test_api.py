"""
API tests for graph generation and centrality endpoints.
"""

import os
import sys

# Ensure project root is on sys.path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from fastapi.testclient import TestClient

import api.routes as routes
from app.main import app
from services.centrality_service import CentralityService, GraphNotGeneratedError
from utils.metrics import MetricsTracker


@pytest.fixture
def client(monkeypatch):
    # Fresh session state per test
    monkeypatch.setattr(routes, "centrality_service", CentralityService())
    monkeypatch.setattr(routes, "metrics_tracker", MetricsTracker())
    return TestClient(app)


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"

    def test_metrics_before_any_run(self, client):
        body = client.get("/metrics").json()
        assert body["status"] == "no_processing_yet"
        assert body["total_runs"] == 0

    def test_metrics_ready_after_generation(self, client):
        client.post("/graph", params={"node_count": 5, "seed": 0})
        body = client.get("/metrics").json()
        assert body["status"] == "ready"
        assert body["graphs_generated"] == 1
        assert body["total_runs"] == 0


class TestGraphEndpoints:
    def test_no_graph_yet(self, client):
        assert client.get("/graph").status_code == 404
        assert client.get("/centrality/degree").status_code == 404

    def test_generate_default(self, client):
        resp = client.post("/graph", params={"seed": 1})
        assert resp.status_code == 200
        body = resp.json()
        assert len(body["nodes"]) == 16
        assert body["summary"]["total_nodes"] == 16
        assert body["summary"]["total_edges"] == len(body["edges"])
        assert all(node["out_degree"] == 2 for node in body["nodes"])

    def test_generate_then_fetch(self, client):
        created = client.post("/graph", params={"node_count": 6, "min_out_degree": 1, "seed": 4}).json()
        fetched = client.get("/graph").json()
        assert fetched["edges"] == created["edges"]

    def test_regenerate_replaces_graph(self, client):
        client.post("/graph", params={"node_count": 5, "seed": 1})
        client.post("/graph", params={"node_count": 9, "seed": 2})
        assert len(client.get("/graph").json()["nodes"]) == 9

    def test_invalid_params(self, client):
        resp = client.post("/graph", params={"node_count": -1})
        assert resp.status_code == 400
        assert "node_count" in resp.json()["detail"]
        assert client.post("/graph", params={"min_out_degree": -2}).status_code == 400

    def test_min_out_degree_over_cap(self, client):
        resp = client.post("/graph", params={"node_count": 500, "min_out_degree": 1_000_000_000})
        assert resp.status_code == 400
        assert "min_out_degree" in resp.json()["detail"]
        assert client.get("/graph").status_code == 404

    def test_last_metric_reported(self, client):
        created = client.post("/graph", params={"node_count": 6, "seed": 1}).json()
        assert created["last_metric"] is None
        client.get("/centrality/2")
        assert client.get("/graph").json()["last_metric"] == "closeness"


class TestCentralityEndpoints:
    def test_degree_matches_graph(self, client):
        graph = client.post("/graph", params={"node_count": 8, "seed": 3}).json()
        body = client.get("/centrality/degree").json()
        assert body["metric"] == "degree"
        assert len(body["nodes"]) == 8
        for node, scored in zip(graph["nodes"], body["nodes"]):
            assert scored["id"] == node["id"]
            assert scored["score"] == node["in_degree"] + node["out_degree"]

    def test_numeric_metric_codes(self, client):
        client.post("/graph", params={"node_count": 8, "seed": 3})
        assert client.get("/centrality/1").json()["metric"] == "degree"
        assert client.get("/centrality/2").json()["metric"] == "closeness"
        assert client.get("/centrality/3").json()["metric"] == "betweenness"

    def test_scores_normalized(self, client):
        client.post("/graph", params={"node_count": 12, "seed": 9})
        body = client.get("/centrality/betweenness").json()
        values = [n["normalized_score"] for n in body["nodes"]]
        assert all(0.0 <= v <= 1.0 for v in values)

    def test_unknown_metric(self, client):
        client.post("/graph", params={"node_count": 4, "seed": 0})
        resp = client.get("/centrality/pagerank")
        assert resp.status_code == 400
        assert "pagerank" in resp.json()["detail"]

    def test_metrics_recorded(self, client):
        client.post("/graph", params={"node_count": 6, "seed": 0})
        client.get("/centrality/degree")
        client.get("/centrality/closeness")
        body = client.get("/metrics").json()
        assert body["status"] == "ready"
        assert body["total_runs"] == 2
        assert body["graphs_generated"] == 1
        assert body["runs_by_metric"] == {"degree": 1, "closeness": 1}
        assert body["last_run"]["metric"] == "closeness"


class TestCentralityService:
    def test_score_without_graph(self):
        with pytest.raises(GraphNotGeneratedError):
            CentralityService().score("degree")

    def test_last_metric_reset_on_generate(self):
        service = CentralityService()
        service.generate(6, 1, None, seed=1)
        service.score(3)
        assert service.last_metric.value == "betweenness"
        service.generate(6, 1, None, seed=2)
        assert service.last_metric is None
        assert service.has_graph()

    def test_describe_given_graph_after_replacement(self):
        service = CentralityService()
        first = service.generate(5, 1, None, seed=1)
        service.score("degree")
        service.generate(9, 1, None, seed=2)
        payload = service.describe(first)
        assert len(payload["nodes"]) == 5
        assert payload["summary"]["total_edges"] == first.number_of_edges()
        assert payload["last_metric"] is None
