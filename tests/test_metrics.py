"""Tests for graph metrics."""

from __future__ import annotations

from apigraph.boundary.metrics import GraphMetrics, calculate_metrics


class TestCalculateMetrics:
    """Tests for degree statistics."""

    def test_empty_graph(self) -> None:
        metrics = calculate_metrics({})
        assert metrics == GraphMetrics()
        assert metrics.to_dict()["mostDependedOnComponent"] is None
        assert metrics.average_dependencies == 0.0

    def test_degrees(self) -> None:
        metrics = calculate_metrics(
            {
                "Controller": {"Service"},
                "Service": {"Repository", "EXTERNAL:payments"},
                "Repository": set(),
            }
        )
        assert metrics.total_nodes == 3
        assert metrics.total_edges == 3
        assert metrics.average_dependencies == 1.0
        assert metrics.out_degree == {"Controller": 1, "Service": 2, "Repository": 0}
        assert metrics.in_degree == {
            "Controller": 0,
            "Service": 1,
            "Repository": 1,
            "EXTERNAL:payments": 1,
        }
        assert metrics.most_dependent == "Service"
        assert metrics.max_out_degree == 2
        assert metrics.max_in_degree == 1

    def test_ties_go_to_first(self) -> None:
        metrics = calculate_metrics({"A": {"C"}, "B": {"D"}, "C": set(), "D": set()})
        assert metrics.most_dependent == "A"
        assert metrics.most_depended_on == "C"

    def test_average_rounded(self) -> None:
        metrics = calculate_metrics({"A": {"B", "C"}, "B": set(), "C": set()})
        assert metrics.average_dependencies == 0.67

    def test_to_dict_keys(self) -> None:
        data = calculate_metrics({"A": {"B"}, "B": set()}).to_dict()
        assert data["totalNodes"] == 2
        assert data["totalEdges"] == 1
        assert data["mostDependedOnComponent"] == "B"
        assert data["mostDependentComponent"] == "A"
        assert data["inDegree"] == {"A": 0, "B": 1}
        assert data["outDegree"] == {"A": 1, "B": 0}
