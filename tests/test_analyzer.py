"""Tests for project analysis and dependency reports."""

from __future__ import annotations

from pathlib import Path

import pytest

from apigraph.core.errors import InvalidInputError
from apigraph.models.analysis import ProjectAnalysis
from apigraph.models.types import Category
from apigraph.pipeline.analyzer import analyze_project, dependency_report

SHOP = Path(__file__).parent / "fixtures" / "shop"


@pytest.fixture(scope="module")
def analysis() -> ProjectAnalysis:
    return analyze_project(SHOP)


class TestAnalyzeProject:
    """Tests for the full component analysis of the shop fixture."""

    def test_project_identity(self, analysis: ProjectAnalysis) -> None:
        assert analysis.project_name == "shop"
        assert analysis.main_class == "com.shop.orders.OrdersApplication"

    def test_categories(self, analysis: ProjectAnalysis) -> None:
        def ids(category: Category) -> list[str]:
            return [c.id for c in analysis.components_of(category)]

        assert ids(Category.CONTROLLER) == [
            "com.shop.orders.OrderController",
            "com.shop.payments.PaymentController",
        ]
        assert ids(Category.SERVICE) == ["com.shop.orders.OrderService"]
        assert ids(Category.REPOSITORY) == ["com.shop.orders.OrderRepository"]
        assert ids(Category.EXTERNAL) == ["EXTERNAL:inventory-svc", "EXTERNAL:payments"]

    def test_dependency_graph(self, analysis: ProjectAnalysis) -> None:
        graph = analysis.dependency_graph
        assert graph["com.shop.orders.OrderController"] == ["com.shop.orders.OrderService"]
        assert graph["com.shop.orders.OrderService"] == [
            "EXTERNAL:inventory-svc",
            "com.shop.orders.OrderRepository",
            "com.shop.orders.PaymentsClient",
        ]
        assert graph["com.shop.orders.PaymentsClient"] == ["EXTERNAL:payments"]
        assert graph["EXTERNAL:payments"] == []

    def test_used_by(self, analysis: ProjectAnalysis) -> None:
        [service] = analysis.components_of(Category.SERVICE)
        assert service.used_by == ["com.shop.orders.OrderController"]

    def test_endpoints(self, analysis: ProjectAnalysis) -> None:
        assert [(e.http_method, e.path) for e in analysis.endpoints] == [
            ("POST", "/orders/{id}"),
            ("GET", "/pay"),
        ]

    def test_package_structure_excludes_externals(self, analysis: ProjectAnalysis) -> None:
        assert analysis.package_structure["com.shop.payments.PaymentController"] == (
            "com.shop.payments"
        )
        assert not any(key.startswith("EXTERNAL:") for key in analysis.package_structure)

    def test_modules(self, analysis: ProjectAnalysis) -> None:
        assert [m.artifact_id for m in analysis.modules] == ["orders", "payments", "shop-parent"]

    def test_stats(self, analysis: ProjectAnalysis) -> None:
        stats = analysis.stats()
        assert stats["totalEndpoints"] == 2
        assert stats["controllerCount"] == 2
        assert stats["serviceCount"] == 1
        assert stats["moduleCount"] == 3
        assert stats["totalComponents"] == analysis.total_components

    def test_to_dict(self, analysis: ProjectAnalysis) -> None:
        data = analysis.to_dict()
        assert data["projectName"] == "shop"
        assert [c["id"] for c in data["externalDependencies"]] == [
            "EXTERNAL:inventory-svc",
            "EXTERNAL:payments",
        ]
        assert data["services"][0]["rawDependencies"] == ["OrderRepository", "PaymentsClient"]
        assert data["apiEndpoints"][1]["controllerClass"] == "com.shop.payments.PaymentController"

    def test_missing_root(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidInputError):
            analyze_project(tmp_path / "missing")


class TestDependencyReport:
    """Tests for metrics plus cycles."""

    def test_shop_report(self, analysis: ProjectAnalysis) -> None:
        report = dependency_report(analysis)
        assert report["hasCircularDependencies"] is False
        assert report["circularDependencies"] == []
        assert report["totalNodes"] == len(analysis.dependency_graph)
        assert report["mostDependentComponent"] == "com.shop.orders.OrderService"
        assert report["maxOutDegree"] == 3

    def test_cycle_reported(self, tmp_path: Path) -> None:
        (tmp_path / "A.java").write_text(
            "package p; @Service class A { @Autowired B b; }"
        )
        (tmp_path / "B.java").write_text(
            "package p; @Service class B { @Autowired A a; }"
        )
        report = dependency_report(analyze_project(tmp_path))
        assert report["hasCircularDependencies"] is True
        assert report["circularDependencies"] == [["p.A", "p.B", "p.A"]]

    def test_empty_project(self, tmp_path: Path) -> None:
        report = dependency_report(analyze_project(tmp_path))
        assert report["totalNodes"] == 0
        assert report["mostDependedOnComponent"] is None
        assert report["hasCircularDependencies"] is False


class TestExternalCallEdges:
    """Tests for attaching every calling component to its External target."""

    @staticmethod
    def write_module(root: Path, service: str, sources: dict[str, str]) -> None:
        module = root / service
        module.mkdir()
        (module / "pom.xml").write_text(f"<project><artifactId>{service}</artifactId></project>")
        for name, text in sources.items():
            (module / name).write_text(text)

    def test_same_url_from_two_components(self, tmp_path: Path) -> None:
        """Both callers depend on the External, not just the first one found."""
        call = 'rt.getForObject("http://billing/x", String.class);'
        self.write_module(
            tmp_path,
            "orders",
            {
                "A.java": f"package p; class A {{ void f() {{ {call} }} }}",
                "B.java": f"package p; class B {{ void g() {{ {call} }} }}",
            },
        )

        analysis = analyze_project(tmp_path)

        assert analysis.dependency_graph == {
            "p.A": ["EXTERNAL:billing"],
            "p.B": ["EXTERNAL:billing"],
            "EXTERNAL:billing": [],
        }
        [billing] = analysis.components_of(Category.EXTERNAL)
        assert billing.used_by == ["p.A", "p.B"]

    def test_client_named_after_own_service(self, tmp_path: Path) -> None:
        """A client whose target equals its service still reaches the graph."""
        self.write_module(
            tmp_path,
            "payments",
            {"SelfClient.java": 'package q; @FeignClient("payments") interface SelfClient {}'},
        )

        graph = analyze_project(tmp_path).dependency_graph

        assert graph["q.SelfClient"] == ["EXTERNAL:payments"]

    def test_noisy_targets_not_attached(self, tmp_path: Path) -> None:
        self.write_module(
            tmp_path,
            "orders",
            {
                "C.java": (
                    "package p; class C { void f() { "
                    'rt.getForObject("http://localhost:8080/x", String.class); } }'
                )
            },
        )

        assert analyze_project(tmp_path).dependency_graph == {"p.C": []}
