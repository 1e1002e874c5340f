"""Project analysis: components, endpoints, dependency graph and modules."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable

from apigraph.boundary.cycles import detect_cycles
from apigraph.boundary.graph import DependencyGraph
from apigraph.boundary.metrics import calculate_metrics
from apigraph.config import ScanConfig
from apigraph.crawlers.modules import BuildModuleScanner
from apigraph.extractors.patterns import is_noisy_target
from apigraph.models.analysis import ProjectAnalysis
from apigraph.models.types import Category, Edge
from apigraph.pipeline.scanner import RepoScanner

logger = logging.getLogger(__name__)


def component_call_edges(edges: Iterable[Edge], config: ScanConfig) -> list[Edge]:
    """Call edges that attach to a component: an origin and a real target.

    Every origin keeps its own edge, even when another component of the same
    service calls the same URL or the target names the calling service.
    """
    return [
        edge
        for edge in edges
        if edge.origin is not None
        and edge.target
        and not is_noisy_target(edge.target, config.noisy_targets, config.noisy_target_prefixes)
    ]


def analyze_project(root: Path | str, config: ScanConfig | None = None) -> ProjectAnalysis:
    """Analyze every Java source and build descriptor under root.

    Components are classified from their annotations, injected fields are
    resolved into a component dependency graph, and remote call sites are
    attached to External components.

    Raises:
        InvalidInputError: If root is missing or not a directory.
    """
    config = config or ScanConfig()
    scanner = RepoScanner(root, config)
    project_root = scanner.root

    extractions = scanner.extract_all(kinds=["java"])

    components = [c for extraction in extractions for c in extraction.components]
    endpoints = [e for extraction in extractions for e in extraction.endpoints]
    call_edges = component_call_edges(
        (e for extraction in extractions for e in extraction.edges), config
    )

    main_class = next(
        (extraction.main_class for extraction in extractions if extraction.main_class),
        None,
    )

    graph = DependencyGraph()
    graph.build(components, call_edges)
    all_components = graph.components

    package_structure = {
        c.id: c.package_name for c in all_components if c.category != Category.EXTERNAL
    }

    analysis = ProjectAnalysis(
        project_name=project_root.resolve().name,
        project_path=str(project_root),
        main_class=main_class,
        endpoints=endpoints,
        components=all_components,
        dependency_graph=graph.to_dict(),
        package_structure=package_structure,
        modules=BuildModuleScanner(config).scan(project_root),
    )
    logger.info(
        "analysis_complete project=%s components=%d endpoints=%d",
        analysis.project_name,
        analysis.total_components,
        analysis.total_endpoints,
    )
    return analysis


def dependency_report(analysis: ProjectAnalysis) -> dict[str, Any]:
    """Graph metrics plus circular dependencies for an analysis."""
    adjacency = {node: set(targets) for node, targets in analysis.dependency_graph.items()}
    cycles = detect_cycles(adjacency)
    report = calculate_metrics(adjacency).to_dict()
    report["circularDependencies"] = cycles
    report["hasCircularDependencies"] = bool(cycles)
    return report
