"""Component graph construction, reference resolution and graph analysis."""

from apigraph.boundary.cycles import detect_cycles
from apigraph.boundary.graph import DependencyGraph
from apigraph.boundary.metrics import GraphMetrics, calculate_metrics
from apigraph.boundary.resolver import ComponentResolver, clean_reference

__all__ = [
    "ComponentResolver",
    "DependencyGraph",
    "GraphMetrics",
    "calculate_metrics",
    "clean_reference",
    "detect_cycles",
]
