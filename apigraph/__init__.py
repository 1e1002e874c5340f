"""apigraph: static cross-service dependency graphs for Spring projects."""

from apigraph.config import ScanConfig
from apigraph.core.errors import ApiGraphError, InvalidInputError
from apigraph.models import Edge, ProjectAnalysis
from apigraph.pipeline import analyze_project, dependency_report, scan_dependencies, to_cytoscape

__all__ = [
    "ApiGraphError",
    "Edge",
    "InvalidInputError",
    "ProjectAnalysis",
    "ScanConfig",
    "analyze_project",
    "dependency_report",
    "scan_dependencies",
    "to_cytoscape",
]
