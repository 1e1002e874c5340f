"""Scan and analysis entry points."""

from apigraph.pipeline.analyzer import analyze_project, dependency_report
from apigraph.pipeline.export import to_cytoscape
from apigraph.pipeline.scanner import RepoScanner, extract_file, filter_edges, scan_dependencies

__all__ = [
    "RepoScanner",
    "analyze_project",
    "dependency_report",
    "extract_file",
    "filter_edges",
    "scan_dependencies",
    "to_cytoscape",
]
