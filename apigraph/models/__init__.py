"""Data model: edges, components, endpoints, build modules, analysis."""

from apigraph.models.analysis import ProjectAnalysis
from apigraph.models.component import BuildModule, Component, Endpoint
from apigraph.models.types import (
    EXTERNAL_ID_PREFIX,
    EXTERNAL_SOURCE,
    Category,
    Edge,
    EdgeKind,
    NormalizedTarget,
    TargetClass,
)

__all__ = [
    "EXTERNAL_ID_PREFIX",
    "EXTERNAL_SOURCE",
    "BuildModule",
    "Category",
    "Component",
    "Edge",
    "EdgeKind",
    "Endpoint",
    "NormalizedTarget",
    "ProjectAnalysis",
    "TargetClass",
]
