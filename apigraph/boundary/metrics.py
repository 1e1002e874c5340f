"""Degree statistics for a component adjacency map."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass
class GraphMetrics:
    """Summary statistics of a dependency graph.

    Attributes:
        total_nodes: Number of adjacency keys
        total_edges: Sum of out-degrees
        average_dependencies: total_edges / total_nodes, two decimals
        most_depended_on: Node with the highest in-degree, None if empty
        most_dependent: Node with the highest out-degree, None if empty
        max_in_degree: Highest in-degree
        max_out_degree: Highest out-degree
        in_degree: Per-node in-degree (includes targets missing as keys)
        out_degree: Per-node out-degree
    """

    total_nodes: int = 0
    total_edges: int = 0
    average_dependencies: float = 0.0
    most_depended_on: str | None = None
    most_dependent: str | None = None
    max_in_degree: int = 0
    max_out_degree: int = 0
    in_degree: dict[str, int] = field(default_factory=dict)
    out_degree: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalNodes": self.total_nodes,
            "totalEdges": self.total_edges,
            "averageDependencies": self.average_dependencies,
            "mostDependedOnComponent": self.most_depended_on,
            "mostDependentComponent": self.most_dependent,
            "maxInDegree": self.max_in_degree,
            "maxOutDegree": self.max_out_degree,
            "inDegree": dict(self.in_degree),
            "outDegree": dict(self.out_degree),
        }


def _first_max(degrees: dict[str, int]) -> tuple[str | None, int]:
    best: str | None = None
    best_value = 0
    for node, value in degrees.items():
        if best is None or value > best_value:
            best, best_value = node, value
    return best, best_value


def calculate_metrics(adjacency: Mapping[str, set[str]]) -> GraphMetrics:
    """Compute degree metrics; an empty map yields zeros and None."""
    if not adjacency:
        return GraphMetrics()

    out_degree = {node: len(targets) for node, targets in adjacency.items()}
    in_degree = {node: 0 for node in adjacency}
    for targets in adjacency.values():
        for target in targets:
            in_degree[target] = in_degree.get(target, 0) + 1

    total_nodes = len(adjacency)
    total_edges = sum(out_degree.values())
    most_depended_on, max_in = _first_max(in_degree)
    most_dependent, max_out = _first_max(out_degree)

    return GraphMetrics(
        total_nodes=total_nodes,
        total_edges=total_edges,
        average_dependencies=round(total_edges / total_nodes, 2),
        most_depended_on=most_depended_on,
        most_dependent=most_dependent,
        max_in_degree=max_in,
        max_out_degree=max_out,
        in_degree=in_degree,
        out_degree=out_degree,
    )
