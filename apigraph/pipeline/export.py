"""Cytoscape.js element documents for service edges."""

from __future__ import annotations

from typing import Any, Iterable

from apigraph.models.types import Edge


def to_cytoscape(edges: Iterable[Edge]) -> dict[str, Any]:
    """Render edges as a Cytoscape.js elements document.

    Nodes are the unique sources and targets, sorted by id. Edge ids
    ("e1", "e2", ...) are numbered per call. Edge labels combine the kind
    and the path: "TemplatedCall /api/pay".
    """
    edges = list(edges)
    node_ids = sorted({edge.source for edge in edges} | {edge.target for edge in edges})

    nodes = [{"data": {"id": node_id, "label": node_id}} for node_id in node_ids]
    edge_elements = [
        {
            "data": {
                "id": f"e{index}",
                "source": edge.source,
                "target": edge.target,
                "label": f"{edge.kind} {edge.label}",
                "kind": edge.kind,
            }
        }
        for index, edge in enumerate(edges, start=1)
    ]
    return {"elements": {"nodes": nodes, "edges": edge_elements}}
