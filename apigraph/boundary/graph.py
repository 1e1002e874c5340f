"""Component dependency graph construction.

Builds a directed graph over every declared component: injected-field
references are resolved to components, remote call sites become edges to
synthetic External components, and used-by lists are derived by inverting
the result.
"""

from __future__ import annotations

import logging
from typing import Iterable

import networkx as nx

from apigraph.boundary.resolver import ComponentResolver
from apigraph.models.component import Component
from apigraph.models.types import Edge

logger = logging.getLogger(__name__)


class DependencyGraph:
    """Component-level dependency graph, rebuilt from scratch on every build.

    Nodes are component ids in discovery order; an edge A -> B means A
    depends on B. There are no self loops and no parallel edges.
    """

    def __init__(self) -> None:
        """Initialize an empty dependency graph."""
        self._graph: nx.DiGraph = nx.DiGraph()
        self._components: dict[str, Component] = {}

    def build(
        self,
        components: Iterable[Component],
        call_edges: Iterable[Edge] = (),
    ) -> None:
        """Build the graph from all classified components.

        1. Register every component (first declaration of an id wins)
        2. Resolve raw dependency references to component ids
        3. Add External components for remote call targets
        4. Fill in resolved_dependencies and used_by on each component

        Args:
            components: Every component found in the tree.
            call_edges: Filtered call-site edges; those with an origin are
                attached to that component.
        """
        self._graph.clear()
        self._components.clear()

        # Phase 1: Register components
        for component in components:
            if component.id in self._components:
                logger.warning(
                    "duplicate_component id=%s kept=%s ignored=%s",
                    component.id,
                    self._components[component.id].file_path,
                    component.file_path,
                )
                continue
            self._components[component.id] = component
            self._graph.add_node(component.id)

        # Phase 2: Resolve injected dependencies
        resolver = ComponentResolver(self._components.values())
        for component_id, component in list(self._components.items()):
            for reference in component.dependencies:
                resolved = resolver.resolve(reference)
                if resolved is not None and resolved != component_id:
                    self._graph.add_edge(component_id, resolved)

        # Phase 3: Merge external call edges
        for edge in call_edges:
            self._add_external(edge)

        # Phase 4: Forward and reverse lists
        for component_id, component in self._components.items():
            component.resolved_dependencies = sorted(self._graph.successors(component_id))
            component.used_by = sorted(self._graph.predecessors(component_id))

        logger.info(
            "dependency_graph_built nodes=%d edges=%d",
            self.node_count,
            self.edge_count,
        )

    def _add_external(self, edge: Edge) -> None:
        if edge.origin is None or not edge.target:
            return
        if edge.origin not in self._components:
            logger.debug("call_origin_unknown origin=%s target=%s", edge.origin, edge.target)
            return

        external = Component.external(edge.target)
        if external.id not in self._components:
            self._components[external.id] = external
            self._graph.add_node(external.id)

        if edge.origin != external.id:
            self._graph.add_edge(edge.origin, external.id)

    def adjacency(self) -> dict[str, set[str]]:
        """Component id -> set of dependency ids, in node discovery order."""
        return {node: set(self._graph.successors(node)) for node in self._graph.nodes}

    def to_dict(self) -> dict[str, list[str]]:
        """JSON-ready adjacency with sorted target lists."""
        return {node: sorted(self._graph.successors(node)) for node in self._graph.nodes}

    def used_by(self, component_id: str) -> set[str]:
        """Components that depend directly on the given one."""
        if component_id not in self._graph:
            return set()
        return set(self._graph.predecessors(component_id))

    @property
    def components(self) -> list[Component]:
        """All components including synthetic externals, in discovery order."""
        return list(self._components.values())

    @property
    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        return self._graph.number_of_edges()
