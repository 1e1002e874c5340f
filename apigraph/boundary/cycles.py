"""Circular dependency detection over a component adjacency map."""

from __future__ import annotations

import logging
from typing import Mapping

logger = logging.getLogger(__name__)


def detect_cycles(adjacency: Mapping[str, set[str]]) -> list[list[str]]:
    """Find circular dependencies with a depth-first search.

    Every unvisited node in iteration order starts a search. When the search
    reaches a node that is still on the current path, the path slice from
    that node is reported as a closed cycle (first element repeated last).
    At most one cycle is reported per root and finished nodes are never
    revisited, so this is not an exhaustive cycle enumeration.

    Args:
        adjacency: Node id -> ids it depends on. Targets missing as keys
            are treated as leaves.

    Returns:
        Cycles in discovery order, e.g. [["A", "B", "C", "A"]]
    """
    visited: set[str] = set()
    cycles: list[list[str]] = []

    for root in adjacency:
        if root in visited:
            continue

        path: list[str] = [root]
        on_stack: set[str] = {root}
        visited.add(root)
        stack = [iter(sorted(adjacency.get(root, ())))]
        found = False

        while stack and not found:
            try:
                node = next(stack[-1])
            except StopIteration:
                stack.pop()
                on_stack.discard(path.pop())
                continue

            if node in on_stack:
                cycle = path[path.index(node):] + [node]
                cycles.append(cycle)
                logger.debug("cycle_detected cycle=%s", " -> ".join(cycle))
                found = True
            elif node not in visited:
                visited.add(node)
                path.append(node)
                on_stack.add(node)
                stack.append(iter(sorted(adjacency.get(node, ()))))

    if cycles:
        logger.info("cycles_detected count=%d", len(cycles))
    return cycles
