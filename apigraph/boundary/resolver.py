"""Resolution of raw dependency type references to known components.

Resolves field type references ("OrderService", "com.shop.OrderRepository",
"List<Order>") to component ids discovered in the scanned tree.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Iterable

from apigraph.models.component import Component
from apigraph.models.types import Category

logger = logging.getLogger(__name__)

GENERIC_ARGS = re.compile(r"<[^<>]*>")

# Reference suffix -> category the suffix match is restricted to
SUFFIX_CATEGORIES: list[tuple[str, Category]] = [
    ("Repository", Category.REPOSITORY),
    ("Service", Category.SERVICE),
]


def clean_reference(reference: str) -> str:
    """Strip generic argument lists, array/varargs suffixes and whitespace.

    "Map<String, List<Order>>" -> "Map"
    "OrderService[]"           -> "OrderService"
    """
    cleaned = reference
    while True:
        stripped = GENERIC_ARGS.sub("", cleaned)
        if stripped == cleaned:
            break
        cleaned = stripped
    cleaned = cleaned.replace("[]", "").replace("...", "")
    return "".join(cleaned.split())


@dataclass
class ComponentIndex:
    """Lookup tables over the full component set, ids sorted for stable ties."""

    by_id: dict[str, Component] = field(default_factory=dict)
    by_class_name: dict[str, list[Component]] = field(default_factory=dict)
    by_category: dict[Category, list[Component]] = field(default_factory=dict)

    @classmethod
    def build(cls, components: Iterable[Component]) -> ComponentIndex:
        index = cls()
        for component in sorted(components, key=lambda c: c.id):
            index.by_id.setdefault(component.id, component)
            index.by_class_name.setdefault(component.class_name, []).append(component)
            index.by_category.setdefault(component.category, []).append(component)
        return index


Strategy = Callable[[str, ComponentIndex], str | None]


def match_full_id(reference: str, index: ComponentIndex) -> str | None:
    component = index.by_id.get(reference)
    return component.id if component else None


def match_class_name(reference: str, index: ComponentIndex) -> str | None:
    candidates = index.by_class_name.get(reference.rsplit(".", 1)[-1])
    return candidates[0].id if candidates else None


def match_suffix(reference: str, index: ComponentIndex) -> str | None:
    """'OrderRepository' -> a Repository whose class name contains 'order'.

    Best-effort: substring matching can over-match; the lexicographically
    smallest id wins.
    """
    name = reference.rsplit(".", 1)[-1]
    for suffix, category in SUFFIX_CATEGORIES:
        if not name.endswith(suffix):
            continue
        prefix = name[: -len(suffix)].lower()
        if not prefix:
            return None
        for component in index.by_category.get(category, []):
            if prefix in component.class_name.lower():
                return component.id
        return None
    return None


DEFAULT_STRATEGIES: list[Strategy] = [match_full_id, match_class_name, match_suffix]


class ComponentResolver:
    """Resolves raw references with ordered strategies, first success wins.

    Handles:
    - Full ids: "com.shop.OrderService" -> "com.shop.OrderService"
    - Bare names: "OrderService" -> "com.shop.OrderService"
    - Suffix patterns: "OrderRepository" -> "com.shop.JpaOrderRepositoryImpl"
    """

    def __init__(
        self,
        components: Iterable[Component],
        strategies: list[Strategy] | None = None,
    ) -> None:
        self._index = ComponentIndex.build(components)
        self._strategies = strategies if strategies is not None else DEFAULT_STRATEGIES

    def resolve(self, reference: str) -> str | None:
        """Resolve a raw reference to a component id.

        Args:
            reference: Declared field type text

        Returns:
            The resolved component id, or None if nothing matches.
        """
        cleaned = clean_reference(reference)
        if not cleaned:
            return None

        for strategy in self._strategies:
            resolved = strategy(cleaned, self._index)
            if resolved is not None:
                return resolved

        logger.debug("unresolved_reference reference=%s", reference)
        return None
