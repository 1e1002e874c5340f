"""Component classification and injected-dependency collection."""

from __future__ import annotations

from typing import Iterable

import tree_sitter

from apigraph.config import CONSTRUCTOR_MARKERS, INJECTION_MARKERS
from apigraph.extractors.base import FileContext
from apigraph.extractors.syntax import (
    TYPE_DECLARATIONS,
    annotations_of,
    find_all,
    has_modifier,
    node_text,
    type_body_members,
)
from apigraph.models.component import Component
from apigraph.models.types import Category

# Checked top to bottom; first row with a matching annotation wins
CATEGORY_PRIORITY: list[tuple[frozenset[str], Category]] = [
    (frozenset({"RestController", "Controller"}), Category.CONTROLLER),
    (frozenset({"Service"}), Category.SERVICE),
    (frozenset({"Repository"}), Category.REPOSITORY),
    (frozenset({"Configuration"}), Category.CONFIGURATION),
    (frozenset({"Entity", "Document", "Table"}), Category.ENTITY),
    (frozenset({"Component"}), Category.GENERIC_COMPONENT),
]


def classify(annotation_names: Iterable[str]) -> Category:
    """Category for a type given its annotation simple names."""
    names = set(annotation_names)
    for markers, category in CATEGORY_PRIORITY:
        if names & markers:
            return category
    return Category.MODEL


def collect_dependencies(
    decl: tree_sitter.Node, source: bytes, type_annotations: Iterable[str]
) -> list[str]:
    """Raw type references of injected fields.

    A field counts when it carries an injection marker, or when the type
    generates a constructor (Lombok) and the field is final.
    """
    generated_constructor = bool(set(type_annotations) & CONSTRUCTOR_MARKERS)
    dependencies: list[str] = []

    for field_node in type_body_members(decl, "field_declaration"):
        injected = any(a.name in INJECTION_MARKERS for a in annotations_of(field_node, source))
        if not injected and generated_constructor and has_modifier(field_node, "final"):
            injected = True
        if not injected:
            continue

        type_node = field_node.child_by_field_name("type")
        if type_node is not None:
            dependencies.append(node_text(type_node, source))

    return dependencies


def extract_components(
    root: tree_sitter.Node, source: bytes, context: FileContext
) -> list[Component]:
    """One Component per class, interface or record declared in the file."""
    components: list[Component] = []

    for decl in find_all(root, *TYPE_DECLARATIONS):
        name_node = decl.child_by_field_name("name")
        if name_node is None:
            continue

        annotations = [a.name for a in annotations_of(decl, source)]
        methods = []
        for method in type_body_members(decl, "method_declaration"):
            method_name = method.child_by_field_name("name")
            if method_name is not None:
                methods.append(node_text(method_name, source))

        components.append(
            Component(
                class_name=node_text(name_node, source),
                package_name=context.package,
                category=classify(annotations),
                annotations=annotations,
                methods=methods,
                dependencies=collect_dependencies(decl, source, annotations),
                file_path=context.file_path,
                service=context.service,
            )
        )

    return components
