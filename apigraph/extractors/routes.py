"""Spring MVC route extraction.

Extracts Endpoint records from controller classes and models each exposed
route as a reverse edge from the EXTERNAL sentinel to the service.
"""

from __future__ import annotations

import tree_sitter

from apigraph.config import DEFAULT_ROUTE_VERB, ROUTE_MARKER, VERB_MARKERS
from apigraph.extractors.base import FileContext
from apigraph.extractors.components import classify
from apigraph.extractors.syntax import (
    TYPE_DECLARATIONS,
    Annotation,
    annotations_of,
    find_all,
    node_text,
    parameter_types,
    qualified_type_name,
    simple_name,
    type_body_members,
)
from apigraph.models.component import Endpoint
from apigraph.models.types import EXTERNAL_SOURCE, Category, Edge, EdgeKind

MAPPING_MARKERS = frozenset(VERB_MARKERS) | {ROUTE_MARKER}


def mapping_path(annotation: Annotation) -> str:
    """Path of a mapping annotation: unnamed value, then value=, then path=."""
    if annotation.value is not None:
        return annotation.value
    return annotation.argument("value", "path") or ""


def http_method_for(annotation: Annotation) -> str:
    """HTTP verb for a mapping annotation.

    Verb-specific markers map 1:1. @RequestMapping uses its method attribute
    (RequestMethod.POST -> POST) and defaults to GET.
    """
    if annotation.name in VERB_MARKERS:
        return VERB_MARKERS[annotation.name]
    method = annotation.argument("method")
    if method:
        return simple_name(method).upper()
    return DEFAULT_ROUTE_VERB


def combine_paths(base: str, path: str) -> str:
    """Join a class-level and a method-level path.

    Both halves get a leading slash; the base loses its trailing slash.
    The result always starts with "/".
    """
    base = base.strip()
    path = path.strip()
    if base and not base.startswith("/"):
        base = "/" + base
    if path and not path.startswith("/"):
        path = "/" + path
    combined = base.rstrip("/") + path
    return combined or "/"


class SpringRouteExtractor:
    """Extracts routes from Spring controllers.

    Detects:
    - @GetMapping / @PostMapping / @PutMapping / @DeleteMapping / @PatchMapping
    - @RequestMapping(value = "...", method = RequestMethod.X)
    - class-level @RequestMapping base paths

    TEST VECTORS - Must Match:
    --------------------------
    @RestController @RequestMapping("/api")
    class PayController { @GetMapping("/pay") Receipt pay() }
    -> Endpoint(method="GET", path="/api/pay", handler="pay")

    @RequestMapping(value = "orders", method = RequestMethod.POST)
    -> Endpoint(method="POST", path="/orders")
    """

    def extract(
        self, root: tree_sitter.Node, source: bytes, context: FileContext
    ) -> list[Endpoint]:
        endpoints: list[Endpoint] = []

        for decl in find_all(root, *TYPE_DECLARATIONS):
            type_annotations = annotations_of(decl, source)
            if classify(a.name for a in type_annotations) != Category.CONTROLLER:
                continue

            base = ""
            for annotation in type_annotations:
                if annotation.name == ROUTE_MARKER:
                    base = mapping_path(annotation)

            controller = qualified_type_name(decl, source, context.package)
            for method in type_body_members(decl, "method_declaration"):
                endpoints.extend(self._method_endpoints(method, source, controller, base))

        return endpoints

    def _method_endpoints(
        self,
        method: tree_sitter.Node,
        source: bytes,
        controller: str,
        base: str,
    ) -> list[Endpoint]:
        annotations = annotations_of(method, source)
        mappings = [a for a in annotations if a.name in MAPPING_MARKERS]
        if not mappings:
            return []

        name_node = method.child_by_field_name("name")
        type_node = method.child_by_field_name("type")
        handler = node_text(name_node, source) if name_node else "<unknown>"
        return_type = node_text(type_node, source) if type_node else "void"
        params = parameter_types(method, source)
        annotation_names = [a.name for a in annotations]

        return [
            Endpoint(
                http_method=http_method_for(mapping),
                path=combine_paths(base, mapping_path(mapping)),
                controller_class=controller,
                method_name=handler,
                parameters=params,
                return_type=return_type,
                annotations=annotation_names,
            )
            for mapping in mappings
        ]


def endpoint_edges(endpoints: list[Endpoint], service: str) -> list[Edge]:
    """Reverse edges EXTERNAL -> service, one per exposed route."""
    return [
        Edge(
            EXTERNAL_SOURCE,
            service,
            endpoint.path,
            EdgeKind.endpoint(endpoint.http_method),
        )
        for endpoint in endpoints
    ]
