"""Java call-site extraction using tree-sitter.

Detects Feign declarative clients, RestTemplate-style templated calls,
WebClient-style reactive calls and Spring MVC endpoints, and classifies
every declared type into a Component.
"""

from __future__ import annotations

import logging

import tree_sitter

from apigraph.config import (
    APPLICATION_MARKER,
    DECLARATIVE_CLIENT_MARKER,
    REACTIVE_CALL_METHODS,
    TEMPLATED_CALL_METHODS,
)
from apigraph.extractors.base import CallPattern, FileContext, FileExtraction
from apigraph.extractors.components import extract_components
from apigraph.extractors.patterns import admission, normalize
from apigraph.extractors.routes import SpringRouteExtractor, endpoint_edges
from apigraph.extractors.syntax import (
    TYPE_DECLARATIONS,
    Annotation,
    annotations_of,
    enclosing_type,
    find_all,
    invocation_arguments,
    invocation_name,
    package_name,
    parse_java,
    qualified_type_name,
    string_literal_value,
)
from apigraph.models.types import Edge, EdgeKind

logger = logging.getLogger(__name__)


def _origin(node: tree_sitter.Node, source: bytes, context: FileContext) -> str | None:
    decl = enclosing_type(node)
    if decl is None:
        return None
    return qualified_type_name(decl, source, context.package)


class DeclarativeClientPattern:
    """Matches @FeignClient declarations.

    TEST VECTORS - Must Match:
    --------------------------
    @FeignClient(name = "payments")
    -> Edge(service -> "payments", "/", DeclarativeClient)

    @FeignClient("payments")
    -> Edge(service -> "payments", "/", DeclarativeClient)

    @FeignClient(name = "payments", url = "http://pay-gw:8080/v1")
    -> Edge(service -> "payments", "/", DeclarativeClient)
    -> Edge(service -> "pay-gw", "/v1", DeclarativeClient-URL)
    """

    def match(
        self, root: tree_sitter.Node, source: bytes, context: FileContext
    ) -> list[Edge]:
        edges: list[Edge] = []

        for decl in find_all(root, *TYPE_DECLARATIONS):
            origin = qualified_type_name(decl, source, context.package)
            for annotation in annotations_of(decl, source):
                if annotation.name == DECLARATIVE_CLIENT_MARKER:
                    edges.extend(self._client_edges(annotation, origin, context))

        for edge in edges:
            logger.debug("declarative_client service=%s target=%s", edge.source, edge.target)
        return edges

    @staticmethod
    def _client_edges(
        annotation: Annotation, origin: str, context: FileContext
    ) -> list[Edge]:
        edges: list[Edge] = []

        if annotation.value is not None:
            edges.append(
                Edge(context.service, annotation.value, "/", EdgeKind.DECLARATIVE_CLIENT, origin)
            )

        for key, value in annotation.pairs.items():
            if key in ("name", "value"):
                edges.append(
                    Edge(context.service, value, "/", EdgeKind.DECLARATIVE_CLIENT, origin)
                )
            elif key == "url":
                target = normalize(value)
                edges.append(
                    Edge(
                        context.service,
                        target.host,
                        target.path,
                        EdgeKind.DECLARATIVE_CLIENT_URL,
                        origin,
                    )
                )

        return edges


class InvocationPattern:
    """Matches invocations by callee name whose first argument is a URL literal.

    Only string literals are considered; concatenations and variables are
    skipped. The literal must pass admission before normalization.
    """

    def __init__(self, method_names: frozenset[str], kind: str) -> None:
        self._method_names = method_names
        self._kind = kind

    def match(
        self, root: tree_sitter.Node, source: bytes, context: FileContext
    ) -> list[Edge]:
        edges: list[Edge] = []

        for call in find_all(root, "method_invocation"):
            if invocation_name(call, source) not in self._method_names:
                continue

            arguments = invocation_arguments(call)
            if not arguments:
                continue

            url = string_literal_value(arguments[0], source)
            if url is None or not admission(url):
                continue

            target = normalize(url)
            edges.append(
                Edge(
                    context.service,
                    target.host,
                    target.path,
                    self._kind,
                    _origin(call, source, context),
                )
            )
            logger.debug(
                "call_site kind=%s service=%s target=%s line=%d",
                self._kind,
                context.service,
                target.host,
                call.start_point[0] + 1,
            )

        return edges


class TemplatedCallPattern(InvocationPattern):
    """Matches RestTemplate-style calls.

    TEST VECTORS - Must Match:
    --------------------------
    restTemplate.getForObject("http://billing-svc/api/pay", Pay.class);
    -> Edge(service -> "billing-svc", "/api/pay", TemplatedCall)

    Must NOT Match:
    ---------------
    headers.put("Content-Type", "application/json");
    map.put(key, value);
    """

    def __init__(self) -> None:
        super().__init__(TEMPLATED_CALL_METHODS, EdgeKind.TEMPLATED_CALL)


class ReactiveCallPattern(InvocationPattern):
    """Matches WebClient-style .uri("...") calls.

    TEST VECTORS - Must Match:
    --------------------------
    webClient.get().uri("http://inventory:8080/items").retrieve();
    -> Edge(service -> "inventory", "/items", ReactiveCall)
    """

    def __init__(self) -> None:
        super().__init__(REACTIVE_CALL_METHODS, EdgeKind.REACTIVE_CALL)


class JavaExtractor:
    """Extracts edges, components and endpoints from one Java source file."""

    language = "java"

    def __init__(self) -> None:
        self._patterns: list[CallPattern] = [
            DeclarativeClientPattern(),
            TemplatedCallPattern(),
            ReactiveCallPattern(),
        ]
        self._routes = SpringRouteExtractor()

    def extract(self, source: bytes, context: FileContext) -> FileExtraction:
        """Analyze a compilation unit.

        Args:
            source: Java source bytes
            context: File path and owning service (package is read from source)

        Returns:
            FileExtraction with call edges, endpoint edges, components,
            endpoints and the main application class, if any

        Raises:
            SyntaxTreeError: If the source does not parse cleanly.
        """
        tree = parse_java(source, context.file_path)
        root = tree.root_node
        context = FileContext(
            file_path=context.file_path,
            service=context.service,
            package=package_name(root, source),
        )

        result = FileExtraction.empty(context)
        for pattern in self._patterns:
            result.edges.extend(pattern.match(root, source, context))

        result.components = extract_components(root, source, context)
        result.endpoints = self._routes.extract(root, source, context)
        result.edges.extend(endpoint_edges(result.endpoints, context.service))
        result.main_class = self._find_main_class(root, source, context)
        return result

    @staticmethod
    def _find_main_class(
        root: tree_sitter.Node, source: bytes, context: FileContext
    ) -> str | None:
        for decl in find_all(root, *TYPE_DECLARATIONS):
            if any(a.name == APPLICATION_MARKER for a in annotations_of(decl, source)):
                return qualified_type_name(decl, source, context.package)
        return None
