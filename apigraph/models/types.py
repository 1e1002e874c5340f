"""Core type definitions: categories, edge kinds, edges, normalized targets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Source id of the reverse edges that model exposed endpoints
EXTERNAL_SOURCE = "EXTERNAL"

# Namespace prefix for synthetic external component ids
EXTERNAL_ID_PREFIX = "EXTERNAL:"

CONFIG_DEPENDENT_HOST = "config-dependent"
UNKNOWN_HOST = "unknown"


class Category(Enum):
    """Classification of a declared type, derived from its annotations."""

    CONTROLLER = "Controller"
    SERVICE = "Service"
    REPOSITORY = "Repository"
    CONFIGURATION = "Configuration"
    ENTITY = "Entity"
    GENERIC_COMPONENT = "Component"
    MODEL = "Model"
    EXTERNAL = "External"


class TargetClass(Enum):
    """How a raw call target was classified by the normalizer."""

    CONCRETE = "concrete"
    CONFIG_DEPENDENT = "config-dependent"
    UNKNOWN = "unknown"


class EdgeKind:
    """Edge kind labels.

    DECLARATIVE_CLIENT:     @FeignClient(name = "payments")
    DECLARATIVE_CLIENT_URL: @FeignClient(url = "http://payments:8080")
    TEMPLATED_CALL:         restTemplate.getForObject("http://payments/pay", ...)
    REACTIVE_CALL:          webClient.get().uri("http://payments/pay")
    CONFIG:                 payments.url: http://payments/pay
    """

    DECLARATIVE_CLIENT = "DeclarativeClient"
    DECLARATIVE_CLIENT_URL = "DeclarativeClient-URL"
    TEMPLATED_CALL = "TemplatedCall"
    REACTIVE_CALL = "ReactiveCall"
    CONFIG = "Config"

    @staticmethod
    def endpoint(http_method: str) -> str:
        """Kind of the reverse edge for an exposed route, e.g. GET-Endpoint."""
        return f"{http_method}-Endpoint"


@dataclass(frozen=True)
class NormalizedTarget:
    """A raw URL/host string reduced to (host, path)."""

    host: str
    path: str
    classification: TargetClass


@dataclass(frozen=True)
class Edge:
    """A directed dependency between two graph nodes.

    For call sites, `source` is the calling service and `origin` is the
    fully-qualified id of the type the call was found in.
    """

    source: str
    target: str
    label: str
    kind: str
    origin: str | None = None

    @property
    def key(self) -> tuple[str, str, str]:
        """Deduplication key."""
        return (self.source, self.target, self.label)
