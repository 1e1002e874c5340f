"""Component, endpoint and build module records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from apigraph.models.types import EXTERNAL_ID_PREFIX, Category


@dataclass
class Component:
    """A declared type (class, interface, record) or a synthetic external host.

    `dependencies` holds the raw type references collected from injected
    fields. `resolved_dependencies` and `used_by` are filled in by the graph
    builder once every component is known.
    """

    class_name: str
    package_name: str
    category: Category
    annotations: list[str] = field(default_factory=list)
    methods: list[str] = field(default_factory=list)
    dependencies: list[str] = field(default_factory=list)
    resolved_dependencies: list[str] = field(default_factory=list)
    used_by: list[str] = field(default_factory=list)
    file_path: str | None = None
    service: str | None = None
    external_id: str | None = None

    @property
    def id(self) -> str:
        """Fully-qualified id: package.Class, or the external id."""
        if self.external_id:
            return self.external_id
        if not self.package_name:
            return self.class_name
        return f"{self.package_name}.{self.class_name}"

    @classmethod
    def external(cls, target: str) -> Component:
        """Synthetic component for a remote host not defined in the tree."""
        return cls(
            class_name=target,
            package_name="external",
            category=Category.EXTERNAL,
            external_id=f"{EXTERNAL_ID_PREFIX}{target}",
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "className": self.class_name,
            "packageName": self.package_name,
            "componentType": self.category.value,
            "annotations": list(self.annotations),
            "methods": list(self.methods),
            "dependencies": list(self.resolved_dependencies),
            "rawDependencies": list(self.dependencies),
            "usedBy": list(self.used_by),
            "filePath": self.file_path,
            "service": self.service,
        }


@dataclass
class Endpoint:
    """An HTTP route exposed by a controller method."""

    http_method: str
    path: str
    controller_class: str
    method_name: str
    parameters: list[str] = field(default_factory=list)
    return_type: str = "void"
    annotations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "httpMethod": self.http_method,
            "path": self.path,
            "controllerClass": self.controller_class,
            "methodName": self.method_name,
            "parameters": list(self.parameters),
            "returnType": self.return_type,
            "annotations": list(self.annotations),
        }


@dataclass
class BuildModule:
    """A Maven module parsed from a pom.xml descriptor."""

    group_id: str | None
    artifact_id: str | None
    version: str | None
    packaging: str
    path: str
    dependencies: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "groupId": self.group_id,
            "artifactId": self.artifact_id,
            "version": self.version,
            "packaging": self.packaging,
            "path": self.path,
            "dependencies": list(self.dependencies),
        }
