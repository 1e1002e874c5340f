"""Complete result of analyzing one project tree."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any

from apigraph.models.component import BuildModule, Component, Endpoint
from apigraph.models.types import Category

# Result keys per category, in response order
CATEGORY_KEYS: dict[Category, str] = {
    Category.CONTROLLER: "controllers",
    Category.SERVICE: "services",
    Category.REPOSITORY: "repositories",
    Category.CONFIGURATION: "configurations",
    Category.ENTITY: "entities",
    Category.GENERIC_COMPONENT: "components",
    Category.MODEL: "models",
    Category.EXTERNAL: "externalDependencies",
}


def now_millis() -> int:
    return int(time.time() * 1000)


@dataclass
class ProjectAnalysis:
    """Endpoints, categorized components, dependency graph and modules."""

    project_name: str
    project_path: str
    main_class: str | None = None
    endpoints: list[Endpoint] = field(default_factory=list)
    components: list[Component] = field(default_factory=list)
    dependency_graph: dict[str, list[str]] = field(default_factory=dict)
    package_structure: dict[str, str] = field(default_factory=dict)
    modules: list[BuildModule] = field(default_factory=list)
    analysis_timestamp: int = field(default_factory=now_millis)

    def components_of(self, category: Category) -> list[Component]:
        """Components of one category, in discovery order."""
        return [c for c in self.components if c.category == category]

    @property
    def total_endpoints(self) -> int:
        return len(self.endpoints)

    @property
    def total_components(self) -> int:
        return len(self.components)

    def stats(self) -> dict[str, Any]:
        """Summary counts for the project."""
        return {
            "projectName": self.project_name,
            "mainClass": self.main_class,
            "totalEndpoints": self.total_endpoints,
            "totalComponents": self.total_components,
            "controllerCount": len(self.components_of(Category.CONTROLLER)),
            "serviceCount": len(self.components_of(Category.SERVICE)),
            "repositoryCount": len(self.components_of(Category.REPOSITORY)),
            "modelCount": len(self.components_of(Category.MODEL)),
            "configurationCount": len(self.components_of(Category.CONFIGURATION)),
            "moduleCount": len(self.modules),
            "analysisTimestamp": self.analysis_timestamp,
        }

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation."""
        data: dict[str, Any] = {
            "projectName": self.project_name,
            "projectPath": self.project_path,
            "mainClass": self.main_class,
            "apiEndpoints": [e.to_dict() for e in self.endpoints],
        }
        for category, key in CATEGORY_KEYS.items():
            data[key] = [c.to_dict() for c in self.components_of(category)]
        data["dependencyGraph"] = {k: list(v) for k, v in self.dependency_graph.items()}
        data["packageStructure"] = dict(self.package_structure)
        data["modules"] = [m.to_dict() for m in self.modules]
        data["analysisTimestamp"] = self.analysis_timestamp
        return data
