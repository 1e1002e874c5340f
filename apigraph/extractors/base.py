"""Base types and protocols for per-file extraction.

Each file is analyzed by a pure function that returns a FileExtraction;
the pipeline merges those records afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from apigraph.models.component import Component, Endpoint
from apigraph.models.types import Edge

if TYPE_CHECKING:
    import tree_sitter


@dataclass(frozen=True)
class FileContext:
    """Where a file lives: its path, owning service and Java package."""

    file_path: str
    service: str
    package: str = ""


@dataclass
class FileExtraction:
    """Everything one file contributes to a scan."""

    file_path: str
    service: str
    edges: list[Edge] = field(default_factory=list)
    components: list[Component] = field(default_factory=list)
    endpoints: list[Endpoint] = field(default_factory=list)
    main_class: str | None = None

    @classmethod
    def empty(cls, context: FileContext) -> FileExtraction:
        return cls(file_path=context.file_path, service=context.service)


class CallPattern(Protocol):
    """Matches one kind of remote call site in a Java syntax tree."""

    def match(
        self, root: "tree_sitter.Node", source: bytes, context: FileContext
    ) -> list[Edge]:
        """Match pattern against a parsed compilation unit.

        Args:
            root: tree-sitter root node of the file
            source: Full source file bytes (for extracting text)
            context: File location and owning service

        Returns:
            List of edges from the service to its targets. Empty if no match.
        """
        ...
