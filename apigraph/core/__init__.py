"""Core error types."""

from apigraph.core.errors import (
    ApiGraphError,
    DescriptorParseError,
    FileExtractionError,
    InvalidInputError,
    SyntaxTreeError,
)

__all__ = [
    "ApiGraphError",
    "DescriptorParseError",
    "FileExtractionError",
    "InvalidInputError",
    "SyntaxTreeError",
]
