"""Error hierarchy for apigraph.

Only InvalidInputError aborts a scan. Every other error is raised inside a
single file or descriptor, caught by the pipeline, logged, and skipped.
"""

from __future__ import annotations


class ApiGraphError(Exception):
    """Base error for apigraph.

    All apigraph-specific errors inherit from this.
    """

    pass


# =============================================================================
# Input Errors
# =============================================================================


class InvalidInputError(ApiGraphError):
    """Scan root is missing or not a directory.

    Attributes:
        path: The offending root path
        reason: Human-readable error description

    Retry: Never retryable - fix the path.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid scan root {path}: {reason}")


# =============================================================================
# Per-File Errors
# =============================================================================


class FileExtractionError(ApiGraphError):
    """A single source or config file could not be read or analyzed.

    Attributes:
        file_path: The file that failed
        reason: Human-readable error description

    Retry: Never retryable - the file contributes nothing to the scan.
    """

    def __init__(self, file_path: str, reason: str) -> None:
        self.file_path = file_path
        self.reason = reason
        super().__init__(f"Failed to extract {file_path}: {reason}")


class SyntaxTreeError(FileExtractionError):
    """Source text did not parse into a clean syntax tree.

    Attributes:
        line_number: 1-based line of the first error node, if known

    Retry: Never retryable - fix the source file.
    """

    def __init__(self, file_path: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        where = f" near line {line_number}" if line_number else ""
        super().__init__(file_path, f"syntax error{where}")


# =============================================================================
# Build Descriptor Errors
# =============================================================================


class DescriptorParseError(ApiGraphError):
    """A build descriptor (pom.xml) is malformed.

    Attributes:
        descriptor_path: The descriptor that failed
        reason: Human-readable error description

    Retry: Never retryable - the module is omitted from the scan.
    """

    def __init__(self, descriptor_path: str, reason: str) -> None:
        self.descriptor_path = descriptor_path
        self.reason = reason
        super().__init__(f"Failed to parse descriptor {descriptor_path}: {reason}")
