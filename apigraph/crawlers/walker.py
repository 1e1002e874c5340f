"""RepoWalker: enumerates source/config files and names their services.

A "service" is the nearest ancestor directory holding a build descriptor
(pom.xml, build.gradle). Files outside any module fall back to the name of
their parent directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from apigraph.config import UNKNOWN_SERVICE, ScanConfig
from apigraph.core.errors import InvalidInputError


def require_directory(root: Path | str) -> Path:
    """Validate a scan root before any work starts.

    Raises:
        InvalidInputError: If the root is missing or not a directory.
    """
    path = Path(root)
    if not path.exists():
        raise InvalidInputError(str(root), "path does not exist")
    if not path.is_dir():
        raise InvalidInputError(str(root), "path is not a directory")
    return path


class RepoWalker:
    """Walks a multi-module tree and yields (path, kind) pairs."""

    def __init__(self, root: Path | str, config: ScanConfig | None = None) -> None:
        self._root = require_directory(root)
        self._config = config or ScanConfig()

    @property
    def root(self) -> Path:
        return self._root

    def scan(self) -> Iterator[tuple[Path, str]]:
        """Yield supported files in sorted, depth-first order.

        Subtrees whose directory basename is in the ignore set are skipped
        entirely.
        """
        yield from self._walk(self._root)

    def _walk(self, directory: Path) -> Iterator[tuple[Path, str]]:
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError:
            return

        for entry in entries:
            if entry.is_dir():
                if entry.name not in self._config.ignored_dirs:
                    yield from self._walk(entry)
            elif entry.is_file():
                kind = self._config.kind_for(entry.name)
                if kind is not None:
                    yield entry, kind

    def resolve_service_name(self, file_path: Path) -> str:
        """Name of the service owning a file.

        Walks from the file's parent up to (but excluding) the root and
        returns the first directory holding a build marker. Falls back to
        the direct parent's name, or "unknown" for a parentless path.
        """
        parent = file_path.parent
        current = parent
        while current != self._root and current != current.parent:
            if any((current / marker).exists() for marker in self._config.build_markers):
                return current.name
            current = current.parent

        if parent.name:
            return parent.name
        return UNKNOWN_SERVICE
