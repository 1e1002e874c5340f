"""RepoScanner: walks a tree and extracts every file on a worker pool.

Extraction is pure per file. Results come back in submission order and are
merged afterwards, so a scan of an unchanged tree is always identical.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable

from apigraph.config import ScanConfig
from apigraph.core.errors import FileExtractionError
from apigraph.crawlers.walker import RepoWalker
from apigraph.extractors.base import FileContext, FileExtraction
from apigraph.extractors.config_text import ConfigTextExtractor
from apigraph.extractors.java import JavaExtractor
from apigraph.extractors.patterns import is_noisy_target
from apigraph.models.types import Edge

logger = logging.getLogger(__name__)

# A file to extract: path, extractor kind, owning service
WorkItem = tuple[Path, str, str]


def extract_file(path: Path, kind: str, service: str) -> FileExtraction | None:
    """Run the extractor for one file.

    Read and parse failures are logged and the file contributes nothing.

    Returns:
        The file's FileExtraction, or None if the file failed.
    """
    context = FileContext(file_path=str(path), service=service)
    try:
        source = path.read_bytes()
        if kind == "java":
            return JavaExtractor().extract(source, context)
        result = FileExtraction.empty(context)
        result.edges = ConfigTextExtractor().extract(source.decode("utf-8"), context)
        return result
    except (OSError, UnicodeDecodeError, FileExtractionError) as e:
        logger.warning("file_extraction_failed path=%s error=%s", path, e)
        return None


def filter_edges(edges: Iterable[Edge], config: ScanConfig) -> list[Edge]:
    """Drop self loops, empty and noisy targets; keep the first of each key."""
    seen: set[tuple[str, str, str]] = set()
    kept: list[Edge] = []
    for edge in edges:
        if not edge.target or edge.source == edge.target:
            continue
        if is_noisy_target(edge.target, config.noisy_targets, config.noisy_target_prefixes):
            continue
        if edge.key in seen:
            continue
        seen.add(edge.key)
        kept.append(edge)
    return kept


class RepoScanner:
    """Walks one scan root and extracts every supported file."""

    def __init__(self, root: Path | str, config: ScanConfig | None = None) -> None:
        self._config = config or ScanConfig()
        self._walker = RepoWalker(root, self._config)

    @property
    def root(self) -> Path:
        return self._walker.root

    def work_items(self, kinds: Iterable[str] | None = None) -> list[WorkItem]:
        """Files to extract in walk order, optionally restricted to kinds."""
        wanted = set(kinds) if kinds is not None else None
        items: list[WorkItem] = []
        for path, kind in self._walker.scan():
            if wanted is not None and kind not in wanted:
                continue
            items.append((path, kind, self._walker.resolve_service_name(path)))
        return items

    def extract_all(self, kinds: Iterable[str] | None = None) -> list[FileExtraction]:
        """Extract every file on a thread pool, results in walk order."""
        items = self.work_items(kinds)
        with ThreadPoolExecutor(max_workers=self._config.max_workers) as executor:
            results = list(executor.map(lambda item: extract_file(*item), items))

        extractions = [r for r in results if r is not None]
        logger.info(
            "files_extracted root=%s files=%d failed=%d",
            self.root,
            len(items),
            len(items) - len(extractions),
        )
        return extractions

    def scan(self) -> list[Edge]:
        """Service-level edges for the whole tree, filtered and deduplicated."""
        extractions = self.extract_all()
        edges = filter_edges(
            (edge for extraction in extractions for edge in extraction.edges),
            self._config,
        )
        logger.info("scan_complete root=%s edges=%d", self.root, len(edges))
        return edges


def scan_dependencies(root: Path | str, config: ScanConfig | None = None) -> list[Edge]:
    """Scan a multi-module tree and return its cross-service edges.

    Raises:
        InvalidInputError: If root is missing or not a directory.
    """
    return RepoScanner(root, config).scan()
