"""BuildModuleScanner: parses Maven pom.xml descriptors into BuildModules.

Module dependencies live in their own namespace; they are reported next to
the component graph, never merged into it.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterator

from apigraph.config import BUILD_OUTPUT_DIRS, MODULE_DESCRIPTOR, ScanConfig
from apigraph.core.errors import DescriptorParseError
from apigraph.crawlers.walker import require_directory
from apigraph.models.component import BuildModule

logger = logging.getLogger(__name__)

DEFAULT_PACKAGING = "jar"


def _local_name(tag: str) -> str:
    """Strip an XML namespace: '{http://maven...}groupId' -> 'groupId'."""
    return tag.rsplit("}", 1)[-1]


def _child_text(element: ET.Element, name: str) -> str | None:
    """Text of a direct child element, or None."""
    for child in element:
        if _local_name(child.tag) == name:
            text = (child.text or "").strip()
            return text or None
    return None


def _child(element: ET.Element, name: str) -> ET.Element | None:
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


def parse_descriptor(path: Path) -> BuildModule:
    """Parse one pom.xml.

    groupId and version fall back to the <parent> block when absent at the
    top level. Every <dependency> element's direct artifactId is collected.

    Raises:
        DescriptorParseError: If the file cannot be read or is not a POM.
    """
    try:
        root = ET.parse(path).getroot()
    except (ET.ParseError, OSError) as e:
        raise DescriptorParseError(str(path), str(e)) from e

    if _local_name(root.tag) != "project":
        raise DescriptorParseError(str(path), f"unexpected root element <{_local_name(root.tag)}>")

    group_id = _child_text(root, "groupId")
    version = _child_text(root, "version")

    parent = _child(root, "parent")
    if parent is not None:
        if group_id is None:
            group_id = _child_text(parent, "groupId")
        if version is None:
            version = _child_text(parent, "version")

    dependencies: list[str] = []
    for element in root.iter():
        if not isinstance(element.tag, str) or _local_name(element.tag) != "dependency":
            continue
        artifact = _child_text(element, "artifactId")
        if artifact:
            dependencies.append(artifact)

    return BuildModule(
        group_id=group_id,
        artifact_id=_child_text(root, "artifactId"),
        version=version,
        packaging=_child_text(root, "packaging") or DEFAULT_PACKAGING,
        path=str(path.resolve()),
        dependencies=dependencies,
    )


class BuildModuleScanner:
    """Finds and parses every module descriptor under a root."""

    def __init__(self, config: ScanConfig | None = None) -> None:
        self._config = config or ScanConfig()

    def scan(self, root: Path | str) -> list[BuildModule]:
        """Parse all descriptors, skipping malformed ones.

        Args:
            root: Project root directory

        Returns:
            BuildModules in sorted path order
        """
        root_path = require_directory(root)
        modules: list[BuildModule] = []

        for descriptor in self._find_descriptors(root_path):
            try:
                modules.append(parse_descriptor(descriptor))
            except DescriptorParseError as e:
                logger.error("descriptor_parse_failed path=%s error=%s", descriptor, e.reason)

        logger.info("module_scan_complete root=%s modules=%d", root_path, len(modules))
        return modules

    def _find_descriptors(self, directory: Path) -> Iterator[Path]:
        skip = self._config.ignored_dirs | BUILD_OUTPUT_DIRS
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError:
            return

        for entry in entries:
            if entry.is_dir():
                if entry.name not in skip:
                    yield from self._find_descriptors(entry)
            elif entry.name == MODULE_DESCRIPTOR:
                yield entry
