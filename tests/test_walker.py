"""Tests for RepoWalker and service naming."""

from __future__ import annotations

from pathlib import Path

import pytest

from apigraph.config import ScanConfig
from apigraph.core.errors import InvalidInputError
from apigraph.crawlers.walker import RepoWalker


def write(path: Path, text: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """Two modules, an ignored test dir and build output."""
    write(tmp_path / "orders" / "pom.xml", "<project/>")
    write(tmp_path / "orders" / "src" / "main" / "java" / "A.java")
    write(tmp_path / "orders" / "src" / "main" / "resources" / "application.yml")
    write(tmp_path / "orders" / "src" / "test" / "java" / "ATest.java")
    write(tmp_path / "orders" / "target" / "classes" / "B.java")
    write(tmp_path / "billing" / "build.gradle")
    write(tmp_path / "billing" / "src" / "C.java")
    write(tmp_path / "billing" / "README.md")
    write(tmp_path / "scripts" / "tool.properties")
    return tmp_path


class TestScan:
    """Tests for file enumeration."""

    def test_yields_supported_files_in_sorted_order(self, tree: Path) -> None:
        files = [(p.relative_to(tree).as_posix(), kind) for p, kind in RepoWalker(tree).scan()]
        assert files == [
            ("billing/src/C.java", "java"),
            ("orders/src/main/java/A.java", "java"),
            ("orders/src/main/resources/application.yml", "config"),
            ("scripts/tool.properties", "config"),
        ]

    def test_extra_ignored_dirs(self, tree: Path) -> None:
        config = ScanConfig(ignored_dirs=ScanConfig().ignored_dirs | {"scripts"})
        names = [p.name for p, _ in RepoWalker(tree, config).scan()]
        assert "tool.properties" not in names

    def test_missing_root_raises(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidInputError):
            RepoWalker(tmp_path / "nope")

    def test_file_root_raises(self, tmp_path: Path) -> None:
        target = write(tmp_path / "A.java")
        with pytest.raises(InvalidInputError) as exc:
            RepoWalker(target)
        assert exc.value.path == str(target)


class TestServiceName:
    """Tests for nearest-build-descriptor service naming."""

    def test_maven_module(self, tree: Path) -> None:
        walker = RepoWalker(tree)
        path = tree / "orders" / "src" / "main" / "java" / "A.java"
        assert walker.resolve_service_name(path) == "orders"

    def test_gradle_module(self, tree: Path) -> None:
        walker = RepoWalker(tree)
        assert walker.resolve_service_name(tree / "billing" / "src" / "C.java") == "billing"

    def test_fallback_to_parent_directory(self, tree: Path) -> None:
        walker = RepoWalker(tree)
        assert walker.resolve_service_name(tree / "scripts" / "tool.properties") == "scripts"

    def test_root_descriptor_is_not_a_service(self, tmp_path: Path) -> None:
        """The walk stops below the scan root."""
        write(tmp_path / "pom.xml", "<project/>")
        source = write(tmp_path / "lib" / "src" / "D.java")
        assert RepoWalker(tmp_path).resolve_service_name(source) == "src"
