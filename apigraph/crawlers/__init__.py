"""Tree walking, service naming and build descriptor scanning."""

from apigraph.crawlers.modules import BuildModuleScanner, parse_descriptor
from apigraph.crawlers.walker import RepoWalker, require_directory

__all__ = [
    "BuildModuleScanner",
    "RepoWalker",
    "parse_descriptor",
    "require_directory",
]
