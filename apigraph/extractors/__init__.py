"""Per-file extraction: Java call sites, routes, components, config URLs.

Every extractor is pure; the pipeline merges their FileExtraction records.
"""

from apigraph.extractors.base import CallPattern, FileContext, FileExtraction
from apigraph.extractors.components import classify, extract_components
from apigraph.extractors.config_text import ConfigTextExtractor
from apigraph.extractors.java import (
    DeclarativeClientPattern,
    JavaExtractor,
    ReactiveCallPattern,
    TemplatedCallPattern,
)
from apigraph.extractors.patterns import admission, is_noisy_target, normalize
from apigraph.extractors.routes import SpringRouteExtractor, combine_paths

__all__ = [
    "CallPattern",
    "FileContext",
    "FileExtraction",
    # Extractors
    "JavaExtractor",
    "ConfigTextExtractor",
    "SpringRouteExtractor",
    # Java patterns
    "DeclarativeClientPattern",
    "TemplatedCallPattern",
    "ReactiveCallPattern",
    # Helpers
    "admission",
    "classify",
    "combine_paths",
    "extract_components",
    "is_noisy_target",
    "normalize",
]
