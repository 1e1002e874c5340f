"""URL extraction from configuration text (YAML, properties, JSON).

No syntax tree here: config files are scanned with regexes. Property
files are matched as `key: url` / `key=url`; JSON files, whose keys are
quoted, fall back to matching any URL literal.
"""

from __future__ import annotations

import logging
import re

from apigraph.extractors.base import FileContext
from apigraph.extractors.patterns import normalize
from apigraph.models.types import Edge, EdgeKind, TargetClass

logger = logging.getLogger(__name__)

# Any http(s) URL literal
URL_PATTERN = re.compile(r"(https?://[a-zA-Z0-9_\-./:]+(?:/[a-zA-Z0-9_\-./?]*)?)")

# identifier followed by : or = and a URL
PROPERTY_URL_PATTERN = re.compile(
    r"[a-zA-Z0-9._\-]+\s*[:=]\s*(https?://[^\s,;\"'\]\}]+)"
)

# Placeholder hosts that never name a real dependency
PLACEHOLDER_HOSTS = ("example.com", "localhost", "127.0.0.1", "0.0.0.0")


def is_valid_config_url(url: str) -> bool:
    """Scheme present and no placeholder host anywhere in the URL."""
    if not url or not url.startswith(("http://", "https://")):
        return False
    lower = url.lower()
    return not any(host in lower for host in PLACEHOLDER_HOSTS)


def find_urls(text: str, keyed: bool = True) -> list[str]:
    """URL candidates in config text.

    Args:
        text: File contents
        keyed: Only match URLs assigned to a key (YAML/properties style)

    Returns:
        Matched URL strings in order of appearance
    """
    pattern = PROPERTY_URL_PATTERN if keyed else URL_PATTERN
    return [match.group(1) for match in pattern.finditer(text)]


class ConfigTextExtractor:
    """Extracts Config edges from non-code configuration files."""

    def extract(self, text: str, context: FileContext) -> list[Edge]:
        """Extract edges from one config file.

        Args:
            text: Decoded file contents
            context: File path and owning service

        Returns:
            One Config edge per valid URL with a concrete host
        """
        keyed = not context.file_path.lower().endswith(".json")
        edges: list[Edge] = []

        for url in find_urls(text, keyed=keyed):
            if not is_valid_config_url(url):
                continue
            target = normalize(url)
            if target.classification != TargetClass.CONCRETE:
                continue
            edges.append(Edge(context.service, target.host, target.path, EdgeKind.CONFIG))
            logger.debug(
                "config_url service=%s target=%s path=%s",
                context.service,
                target.host,
                target.path,
            )

        return edges
