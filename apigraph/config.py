"""Scanner configuration tables and per-scan settings.

The tables below are the closed vocabularies the extractors match against.
Recognizing a new framework marker means adding one entry here.
"""

from __future__ import annotations

from dataclasses import dataclass

# -- Tree walking --

# Directory basenames whose whole subtree is skipped
IGNORED_DIRS: frozenset[str] = frozenset(
    {
        ".git",
        ".idea",
        "target",
        "build",
        "out",
        "node_modules",
        "test",
    }
)

# File suffix -> extractor kind
EXTENSION_KINDS: dict[str, str] = {
    ".java": "java",
    ".json": "config",
    ".yaml": "config",
    ".yml": "config",
    ".properties": "config",
}

# A directory holding one of these files is a deployable service
BUILD_MARKERS: tuple[str, ...] = ("pom.xml", "build.gradle", "build.gradle.kts")

# Maven descriptor file name and directories holding build output
MODULE_DESCRIPTOR: str = "pom.xml"
BUILD_OUTPUT_DIRS: frozenset[str] = frozenset({"target", "build", "out"})

UNKNOWN_SERVICE: str = "unknown"

# -- Noisy targets dropped after extraction (case-insensitive) --

NOISY_TARGETS: frozenset[str] = frozenset(
    {"localhost", "127.0.0.1", "config-dependent", "unknown"}
)
NOISY_TARGET_PREFIXES: tuple[str, ...] = ("java.", "org.springframework")

# -- Annotation vocabularies (simple names) --

DECLARATIVE_CLIENT_MARKER: str = "FeignClient"

TEMPLATED_CALL_METHODS: frozenset[str] = frozenset(
    {
        "getForObject",
        "getForEntity",
        "postForObject",
        "postForEntity",
        "put",
        "delete",
        "exchange",
        "execute",
    }
)
REACTIVE_CALL_METHODS: frozenset[str] = frozenset({"uri"})

ROUTE_MARKER: str = "RequestMapping"
VERB_MARKERS: dict[str, str] = {
    "GetMapping": "GET",
    "PostMapping": "POST",
    "PutMapping": "PUT",
    "DeleteMapping": "DELETE",
    "PatchMapping": "PATCH",
}
DEFAULT_ROUTE_VERB: str = "GET"

INJECTION_MARKERS: frozenset[str] = frozenset({"Autowired", "Inject", "Resource"})
CONSTRUCTOR_MARKERS: frozenset[str] = frozenset(
    {"RequiredArgsConstructor", "AllArgsConstructor"}
)
APPLICATION_MARKER: str = "SpringBootApplication"


@dataclass(frozen=True)
class ScanConfig:
    """Settings for one scan. Defaults come from the module tables."""

    ignored_dirs: frozenset[str] = IGNORED_DIRS
    extension_kinds: tuple[tuple[str, str], ...] = tuple(EXTENSION_KINDS.items())
    build_markers: tuple[str, ...] = BUILD_MARKERS
    noisy_targets: frozenset[str] = NOISY_TARGETS
    noisy_target_prefixes: tuple[str, ...] = NOISY_TARGET_PREFIXES
    max_workers: int | None = None

    def kind_for(self, file_name: str) -> str | None:
        """Return the extractor kind for a file name, or None if unsupported."""
        lower = file_name.lower()
        for suffix, kind in self.extension_kinds:
            if lower.endswith(suffix):
                return kind
        return None
