"""Target normalization and admission helpers.

Turns raw call arguments and config values into (host, path) pairs and
filters out strings that are obviously not remote targets.
"""

from __future__ import annotations

import re
from typing import Iterable

from apigraph.config import NOISY_TARGET_PREFIXES, NOISY_TARGETS
from apigraph.models.types import (
    CONFIG_DEPENDENT_HOST,
    UNKNOWN_HOST,
    NormalizedTarget,
    TargetClass,
)

SCHEME_REGEX = re.compile(r"^https?://", re.IGNORECASE)
HOSTNAME_REGEX = re.compile(r"[A-Za-z0-9_.\-]+")
# A "{" that is never closed later in the string
UNCLOSED_BRACE_REGEX = re.compile(r"\{[^}]*$")
WHITESPACE_REGEX = re.compile(r"\s")

# Header and media-type literals that look like hosts
HEADER_LITERALS = frozenset({"application/json", "content-type"})


def is_hostname(value: str) -> bool:
    return HOSTNAME_REGEX.fullmatch(value) is not None


def has_placeholder(value: str) -> bool:
    """True for %s-style, ${...} or unclosed {...} templates."""
    return "%" in value or "${" in value or UNCLOSED_BRACE_REGEX.search(value) is not None


def normalize(raw: str) -> NormalizedTarget:
    """Reduce a URL or host string to a classified (host, path).

    TEST VECTORS:
    -------------
    "https://billing-svc/api/pay" -> ("billing-svc", "/api/pay", CONCRETE)
    "http://host:8080/x"          -> ("host", "/x", CONCRETE)
    "https://svc/${env}/x"        -> ("config-dependent", "/", CONFIG_DEPENDENT)
    "http://?/x"                  -> ("unknown", "/", UNKNOWN)
    """
    remainder = SCHEME_REGEX.sub("", raw.strip(), count=1)

    if has_placeholder(remainder):
        return NormalizedTarget(CONFIG_DEPENDENT_HOST, "/", TargetClass.CONFIG_DEPENDENT)

    host, slash, rest = remainder.partition("/")
    host = host.split(":", 1)[0]

    if len(host) < 2 or not is_hostname(host):
        return NormalizedTarget(UNKNOWN_HOST, "/", TargetClass.UNKNOWN)

    path = f"/{rest}" if slash else "/"
    return NormalizedTarget(host, path, TargetClass.CONCRETE)


def admission(raw: str) -> bool:
    """Decide whether a call-argument string is worth normalizing.

    Accepts URLs and absolute paths outright; otherwise only dotted
    hostname-shaped strings. Rejects whitespace and header literals.
    """
    if raw.startswith("http") or raw.startswith("/"):
        return True
    if WHITESPACE_REGEX.search(raw):
        return False
    if raw.lower() in HEADER_LITERALS:
        return False
    return is_hostname(raw) and "." in raw


def is_noisy_target(
    target: str,
    noisy_targets: Iterable[str] = NOISY_TARGETS,
    noisy_prefixes: Iterable[str] = NOISY_TARGET_PREFIXES,
) -> bool:
    """True for blacklisted hosts and framework/JDK package names."""
    lower = target.lower()
    if lower in {t.lower() for t in noisy_targets}:
        return True
    return any(lower.startswith(p.lower()) for p in noisy_prefixes)
