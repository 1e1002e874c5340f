"""Tests for target normalization and admission."""

from __future__ import annotations

import pytest

from apigraph.extractors.patterns import admission, has_placeholder, is_noisy_target, normalize
from apigraph.models.types import NormalizedTarget, TargetClass


class TestNormalize:
    """Tests for reducing raw URLs to (host, path)."""

    def test_concrete_url(self) -> None:
        """Scheme is stripped, host and path split."""
        assert normalize("https://billing-svc/api/pay") == NormalizedTarget(
            "billing-svc", "/api/pay", TargetClass.CONCRETE
        )

    def test_port_is_dropped(self) -> None:
        result = normalize("http://host:8080/x")
        assert (result.host, result.path) == ("host", "/x")

    def test_host_without_path(self) -> None:
        """A bare host gets the root path."""
        assert normalize("http://payments").path == "/"

    def test_dotted_host_without_scheme(self) -> None:
        result = normalize("payments.internal")
        assert result.host == "payments.internal"
        assert result.classification == TargetClass.CONCRETE

    @pytest.mark.parametrize(
        "raw",
        ["https://svc/${env}/x", "http://%s/orders", "http://svc/items/{id"],
    )
    def test_placeholders_are_config_dependent(self, raw: str) -> None:
        result = normalize(raw)
        assert result.classification == TargetClass.CONFIG_DEPENDENT
        assert result.host == "config-dependent"
        assert result.path == "/"

    def test_invalid_host_is_unknown(self) -> None:
        """Hosts with illegal characters or under two chars are unknown."""
        assert normalize("http://?/x").classification == TargetClass.UNKNOWN
        assert normalize("http://a/x").classification == TargetClass.UNKNOWN

    def test_closed_braces_are_concrete(self) -> None:
        """A closed {...} segment is a path template, not a placeholder."""
        assert not has_placeholder("svc/users/{id}")


class TestAdmission:
    """Tests for the pre-normalization filter on call arguments."""

    @pytest.mark.parametrize("raw", ["http://x/y", "/users", "payments.internal"])
    def test_accepted(self, raw: str) -> None:
        assert admission(raw)

    @pytest.mark.parametrize(
        "raw", ["Content-Type", "application/json", "plain text", "payments"]
    )
    def test_rejected(self, raw: str) -> None:
        assert not admission(raw)


class TestNoisyTargets:
    """Tests for the post-extraction blacklist."""

    @pytest.mark.parametrize(
        "target",
        ["localhost", "LOCALHOST", "127.0.0.1", "unknown", "config-dependent",
         "java.util.List", "org.springframework.web"],
    )
    def test_noisy(self, target: str) -> None:
        assert is_noisy_target(target)

    def test_real_service_is_kept(self) -> None:
        assert not is_noisy_target("payments")
