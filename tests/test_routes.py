"""Tests for Spring route extraction."""

from __future__ import annotations

import pytest

from apigraph.extractors.base import FileContext
from apigraph.extractors.routes import SpringRouteExtractor, combine_paths
from apigraph.extractors.syntax import parse_java


def routes(source: str, package: str = "com.shop"):
    data = source.encode("utf-8")
    tree = parse_java(data)
    context = FileContext(file_path="Ctl.java", service="svc", package=package)
    return SpringRouteExtractor().extract(tree.root_node, data, context)


class TestCombinePaths:
    """Tests for joining class and method paths."""

    @pytest.mark.parametrize(
        "base,path,expected",
        [
            ("/api", "/pay", "/api/pay"),
            ("api/", "pay", "/api/pay"),
            ("", "", "/"),
            ("/api", "", "/api"),
            ("", "orders", "/orders"),
        ],
    )
    def test_combine(self, base: str, path: str, expected: str) -> None:
        assert combine_paths(base, path) == expected


class TestSpringRoutes:
    """Tests for controller endpoint discovery."""

    def test_class_base_path_and_verbs(self) -> None:
        endpoints = routes(
            """
            @RestController
            @RequestMapping("/api")
            public class PayController {
                @GetMapping("/pay")
                public Receipt pay(@RequestParam String id, int amount) { return null; }

                @PostMapping(value = "/refund")
                public void refund() {}

                @DeleteMapping(path = "/pay/{id}")
                public void cancel(@PathVariable String id) {}

                public void helper() {}
            }
            """
        )
        assert [(e.http_method, e.path, e.method_name) for e in endpoints] == [
            ("GET", "/api/pay", "pay"),
            ("POST", "/api/refund", "refund"),
            ("DELETE", "/api/pay/{id}", "cancel"),
        ]
        first = endpoints[0]
        assert first.controller_class == "com.shop.PayController"
        assert first.parameters == ["String", "int"]
        assert first.return_type == "Receipt"
        assert first.annotations == ["GetMapping"]

    def test_request_mapping_method(self) -> None:
        endpoints = routes(
            """
            @Controller
            class OrderController {
                @RequestMapping(value = "orders", method = RequestMethod.POST)
                public void create() {}

                @RequestMapping("/orders")
                public void list() {}
            }
            """
        )
        assert [(e.http_method, e.path) for e in endpoints] == [
            ("POST", "/orders"),
            ("GET", "/orders"),
        ]

    def test_non_controller_is_ignored(self) -> None:
        endpoints = routes(
            """
            @FeignClient("payments")
            interface PaymentsClient {
                @GetMapping("/pay")
                String pay();
            }
            """
        )
        assert endpoints == []

    def test_bare_mapping_is_root(self) -> None:
        endpoints = routes("@RestController class C { @GetMapping public void f() {} }")
        assert [e.path for e in endpoints] == ["/"]
