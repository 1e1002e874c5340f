"""Command line entry point: apigraph scan|analyze|metrics ROOT."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Sequence

from apigraph.config import IGNORED_DIRS, ScanConfig
from apigraph.core.errors import InvalidInputError
from apigraph.pipeline.analyzer import analyze_project, dependency_report
from apigraph.pipeline.export import to_cytoscape
from apigraph.pipeline.scanner import scan_dependencies

logger = logging.getLogger(__name__)

EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="apigraph",
        description="Static cross-service dependency graphs for Spring projects.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (
        ("scan", "Service-level edges as a Cytoscape document"),
        ("analyze", "Full component analysis"),
        ("metrics", "Dependency graph metrics and cycles"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("root", help="Project root directory")
        cmd.add_argument("--workers", type=int, default=None, help="Extraction threads")
        cmd.add_argument(
            "--ignore",
            action="append",
            default=[],
            metavar="DIR",
            help="Extra directory name to skip (repeatable)",
        )
    return parser


def config_from_args(args: argparse.Namespace) -> ScanConfig:
    return ScanConfig(
        ignored_dirs=IGNORED_DIRS | frozenset(args.ignore),
        max_workers=args.workers,
    )


def run(args: argparse.Namespace) -> dict[str, Any]:
    config = config_from_args(args)
    if args.command == "scan":
        return to_cytoscape(scan_dependencies(args.root, config))

    analysis = analyze_project(args.root, config)
    if args.command == "analyze":
        data = analysis.to_dict()
        data["stats"] = analysis.stats()
        return data
    return dependency_report(analysis)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )

    try:
        result = run(args)
    except InvalidInputError as e:
        logger.error("invalid_input path=%s reason=%s", e.path, e.reason)
        print(f"apigraph: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    json.dump(result, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
