"""taskgraph CLI: load a graph document, analyze it, and print the report."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Optional, Sequence

from .config import Settings, load_settings
from .core.pipeline import analyze
from .export import export_graphml
from .io import load_graph
from .report import render_report, result_to_payload

LOGGER = logging.getLogger(__name__)


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _resolve_settings(args: argparse.Namespace) -> Settings:
    return load_settings().with_overrides(verify_invariants=args.verify, log_level=args.log_level)


def _write_json_output(payload: dict, output_path: Optional[Path]) -> None:
    if output_path is None:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    print(f"\nJSON report saved to {output_path}")


def command_analyze(args: argparse.Namespace) -> None:
    settings = _resolve_settings(args)
    _configure_logging(settings)
    graph, document = load_graph(args.path)
    source = document.source if args.source is None else args.source
    LOGGER.info("Analyzing %s (%r) from source %s", args.path, graph, source)
    result = analyze(graph, source, settings=settings)
    for line in render_report(result, document):
        print(line)
    _write_json_output(result_to_payload(result), args.json)
    if args.graphml:
        out_path = export_graphml(result.condensation, args.graphml, result)
        print(f"GraphML condensation saved to {out_path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskgraph",
        description="SCC condensation, topological order and critical paths for task dependency graphs.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_cmd = subparsers.add_parser("analyze", help="Analyze a JSON or YAML task graph document.")
    analyze_cmd.add_argument("path", type=Path, help="Graph document (.json, .yaml or .yml).")
    analyze_cmd.add_argument("--source", type=int, help="Override the document's source node.")
    analyze_cmd.add_argument("--json", type=Path, help="Optional path to write the structured result as JSON.")
    analyze_cmd.add_argument("--graphml", type=Path, help="Optional path to write the condensation as GraphML.")
    analyze_cmd.add_argument(
        "--log-level",
        help="Logging level (default: $TASKGRAPH_LOG_LEVEL or WARNING).",
    )
    analyze_cmd.add_argument(
        "--verify",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Run invariant checks after ordering (default: $TASKGRAPH_VERIFY_INVARIANTS or on).",
    )
    analyze_cmd.set_defaults(func=command_analyze)
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        args.func(args)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":  # pragma: no cover - manual invocation path
    main()
