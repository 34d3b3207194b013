"""CLI entrypoint: read an edge list, solve radii and report fuel."""

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import load_settings, parse_log_level
from .errors import ConfigError
from .graph_orchestrator import GraphOrchestrator
from .phases import EdgeListIngestionPhase, PropagationPhase, VerificationPhase
from .pipeline import PipelinePhase, PipelineRunner
from .reporting import render_link_table, render_text


def build_default_phases(max_passes: Optional[int] = None) -> List[PipelinePhase]:
    return [
        EdgeListIngestionPhase(),
        PropagationPhase(max_passes=max_passes),
        VerificationPhase(),
    ]


def run_pipeline(input_path: str = "", max_passes: Optional[int] = None) -> Dict[str, Any]:
    orchestrator = GraphOrchestrator()
    initial_context: Dict[str, Any] = {
        "input_path": input_path,
        "orchestrator": orchestrator,
    }
    runner = PipelineRunner(phases=build_default_phases(max_passes))
    return runner.run(initial_context)


def build_artifact(context: Dict[str, Any]) -> Dict[str, Any]:
    artifact = context["orchestrator"].to_json()
    artifact["meta"] = {
        "input_path": context.get("input_path", ""),
        "ingestion_report": {
            "source_count": context["ingestion_output"]["source_count"],
            "link_count": context["ingestion_output"]["link_count"],
        },
        "propagation_report": context["propagation_output"],
        "verification_report": context["verification_report"].to_json(),
    }
    return artifact


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {raw}")
    return value


def _log_level(raw: str) -> str:
    try:
        return parse_log_level(raw)
    except ConfigError as error:
        raise argparse.ArgumentTypeError(str(error)) from error


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compute the minimum source radii that fuel every lamp link."
    )
    parser.add_argument("input_path", help="Edge list file: one 'a b lamps' triple per record.")
    parser.add_argument(
        "--output-path",
        default=None,
        help="Where to save the JSON artifact (defaults to LAMP_FUEL_OUTPUT_PATH, if set).",
    )
    parser.add_argument(
        "--max-passes",
        type=_positive_int,
        default=None,
        help="Stop after this many solver passes (defaults to LAMP_FUEL_MAX_PASSES).",
    )
    parser.add_argument(
        "--log-level",
        type=_log_level,
        default=None,
        help="Logging level, e.g. INFO or DEBUG (defaults to LAMP_FUEL_LOG_LEVEL).",
    )
    parser.add_argument("--strict", action="store_true", help="Exit with status 1 if any link is unfueled.")
    parser.add_argument("--quiet", action="store_true", help="Do not print the summary.")
    parser.add_argument("--links", action="store_true", help="Also print the per-link classification table.")
    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    settings = load_settings(log_level=args.log_level, max_passes=args.max_passes)
    output_path = args.output_path or settings.output_path
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    context = run_pipeline(input_path=args.input_path, max_passes=settings.max_passes)
    report = context["verification_report"]

    if not args.quiet:
        print(render_text(report))
        if args.links:
            print()
            print(render_link_table(report))

    if output_path:
        artifact_path = Path(output_path)
        artifact_path.parent.mkdir(parents=True, exist_ok=True)
        artifact = build_artifact(context)
        artifact_path.write_text(json.dumps(artifact, ensure_ascii=False, indent=2), encoding="utf-8")
        if not args.quiet:
            print(f"Artifact saved to: {artifact_path.resolve()}")

    if args.strict and not report.all_fueled:
        return 1
    return 0
