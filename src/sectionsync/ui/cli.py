from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from sectionsync.app import analyze_document, render_result
from sectionsync.config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from sectionsync.domain.consistency import AnalysisResult

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Detect cross-section inconsistencies and suggest edits"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze = subparsers.add_parser("analyze", help="Produce a suggestions report")
    analyze.add_argument("document", type=Path, help="Path to the JSON document")
    analyze.add_argument(
        "--output",
        type=Path,
        help="Write the report to this file instead of stdout",
    )
    analyze.add_argument(
        "--include-graph",
        action="store_true",
        help="Emit the full analysis (graph, clusters, deltas) around the report",
    )
    analyze.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation; 0 for compact output (default: %(default)s)",
    )

    clusters = subparsers.add_parser(
        "clusters",
        help="Print clusters, references and deltas for diagnostics",
    )
    clusters.add_argument("document", type=Path, help="Path to the JSON document")

    args = parser.parse_args(list(argv))
    if args.command == "analyze" and args.indent < 0:
        raise ValueError("Indent must be non-negative")
    return args


def _format_clusters(result: AnalysisResult) -> str:
    lines: list[str] = []
    for kind, clusters in result.clusters.items():
        authority = result.authorities.get(kind, "-")
        lines.append(f"{kind} (authority: {authority})")
        references = result.references.get(kind, ())
        for index, (cluster, reference) in enumerate(zip(clusters, references, strict=True)):
            members = ", ".join(cluster.members)
            lines.append(f"  cluster {index + 1}: [{members}] reference={reference}")
    lines.append("deltas")
    for delta in result.deltas:
        lines.append(
            f"  {delta.origin}: {delta.source_section} -> {delta.target_section} "
            f"{delta.kind} missing={len(delta.missing_values)} "
            f"confidence={delta.confidence:.3f}"
        )
    return "\n".join(lines)


def _write(text: str, output: Path | None) -> None:
    if output is None:
        sys.stdout.write(text + "\n")
        return
    output.write_text(text + "\n", encoding="utf-8")
    log.info("Wrote %s", output)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        result = analyze_document(parsed_args.document)
    except ValueError:
        log.exception("Invalid input document")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during analysis")
        sys.exit(1)

    try:
        if parsed_args.command == "analyze":
            _write(
                render_result(
                    result,
                    include_graph=parsed_args.include_graph,
                    indent=parsed_args.indent or None,
                ),
                parsed_args.output,
            )
        elif parsed_args.command == "clusters":
            _write(_format_clusters(result), None)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except Exception:
        log.exception("Fatal error while writing results")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
