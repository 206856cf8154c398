"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from sectionsync.adapters.json_document import dump_analysis, dump_report, load_document
from sectionsync.config import get_engine_config
from sectionsync.domain.consistency import ConsistencyEngine

if TYPE_CHECKING:
    from pathlib import Path

    from sectionsync.config import EngineConfig
    from sectionsync.domain.consistency import AnalysisResult


log = getLogger(__name__)


def build_engine(config: EngineConfig | None = None) -> ConsistencyEngine:
    """Engine wired with the default keyword policy and selectors."""

    return ConsistencyEngine(config=config or get_engine_config())


def analyze_document(
    path: Path,
    *,
    engine: ConsistencyEngine | None = None,
) -> AnalysisResult:
    """Load a JSON document and run the consistency pipeline over it."""

    document = load_document(path)
    effective_engine = engine or build_engine()
    log.info(
        "Analysing %s: sections=%s, inventories=%s",
        path,
        len(document.sections),
        len(document.inventories),
    )

    result = effective_engine.analyze(document.sections, document.inventories)

    log.info(
        "Finished analysis: authoritative=%s, suggested_updates=%s, unchanged=%s",
        result.report.authoritative.section,
        len(result.report.suggested_updates),
        len(result.report.unchanged),
    )
    return result


def render_result(
    result: AnalysisResult,
    *,
    include_graph: bool = False,
    indent: int | None = 2,
) -> str:
    """Serialize either the suggestions report or the full analysis dump."""

    if include_graph:
        return dump_analysis(result, indent=indent)
    return dump_report(result.report, indent=indent)
