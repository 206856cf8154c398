"""Public interface for the JSON document adapter."""

from __future__ import annotations

from .schema import AnalysisPayload, DocumentPayload, SuggestionsReportPayload
from .translator import (
    DocumentFormatError,
    ParsedDocument,
    dump_analysis,
    dump_report,
    load_document,
    parse_document,
)

__all__ = [
    "AnalysisPayload",
    "DocumentFormatError",
    "DocumentPayload",
    "ParsedDocument",
    "SuggestionsReportPayload",
    "dump_analysis",
    "dump_report",
    "load_document",
    "parse_document",
]
