"""Cross-section consistency core.

Layered flow:
1) compare every section pair per property kind into a weighted graph
2) find same-kind clusters among sections holding that kind
3) select authoritative and reference sections
4) diff cluster members against their reference (plus a fallback pass)
5) synthesize anchored insert suggestions
6) report already-consistent values
"""

from __future__ import annotations

from .clusters import Cluster, find_clusters
from .comparator import Comparison, canonical_key, compare_properties
from .delta import Delta, DeltaOrigin, compute_deltas
from .engine import AnalysisResult, ConsistencyEngine
from .graph import (
    EdgeEvidence,
    GraphEdge,
    MatchedValue,
    MissingValue,
    SectionGraph,
    build_section_graph,
)
from .policy import KeywordPolicyScorer, PolicyScorer
from .reference import ReferenceSelector, authority_selector, completeness_selector
from .report import UNKNOWN_SECTION, AuthoritativeSection, SuggestionsReport
from .synthesis import (
    Anchor,
    AnchorStrategy,
    EvidenceSource,
    SuggestedUpdate,
    UpdateType,
    synthesize_updates,
)
from .unchanged import UnchangedEntry, report_unchanged

__all__ = [
    "UNKNOWN_SECTION",
    "AnalysisResult",
    "Anchor",
    "AnchorStrategy",
    "AuthoritativeSection",
    "Cluster",
    "Comparison",
    "ConsistencyEngine",
    "Delta",
    "DeltaOrigin",
    "EdgeEvidence",
    "EvidenceSource",
    "GraphEdge",
    "KeywordPolicyScorer",
    "MatchedValue",
    "MissingValue",
    "PolicyScorer",
    "ReferenceSelector",
    "SectionGraph",
    "SuggestedUpdate",
    "SuggestionsReport",
    "UnchangedEntry",
    "UpdateType",
    "authority_selector",
    "build_section_graph",
    "canonical_key",
    "compare_properties",
    "completeness_selector",
    "compute_deltas",
    "find_clusters",
    "report_unchanged",
    "synthesize_updates",
]
