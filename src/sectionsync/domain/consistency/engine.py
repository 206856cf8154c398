"""Orchestrator for the consistency subsystem.

The engine composes stage interfaces but does not prescribe concrete
strategies. Policy scoring, reference selection and every stage function
can be swapped per document domain. One call to :meth:`analyze` is a
pure, synchronous transformation; no state survives between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from sectionsync.config import EngineConfig

from .clusters import find_clusters
from .delta import cluster_references, compute_deltas
from .graph import build_section_graph
from .policy import KeywordPolicyScorer
from .reference import (
    authority_selector,
    completeness_selector,
    primary_authority,
    select_authorities,
)
from .report import SuggestionsReport, authoritative_entry
from .synthesis import synthesize_updates
from .unchanged import report_unchanged

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sectionsync.domain.model import InventoryBySection, PropertyKind, Section

    from .clusters import ClustersByKind, FindClusters
    from .delta import ComputeDeltas, Delta
    from .graph import BuildSectionGraph, SectionGraph
    from .policy import PolicyScorer
    from .reference import ReferenceSelector
    from .synthesis import SynthesizeUpdates

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class AnalysisResult:
    """Every intermediate product of one run, plus the final report."""

    graph: SectionGraph
    clusters: ClustersByKind
    references: dict[PropertyKind, tuple[str | None, ...]]
    authorities: dict[PropertyKind, str]
    deltas: tuple[Delta, ...]
    report: SuggestionsReport


@dataclass(slots=True, kw_only=True)
class ConsistencyEngine:
    """Run the full pipeline from sections and inventories to a report."""

    config: EngineConfig = field(default_factory=EngineConfig)
    policy: PolicyScorer = field(default_factory=KeywordPolicyScorer)
    build_graph: BuildSectionGraph = build_section_graph
    find_clusters: FindClusters = find_clusters
    compute_deltas: ComputeDeltas = compute_deltas
    synthesize: SynthesizeUpdates = synthesize_updates
    authority: ReferenceSelector | None = None
    reference: ReferenceSelector = field(default_factory=completeness_selector)

    def resolved_authority(self) -> ReferenceSelector:
        return self.authority or authority_selector(
            self.policy,
            count_weight=self.config.authority_count_weight,
            policy_weight=self.config.authority_policy_weight,
        )

    def analyze(
        self,
        sections: Sequence[Section],
        inventories: InventoryBySection,
    ) -> AnalysisResult:
        """Run all stages for one document."""

        graph = self.build_graph(sections, inventories, policy=self.policy, config=self.config)
        clusters = self.find_clusters(graph, inventories)
        authorities = select_authorities(
            clusters,
            selector=self.resolved_authority(),
            graph=graph,
            inventories=inventories,
        )
        references = cluster_references(
            clusters,
            graph=graph,
            inventories=inventories,
            reference_selector=self.reference,
        )
        deltas = self.compute_deltas(
            clusters,
            graph=graph,
            inventories=inventories,
            reference_selector=self.reference,
            fallback_confidence=self.config.fallback_confidence,
        )
        updates = self.synthesize(deltas, graph=graph, config=self.config)
        unchanged = report_unchanged(graph, threshold=self.config.unchanged_threshold)

        primary = primary_authority(authorities)
        report = SuggestionsReport(
            authoritative=authoritative_entry(
                primary[1] if primary is not None else None,
                graph=graph,
                inventories=inventories,
            ),
            suggested_updates=updates,
            unchanged=unchanged,
        )
        log.debug(
            "Analysis finished: authoritative=%s, updates=%s, unchanged=%s",
            report.authoritative.section,
            len(updates),
            len(unchanged),
        )
        return AnalysisResult(
            graph=graph,
            clusters=clusters,
            references=references,
            authorities=authorities,
            deltas=deltas,
            report=report,
        )

    def suggest(
        self,
        sections: Sequence[Section],
        inventories: InventoryBySection,
    ) -> SuggestionsReport:
        return self.analyze(sections, inventories).report
