"""Section-property graph construction.

Every unordered section pair is compared once per property kind. An edge is
emitted whenever at least one side holds a property of that kind, even when
nothing matched: zero-match edges carry pure "missing" evidence and feed the
fallback delta pass for sections that never join a cluster.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import combinations
from typing import TYPE_CHECKING, Protocol

from sectionsync.domain.model import (
    PROPERTY_KIND_PRIORITY,
    PropertyKind,
    Section,
    Span,
    display_value,
    inventory_for,
)

from .comparator import compare_properties
from .policy import normalized_score

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sectionsync.config import EngineConfig
    from sectionsync.domain.model import InventoryBySection

    from .policy import PolicyScorer

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MatchedValue:
    value: str
    spans: tuple[Span, Span]


@dataclass(frozen=True, slots=True)
class MissingValue:
    value: str
    in_section: str


@dataclass(frozen=True, slots=True)
class EdgeEvidence:
    matched: tuple[MatchedValue, ...] = ()
    missing: tuple[MissingValue, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class GraphEdge:
    """Weighted comparison of two sections for one property kind.

    Stored once per unordered pair and kind; ``source`` precedes ``target``
    in document order.
    """

    source: str
    target: str
    kind: PropertyKind
    weight: float
    evidence: EdgeEvidence

    def touches(self, section_id: str) -> bool:
        return section_id in (self.source, self.target)

    def other(self, section_id: str) -> str:
        return self.target if section_id == self.source else self.source


@dataclass(frozen=True, slots=True)
class SectionGraph:
    """Sections (nodes) plus same-kind comparison edges."""

    nodes: tuple[Section, ...]
    edges: tuple[GraphEdge, ...]
    _sections_by_id: dict[str, Section] = field(init=False, repr=False, compare=False)
    _order_by_id: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        sections_by_id: dict[str, Section] = {}
        order_by_id: dict[str, int] = {}
        for index, section in enumerate(self.nodes):
            sections_by_id.setdefault(section.id, section)
            order_by_id.setdefault(section.id, index)
        object.__setattr__(self, "_sections_by_id", sections_by_id)
        object.__setattr__(self, "_order_by_id", order_by_id)

    def section(self, section_id: str) -> Section | None:
        return self._sections_by_id.get(section_id)

    def order_of(self, section_id: str) -> int:
        """Document-order position, with unknown ids sorted last."""

        return self._order_by_id.get(section_id, len(self.nodes))

    def edges_for(self, section_id: str, kind: PropertyKind | None = None) -> tuple[GraphEdge, ...]:
        """Edges touching ``section_id``, optionally restricted to one kind."""

        return tuple(
            edge
            for edge in self.edges
            if edge.touches(section_id) and (kind is None or edge.kind is kind)
        )

    def edges_of_kind(self, kind: PropertyKind) -> tuple[GraphEdge, ...]:
        return tuple(edge for edge in self.edges if edge.kind is kind)

    def edge_between(self, first: str, second: str, kind: PropertyKind) -> GraphEdge | None:
        for edge in self.edges:
            if edge.kind is kind and edge.touches(first) and edge.other(first) == second:
                return edge
        return None


class BuildSectionGraph(Protocol):
    """Build the weighted section-property graph."""

    def __call__(
        self,
        sections: Sequence[Section],
        inventories: InventoryBySection,
        *,
        policy: PolicyScorer,
        config: EngineConfig,
    ) -> SectionGraph: ...


def build_section_graph(
    sections: Sequence[Section],
    inventories: InventoryBySection,
    *,
    policy: PolicyScorer,
    config: EngineConfig,
) -> SectionGraph:
    """Compare every section pair for every kind with a non-empty side."""

    edges: list[GraphEdge] = []
    for section_a, section_b in combinations(sections, 2):
        inventory_a = inventory_for(inventories, section_a.id)
        inventory_b = inventory_for(inventories, section_b.id)
        for kind in PROPERTY_KIND_PRIORITY:
            if inventory_a.count(kind) == 0 and inventory_b.count(kind) == 0:
                continue
            edges.append(
                _build_edge(
                    section_a,
                    section_b,
                    kind,
                    inventories=inventories,
                    policy=policy,
                    config=config,
                )
            )

    log.debug("Built section graph: nodes=%s, edges=%s", len(sections), len(edges))
    return SectionGraph(nodes=tuple(sections), edges=tuple(edges))


def _build_edge(
    section_a: Section,
    section_b: Section,
    kind: PropertyKind,
    *,
    inventories: InventoryBySection,
    policy: PolicyScorer,
    config: EngineConfig,
) -> GraphEdge:
    props_a = inventory_for(inventories, section_a.id).properties(kind)
    props_b = inventory_for(inventories, section_b.id).properties(kind)
    comparison = compare_properties(props_a, props_b)

    base_similarity = len(comparison.matched) / max(len(props_a), len(props_b))
    policy_bonus = (
        normalized_score(policy, section_a, kind) + normalized_score(policy, section_b, kind)
    ) / 2
    weights = config.weights_for(kind)
    weight = base_similarity * weights.similarity + policy_bonus * weights.policy

    evidence = EdgeEvidence(
        matched=tuple(
            MatchedValue(value=display_value(prop_a), spans=(prop_a.span, prop_b.span))
            for prop_a, prop_b in comparison.matched
        ),
        missing=(
            *(
                MissingValue(value=display_value(prop), in_section=section_b.id)
                for prop in comparison.missing_in_b
            ),
            *(
                MissingValue(value=display_value(prop), in_section=section_a.id)
                for prop in comparison.missing_in_a
            ),
        ),
    )
    return GraphEdge(
        source=section_a.id,
        target=section_b.id,
        kind=kind,
        weight=min(max(weight, 0.0), 1.0),
        evidence=evidence,
    )
