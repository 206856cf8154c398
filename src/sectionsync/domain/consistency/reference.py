"""Reference and authority selection.

Two selections share one mechanism, :class:`ReferenceSelector`, and differ
only in their scoring function:

- authority: ``count * 0.7 + policy * 0.3`` (global, per kind)
- completeness: raw property count (cluster reference used for diffing)

The two can disagree on which section is the source of truth; the report's
authoritative section and the diff reference are therefore separate outputs.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from sectionsync.domain.model import PROPERTY_KIND_PRIORITY, property_count

if TYPE_CHECKING:
    from sectionsync.domain.model import InventoryBySection, PropertyKind, Section

    from .clusters import Cluster, ClustersByKind
    from .graph import SectionGraph
    from .policy import PolicyScorer

SectionScore: TypeAlias = "Callable[[Section, PropertyKind, int], float]"


@dataclass(frozen=True, slots=True)
class ReferenceSelector:
    """Pick the highest-scoring section; earlier sections win ties."""

    score: SectionScore

    def select(
        self,
        candidates: Iterable[str],
        kind: PropertyKind,
        *,
        graph: SectionGraph,
        inventories: InventoryBySection,
    ) -> str | None:
        best_id: str | None = None
        best_score = float("-inf")
        for section_id in sorted(set(candidates), key=graph.order_of):
            section = graph.section(section_id)
            if section is None:
                continue
            count = property_count(inventories, section_id, kind)
            if count == 0:
                continue
            candidate_score = self.score(section, kind, count)
            if candidate_score > best_score:
                best_score = candidate_score
                best_id = section_id
        return best_id

    def select_in_cluster(
        self,
        cluster: Cluster,
        *,
        graph: SectionGraph,
        inventories: InventoryBySection,
    ) -> str | None:
        return self.select(cluster.members, cluster.kind, graph=graph, inventories=inventories)


def authority_selector(
    policy: PolicyScorer,
    *,
    count_weight: float = 0.7,
    policy_weight: float = 0.3,
) -> ReferenceSelector:
    def score(section: Section, kind: PropertyKind, count: int) -> float:
        return count * count_weight + policy.score(section, kind) * policy_weight

    return ReferenceSelector(score=score)


def completeness_selector() -> ReferenceSelector:
    def score(_section: Section, _kind: PropertyKind, count: int) -> float:
        return float(count)

    return ReferenceSelector(score=score)


def select_authorities(
    clusters_by_kind: ClustersByKind,
    *,
    selector: ReferenceSelector,
    graph: SectionGraph,
    inventories: InventoryBySection,
) -> dict[PropertyKind, str]:
    """Global authoritative section per kind (kinds without clusters are absent).

    The best member of each cluster competes with the best of the others, so
    the result equals selecting across the union of all members.
    """

    authorities: dict[PropertyKind, str] = {}
    for kind in PROPERTY_KIND_PRIORITY:
        cluster_winners = [
            winner
            for cluster in clusters_by_kind.get(kind, ())
            if (
                winner := selector.select_in_cluster(
                    cluster, graph=graph, inventories=inventories
                )
            )
            is not None
        ]
        authority = selector.select(
            cluster_winners, kind, graph=graph, inventories=inventories
        )
        if authority is not None:
            authorities[kind] = authority
    return authorities


def primary_authority(authorities: dict[PropertyKind, str]) -> tuple[PropertyKind, str] | None:
    """First kind in priority order that has an authoritative section."""

    for kind in PROPERTY_KIND_PRIORITY:
        if kind in authorities:
            return kind, authorities[kind]
    return None
