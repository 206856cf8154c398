"""Cross-section delta computation.

Two passes produce deltas:

1) cluster pass: every non-reference member of a cluster is diffed against
   the cluster reference (set difference under canonical keys)
2) fallback pass: an edge whose endpoints split into "has properties of the
   kind" and "has none" yields a delta carrying every property of the
   non-empty side. This reaches sections the cluster finder never admits.

Fallback deltas never duplicate a cluster delta on ``(target, source, kind)``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

from sectionsync.domain.model import PROPERTY_KIND_PRIORITY, inventory_for

from .comparator import missing_from

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sectionsync.domain.model import InventoryBySection, Property, PropertyKind

    from .clusters import ClustersByKind
    from .graph import SectionGraph
    from .reference import ReferenceSelector

log = logging.getLogger(__name__)


class DeltaOrigin(StrEnum):
    CLUSTER = "cluster"
    FALLBACK = "fallback"


@dataclass(frozen=True, slots=True, kw_only=True)
class Delta:
    """Properties present in ``source_section`` but absent from ``target_section``."""

    target_section: str
    kind: PropertyKind
    missing_values: tuple[Property, ...]
    source_section: str
    confidence: float
    origin: DeltaOrigin = DeltaOrigin.CLUSTER

    @property
    def key(self) -> tuple[str, str, PropertyKind]:
        return (self.target_section, self.source_section, self.kind)


class ComputeDeltas(Protocol):
    """Derive deltas from clusters and graph edges."""

    def __call__(
        self,
        clusters_by_kind: ClustersByKind,
        *,
        graph: SectionGraph,
        inventories: InventoryBySection,
        reference_selector: ReferenceSelector,
        fallback_confidence: float,
    ) -> tuple[Delta, ...]: ...


def compute_deltas(
    clusters_by_kind: ClustersByKind,
    *,
    graph: SectionGraph,
    inventories: InventoryBySection,
    reference_selector: ReferenceSelector,
    fallback_confidence: float,
) -> tuple[Delta, ...]:
    cluster_deltas = tuple(
        _cluster_deltas(
            clusters_by_kind,
            graph=graph,
            inventories=inventories,
            reference_selector=reference_selector,
            fallback_confidence=fallback_confidence,
        )
    )
    seen = {delta.key for delta in cluster_deltas}
    fallback_deltas: list[Delta] = []
    for delta in _fallback_deltas(graph, inventories):
        if delta.key in seen:
            continue
        seen.add(delta.key)
        fallback_deltas.append(delta)

    log.debug(
        "Computed deltas: cluster=%s, fallback=%s",
        len(cluster_deltas),
        len(fallback_deltas),
    )
    return (*cluster_deltas, *fallback_deltas)


def cluster_references(
    clusters_by_kind: ClustersByKind,
    *,
    graph: SectionGraph,
    inventories: InventoryBySection,
    reference_selector: ReferenceSelector,
) -> dict[PropertyKind, tuple[str | None, ...]]:
    """Reference section of every cluster, aligned with ``clusters_by_kind``."""

    return {
        kind: tuple(
            reference_selector.select_in_cluster(cluster, graph=graph, inventories=inventories)
            for cluster in clusters
        )
        for kind, clusters in clusters_by_kind.items()
    }


def _cluster_deltas(
    clusters_by_kind: ClustersByKind,
    *,
    graph: SectionGraph,
    inventories: InventoryBySection,
    reference_selector: ReferenceSelector,
    fallback_confidence: float,
) -> Iterator[Delta]:
    for kind in PROPERTY_KIND_PRIORITY:
        for cluster in clusters_by_kind.get(kind, ()):
            reference = reference_selector.select_in_cluster(
                cluster, graph=graph, inventories=inventories
            )
            if reference is None:
                continue
            reference_props = inventory_for(inventories, reference).properties(kind)
            for member in cluster.members:
                if member == reference:
                    continue
                missing = missing_from(
                    reference_props,
                    inventory_for(inventories, member).properties(kind),
                )
                if not missing:
                    continue
                edge = graph.edge_between(reference, member, kind)
                yield Delta(
                    target_section=member,
                    kind=kind,
                    missing_values=missing,
                    source_section=reference,
                    confidence=edge.weight if edge is not None else fallback_confidence,
                )


def _fallback_deltas(graph: SectionGraph, inventories: InventoryBySection) -> Iterator[Delta]:
    processed: set[tuple[str, str, PropertyKind]] = set()
    for edge in graph.edges:
        edge_key = (edge.source, edge.target, edge.kind)
        if edge_key in processed:
            continue
        processed.add(edge_key)

        source_props = inventory_for(inventories, edge.source).properties(edge.kind)
        target_props = inventory_for(inventories, edge.target).properties(edge.kind)
        if source_props and not target_props:
            origin, destination, missing = edge.source, edge.target, source_props
        elif target_props and not source_props:
            origin, destination, missing = edge.target, edge.source, target_props
        else:
            continue
        yield Delta(
            target_section=destination,
            kind=edge.kind,
            missing_values=missing,
            source_section=origin,
            confidence=edge.weight,
            origin=DeltaOrigin.FALLBACK,
        )
